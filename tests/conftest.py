"""Pytest configuration and fixtures."""

from __future__ import annotations

import base64

import pytest
import respx

from sdwebui import SDWebUIClient
from sdwebui._http import HttpTransport
from sdwebui.config import ClientConfig

BASE_URL = "https://sd.example.com"

# 1x1 red PNG for image response stubs
TINY_PNG = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01"
    b"\x00\x00\x00\x01\x08\x02\x00\x00\x00\x90wS\xde\x00"
    b"\x00\x00\x0cIDATx\x9cc\xf8\x0f\x00\x00\x01\x01\x00"
    b"\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)
TINY_PNG_B64 = base64.b64encode(TINY_PNG).decode()


@pytest.fixture()
def mock_api():
    """Activate respx mock for the SD Web UI base URL."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as rsps:
        yield rsps


@pytest.fixture()
def transport(mock_api: respx.MockRouter) -> HttpTransport:  # noqa: ARG001
    """Bare transport with one default header, wired to the mocked router."""
    return HttpTransport(ClientConfig(BASE_URL, {"X-Default": "yes"}))


@pytest.fixture()
def client(mock_api: respx.MockRouter) -> SDWebUIClient:  # noqa: ARG001
    """SDWebUIClient wired to the mocked transport, isolated from os.environ."""
    return SDWebUIClient(BASE_URL, environ={})
