"""Async Python client for the AUTOMATIC1111 Stable Diffusion Web UI API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sdwebui._http import HttpTransport
from sdwebui.api import SDWebUIApi
from sdwebui.config import ENV_PASSWORD, ENV_URL, ENV_USERNAME, ClientConfig, resolve_config
from sdwebui.errors import (
    SDWebUIClientError,
    SDWebUIConfigError,
    SDWebUIStatusError,
    SDWebUITransportError,
)
from sdwebui.util import decode_images, encode_image, save_result_images

if TYPE_CHECKING:
    from collections.abc import Mapping

__version__ = "0.1.0"

__all__ = [
    "ENV_PASSWORD",
    "ENV_URL",
    "ENV_USERNAME",
    "ClientConfig",
    "HttpTransport",
    "SDWebUIApi",
    "SDWebUIClient",
    "SDWebUIClientError",
    "SDWebUIConfigError",
    "SDWebUIStatusError",
    "SDWebUITransportError",
    "decode_images",
    "encode_image",
    "resolve_config",
    "save_result_images",
]


class SDWebUIClient:
    """Composite client for the SD Web UI API.

    Settings not passed explicitly are read from ``SD_API_URL``,
    ``SD_API_USERNAME`` and ``SD_API_PASSWORD``.

    Usage::

        client = SDWebUIClient("https://sd.example.com", username="me", password="secret")
        result = await client.api.txt2img({"prompt": "a cat", "steps": 20})
        images = decode_images(result)
    """

    def __init__(
        self,
        base_url: str | None = None,
        username: str | None = None,
        password: str | None = None,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.config = resolve_config(base_url, username, password, environ=environ)
        self.http = HttpTransport(self.config)
        self.api = SDWebUIApi(self.http)
