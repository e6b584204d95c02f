"""Error types raised by the SD Web UI client."""

from __future__ import annotations

from typing import Any


class SDWebUIClientError(Exception):
    """Base error for the client.

    ``data`` carries whatever the server sent back, parsed as JSON when
    possible and as raw text otherwise. It is ``None`` when no response was
    received.
    """

    def __init__(self, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.data = data


class SDWebUIConfigError(SDWebUIClientError):
    """A required setting could not be resolved."""


class SDWebUITransportError(SDWebUIClientError):
    """The request never produced a complete response."""


class SDWebUIStatusError(SDWebUIClientError):
    def __init__(self, status_code: int, data: Any = None) -> None:
        super().__init__(f"Request failed with status code {status_code}", data)
        self.status_code = status_code
