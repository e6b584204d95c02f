"""HTTP transport layer wrapping httpx."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from sdwebui.config import JSON_CONTENT_TYPE
from sdwebui.errors import SDWebUIStatusError, SDWebUITransportError

if TYPE_CHECKING:
    from sdwebui.config import ClientConfig

logger = logging.getLogger(__name__)

Params = str | Mapping[str, Any] | httpx.QueryParams


def encode_query(params: Params | None) -> str:
    """Encode GET parameters. Strings pass through, mappings keep key order."""
    if params is None or isinstance(params, str):
        return params or ""
    return str(httpx.QueryParams(params))


def encode_body(data: Any) -> bytes | None:
    if data is None:
        return None
    if isinstance(data, bytes):
        return data
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"not valid JSON: {name}")


def parse_body(text: str) -> Any:
    """Decode JSON, or hand back the raw text when it isn't JSON.

    ``NaN`` and ``Infinity`` are not JSON, so they come back as text too.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return text


class HttpTransport:
    """Issues one request per call against the configured base URL.

    Every call opens and closes its own ``httpx.AsyncClient``; the only
    state shared between calls is the frozen :class:`ClientConfig`.
    """

    def __init__(self, config: ClientConfig) -> None:
        self._config = config
        logger.debug("transport ready: %s", config.base_url)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def get(
        self,
        path: str,
        params: Params | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        query = encode_query(params)
        full_path = f"{path}?{query}" if query else path
        return await self._request("GET", full_path, headers=headers)

    async def post(
        self,
        path: str,
        data: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self._request("POST", path, data, headers=headers)

    def build_url(self, path: str) -> httpx.URL:
        return httpx.URL(self._config.base_url).join(path)

    def build_headers(self, overrides: Mapping[str, str] | None = None) -> httpx.Headers:
        headers = httpx.Headers({"Content-Type": JSON_CONTENT_TYPE})
        headers.update(self._config.headers)
        if overrides:
            headers.update(overrides)
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        data: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        url = self.build_url(path)
        content = encode_body(data)
        logger.debug("%s %s", method, url)
        try:
            async with (
                httpx.AsyncClient(timeout=None) as client,
                client.stream(method, url, headers=self.build_headers(headers), content=content) as r,
            ):
                chunks = [chunk async for chunk in r.aiter_bytes()]
        except httpx.RequestError as e:
            logger.debug("%s %s connection failed: %s", method, url, e)
            raise SDWebUITransportError(str(e)) from e

        raw = b"".join(chunks)
        result = parse_body(raw.decode("utf-8", errors="replace"))
        logger.debug("%s %s → %d (%d bytes)", method, url, r.status_code, len(raw))
        if r.status_code < 200 or r.status_code >= 300:
            raise SDWebUIStatusError(r.status_code, result)
        return result
