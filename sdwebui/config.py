"""Client configuration resolved from arguments and environment variables."""

from __future__ import annotations

import base64
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import httpx

from sdwebui.errors import SDWebUIConfigError

ENV_URL = "SD_API_URL"
ENV_USERNAME = "SD_API_USERNAME"
ENV_PASSWORD = "SD_API_PASSWORD"  # noqa: S105

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        try:
            url = httpx.URL(self.base_url)
        except httpx.InvalidURL as e:
            raise SDWebUIConfigError(f"Invalid base URL: {self.base_url!r}") from e
        if not url.is_absolute_url:
            raise SDWebUIConfigError(f"Base URL must be absolute: {self.base_url!r}")
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


def basic_auth_header(username: str, password: str) -> str:
    """Build a Basic ``Authorization`` header value."""
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return f"Basic {token}"


def _read_env(environ: Mapping[str, str], key: str, *, required: bool = False) -> str:
    value = environ.get(key, "")
    if not value and required:
        raise SDWebUIConfigError(f"Missing environment variable: {key}")
    return value


def resolve_config(
    base_url: str | None = None,
    username: str | None = None,
    password: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ClientConfig:
    """Resolve a ClientConfig, preferring explicit arguments over the environment.

    ``base_url`` falls back to ``SD_API_URL`` and is required. Credentials
    fall back to ``SD_API_USERNAME`` / ``SD_API_PASSWORD``; the
    ``Authorization`` header is only set when both end up non-empty.
    """
    env = os.environ if environ is None else environ

    url = base_url if base_url is not None else _read_env(env, ENV_URL, required=True)
    user = username or _read_env(env, ENV_USERNAME)
    secret = password or _read_env(env, ENV_PASSWORD)

    headers = {"Content-Type": JSON_CONTENT_TYPE}
    if user and secret:
        headers["Authorization"] = basic_auth_header(user, secret)

    return ClientConfig(base_url=url, headers=headers)
