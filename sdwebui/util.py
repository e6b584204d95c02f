"""Helpers for moving images in and out of API payloads."""

from __future__ import annotations

import base64
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _looks_like_file(value: str | Path) -> bool:
    try:
        return Path(value).is_file()
    except OSError:
        # long base64 strings can exceed the filesystem's name limit
        return False


def encode_image(image: str | bytes | Path) -> str:
    """Base64 for ``init_images`` / ``image`` fields.

    Raw bytes are encoded, paths to existing files are read and encoded, any
    other string is taken to be base64 (or a data URL) already.
    """
    if isinstance(image, bytes):
        raw = image
    elif isinstance(image, (str, Path)) and _looks_like_file(image):
        logger.debug("encoding file: %s", image)
        raw = Path(image).read_bytes()
    elif isinstance(image, str):
        return image
    else:
        raise TypeError(f"unsupported image type: {type(image)}")
    return base64.b64encode(raw).decode()


def decode_images(result: Mapping[str, Any]) -> list[bytes]:
    """Decode the ``images`` of a txt2img / img2img / extras result.

    Accepts data URLs (``data:image/png;base64,...``) as well as bare base64.
    """
    images = []
    for item in result.get("images") or []:
        _, _, payload = item.rpartition(",")
        images.append(base64.b64decode(payload))
    return images


def save_result_images(
    result: Mapping[str, Any],
    output_dir: str | Path = ".",
    prefix: str | None = None,
) -> list[Path]:
    """Decode a generation result and write each image as ``{prefix}_{n:04d}.png``.

    ``prefix`` defaults to the result's seed when the server reported one in
    ``parameters``, so repeated runs into one directory don't overwrite.
    """
    if prefix is None:
        seed = (result.get("parameters") or {}).get("seed")
        prefix = f"seed{seed}" if isinstance(seed, int) and seed >= 0 else "output"

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    paths = []
    for i, data in enumerate(decode_images(result)):
        path = out / f"{prefix}_{i:04d}.png"
        path.write_bytes(data)
        logger.info("saved: %s", path)
        paths.append(path)
    return paths
