"""Proxy and Drive URL helpers used by rendering collaborators."""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import quote

MODEL_PROXY_PREFIX: str = "/api/models"
IMAGE_PROXY_PREFIX: str = "/api/images"

_DRIVE_FILE_ID_RE = re.compile(r"/d/([a-zA-Z0-9_-]+)")


def _proxy_url(prefix: str, file_id: str, filename: Optional[str]) -> str:
    base = f"{prefix}/{file_id}"
    if filename:
        return f"{base}?filename={quote(filename, safe='')}"
    return base


def download_url(file_id: str, filename: Optional[str] = None) -> str:
    """Return the model proxy URL, e.g. /api/models/<id>?filename=<name>."""
    return _proxy_url(MODEL_PROXY_PREFIX, file_id, filename)


def image_url(file_id: str, filename: Optional[str] = None) -> str:
    """Return the image proxy URL, e.g. /api/images/<id>?filename=<name>."""
    return _proxy_url(IMAGE_PROXY_PREFIX, file_id, filename)


def is_google_drive_url(url: str) -> bool:
    return "drive.google.com" in url


def extract_file_id(url: str) -> Optional[str]:
    """Extract the file id from a Drive share link (.../d/<id>/view)."""
    match = _DRIVE_FILE_ID_RE.search(url)
    return match.group(1) if match else None
