"""Ownership resolution exports for gdrivemodels."""

from __future__ import annotations

from .display_name import FALLBACK_DISPLAY_NAME, generate_display_name
from .ownership import (
    ALL_USERS,
    attribute_owner,
    base_file_name,
    classify,
    extract_owner_handle,
    pseudo_email_for,
    strip_extension,
)

__all__ = [
    "ALL_USERS",
    "FALLBACK_DISPLAY_NAME",
    "extract_owner_handle",
    "pseudo_email_for",
    "classify",
    "attribute_owner",
    "generate_display_name",
    "base_file_name",
    "strip_extension",
]
