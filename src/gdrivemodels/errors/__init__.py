"""Public error exports for gdrivemodels."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    ConfigError,
    GDriveModelsError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidRecordError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)

__all__ = [
    "GDriveModelsError",
    "InvalidArgumentError",
    "InvalidRecordError",
    "ConfigError",
    "AuthError",
    "PermissionError",
    "NotFoundError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
