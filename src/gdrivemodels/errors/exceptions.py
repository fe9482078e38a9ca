"""Exception hierarchy and HTTP error mapping for gdrivemodels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GDriveModelsError(Exception):
    """
    Base exception for gdrivemodels.

    Attributes:
        details: Optional structured information (e.g., HTTP status, folder).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidArgumentError(GDriveModelsError):
    """Raised when arguments are invalid (HTTP 400, unknown folder key, etc.)."""


class InvalidRecordError(InvalidArgumentError):
    """Raised when a Drive listing entry does not have the expected shape."""


class ConfigError(GDriveModelsError):
    """Raised when the gallery configuration is missing or inconsistent."""


class AuthError(GDriveModelsError):
    """Raised when credentials cannot be built or are rejected (HTTP 401)."""


class PermissionError(GDriveModelsError):
    """Raised when access is denied (HTTP 403 non-quota, non-admin scans)."""


class NotFoundError(GDriveModelsError):
    """Raised when a Drive folder or file is not found (HTTP 404)."""


class RateLimitError(GDriveModelsError):
    """Raised when rate-limited (HTTP 429, or 403 with a rate-limit reason)."""


class QuotaExceededError(GDriveModelsError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(GDriveModelsError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(GDriveModelsError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Status, reason and message of a failed Drive request."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


# Drive answers throttling with 403 as well as 429.
_RATE_LIMIT_REASONS: frozenset[str] = frozenset(
    {"ratelimitexceeded", "userratelimitexceeded"}
)

_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "dailylimitexceeded",
    "usagelimits",
)

_STATUS_ERRORS: dict[int, type[GDriveModelsError]] = {
    400: InvalidArgumentError,
    401: AuthError,
    404: NotFoundError,
    429: RateLimitError,
}


def _classify_403(reason: str | None) -> type[GDriveModelsError]:
    key = (reason or "").lower()
    if key in _RATE_LIMIT_REASONS:
        return RateLimitError
    if any(word in key for word in _QUOTA_REASON_KEYWORDS):
        return QuotaExceededError
    return PermissionError


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> GDriveModelsError:
    """
    Map an HTTP error from the Drive API to a gdrivemodels exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401 -> AuthError (an API key that is invalid also lands here)
        - 403 -> RateLimitError for rateLimitExceeded/userRateLimitExceeded,
                 QuotaExceededError for quota reasons, else PermissionError
        - 404 -> NotFoundError
        - 429 -> RateLimitError
        - anything else -> ApiError
    """
    details: dict[str, Any] = {"status_code": info.status_code, "reason": info.reason}
    details.update(info.details or {})

    if info.status_code == 403:
        error_cls = _classify_403(info.reason)
    else:
        error_cls = _STATUS_ERRORS.get(info.status_code, ApiError)

    message = info.message or f"HTTP error {info.status_code}"
    return error_cls(message, details=details, cause=cause)
