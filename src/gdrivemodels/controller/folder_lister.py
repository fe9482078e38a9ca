"""Read-only Drive folder listing (internal use only)."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, TypeVar

from googleapiclient.errors import HttpError

from gdrivemodels.auth import AuthInfo, DriveServiceFactory
from gdrivemodels.errors import (
    ApiError,
    GDriveModelsError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidRecordError,
    NetworkError,
    RateLimitError,
    map_http_error,
)
from gdrivemodels.models import DriveFileRecord, drive_file_from_dict

from .fields import LIST_FIELDS

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class _RetryPolicy:
    max_retries: int = 3
    initial_delay_sec: float = 1.0

    def delays(self) -> Iterator[float]:
        """Backoff delays, doubling each time: 1s, 2s, 4s by default."""
        for attempt in range(self.max_retries):
            yield self.initial_delay_sec * (2**attempt)


class DriveFolderLister:
    """
    Lists the direct children of a Drive folder as DriveFileRecords.

    Notes:
        - The Drive `service` object is NOT exposed.
        - Trashed files are never listed.
    """

    def __init__(self, auth_info: AuthInfo, *, supports_all_drives: bool = True) -> None:
        self._supports_all_drives = supports_all_drives
        self._retry_policy = _RetryPolicy()
        self._service = DriveServiceFactory(auth_info).build_drive_service()

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        supports_all_drives: bool = True,
    ) -> "DriveFolderLister":
        """Create lister from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._supports_all_drives = supports_all_drives
        obj._retry_policy = _RetryPolicy()
        obj._service = service
        return obj

    def list_folder(self, folder_id: str) -> list[DriveFileRecord]:
        """
        Return every non-trashed child of folder_id, following pagination.

        Entries that fail record validation are logged and skipped.

        Raises:
            InvalidArgumentError: if folder_id is empty.
            GDriveModelsError subclasses mapped from Drive HTTP errors.
        """
        if not isinstance(folder_id, str) or not folder_id.strip():
            raise InvalidArgumentError("folder_id must be a non-empty string")

        q = _build_parent_query(folder_id)
        records: list[DriveFileRecord] = []
        skipped = 0
        page_token: Optional[str] = None

        while True:
            req = self._service.files().list(
                q=q,
                fields=LIST_FIELDS,
                pageToken=page_token,
                **self._common_list_kwargs(),
            )
            data = self._call_with_retry(req.execute)
            for entry in data.get("files", []) or []:
                try:
                    records.append(drive_file_from_dict(entry))
                except InvalidRecordError as exc:
                    skipped += 1
                    logger.warning(
                        "Skipping malformed entry in folder %s: %s %s",
                        folder_id,
                        exc,
                        exc.details,
                    )

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        logger.info(
            "Listed %d files in folder %s (%d skipped)",
            len(records),
            folder_id,
            skipped,
        )
        return records

    # ----------------------------
    # Internals
    # ----------------------------
    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _call_with_retry(self, func: Callable[[], T]) -> T:
        delays = self._retry_policy.delays()
        while True:
            try:
                return func()
            except Exception as exc:
                error = _translate_exception(exc)
                delay = next(delays, None) if _is_transient(error) else None
                if delay is None:
                    raise error from exc
                logger.warning(
                    "Drive list request hit %s, sleeping %.1fs before retrying",
                    type(error).__name__,
                    delay,
                )
                time.sleep(delay)


def _is_transient(error: GDriveModelsError) -> bool:
    """Throttling, network failures and Drive 5xx answers are worth retrying."""
    if isinstance(error, (RateLimitError, NetworkError)):
        return True
    status = error.details.get("status_code")
    return isinstance(error, ApiError) and isinstance(status, int) and status >= 500


def _translate_exception(exc: Exception) -> GDriveModelsError:
    if isinstance(exc, HttpError):
        return map_http_error(_http_error_to_info(exc), cause=exc)
    if isinstance(exc, (OSError, TimeoutError)):
        return NetworkError(f"Network failure while listing: {exc}", cause=exc)
    return ApiError(f"Unexpected Drive client failure: {exc!r}", cause=exc)


def _build_parent_query(folder_id: str) -> str:
    escaped = folder_id.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}' in parents and trashed=false"


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None

        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        try:
            status_code = int(status_code)
        except (TypeError, ValueError):
            status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
