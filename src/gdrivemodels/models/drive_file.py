"""Data model for Drive listing entries."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from gdrivemodels.errors import InvalidRecordError
from gdrivemodels.util.time import parse_rfc3339

# ASCII digits only; str.isdigit() also accepts "²" which int() rejects.
_DECIMAL = re.compile(r"[0-9]+")


@dataclass(slots=True, frozen=True)
class DriveFileRecord:
    """
    One file in a shared Drive folder listing.

    Notes:
        - `name` is the only field that carries ownership; nothing else in the
          listing names an owner.
        - `mime_type`, `size`, `created_time` and `web_view_link` are
          passthrough metadata and are never interpreted by the resolver.
    """

    id: str
    name: str

    mime_type: str = ""
    size: Optional[int] = None
    created_time: Optional[datetime] = None
    web_view_link: Optional[str] = None


def drive_file_from_dict(data: dict[str, Any]) -> DriveFileRecord:
    """
    Build a DriveFileRecord from one entry of a Drive `files().list` response.

    Raises:
        InvalidRecordError: if `id` is not a non-empty string or `name` is not
            a string.
    """
    if not isinstance(data, dict):
        raise InvalidRecordError(
            "Drive listing entry must be an object",
            details={"type": type(data).__name__},
        )

    file_id = data.get("id")
    name = data.get("name")
    if not isinstance(file_id, str) or not file_id:
        raise InvalidRecordError("Drive listing entry has no id", details={"name": name})
    if not isinstance(name, str):
        raise InvalidRecordError("Drive listing entry has no name", details={"id": file_id})

    created_time = None
    if isinstance(data.get("createdTime"), str):
        try:
            created_time = parse_rfc3339(data["createdTime"])
        except ValueError:
            created_time = None

    # Drive returns int64 fields such as size as decimal strings.
    size = None
    raw_size = data.get("size")
    if isinstance(raw_size, str) and _DECIMAL.fullmatch(raw_size):
        size = int(raw_size)
    elif isinstance(raw_size, int) and not isinstance(raw_size, bool):
        size = raw_size

    mime_type = data.get("mimeType")
    link = data.get("webViewLink")
    return DriveFileRecord(
        id=file_id,
        name=name,
        mime_type=mime_type if isinstance(mime_type, str) else "",
        size=size,
        created_time=created_time,
        web_view_link=link if isinstance(link, str) else None,
    )
