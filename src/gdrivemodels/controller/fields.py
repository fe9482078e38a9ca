"""Field definitions for Google Drive API list responses."""

from __future__ import annotations

FILE_FIELDS: str = (
    "id,"
    "name,"
    "mimeType,"
    "size,"
    "createdTime,"
    "webViewLink"
)

LIST_FIELDS: str = f"nextPageToken,files({FILE_FIELDS})"
