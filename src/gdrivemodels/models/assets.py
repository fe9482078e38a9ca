"""Derived view models produced by the ownership resolver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gdrivemodels.util import urls

from .drive_file import DriveFileRecord

PSEUDO_EMAIL_DOMAIN: str = "gmail.com"


@dataclass(slots=True, frozen=True)
class OwnerIdentifier:
    """
    Owner guess parsed out of a filename.

    `raw_segment` is the filename suffix judged to encode the owner and
    `normalized_handle` is that suffix with underscores turned into dots.
    The mapping to a real account is unverified.
    """

    raw_segment: str
    normalized_handle: str

    @property
    def pseudo_email(self) -> str:
        return f"{self.normalized_handle}@{PSEUDO_EMAIL_DOMAIN}"


@dataclass(slots=True, frozen=True)
class ModelAsset:
    """A 3D model file paired with its thumbnail. Rebuilt on every listing."""

    id: str
    source_file: DriveFileRecord
    display_name: str
    thumbnail: Optional[DriveFileRecord] = None
    owner_handle: Optional[str] = None

    @property
    def name(self) -> str:
        return self.source_file.name

    @property
    def download_url(self) -> str:
        return urls.download_url(self.source_file.id, self.source_file.name)

    @property
    def image_url(self) -> Optional[str]:
        if self.thumbnail is None:
            return None
        return urls.image_url(self.thumbnail.id, self.thumbnail.name)

    @property
    def owner_email(self) -> Optional[str]:
        if self.owner_handle is None:
            return None
        return f"{self.owner_handle}@{PSEUDO_EMAIL_DOMAIN}"
