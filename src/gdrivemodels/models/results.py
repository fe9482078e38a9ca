"""Result models for classify/scan operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .assets import ModelAsset
from .drive_file import DriveFileRecord

ScanStatus = Literal["success", "partial", "failed"]


@dataclass(slots=True)
class ClassifyResult:
    """Models visible to one identity, in listing order."""

    objects: list[ModelAsset] = field(default_factory=list)


@dataclass(slots=True)
class ScanResult:
    """Aggregate result for ModelGallery.scan_for_user() and scan_all()."""

    objects: list[ModelAsset]
    images: list[DriveFileRecord]

    scanned_folders: list[str] = field(default_factory=list)
    # folder key -> exception class name
    failed_folders: dict[str, str] = field(default_factory=dict)

    @property
    def status(self) -> ScanStatus:
        if not self.failed_folders:
            return "success"
        if len(self.failed_folders) >= len(self.scanned_folders):
            return "failed"
        return "partial"
