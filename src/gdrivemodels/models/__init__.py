"""Public model exports for gdrivemodels."""

from __future__ import annotations

from .assets import PSEUDO_EMAIL_DOMAIN, ModelAsset, OwnerIdentifier
from .drive_file import DriveFileRecord, drive_file_from_dict
from .results import ClassifyResult, ScanResult, ScanStatus

__all__ = [
    "DriveFileRecord",
    "drive_file_from_dict",
    "OwnerIdentifier",
    "ModelAsset",
    "PSEUDO_EMAIL_DOMAIN",
    "ClassifyResult",
    "ScanResult",
    "ScanStatus",
]
