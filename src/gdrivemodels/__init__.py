"""gdrivemodels public API."""

from __future__ import annotations

from gdrivemodels.auth import AuthInfo, DriveServiceFactory
from gdrivemodels.config import GalleryConfig
from gdrivemodels.controller import DriveFolderLister
from gdrivemodels.errors import (
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
from gdrivemodels.gallery import ModelGallery, unique_owners
from gdrivemodels.models import (
    ClassifyResult,
    DriveFileRecord,
    ModelAsset,
    OwnerIdentifier,
    ScanResult,
    drive_file_from_dict,
)
from gdrivemodels.resolver import (
    ALL_USERS,
    attribute_owner,
    classify,
    extract_owner_handle,
    generate_display_name,
)

__all__ = [
    # High-level
    "ModelGallery",
    "GalleryConfig",
    "DriveFolderLister",
    "unique_owners",
    # Resolver
    "ALL_USERS",
    "extract_owner_handle",
    "classify",
    "generate_display_name",
    "attribute_owner",
    # Auth
    "AuthInfo",
    "DriveServiceFactory",
    # Models
    "DriveFileRecord",
    "drive_file_from_dict",
    "OwnerIdentifier",
    "ModelAsset",
    "ClassifyResult",
    "ScanResult",
    # Errors
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
