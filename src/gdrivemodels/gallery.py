"""ModelGallery: lists shared Drive folders and resolves per-user model views."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from gdrivemodels.config import MODELS_FOLDER, GalleryConfig
from gdrivemodels.controller import DriveFolderLister
from gdrivemodels.errors import (
    AuthError,
    GDriveModelsError,
    InvalidArgumentError,
    PermissionError,
)
from gdrivemodels.models import DriveFileRecord, ModelAsset, ScanResult
from gdrivemodels.resolver import ALL_USERS, attribute_owner, classify, pseudo_email_for
from gdrivemodels.util.filetypes import THUMBNAIL_LISTING_EXTENSIONS, file_extension

logger = logging.getLogger(__name__)


class ModelGallery:
    """High-level entry point: Drive listing -> ownership-filtered models."""

    def __init__(self, config: GalleryConfig) -> None:
        self._config = config
        self._lister = DriveFolderLister(config.auth)

    @classmethod
    def from_lister(cls, lister: DriveFolderLister, config: GalleryConfig) -> "ModelGallery":
        """Create gallery with an injected lister (useful for tests)."""
        obj = cls.__new__(cls)
        obj._config = config
        obj._lister = lister
        return obj

    @property
    def config(self) -> GalleryConfig:
        return self._config

    def scan_for_user(
        self,
        email: str,
        folders: Sequence[str] = (MODELS_FOLDER,),
    ) -> ScanResult:
        """Models owned by one signed-in user."""
        if not isinstance(email, str) or not email.strip() or email == ALL_USERS:
            raise InvalidArgumentError("email must be a user email")
        return self._scan(email, folders)

    def scan_all(
        self,
        requester: str,
        folders: Sequence[str] = (MODELS_FOLDER,),
    ) -> ScanResult:
        """
        Every model in the given folders, with owners attributed.

        This is the only way to list with the "all" sentinel.

        Raises:
            PermissionError: if requester is not a configured admin.
        """
        if not self._config.is_admin(requester):
            raise PermissionError(
                "Only admins can list all models",
                details={"requester": requester},
            )
        result = self._scan(ALL_USERS, folders)
        result.objects = [attribute_owner(asset) for asset in result.objects]
        return result

    # ----------------------------
    # Internals
    # ----------------------------
    def _scan(self, identity: str, folders: Sequence[str]) -> ScanResult:
        """
        List the given folders and return the models visible to identity.

        Policy:
            - Folders are listed once each, in first-seen order, and their
              listings concatenated.
            - A folder that fails with a non-fatal error is logged and
              recorded in ScanResult.failed_folders; the rest still load.
            - Auth/Permission/InvalidArgument errors are raised.
        """
        keys = list(dict.fromkeys(folders))
        unknown = [key for key in keys if key not in self._config.folders]
        if unknown:
            raise InvalidArgumentError(
                "Unknown folder key",
                details={"folders": unknown, "known": sorted(self._config.folders)},
            )

        files: list[DriveFileRecord] = []
        failed: dict[str, str] = {}
        for key in keys:
            folder_id = self._config.folders[key]
            try:
                files.extend(self._lister.list_folder(folder_id))
            except GDriveModelsError as exc:
                if _is_fatal(exc):
                    raise
                logger.error("Failed to list folder %s (%s): %s", key, folder_id, exc)
                failed[key] = exc.__class__.__name__

        result = classify(files, identity)
        images = _visible_images(files, identity)

        if identity == ALL_USERS:
            logger.info("Loaded %d models for all users", len(result.objects))
        else:
            logger.info("Loaded %d models for %s", len(result.objects), identity)

        return ScanResult(
            objects=result.objects,
            images=images,
            scanned_folders=keys,
            failed_folders=failed,
        )


def unique_owners(objects: Iterable[ModelAsset]) -> list[str]:
    """Sorted distinct owner handles, e.g. for an admin filter menu."""
    return sorted({a.owner_handle for a in objects if a.owner_handle})


def _visible_images(files: Iterable[DriveFileRecord], identity: str) -> list[DriveFileRecord]:
    images = [f for f in files if file_extension(f.name) in THUMBNAIL_LISTING_EXTENSIONS]
    if identity == ALL_USERS:
        return images
    return [f for f in images if pseudo_email_for(f.name) == identity]


def _is_fatal(exc: GDriveModelsError) -> bool:
    return isinstance(exc, (AuthError, PermissionError, InvalidArgumentError))
