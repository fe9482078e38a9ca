"""Gallery configuration: Drive credentials, folder ids and admin accounts."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from gdrivemodels.auth import AuthInfo
from gdrivemodels.errors import ConfigError

logger = logging.getLogger(__name__)

MODELS_FOLDER: str = "USER_3DOBJECT"
REQUESTS_FOLDER: str = "USER_REQUESTS"

ENV_API_KEY = "GDRIVEMODELS_API_KEY"
ENV_SERVICE_ACCOUNT_FILE = "GDRIVEMODELS_SERVICE_ACCOUNT_FILE"
ENV_MODELS_FOLDER_ID = "GDRIVEMODELS_MODELS_FOLDER_ID"
ENV_REQUESTS_FOLDER_ID = "GDRIVEMODELS_REQUESTS_FOLDER_ID"
ENV_ADMIN_EMAILS = "GDRIVEMODELS_ADMIN_EMAILS"


@dataclass(frozen=True)
class GalleryConfig:
    """
    Settings for ModelGallery.

    `folders` maps a folder key (e.g. "USER_3DOBJECT") to a Drive folder id.
    Admin emails are compared case-insensitively.
    """

    auth: AuthInfo
    folders: dict[str, str]
    admin_emails: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.auth, AuthInfo):
            raise ConfigError("GalleryConfig.auth must be an AuthInfo")
        if not self.folders:
            raise ConfigError("GalleryConfig.folders must not be empty")
        for key, folder_id in self.folders.items():
            if not isinstance(folder_id, str) or not folder_id.strip():
                raise ConfigError(
                    "Folder id must be a non-empty string",
                    details={"folder": key},
                )
        # Normalize once so is_admin() is a plain lookup.
        object.__setattr__(
            self,
            "admin_emails",
            frozenset(e.strip().lower() for e in self.admin_emails if e.strip()),
        )

    def is_admin(self, email: Optional[str]) -> bool:
        if not email:
            return False
        return email.strip().lower() in self.admin_emails

    def folder_id(self, key: str) -> str:
        try:
            return self.folders[key]
        except KeyError:
            raise ConfigError(
                "Unknown folder key",
                details={"folder": key, "known": sorted(self.folders)},
            ) from None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GalleryConfig":
        """
        Build a config from environment variables.

        GDRIVEMODELS_API_KEY takes precedence over
        GDRIVEMODELS_SERVICE_ACCOUNT_FILE. The models folder id is required;
        the requests folder id and GDRIVEMODELS_ADMIN_EMAILS (comma-separated)
        are optional.
        """
        env = os.environ if environ is None else environ

        api_key = env.get(ENV_API_KEY, "").strip()
        sa_file = env.get(ENV_SERVICE_ACCOUNT_FILE, "").strip()
        if api_key:
            auth = AuthInfo.from_api_key(api_key)
        elif sa_file:
            auth = AuthInfo.from_service_account_file(sa_file)
        else:
            raise ConfigError(
                f"Missing Drive credentials: set {ENV_API_KEY} or {ENV_SERVICE_ACCOUNT_FILE}"
            )

        models_id = env.get(ENV_MODELS_FOLDER_ID, "").strip()
        if not models_id:
            raise ConfigError(f"Missing env var: {ENV_MODELS_FOLDER_ID}")
        folders = {MODELS_FOLDER: models_id}

        requests_id = env.get(ENV_REQUESTS_FOLDER_ID, "").strip()
        if requests_id:
            folders[REQUESTS_FOLDER] = requests_id

        admins = frozenset(
            e for e in env.get(ENV_ADMIN_EMAILS, "").split(",") if e.strip()
        )
        if not admins:
            logger.warning("%s is empty; admin scans will be refused", ENV_ADMIN_EMAILS)

        return cls(auth=auth, folders=folders, admin_emails=admins)
