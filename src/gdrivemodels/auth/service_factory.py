"""Drive API service construction for gdrivemodels."""

from __future__ import annotations

import logging
import os
from typing import Sequence

from gdrivemodels.errors import AuthError, InvalidArgumentError

from .auth_info import AuthInfo

logger = logging.getLogger(__name__)

READONLY_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive.readonly",)


class DriveServiceFactory:
    """Build read-only Drive v3 service objects from AuthInfo."""

    def __init__(self, auth_info: AuthInfo) -> None:
        if not isinstance(auth_info, AuthInfo):
            raise InvalidArgumentError("DriveServiceFactory requires an AuthInfo")
        self._auth_info = auth_info

    def get_credentials(self, scopes: Sequence[str] = READONLY_SCOPES):
        """
        Return service-account credentials for the given scopes.

        Returns:
            google.oauth2.service_account.Credentials

        Raises:
            AuthError: if the auth kind has no credentials or the key file
                cannot be loaded.
            InvalidArgumentError: if scopes is invalid.
        """
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise InvalidArgumentError("scopes must be a non-empty sequence of strings")

        path = self._auth_info.service_account_file
        if path is None:
            raise AuthError(
                "Credentials are only available for service accounts",
                details={"kind": self._auth_info.kind},
            )
        if not os.path.exists(path):
            raise AuthError(
                "Service account file does not exist",
                details={"service_account_file": path},
            )

        try:
            from google.oauth2 import service_account
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-auth is not available",
                details={"hint": "Install google-auth"},
                cause=exc,
            ) from exc

        try:
            return service_account.Credentials.from_service_account_file(
                path,
                scopes=list(scopes),
            )
        except Exception as exc:
            raise AuthError(
                "Failed to load service account credentials",
                details={"service_account_file": path},
                cause=exc,
            ) from exc

    def build_drive_service(self, scopes: Sequence[str] = READONLY_SCOPES):
        """
        Build a Drive API service resource.

        API keys are passed as developerKey; service accounts as credentials.

        Returns:
            googleapiclient.discovery.Resource
        """
        try:
            from googleapiclient.discovery import build
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                details={"hint": "Install google-api-python-client"},
                cause=exc,
            ) from exc

        if self._auth_info.kind == "api_key":
            kwargs = {"developerKey": self._auth_info.api_key}
        else:
            kwargs = {"credentials": self.get_credentials(scopes)}

        logger.debug("Building Drive v3 service (auth kind=%s)", self._auth_info.kind)
        try:
            return build("drive", "v3", cache_discovery=False, **kwargs)
        except Exception as exc:
            raise AuthError("Failed to build Drive service", cause=exc) from exc
