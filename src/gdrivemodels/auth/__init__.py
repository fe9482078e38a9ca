"""Public auth exports for gdrivemodels."""

from __future__ import annotations

from .auth_info import AuthInfo
from .service_factory import READONLY_SCOPES, DriveServiceFactory

__all__ = ["AuthInfo", "DriveServiceFactory", "READONLY_SCOPES"]
