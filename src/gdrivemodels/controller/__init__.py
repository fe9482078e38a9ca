"""Internal controller exports for gdrivemodels."""

from __future__ import annotations

from .folder_lister import DriveFolderLister

__all__ = ["DriveFolderLister"]
