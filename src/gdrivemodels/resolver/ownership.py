"""
Filename-based ownership resolution for a shared Drive folder.

Files in the shared folder carry no owner metadata, so the owner is parsed
out of the filename, which follows the grammar

    <free-text-title>_<identifier-segment>.<ext>

where the identifier segment is dot-joined words, underscore-joined words or
a single word. The identifier is turned into a pseudo-email
(`<handle>@gmail.com`) and compared with the signed-in user's email.

Known ambiguities (kept as-is so existing stored filenames keep resolving
the same way):
    - Suffixes are tried longest first, so in "Big_Dragon_ab.glb" the title
      word "Dragon" becomes part of the handle "Dragon.ab".
    - "john_smith" and "john.smith" normalize to the same handle; there is
      no collision detection.

Every function here is pure and never raises for malformed input.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Iterable, Optional

from gdrivemodels.models import ClassifyResult, DriveFileRecord, ModelAsset, OwnerIdentifier
from gdrivemodels.util.filetypes import is_folder, is_image_file, is_model_file

from .display_name import generate_display_name

ALL_USERS: str = "all"

# Candidates must be longer than this to be considered at all.
_MIN_CANDIDATE_LENGTH = 5
_MIN_BARE_HANDLE_LENGTH = 3

_FINAL_EXTENSION_RE = re.compile(r"\.[^.]+\Z")


def strip_extension(file_name: str) -> str:
    """Remove the final '.ext' (ext without dots). Dotless names are unchanged."""
    return _FINAL_EXTENSION_RE.sub("", file_name, count=1)


def base_file_name(file_name: str) -> str:
    """
    Name before the last '.', used to pair a model with its thumbnail.

    Falls back to the whole name when there is no dot or the only dot is the
    first character.
    """
    idx = file_name.rfind(".")
    base = file_name[:idx] if idx > 0 else ""
    return base or file_name


def _normalize_handle(candidate: str) -> str:
    if "." in candidate:
        return candidate
    if "_" in candidate:
        return candidate.replace("_", ".")
    return candidate


def _looks_like_handle(handle: str) -> bool:
    return ("." in handle and len(handle) > _MIN_CANDIDATE_LENGTH) or (
        len(handle) > _MIN_BARE_HANDLE_LENGTH
    )


def extract_owner_handle(file_name: str) -> Optional[OwnerIdentifier]:
    """
    Parse the owner identifier out of file_name.

    Example:
        "My_Hero_catenary_bim_designer.glb"
            -> raw_segment="Hero_catenary_bim_designer",
               normalized_handle="Hero.catenary.bim.designer"

        The first segment is always treated as title; the longest remaining
        suffix longer than five characters wins.

    Returns:
        OwnerIdentifier, or None when no suffix qualifies (including names
        without any '_').
    """
    if not isinstance(file_name, str) or not file_name:
        return None

    segments = strip_extension(file_name).split("_")
    if len(segments) < 2:
        return None

    for i in range(1, len(segments)):
        candidate = "_".join(segments[i:])
        if len(candidate) <= _MIN_CANDIDATE_LENGTH:
            continue

        handle = _normalize_handle(candidate)
        if _looks_like_handle(handle):
            return OwnerIdentifier(raw_segment=candidate, normalized_handle=handle)

    return None


def pseudo_email_for(file_name: str) -> Optional[str]:
    """Return '<handle>@gmail.com' for file_name, or None if unresolvable."""
    owner = extract_owner_handle(file_name)
    return owner.pseudo_email if owner is not None else None


def classify(files: Iterable[DriveFileRecord], identity: str) -> ClassifyResult:
    """
    Select the models visible to identity and pair each with its thumbnail.

    Args:
        files: flat Drive listing (models, images and anything else).
        identity: the signed-in user's email, or ALL_USERS for the admin view.

    Notes:
        - A model is visible to a user only if its pseudo-email equals the
          identity exactly. Unresolvable owners are never visible to a user.
        - With ALL_USERS every model is returned and no owner is extracted.
        - Thumbnails are matched by identical base filename; the first image
          in listing order wins.
    """
    model_files: list[DriveFileRecord] = []
    thumbnails: dict[str, DriveFileRecord] = {}

    for record in files:
        if is_folder(record.mime_type):
            continue
        if is_model_file(record.name):
            model_files.append(record)
        elif is_image_file(record.name):
            thumbnails.setdefault(base_file_name(record.name), record)

    objects: list[ModelAsset] = []
    for record in model_files:
        owner: Optional[OwnerIdentifier] = None
        if identity != ALL_USERS:
            owner = extract_owner_handle(record.name)
            if owner is None or owner.pseudo_email != identity:
                continue

        objects.append(
            ModelAsset(
                id=record.id,
                source_file=record,
                display_name=_display_name(record, owner),
                thumbnail=thumbnails.get(base_file_name(record.name)),
                owner_handle=owner.normalized_handle if owner is not None else None,
            )
        )

    return ClassifyResult(objects=objects)


def attribute_owner(asset: ModelAsset) -> ModelAsset:
    """
    Fill owner_handle (and the owner-free display name) on an asset.

    Used for the admin listing, where classify(..., ALL_USERS) skips owner
    extraction. Assets whose owner cannot be resolved are returned unchanged.
    """
    owner = extract_owner_handle(asset.source_file.name)
    if owner is None:
        return asset
    return replace(
        asset,
        owner_handle=owner.normalized_handle,
        display_name=_display_name(asset.source_file, owner),
    )


def _display_name(record: DriveFileRecord, owner: Optional[OwnerIdentifier]) -> str:
    if owner is None:
        return generate_display_name(record.name)
    stem = strip_extension(record.name)
    title = stem[: len(stem) - len(owner.raw_segment) - 1]
    return generate_display_name(title)
