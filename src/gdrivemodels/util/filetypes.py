from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"

MODEL_EXTENSIONS: frozenset[str] = frozenset({"glb", "obj", "fbx", "gltf"})

IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {"png", "jpg", "jpeg", "webp", "gif", "bmp", "svg"}
)

# Narrower set reported as standalone images in a scan listing.
THUMBNAIL_LISTING_EXTENSIONS: frozenset[str] = frozenset(
    {"png", "jpg", "jpeg", "webp"}
)

_MODEL_CONTENT_TYPES: dict[str, str] = {
    "glb": "model/gltf-binary",
    "gltf": "model/gltf+json",
    "obj": "text/plain",
}


def file_extension(file_name: str) -> str:
    """
    Return the lower-cased text after the last '.' of file_name.

    Returns "" when the name has no dot.
    """
    head, sep, ext = file_name.rpartition(".")
    if not sep:
        return ""
    return ext.lower()


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def is_model_file(file_name: str) -> bool:
    return file_extension(file_name) in MODEL_EXTENSIONS


def is_image_file(file_name: str) -> bool:
    return file_extension(file_name) in IMAGE_EXTENSIONS


def model_content_type(file_name: str) -> str:
    """
    Content-Type used when proxying a model download.

    Unknown and binary formats (fbx included) fall back to
    application/octet-stream.
    """
    return _MODEL_CONTENT_TYPES.get(
        file_extension(file_name),
        "application/octet-stream",
    )
