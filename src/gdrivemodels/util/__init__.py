from .filetypes import (
    FOLDER_MIME,
    IMAGE_EXTENSIONS,
    MODEL_EXTENSIONS,
    THUMBNAIL_LISTING_EXTENSIONS,
    file_extension,
    is_folder,
    is_image_file,
    is_model_file,
    model_content_type,
)
from .time import parse_rfc3339
from .urls import download_url, extract_file_id, image_url, is_google_drive_url

__all__ = [
    "FOLDER_MIME",
    "MODEL_EXTENSIONS",
    "IMAGE_EXTENSIONS",
    "THUMBNAIL_LISTING_EXTENSIONS",
    "file_extension",
    "is_folder",
    "is_model_file",
    "is_image_file",
    "model_content_type",
    "parse_rfc3339",
    "download_url",
    "image_url",
    "is_google_drive_url",
    "extract_file_id",
]
