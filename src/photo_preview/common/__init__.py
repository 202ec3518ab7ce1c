"""Shared types for photo_preview plugins."""

from .errors import ErrorKind, PreviewError
from .image_library import ImageLibrary
from .schema import ErrorResponse
from .settings import PreviewSettings

__all__ = [
    "ErrorKind",
    "ErrorResponse",
    "ImageLibrary",
    "PreviewError",
    "PreviewSettings",
]
