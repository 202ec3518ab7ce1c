"""Compressed image plugin."""

from .handler import CompressedImageHandler
from .schema import CompressedImageParams

__all__ = ["CompressedImageHandler", "CompressedImageParams"]
