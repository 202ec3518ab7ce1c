"""photo_preview - bounded, re-encoded image previews served as data URLs."""

from .common.errors import ErrorKind, PreviewError
from .common.image_library import ImageLibrary
from .common.schema import ErrorResponse
from .common.settings import PreviewSettings
from .master import create_master_router
from .plugins.compressed_image import CompressedImageHandler, CompressedImageParams
from .plugins.compressed_image.algo import (
    OutputFormat,
    PillowImageLibrary,
    PlannedDimensions,
    plan_dimensions,
    select_format,
)

__version__ = "0.1.0"

__all__ = [
    "CompressedImageHandler",
    "CompressedImageParams",
    "ErrorKind",
    "ErrorResponse",
    "ImageLibrary",
    "OutputFormat",
    "PillowImageLibrary",
    "PlannedDimensions",
    "PreviewError",
    "PreviewSettings",
    "__version__",
    "create_master_router",
    "plan_dimensions",
    "select_format",
]
