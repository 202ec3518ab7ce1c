"""Runtime settings for compressed image previews."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_WIDTH = 1024
DEFAULT_MAX_HEIGHT = 1024


class PreviewSettings(BaseModel):
    """Bounding box and encoder options applied to every preview."""

    max_width: int = Field(DEFAULT_MAX_WIDTH, gt=0, description="Maximum output width in pixels")
    max_height: int = Field(
        DEFAULT_MAX_HEIGHT, gt=0, description="Maximum output height in pixels"
    )
    jpeg_quality: int = Field(85, ge=1, le=100, description="JPEG encoder quality (1-100)")
    png_optimize: bool = Field(True, description="Run the PNG optimizer pass")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)
