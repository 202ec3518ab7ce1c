"""Compressed image request schema."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class CompressedImageParams(BaseModel):
    """Parameters for a compressed image preview request.

    Attributes:
        filepath: Path to the source image on the server filesystem.
                  None or empty means the parameter was not supplied.
    """

    filepath: str | None = Field(None, description="path to the source image")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)
