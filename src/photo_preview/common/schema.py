from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """JSON body returned when a preview cannot be produced."""

    error: str = Field(description="Short human-readable failure message")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)
