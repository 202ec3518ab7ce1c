from enum import StrEnum
from typing import override

from .schema import ErrorResponse


class ErrorKind(StrEnum):
    MISSING_PARAMETER = "missing_parameter"
    UNREADABLE_IMAGE = "unreadable_image"
    RESIZE_FAILED = "resize_failed"
    ENCODING_EXCEPTION = "encoding_exception"


class PreviewError(Exception):
    """
    Raised by the request handler when a preview cannot be produced.

    `kind` tags the failure stage; `message` is the text returned to the client.
    """

    def __init__(self, kind: ErrorKind, message: str):
        self.kind: ErrorKind = kind
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{self.kind}: {self.message}"

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.message)

    @classmethod
    def missing_parameter(cls) -> "PreviewError":
        return cls(ErrorKind.MISSING_PARAMETER, "filepath parameter is required")

    @classmethod
    def unreadable_image(cls) -> "PreviewError":
        return cls(ErrorKind.UNREADABLE_IMAGE, "Cannot read image dimensions")

    @classmethod
    def resize_failed(cls) -> "PreviewError":
        return cls(ErrorKind.RESIZE_FAILED, "Failed to resize image")

    @classmethod
    def encoding_exception(cls, exc: BaseException) -> "PreviewError":
        return cls(ErrorKind.ENCODING_EXCEPTION, f"Failed to compress image: {exc}")
