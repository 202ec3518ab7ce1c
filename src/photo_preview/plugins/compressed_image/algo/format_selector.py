"""Output format selection from a file path."""

from enum import StrEnum


class OutputFormat(StrEnum):
    JPEG = "jpeg"
    PNG = "png"


def select_format(path: str) -> OutputFormat:
    """PNG sources stay PNG; everything else is re-encoded as JPEG."""
    _, dot, ext = path.rpartition(".")
    if not dot:
        ext = ""

    if ext.lower() == OutputFormat.PNG:
        return OutputFormat.PNG
    return OutputFormat.JPEG
