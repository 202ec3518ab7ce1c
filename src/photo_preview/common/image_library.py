"""ImageLibrary - protocol for the image backend used by preview handlers."""

from collections.abc import Sequence
from typing import Protocol


class ImageLibrary(Protocol):
    """
    Decode/resample/encode backend.

    Implementations report failure by returning a falsy value; the transform
    may also raise.
    """

    def probe_dimensions(self, path: str) -> Sequence[int] | None:
        """Return `(width, height)` of the image at `path`, or None if unreadable."""
        ...

    def resize_and_encode(self, path: str, width: int, height: int, format: str) -> str | None:
        """Resize the image at `path` and return it as a base64 `data:` URL."""
        ...
