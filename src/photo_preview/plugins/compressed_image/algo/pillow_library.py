"""Pillow-backed implementation of the ImageLibrary protocol."""

import base64
from io import BytesIO
from pathlib import Path

from loguru import logger
from PIL import Image, ImageOps

from ....common.settings import PreviewSettings
from ....utils.profiling import timed

EXIF_ORIENTATION = 0x0112

# Orientations that rotate the image by 90 or 270 degrees
TRANSPOSED_ORIENTATIONS = {5, 6, 7, 8}


def get_pil_format(format_str: str) -> str:
    """Convert format string to PIL format name."""
    format_map = {
        "jpg": "JPEG",
        "jpeg": "JPEG",
        "png": "PNG",
    }
    return format_map.get(format_str.lower(), format_str.upper())


def to_data_url(data: bytes, format: str) -> str:
    payload = base64.b64encode(data).decode("ascii")
    return f"data:image/{format.lower()};base64,{payload}"


class PillowImageLibrary:
    """Decode, resample and encode images with Pillow."""

    def __init__(self, settings: PreviewSettings | None = None):
        self.settings: PreviewSettings = settings or PreviewSettings()

    def probe_dimensions(self, path: str) -> tuple[int, int] | None:
        """Return the display size, honoring the EXIF orientation tag."""
        try:
            with Image.open(Path(path)) as img:
                width, height = img.size
                if img.getexif().get(EXIF_ORIENTATION) in TRANSPOSED_ORIENTATIONS:
                    return height, width
                return width, height
        except OSError as exc:
            logger.warning(f"Cannot probe image {path}: {exc}")
            return None

    @timed
    def resize_and_encode(self, path: str, width: int, height: int, format: str) -> str:
        """
        Resize the image at `path` to exactly `width` x `height`.

        Raises:
            FileNotFoundError: If the image does not exist
            OSError: If Pillow fails to read or encode the image
        """
        fmt = format.lower()

        with Image.open(Path(path)) as source:
            img = ImageOps.exif_transpose(source)

            # JPEG does not support alpha channel
            if fmt in ("jpg", "jpeg") and img.mode not in ("RGB", "L"):
                img = img.convert("RGB")

            if img.size != (width, height):
                img = img.resize((width, height), Image.Resampling.LANCZOS)

            save_kwargs: dict[str, object] = {}
            if fmt in ("jpg", "jpeg"):
                save_kwargs["quality"] = self.settings.jpeg_quality
            if fmt == "png":
                save_kwargs["optimize"] = self.settings.png_optimize

            buffer = BytesIO()
            img.save(buffer, format=get_pil_format(fmt), **save_kwargs)

        return to_data_url(buffer.getvalue(), fmt)
