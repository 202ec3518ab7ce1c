"""Compressed image request handler."""

import math

from loguru import logger

from ...common.errors import PreviewError
from ...common.image_library import ImageLibrary
from ...common.schema import ErrorResponse
from ...common.settings import PreviewSettings
from .algo.dimension_planner import plan_dimensions
from .algo.format_selector import select_format
from .schema import CompressedImageParams


class CompressedImageHandler:
    """
    Turn an image path into a bounded, re-encoded `data:` URL.

    Stateless apart from its collaborators; one instance may serve any
    number of requests.
    """

    def __init__(self, image_library: ImageLibrary, settings: PreviewSettings | None = None):
        self.image_library: ImageLibrary = image_library
        self.settings: PreviewSettings = settings or PreviewSettings()

    def handle(self, params: CompressedImageParams) -> str | ErrorResponse:
        """Return the data URL on success or an ErrorResponse on any failure."""
        try:
            return self.compress(params)
        except PreviewError as exc:
            logger.warning(f"Compressed image failed for {params.filepath!r}: {exc}")
            return exc.to_response()

    def compress(self, params: CompressedImageParams) -> str:
        """
        Run validate, probe, plan and transform for one request.

        Raises:
            PreviewError: On the first failing stage
        """
        path = params.filepath
        if not path:
            raise PreviewError.missing_parameter()

        original_width, original_height = self._probe(path)

        width, height = plan_dimensions(
            original_width,
            original_height,
            self.settings.max_width,
            self.settings.max_height,
        )
        format = select_format(path)
        logger.debug(
            f"Planned {path}: {original_width}x{original_height} -> {width}x{height} ({format})"
        )

        try:
            data_url = self.image_library.resize_and_encode(path, width, height, format.value)
        except Exception as exc:
            raise PreviewError.encoding_exception(exc) from exc

        if not data_url:
            raise PreviewError.resize_failed()

        return data_url

    def _probe(self, path: str) -> tuple[int, int]:
        try:
            dimensions = self.image_library.probe_dimensions(path)
        except Exception as exc:
            raise PreviewError.unreadable_image() from exc

        if not dimensions or len(dimensions) < 2:
            raise PreviewError.unreadable_image()

        width, height = _to_pixels(dimensions[0]), _to_pixels(dimensions[1])
        if width is None or height is None:
            raise PreviewError.unreadable_image()

        return width, height


def _to_pixels(value: object) -> int | None:
    """Whole pixel count of a probed dimension, or None unless finite and >= 1."""
    try:
        if not math.isfinite(value):  # type: ignore[arg-type]
            return None
        pixels = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return None
    return pixels if pixels >= 1 else None
