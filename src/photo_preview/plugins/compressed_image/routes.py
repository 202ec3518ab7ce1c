"""Compressed image route factory."""

from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, PlainTextResponse

from ...common.image_library import ImageLibrary
from ...common.schema import ErrorResponse
from ...common.settings import PreviewSettings
from .handler import CompressedImageHandler
from .schema import CompressedImageParams


def create_router(
    image_library: ImageLibrary,
    settings: PreviewSettings,
) -> APIRouter:
    """Create router with injected dependencies.

    Args:
        image_library: ImageLibrary implementation used to probe and encode
        settings: Bounding box and encoder settings

    Returns:
        Configured APIRouter with the compressed image endpoint
    """
    router = APIRouter()
    handler = CompressedImageHandler(image_library, settings)

    @router.get("/photo/compressed_image", response_class=PlainTextResponse)
    def get_compressed_image(
        filepath: Annotated[
            str | None, Query(description="Path to the source image")
        ] = None,
    ):
        """Return a downscaled `data:image/...;base64,...` URL for the image.

        Failures are reported as `{"error": "..."}`.
        """
        result = handler.handle(CompressedImageParams(filepath=filepath))

        if isinstance(result, ErrorResponse):
            return JSONResponse(content=result.model_dump())
        return PlainTextResponse(content=result)

    _ = get_compressed_image
    return router
