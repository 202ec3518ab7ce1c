"""Master module - dynamic route aggregator for FastAPI."""

from importlib.metadata import entry_points
from typing import Callable, cast

from fastapi import APIRouter
from loguru import logger

from .common.image_library import ImageLibrary
from .common.settings import PreviewSettings

# Type alias for route factory functions loaded from entry points
RouteFactory = Callable[[ImageLibrary, PreviewSettings], APIRouter]


def create_master_router(
    image_library: ImageLibrary | None = None,
    settings: PreviewSettings | None = None,
) -> APIRouter:
    """Dynamically aggregate all plugin routes from entry points.

    Discovers routes from [project.entry-points."photo_preview.routes"]
    in pyproject.toml and creates a combined router.

    Args:
        image_library: ImageLibrary implementation shared by all plugins.
                       Defaults to PillowImageLibrary.
        settings: Bounding box and encoder settings. Defaults to 1024x1024.

    Returns:
        Combined APIRouter with all plugin routes

    Raises:
        RuntimeError: If a plugin fails to load (missing dependency, etc.)

    Example:
        from fastapi import FastAPI
        from photo_preview import create_master_router

        app = FastAPI()
        app.include_router(create_master_router(), prefix="/api")
    """
    settings = settings or PreviewSettings()
    if image_library is None:
        from .plugins.compressed_image.algo.pillow_library import PillowImageLibrary

        image_library = PillowImageLibrary(settings)

    master = APIRouter()

    for ep in entry_points(group="photo_preview.routes"):
        try:
            create_router = cast(RouteFactory, ep.load())
            plugin_router: APIRouter = create_router(image_library, settings)
        except Exception as e:
            # Plugin dependency missing = exception (fail fast)
            raise RuntimeError(f"Failed to load plugin '{ep.name}': {e}") from e

        master.include_router(plugin_router)
        logger.debug(f"Loaded route plugin: {ep.name}")

    return master
