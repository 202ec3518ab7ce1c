"""Test configuration and fixtures for photo_preview.

This module provides:
- Pytest configuration (markers)
- Function-scoped fixtures (synthetic images, settings, library doubles)
- Route test fixtures (FastAPI TestClient)
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from PIL import Image, ImageDraw

from photo_preview.common.settings import PreviewSettings
from photo_preview.plugins.compressed_image.algo.pillow_library import PillowImageLibrary
from photo_preview.plugins.compressed_image.routes import create_router

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: full request tests through the Pillow backend",
    )


# ============================================================================
# Image Fixtures
# ============================================================================


def _draw_grid(img: Image.Image) -> None:
    draw = ImageDraw.Draw(img)
    width, height = img.size
    for i in range(0, width, 50):
        draw.line([(i, 0), (i, height)], fill=(255, 255, 255), width=2)
    for i in range(0, height, 50):
        draw.line([(0, i), (width, i)], fill=(255, 255, 255), width=2)


@pytest.fixture
def synthetic_image(tmp_path: Path) -> Path:
    """Generate an 800x600 JPEG that already fits the default bounding box."""
    output_path = tmp_path / "synthetic.jpg"

    img = Image.new("RGB", (800, 600), color=(73, 109, 137))
    _draw_grid(img)
    ImageDraw.Draw(img).ellipse([300, 200, 500, 400], fill=(200, 100, 100))
    img.save(output_path, "JPEG", quality=85)

    return output_path


@pytest.fixture
def large_image(tmp_path: Path) -> Path:
    """Generate a 2000x1000 JPEG that must be downscaled."""
    output_path = tmp_path / "large.jpg"

    img = Image.new("RGB", (2000, 1000), color=(30, 60, 90))
    _draw_grid(img)
    img.save(output_path, "JPEG", quality=85)

    return output_path


@pytest.fixture
def transparent_png(tmp_path: Path) -> Path:
    """Generate a 1500x3000 RGBA PNG."""
    output_path = tmp_path / "transparent.png"

    img = Image.new("RGBA", (1500, 3000), color=(200, 50, 50, 128))
    img.save(output_path, "PNG")

    return output_path


# ============================================================================
# Dependency Fixtures
# ============================================================================


@pytest.fixture
def preview_settings() -> PreviewSettings:
    return PreviewSettings()


@pytest.fixture
def pillow_library(preview_settings: PreviewSettings) -> PillowImageLibrary:
    return PillowImageLibrary(preview_settings)


@pytest.fixture
def fake_library() -> MagicMock:
    """ImageLibrary double returning a 2000x1000 probe and a fixed data URL."""
    library = MagicMock()
    library.probe_dimensions.return_value = [2000, 1000]
    library.resize_and_encode.return_value = "data:image/jpeg;base64,AAAA"
    return library


def _client(image_library, settings: PreviewSettings) -> TestClient:
    app = FastAPI()
    app.include_router(create_router(image_library, settings))
    return TestClient(app)


@pytest.fixture
def api_client(pillow_library: PillowImageLibrary, preview_settings: PreviewSettings) -> TestClient:
    """Provide FastAPI TestClient backed by the Pillow library."""
    return _client(pillow_library, preview_settings)


@pytest.fixture
def fake_api_client(fake_library: MagicMock, preview_settings: PreviewSettings) -> TestClient:
    """Provide FastAPI TestClient backed by the library double."""
    return _client(fake_library, preview_settings)
