"""Compressed image algorithms."""

from .dimension_planner import PlannedDimensions, plan_dimensions
from .format_selector import OutputFormat, select_format
from .pillow_library import PillowImageLibrary, get_pil_format

__all__ = [
    "OutputFormat",
    "PillowImageLibrary",
    "PlannedDimensions",
    "get_pil_format",
    "plan_dimensions",
    "select_format",
]
