"""Pure dimension planning logic for bounded downscaling."""

import math
from typing import NamedTuple


class PlannedDimensions(NamedTuple):
    width: int
    height: int


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def plan_dimensions(
    original_width: int,
    original_height: int,
    max_width: int,
    max_height: int,
) -> PlannedDimensions:
    """
    Fit `original_width` x `original_height` inside `max_width` x `max_height`.

    Images already inside the box are returned unchanged (never upscaled).
    Otherwise both axes are scaled by the smaller of the two axis ratios and
    rounded half-up, so the binding axis lands on its bound.

    Args:
        original_width: Source width in pixels
        original_height: Source height in pixels
        max_width: Bounding box width
        max_height: Bounding box height

    Returns:
        PlannedDimensions, each axis at least 1

    Raises:
        ValueError: If any argument is not positive
    """
    if min(original_width, original_height, max_width, max_height) <= 0:
        raise ValueError(
            "Dimensions must be positive: "
            + f"{original_width}x{original_height} in {max_width}x{max_height}"
        )

    if original_width <= max_width and original_height <= max_height:
        return PlannedDimensions(original_width, original_height)

    ratio = min(max_width / original_width, max_height / original_height)

    return PlannedDimensions(
        width=max(1, _round_half_up(original_width * ratio)),
        height=max(1, _round_half_up(original_height * ratio)),
    )
