"""
Screen quadrant areas of interest.

The screen is split at its center into four AOIs, numbered clockwise from
the top-left:

    AOI1 (0) | AOI2 (1)
    ---------+---------
    AOI4 (3) | AOI3 (2)

Points lying exactly on a center line belong to the right/bottom side.
"""

from __future__ import annotations

from collections.abc import Sequence

from gaze_overlay.dataclasses import NUM_QUADRANTS, ValidationError

QUADRANT_LABELS: tuple[str, ...] = ("AOI1", "AOI2", "AOI3", "AOI4")

# BGR
QUADRANT_COLORS: tuple[tuple[int, int, int], ...] = (
    (0, 128, 255),  # orange
    (0, 255, 0),  # green
    (255, 0, 0),  # blue
    (255, 255, 0),  # cyan
)


def classify_quadrant(point: Sequence[float], width: float, height: float) -> int:
    """Return the quadrant index (0..3) containing a point.

    Args:
        point: (x, y) position in image coordinates
        width: Frame width in pixels
        height: Frame height in pixels

    Returns:
        0 for top-left, 1 for top-right, 2 for bottom-right, 3 for bottom-left
    """
    right = point[0] >= width / 2.0
    bottom = point[1] >= height / 2.0

    if not right and not bottom:
        return 0
    if right and not bottom:
        return 1
    if right and bottom:
        return 2
    return 3


def _check_index(index: int) -> int:
    if not 0 <= index < NUM_QUADRANTS:
        raise ValidationError(f"Quadrant index must be in [0, {NUM_QUADRANTS}), got {index}")
    return index


def quadrant_label(index: int) -> str:
    return QUADRANT_LABELS[_check_index(index)]


def quadrant_color(index: int) -> tuple[int, int, int]:
    return QUADRANT_COLORS[_check_index(index)]
