"""
Visualization utilities for the gaze demos.

This module provides functions to draw the quadrant AOI canvas, fixation
circles, dwell labels and instruction text, plus a thin wrapper around the
OpenCV window used to display frames and poll the quit key.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

import cv2
import numpy as np
from numpy.typing import NDArray

from gaze_overlay.dataclasses import NUM_QUADRANTS, DwellAccumulator, GazeSample
from gaze_overlay.regions import classify_quadrant, quadrant_color, quadrant_label

BACKGROUND_COLOR = (20, 20, 20)
GRID_COLOR = (80, 80, 80)
LABEL_COLOR = (180, 180, 180)
TEXT_COLOR = (255, 255, 255)

BASE_RADIUS = 12.0
RADIUS_PER_SECOND = 55.0

QUIT_KEYS = (ord("q"), 27)  # 'q' and Esc

FONT = cv2.FONT_HERSHEY_SIMPLEX


def circle_radius(duration: float) -> float:
    """Radius in pixels of a fixation circle; larger when staring longer."""
    return BASE_RADIUS + duration * RADIUS_PER_SECOND


def draw_quadrant_grid(width: int, height: int) -> NDArray[np.uint8]:
    """Create the static AOI canvas: dark background, center lines, labels.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels

    Returns:
        New (H, W, 3) BGR image
    """
    canvas = np.full((height, width, 3), BACKGROUND_COLOR, dtype=np.uint8)
    cx, cy = width // 2, height // 2
    cv2.line(canvas, (cx, 0), (cx, height), GRID_COLOR, 1, cv2.LINE_AA)
    cv2.line(canvas, (0, cy), (width, cy), GRID_COLOR, 1, cv2.LINE_AA)

    padding = 12
    origins = (
        (padding, padding + 20),
        (cx + padding, padding + 20),
        (cx + padding, cy + padding + 20),
        (padding, cy + padding + 20),
    )
    for index, origin in enumerate(origins):
        cv2.putText(
            canvas, quadrant_label(index), origin, FONT, 0.8, LABEL_COLOR, 2, cv2.LINE_AA
        )
    return canvas


def draw_gaze_circles(
    image: NDArray[np.uint8],
    samples: Iterable[GazeSample],
    width: int,
    height: int,
) -> NDArray[np.uint8]:
    """Draw each fixation as a filled circle in its quadrant's color.

    Each circle's radius comes from its own sample's duration. Draws in place.

    Returns:
        The same image, for chaining
    """
    for sample in samples:
        region = classify_quadrant(sample.position, width, height)
        radius = int(circle_radius(sample.duration or 0.0))
        cv2.circle(image, sample.pixel, radius, quadrant_color(region), -1, cv2.LINE_AA)
    return image


def format_dwell_label(accumulator: DwellAccumulator, region: int) -> str:
    """Label text such as ``AOI1:  25.0% (1.23s)``."""
    return (
        f"{quadrant_label(region)}: {accumulator.percentage(region):5.1f}% "
        f"({accumulator.seconds(region):.2f}s)"
    )


def draw_dwell_labels(
    image: NDArray[np.uint8],
    accumulator: DwellAccumulator,
    origin: tuple[int, int] | None = None,
    line_spacing: int = 20,
    font_scale: float = 0.75,
    font_thickness: int = 2,
) -> NDArray[np.uint8]:
    """Annotate the frame with per-quadrant percentage and seconds.

    Args:
        image: Input image (H, W, 3) BGR format, drawn in place
        accumulator: Current dwell totals
        origin: Position of the first line; defaults to 80 px above the
            bottom-left corner
        line_spacing: Vertical distance between lines
        font_scale: Font size scale factor
        font_thickness: Font line thickness

    Returns:
        The same image, for chaining
    """
    if origin is None:
        origin = (20, image.shape[0] - 80)
    x, y = origin
    for region in range(NUM_QUADRANTS):
        cv2.putText(
            image,
            format_dwell_label(accumulator, region),
            (x, y + region * line_spacing),
            FONT,
            font_scale,
            quadrant_color(region),
            font_thickness,
            cv2.LINE_AA,
        )
    return image


def draw_instructions(
    image: NDArray[np.uint8],
    lines: Sequence[str],
    origin: tuple[int, int] = (20, 40),
    line_spacing: int = 30,
) -> NDArray[np.uint8]:
    """Draw white instruction text lines from the top-left. Draws in place."""
    x, y = origin
    for i, line in enumerate(lines):
        cv2.putText(
            image, line, (x, y + i * line_spacing), FONT, 0.8, TEXT_COLOR, 2, cv2.LINE_AA
        )
    return image


def render_aoi_frame(
    base_canvas: NDArray[np.uint8],
    samples: Sequence[GazeSample],
    accumulator: DwellAccumulator,
    instructions: Sequence[str] = (),
) -> NDArray[np.uint8]:
    """Fully re-render one AOI demo frame on a copy of the base canvas."""
    frame = base_canvas.copy()
    height, width = frame.shape[:2]
    draw_gaze_circles(frame, samples, width, height)
    draw_dwell_labels(frame, accumulator)
    draw_instructions(frame, instructions)
    return frame


def is_quit_key(key: int) -> bool:
    """True for 'q' or Esc; waitKey's -1 (no key) is not a quit key."""
    return key != -1 and (key & 0xFF) in QUIT_KEYS


class Display(Protocol):
    """Where demo frames go; also the blocking quit-key polling point."""

    def show(self, frame: NDArray[np.uint8]) -> None: ...

    def wait_key(self, delay_ms: int) -> int: ...

    def close(self) -> None: ...


class OpenCVWindow:
    """A single HighGUI window, created on the first frame shown."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.opened = False

    def show(self, frame: NDArray[np.uint8]) -> None:
        cv2.imshow(self.name, frame)
        self.opened = True

    def wait_key(self, delay_ms: int) -> int:
        return int(cv2.waitKey(delay_ms))

    def close(self) -> None:
        if self.opened:
            cv2.destroyWindow(self.name)
            self.opened = False
