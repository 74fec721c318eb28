#!/usr/bin/env python3
"""
Live gaze heatmap overlay demo.

Opens a camera or video file and blends a decaying heatmap of synthetic
gaze points over every frame. Old fixations fade by a constant factor per
frame while new ones are stamped in, so the hot spots drift as the random
gaze moves around.

Usage:
    gaze-heatmap-demo            # default camera
    gaze-heatmap-demo clip.mp4   # video file
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Iterable
from typing import Any, Protocol

import cv2
import numpy as np
from numpy.typing import NDArray

from gaze_overlay.config import HeatmapDemoConfig
from gaze_overlay.dataclasses import GazeSample, VideoSourceError
from gaze_overlay.debug import setup_debug_logging
from gaze_overlay.heatmap import HeatmapBuffer, overlay_heatmap
from gaze_overlay.sources import RandomGazeSource, make_rng, next_batch
from gaze_overlay.visualize import Display, OpenCVWindow, draw_instructions, is_quit_key

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "0"

HEATMAP_INSTRUCTIONS = (
    "Press Esc or 'q' to quit",
    "Synthetic gaze heatmap (replace with eye-tracker data)",
)


class Capture(Protocol):
    """The subset of cv2.VideoCapture used by the demo."""

    def isOpened(self) -> bool: ...

    def read(self) -> tuple[bool, Any]: ...

    def release(self) -> None: ...


CaptureFactory = Callable[[Any], Capture]


def parse_video_source(value: str) -> int | str:
    """Map the CLI argument to a cv2.VideoCapture source.

    "0" selects the default camera; any other string is a file path.
    """
    if value == DEFAULT_SOURCE:
        return 0
    return value


def open_capture(source: int | str, factory: CaptureFactory = cv2.VideoCapture) -> Capture:
    """Open a capture device or file.

    Raises:
        VideoSourceError: If the source cannot be opened
    """
    capture = factory(source)
    if not capture.isOpened():
        capture.release()
        raise VideoSourceError(f"Could not open video source: {source}")
    logger.info(f"Opened video source: {source}")
    return capture


def _read_frame(capture: Capture) -> NDArray[np.uint8] | None:
    ok, frame = capture.read()
    if not ok or frame is None:
        return None
    return frame


def run_heatmap_demo(
    capture: Capture,
    config: HeatmapDemoConfig,
    display: Display,
    rng: np.random.Generator | None = None,
    source: Iterable[GazeSample] | None = None,
) -> int:
    """Run the decay/stamp/blend loop until the stream ends or the user quits.

    Args:
        capture: An opened capture
        config: Heatmap and blending parameters
        display: Frame sink (an OpenCV window in the CLI)
        rng: Random generator for the default synthetic source
        source: Gaze points to stamp; defaults to an endless stream of
            uniform random points over the frame

    Returns:
        Number of frames displayed

    Raises:
        VideoSourceError: If the first frame cannot be read
    """
    frame = _read_frame(capture)
    if frame is None:
        raise VideoSourceError("Could not read the first frame from the video source")
    print("Heatmap demo running. Press Esc or 'q' in the window to quit.")

    heatmap = HeatmapBuffer.for_frame(frame, decay=config.decay)
    if source is None:
        height, width = heatmap.shape
        source = RandomGazeSource(
            width, height, rng if rng is not None else make_rng(), with_duration=False
        )
    stream = iter(source)
    logger.info(f"Heatmap buffer {heatmap.width}x{heatmap.height}, decay {config.decay}")

    frames_shown = 0
    while True:
        heatmap.step(
            next_batch(stream, config.points_per_frame),
            radius=config.stamp_radius,
            intensity=config.stamp_intensity,
        )
        heat = heatmap.render(blur_sigma=config.blur_sigma)
        output = overlay_heatmap(frame, heat, config.frame_weight, config.heat_weight)
        draw_instructions(output, HEATMAP_INSTRUCTIONS)

        display.show(output)
        frames_shown += 1
        if is_quit_key(display.wait_key(config.frame_delay_ms)):
            logger.info("Quit key pressed")
            break

        frame = _read_frame(capture)
        if frame is None:
            logger.info("Video source returned no frame; stopping")
            break

    return frames_shown


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Overlay a decaying synthetic gaze heatmap on a camera or video"
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=DEFAULT_SOURCE,
        help="'0' for the default camera, otherwise a video file path (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible run (default: clock)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable info logging")
    return parser


def main(
    argv: list[str] | None = None,
    display: Display | None = None,
    capture_factory: CaptureFactory = cv2.VideoCapture,
) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_debug_logging(logging.INFO if args.verbose else logging.WARNING)

    config = HeatmapDemoConfig()
    video_source = parse_video_source(args.source)

    try:
        capture = open_capture(video_source, capture_factory)
    except VideoSourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if display is None:
        display = OpenCVWindow(config.window_name)

    try:
        frames = run_heatmap_demo(capture, config, display, rng=make_rng(args.seed))
    except VideoSourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        capture.release()
        display.close()

    logger.info(f"Displayed {frames} frames")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
