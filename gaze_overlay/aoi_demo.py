#!/usr/bin/env python3
"""
AOI dwell-time demo.

Synthetic gaze samples are dropped one at a time onto a canvas split into
four quadrant AOIs. Each fixation is drawn as a circle that grows with its
duration, and the running share of time spent in each AOI is shown on the
frame and printed as a summary at the end.

Usage:
    gaze-aoi-demo
    gaze-aoi-demo --samples 40 --seed 7
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable

from gaze_overlay.config import AOIDemoConfig
from gaze_overlay.dataclasses import DwellAccumulator, GazeSample, ValidationError
from gaze_overlay.debug import format_point, format_seconds, setup_debug_logging
from gaze_overlay.regions import quadrant_label
from gaze_overlay.sources import RandomGazeSource, make_rng
from gaze_overlay.visualize import (
    Display,
    OpenCVWindow,
    draw_quadrant_grid,
    is_quit_key,
    render_aoi_frame,
)

logger = logging.getLogger(__name__)

FRAME_INSTRUCTIONS = (
    "Press Esc or 'q' to quit early",
    "Synthetic gaze sequence (one circle per fixation)",
)

INTRO_LINES = (
    "Demo: synthetic gaze samples across four AOIs (center as origin).",
    "Each circle radius reflects how long the participant stared at that location.",
)

OUTRO = (
    "Replace the synthetic samples with real eye-tracker coordinates and durations"
    " to turn this into a live analysis demo."
)


def run_aoi_demo(
    config: AOIDemoConfig,
    source: Iterable[GazeSample],
    display: Display,
) -> DwellAccumulator:
    """Animate the samples from a source and accumulate dwell time.

    One frame is rendered per sample; the display wait between frames is
    also where the quit key is polled.

    Args:
        config: Canvas size, frame delay and window settings
        source: Gaze samples with durations
        display: Frame sink (an OpenCV window in the CLI)

    Returns:
        The dwell totals observed up to the last displayed sample
    """
    width, height = config.frame_size
    accumulator = DwellAccumulator()
    base_canvas = draw_quadrant_grid(width, height)
    drawn: list[GazeSample] = []

    for sample in source:
        drawn.append(sample)
        region = accumulator.add(sample, width, height)
        logger.info(
            f"Sample {len(drawn)} at {format_point(sample.position)} -> "
            f"{quadrant_label(region)} for {format_seconds(sample.duration or 0.0)}"
        )

        frame = render_aoi_frame(base_canvas, drawn, accumulator, FRAME_INSTRUCTIONS)
        display.show(frame)
        if is_quit_key(display.wait_key(config.frame_delay_ms)):
            logger.info("Quit key pressed; stopping early")
            break

    return accumulator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Animate synthetic gaze fixations over four quadrant AOIs"
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=AOIDemoConfig.sample_count,
        help=f"Number of synthetic fixations (default: {AOIDemoConfig.sample_count})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible run (default: clock)",
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=AOIDemoConfig.frame_delay_ms,
        help=f"Delay between frames in milliseconds (default: {AOIDemoConfig.frame_delay_ms})",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every sample")
    return parser


def main(argv: list[str] | None = None, display: Display | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_debug_logging(logging.INFO if args.verbose else logging.WARNING)

    try:
        config = AOIDemoConfig(sample_count=args.samples, frame_delay_ms=args.delay_ms)
    except ValidationError as e:
        parser.error(str(e))
    source = RandomGazeSource(
        config.width,
        config.height,
        make_rng(args.seed),
        count=config.sample_count,
        duration_range=config.duration_range,
    )
    if display is None:
        display = OpenCVWindow(config.window_name)

    for line in INTRO_LINES:
        print(line)

    try:
        accumulator = run_aoi_demo(config, source, display)
    finally:
        display.close()

    print("\nSummary (percentage of observed time in each AOI):")
    for line in accumulator.summary_lines():
        print(line)
    print()
    print(OUTRO)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
