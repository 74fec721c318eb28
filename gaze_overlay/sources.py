"""
Gaze sample sources.

A sample source is any iterable of GazeSample objects, finite or infinite.
The demos only consume this interface, so a recorded or live tracker feed
can replace the random generator without touching accumulation or
rendering code.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Protocol

import numpy as np

from gaze_overlay.dataclasses import (
    GazeSample,
    ValidationError,
    validate_duration_range,
    validate_frame_size,
)

logger = logging.getLogger(__name__)

DEFAULT_DURATION_RANGE: tuple[float, float] = (0.25, 1.5)


class SampleSource(Protocol):
    """Anything that lazily produces gaze samples."""

    def __iter__(self) -> Iterator[GazeSample]: ...


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the random source owned by a demo run.

    Args:
        seed: Fixed seed for reproducible runs. When None the generator is
            seeded once from the high-resolution clock.
    """
    if seed is None:
        seed = time.time_ns()
        logger.debug(f"Seeding random source from clock: {seed}")
    return np.random.default_rng(seed)


class RandomGazeSource:
    """Uniformly distributed synthetic gaze samples over a frame.

    Each iteration draws fresh samples from the shared generator, so two
    iterations over the same source produce different samples.

    Args:
        width: Frame width in pixels
        height: Frame height in pixels
        rng: Random generator owned by the caller
        count: Number of samples per iteration, or None for an endless stream
        duration_range: (low, high) bounds for uniform durations in seconds
        with_duration: If False, samples carry position only (heatmap stamps)
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: np.random.Generator,
        count: int | None = None,
        duration_range: tuple[float, float] = DEFAULT_DURATION_RANGE,
        with_duration: bool = True,
    ) -> None:
        self.width, self.height = validate_frame_size((width, height))
        if count is not None and (isinstance(count, bool) or not isinstance(count, int) or count < 0):
            raise ValidationError(f"count must be a non-negative int or None, got {count!r}")
        self.rng = rng
        self.count = count
        self.duration_range = validate_duration_range(duration_range)
        self.with_duration = with_duration

    def _draw(self) -> GazeSample:
        x = float(self.rng.uniform(0.0, self.width))
        y = float(self.rng.uniform(0.0, self.height))
        if not self.with_duration:
            return GazeSample(position=(x, y))
        duration = float(self.rng.uniform(*self.duration_range))
        return GazeSample(position=(x, y), duration=duration)

    def __iter__(self) -> Iterator[GazeSample]:
        produced = 0
        while self.count is None or produced < self.count:
            yield self._draw()
            produced += 1


class ReplaySource:
    """Replays a pre-recorded sequence of samples once."""

    def __init__(self, samples: Iterable[GazeSample]) -> None:
        self.samples = list(samples)
        for i, sample in enumerate(self.samples):
            if not isinstance(sample, GazeSample):
                raise ValidationError(
                    f"Sample at index {i} must be a GazeSample, got {type(sample).__name__}"
                )

    def __iter__(self) -> Iterator[GazeSample]:
        return iter(self.samples)

    def __len__(self) -> int:
        return len(self.samples)


def generate_samples(
    width: int,
    height: int,
    count: int,
    rng: np.random.Generator,
    duration_range: tuple[float, float] = DEFAULT_DURATION_RANGE,
) -> list[GazeSample]:
    """Generate a fixed list of synthetic fixations with durations."""
    return list(RandomGazeSource(width, height, rng, count=count, duration_range=duration_range))


def next_batch(stream: Iterator[GazeSample], n: int) -> list[GazeSample]:
    """Pull up to n samples from a stream; shorter when the stream ends."""
    return list(islice(stream, n))
