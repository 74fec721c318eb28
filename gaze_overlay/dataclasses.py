"""
Gaze Data Structures
====================

Core data structures for synthetic gaze analysis:
- GazeSample: Single fixation with position and optional dwell duration
- DwellAccumulator: Per-quadrant dwell time totals for a run
- ValidationError / VideoSourceError: Errors raised by the package
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real

import numpy as np

NUM_QUADRANTS = 4


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


class VideoSourceError(Exception):
    """Raised when a video source cannot be opened or yields no first frame."""

    pass


def _validate_position(position: tuple[float, float]) -> tuple[float, float]:
    """Validate that position is a pair of finite numbers.

    Args:
        position: A 2D point (x, y)

    Returns:
        The position normalized to a tuple of Python floats.

    Raises:
        ValidationError: If position does not have exactly 2 finite components
    """
    if len(position) != 2:
        raise ValidationError(
            f"Position must have exactly 2 components (x, y), got {len(position)} components"
        )
    x, y = position
    if not isinstance(x, Real) or not isinstance(y, Real):
        raise ValidationError(
            f"Position components must be numbers, got ({type(x).__name__}, {type(y).__name__})"
        )
    if not (math.isfinite(float(x)) and math.isfinite(float(y))):
        raise ValidationError(f"Position must be finite, got ({x}, {y})")
    return float(x), float(y)


def validate_duration(duration: float, name: str = "duration") -> float:
    """Validate that a duration is a positive, finite number of seconds.

    Raises:
        ValidationError: If duration is not a number, not finite, or not positive
    """
    if isinstance(duration, bool) or not isinstance(duration, Real):
        raise ValidationError(
            f"{name} must be a number, got {type(duration).__name__}"
        )
    value = float(duration)
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {duration}")
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {duration}")
    return value


def validate_frame_size(frame_size: tuple[int, int]) -> tuple[int, int]:
    """Validate frame_size is a (width, height) pair of positive whole numbers.

    Args:
        frame_size: Expected to be (width, height) tuple.
            Accepts int, whole-number float, or numpy scalar types.

    Returns:
        Validated (width, height) as ints.

    Raises:
        ValidationError: If frame_size is malformed.
    """
    if not isinstance(frame_size, (tuple, list)):
        raise ValidationError(
            f"frame_size must be a tuple of (width, height), "
            f"got {type(frame_size).__name__}"
        )
    if len(frame_size) != 2:
        raise ValidationError(
            f"frame_size must have exactly 2 elements (width, height), "
            f"got {len(frame_size)} elements"
        )

    normalized = []
    for name, value in zip(("width", "height"), frame_size):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ValidationError(
                f"frame_size {name} must be a number, got {type(value).__name__}"
            )
        value_float = float(value)
        if not math.isfinite(value_float):
            raise ValidationError(f"frame_size {name} must be finite, got {value}")
        if value_float != int(value_float):
            raise ValidationError(f"frame_size {name} must be an integer, got {value}")
        if value_float <= 0:
            raise ValidationError(f"frame_size {name} must be positive, got {value}")
        normalized.append(int(value_float))

    return normalized[0], normalized[1]


def validate_duration_range(duration_range: tuple[float, float]) -> tuple[float, float]:
    """Validate a (low, high) pair of fixation duration bounds in seconds.

    Returns:
        The bounds as a tuple of Python floats.

    Raises:
        ValidationError: If the pair is malformed, low is not positive,
            or high is below low
    """
    if not isinstance(duration_range, (tuple, list)) or len(duration_range) != 2:
        raise ValidationError(
            f"duration_range must be a (low, high) pair, got {duration_range!r}"
        )
    low = validate_duration(duration_range[0], "duration_range low")
    high = validate_duration(duration_range[1], "duration_range high")
    if high < low:
        raise ValidationError(
            f"duration_range high ({high}) must not be below low ({low})"
        )
    return low, high


def _validate_region(region: int) -> int:
    if isinstance(region, bool) or not isinstance(region, (int, np.integer)):
        raise ValidationError(f"region must be an int, got {type(region).__name__}")
    if not 0 <= region < NUM_QUADRANTS:
        raise ValidationError(
            f"region must be in [0, {NUM_QUADRANTS}), got {region}"
        )
    return int(region)


@dataclass(frozen=True)
class GazeSample:
    """A single synthetic (or recorded) fixation.

    Attributes:
        position: The (x, y) gaze position in image coordinates
        duration: Dwell duration in seconds. None for samples that only
            mark a position (one heatmap stamp).

    Raises:
        ValidationError: If position is not finite or duration is not positive
    """

    position: tuple[float, float]
    duration: float | None = None

    def __post_init__(self) -> None:
        """Validate and normalize position and duration."""
        object.__setattr__(self, "position", _validate_position(self.position))
        if self.duration is not None:
            object.__setattr__(self, "duration", validate_duration(self.duration))

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def pixel(self) -> tuple[int, int]:
        """Position rounded to integer pixel coordinates for drawing."""
        return int(round(self.position[0])), int(round(self.position[1]))


@dataclass
class DwellAccumulator:
    """Running dwell-time totals for the four screen quadrants.

    Counters only ever grow during a run; percentages are always derived
    from the current totals.

    Attributes:
        dwell_seconds: Accumulated seconds per quadrant (index 0..3)
        sample_counts: Number of samples classified into each quadrant
    """

    dwell_seconds: list[float] = field(default_factory=lambda: [0.0] * NUM_QUADRANTS)
    sample_counts: list[int] = field(default_factory=lambda: [0] * NUM_QUADRANTS)

    def __post_init__(self) -> None:
        """Validate counter shapes and signs.

        Raises:
            ValidationError: If either counter list does not have 4 entries
            ValidationError: If any counter is negative
        """
        self.dwell_seconds = [float(s) for s in self.dwell_seconds]
        self.sample_counts = [int(c) for c in self.sample_counts]
        if len(self.dwell_seconds) != NUM_QUADRANTS:
            raise ValidationError(
                f"dwell_seconds must have {NUM_QUADRANTS} entries, got {len(self.dwell_seconds)}"
            )
        if len(self.sample_counts) != NUM_QUADRANTS:
            raise ValidationError(
                f"sample_counts must have {NUM_QUADRANTS} entries, got {len(self.sample_counts)}"
            )
        if any(s < 0 for s in self.dwell_seconds) or any(c < 0 for c in self.sample_counts):
            raise ValidationError("Dwell counters must be non-negative")

    def add(self, sample: GazeSample, width: int, height: int) -> int:
        """Classify a sample and add its duration to that quadrant.

        Args:
            sample: A GazeSample with a duration
            width: Frame width in pixels
            height: Frame height in pixels

        Returns:
            The quadrant index the sample was classified into

        Raises:
            ValidationError: If the sample carries no duration
        """
        # Import here to avoid circular imports
        from gaze_overlay.regions import classify_quadrant

        if not isinstance(sample, GazeSample):
            raise ValidationError(
                f"sample must be a GazeSample, got {type(sample).__name__}"
            )
        if sample.duration is None:
            raise ValidationError("Cannot accumulate dwell time for a sample without duration")

        region = classify_quadrant(sample.position, width, height)
        self.add_duration(region, sample.duration)
        return region

    def add_duration(self, region: int, seconds: float) -> None:
        """Add dwell time directly to a quadrant."""
        region = _validate_region(region)
        self.dwell_seconds[region] += validate_duration(seconds, "seconds")
        self.sample_counts[region] += 1

    @property
    def total_seconds(self) -> float:
        """Total observed time across all quadrants."""
        return sum(self.dwell_seconds)

    @property
    def total_samples(self) -> int:
        return sum(self.sample_counts)

    def seconds(self, region: int) -> float:
        return self.dwell_seconds[_validate_region(region)]

    def percentage(self, region: int) -> float:
        """Share of total observed time spent in a quadrant, in percent.

        Returns 0.0 for every quadrant while no time has been observed.
        """
        region = _validate_region(region)
        total = self.total_seconds
        if total <= 0.0:
            return 0.0
        return self.dwell_seconds[region] / total * 100.0

    def percentages(self) -> list[float]:
        return [self.percentage(i) for i in range(NUM_QUADRANTS)]

    def summary_lines(self) -> list[str]:
        """Plain text summary, one line per quadrant.

        Example:
            >>> acc = DwellAccumulator()
            >>> acc.add_duration(0, 1.0)
            >>> acc.summary_lines()[0]
            '  AOI1: 100.0% (1.00s)'
        """
        from gaze_overlay.regions import quadrant_label

        return [
            f"  {quadrant_label(i)}: {self.percentage(i):.1f}% ({self.dwell_seconds[i]:.2f}s)"
            for i in range(NUM_QUADRANTS)
        ]
