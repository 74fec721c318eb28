"""
Tests for the gaze data structures.

Tests cover:
- GazeSample creation and validation
- DwellAccumulator accumulation, percentages and summary text
"""

import math

import numpy as np
import pytest

from gaze_overlay.dataclasses import (
    DwellAccumulator,
    GazeSample,
    ValidationError,
    validate_duration_range,
    validate_frame_size,
)


# =============================================================================
# Tests: GazeSample
# =============================================================================


def test_gaze_sample_basic() -> None:
    sample = GazeSample(position=(10.5, 20.25), duration=0.5)

    assert sample.position == (10.5, 20.25)
    assert sample.x == 10.5
    assert sample.y == 20.25
    assert sample.duration == 0.5


def test_gaze_sample_without_duration() -> None:
    """Heatmap points carry a position only."""
    sample = GazeSample(position=(1.0, 2.0))
    assert sample.duration is None


def test_gaze_sample_normalizes_numpy_scalars() -> None:
    sample = GazeSample(position=(np.float32(3.0), np.int64(4)), duration=np.float64(1.0))

    assert isinstance(sample.position[0], float)
    assert isinstance(sample.position[1], float)
    assert isinstance(sample.duration, float)


def test_gaze_sample_is_frozen() -> None:
    sample = GazeSample(position=(0.0, 0.0), duration=1.0)
    with pytest.raises(AttributeError):
        sample.duration = 2.0  # type: ignore[misc]


def test_gaze_sample_pixel_rounds() -> None:
    sample = GazeSample(position=(10.4, 10.6))
    assert sample.pixel == (10, 11)


@pytest.mark.parametrize("duration", [0.0, -1.0, math.inf, math.nan])
def test_gaze_sample_rejects_bad_duration(duration: float) -> None:
    with pytest.raises(ValidationError):
        GazeSample(position=(0.0, 0.0), duration=duration)


def test_gaze_sample_rejects_bad_position() -> None:
    with pytest.raises(ValidationError, match="exactly 2 components"):
        GazeSample(position=(0.0, 0.0, 0.0))  # type: ignore[arg-type]
    with pytest.raises(ValidationError, match="finite"):
        GazeSample(position=(math.nan, 0.0))
    with pytest.raises(ValidationError, match="numbers"):
        GazeSample(position=("a", 0.0))  # type: ignore[arg-type]


# =============================================================================
# Tests: validate_frame_size
# =============================================================================


def test_validate_frame_size_accepts_whole_numbers() -> None:
    assert validate_frame_size((1280, 720)) == (1280, 720)
    assert validate_frame_size([640.0, np.int32(480)]) == (640, 480)


@pytest.mark.parametrize(
    "frame_size",
    [(0, 720), (1280, -1), (12.5, 10), (1280,), "1280x720", (math.inf, 10)],
)
def test_validate_frame_size_rejects(frame_size: object) -> None:
    with pytest.raises(ValidationError):
        validate_frame_size(frame_size)  # type: ignore[arg-type]


# =============================================================================
# Tests: validate_duration_range
# =============================================================================


def test_validate_duration_range_accepts_pairs() -> None:
    assert validate_duration_range((0.25, 1.5)) == (0.25, 1.5)
    assert validate_duration_range([1, 1]) == (1.0, 1.0)


@pytest.mark.parametrize(
    "duration_range",
    [(0.0, 1.0), (2.0, 1.0), (1.0,), (0.5, 1.0, 1.5), ("a", 1.0), (True, 1.0), (0.5, math.inf), 0.5],
)
def test_validate_duration_range_rejects(duration_range: object) -> None:
    with pytest.raises(ValidationError):
        validate_duration_range(duration_range)  # type: ignore[arg-type]


# =============================================================================
# Tests: DwellAccumulator
# =============================================================================


def test_accumulator_starts_empty() -> None:
    acc = DwellAccumulator()

    assert acc.dwell_seconds == [0.0, 0.0, 0.0, 0.0]
    assert acc.total_seconds == 0.0
    assert acc.total_samples == 0


def test_percentages_all_zero_when_nothing_observed() -> None:
    acc = DwellAccumulator()
    assert acc.percentages() == [0.0, 0.0, 0.0, 0.0]


def test_single_sample_top_left_scenario() -> None:
    """One 1 s fixation at the origin of a 1280x720 canvas is 100% AOI1."""
    acc = DwellAccumulator()
    region = acc.add(GazeSample(position=(0.0, 0.0), duration=1.0), 1280, 720)

    assert region == 0
    assert acc.seconds(0) == pytest.approx(1.0)
    assert acc.percentage(0) == pytest.approx(100.0)
    assert acc.percentage(1) == 0.0
    assert acc.percentage(2) == 0.0
    assert acc.percentage(3) == 0.0


def test_add_accumulates_per_quadrant() -> None:
    acc = DwellAccumulator()
    acc.add(GazeSample(position=(100.0, 100.0), duration=1.0), 1280, 720)
    acc.add(GazeSample(position=(1000.0, 100.0), duration=0.5), 1280, 720)
    acc.add(GazeSample(position=(1000.0, 600.0), duration=0.25), 1280, 720)
    acc.add(GazeSample(position=(100.0, 600.0), duration=0.25), 1280, 720)
    acc.add(GazeSample(position=(200.0, 200.0), duration=0.5), 1280, 720)

    assert acc.dwell_seconds == pytest.approx([1.5, 0.5, 0.25, 0.25])
    assert acc.sample_counts == [2, 1, 1, 1]
    assert acc.total_seconds == pytest.approx(2.5)
    assert acc.percentages() == pytest.approx([60.0, 20.0, 10.0, 10.0])


def test_percentages_sum_to_100() -> None:
    rng = np.random.default_rng(1234)
    acc = DwellAccumulator()

    for _ in range(200):
        sample = GazeSample(
            position=(float(rng.uniform(0, 800)), float(rng.uniform(0, 600))),
            duration=float(rng.uniform(0.25, 1.5)),
        )
        acc.add(sample, 800, 600)
        assert sum(acc.percentages()) == pytest.approx(100.0)


def test_totals_are_monotonic() -> None:
    rng = np.random.default_rng(7)
    acc = DwellAccumulator()
    previous = list(acc.dwell_seconds)

    for _ in range(50):
        acc.add(
            GazeSample(position=(float(rng.uniform(0, 100)), float(rng.uniform(0, 100))), duration=0.3),
            100,
            100,
        )
        assert all(now >= before for now, before in zip(acc.dwell_seconds, previous))
        previous = list(acc.dwell_seconds)


def test_add_requires_duration() -> None:
    acc = DwellAccumulator()
    with pytest.raises(ValidationError, match="without duration"):
        acc.add(GazeSample(position=(1.0, 1.0)), 100, 100)


def test_add_requires_gaze_sample() -> None:
    acc = DwellAccumulator()
    with pytest.raises(ValidationError, match="GazeSample"):
        acc.add((1.0, 1.0), 100, 100)  # type: ignore[arg-type]


@pytest.mark.parametrize("region", [-1, 4, True])
def test_invalid_region_rejected(region: int) -> None:
    acc = DwellAccumulator()
    with pytest.raises(ValidationError):
        acc.add_duration(region, 1.0)
    with pytest.raises(ValidationError):
        acc.percentage(region)


def test_add_duration_rejects_non_positive() -> None:
    acc = DwellAccumulator()
    with pytest.raises(ValidationError):
        acc.add_duration(0, 0.0)


def test_accumulator_rejects_bad_initial_counters() -> None:
    with pytest.raises(ValidationError):
        DwellAccumulator(dwell_seconds=[0.0, 0.0, 0.0])
    with pytest.raises(ValidationError):
        DwellAccumulator(dwell_seconds=[-1.0, 0.0, 0.0, 0.0])


def test_summary_lines() -> None:
    acc = DwellAccumulator()
    acc.add_duration(0, 1.5)
    acc.add_duration(2, 0.5)

    assert acc.summary_lines() == [
        "  AOI1: 75.0% (1.50s)",
        "  AOI2: 0.0% (0.00s)",
        "  AOI3: 25.0% (0.50s)",
        "  AOI4: 0.0% (0.00s)",
    ]
