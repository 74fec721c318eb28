"""
Demo Configuration
==================

Immutable, validated settings for the two demo programs. Defaults reproduce
the reference behavior:

- AOI dwell demo: 20 samples on a 1280x720 canvas, durations in
  [0.25, 1.5) seconds, one frame every 450 ms
- Heatmap demo: 0.97 decay per frame, 3 stamps of radius 40 px per frame,
  Gaussian blur with sigma 25, 60/40 frame/heat blend
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from gaze_overlay.dataclasses import (
    ValidationError,
    validate_duration_range,
    validate_frame_size,
)


def _validate_positive_int(value: int, name: str, allow_zero: bool = False) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or (value == 0 and not allow_zero):
        qualifier = "non-negative" if allow_zero else "positive"
        raise ValidationError(f"{name} must be {qualifier}, got {value}")


def _validate_real(value: float, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name} must be a number, got {type(value).__name__}")
    value_float = float(value)
    if not math.isfinite(value_float):
        raise ValidationError(f"{name} must be finite, got {value}")
    return value_float


@dataclass(frozen=True)
class AOIDemoConfig:
    """Settings for the AOI dwell demo.

    Attributes:
        frame_size: (width, height) of the synthetic canvas in pixels
        sample_count: Number of synthetic fixations to generate
        duration_range: (low, high) bounds for uniform fixation durations
        frame_delay_ms: Display wait per frame; also the quit-key polling window
        window_name: Title of the display window

    Raises:
        ValidationError: If any field is invalid
    """

    frame_size: tuple[int, int] = (1280, 720)
    sample_count: int = 20
    duration_range: tuple[float, float] = (0.25, 1.5)
    frame_delay_ms: int = 450
    window_name: str = "AOI Gaze Demo"

    def __post_init__(self) -> None:
        # Use object.__setattr__ because the dataclass is frozen
        object.__setattr__(self, "frame_size", validate_frame_size(self.frame_size))
        object.__setattr__(
            self, "duration_range", validate_duration_range(self.duration_range)
        )
        _validate_positive_int(self.sample_count, "sample_count", allow_zero=True)
        _validate_positive_int(self.frame_delay_ms, "frame_delay_ms")
        if not isinstance(self.window_name, str) or not self.window_name:
            raise ValidationError("window_name must be a non-empty string")

    @property
    def width(self) -> int:
        return self.frame_size[0]

    @property
    def height(self) -> int:
        return self.frame_size[1]


@dataclass(frozen=True)
class HeatmapDemoConfig:
    """Settings for the heatmap overlay demo.

    Attributes:
        decay: Multiplier applied to the whole intensity buffer every frame,
            in (0, 1]
        points_per_frame: Number of new gaze points stamped each frame
        stamp_radius: Radius in pixels of each stamped disc
        stamp_intensity: Intensity added inside each disc (non-negative)
        blur_sigma: Gaussian blur sigma; the kernel size is derived from it
        frame_weight: Blend weight of the camera frame
        heat_weight: Blend weight of the colorized heat layer
        frame_delay_ms: Display wait per frame
        window_name: Title of the display window

    Raises:
        ValidationError: If any field is invalid
    """

    decay: float = 0.97
    points_per_frame: int = 3
    stamp_radius: int = 40
    stamp_intensity: float = 1.0
    blur_sigma: float = 25.0
    frame_weight: float = 0.6
    heat_weight: float = 0.4
    frame_delay_ms: int = 1
    window_name: str = "Gaze Heatmap Demo"

    def __post_init__(self) -> None:
        decay = _validate_real(self.decay, "decay")
        if not 0.0 < decay <= 1.0:
            raise ValidationError(f"decay must be in (0, 1], got {self.decay}")
        _validate_positive_int(self.points_per_frame, "points_per_frame", allow_zero=True)
        _validate_positive_int(self.stamp_radius, "stamp_radius")
        if _validate_real(self.stamp_intensity, "stamp_intensity") < 0:
            raise ValidationError(
                f"stamp_intensity must be non-negative, got {self.stamp_intensity}"
            )
        if _validate_real(self.blur_sigma, "blur_sigma") <= 0:
            raise ValidationError(f"blur_sigma must be positive, got {self.blur_sigma}")
        for name in ("frame_weight", "heat_weight"):
            weight = _validate_real(getattr(self, name), name)
            if not 0.0 <= weight <= 1.0:
                raise ValidationError(f"{name} must be in [0, 1], got {weight}")
        _validate_positive_int(self.frame_delay_ms, "frame_delay_ms")
        if not isinstance(self.window_name, str) or not self.window_name:
            raise ValidationError("window_name must be a non-empty string")
