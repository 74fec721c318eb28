"""
Decaying gaze heatmap.

The heatmap keeps a single-channel float intensity buffer the size of the
video frame. Every frame the whole buffer is multiplied by a decay factor,
new gaze points are added as filled discs, and the result is blurred,
normalized to 0..255, colorized with a jet colormap and blended over the
camera frame.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import cv2
import numpy as np
from numpy.typing import NDArray

from gaze_overlay.dataclasses import GazeSample, ValidationError, validate_frame_size


class HeatmapBuffer:
    """Non-negative intensity field with geometric forgetting.

    Args:
        width: Buffer width in pixels (matches the video frame)
        height: Buffer height in pixels
        decay: Per-frame multiplier in (0, 1]

    Raises:
        ValidationError: If the size or decay factor is invalid
    """

    def __init__(self, width: int, height: int, decay: float = 0.97) -> None:
        self.width, self.height = validate_frame_size((width, height))
        if not 0.0 < decay <= 1.0:
            raise ValidationError(f"decay must be in (0, 1], got {decay}")
        self.decay_factor = float(decay)
        self.intensity: NDArray[np.float32] = np.zeros(
            (self.height, self.width), dtype=np.float32
        )

    @classmethod
    def for_frame(cls, frame: NDArray[np.uint8], decay: float = 0.97) -> HeatmapBuffer:
        """Create a buffer matching the size of a video frame."""
        height, width = frame.shape[:2]
        return cls(width, height, decay=decay)

    @property
    def shape(self) -> tuple[int, int]:
        return self.intensity.shape[0], self.intensity.shape[1]

    def decay(self) -> None:
        """Multiply every cell by the decay factor."""
        self.intensity *= self.decay_factor

    def stamp(self, point: Sequence[float], radius: int = 40, intensity: float = 1.0) -> None:
        """Add a filled disc of the given intensity centered on point.

        Overlapping stamps accumulate. Discs partially or fully outside the
        buffer are clipped.
        """
        if radius <= 0:
            raise ValidationError(f"radius must be positive, got {radius}")
        if intensity < 0:
            raise ValidationError(f"intensity must be non-negative, got {intensity}")

        cx, cy = int(round(point[0])), int(round(point[1]))
        x0, x1 = max(cx - radius, 0), min(cx + radius + 1, self.width)
        y0, y1 = max(cy - radius, 0), min(cy + radius + 1, self.height)
        if x0 >= x1 or y0 >= y1:
            return

        ys, xs = np.ogrid[y0:y1, x0:x1]
        disc = (xs - cx) ** 2 + (ys - cy) ** 2 <= radius * radius
        self.intensity[y0:y1, x0:x1][disc] += np.float32(intensity)

    def stamp_samples(
        self, samples: Iterable[GazeSample], radius: int = 40, intensity: float = 1.0
    ) -> int:
        """Stamp every sample; returns how many were stamped."""
        count = 0
        for sample in samples:
            self.stamp(sample.position, radius=radius, intensity=intensity)
            count += 1
        return count

    def step(
        self, samples: Iterable[GazeSample], radius: int = 40, intensity: float = 1.0
    ) -> None:
        """One frame of accumulation: decay, then stamp new samples."""
        self.decay()
        self.stamp_samples(samples, radius=radius, intensity=intensity)

    def normalized(self, blur_sigma: float = 25.0) -> NDArray[np.uint8]:
        """Blur the buffer and stretch it to the full 0..255 range."""
        # ksize (0, 0) lets OpenCV derive the kernel size from sigma
        blurred = cv2.GaussianBlur(self.intensity, (0, 0), blur_sigma)
        return cv2.normalize(blurred, None, 0, 255, cv2.NORM_MINMAX, dtype=cv2.CV_8U)

    def render(
        self, blur_sigma: float = 25.0, colormap: int = cv2.COLORMAP_JET
    ) -> NDArray[np.uint8]:
        """Colorized heat layer (H, W, 3) BGR; blue is cold, red is hot."""
        return cv2.applyColorMap(self.normalized(blur_sigma), colormap)


def overlay_heatmap(
    frame: NDArray[np.uint8],
    heat: NDArray[np.uint8],
    frame_weight: float = 0.6,
    heat_weight: float = 0.4,
) -> NDArray[np.uint8]:
    """Alpha-blend a colorized heat layer over a video frame.

    Grayscale frames are promoted to BGR, and a heat layer of a different
    size is resized to the frame.

    Returns:
        Blended image (new array, same size as frame)
    """
    if frame.ndim == 2:
        frame = cv2.cvtColor(frame, cv2.COLOR_GRAY2BGR)
    if heat.shape[:2] != frame.shape[:2]:
        heat = cv2.resize(heat, (frame.shape[1], frame.shape[0]))
    return cv2.addWeighted(frame, frame_weight, heat, heat_weight, 0)
