"""
Gaze Overlay Demos
==================

Synthetic gaze visualizations: quadrant AOI dwell-time accounting and a
decaying heatmap blended over live video.
"""

from gaze_overlay.config import AOIDemoConfig, HeatmapDemoConfig
from gaze_overlay.dataclasses import (
    DwellAccumulator,
    GazeSample,
    ValidationError,
    VideoSourceError,
)
from gaze_overlay.debug import (
    disable_debug_logging,
    format_point,
    format_seconds,
    setup_debug_logging,
)
from gaze_overlay.heatmap import HeatmapBuffer, overlay_heatmap
from gaze_overlay.regions import (
    QUADRANT_COLORS,
    QUADRANT_LABELS,
    classify_quadrant,
    quadrant_color,
    quadrant_label,
)
from gaze_overlay.sources import (
    RandomGazeSource,
    ReplaySource,
    SampleSource,
    generate_samples,
    make_rng,
)
from gaze_overlay.visualize import (
    OpenCVWindow,
    circle_radius,
    draw_dwell_labels,
    draw_gaze_circles,
    draw_instructions,
    draw_quadrant_grid,
    render_aoi_frame,
)

__all__ = [
    # Data model
    'GazeSample',
    'DwellAccumulator',
    'ValidationError',
    'VideoSourceError',
    # Configuration
    'AOIDemoConfig',
    'HeatmapDemoConfig',
    # Sources
    'SampleSource',
    'RandomGazeSource',
    'ReplaySource',
    'generate_samples',
    'make_rng',
    # Regions
    'QUADRANT_LABELS',
    'QUADRANT_COLORS',
    'classify_quadrant',
    'quadrant_label',
    'quadrant_color',
    # Heatmap
    'HeatmapBuffer',
    'overlay_heatmap',
    # Visualization
    'OpenCVWindow',
    'circle_radius',
    'draw_quadrant_grid',
    'draw_gaze_circles',
    'draw_dwell_labels',
    'draw_instructions',
    'render_aoi_frame',
    # Debug utilities
    'setup_debug_logging',
    'disable_debug_logging',
    'format_point',
    'format_seconds',
]
__version__ = '0.1.0'
