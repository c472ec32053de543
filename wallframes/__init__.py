from .layout import (
    FRAME_SIZES, MARGIN_RANGE, TARGET_COVERAGE, WALL_H, WALL_W,
    FrameSize, LayoutConfigError, LayoutIncomplete, PlacedFrame, Wall,
    collides, coverage_ratio, in_bounds, place_frames,
)
from .render import rasterize, save_png

__version__ = "0.1.0"
