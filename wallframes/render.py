# Rasterize a placed-frame layout: numpy pixel buffer → PNG (Pillow),
# plus an optional matplotlib preview panel with frame outlines and coverage.

from typing import Optional, Sequence, Tuple
import logging, os
import numpy as np
from PIL import Image

from .layout import PlacedFrame, Wall, coverage_ratio

logger = logging.getLogger(__name__)

OUTPUT_PNG = "wall_visualization.png"
BACKGROUND = (255, 255, 255)

# per-frame colour = base + index * step, wrapped to one byte
COLOR_BASE = (100, 50, 150)
COLOR_STEP = (20, 15, 10)

def frame_color(index: int) -> Tuple[int, int, int]:
    return tuple((b + index * s) % 256 for b, s in zip(COLOR_BASE, COLOR_STEP))

def rasterize(wall: Wall, frames: Sequence[PlacedFrame]) -> np.ndarray:
    """White (H, W, 3) uint8 buffer with every frame filled in placement order."""
    buf = np.full((wall.height, wall.width, 3), BACKGROUND, dtype=np.uint8)
    for i, f in enumerate(frames):
        # clip to the wall like a canvas would
        x0, y0 = max(0, f.x), max(0, f.y)
        x1, y1 = min(wall.width, f.right), min(wall.height, f.bottom)
        if x1 <= x0 or y1 <= y0:
            continue
        buf[y0:y1, x0:x1] = frame_color(i)
    return buf

def save_png(wall: Wall, frames: Sequence[PlacedFrame], path: str = OUTPUT_PNG) -> Optional[str]:
    """Encode the layout as PNG. Returns the path, or None if the file could not be written."""
    img = Image.fromarray(rasterize(wall, frames))
    try:
        out_dir = os.path.dirname(path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        img.save(path, format="PNG")
    except (OSError, ValueError) as e:
        logger.error("Error writing %s: %s", path, e)
        return None
    logger.info("Visualization saved as %s", path)
    return path

def render_preview(wall: Wall, frames: Sequence[PlacedFrame], save_path: str,
                   title: Optional[str] = None) -> Optional[str]:
    """
    Save a matplotlib figure of the layout: the rasterized wall, a thin outline
    per frame and the achieved coverage in the title.
    """
    import matplotlib
    matplotlib.use("Agg", force=True)
    import matplotlib.pyplot as plt
    import matplotlib.patches as patches

    fig, ax = plt.subplots(figsize=(max(4, wall.width / 40.0), max(3, wall.height / 40.0)))
    try:
        ax.imshow(rasterize(wall, frames), extent=(0, wall.width, wall.height, 0),
                  interpolation="nearest")
        ax.set_xlim(0, wall.width); ax.set_ylim(wall.height, 0)
        ax.set_aspect('equal', adjustable='box')
        ax.add_patch(patches.Rectangle((0, 0), wall.width, wall.height, fill=False, linewidth=2))
        for f in frames:
            ax.add_patch(patches.Rectangle((f.x, f.y), f.width, f.height,
                                           fill=False, linewidth=0.6, edgecolor=(0, 0, 0, 0.6)))
        cov = coverage_ratio(wall, frames) * 100.0
        head = title or f"{wall.width}x{wall.height} wall"
        ax.set_title(f"{head}\n{len(frames)} frames • Coverage: {cov:.1f}%")
        fig.tight_layout()

        save_dir = os.path.dirname(save_path)
        if save_dir:
            os.makedirs(save_dir, exist_ok=True)
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
    except (OSError, ValueError) as e:
        logger.error("Error writing preview %s: %s", save_path, e)
        return None
    finally:
        plt.close(fig)
    logger.info("Saved preview figure: %s", save_path)
    return save_path
