# Randomized cluster packing of picture frames on a wall.
#   seed one frame at random → grow outward from placed frames (12 candidates per anchor)
#   → stop once the placed area reaches the target coverage.
# No rotation anywhere.

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging, math, random

logger = logging.getLogger(__name__)

# ---------------- Configuration ----------------
WALL_W, WALL_H = 230, 140
FRAME_SIZES = [(10, 15), (15, 10), (13, 18), (18, 13), (16, 9), (9, 9)]
MARGIN_RANGE = (2, 5)           # half-open [min, max)
TARGET_COVERAGE = 0.54          # fraction of wall area to fill
CANDIDATES_PER_ANCHOR = 12
MAX_STALLED_PASSES = 25         # None = loop until the target is met
# ------------------------------------------------

# ---------- Core data types ----------
@dataclass(frozen=True)
class Wall:
    width: int
    height: int

    @property
    def area(self) -> int: return self.width * self.height

@dataclass(frozen=True)
class FrameSize:
    width: int
    height: int

@dataclass(frozen=True)
class PlacedFrame:
    x: int
    y: int
    width: int
    height: int
    margin: int = 0  # margin drawn for the attempt that placed it

    @property
    def right(self) -> int: return self.x + self.width
    @property
    def bottom(self) -> int: return self.y + self.height
    @property
    def area(self) -> int: return self.width * self.height
    @property
    def size(self) -> FrameSize: return FrameSize(self.width, self.height)

# ---------- Errors ----------
class LayoutConfigError(ValueError):
    """Raised before placement when wall, catalog or margins cannot work together."""

class LayoutIncomplete(RuntimeError):
    """The growth loop stopped making progress before reaching the target coverage."""

    def __init__(self, frames: List[PlacedFrame], coverage: float, passes: int):
        self.frames = frames
        self.coverage = coverage
        self.passes = passes
        super().__init__(
            f"layout stalled after {passes} passes at {coverage * 100.0:.1f}% coverage "
            f"({len(frames)} frames placed)"
        )

# ---------- Coverage ----------
def total_area(frames: Sequence[PlacedFrame]) -> int:
    return sum(f.area for f in frames)

def coverage_ratio(wall: Wall, frames: Sequence[PlacedFrame]) -> float:
    return total_area(frames) / float(max(1, wall.area))

def required_area(wall: Wall, coverage: float = TARGET_COVERAGE) -> int:
    return int(math.floor(wall.area * coverage))

# ---------- Geometry ----------
def collides(candidate: PlacedFrame, placed: Sequence[PlacedFrame], margin: int) -> bool:
    """
    True if any placed frame lies less than `margin` away from the candidate
    on both axes. With margin 0, sharing an edge is fine but any overlap is not.
    """
    for o in placed:
        if (candidate.x < o.right + margin and
                candidate.right + margin > o.x and
                candidate.y < o.bottom + margin and
                candidate.bottom + margin > o.y):
            return True
    return False

def in_bounds(frame: PlacedFrame, wall: Wall) -> bool:
    return frame.x >= 0 and frame.y >= 0 and frame.right <= wall.width and frame.bottom <= wall.height

def candidate_positions(anchor: PlacedFrame, size: FrameSize, margin: int) -> List[PlacedFrame]:
    """The 12 spots for `size` around `anchor`: 4 edges, 4 corners, 4 touching diagonals."""
    w, h, m = size.width, size.height, margin
    left, right = anchor.x - w - m, anchor.right + m
    above, below = anchor.y - h - m, anchor.bottom + m
    spots = [
        (left, anchor.y), (right, anchor.y),                 # left / right
        (anchor.x, above), (anchor.x, below),                # above / below
        (left, anchor.y - m), (right, anchor.y - m),         # top-left / top-right
        (left, below), (right, below),                       # bottom-left / bottom-right
        (anchor.x - w, anchor.y - h), (anchor.right, anchor.y - h),      # diagonals, no gap
        (anchor.x - w, anchor.bottom), (anchor.right, anchor.bottom),
    ]
    return [PlacedFrame(x, y, w, h, m) for x, y in spots]

# ---------- Validation ----------
def _as_sizes(frame_sizes: Sequence) -> List[FrameSize]:
    out = []
    for fs in frame_sizes:
        if isinstance(fs, FrameSize):
            out.append(fs)
        else:
            w, h = fs
            out.append(FrameSize(int(w), int(h)))
    return out

def validate_config(wall: Wall, frame_sizes: Sequence[FrameSize],
                    margin_range: Tuple[int, int], coverage: float = TARGET_COVERAGE) -> None:
    if wall.width <= 0 or wall.height <= 0:
        raise LayoutConfigError(f"wall must have positive dimensions, got {wall.width}x{wall.height}")
    if not frame_sizes:
        raise LayoutConfigError("frame catalog is empty")
    for fs in frame_sizes:
        if fs.width <= 0 or fs.height <= 0:
            raise LayoutConfigError(f"frame {fs.width}x{fs.height} must have positive dimensions")
        if fs.width >= wall.width or fs.height >= wall.height:
            raise LayoutConfigError(
                f"frame {fs.width}x{fs.height} must be strictly smaller than the "
                f"{wall.width}x{wall.height} wall in both dimensions"
            )
    lo, hi = margin_range
    if lo < 0:
        raise LayoutConfigError(f"minimum margin must be >= 0, got {lo}")
    if lo >= hi:
        raise LayoutConfigError(f"margin range [{lo}, {hi}) is empty (min must be < max)")
    if not (0.0 < coverage <= 1.0):
        raise LayoutConfigError(f"coverage must be in (0, 1], got {coverage}")

# ---------- Placement ----------
def _place_near(size: FrameSize, placed: List[PlacedFrame], wall: Wall,
                margin: int, rng: random.Random) -> Optional[PlacedFrame]:
    for anchor in placed:
        candidates = candidate_positions(anchor, size, margin)
        rng.shuffle(candidates)
        for cand in candidates:
            if in_bounds(cand, wall) and not collides(cand, placed, margin):
                return cand
    return None

def place_frames(wall: Wall, frame_sizes: Sequence, margin_range: Tuple[int, int] = MARGIN_RANGE,
                 rng: Optional[random.Random] = None, coverage: float = TARGET_COVERAGE,
                 max_stalled_passes: Optional[int] = MAX_STALLED_PASSES) -> List[PlacedFrame]:
    """
    Grow a cluster of frames from one random seed placement until
    `coverage` of the wall is covered.

    Random draws happen in a fixed order (seed x, seed y; per pass one catalog
    shuffle; per catalog entry one margin draw and one candidate shuffle per
    anchor tried), so a seeded `rng` reproduces the same layout.

    Raises LayoutConfigError for an unusable configuration and LayoutIncomplete
    after `max_stalled_passes` consecutive passes that placed nothing.
    """
    sizes = _as_sizes(frame_sizes)
    validate_config(wall, sizes, margin_range, coverage)
    rng = rng or random.Random()
    lo, hi = margin_range

    target = required_area(wall, coverage)
    first = sizes[0]
    seed = PlacedFrame(rng.randrange(wall.width - first.width),
                       rng.randrange(wall.height - first.height),
                       first.width, first.height)
    placed: List[PlacedFrame] = [seed]
    area = seed.area

    order = list(sizes)  # shuffled in place every pass; the caller's catalog is untouched
    passes = stalled = 0
    while area < target:
        logger.debug("pass %d: coverage %d%%", passes, (area * 100) // wall.area)
        passes += 1
        rng.shuffle(order)
        placed_this_pass = 0

        for size in order:
            if area >= target:
                break
            margin = rng.randrange(lo, hi)
            frame = _place_near(size, placed, wall, margin, rng)
            if frame is None:
                continue
            placed.append(frame)
            area += frame.area
            placed_this_pass += 1

        if placed_this_pass:
            stalled = 0
            continue
        stalled += 1
        if max_stalled_passes is not None and stalled >= max_stalled_passes:
            raise LayoutIncomplete(placed, area / float(wall.area), passes)

    logger.info("Placed %d frames in %d passes, coverage %.1f%%",
                len(placed), passes, coverage_ratio(wall, placed) * 100.0)
    return placed
