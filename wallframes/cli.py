# ---------- CLI / Main ----------
from typing import List, Optional, Tuple
import argparse, logging, random

from .layout import (
    FRAME_SIZES, MARGIN_RANGE, MAX_STALLED_PASSES, TARGET_COVERAGE, WALL_H, WALL_W,
    FrameSize, LayoutConfigError, LayoutIncomplete, Wall, coverage_ratio, place_frames,
)
from .logging_config import setup_logging
from .render import OUTPUT_PNG, render_preview, save_png

logger = logging.getLogger(__name__)

def _parse_wh(s: str) -> Tuple[int, int]:
    # "230x140" -> (230, 140)
    s = s.lower().strip()
    if "x" not in s:
        raise argparse.ArgumentTypeError(f"expected WxH like 230x140, got {s!r}")
    w, h = s.split("x", 1)
    try:
        return int(w), int(h)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected integer WxH like 230x140, got {s!r}")

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wallframes",
        description="Randomly cluster picture frames on a wall until a coverage target is met, then save a PNG."
    )
    ap.add_argument("--wall", type=_parse_wh, default=(WALL_W, WALL_H),
                    help=f"Wall size WxH (default {WALL_W}x{WALL_H})")
    ap.add_argument("--frame", type=_parse_wh, action="append", default=None, dest="frames",
                    help="Frame size WxH; repeat for each catalog entry. The first one seeds the layout. "
                         "Default: " + " ".join(f"{w}x{h}" for w, h in FRAME_SIZES))
    ap.add_argument("--margin-min", type=int, default=MARGIN_RANGE[0],
                    help="Smallest gap between frames (inclusive)")
    ap.add_argument("--margin-max", type=int, default=MARGIN_RANGE[1],
                    help="Largest gap between frames (exclusive)")
    ap.add_argument("--coverage", type=float, default=TARGET_COVERAGE,
                    help="Fraction of the wall area to cover (default %(default)s)")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for the random source (omit for fresh randomness each run)")
    ap.add_argument("--max-stalled-passes", type=int, default=MAX_STALLED_PASSES,
                    help="Give up after this many passes in a row place nothing; 0 never gives up")
    ap.add_argument("--out", type=str, default=OUTPUT_PNG,
                    help="Output PNG path (default %(default)s)")
    ap.add_argument("--preview", type=str, default=None,
                    help="Optional: also save a matplotlib preview figure to this path")
    ap.add_argument("--verbose", action="store_true", help="Log every placement pass")
    ap.add_argument("--log-file", type=str, default=None, help="Also write the log to this file")
    return ap

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    wall = Wall(*args.wall)
    sizes = [FrameSize(w, h) for w, h in (args.frames or FRAME_SIZES)]
    stall_limit = args.max_stalled_passes if args.max_stalled_passes > 0 else None
    rng = random.Random(args.seed) if args.seed is not None else random.Random()

    status = 0
    try:
        frames = place_frames(wall, sizes, (args.margin_min, args.margin_max), rng,
                              coverage=args.coverage, max_stalled_passes=stall_limit)
    except LayoutConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 1
    except LayoutIncomplete as e:
        logger.error("%s", e)
        frames, status = e.frames, 1

    logger.info("Wall %dx%d: %d frames, coverage=%.3f",
                wall.width, wall.height, len(frames), coverage_ratio(wall, frames))

    if save_png(wall, frames, args.out) is None:
        status = 1
    if args.preview and render_preview(wall, frames, args.preview) is None:
        status = 1
    return status

# Run as script
if __name__ == "__main__":
    raise SystemExit(main())
