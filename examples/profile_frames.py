"""Profile the update and render steps using :mod:`digirain.timing`.

Run with::

    PYTHONPATH=src python examples/profile_frames.py

Frames are rendered into memory, so the terminal is left alone.  Pass
``--help`` to see options for grid size, frame count and periodic logging.
"""

from __future__ import annotations

import argparse
import logging

from digirain.grid import MAX_HEIGHT, MAX_WIDTH
from digirain.renderer import render_frame
from digirain.state import RainState
from digirain.timing import FrameTimer, format_summary


LOGGER = logging.getLogger(__name__)


def run_frames(state: RainState, frames: int, timer: FrameTimer) -> int:
    """Advance and render ``frames`` frames; return the bytes produced."""

    grid = state.grid
    produced = 0
    for _ in range(frames):
        with timer.section("update"):
            state.step()
        with timer.section("render"):
            produced += len(render_frame(grid, grid.height, grid.width))
    return produced


def print_summary(timer: FrameTimer) -> None:
    summary = timer.summary(sort_by="total")
    if not summary:
        print("No timings recorded.")
        return
    width = max(len(row["name"]) for row in summary)
    header = f"{'Section':<{width}}  Total (ms)  Count  Avg (ms)  Max (ms)"
    print(header)
    print("-" * len(header))
    for row in summary:
        print(
            f"{row['name']:<{width}}  {row['total'] * 1000.0:10.3f}"
            f"  {int(row['count']):5d}  {row['average'] * 1000.0:8.3f}"
            f"  {row['max'] * 1000.0:8.3f}"
        )


def log_summary(timer: FrameTimer, *, index: int) -> list[dict[str, float | int]]:
    summary = timer.summary(sort_by="total")
    LOGGER.info("Batch %d performance: %s", index, format_summary(summary))
    return summary


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--frames", type=int, default=200, help="Frames per batch.")
    parser.add_argument("--batches", type=int, default=1, help="How many batches to run.")
    parser.add_argument("--height", type=int, default=MAX_HEIGHT, help="Grid rows.")
    parser.add_argument("--width", type=int, default=MAX_WIDTH, help="Grid columns.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the generator.")
    parser.add_argument(
        "--log-interval",
        type=int,
        default=1,
        help="Emit a performance summary every N batches (0 logs only the last).",
    )
    parser.add_argument(
        "--no-table",
        dest="print_table",
        action="store_false",
        help="Skip printing the final tabular summary (logging only).",
    )
    parser.set_defaults(print_table=True)
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    state = RainState.create(height=args.height, width=args.width, seed=args.seed)
    timer = FrameTimer()
    for batch in range(1, args.batches + 1):
        run_frames(state, args.frames, timer)
        last = batch == args.batches
        if last or (args.log_interval > 0 and batch % args.log_interval == 0):
            log_summary(timer, index=batch)
            if not last:
                timer.reset()

    if args.print_table:
        print_summary(timer)


if __name__ == "__main__":
    main()
