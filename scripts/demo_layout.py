#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.clusterlayout.layout.policies import FixedByGridLayoutPolicy, MinWidthLayoutPolicy


def main() -> None:
    parser = argparse.ArgumentParser(description="Demo: card sizes across a range of scroller widths")
    parser.add_argument("--desired-width", type=int, default=160, help="Desired 1x card width (px)")
    parser.add_argument("--peeking", type=float, default=0.1)
    parser.add_argument("--min-width", type=int, default=140, help="Minimum card width, no-peeking mode (px)")
    parser.add_argument("--padding", type=int, default=8, help="Padding between cards, no-peeking mode (px)")
    parser.add_argument("--width", type=int, action="append", default=[], help="Scroller width (repeatable)")
    args = parser.parse_args()

    widths = args.width or [360, 412, 600, 800, 1024, 1280]
    grid = FixedByGridLayoutPolicy(
        desired_child_width_px=args.desired_width,
        child_peeking_fraction=args.peeking,
        scroller_height_ratio=9 / 16,
    )
    fitted = MinWidthLayoutPolicy(min_width_per_card_px=args.min_width, padding_px=args.padding)

    print(f"Peeking {args.peeking:g}, desired card {args.desired_width}px")
    for w in widths:
        child = grid.calculate_child_width(w)
        print(f"- {w}px: card {child}px, scroller height {grid.calculate_scroller_height(child)}px")

    print(f"\nNo peeking, min card {args.min_width}px, padding {args.padding}px")
    for w in widths:
        layout = fitted.calculate(w)
        print(f"- {w}px: {layout.count} x {layout.card_width_px}px")


if __name__ == "__main__":
    main()
