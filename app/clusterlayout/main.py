from __future__ import annotations

import argparse
from typing import Optional, Sequence

from app.clusterlayout.layout.card_count import (
    compute_card_count,
    compute_card_width_from_minimum_width,
    compute_max_card_count_for_min_width_per_card,
    compute_unit_card_width,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cluster card count / card width calculator")
    sub = parser.add_subparsers(dest="mode", required=True)

    peeking = sub.add_parser("peeking", help="Size cards around a desired width with a peeking card")
    peeking.add_argument("--desired-width", type=int, required=True, help="Desired 1x card width (px)")
    peeking.add_argument("--width", type=int, required=True, help="Width available for the cards (px)")
    peeking.add_argument("--peeking", type=float, default=0.1, help="Peeking fraction in [0, 1]")

    min_width = sub.add_parser("min-width", help="Fit cards of a minimum width separated by padding")
    min_width.add_argument("--min-width", type=int, required=True, help="Minimum card width (px)")
    min_width.add_argument("--width", type=int, required=True, help="Width available for the cards (px)")
    min_width.add_argument("--padding", type=int, default=0, help="Padding between cards (px)")

    return parser


def run_peeking(desired_width: int, width: int, peeking: float) -> None:
    count = compute_card_count(
        desired_unit_card_width_px=desired_width,
        width_for_children_px=width,
        peeking_amount=peeking,
    )
    card_width = compute_unit_card_width(
        desired_unit_card_width_px=desired_width,
        width_for_children_px=width,
        peeking_amount=peeking,
    )
    print(f"Card count: {count:g}")
    print(f"Unit card width: {card_width}px")


def run_min_width(min_width: int, width: int, padding: int) -> None:
    count = compute_max_card_count_for_min_width_per_card(
        min_width_per_card_px=min_width,
        width_for_children_px=width,
        padding_px=padding,
    )
    card_width = compute_card_width_from_minimum_width(
        count=count,
        width_for_children_px=width,
        padding_px=padding,
    )
    print(f"Card count: {count}")
    print(f"Card width: {card_width}px")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.mode == "peeking":
            run_peeking(args.desired_width, args.width, args.peeking)
        else:
            run_min_width(args.min_width, args.width, args.padding)
    except ValueError as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
