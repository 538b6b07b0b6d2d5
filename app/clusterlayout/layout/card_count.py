"""Card count / card width helpers for horizontally scrollable clusters.

A cluster is a row of equally sized cards. Two sizing modes are supported:

- peeking: cards are sized around a desired 1x card width and a fraction of
  one extra card is left visible at the edge to hint that the row scrolls.
- minimum width: no peeking card; as many cards as fit at a minimum width,
  separated by fixed padding (no leading/trailing padding).

Everything here is pure integer/float math. Callers pass measured widths in
and apply the returned dimensions themselves.
"""

from __future__ import annotations

import math

MIN_UNIT_CARD_COUNT = 3


def round_half_up(value: float) -> int:
    """Round to nearest int, .5 goes up (unlike the builtin banker's round)."""

    whole = math.floor(value)
    # compare the fraction instead of adding 0.5: 0.49999999999999994 + 0.5 == 1.0
    if value - whole >= 0.5:
        return int(whole) + 1
    return int(whole)


def _div_toward_zero(numerator: int, denominator: int) -> int:
    """Integer division that truncates toward zero (`//` floors)."""

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def _check_peeking_args(
    desired_unit_card_width_px: int, width_for_children_px: int, peeking_amount: float
) -> None:
    if desired_unit_card_width_px <= 0:
        raise ValueError("desired_unit_card_width_px must be > 0")
    if width_for_children_px < 0:
        raise ValueError("width_for_children_px must be >= 0")
    if not 0.0 <= peeking_amount <= 1.0:
        raise ValueError("peeking_amount must be within [0, 1]")


def compute_card_count(
    *,
    desired_unit_card_width_px: int,
    width_for_children_px: int,
    peeking_amount: float,
) -> float:
    """Number of cards to show, including the peeking fraction.

    max(3, round(width_for_children / desired_unit_card_width - peeking)) + peeking

    The whole part never drops below MIN_UNIT_CARD_COUNT, and the peeking
    amount is added back exactly, so the result is always >= 3 + peeking.
    """

    _check_peeking_args(desired_unit_card_width_px, width_for_children_px, peeking_amount)

    raw_count = width_for_children_px / desired_unit_card_width_px
    whole_count = round_half_up(raw_count - peeking_amount)
    return float(max(whole_count, MIN_UNIT_CARD_COUNT) + peeking_amount)


def compute_unit_card_width(
    *,
    desired_unit_card_width_px: int,
    width_for_children_px: int,
    peeking_amount: float,
) -> int:
    """Actual width of a 1x card so that the card count fills the width."""

    card_count = compute_card_count(
        desired_unit_card_width_px=desired_unit_card_width_px,
        width_for_children_px=width_for_children_px,
        peeking_amount=peeking_amount,
    )
    # card_count >= MIN_UNIT_CARD_COUNT, never zero.
    return round_half_up(width_for_children_px / card_count)


def compute_max_card_count_for_min_width_per_card(
    *,
    min_width_per_card_px: int,
    width_for_children_px: int,
    padding_px: int,
) -> int:
    """Largest card count that fits without a peeking card.

    |card|pad|card|pad|card|
    |----width_for_children----|

    Solves N*min + (N-1)*padding <= width for the largest N. At least one
    card is always returned, even if it overflows the available width.
    """

    if min_width_per_card_px <= 0:
        raise ValueError("min_width_per_card_px must be > 0")
    if width_for_children_px < 0:
        raise ValueError("width_for_children_px must be >= 0")
    if padding_px < 0:
        raise ValueError("padding_px must be >= 0")

    n = _div_toward_zero(width_for_children_px + padding_px, min_width_per_card_px + padding_px)
    return int(max(n, 1))


def compute_card_width_from_minimum_width(
    *,
    count: int,
    width_for_children_px: int,
    padding_px: int,
) -> int:
    """Per-card width for `count` cards separated by padding.

    When count is 0 there is nothing to size, so the available width is
    returned unchanged. The division truncates toward zero, so padding wider
    than the available width gives a small negative width, not an error.
    """

    if count < 0:
        raise ValueError("count must be >= 0")
    if width_for_children_px < 0:
        raise ValueError("width_for_children_px must be >= 0")
    if padding_px < 0:
        raise ValueError("padding_px must be >= 0")

    if count == 0:
        return int(width_for_children_px)
    return _div_toward_zero(width_for_children_px - (count - 1) * padding_px, count)
