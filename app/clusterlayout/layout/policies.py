"""Cluster layout policies.

A policy turns a measured scroller width into child dimensions. It owns the
content padding at the start/end of the scroller; the card math itself
lives in card_count.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from app.clusterlayout.layout.card_count import (
    compute_card_width_from_minimum_width,
    compute_max_card_count_for_min_width_per_card,
    compute_unit_card_width,
    round_half_up,
)


def _width_for_children(scroller_width_px: int, start_px: int, end_px: int) -> int:
    if scroller_width_px < 0:
        raise ValueError("scroller_width_px must be >= 0")
    return max(0, int(scroller_width_px) - start_px - end_px)


@dataclass(frozen=True)
class FixedByGridLayoutPolicy:
    """Distribute the scroller width equally among the visible children.

    child_width_multiplier: 2 for a 2x card, etc. The unit width is computed
    first and then multiplied.
    scroller_height_ratio: height / child width. None leaves the scroller
    height to the caller.
    A scroller narrower than its content padding leaves 0px for the
    children; the remainder is never negative.
    """

    desired_child_width_px: int
    child_width_multiplier: int = 1
    child_peeking_fraction: float = 0.1
    content_start_padding_px: int = 16
    content_end_padding_px: int = 16
    scroller_height_ratio: Optional[float] = None

    def __post_init__(self) -> None:
        if self.desired_child_width_px <= 0:
            raise ValueError("desired_child_width_px must be > 0")
        if self.child_width_multiplier < 1:
            raise ValueError("child_width_multiplier must be >= 1")
        if not 0.0 <= self.child_peeking_fraction <= 1.0:
            raise ValueError("child_peeking_fraction must be within [0, 1]")
        if self.content_start_padding_px < 0 or self.content_end_padding_px < 0:
            raise ValueError("content padding must be >= 0")
        if self.scroller_height_ratio is not None and self.scroller_height_ratio <= 0:
            raise ValueError("scroller_height_ratio must be > 0")

    def width_for_children(self, scroller_width_px: int) -> int:
        return _width_for_children(
            scroller_width_px, self.content_start_padding_px, self.content_end_padding_px
        )

    def calculate_child_width(self, scroller_width_px: int) -> int:
        unit = compute_unit_card_width(
            desired_unit_card_width_px=self.desired_child_width_px,
            width_for_children_px=self.width_for_children(scroller_width_px),
            peeking_amount=self.child_peeking_fraction,
        )
        return unit * self.child_width_multiplier

    def calculate_scroller_height(self, child_width_px: int) -> Optional[int]:
        if self.scroller_height_ratio is None:
            return None
        return max(1, round_half_up(child_width_px * self.scroller_height_ratio))


@dataclass(frozen=True)
class CardLayout:
    count: int
    card_width_px: int
    padding_px: int


@dataclass(frozen=True)
class MinWidthLayoutPolicy:
    """No peeking card: fit as many cards of at least min width as possible.

    As with FixedByGridLayoutPolicy, a scroller narrower than its content
    padding leaves 0px for the children rather than a negative width.
    """

    min_width_per_card_px: int
    padding_px: int = 0
    content_start_padding_px: int = 16
    content_end_padding_px: int = 16

    def __post_init__(self) -> None:
        if self.min_width_per_card_px <= 0:
            raise ValueError("min_width_per_card_px must be > 0")
        if self.padding_px < 0:
            raise ValueError("padding_px must be >= 0")
        if self.content_start_padding_px < 0 or self.content_end_padding_px < 0:
            raise ValueError("content padding must be >= 0")

    def width_for_children(self, scroller_width_px: int) -> int:
        return _width_for_children(
            scroller_width_px, self.content_start_padding_px, self.content_end_padding_px
        )

    def calculate(self, scroller_width_px: int) -> CardLayout:
        width = self.width_for_children(scroller_width_px)
        count = compute_max_card_count_for_min_width_per_card(
            min_width_per_card_px=self.min_width_per_card_px,
            width_for_children_px=width,
            padding_px=self.padding_px,
        )
        card_width = compute_card_width_from_minimum_width(
            count=count,
            width_for_children_px=width,
            padding_px=self.padding_px,
        )
        return CardLayout(count=count, card_width_px=card_width, padding_px=self.padding_px)
