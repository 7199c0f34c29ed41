"""Geometry of card hands on screen and card sprite-sheet lookup."""

from __future__ import annotations

from dataclasses import dataclass

from .cards import Card, Rank, Suit

CARD_W = 40
CARD_H = 56
CARD_SPACING = 36
SELECT_OFFSET = 12
SPRITE_SHEET_CELL_W = 40
SPRITE_SHEET_CELL_H = 56

_SPRITE_ROWS = {Suit.HEARTS: 0, Suit.CLUBS: 1, Suit.DIAMONDS: 2, Suit.SPADES: 3}
_SPRITE_COLUMNS = {
    Rank.TWO: 0,
    Rank.THREE: 1,
    Rank.FOUR: 2,
    Rank.FIVE: 3,
    Rank.SIX: 4,
    Rank.SEVEN: 5,
    Rank.EIGHT: 6,
    Rank.NINE: 7,
    Rank.TEN: 8,
    Rank.JACK: 9,
    Rank.QUEEN: 10,
    Rank.KING: 11,
    Rank.ACE: 12,
}


@dataclass(frozen=True)
class HandLayoutMetrics:
    card_w: int
    card_h: int
    card_spacing: int
    select_offset: int
    cursor_w: int
    cursor_h: int
    cursor_gap: int


@dataclass(frozen=True)
class SpriteRect:
    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True)
class CardRenderPlan:
    draw_base_texture: bool
    base_source: SpriteRect
    overlay_source: SpriteRect


_DEFAULT_LAYOUT = HandLayoutMetrics(CARD_W, CARD_H, CARD_SPACING, SELECT_OFFSET, 8, 4, 4)


def default_hand_layout() -> HandLayoutMetrics:
    return _DEFAULT_LAYOUT


def gameplay_hand_layout() -> HandLayoutMetrics:
    return _DEFAULT_LAYOUT


def hand_width_for_count(card_count: int, layout: HandLayoutMetrics = _DEFAULT_LAYOUT) -> int:
    """Width covered by an overlapping row of cards."""
    if card_count <= 0:
        return 0
    return (card_count - 1) * layout.card_spacing + layout.card_w


def hand_start_x(
    center_x: int, card_count: int, layout: HandLayoutMetrics = _DEFAULT_LAYOUT
) -> int:
    return center_x - hand_width_for_count(card_count, layout) // 2


def hand_card_x(
    center_x: int, card_count: int, index: int, layout: HandLayoutMetrics = _DEFAULT_LAYOUT
) -> int:
    return hand_start_x(center_x, card_count, layout) + index * layout.card_spacing


def hand_index_at_x(
    mouse_x: int, center_x: int, card_count: int, layout: HandLayoutMetrics = _DEFAULT_LAYOUT
) -> int:
    """Index of the card under mouse_x, or -1; the right edge is exclusive."""
    if card_count <= 0:
        return -1
    start_x = hand_start_x(center_x, card_count, layout)
    if mouse_x < start_x:
        return -1
    if mouse_x >= start_x + hand_width_for_count(card_count, layout):
        return -1
    return min((mouse_x - start_x) // layout.card_spacing, card_count - 1)


def sprite_sheet_source_rect(card: Card) -> SpriteRect:
    """Cell of the card in the sprite sheet: one row per suit, one column per rank."""
    return SpriteRect(
        _SPRITE_COLUMNS.get(card.rank, 0) * SPRITE_SHEET_CELL_W,
        _SPRITE_ROWS.get(card.suit, 0) * SPRITE_SHEET_CELL_H,
        SPRITE_SHEET_CELL_W,
        SPRITE_SHEET_CELL_H,
    )


def desktop_render_plan(card: Card) -> CardRenderPlan:
    """Which texture regions to draw for a card."""
    base = SpriteRect(SPRITE_SHEET_CELL_W, 0, SPRITE_SHEET_CELL_W, SPRITE_SHEET_CELL_H)
    return CardRenderPlan(False, base, sprite_sheet_source_rect(card))