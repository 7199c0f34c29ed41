"""Jokers: scoring modifiers, their catalogue and shop draws."""

from __future__ import annotations

import random
from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass
from enum import Enum

from .cards import Card, HandType, Suit


@dataclass
class HandEvalContext:
    """What a joker sees of a played hand; chips and mult are updated in place."""

    played_hand: HandType
    played_cards: Sequence[Card]
    played_card_count: int
    scoring_cards: Sequence[Card]
    scoring_card_count: int
    contains_pair: bool
    chips: int
    mult: int


class JokerEffectType(Enum):
    ADD_CHIPS = "add_chips"
    ADD_MULT = "add_mult"
    MUL_MULT = "mul_mult"


class JokerTier(Enum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


@dataclass(frozen=True)
class ShopPriceRange:
    min: int
    max: int


_WEAK_PRICES = ShopPriceRange(4, 6)
_MEDIUM_PRICES = ShopPriceRange(6, 8)
_STRONG_PRICES = ShopPriceRange(8, 10)


@dataclass(frozen=True)
class Joker:
    name: str
    description: str
    effect_type: JokerEffectType
    evaluate: Callable[[HandEvalContext], None] | None = None
    tier: JokerTier = JokerTier.WEAK
    shop_price_range: ShopPriceRange = _WEAK_PRICES
    sell_value: int = 2

    def id(self) -> str:
        """Stable catalogue identity of the joker."""
        return self.name


def _plain(ctx: HandEvalContext) -> None:
    ctx.mult += 2


def _greedy(ctx: HandEvalContext) -> None:
    if ctx.played_hand == HandType.PAIR:
        ctx.chips += 20


def _suit(ctx: HandEvalContext) -> None:
    ctx.mult += 2 * sum(card.suit == Suit.SPADES for card in ctx.scoring_cards)


def _focused(ctx: HandEvalContext) -> None:
    if ctx.played_card_count <= 3:
        ctx.mult += 8


def _flush(ctx: HandEvalContext) -> None:
    if ctx.played_hand == HandType.FLUSH:
        ctx.chips += 40


def _straight(ctx: HandEvalContext) -> None:
    if ctx.played_hand == HandType.STRAIGHT:
        ctx.chips += 40


def _heavy(ctx: HandEvalContext) -> None:
    ctx.mult += 5


def _aggro(ctx: HandEvalContext) -> None:
    if ctx.played_hand != HandType.HIGH_CARD:
        ctx.chips += 60


def _precision(ctx: HandEvalContext) -> None:
    if ctx.scoring_card_count == 1:
        ctx.mult += 12


def plain_joker() -> Joker:
    return Joker("Plain Joker", "+2 Mult", JokerEffectType.ADD_MULT, _plain,
                 JokerTier.WEAK, _WEAK_PRICES, 2)


def greedy_joker() -> Joker:
    return Joker("Greedy Joker", "+20 Chips if Pair", JokerEffectType.ADD_CHIPS, _greedy,
                 JokerTier.WEAK, _WEAK_PRICES, 2)


def suit_joker() -> Joker:
    return Joker("Suit Joker", "+2 Mult per scoring Spade", JokerEffectType.ADD_MULT, _suit,
                 JokerTier.WEAK, _WEAK_PRICES, 2)


def focused_joker() -> Joker:
    return Joker("Focused Joker", "+8 Mult if <= 3 cards played", JokerEffectType.ADD_MULT,
                 _focused, JokerTier.MEDIUM, _MEDIUM_PRICES, 3)


def flush_joker() -> Joker:
    return Joker("Flush Joker", "+40 Chips if played hand is Flush", JokerEffectType.ADD_CHIPS,
                 _flush, JokerTier.MEDIUM, _MEDIUM_PRICES, 3)


def straight_joker() -> Joker:
    return Joker("Straight Joker", "+40 Chips if played hand is Straight",
                 JokerEffectType.ADD_CHIPS, _straight, JokerTier.MEDIUM, _MEDIUM_PRICES, 3)


def heavy_joker() -> Joker:
    return Joker("Heavy Joker", "+5 Mult", JokerEffectType.ADD_MULT, _heavy,
                 JokerTier.STRONG, _STRONG_PRICES, 4)


def aggro_joker() -> Joker:
    return Joker("Aggro Joker", "+60 Chips if Pair or better", JokerEffectType.ADD_CHIPS,
                 _aggro, JokerTier.STRONG, _STRONG_PRICES, 4)


def precision_joker() -> Joker:
    return Joker("Precision Joker", "+12 Mult if exactly 1 card scores",
                 JokerEffectType.ADD_MULT, _precision, JokerTier.STRONG, _STRONG_PRICES, 4)


_WEAK_POOL = (plain_joker(), greedy_joker(), suit_joker())
_MEDIUM_POOL = (focused_joker(), flush_joker(), straight_joker())
_STRONG_POOL = (heavy_joker(), aggro_joker(), precision_joker())
_WEAK_OR_MEDIUM_POOL = _WEAK_POOL + _MEDIUM_POOL


def weak_pool() -> tuple[Joker, ...]:
    return _WEAK_POOL


def medium_pool() -> tuple[Joker, ...]:
    return _MEDIUM_POOL


def strong_pool() -> tuple[Joker, ...]:
    return _STRONG_POOL


def draw_from_pool(pool: Sequence[Joker], rng: random.Random) -> Joker:
    """Pick one joker uniformly from a non-empty pool."""
    if not pool:
        raise ValueError("cannot draw from an empty joker pool")
    return pool[rng.randrange(len(pool))]


def tier_for_weighted_roll(roll: int) -> JokerTier:
    """Map a roll in 1..100 to a tier with a 50/35/15 split."""
    if roll <= 50:
        return JokerTier.WEAK
    if roll <= 85:
        return JokerTier.MEDIUM
    return JokerTier.STRONG


def draw_weak_or_medium(rng: random.Random) -> Joker:
    return draw_from_pool(_WEAK_OR_MEDIUM_POOL, rng)


def draw_weighted_full_pool(rng: random.Random) -> Joker:
    tier = tier_for_weighted_roll(rng.randint(1, 100))
    pools = {
        JokerTier.WEAK: _WEAK_POOL,
        JokerTier.MEDIUM: _MEDIUM_POOL,
        JokerTier.STRONG: _STRONG_POOL,
    }
    return draw_from_pool(pools[tier], rng)


def _filtered(pool: Sequence[Joker], excluded_ids: Collection[str]) -> list[Joker]:
    return [joker for joker in pool if joker.id() not in excluded_ids]


def weak_pool_filtered(excluded_ids: Collection[str]) -> list[Joker]:
    return _filtered(_WEAK_POOL, excluded_ids)


def medium_pool_filtered(excluded_ids: Collection[str]) -> list[Joker]:
    return _filtered(_MEDIUM_POOL, excluded_ids)


def strong_pool_filtered(excluded_ids: Collection[str]) -> list[Joker]:
    return _filtered(_STRONG_POOL, excluded_ids)


def weak_or_medium_pool_filtered(excluded_ids: Collection[str]) -> list[Joker]:
    return weak_pool_filtered(excluded_ids) + medium_pool_filtered(excluded_ids)


def draw_from_candidates(candidates: Sequence[Joker], rng: random.Random) -> Joker:
    """Pick a candidate uniformly; fall back to the plain joker when there are none."""
    if not candidates:
        return plain_joker()
    return candidates[rng.randrange(len(candidates))]