"""Classifying and scoring played poker hands."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .cards import Card, HandType, Rank, Suit, rank_chip_value
from .joker import HandEvalContext, Joker
from .run_state import BossBlindModifier, RunState

_BASE_VALUES: dict[HandType, tuple[int, int]] = {
    HandType.HIGH_CARD: (5, 1),
    HandType.PAIR: (10, 2),
    HandType.TWO_PAIR: (20, 2),
    HandType.THREE_OF_A_KIND: (30, 3),
    HandType.STRAIGHT: (30, 4),
    HandType.FLUSH: (35, 4),
    HandType.FULL_HOUSE: (40, 4),
    HandType.FOUR_OF_A_KIND: (60, 7),
    HandType.STRAIGHT_FLUSH: (100, 8),
    HandType.ROYAL_FLUSH: (100, 8),
}

_FACE_RANKS = frozenset({Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE})
_ROYAL_RANKS = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE})


@dataclass
class HandResult:
    """Outcome of evaluating a played hand."""

    detected_hand: HandType
    contains_pair: bool
    scoring_cards: list[Card] = field(default_factory=list)
    base_hand_chips: int = 0
    base_hand_mult: int = 0
    scoring_card_chip_bonus: int = 0
    final_chips: int = 0
    final_mult: int = 0
    final_score: int = 0
    score_equation_exact: bool = True


def _rank_sort_value(rank: Rank) -> int:
    return 14 if rank == Rank.ACE else int(rank)


def _percent(value: int, percent: int) -> int:
    """Integer percentage, truncating toward zero."""
    scaled = abs(value) * percent // 100
    return scaled if value >= 0 else -scaled


def lookup_base_values(hand_type: HandType, level: int = 1) -> tuple[int, int]:
    """Base (chips, mult) of a hand type; each level above 1 adds 10 chips and 1 mult."""
    chips, mult = _BASE_VALUES.get(hand_type, (5, 1))
    extra = max(0, level - 1)
    return chips + extra * 10, mult + extra


def rank_counts(cards: Iterable[Card]) -> list[tuple[Rank, int]]:
    """Rank multiplicities, most frequent first, then highest rank (ace high)."""
    counts = Counter(card.rank for card in cards)
    return sorted(
        counts.items(),
        key=lambda item: (-item[1], -_rank_sort_value(item[0])),
    )


def is_straight(cards: Sequence[Card]) -> bool:
    """True for five or more cards of consecutive ranks, counting the ace low."""
    if len(cards) < 5:
        return False
    values = sorted(int(card.rank) for card in cards)
    return all(b == a + 1 for a, b in zip(values, values[1:]))


def is_flush(cards: Sequence[Card]) -> bool:
    """True for five or more cards that all share one suit."""
    if len(cards) < 5:
        return False
    return len({card.suit for card in cards}) == 1


def classify_hand(
    cards: Sequence[Card],
    counts: Sequence[tuple[Rank, int]],
    flush: bool,
    straight: bool,
) -> HandType:
    """Best hand type for the played cards."""
    if flush and straight:
        if _ROYAL_RANKS <= {card.rank for card in cards}:
            return HandType.ROYAL_FLUSH
        return HandType.STRAIGHT_FLUSH
    top = counts[0][1] if counts else 0
    second = counts[1][1] if len(counts) >= 2 else 0
    if top == 4:
        return HandType.FOUR_OF_A_KIND
    if top == 3 and second == 2:
        return HandType.FULL_HOUSE
    if flush:
        return HandType.FLUSH
    if straight:
        return HandType.STRAIGHT
    if top == 3:
        return HandType.THREE_OF_A_KIND
    if top == 2 and second == 2:
        return HandType.TWO_PAIR
    if top == 2:
        return HandType.PAIR
    return HandType.HIGH_CARD


def select_scoring_cards(
    cards: Sequence[Card],
    counts: Sequence[tuple[Rank, int]],
    hand_type: HandType,
) -> list[Card]:
    """The cards that contribute chips for the given hand type."""
    if hand_type in (
        HandType.ROYAL_FLUSH,
        HandType.STRAIGHT_FLUSH,
        HandType.FULL_HOUSE,
        HandType.FLUSH,
        HandType.STRAIGHT,
    ):
        return list(cards)
    if hand_type in (HandType.FOUR_OF_A_KIND, HandType.THREE_OF_A_KIND, HandType.PAIR):
        wanted = {counts[0][0]}
        return [card for card in cards if card.rank in wanted]
    if hand_type == HandType.TWO_PAIR:
        wanted = {counts[0][0], counts[1][0]}
        return [card for card in cards if card.rank in wanted]
    if not cards:
        return []
    return [max(cards, key=lambda card: _rank_sort_value(card.rank))]


def _scoring_card_chip_bonus(scoring_cards: Iterable[Card]) -> int:
    return sum(rank_chip_value(card.rank) for card in scoring_cards)


def boss_chip_penalty(
    scoring_cards: Iterable[Card],
    boss_modifier: BossBlindModifier,
    blocked_suit: Suit,
) -> int:
    """Chips a boss modifier takes away from the scoring cards after jokers."""
    penalty = 0
    for card in scoring_cards:
        if boss_modifier == BossBlindModifier.SUIT_LOCK and card.suit == blocked_suit:
            penalty += rank_chip_value(card.rank)
        elif boss_modifier == BossBlindModifier.FACE_TAX and card.rank in _FACE_RANKS:
            penalty += rank_chip_value(card.rank) // 2
    return penalty


def _final_totals(
    hand_type: HandType,
    played_cards: Sequence[Card],
    scoring_cards: Sequence[Card],
    contains_pair: bool,
    chips_after_scoring_cards: int,
    base_mult: int,
    jokers: Iterable[Joker],
    penalty: int,
    boss_modifier: BossBlindModifier,
) -> tuple[int, int, int, bool]:
    ctx = HandEvalContext(
        played_hand=hand_type,
        played_cards=played_cards,
        played_card_count=len(played_cards),
        scoring_cards=scoring_cards,
        scoring_card_count=len(scoring_cards),
        contains_pair=contains_pair,
        chips=chips_after_scoring_cards,
        mult=base_mult,
    )
    for joker in jokers:
        if joker.evaluate is not None:
            joker.evaluate(ctx)

    chips, mult = ctx.chips, ctx.mult
    if boss_modifier in (BossBlindModifier.SUIT_LOCK, BossBlindModifier.FACE_TAX):
        chips -= penalty

    score = chips * mult
    exact = True
    if boss_modifier == BossBlindModifier.PAIR_TAX:
        if hand_type in (HandType.PAIR, HandType.TWO_PAIR):
            score, exact = _percent(score, 75), False
    elif boss_modifier == BossBlindModifier.SMALL_HAND_PUNISH:
        if len(played_cards) <= 3:
            score, exact = _percent(score, 70), False
    elif boss_modifier == BossBlindModifier.HIGH_CARD_WALL:
        if hand_type in (HandType.HIGH_CARD, HandType.PAIR):
            score, exact = _percent(score, 70), False
    return chips, mult, score, exact


def evaluate(
    cards: Sequence[Card],
    jokers: Iterable[Joker] = (),
    boss_modifier: BossBlindModifier = BossBlindModifier.NONE,
    blocked_suit: Suit = Suit.CLUBS,
    run_state: RunState | None = None,
) -> HandResult:
    """Classify the played cards and compute their score."""
    cards = list(cards)
    counts = rank_counts(cards)
    flush = is_flush(cards)
    straight = is_straight(cards)
    contains_pair = any(count >= 2 for _, count in counts)

    detected = HandType.HIGH_CARD if not cards else classify_hand(cards, counts, flush, straight)
    scoring = select_scoring_cards(cards, counts, detected)

    level = run_state.hand_level(detected) if run_state is not None else 1
    base_chips, base_mult = lookup_base_values(detected, level)
    raw_bonus = _scoring_card_chip_bonus(scoring)
    penalty = boss_chip_penalty(scoring, boss_modifier, blocked_suit)

    chips, mult, score, exact = _final_totals(
        detected,
        cards,
        scoring,
        contains_pair,
        base_chips + raw_bonus,
        base_mult,
        jokers,
        penalty,
        boss_modifier,
    )

    return HandResult(
        detected_hand=detected,
        contains_pair=contains_pair,
        scoring_cards=scoring,
        base_hand_chips=base_chips,
        base_hand_mult=base_mult,
        scoring_card_chip_bonus=raw_bonus - penalty,
        final_chips=chips,
        final_mult=mult,
        final_score=score,
        score_equation_exact=exact,
    )