"""Progress of a single run: antes, blinds, money, deck and hand levels."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass
from enum import Enum

from .cards import Card, HandType, Rank, Suit
from .deck import Deck
from .joker import Joker, medium_pool, strong_pool, weak_pool


@dataclass(frozen=True)
class BlindTargets:
    """Score targets of the three blinds of one ante."""

    small: int
    big: int
    boss: int


class BlindStage(Enum):
    SMALL = 0
    BIG = 1
    BOSS = 2


class BossBlindModifier(Enum):
    NONE = "none"
    PAIR_TAX = "pair_tax"
    SMALL_HAND_PUNISH = "small_hand_punish"
    SUIT_LOCK = "suit_lock"
    FACE_TAX = "face_tax"
    HIGH_CARD_WALL = "high_card_wall"


MAX_ANTE = 8
BLIND_TARGETS: tuple[BlindTargets, ...] = (
    BlindTargets(300, 450, 600),
    BlindTargets(900, 1350, 1800),
    BlindTargets(2400, 3600, 4800),
    BlindTargets(5000, 7500, 10000),
    BlindTargets(11000, 16500, 22000),
    BlindTargets(20000, 30000, 40000),
    BlindTargets(35000, 52500, 70000),
    BlindTargets(50000, 75000, 100000),
)
BLIND_REWARDS: tuple[int, int, int] = (2, 3, 4)
INTEREST_DIVISOR = 5
MAX_INTEREST = 5
BLIND_SKIP_REWARD = 3

_STARTING_ANTE = 1
_STARTING_MONEY = 4
_STARTING_HANDS = 4
_STARTING_DISCARDS = 3
_STARTING_JOKER_LIMIT = 5
_STARTING_REROLL_COST = 5

_BOSS_MODIFIERS = (
    BossBlindModifier.PAIR_TAX,
    BossBlindModifier.SMALL_HAND_PUNISH,
    BossBlindModifier.SUIT_LOCK,
    BossBlindModifier.FACE_TAX,
    BossBlindModifier.HIGH_CARD_WALL,
)

_BLIND_STAGE_NAMES = {
    BlindStage.SMALL: "Small Blind",
    BlindStage.BIG: "Big Blind",
    BlindStage.BOSS: "Boss Blind",
}

_BOSS_MODIFIER_NAMES = {
    BossBlindModifier.PAIR_TAX: "Pair Tax",
    BossBlindModifier.SMALL_HAND_PUNISH: "Small Hand Punish",
    BossBlindModifier.SUIT_LOCK: "Suit Lock",
    BossBlindModifier.FACE_TAX: "Face Tax",
    BossBlindModifier.HIGH_CARD_WALL: "High Card Wall",
    BossBlindModifier.NONE: "None",
}

_BOSS_MODIFIER_DESCRIPTIONS = {
    BossBlindModifier.PAIR_TAX: "Pair and Two Pair score 75%",
    BossBlindModifier.SMALL_HAND_PUNISH: "Hands of 3 cards or less score 70%",
    BossBlindModifier.FACE_TAX: "Subtracts half of J, Q, K, A chips after jokers",
    BossBlindModifier.HIGH_CARD_WALL: "High Card and Pair score 70%",
    BossBlindModifier.NONE: "No modifier",
}

_SUIT_FULL_NAMES = {
    Suit.HEARTS: "Hearts",
    Suit.DIAMONDS: "Diamonds",
    Suit.CLUBS: "Clubs",
    Suit.SPADES: "Spades",
}


def _ante_index(ante: int) -> int:
    return min(max(ante, 1), MAX_ANTE) - 1


def target_for_ante(ante: int) -> int:
    """Small blind target of an ante, clamped to the table."""
    return BLIND_TARGETS[_ante_index(ante)].small


def target_for_blind(ante: int, stage: BlindStage) -> int:
    """Score target of a blind, with the ante clamped to the table."""
    targets = BLIND_TARGETS[_ante_index(ante)]
    if stage == BlindStage.BIG:
        return targets.big
    if stage == BlindStage.BOSS:
        return targets.boss
    return targets.small


def blind_stage_name(stage: BlindStage) -> str:
    return _BLIND_STAGE_NAMES.get(stage, "Blind")


def boss_modifier_name(modifier: BossBlindModifier) -> str:
    return _BOSS_MODIFIER_NAMES.get(modifier, "None")


def boss_modifier_description(modifier: BossBlindModifier, blocked_suit: Suit) -> str:
    """Player-facing text explaining what a boss modifier does."""
    if modifier == BossBlindModifier.SUIT_LOCK:
        suit_name = _SUIT_FULL_NAMES.get(blocked_suit)
        if suit_name is None:
            return "Subtracts one suit's rank chips after jokers"
        return f"Subtracts {suit_name} rank chips after jokers"
    return _BOSS_MODIFIER_DESCRIPTIONS.get(modifier, "No modifier")


class RunState:
    """Mutable state of one run, from the first blind to the last."""

    MAX_ANTE = MAX_ANTE
    BLIND_TARGETS = BLIND_TARGETS
    BLIND_REWARDS = BLIND_REWARDS
    INTEREST_DIVISOR = INTEREST_DIVISOR
    MAX_INTEREST = MAX_INTEREST
    BLIND_SKIP_REWARD = BLIND_SKIP_REWARD

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.ante = _STARTING_ANTE
        self.blind_stage = BlindStage.SMALL
        self.round_target = BLIND_TARGETS[0].small
        self.round_score = 0
        self.money = _STARTING_MONEY
        self.reroll_cost = _STARTING_REROLL_COST
        self.hands_remaining = _STARTING_HANDS
        self.discards_remaining = _STARTING_DISCARDS
        self.joker_limit = _STARTING_JOKER_LIMIT
        self.current_boss_modifier = BossBlindModifier.NONE
        self.next_boss_modifier = BossBlindModifier.NONE
        self.current_blocked_suit = Suit.CLUBS
        self.next_blocked_suit = Suit.CLUBS
        self.jokers: list[Joker] = []

        self._run_deck: list[Card] = []
        self._hand_levels: dict[HandType, int] = {t: 0 for t in HandType}
        self._next_instance_id = 1
        self._round_deck = Deck(self._rng)
        self._shop_available_ids: set[str] = set()

    def _make_instance_id(self) -> int:
        instance_id = self._next_instance_id
        self._next_instance_id += 1
        return instance_id

    def start_new_run(self) -> None:
        """Reset everything to the start of a fresh run."""
        self.ante = _STARTING_ANTE
        self.blind_stage = BlindStage.SMALL
        self.money = _STARTING_MONEY
        self.reroll_cost = _STARTING_REROLL_COST
        self.joker_limit = _STARTING_JOKER_LIMIT
        self.current_boss_modifier = BossBlindModifier.NONE
        self.next_boss_modifier = BossBlindModifier.NONE
        self.current_blocked_suit = Suit.CLUBS
        self.next_blocked_suit = Suit.CLUBS
        self.jokers.clear()
        self.reset_run_deck_to_standard52()
        self._hand_levels = {t: 1 for t in HandType}
        self.roll_next_boss_modifier(self._rng)
        self.reset_shop_joker_availability()

    def start_round(self) -> None:
        """Refill hands and discards, set the target and shuffle a fresh round deck."""
        self.hands_remaining = _STARTING_HANDS
        self.discards_remaining = _STARTING_DISCARDS
        self.round_score = 0
        self.round_target = target_for_blind(self.ante, self.blind_stage)
        self.prepare_round_deck_for_current_blind()

    def add_round_score(self, points: int) -> None:
        self.round_score += points

    def award_round_win(self) -> None:
        self.money += self.current_blind_reward()

    def award_blind_skip(self) -> None:
        self.money += BLIND_SKIP_REWARD

    def roll_next_boss_modifier(self, rng: random.Random) -> None:
        """Pick the modifier previewed for the next boss blind."""
        self.next_boss_modifier = _BOSS_MODIFIERS[rng.randrange(len(_BOSS_MODIFIERS))]
        if self.next_boss_modifier == BossBlindModifier.SUIT_LOCK:
            self.next_blocked_suit = Suit(rng.randint(0, 3))
        else:
            self.next_blocked_suit = Suit.CLUBS

    def enter_current_blind(self) -> None:
        """Activate the previewed modifier on a boss blind, clear it otherwise."""
        if self.blind_stage == BlindStage.BOSS:
            self.current_boss_modifier = self.next_boss_modifier
            self.current_blocked_suit = self.next_blocked_suit
            return
        self.current_boss_modifier = BossBlindModifier.NONE
        self.current_blocked_suit = Suit.CLUBS

    def advance_blind(self) -> None:
        """Move to the next blind; after the final boss the run stays put."""
        if self.blind_stage == BlindStage.SMALL:
            self.blind_stage = BlindStage.BIG
            self.enter_current_blind()
        elif self.blind_stage == BlindStage.BIG:
            self.blind_stage = BlindStage.BOSS
            self.enter_current_blind()
            self.roll_next_boss_modifier(self._rng)
        elif self.blind_stage == BlindStage.BOSS and self.ante < MAX_ANTE:
            self.ante += 1
            self.blind_stage = BlindStage.SMALL
            self.enter_current_blind()

    def is_round_won(self) -> bool:
        return self.round_score >= self.round_target

    def is_run_complete(self) -> bool:
        return (
            self.ante >= MAX_ANTE
            and self.blind_stage == BlindStage.BOSS
            and self.is_round_won()
        )

    def is_boss_blind(self) -> bool:
        return self.blind_stage == BlindStage.BOSS

    def should_visit_shop_after_blind_win(self) -> bool:
        return not self.is_run_complete()

    def current_blind_reward(self) -> int:
        return BLIND_REWARDS[self.blind_stage.value]

    def current_blind_name(self) -> str:
        return blind_stage_name(self.blind_stage)

    def next_blind_stage(self) -> BlindStage:
        if self.blind_stage == BlindStage.SMALL:
            return BlindStage.BIG
        if self.blind_stage == BlindStage.BIG:
            return BlindStage.BOSS
        return BlindStage.SMALL

    def next_blind_ante(self) -> int:
        if self.blind_stage == BlindStage.BOSS and self.ante < MAX_ANTE:
            return self.ante + 1
        return self.ante

    def interest_payout(self) -> int:
        return min(self.money // INTEREST_DIVISOR, MAX_INTEREST)

    def award_interest(self) -> None:
        self.money += self.interest_payout()

    def hand_level(self, hand_type: HandType) -> int:
        return self._hand_levels[hand_type]

    def level_up_hand(self, hand_type: HandType) -> None:
        self._hand_levels[hand_type] += 1

    def reset_shop_joker_availability(self) -> None:
        """Make every catalogue joker available in the shop again."""
        self._shop_available_ids = {
            joker.id() for pool in (weak_pool(), medium_pool(), strong_pool()) for joker in pool
        }

    def is_joker_shop_available(self, joker_id: str) -> bool:
        return joker_id in self._shop_available_ids

    def mark_joker_removed_from_shop_pool(self, joker_id: str) -> None:
        self._shop_available_ids.discard(joker_id)

    def mark_joker_returned_to_shop_pool(self, joker_id: str) -> None:
        self._shop_available_ids.add(joker_id)

    def owned_joker_ids(self) -> set[str]:
        return {joker.id() for joker in self.jokers}

    def reset_run_deck_to_standard52(self) -> None:
        """Replace the run deck with a standard 52-card deck, renumbering ids from 1."""
        self._next_instance_id = 1
        self._run_deck = [
            Card(suit, rank, self._make_instance_id()) for suit in Suit for rank in Rank
        ]

    def prepare_round_deck_for_current_blind(self) -> None:
        self._round_deck.load_cards(self._run_deck)
        self._round_deck.shuffle()

    def run_deck_cards(self) -> tuple[Card, ...]:
        """The cards owned for the whole run, independent of the round deck."""
        return tuple(self._run_deck)

    def add_card_to_run_deck(self, suit: Suit, rank: Rank) -> int:
        """Add a new card and return its instance id."""
        card = Card(suit, rank, self._make_instance_id())
        self._run_deck.append(card)
        return card.instance_id

    def _index_of(self, instance_id: int) -> int:
        for index, card in enumerate(self._run_deck):
            if card.instance_id == instance_id:
                return index
        raise KeyError(f"no card with instance id {instance_id} in the run deck")

    def remove_card_from_run_deck(self, instance_id: int) -> Card:
        """Remove the card with the given instance id and return it."""
        return self._run_deck.pop(self._index_of(instance_id))

    def duplicate_card_in_run_deck(self, instance_id: int) -> int:
        """Copy a card under a fresh instance id and return that id."""
        source = self._run_deck[self._index_of(instance_id)]
        duplicate = dataclasses.replace(source, instance_id=self._make_instance_id())
        self._run_deck.append(duplicate)
        return duplicate.instance_id

    def round_deck(self) -> Deck:
        return self._round_deck