"""Playing cards, suits, ranks and poker hand types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Suit(IntEnum):
    """Card suit; the numeric order is the suit sort order."""

    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3


class Rank(IntEnum):
    """Card rank; the value is the face number, with the ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


class CardEnhancement(Enum):
    NONE = "none"


class CardEdition(Enum):
    NONE = "none"


class CardSeal(Enum):
    NONE = "none"


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card with a per-run instance id."""

    suit: Suit
    rank: Rank
    instance_id: int = 0
    enhancement: CardEnhancement = CardEnhancement.NONE
    edition: CardEdition = CardEdition.NONE
    seal: CardSeal = CardSeal.NONE


class HandType(IntEnum):
    """Poker hand categories, weakest first."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


_RANK_LABELS = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

_SUIT_LABELS = {
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
    Suit.CLUBS: "C",
    Suit.SPADES: "S",
}

_HAND_TYPE_NAMES = {
    HandType.HIGH_CARD: "High Card",
    HandType.PAIR: "Pair",
    HandType.TWO_PAIR: "Two Pair",
    HandType.THREE_OF_A_KIND: "Three of a Kind",
    HandType.STRAIGHT: "Straight",
    HandType.FLUSH: "Flush",
    HandType.FULL_HOUSE: "Full House",
    HandType.FOUR_OF_A_KIND: "Four of a Kind",
    HandType.STRAIGHT_FLUSH: "Straight Flush",
    HandType.ROYAL_FLUSH: "Royal Flush",
}


def rank_to_string(rank: Rank) -> str:
    """Short label of a rank, such as "A", "10" or "K"."""
    return _RANK_LABELS.get(rank, "?")


def suit_to_string(suit: Suit) -> str:
    """One-letter label of a suit."""
    return _SUIT_LABELS.get(suit, "?")


def suit_is_red(suit: Suit) -> bool:
    """True for hearts and diamonds."""
    return suit in (Suit.HEARTS, Suit.DIAMONDS)


def rank_chip_value(rank: Rank) -> int:
    """Chips a scoring card of this rank adds."""
    if rank == Rank.ACE:
        return 11
    if rank >= Rank.TEN:
        return 10
    return int(rank)


def hand_type_name(hand_type: HandType) -> str:
    """Display name of a hand type."""
    return _HAND_TYPE_NAMES.get(hand_type, "???")