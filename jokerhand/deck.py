"""A shuffleable draw pile of cards."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .cards import Card


class Deck:
    """Draw pile; cards are drawn from the end of the pile."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards: list[Card] = []

    def load_cards(self, cards: Iterable[Card]) -> None:
        """Replace the pile with a copy of the given cards."""
        self._cards = list(cards)

    def shuffle(self) -> None:
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            raise IndexError("cannot draw from an empty deck")
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)