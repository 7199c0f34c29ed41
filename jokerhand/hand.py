"""Cards held by the player, with selection."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .cards import Card, Rank


def _rank_sort_value(rank: Rank) -> int:
    return 14 if rank == Rank.ACE else int(rank)


@dataclass
class _HeldCard:
    card: Card
    selected: bool = False


class Hand:
    """Up to eight held cards, of which up to five may be selected."""

    MAX_HAND_SIZE = 8
    MAX_SELECTED = 5

    def __init__(self) -> None:
        self._held: list[_HeldCard] = []

    def add_card(self, card: Card) -> bool:
        """Add a card unless the hand is full; return whether it was added."""
        if self.is_full():
            return False
        self._held.append(_HeldCard(card))
        return True

    def remove_card(self, index: int) -> None:
        """Remove the card at index; out-of-range indices are ignored."""
        if 0 <= index < len(self._held):
            del self._held[index]

    def toggle_select(self, index: int) -> None:
        """Flip selection of a card, never exceeding the selection limit."""
        if not 0 <= index < len(self._held):
            return
        held = self._held[index]
        if held.selected:
            held.selected = False
            return
        if sum(h.selected for h in self._held) < self.MAX_SELECTED:
            held.selected = True

    def clear_selection(self) -> None:
        for held in self._held:
            held.selected = False

    def sort_by_rank_descending(self) -> None:
        """Stable sort, highest rank first; aces count high."""
        self._held.sort(key=lambda h: -_rank_sort_value(h.card.rank))

    def sort_by_suit_then_rank(self) -> None:
        """Stable sort by suit order, then highest rank first."""
        self._held.sort(key=lambda h: (h.card.suit, -_rank_sort_value(h.card.rank)))

    def selected_cards(self) -> list[Card]:
        return [h.card for h in self._held if h.selected]

    def selected_indices(self) -> list[int]:
        return [i for i, h in enumerate(self._held) if h.selected]

    def remove_selected(self) -> None:
        self._held = [h for h in self._held if not h.selected]

    def is_selected(self, index: int) -> bool:
        return 0 <= index < len(self._held) and self._held[index].selected

    def is_full(self) -> bool:
        return len(self._held) >= self.MAX_HAND_SIZE

    def __len__(self) -> int:
        return len(self._held)

    def __getitem__(self, index: int) -> Card:
        if not 0 <= index < len(self._held):
            raise IndexError(f"hand index {index} out of range")
        return self._held[index].card

    def __iter__(self) -> Iterator[Card]:
        return (h.card for h in self._held)