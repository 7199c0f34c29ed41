"""Shop offers: jokers, extra deck cards and hand upgrades."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from .cards import Card, HandType, Rank, Suit, hand_type_name, rank_to_string, suit_to_string
from .joker import Joker, draw_from_candidates, plain_joker, weak_or_medium_pool_filtered
from .run_state import RunState

SHOP_OFFER_COUNT = 3
DECK_CARD_OFFER_PRICE = 4
HAND_UPGRADE_OFFER_PRICE = 6

_FULL_SUIT_NAMES = {
    Suit.HEARTS: "Hearts",
    Suit.DIAMONDS: "Diamonds",
    Suit.CLUBS: "Clubs",
    Suit.SPADES: "Spades",
}

_FULL_RANK_NAMES = {
    Rank.ACE: "Ace",
    Rank.TWO: "Two",
    Rank.THREE: "Three",
    Rank.FOUR: "Four",
    Rank.FIVE: "Five",
    Rank.SIX: "Six",
    Rank.SEVEN: "Seven",
    Rank.EIGHT: "Eight",
    Rank.NINE: "Nine",
    Rank.TEN: "Ten",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
}


class ShopOfferKind(Enum):
    JOKER = "joker"
    DECK_CARD = "deck_card"
    HAND_UPGRADE = "hand_upgrade"


@dataclass
class ShopOffer:
    """One item for sale; which fields matter depends on the kind."""

    kind: ShopOfferKind = ShopOfferKind.JOKER
    joker: Joker = field(default_factory=plain_joker)
    card: Card = field(default_factory=lambda: Card(Suit.CLUBS, Rank.ACE))
    hand_type: HandType = HandType.HIGH_CARD
    price: int = 0


@dataclass
class ShopSlot:
    """A shop position holding an offer, which may be sold or unavailable."""

    offer: ShopOffer = field(default_factory=ShopOffer)
    sold: bool = False
    unavailable: bool = False

    @property
    def disabled(self) -> bool:
        return self.sold or self.unavailable


def _unavailable_slot() -> ShopSlot:
    return ShopSlot(ShopOffer(price=0), unavailable=True)


def _joker_slot(rng: random.Random, run_state: RunState) -> ShopSlot:
    candidates = [
        joker
        for joker in weak_or_medium_pool_filtered(run_state.owned_joker_ids())
        if run_state.is_joker_shop_available(joker.id())
    ]
    if not candidates:
        return _unavailable_slot()
    joker = draw_from_candidates(candidates, rng)
    price = rng.randint(joker.shop_price_range.min, joker.shop_price_range.max)
    return ShopSlot(ShopOffer(kind=ShopOfferKind.JOKER, joker=joker, price=price))


def _deck_card_slot(rng: random.Random) -> ShopSlot:
    suit = Suit(rng.randint(0, 3))
    rank = Rank(rng.randint(1, 13))
    return ShopSlot(
        ShopOffer(kind=ShopOfferKind.DECK_CARD, card=Card(suit, rank), price=DECK_CARD_OFFER_PRICE)
    )


def _hand_upgrade_slot(rng: random.Random) -> ShopSlot:
    hand_type = HandType(rng.randint(0, len(HandType) - 1))
    return ShopSlot(
        ShopOffer(
            kind=ShopOfferKind.HAND_UPGRADE,
            hand_type=hand_type,
            price=HAND_UPGRADE_OFFER_PRICE,
        )
    )


def generate_shop_offers(
    rng: random.Random, run_state: RunState
) -> tuple[ShopSlot, ShopSlot, ShopSlot]:
    """Roll the three shop slots: a joker, a deck card and a hand upgrade."""
    return (_joker_slot(rng, run_state), _deck_card_slot(rng), _hand_upgrade_slot(rng))


def apply_shop_offer_purchase(run_state: RunState, slot: ShopSlot) -> bool:
    """Buy the slot's offer if allowed; return whether the purchase happened."""
    offer = slot.offer
    if slot.disabled or run_state.money < offer.price:
        return False
    if offer.kind == ShopOfferKind.JOKER and len(run_state.jokers) >= run_state.joker_limit:
        return False

    run_state.money -= offer.price
    if offer.kind == ShopOfferKind.JOKER:
        run_state.jokers.append(offer.joker)
        run_state.mark_joker_removed_from_shop_pool(offer.joker.id())
    elif offer.kind == ShopOfferKind.DECK_CARD:
        run_state.add_card_to_run_deck(offer.card.suit, offer.card.rank)
    else:
        run_state.level_up_hand(offer.hand_type)

    slot.sold = True
    return True


def shop_offer_title(offer: ShopOffer) -> str:
    """Short heading shown on a shop card."""
    if offer.kind == ShopOfferKind.JOKER:
        return offer.joker.name
    if offer.kind == ShopOfferKind.DECK_CARD:
        return f"Add {rank_to_string(offer.card.rank)}{suit_to_string(offer.card.suit)}"
    return f"Level {hand_type_name(offer.hand_type)}"


def shop_offer_description(offer: ShopOffer) -> str:
    """Longer explanation of what buying the offer does."""
    if offer.kind == ShopOfferKind.JOKER:
        return offer.joker.description
    if offer.kind == ShopOfferKind.DECK_CARD:
        rank_name = _FULL_RANK_NAMES.get(offer.card.rank, "Unknown Rank")
        suit_name = _FULL_SUIT_NAMES.get(offer.card.suit, "Unknown Suit")
        return f"Add {rank_name} of {suit_name} to your deck"
    return f"{hand_type_name(offer.hand_type)} gains +10 chips and +1 mult"