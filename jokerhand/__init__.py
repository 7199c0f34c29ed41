"""Rules engine for a poker-hand roguelike deck builder: cards, hands, jokers, runs, shop and scoring."""

__version__ = "1.0.0"

__all__ = [
    "asset_path",
    "card_layout",
    "cards",
    "deck",
    "hand",
    "hand_evaluator",
    "joker",
    "run_state",
    "scoring_animator",
    "shop_offer",
    "state_machine",
]