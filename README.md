# jokerhand

The game logic of a poker-hand roguelike deck builder, as a plain Python library with no
dependencies beyond the standard library. You give it cards and get back hand types, chip and
mult totals, shop offers and animation frames.

## Modules

- `jokerhand.cards`: the `Suit`, `Rank`, `Card` and `HandType` types, and the helpers
  `rank_to_string`, `suit_to_string`, `suit_is_red`, `rank_chip_value` and `hand_type_name`.
- `jokerhand.deck`: `Deck`, a shuffleable draw pile. It takes an optional `random.Random`.
  `draw()` takes from the end of the pile and raises `IndexError` when the pile is empty.
- `jokerhand.hand`: `Hand`, the held cards. It holds at most eight cards, and at most five of
  them can be selected at once. It can sort by rank (aces high) or by suit and then rank.
- `jokerhand.joker`: the nine-joker catalogue, split into weak, medium and strong pools
  (`weak_pool()`, `medium_pool()`, `strong_pool()`). Draws can be uniform, weighted 50/35/15
  by tier (`draw_weighted_full_pool`), or made from filtered candidates. `draw_from_candidates`
  falls back to the plain joker when it has no candidates.
- `jokerhand.run_state`: `RunState`, the state of one run. It covers:
  - antes 1 to 8, each with a small, big and boss blind, and their targets and rewards;
  - interest of $1 per $5 held, up to $5;
  - a level for each hand type;
  - boss blind modifiers, with the next one previewed in advance;
  - which jokers the shop may still offer;
  - the run's own deck, kept apart from the deck that is shuffled for each round.

  `remove_card_from_run_deck` and `duplicate_card_in_run_deck` raise `KeyError` for an
  unknown instance id.
- `jokerhand.state_machine`: `State`, an abstract base class, and `StateMachine`. Push, pop
  and change requests are deferred, and only take effect when `process_state_changes()` is
  called.
- `jokerhand.asset_path`: `resolve_asset_path(relative_path, current_dir, executable_dir)`.
  It looks for the file under the current directory and up to five of its ancestors, then
  under the executable directory and its ancestors. If nothing is found it returns the
  relative path unchanged.
- `jokerhand.hand_evaluator`: `evaluate`, which classifies a played hand and returns a
  `HandResult`. Scoring applies the hand level from a `RunState`, the jokers in order, and any
  boss modifier. The lower-level steps are available on their own: `rank_counts`,
  `is_straight`, `is_flush`, `classify_hand`, `select_scoring_cards`, `lookup_base_values` and
  `boss_chip_penalty`.
- `jokerhand.shop_offer`: `generate_shop_offers` rolls three `ShopSlot`s: a joker, a deck card
  and a hand upgrade. `apply_shop_offer_purchase` buys one and reports whether it succeeded.
  `shop_offer_title` and `shop_offer_description` give the text to show for an offer.
- `jokerhand.card_layout`: the geometry of a fanned hand (`hand_start_x`, `hand_card_x`,
  `hand_index_at_x`), plus sprite-sheet source rectangles for cards.
- `jokerhand.scoring_animator`: `ScoringAnimator` replays scoring a hand over time:
  1. the cards fly to the stage;
  2. each scoring card adds its chips;
  3. each joker fires;
  4. the round score is tallied.

  Call `update(dt)` each frame, and read `card_render_states()` and the display values.

## Example

```python
import random

from jokerhand.cards import Card, Rank, Suit, hand_type_name
from jokerhand.hand_evaluator import evaluate
from jokerhand.joker import plain_joker
from jokerhand.run_state import RunState

run = RunState(random.Random(7))
run.start_new_run()
run.start_round()

played = [Card(Suit.HEARTS, Rank.KING), Card(Suit.SPADES, Rank.KING)]
result = evaluate(played, [plain_joker()], run_state=run)
print(hand_type_name(result.detected_hand), result.final_chips, result.final_mult, result.final_score)

run.add_round_score(result.final_score)
if run.is_round_won():
    run.award_round_win()
    run.advance_blind()
```

## What it does not do

This is a library only. It has no window, no drawing, no input handling, no main loop and no
command to start a game. `StateMachine` passes its `app` and `renderer` arguments through to
your own `State` subclasses untouched. `card_layout` and `ScoringAnimator` compute positions
and rectangles, but they draw nothing. No screens such as a title, blind-select or shop screen
are included.

## Installing and testing

```
pip install ".[test]"
pytest
```