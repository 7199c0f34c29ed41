import pytest

from jokerhand.card_layout import gameplay_hand_layout, hand_card_x
from jokerhand.cards import Card, HandType, Rank, Suit, rank_chip_value
from jokerhand.hand_evaluator import evaluate
from jokerhand.joker import heavy_joker, plain_joker
from jokerhand.scoring_animator import ScoringAnimator

CENTER_X = 200
STAGE_Y = 80
ROUND_SCORE = 100

CARDS = [
    Card(Suit.HEARTS, Rank.KING, 1),
    Card(Suit.SPADES, Rank.KING, 2),
    Card(Suit.CLUBS, Rank.FIVE, 3),
]
STARTS = [(10, 180), (50, 180), (90, 180)]


def make_animator(jokers=()):
    result = evaluate(CARDS, list(jokers))
    anim = ScoringAnimator(CARDS, STARTS, list(jokers), result, ROUND_SCORE, CENTER_X, STAGE_Y)
    return anim, result


def test_mismatched_start_positions_raise():
    result = evaluate(CARDS)
    with pytest.raises(ValueError):
        ScoringAnimator(CARDS, STARTS[:2], [], result, 0, CENTER_X, STAGE_Y)


def test_initial_display_uses_base_values():
    anim, result = make_animator()
    assert anim.display_chips() == result.base_hand_chips
    assert anim.display_mult() == result.base_hand_mult
    assert anim.display_round_score() == ROUND_SCORE
    assert anim.hand_type() == HandType.PAIR
    assert anim.active_joker_index() == -1
    assert not anim.is_done()


def test_initial_render_states_at_start_positions():
    anim, _ = make_animator()
    states = anim.card_render_states()
    assert [(s.draw_x, s.draw_y) for s in states] == STARTS
    assert [s.card for s in states] == CARDS
    assert not any(s.highlight for s in states)


def test_non_positive_dt_does_nothing():
    anim, _ = make_animator()
    anim.update(0.0)
    anim.update(-1.0)
    assert [(s.draw_x, s.draw_y) for s in anim.card_render_states()] == STARTS


def test_midway_fly_positions_between_start_and_target():
    anim, _ = make_animator()
    anim.update(0.2)
    layout = gameplay_hand_layout()
    for i, state in enumerate(anim.card_render_states()):
        target_x = hand_card_x(CENTER_X, len(CARDS), i, layout)
        sx, sy = STARTS[i]
        assert min(sx, target_x) <= state.draw_x <= max(sx, target_x)
        assert STAGE_Y <= state.draw_y <= sy
        assert (state.draw_x, state.draw_y) != (sx, sy)


def test_fly_lands_cards_on_stage_and_highlights_first_scorer():
    anim, result = make_animator()
    anim.update(0.4)
    layout = gameplay_hand_layout()
    states = anim.card_render_states()
    for i, state in enumerate(states):
        assert state.draw_x == hand_card_x(CENTER_X, len(CARDS), i, layout)
        assert state.draw_y == STAGE_Y
    assert [s.highlight for s in states] == [True, False, False]
    assert anim.display_chips() == result.base_hand_chips + rank_chip_value(Rank.KING)


def test_kicker_is_never_highlighted():
    anim, _ = make_animator()
    for _ in range(40):
        anim.update(0.05)
        assert not anim.card_render_states()[2].highlight


def test_joker_stage_shows_joker_snapshot():
    anim, result = make_animator([plain_joker(), heavy_joker()])
    anim.update(0.4)
    anim.update(0.3)
    assert anim.card_render_states()[1].highlight
    anim.update(0.3)
    assert anim.active_joker_index() == 0
    assert anim.display_mult() == result.base_hand_mult + 2
    assert anim.display_chips() == result.base_hand_chips + 2 * rank_chip_value(Rank.KING)
    anim.update(0.3)
    assert anim.active_joker_index() == 1
    assert anim.display_mult() == result.final_mult


def test_without_jokers_skips_to_tally():
    anim, result = make_animator()
    anim.update(0.4)
    anim.update(0.3)
    anim.update(0.3)
    assert anim.active_joker_index() == -1
    assert anim.display_chips() == result.final_chips
    assert anim.display_mult() == result.final_mult
    assert not anim.is_done()


def test_large_step_finishes_with_final_totals():
    anim, result = make_animator([plain_joker()])
    anim.update(100.0)
    assert anim.is_done()
    assert anim.display_round_score() == ROUND_SCORE + result.final_score
    assert anim.display_chips() == result.final_chips
    assert anim.display_mult() == result.final_mult
    assert anim.active_joker_index() == -1
    assert all(s.draw_y == STAGE_Y - 260 for s in anim.card_render_states())


def test_round_score_tally_is_monotonic():
    anim, result = make_animator([plain_joker()])
    seen = []
    while not anim.is_done():
        anim.update(0.05)
        seen.append(anim.display_round_score())
    assert seen == sorted(seen)
    assert seen[-1] == ROUND_SCORE + result.final_score


def test_update_after_done_is_stable():
    anim, _ = make_animator()
    anim.update(10.0)
    before = (anim.display_round_score(), anim.card_render_states())
    anim.update(1.0)
    assert (anim.display_round_score(), anim.card_render_states()) == before


def test_small_and_large_steps_reach_same_end():
    a, _ = make_animator([plain_joker()])
    b, _ = make_animator([plain_joker()])
    a.update(5.0)
    while not b.is_done():
        b.update(0.07)
    assert a.display_round_score() == b.display_round_score()
    assert a.card_render_states() == b.card_render_states()