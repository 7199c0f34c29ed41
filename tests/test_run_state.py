import random

import pytest

from jokerhand.cards import HandType, Rank, Suit
from jokerhand.joker import medium_pool, plain_joker, strong_pool, weak_pool
from jokerhand.run_state import (
    BLIND_REWARDS,
    BLIND_SKIP_REWARD,
    BLIND_TARGETS,
    MAX_ANTE,
    BlindStage,
    BossBlindModifier,
    RunState,
    blind_stage_name,
    boss_modifier_description,
    boss_modifier_name,
    target_for_ante,
    target_for_blind,
)


@pytest.fixture
def run():
    state = RunState(random.Random(1234))
    state.start_new_run()
    return state


def test_new_run_starts_at_small_blind(run):
    run.start_round()
    assert run.ante == 1
    assert run.money == 4
    assert run.blind_stage == BlindStage.SMALL
    assert run.next_boss_modifier != BossBlindModifier.NONE
    assert run.round_target == 300
    assert run.current_blind_reward() == 2


def test_targets_scale_by_blind_stage():
    assert BLIND_TARGETS[0].small == 300
    assert BLIND_TARGETS[0].big == 450
    assert BLIND_TARGETS[2].boss == 4800
    assert BLIND_REWARDS == (2, 3, 4)
    assert target_for_blind(1, BlindStage.BIG) == 450
    assert target_for_blind(3, BlindStage.BOSS) == 4800
    assert target_for_blind(8, BlindStage.BOSS) == 100000


def test_target_for_ante_clamps_to_table():
    assert target_for_ante(0) == 300
    assert target_for_ante(99) == 50000


def test_advancing_blind_requires_three_clears_per_ante(run):
    assert run.blind_stage == BlindStage.SMALL
    run.advance_blind()
    assert run.blind_stage == BlindStage.BIG
    assert run.ante == 1
    run.advance_blind()
    assert run.blind_stage == BlindStage.BOSS
    assert run.ante == 1
    run.advance_blind()
    assert run.blind_stage == BlindStage.SMALL
    assert run.ante == 2


def test_blind_reward_is_fixed_by_blind_type(run):
    run.hands_remaining = 0
    run.discards_remaining = 0
    run.award_round_win()
    assert run.money == 6
    run.advance_blind()
    run.award_round_win()
    assert run.money == 9
    run.advance_blind()
    run.award_round_win()
    assert run.money == 13


def test_run_completes_on_ante_eight_boss_clear(run):
    run.ante = MAX_ANTE
    run.blind_stage = BlindStage.BOSS
    run.start_round()
    run.add_round_score(run.round_target)
    assert run.is_run_complete()
    assert not run.should_visit_shop_after_blind_win()


def test_advance_blind_stays_put_after_final_boss(run):
    run.ante = MAX_ANTE
    run.blind_stage = BlindStage.BOSS
    run.advance_blind()
    assert run.ante == MAX_ANTE
    assert run.blind_stage == BlindStage.BOSS


def test_next_blind_preview_uses_next_shop_step(run):
    assert run.should_visit_shop_after_blind_win()
    assert run.next_blind_stage() == BlindStage.BIG
    assert run.next_blind_ante() == 1
    run.blind_stage = BlindStage.BIG
    assert run.next_blind_stage() == BlindStage.BOSS
    assert run.next_blind_ante() == 1
    run.blind_stage = BlindStage.BOSS
    assert run.next_blind_stage() == BlindStage.SMALL
    assert run.next_blind_ante() == 2


def test_boss_modifier_roll_can_use_seeded_rng():
    left = RunState()
    right = RunState()
    left.roll_next_boss_modifier(random.Random(17))
    right.roll_next_boss_modifier(random.Random(17))
    assert left.next_boss_modifier != BossBlindModifier.NONE
    assert left.next_boss_modifier == right.next_boss_modifier
    assert left.next_blocked_suit == right.next_blocked_suit


def test_non_suit_lock_roll_keeps_clubs():
    for seed in range(50):
        state = RunState()
        state.roll_next_boss_modifier(random.Random(seed))
        if state.next_boss_modifier != BossBlindModifier.SUIT_LOCK:
            assert state.next_blocked_suit == Suit.CLUBS


def test_enter_current_blind_promotes_previewed_boss_modifier(run):
    run.blind_stage = BlindStage.BOSS
    run.next_boss_modifier = BossBlindModifier.SUIT_LOCK
    run.next_blocked_suit = Suit.SPADES
    run.enter_current_blind()
    assert run.current_boss_modifier == BossBlindModifier.SUIT_LOCK
    assert run.current_blocked_suit == Suit.SPADES


def test_advance_blind_activates_stored_boss_modifier_and_rolls_preview(run):
    run.blind_stage = BlindStage.BIG
    run.next_boss_modifier = BossBlindModifier.FACE_TAX
    run.next_blocked_suit = Suit.HEARTS
    run.advance_blind()
    assert run.blind_stage == BlindStage.BOSS
    assert run.current_boss_modifier == BossBlindModifier.FACE_TAX
    assert run.current_blocked_suit == Suit.HEARTS
    assert run.next_boss_modifier != BossBlindModifier.NONE


def test_leaving_boss_blind_clears_current_modifier(run):
    run.ante = 1
    run.blind_stage = BlindStage.BOSS
    run.current_boss_modifier = BossBlindModifier.PAIR_TAX
    run.current_blocked_suit = Suit.DIAMONDS
    run.advance_blind()
    assert run.ante == 2
    assert run.blind_stage == BlindStage.SMALL
    assert run.current_boss_modifier == BossBlindModifier.NONE
    assert run.current_blocked_suit == Suit.CLUBS


def test_boss_modifier_descriptions_match_implemented_semantics():
    assert (
        boss_modifier_description(BossBlindModifier.SUIT_LOCK, Suit.HEARTS)
        == "Subtracts Hearts rank chips after jokers"
    )
    assert (
        boss_modifier_description(BossBlindModifier.FACE_TAX, Suit.CLUBS)
        == "Subtracts half of J, Q, K, A chips after jokers"
    )


def test_names():
    assert boss_modifier_name(BossBlindModifier.PAIR_TAX) == "Pair Tax"
    assert boss_modifier_name(BossBlindModifier.NONE) == "None"
    assert blind_stage_name(BlindStage.BOSS) == "Boss Blind"


def test_run_scoped_shop_availability(run):
    for joker in (*weak_pool(), *medium_pool(), *strong_pool()):
        assert run.is_joker_shop_available(joker.id())

    plain_id = plain_joker().id()
    run.mark_joker_removed_from_shop_pool(plain_id)
    assert not run.is_joker_shop_available(plain_id)
    run.mark_joker_returned_to_shop_pool(plain_id)
    assert run.is_joker_shop_available(plain_id)

    run.mark_joker_removed_from_shop_pool(plain_id)
    assert not run.is_joker_shop_available(plain_id)
    run.start_new_run()
    assert run.is_joker_shop_available(plain_id)

    run.jokers.append(plain_joker())
    assert plain_id in run.owned_joker_ids()


def test_award_blind_skip_adds_money(run):
    before = run.money
    run.award_blind_skip()
    assert run.money == before + BLIND_SKIP_REWARD


def test_reroll_cost_resets_on_new_run(run):
    assert run.reroll_cost == 5
    run.reroll_cost = 9
    run.start_new_run()
    assert run.reroll_cost == 5


def test_new_run_builds_canonical_deck_with_unique_instance_ids(run):
    cards = run.run_deck_cards()
    assert len(cards) == 52
    assert len({card.instance_id for card in cards}) == 52


def test_start_round_loads_live_deck_without_mutating_canonical_deck(run):
    canonical_before = run.run_deck_cards()
    run.start_round()
    assert len(run.run_deck_cards()) == 52
    assert len(run.round_deck()) == 52
    assert len(run.run_deck_cards()) == len(canonical_before)

    run.round_deck().draw()
    assert len(run.round_deck()) == 51
    assert run.run_deck_cards() == canonical_before


def test_deck_mutation_apis_affect_canonical_deck_and_future_rounds(run):
    added_id = run.add_card_to_run_deck(Suit.HEARTS, Rank.ACE)
    assert len(run.run_deck_cards()) == 53

    run.start_round()
    assert len(run.round_deck()) == 53

    source = run.run_deck_cards()[0]
    duplicate_id = run.duplicate_card_in_run_deck(source.instance_id)
    assert len(run.run_deck_cards()) == 54
    assert duplicate_id != source.instance_id

    removed = run.remove_card_from_run_deck(added_id)
    assert removed.instance_id == added_id
    assert len(run.run_deck_cards()) == 53

    run.start_round()
    assert len(run.round_deck()) == 53


def test_missing_instance_ids_raise(run):
    with pytest.raises(KeyError):
        run.remove_card_from_run_deck(9999)
    with pytest.raises(KeyError):
        run.duplicate_card_in_run_deck(9999)


def test_interest_payout_uses_five_dollar_bands_and_cap(run):
    run.money = 4
    assert run.interest_payout() == 0
    run.money = 10
    assert run.interest_payout() == 2
    run.money = 40
    assert run.interest_payout() == 5


def test_award_interest_adds_current_payout(run):
    run.money = 19
    run.award_interest()
    assert run.money == 22


def test_hand_levels_reset_and_upgrade_independently(run):
    assert run.hand_level(HandType.PAIR) == 1
    assert run.hand_level(HandType.FLUSH) == 1
    run.level_up_hand(HandType.PAIR)
    run.level_up_hand(HandType.PAIR)
    assert run.hand_level(HandType.PAIR) == 3
    assert run.hand_level(HandType.FLUSH) == 1
    run.start_new_run()
    assert run.hand_level(HandType.PAIR) == 1