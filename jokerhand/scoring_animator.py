"""Step-by-step animation of a played hand being scored."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from .card_layout import gameplay_hand_layout, hand_start_x
from .cards import Card, HandType, rank_chip_value
from .hand_evaluator import HandResult
from .joker import HandEvalContext, Joker

_FLY_DURATION = 0.4
_CARD_SCORING_DURATION = 0.3
_JOKER_DURATION = 0.3
_TALLY_DURATION = 0.4
_FLY_OFF_DISTANCE = 260.0
_EPSILON = 0.0001


class _Stage(Enum):
    FLY_TO_STAGE = auto()
    CARD_SCORING = auto()
    JOKER_TRIGGER = auto()
    SCORE_TALLY = auto()
    DONE = auto()


@dataclass(frozen=True)
class RenderCardState:
    """Where one played card is drawn this frame, and whether it is highlighted."""

    card: Card
    draw_x: int
    draw_y: int
    highlight: bool


@dataclass
class _CardAnim:
    card: Card
    start_x: float
    start_y: float
    target_x: float
    target_y: float
    current_x: float
    current_y: float
    is_scoring: bool


def _same_card(a: Card, b: Card) -> bool:
    return a.suit == b.suit and a.rank == b.rank and a.instance_id == b.instance_id


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return int(rounded) if value >= 0 else -int(rounded)


class ScoringAnimator:
    """Animates cards flying to the stage, scoring one by one, jokers firing and the tally."""

    def __init__(
        self,
        cards: Sequence[Card],
        start_positions: Sequence[tuple[int, int]],
        jokers: Sequence[Joker],
        result: HandResult,
        current_round_score: int,
        stage_center_x: int,
        stage_y: int,
    ) -> None:
        cards = list(cards)
        start_positions = list(start_positions)
        if len(cards) != len(start_positions):
            raise ValueError("ScoringAnimator requires one start position per card")

        self._stage = _Stage.FLY_TO_STAGE
        self._elapsed = 0.0
        self._jokers = list(jokers)
        self._result = result
        self._active_card_idx = 0
        self._active_joker_idx = 0
        self._display_chips = result.base_hand_chips
        self._display_mult = result.base_hand_mult
        self._display_round_score = current_round_score
        self._current_round_score = current_round_score
        self._fly_off_y = 0.0

        layout = gameplay_hand_layout()
        stage_start_x = hand_start_x(stage_center_x, len(cards), layout)
        self._cards = [
            _CardAnim(
                card=card,
                start_x=float(sx),
                start_y=float(sy),
                target_x=float(stage_start_x + i * layout.card_spacing),
                target_y=float(stage_y),
                current_x=float(sx),
                current_y=float(sy),
                is_scoring=any(_same_card(sc, card) for sc in result.scoring_cards),
            )
            for i, (card, (sx, sy)) in enumerate(zip(cards, start_positions))
        ]

        self._chips_after_cards = result.base_hand_chips + sum(
            rank_chip_value(sc.rank) for sc in result.scoring_cards
        )

        sim_chips = self._chips_after_cards
        sim_mult = result.base_hand_mult
        played = list(cards)
        scoring = list(result.scoring_cards)
        self._joker_snapshots: list[tuple[int, int]] = []
        for joker in self._jokers:
            if joker.evaluate is not None:
                ctx = HandEvalContext(
                    played_hand=result.detected_hand,
                    played_cards=played,
                    played_card_count=len(played),
                    scoring_cards=scoring,
                    scoring_card_count=len(scoring),
                    contains_pair=result.contains_pair,
                    chips=sim_chips,
                    mult=sim_mult,
                )
                joker.evaluate(ctx)
                sim_chips, sim_mult = ctx.chips, ctx.mult
            self._joker_snapshots.append((sim_chips, sim_mult))

    def _advance(self, remaining: float, duration: float) -> float:
        step = min(remaining, max(0.0, duration - self._elapsed))
        self._elapsed += step
        return remaining - step

    def update(self, dt: float) -> None:
        """Advance the animation by dt seconds, crossing stage boundaries as needed."""
        if self._stage == _Stage.DONE or dt <= 0.0:
            return

        remaining = dt
        while remaining > 0.0 and self._stage != _Stage.DONE:
            if self._stage == _Stage.FLY_TO_STAGE:
                remaining = self._advance(remaining, _FLY_DURATION)
                t = min(self._elapsed / _FLY_DURATION, 1.0)
                for c in self._cards:
                    c.current_x = c.start_x + (c.target_x - c.start_x) * t
                    c.current_y = c.start_y + (c.target_y - c.start_y) * t
                if self._elapsed + _EPSILON >= _FLY_DURATION:
                    for c in self._cards:
                        c.current_x = c.target_x
                        c.current_y = c.target_y
                    self._to_card_scoring()

            elif self._stage == _Stage.CARD_SCORING:
                if not self._result.scoring_cards:
                    self._to_joker_trigger()
                    continue
                remaining = self._advance(remaining, _CARD_SCORING_DURATION)
                if self._elapsed + _EPSILON >= _CARD_SCORING_DURATION:
                    self._active_card_idx += 1
                    if self._active_card_idx >= len(self._result.scoring_cards):
                        self._to_joker_trigger()
                    else:
                        self._elapsed = 0.0
                        self._apply_card_score(self._active_card_idx)

            elif self._stage == _Stage.JOKER_TRIGGER:
                if not self._jokers:
                    self._to_score_tally()
                    continue
                remaining = self._advance(remaining, _JOKER_DURATION)
                if self._elapsed + _EPSILON >= _JOKER_DURATION:
                    self._active_joker_idx += 1
                    if self._active_joker_idx >= len(self._jokers):
                        self._to_score_tally()
                    else:
                        self._elapsed = 0.0
                        self._apply_joker_snapshot(self._active_joker_idx)

            elif self._stage == _Stage.SCORE_TALLY:
                remaining = self._advance(remaining, _TALLY_DURATION)
                t = min(self._elapsed / _TALLY_DURATION, 1.0)
                self._fly_off_y = t * _FLY_OFF_DISTANCE
                self._display_round_score = self._current_round_score + int(
                    t * float(self._result.final_score)
                )
                if self._elapsed + _EPSILON >= _TALLY_DURATION:
                    self._display_round_score = (
                        self._current_round_score + self._result.final_score
                    )
                    self._stage = _Stage.DONE

    def card_render_states(self) -> list[RenderCardState]:
        """Draw position and highlight of every played card for the current frame."""
        states = []
        active_scoring = None
        if self._stage == _Stage.CARD_SCORING and 0 <= self._active_card_idx < len(
            self._result.scoring_cards
        ):
            active_scoring = self._result.scoring_cards[self._active_card_idx]

        for c in self._cards:
            draw_x = _round_half_away(c.current_x)
            draw_y = _round_half_away(c.current_y)
            if self._stage in (_Stage.SCORE_TALLY, _Stage.DONE):
                draw_y -= _round_half_away(self._fly_off_y)
            highlight = (
                active_scoring is not None
                and c.is_scoring
                and _same_card(active_scoring, c.card)
            )
            states.append(RenderCardState(c.card, draw_x, draw_y, highlight))
        return states

    def is_done(self) -> bool:
        return self._stage == _Stage.DONE

    def display_chips(self) -> int:
        return self._display_chips

    def display_mult(self) -> int:
        return self._display_mult

    def display_round_score(self) -> int:
        return self._display_round_score

    def hand_type(self) -> HandType:
        return self._result.detected_hand

    def active_joker_index(self) -> int:
        """Index of the joker currently firing, or -1 outside the joker stage."""
        return self._active_joker_idx if self._stage == _Stage.JOKER_TRIGGER else -1

    def _to_card_scoring(self) -> None:
        self._stage = _Stage.CARD_SCORING
        self._elapsed = 0.0
        self._active_card_idx = 0
        self._display_chips = self._result.base_hand_chips
        self._display_mult = self._result.base_hand_mult
        if self._result.scoring_cards:
            self._apply_card_score(0)

    def _to_joker_trigger(self) -> None:
        self._display_chips = self._chips_after_cards
        self._active_joker_idx = 0
        if not self._jokers:
            self._to_score_tally()
            return
        self._stage = _Stage.JOKER_TRIGGER
        self._elapsed = 0.0
        self._apply_joker_snapshot(0)

    def _to_score_tally(self) -> None:
        self._stage = _Stage.SCORE_TALLY
        self._elapsed = 0.0
        self._fly_off_y = 0.0
        self._display_chips = self._result.final_chips
        self._display_mult = self._result.final_mult

    def _apply_card_score(self, card_idx: int) -> None:
        self._display_chips += rank_chip_value(self._result.scoring_cards[card_idx].rank)

    def _apply_joker_snapshot(self, joker_idx: int) -> None:
        self._display_chips, self._display_mult = self._joker_snapshots[joker_idx]