"""A stack of screen states with deferred transitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class State(ABC):
    """One screen of the game."""

    @abstractmethod
    def enter(self) -> None:
        """Called when the state becomes the active one."""

    @abstractmethod
    def exit(self) -> None:
        """Called when the state is removed from the top of the stack."""

    @abstractmethod
    def handle_input(self) -> None:
        """Process input for this frame."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance by dt seconds."""

    @abstractmethod
    def render_top_screen(self, app: Any, renderer: Any) -> None:
        """Draw the top screen."""

    @abstractmethod
    def render_bottom_screen(self, app: Any, renderer: Any) -> None:
        """Draw the bottom screen."""


class StateMachine:
    """Stack of states; push, pop and change take effect on process_state_changes()."""

    def __init__(self) -> None:
        self._states: list[State] = []
        self._new_state: State | None = None
        self._is_adding = False
        self._is_removing = False
        self._is_replacing = False

    def push_state(self, state: State) -> None:
        self._is_adding = True
        self._is_replacing = False
        self._new_state = state

    def pop_state(self) -> None:
        self._is_removing = True

    def change_state(self, state: State) -> None:
        self._is_adding = True
        self._is_replacing = True
        self._new_state = state

    def process_state_changes(self) -> None:
        """Apply the pending pop, then the pending push or change."""
        if self._is_removing and self._states:
            self._states.pop().exit()
            if self._states:
                self._states[-1].enter()
            self._is_removing = False

        if self._is_adding and self._new_state is not None:
            if self._states and self._is_replacing:
                self._states.pop().exit()
            self._states.append(self._new_state)
            self._new_state.enter()
            self._is_adding = False

    def _active(self) -> State | None:
        return self._states[-1] if self._states else None

    def handle_input(self) -> None:
        if (state := self._active()) is not None:
            state.handle_input()

    def update(self, dt: float) -> None:
        if (state := self._active()) is not None:
            state.update(dt)

    def render_top_screen(self, app: Any, renderer: Any) -> None:
        if (state := self._active()) is not None:
            state.render_top_screen(app, renderer)

    def render_bottom_screen(self, app: Any, renderer: Any) -> None:
        if (state := self._active()) is not None:
            state.render_bottom_screen(app, renderer)