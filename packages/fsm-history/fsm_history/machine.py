"""StateMachine - event-driven transitions with undo/redo."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from fsm_history.history import History
from fsm_history.types import (
    BASELINE_STATE,
    EventName,
    InvalidArgumentError,
    MachineConfig,
    StateName,
    UndefinedTransitionError,
    UnknownStateError,
)

logger = logging.getLogger(__name__)


class StateMachine:
    """Finite state machine over a fixed transition table.

    Forward moves (``change_state``, ``trigger``) are recorded in a linear
    history and drop anything that could be redone. ``undo``/``redo`` report
    unavailability by returning False instead of raising.

    ``on_transition(old, new)`` fires after any operation that committed a
    change of the current state.

    Not thread-safe; guard shared instances externally.
    """

    def __init__(
        self,
        config: MachineConfig | Mapping[str, Any] | None = None,
        *,
        on_transition: Callable[[StateName, StateName], None] | None = None,
    ) -> None:
        if config is None:
            raise InvalidArgumentError("StateMachine requires a config")
        if not isinstance(config, MachineConfig):
            config = MachineConfig.from_dict(config)
        self._config = config
        self._states = config.states
        self._initial = config.initial
        self._current = config.initial
        self._history = History(BASELINE_STATE)
        self._on_transition = on_transition

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(state={self._current!r}, "
            f"history={len(self._history)}, redo={len(self._history.undo_log)})"
        )

    # --- read-only views ---

    @property
    def config(self) -> MachineConfig:
        return self._config

    @property
    def initial_state(self) -> StateName:
        return self._initial

    @property
    def history(self) -> tuple[StateName, ...]:
        return self._history.entries

    @property
    def undo_log(self) -> tuple[StateName, ...]:
        return self._history.undo_log

    @property
    def redo_available(self) -> bool:
        return self._history.redo_available

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.redo_available

    def get_state(self) -> StateName:
        """Return the active state."""
        return self._current

    def get_states(self, event: EventName | None = None) -> list[StateName]:
        """Return state names in table order.

        With *event*, only states that have a rule for it are returned.
        """
        if event is None:
            return list(self._states)
        return [
            name
            for name, state_def in self._states.items()
            if event in state_def.transitions
        ]

    # --- forward moves ---

    def change_state(self, state: StateName) -> None:
        """Jump to *state* regardless of transition rules.

        Raises UnknownStateError if *state* is not in the transition table.
        """
        if state not in self._states:
            raise UnknownStateError(state)
        self._advance(state)

    def trigger(self, event: EventName) -> None:
        """Follow the current state's rule for *event*.

        Raises UndefinedTransitionError if there is no such rule, including
        when the current state is missing from the table.
        """
        state_def = self._states.get(self._current)
        target = state_def.target(event) if state_def is not None else None
        if target is None:
            raise UndefinedTransitionError(self._current, event)
        self._advance(target)

    def _advance(self, state: StateName) -> None:
        old = self._current
        self._current = state
        self._history.record(state)
        logger.debug("transition %r -> %r", old, state)
        self._notify(old, state)

    # --- navigation ---

    def reset(self) -> None:
        """Return to the initial state. History and redo are left as they are."""
        old = self._current
        self._current = self._initial
        logger.debug("reset %r -> %r", old, self._initial)
        self._notify(old, self._initial)

    def undo(self) -> bool:
        """Step back one entry in history. Returns False if nothing to undo."""
        old = self._current
        previous = self._history.step_back(old)
        if previous is None:
            return False
        self._current = previous
        logger.debug("undo %r -> %r", old, previous)
        self._notify(old, previous)
        return True

    def redo(self) -> bool:
        """Replay the earliest pending undone state. Returns False if none."""
        old = self._current
        state = self._history.step_forward()
        if state is None:
            return False
        self._current = state
        logger.debug("redo %r -> %r", old, state)
        self._notify(old, state)
        return True

    def clear_history(self) -> None:
        """Restart history at the baseline label, which also becomes current."""
        old = self._current
        self._history.clear(BASELINE_STATE)
        self._current = BASELINE_STATE
        logger.debug("history cleared, %r -> %r", old, BASELINE_STATE)
        self._notify(old, BASELINE_STATE)

    def _notify(self, old: StateName, new: StateName) -> None:
        if self._on_transition is not None and old != new:
            self._on_transition(old, new)
