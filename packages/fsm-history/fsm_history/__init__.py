"""fsm-history - Finite state machine with undo/redo history."""
from __future__ import annotations

from fsm_history.history import History
from fsm_history.machine import StateMachine
from fsm_history.types import (
    BASELINE_STATE,
    EventName,
    FSMError,
    InvalidArgumentError,
    MachineConfig,
    StateDef,
    StateName,
    TransitionTable,
    UndefinedTransitionError,
    UnknownStateError,
)

__all__ = [
    "BASELINE_STATE",
    "EventName",
    "FSMError",
    "History",
    "InvalidArgumentError",
    "MachineConfig",
    "StateDef",
    "StateMachine",
    "StateName",
    "TransitionTable",
    "UndefinedTransitionError",
    "UnknownStateError",
]
