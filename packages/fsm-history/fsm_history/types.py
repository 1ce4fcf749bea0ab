"""Shared types, configuration and errors for fsm-history."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

StateName = str
EventName = str

BASELINE_STATE: StateName = "normal"


class FSMError(Exception):
    """Base class for state machine errors."""


class InvalidArgumentError(FSMError, ValueError):
    """Raised when a machine is built without a usable configuration."""


class UnknownStateError(FSMError, KeyError):
    """Raised when jumping to a state missing from the transition table."""

    def __init__(self, state: StateName) -> None:
        self.state = state
        super().__init__(f"Unknown state: {state!r}")


class UndefinedTransitionError(FSMError, KeyError):
    """Raised when the current state has no rule for an event."""

    def __init__(self, state: StateName, event: EventName) -> None:
        self.state = state
        self.event = event
        super().__init__(f"No transition for event {event!r} from state {state!r}")


@dataclass(frozen=True)
class StateDef:
    """Outgoing transitions of a single state, keyed by event name."""

    transitions: dict[EventName, StateName] = field(default_factory=dict)

    def target(self, event: EventName) -> StateName | None:
        """Return the state *event* leads to, or None if there is no rule."""
        return self.transitions.get(event)


TransitionTable = dict[StateName, StateDef]


@dataclass(frozen=True)
class MachineConfig:
    """Immutable machine definition.

    Attributes:
        initial: State the machine starts in and returns to on reset.
            Not checked against ``states``.
        states: Transition table mapping each state to its rules.
    """

    initial: StateName
    states: TransitionTable = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.states, Mapping):
            raise InvalidArgumentError("'states' must be a mapping")
        for name, state_def in self.states.items():
            if not isinstance(state_def, StateDef):
                raise InvalidArgumentError(
                    f"state {name!r} must be a StateDef, "
                    f"got {type(state_def).__name__}"
                )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MachineConfig:
        """Build a config from the raw ``{"initial": ..., "states": ...}`` shape.

        >>> cfg = MachineConfig.from_dict(
        ...     {"initial": "a", "states": {"a": {"transitions": {"go": "b"}}, "b": {}}}
        ... )
        >>> cfg.states["a"].target("go")
        'b'
        """
        if not isinstance(data, Mapping):
            raise InvalidArgumentError(
                f"config must be a mapping, got {type(data).__name__}"
            )
        if "initial" not in data:
            raise InvalidArgumentError("config is missing 'initial'")
        if "states" not in data:
            raise InvalidArgumentError("config is missing 'states'")
        raw_states = data["states"]
        if not isinstance(raw_states, Mapping):
            raise InvalidArgumentError("'states' must be a mapping")

        states: TransitionTable = {}
        for name, record in raw_states.items():
            if not isinstance(record, Mapping):
                raise InvalidArgumentError(f"state {name!r} must be a mapping")
            transitions = record.get("transitions", {})
            if not isinstance(transitions, Mapping):
                raise InvalidArgumentError(
                    f"transitions of state {name!r} must be a mapping"
                )
            states[name] = StateDef(transitions=dict(transitions))
        return cls(initial=data["initial"], states=states)
