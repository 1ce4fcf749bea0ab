"""History - path taken plus the redo buffer."""
from __future__ import annotations

from collections import deque

from fsm_history.types import BASELINE_STATE, StateName


class History:
    """Linear record of entered states with undo/redo bookkeeping.

    ``entries`` never drops below one element. The undo log holds undone
    states with the most recently undone at the front; ``step_forward``
    consumes it from the front.
    """

    def __init__(self, baseline: StateName = BASELINE_STATE) -> None:
        self._entries: list[StateName] = [baseline]
        self._undo_log: deque[StateName] = deque()

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[StateName, ...]:
        return tuple(self._entries)

    @property
    def undo_log(self) -> tuple[StateName, ...]:
        return tuple(self._undo_log)

    @property
    def can_undo(self) -> bool:
        return len(self._entries) > 1

    @property
    def redo_available(self) -> bool:
        return len(self._undo_log) > 0

    def record(self, state: StateName) -> None:
        """Append a forward move. Discards all pending redo information."""
        self._entries.append(state)
        self._undo_log.clear()

    def step_back(self, current: StateName) -> StateName | None:
        """Undo one step away from *current*.

        Returns the state to move to, or None when only the baseline is left.
        """
        if not self.can_undo:
            return None
        self._undo_log.appendleft(current)
        self._entries.pop()
        return self._entries[-1]

    def step_forward(self) -> StateName | None:
        """Replay the front of the undo log. Returns None if it is empty."""
        if not self._undo_log:
            return None
        state = self._undo_log.popleft()
        self._entries.append(state)
        return state

    def clear(self, baseline: StateName = BASELINE_STATE) -> None:
        """Restart from a single *baseline* entry with nothing to redo."""
        self._entries = [baseline]
        self._undo_log.clear()
