"""Function boundary tracking.

Two states, OUTSIDE and INSIDE a function body. Transitions per normalized
line:

    any     + header                 -> close if INSIDE, open header, INSIDE
    INSIDE  + unindented non-header  -> close, statement, OUTSIDE
    any     + indented non-header    -> statement, state unchanged
    OUTSIDE + unindented non-header  -> statement, OUTSIDE
    INSIDE  + end of input           -> close
"""

from __future__ import annotations

from .lines import SourceLine
from .signature import is_header

OUTSIDE = "outside"
INSIDE = "inside"

HEADER = "header"
STATEMENT = "statement"


class Transition:
    """What the driver must do for one line."""

    def __init__(self, close: bool, action: str, state: str):
        self.close: bool = close
        self.action: str = action
        self.state: str = state

    def __repr__(self) -> str:
        return (
            "Transition(close="
            + str(self.close)
            + ", action="
            + self.action
            + ", state="
            + self.state
            + ")"
        )


class ScopeTracker:
    def __init__(self) -> None:
        self.state: str = OUTSIDE

    def step(self, line: SourceLine) -> Transition:
        was_inside = self.state == INSIDE
        if is_header(line.text):
            self.state = INSIDE
            return Transition(was_inside, HEADER, self.state)
        if was_inside and not line.indented:
            self.state = OUTSIDE
            return Transition(True, STATEMENT, self.state)
        return Transition(False, STATEMENT, self.state)

    def reject_header(self) -> None:
        """A header failed to parse: no function is open afterwards."""
        self.state = OUTSIDE

    def finish(self) -> bool:
        """End of input. Returns True if a function must be closed."""
        was_inside = self.state == INSIDE
        self.state = OUTSIDE
        return was_inside
