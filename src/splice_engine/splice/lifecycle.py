"""Marker lifecycle: ABSENT -> ANCHORED -> PRESENT."""

from enum import Enum

from splice_engine.splice.partition import Pair, split_outcome


class MarkerState(str, Enum):
    ABSENT = "ABSENT"
    ANCHORED = "ANCHORED"
    PRESENT = "PRESENT"

    def __str__(self) -> str:
        return self.value

    def successors(self) -> frozenset["MarkerState"]:
        return NEXT_STATES[self]


ABSENT = MarkerState.ABSENT
ANCHORED = MarkerState.ANCHORED
PRESENT = MarkerState.PRESENT

# Markers are never removed, so nothing leads back to ABSENT
NEXT_STATES = {
    ABSENT: frozenset({ANCHORED}),
    ANCHORED: frozenset({PRESENT}),
    PRESENT: frozenset({PRESENT}),
}


def check_transition(current: str, target: str) -> tuple[bool, str]:
    """Return ``(ok, message)`` for moving a marker from ``current`` to ``target``."""
    try:
        before, after = MarkerState(current), MarkerState(target)
    except ValueError as e:
        return False, f"Unknown marker state: {e}"

    if after in before.successors():
        return True, f"{before} -> {after}"
    allowed = ", ".join(sorted(s.value for s in before.successors()))
    return False, f"{before} cannot become {after} (allowed: {allowed})"


def infer_state(text: str, marker: str) -> MarkerState:
    """Infer a marker's state from text alone.

    ANCHORED is only visible as the outcome of an insertion; once written
    the pair reads back as PRESENT.
    """
    if isinstance(split_outcome(text, marker), Pair):
        return PRESENT
    return ABSENT
