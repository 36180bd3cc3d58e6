"""Splice module — partition text on markers and splice content between them."""

from splice_engine.splice.engine import SpliceEngine
from splice_engine.splice.errors import (
    InvalidAnchorCardinality,
    InvalidMarkerCardinality,
    InvalidPattern,
    MissingSourceAndCannotCreate,
    PlanError,
    SaveTargetMissing,
    UndecodableSource,
    SpliceError,
)
from splice_engine.splice.lifecycle import (
    ABSENT,
    ANCHORED,
    PRESENT,
    MarkerState,
    check_transition,
    infer_state,
)
from splice_engine.splice.partition import split_outcome

__all__ = [
    "SpliceEngine",
    "SpliceError",
    "InvalidPattern",
    "InvalidMarkerCardinality",
    "InvalidAnchorCardinality",
    "MissingSourceAndCannotCreate",
    "SaveTargetMissing",
    "PlanError",
    "UndecodableSource",
    "MarkerState",
    "ABSENT",
    "ANCHORED",
    "PRESENT",
    "check_transition",
    "infer_state",
    "split_outcome",
]
