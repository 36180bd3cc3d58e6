"""Splice engine — replace or insert marker-wrapped blocks in a text buffer.

Given generated source such as::

    // IMPORT
    import { ethers } from "ethers";

a call to ``insert_after("// IMPORT", body, "// FooImport")`` produces::

    // IMPORT
    // FooImport<body>
    // FooImport
    import { ethers } from "ethers";

and every later ``replace_between("// FooImport", new_body)`` rewrites only
what lies strictly between the two sentinels. Everything outside the
sentinels is kept byte-for-byte.
"""

from __future__ import annotations

import logging

from splice_engine.splice.errors import (
    InvalidAnchorCardinality,
    InvalidMarkerCardinality,
    InvalidPattern,
)
from splice_engine.splice.lifecycle import (
    ANCHORED,
    PRESENT,
    MarkerState,
    check_transition,
    infer_state,
)
from splice_engine.splice.partition import Pair, SingleMatch, compile_pattern, split_outcome

logger = logging.getLogger(__name__)


class SpliceEngine:
    """Owns one text buffer and applies splices to it.

    Args:
        content: Initial buffer, usually from ``load_buffer``.
        target: Identity of the backing file, used in diagnostics only.
    """

    def __init__(self, content: str, target: str = "<buffer>"):
        self._content = content
        self.target = target

    @property
    def content(self) -> str:
        return self._content

    def replace_between(
        self,
        marker: str,
        content: str,
        fallback_anchor: str | None = None,
    ) -> MarkerState:
        """Replace the text between a marker pair.

        When the marker does not occur exactly twice and ``fallback_anchor``
        is given, the content is inserted after the anchor wrapped in a new
        ``marker`` pair instead.

        Returns:
            The marker state reached: PRESENT, or ANCHORED via the fallback.

        Raises:
            InvalidMarkerCardinality: Marker pair not found and no fallback.
            InvalidAnchorCardinality: The fallback anchor is not unique.
            InvalidPattern: A pattern does not compile.
        """
        if fallback_anchor is not None:
            compile_pattern(fallback_anchor)

        outcome = split_outcome(self._content, marker)
        if not isinstance(outcome, Pair):
            if fallback_anchor is not None:
                logger.debug(
                    "marker %r had %d partition(s) in %s, falling back to anchor %r",
                    marker, outcome.partitions, self.target, fallback_anchor,
                )
                return self.insert_after(fallback_anchor, content, marker)
            raise InvalidMarkerCardinality(marker, outcome.partitions)

        new_content = outcome.before + marker + content + "\n" + marker + outcome.after
        self._commit(marker, PRESENT, new_content)
        return PRESENT

    def insert_after(self, anchor: str, content: str, marker: str) -> MarkerState:
        """Insert ``content`` after a unique anchor, wrapped in a new marker pair.

        Returns:
            ANCHORED.

        Raises:
            InvalidAnchorCardinality: The anchor is absent or not unique.
            InvalidPattern: The anchor does not compile. ``marker`` is written
                as literal text and may be any string.
        """
        outcome = split_outcome(self._content, anchor)
        if not isinstance(outcome, SingleMatch):
            raise InvalidAnchorCardinality(anchor, outcome.partitions, self.target)

        try:
            current = infer_state(self._content, marker)
        except InvalidPattern:
            logger.debug("marker %r is not a pattern, skipping lifecycle check", marker)
        else:
            ok, msg = check_transition(current, ANCHORED)
            if not ok:
                logger.warning("marker %r in %s: %s", marker, self.target, msg)

        new_content = (
            outcome.before + anchor + "\n" + marker + content + "\n" + marker + outcome.after
        )
        self._commit(marker, ANCHORED, new_content)
        return ANCHORED

    def _commit(self, marker: str, state: MarkerState, new_content: str) -> None:
        logger.debug("marker %r in %s -> %s", marker, self.target, state)
        self._content = new_content

    def __repr__(self) -> str:
        return f"SpliceEngine(target={self.target!r}, length={len(self._content)})"
