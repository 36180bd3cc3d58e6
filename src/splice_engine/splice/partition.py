"""Partition text on every match of a marker pattern.

Partitions are computed from match spans, so capturing groups inside a
pattern never add extra pieces the way ``re.split`` would.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from splice_engine.splice.errors import InvalidPattern


@dataclass(frozen=True)
class NotFound:
    """The pattern does not occur at all."""

    text: str

    @property
    def partitions(self) -> int:
        return 1


@dataclass(frozen=True)
class SingleMatch:
    """Exactly one occurrence: a usable anchor."""

    before: str
    after: str

    @property
    def partitions(self) -> int:
        return 2


@dataclass(frozen=True)
class Pair:
    """Exactly two occurrences: a between pair."""

    before: str
    middle: str
    after: str

    @property
    def partitions(self) -> int:
        return 3


@dataclass(frozen=True)
class Ambiguous:
    """Three or more occurrences."""

    count: int

    @property
    def partitions(self) -> int:
        return self.count


SplitOutcome = NotFound | SingleMatch | Pair | Ambiguous


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern:
    """Compile a marker pattern, converting regex failures to InvalidPattern."""
    if not pattern:
        raise InvalidPattern(pattern, "pattern is empty")
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPattern(pattern, str(e)) from e


def split_parts(text: str, pattern: str) -> list[str]:
    """Return the substrings of ``text`` between all matches of ``pattern``."""
    regex = compile_pattern(pattern)
    parts = []
    last = 0
    for match in regex.finditer(text):
        parts.append(text[last:match.start()])
        last = match.end()
    parts.append(text[last:])
    return parts


def split_outcome(text: str, pattern: str) -> SplitOutcome:
    """Classify how ``pattern`` partitions ``text``."""
    parts = split_parts(text, pattern)
    if len(parts) == 1:
        return NotFound(parts[0])
    if len(parts) == 2:
        return SingleMatch(parts[0], parts[1])
    if len(parts) == 3:
        return Pair(parts[0], parts[1], parts[2])
    return Ambiguous(len(parts))
