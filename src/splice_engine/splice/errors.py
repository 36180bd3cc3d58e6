"""Error kinds raised by the splice engine and its storage boundary."""

from __future__ import annotations


class SpliceError(Exception):
    """Base class for every failure the engine reports to its caller."""


class InvalidPattern(SpliceError, ValueError):
    """A marker or anchor pattern is not a usable regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class InvalidMarkerCardinality(SpliceError):
    """A between marker did not split the buffer into exactly 3 partitions."""

    def __init__(self, pattern: str, partitions: int):
        self.pattern = pattern
        self.partitions = partitions
        super().__init__(
            f"Between pattern {pattern!r} had {partitions} partition(s). "
            "Could not determine between. Maybe use insert_after "
            "or pass a fallback anchor"
        )


class InvalidAnchorCardinality(SpliceError):
    """An anchor did not split the buffer into exactly 2 partitions."""

    def __init__(self, pattern: str, partitions: int, target: str):
        self.pattern = pattern
        self.partitions = partitions
        self.target = target
        super().__init__(
            f"After pattern {pattern!r} had {partitions} partition(s). "
            f"Could not determine after what in {target}."
        )


class MissingSourceAndCannotCreate(SpliceError, OSError):
    """The load boundary could neither read nor create the backing file."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not open or create {path}: {reason}")


class SaveTargetMissing(SpliceError, FileNotFoundError):
    """Save was asked to persist a buffer for a file that does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Required that file exist to save: {path}")


class PlanError(SpliceError, ValueError):
    """A splice plan file is malformed or failed validation."""


class UndecodableSource(SpliceError, ValueError):
    """A content or template file is not valid UTF-8."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not decode {path} as UTF-8: {reason}")
