"""
Error taxonomy for typing sessions, wire logs and analysis.

Every error derives from TypingLogError so callers at the outer boundary
(the CLI) can catch the whole family at once. Each one also derives from
the builtin exception it most resembles.
"""

from typing import Optional


class TypingLogError(Exception):
    """Base class for all typinglog errors."""


class StateError(TypingLogError, RuntimeError):
    """Operation called in the wrong lifecycle state, or invalid target text."""


class InputError(TypingLogError, TypeError):
    """Input snapshot was absent."""


class FormatError(TypingLogError, ValueError):
    """
    Malformed or truncated wire string.

    Attributes:
        position: Index into the wire string where parsing failed
        segment: Name of the grammar section being parsed
        reason: Human-readable description without position info
    """

    def __init__(self, reason: str, position: int = -1, segment: Optional[str] = None):
        self.reason = reason
        self.position = position
        self.segment = segment
        where = []
        if segment:
            where.append(segment)
        if position >= 0:
            where.append(f"at position {position}")
        suffix = f" ({', '.join(where)})" if where else ""
        super().__init__(f"{reason}{suffix}")


class SegmentRangeError(TypingLogError, ValueError):
    """Segment count out of range."""
