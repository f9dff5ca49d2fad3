"""
TLv1 wire format for typing logs.

Layout:
    TLv1,<lang>,<text length>,<char><delta>...|<offset>,<count>,<delta>,<ops>,...

Each text char is followed by its timing as a delta from the previous
char's timing. A text char that is a digit, '-' or '\\b' itself is preceded
by '\\b' so it cannot run into the neighbouring number or be read as
an escape. Deltas may be negative when an untyped char (timing 0) follows
a typed one.

The edit log is written as groups of consecutive entries sharing an
offset. Each entry is its time delta (relative to the previous entry in
the whole log) followed by its operations written back to back as
<pos><marker><char>, then a comma.
"""

from itertools import groupby
from typing import List

from .edit_engine import EditOperation, OPERATIONS_BY_MARKER
from .exceptions import FormatError
from .language import Language
from .pr_log import pr_debug
from .typing_log import TypingEdit, TypingLog

PREFIX = "TLv"
VERSION = 1

# Text chars that must be escaped before their timing delta (single point of truth)
_ESCAPE = "\b"
_DIGITS = frozenset("0123456789")
_ESCAPED_CHARS = _DIGITS | {"-", _ESCAPE}

_SEPARATOR = "|"


def is_typing_log(value: str) -> bool:
    """Cheap check whether a string looks like a serialized typing log."""
    return isinstance(value, str) and value.startswith(PREFIX)


def format_typing_log(log: TypingLog) -> str:
    """Serialize a typing log to its TLv1 wire string."""
    parts: List[str] = [f"{PREFIX}{VERSION},{log.language.iso_code},{len(log.text)},"]

    previous = 0
    for char, timing in zip(log.text, log.char_timings):
        if char in _ESCAPED_CHARS:
            parts.append(_ESCAPE)
        parts.append(f"{char}{timing - previous}")
        previous = timing

    parts.append(_SEPARATOR)

    previous = 0
    for offset, group in groupby(log.edit_log, key=lambda entry: entry.offset):
        entries = list(group)
        parts.append(f"{offset},{len(entries)},")
        for entry in entries:
            ops = "".join(str(op) for op in entry.edits)
            parts.append(f"{entry.time - previous},{ops},")
            previous = entry.time

    return "".join(parts)


class TypingLogParser:
    """
    Cursor-based parser for TLv1 strings.

    Single-use: create one parser per string. Any malformed or truncated
    input raises FormatError with the cursor position; no partial log is
    ever returned.
    """

    def __init__(self, value: str):
        self.value = value
        self.cursor = 0
        self.segment = "header"

    def parse(self) -> TypingLog:
        if not is_typing_log(self.value):
            raise self._error(f"Missing '{PREFIX}' prefix")
        self.cursor = len(PREFIX)

        version = self._read_int()
        if version != VERSION:
            raise FormatError(
                f"Wrong typing log format version (given {version} but expected {VERSION})",
                len(PREFIX), self.segment)

        code_pos = self.cursor
        code = self._read_field()
        language = Language.from_iso_code(code)
        if language is None:
            raise FormatError(f"Unknown language code {code!r}", code_pos, self.segment)

        length_pos = self.cursor
        length = self._read_int()
        if length < 0:
            raise FormatError(f"Negative text length {length}", length_pos, self.segment)

        self.segment = "char timings"
        text, timings = self._read_char_timings(length)

        if self._peek() != _SEPARATOR:
            raise self._error(f"Expected '{_SEPARATOR}' after char timings")
        self.cursor += 1

        self.segment = "edit log"
        edit_log = self._read_edit_log()

        return TypingLog(text, language, timings, edit_log)

    def _error(self, reason: str) -> FormatError:
        pr_debug(f"Typing log parse failed: {reason} at {self.cursor} ({self.segment})")
        return FormatError(reason, self.cursor, self.segment)

    def _peek(self) -> str:
        if self.cursor >= len(self.value):
            raise self._error("Unexpected end of input")
        return self.value[self.cursor]

    def _next_char(self) -> str:
        char = self._peek()
        self.cursor += 1
        return char

    def _read_field(self) -> str:
        """Read up to the next comma and consume it."""
        end = self.value.find(",", self.cursor)
        if end < 0:
            raise self._error("Expected ','")
        field = self.value[self.cursor:end]
        self.cursor = end + 1
        return field

    def _read_int(self) -> int:
        start = self.cursor
        field = self._read_field()
        digits = field[1:] if field.startswith("-") else field
        if not digits or any(c not in _DIGITS for c in digits):
            raise FormatError(f"Expected an integer, got {field!r}", start, self.segment)
        return int(field)

    def _read_signed_run(self) -> int:
        """Read a signed decimal number not terminated by a comma."""
        start = self.cursor
        if self.cursor < len(self.value) and self.value[self.cursor] == "-":
            self.cursor += 1
        while self.cursor < len(self.value) and self.value[self.cursor] in _DIGITS:
            self.cursor += 1
        digits = self.value[start:self.cursor]
        if digits in ("", "-"):
            self.cursor = start
            raise self._error("Expected a timing value")
        return int(digits)

    def _read_char_timings(self, length: int):
        chars: List[str] = []
        timings: List[int] = []
        time = 0
        for _ in range(length):
            char = self._next_char()
            if char == _ESCAPE:
                char = self._next_char()
            chars.append(char)
            time += self._read_signed_run()
            timings.append(time)
        return "".join(chars), timings

    def _read_edit_log(self) -> List[TypingEdit]:
        entries: List[TypingEdit] = []
        time = 0
        while self.cursor < len(self.value):
            offset_pos = self.cursor
            offset = self._read_int()
            count = self._read_int()
            if offset < 0 or count < 0:
                raise FormatError(f"Invalid group header {offset},{count}", offset_pos, self.segment)
            for _ in range(count):
                time += self._read_int()
                ops: List[EditOperation] = []
                while self._peek() != ",":
                    ops.append(self._read_operation())
                self.cursor += 1
                entries.append(TypingEdit(offset, tuple(ops), time))
        return entries

    def _read_operation(self) -> EditOperation:
        start = self.cursor
        while self._peek() in _DIGITS:
            self.cursor += 1
        if start == self.cursor:
            raise self._error("Expected an operation position")
        pos = int(self.value[start:self.cursor])

        marker_pos = self.cursor
        marker = self._next_char()
        op_class = OPERATIONS_BY_MARKER.get(marker)
        if op_class is None:
            raise FormatError(f"Unknown edit marker {marker!r}", marker_pos, self.segment)
        return op_class(pos, self._next_char())


def parse_typing_log(value: str) -> TypingLog:
    """
    Parse a TLv1 wire string.

    Raises:
        FormatError: If the string is malformed or truncated
    """
    if value is None:
        raise FormatError("No typing log given")
    return TypingLogParser(value).parse()
