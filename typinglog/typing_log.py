"""
Typing log data model.

A TypingLog records one typing session over a target text: when each
character was first typed correctly, plus the ordered history of edits the
user made to the input field.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .edit_engine import EditOperation
from .language import Language


@dataclass(frozen=True)
class TypingEdit:
    """
    One input-field update.

    Attributes:
        offset: Char cursor (accepted prefix length) when the update happened
        edits: Operations applied to the input field, positions relative to it
        time: Elapsed milliseconds since timing started
    """
    offset: int
    edits: Tuple[EditOperation, ...]
    time: int

    def __post_init__(self):
        # Accept any sequence of operations but store it immutably
        if not isinstance(self.edits, tuple):
            object.__setattr__(self, "edits", tuple(self.edits))

    def __str__(self) -> str:
        ops = "".join(str(op) for op in self.edits)
        return f"[{self.time}ms @{self.offset}: {ops}]"


@dataclass
class TypingLog:
    """
    Attributes:
        text: Target passage
        language: Language of the text
        char_timings: Elapsed ms of each char's first correct keystroke, 0 if never typed
        edit_log: Ordered input-field updates
    """
    text: str
    language: Language
    char_timings: List[int]
    edit_log: List[TypingEdit] = field(default_factory=list)

    def __post_init__(self):
        if len(self.char_timings) != len(self.text):
            raise ValueError(
                f"Got {len(self.char_timings)} char timings for text of length {len(self.text)}")

    @property
    def num_chars_typed(self) -> int:
        """Length of the leading run of typed characters."""
        count = 0
        for timing in self.char_timings:
            if timing <= 0:
                break
            count += 1
        return count

    @property
    def total_time(self) -> int:
        last_edit = self.edit_log[-1].time if self.edit_log else 0
        return max(max(self.char_timings, default=0), last_edit)

    @property
    def num_edit_ops(self) -> int:
        return sum(len(entry.edits) for entry in self.edit_log)

    def to_debug_string(self) -> str:
        lines = [
            f"TypingLog ({self.language.iso_code}, {len(self.text)} chars, "
            f"{self.num_chars_typed} typed, {self.total_time} ms)",
            f"  text: {self.text!r}",
            f"  char timings: {self.char_timings}",
            f"  edits ({len(self.edit_log)}):",
        ]
        lines.extend(f"    {entry}" for entry in self.edit_log)
        return "\n".join(lines)

    def __str__(self) -> str:
        # Import here to avoid circular dependency
        from .log_format import format_typing_log
        return format_typing_log(self)
