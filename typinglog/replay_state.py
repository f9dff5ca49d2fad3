"""
Step-by-step replay of a typing log.

The replay buffer holds the accepted part of the text followed by the
input field, so every logged operation lands at entry.offset + op.pos.
Each buffered char remembers which operation put it there, which is how
the analyzer tells surviving insertions from discarded ones.
"""

from dataclasses import dataclass
from typing import List, Optional

from .edit_engine import Deletion, EditOperation, Insertion, Substitution
from .exceptions import FormatError
from .text_char_counts import TextCharCounts
from .typing_log import TypingLog


@dataclass(frozen=True)
class AppliedOperation:
    """
    An operation as it was replayed.

    Attributes:
        index: Position of the operation across the whole log
        entry_index: Edit log entry the operation belongs to
        op: The logged operation
        abs_pos: Absolute buffer position the operation touched
        time: Time of its entry
    """
    index: int
    entry_index: int
    op: EditOperation
    abs_pos: int
    time: int


class _BufferedChar:
    __slots__ = ("char", "op_index")

    def __init__(self, char: str, op_index: int):
        self.char = char
        self.op_index = op_index


class TypingLogReplayState:
    def __init__(self, log: TypingLog):
        self.log = log
        self.char_counts = TextCharCounts(log.text, log.language)
        self.reset()

    def reset(self):
        self.time = 0
        self.edit_cursor = 0
        self.char_cursor = 0
        self._buffer: List[_BufferedChar] = []
        self.applied: List[AppliedOperation] = []

    @property
    def words(self) -> List[str]:
        return self.char_counts.words

    @property
    def edit_buffer(self) -> str:
        return "".join(c.char for c in self._buffer)

    @property
    def edit_op_count(self) -> int:
        return len(self.applied)

    def buffer_op_indices(self) -> List[int]:
        """Index of the operation that wrote each buffered char."""
        return [c.op_index for c in self._buffer]

    def is_replay_finished(self) -> bool:
        return self.edit_cursor >= len(self.log.edit_log)

    def seek_to_time(self, time: int):
        time = max(0, time)
        if self.time > time:
            self.reset()
        while not self.is_replay_finished() and self.log.edit_log[self.edit_cursor].time <= time:
            self._apply_next_edit()
        if self.is_replay_finished() and self.log.edit_log:
            self.time = self.log.edit_log[-1].time
        else:
            self.time = time
            self._advance_char_cursor()

    def seek_to_edit_cursor(self, edit_cursor: int):
        edit_cursor = max(0, edit_cursor)
        if self.edit_cursor > edit_cursor:
            self.reset()
        while not self.is_replay_finished() and self.edit_cursor < edit_cursor:
            self._apply_next_edit()

    def seek_to_char_cursor(self, char_cursor: int):
        char_cursor = max(0, char_cursor)
        if self.char_cursor > char_cursor:
            self.reset()
        while not self.is_replay_finished() and self.char_cursor < char_cursor:
            self._apply_next_edit()

    def seek_to_end(self):
        while not self.is_replay_finished():
            self._apply_next_edit()

    def _apply_next_edit(self):
        entry_index = self.edit_cursor
        entry = self.log.edit_log[entry_index]
        for op in entry.edits:
            abs_pos = entry.offset + op.pos
            index = len(self.applied)
            self._apply(op, abs_pos, index, entry_index)
            self.applied.append(AppliedOperation(index, entry_index, op, abs_pos, entry.time))
        self.time = entry.time
        self.edit_cursor += 1
        self._advance_char_cursor()

    def _apply(self, op: EditOperation, abs_pos: int, index: int, entry_index: int):
        size = len(self._buffer)
        limit = size if isinstance(op, Insertion) else size - 1
        if not (0 <= abs_pos <= limit):
            raise FormatError(
                f"Edit {op} of entry {entry_index} lands at {abs_pos} outside buffer of length {size}")
        if isinstance(op, Insertion):
            self._buffer.insert(abs_pos, _BufferedChar(op.char, index))
        elif isinstance(op, Substitution):
            self._buffer[abs_pos] = _BufferedChar(op.char, index)
        elif isinstance(op, Deletion):
            del self._buffer[abs_pos]

    def _advance_char_cursor(self):
        timings = self.log.char_timings
        while self.char_cursor < len(timings):
            timing = timings[self.char_cursor]
            if 0 < timing <= self.time:
                self.char_cursor += 1
            else:
                break

    def matched_prefix_length(self) -> int:
        """Leading chars of the current buffer that match the text."""
        count = 0
        for buffered, expected in zip(self._buffer, self.log.text):
            if buffered.char != expected:
                break
            count += 1
        return count

    def word_index_at(self, abs_pos: int) -> Optional[int]:
        """Word containing an absolute position, or None past the end of the text."""
        if 0 <= abs_pos < len(self.log.text):
            return self.char_counts.word_at(abs_pos)
        return None
