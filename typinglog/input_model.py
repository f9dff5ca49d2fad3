"""
Incremental input matching against a target text.

The caller feeds the full content of its input field after every change.
The model diffs it against the previous snapshot, logs the edit, accepts
whatever correct prefix the acceptance policy allows and tells the caller
how many leading characters to drop from its field.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .clock import Clock
from .edit_engine import edit_sequence
from .exceptions import InputError, StateError
from .language import Language
from .pr_log import pr_debug
from .text_char_counts import TextCharCounts
from .typing_log import TypingEdit, TypingLog


class InputState(Enum):
    NOT_STARTED = "not_started"
    TIMING = "timing"
    FINISHED = "finished"


@dataclass(frozen=True)
class TextInputUpdate:
    """
    Result of one update call.

    Attributes:
        accepted_input_prefix_length: Chars the caller must drop from the front of its field
        new_input_value: What the field should contain after dropping them
        new_char_cursor: Total accepted chars of the text
        correct_input_prefix_length: Leading chars of new_input_value that match the text
        new_word_cursor: Fully accepted words
    """
    accepted_input_prefix_length: int
    new_input_value: str
    new_char_cursor: int
    correct_input_prefix_length: int
    new_word_cursor: int


def _matching_prefix_length(value: str, text: str, start: int) -> int:
    """Count leading chars of value equal to text[start:]."""
    count = 0
    for actual, expected in zip(value, text[start:]):
        if actual != expected:
            break
        count += 1
    return count


class TextInputModel:
    """
    State machine NOT_STARTED -> TIMING -> FINISHED over one target text.

    Args:
        text: Target passage
        language: Language supplying the word tokenizer
        enable_accepting_prefixes: Accept correct chars mid-word instead of
            waiting for a whole word plus its delimiter

    Raises:
        StateError: If text is empty or tokenizes to an empty word
    """

    def __init__(self, text: str, language: Language, enable_accepting_prefixes: bool = False):
        self._counts = TextCharCounts(text, language)
        self._text = text
        self._language = language
        self._enable_accepting_prefixes = enable_accepting_prefixes

        self._state = InputState.NOT_STARTED
        self._clock: Optional[Clock] = None
        self._char_cursor = 0
        self._word_cursor = 0
        self._buffer = ""
        self._char_timings: List[int] = [0] * len(text)
        self._edit_log: List[TypingEdit] = []
        self._last_update: Optional[TextInputUpdate] = None

    def start_timing(self, clock: Clock):
        if self._state is not InputState.NOT_STARTED:
            raise StateError(f"Cannot start timing in state {self._state.name}")
        if clock is None:
            raise StateError("A clock is required to start timing")
        self._clock = clock
        self._state = InputState.TIMING
        pr_debug(f"Started timing {len(self._text)} chars, {self._counts.word_count} words")

    def update(self, snapshot: str) -> Optional[TextInputUpdate]:
        """
        Process the current content of the caller's input field.

        Args:
            snapshot: Full input field content, after the caller removed
                previously accepted prefixes

        Returns:
            TextInputUpdate, or None if the text was already finished

        Raises:
            InputError: If snapshot is None
            StateError: If timing has not started
        """
        if self._state is InputState.FINISHED:
            return None
        if snapshot is None:
            raise InputError("Input snapshot must not be None")
        if self._state is not InputState.TIMING:
            raise StateError("update() called before start_timing()")

        # Everything below is computed before any state changes
        ops = edit_sequence(self._buffer, snapshot, True)
        time = self._clock.elapsed_since_start()
        if self._edit_log:
            time = max(time, self._edit_log[-1].time)

        correct = _matching_prefix_length(snapshot, self._text, self._char_cursor)
        accepted = self._accepted_length(correct)

        self._edit_log.append(TypingEdit(self._char_cursor, tuple(ops), time))

        # A timing of 0 means "never typed", so the first keystroke is stamped at >= 1 ms
        stamp = max(time, 1)
        for pos in range(self._char_cursor, self._char_cursor + correct):
            if self._char_timings[pos] == 0:
                self._char_timings[pos] = stamp

        self._buffer = snapshot[accepted:]
        self._char_cursor += accepted
        self._word_cursor = self._counts.words_completed(self._char_cursor)

        result = TextInputUpdate(
            accepted_input_prefix_length=accepted,
            new_input_value=self._buffer,
            new_char_cursor=self._char_cursor,
            correct_input_prefix_length=_matching_prefix_length(self._buffer, self._text, self._char_cursor),
            new_word_cursor=self._word_cursor,
        )
        self._last_update = result

        if self._word_cursor == self._counts.word_count:
            self._state = InputState.FINISHED
            pr_debug(f"Finished text after {len(self._edit_log)} updates at {time} ms")
        return result

    def _accepted_length(self, correct: int) -> int:
        """How many of the correct leading chars the acceptance policy lets through."""
        if self._enable_accepting_prefixes or self._language.is_logographic():
            return correct
        boundary = self._counts.last_boundary_at_or_before(self._char_cursor + correct)
        return max(0, boundary - self._char_cursor)

    def is_finished(self) -> bool:
        return self._state is InputState.FINISHED

    def get_state(self) -> InputState:
        return self._state

    def get_char_cursor(self) -> int:
        return self._char_cursor

    def get_word_cursor(self) -> int:
        return self._word_cursor

    def get_num_chars_accepted(self) -> int:
        return self._char_cursor

    def get_text(self) -> str:
        return self._text

    def get_language(self) -> Language:
        return self._language

    def is_enable_accepting_prefixes(self) -> bool:
        return self._enable_accepting_prefixes

    def get_last_update_result(self) -> Optional[TextInputUpdate]:
        return self._last_update

    def get_typing_log(self) -> TypingLog:
        """Snapshot of the log so far; later updates do not affect it."""
        return TypingLog(self._text, self._language, list(self._char_timings), list(self._edit_log))
