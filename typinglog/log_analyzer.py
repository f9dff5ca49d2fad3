"""
Accuracy and speed analysis of a finished typing log.
"""

from dataclasses import dataclass
from typing import List

from .edit_engine import Insertion
from .exceptions import SegmentRangeError
from .pr_log import pr_debug
from .replay_state import TypingLogReplayState
from .typing_log import TypingLog
from .typing_speed import calc_wpm


@dataclass(frozen=True)
class TextSegment:
    """
    Contiguous span of the text with the speed it was typed at.

    Attributes:
        start_pos: First char of the segment
        end_pos: One past the last char of the segment
        wpm: Words per minute over the typed part, 0.0 if never typed
        text: The segment's slice of the target text
    """
    start_pos: int
    end_pos: int
    wpm: float
    text: str = ""

    @property
    def length(self) -> int:
        return self.end_pos - self.start_pos


class TypingLogAnalyzer:
    """Replays a log to the end once, then answers accuracy and speed queries."""

    def __init__(self, log: TypingLog):
        self.log = log
        self.replay = TypingLogReplayState(log)
        self.replay.seek_to_end()
        self._error_op_indices = self._find_error_ops()

    def _find_error_ops(self) -> List[int]:
        """
        Indices of operations that count as mistakes.

        Deletions and substitutions are always corrections. An insertion
        counts only if its char is gone from the final matched prefix.
        """
        op_indices = self.replay.buffer_op_indices()
        surviving = set(op_indices[:self.replay.matched_prefix_length()])
        errors = []
        for applied in self.replay.applied:
            if isinstance(applied.op, Insertion) and applied.index in surviving:
                continue
            errors.append(applied.index)
        return errors

    def calc_accuracy(self) -> float:
        """Share of logged operations that were not mistakes, in [0, 1]."""
        total = self.replay.edit_op_count
        if total == 0:
            return 1.0
        accuracy = 1.0 - len(self._error_op_indices) / total
        return min(1.0, max(0.0, accuracy))

    def get_words_with_errors(self) -> List[str]:
        """Target words, in text order, that had a mistake inside their span."""
        word_indices = set()
        for index in self._error_op_indices:
            word = self.replay.word_index_at(self.replay.applied[index].abs_pos)
            if word is not None:
                word_indices.add(word)
        words = self.replay.words
        return [words[i] for i in sorted(word_indices)]

    def split_segments(self, n_segments: int) -> List[range]:
        """
        Split the text on word boundaries into min(n_segments, word count)
        spans of roughly equal char count.
        """
        if n_segments <= 0:
            raise SegmentRangeError(f"Segment count must be positive, got {n_segments}")
        counts = self.replay.char_counts
        word_ends = counts.word_ends
        k = min(n_segments, counts.word_count)
        length = counts.char_count

        spans = []
        start = 0
        words_used = 0
        for i in range(1, k):
            target = length * i / k
            # leave at least one word for each remaining segment
            candidates = range(words_used + 1, counts.word_count - (k - i) + 1)
            words_used = min(candidates, key=lambda w: abs(word_ends[w - 1] - target))
            end = word_ends[words_used - 1]
            spans.append(range(start, end))
            start = end
        spans.append(range(start, length))
        return spans

    def get_segment_wpms(self, n_segments: int) -> List[TextSegment]:
        """
        Typing speed over contiguous segments of the text.

        Args:
            n_segments: Requested number of segments, capped at the word count

        Returns:
            One TextSegment per span, covering the whole text in order

        Raises:
            SegmentRangeError: If n_segments <= 0
        """
        timings = self.log.char_timings
        typed = self.log.num_chars_typed
        segments = []
        for span in self.split_segments(n_segments):
            typed_end = min(span.stop, typed)
            wpm = 0.0
            if typed_end > span.start:
                begin_time = timings[span.start - 1] if span.start > 0 else 0
                duration = timings[typed_end - 1] - begin_time
                if duration > 0:
                    wpm = calc_wpm(typed_end - span.start, duration, self.log.language)
            segments.append(TextSegment(span.start, span.stop, wpm, self.log.text[span.start:span.stop]))
        pr_debug(f"Split {len(self.log.text)} chars into {len(segments)} segments")
        return segments
