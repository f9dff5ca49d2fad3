"""
Word boundaries of a target text.

Maps between word indices and character positions for a text tokenized
under a language. Each word's span includes its trailing delimiter, except
the last word which ends at the end of the text.
"""

from bisect import bisect_right
from typing import List

from .exceptions import StateError
from .language import Language


class TextCharCounts:
    def __init__(self, text: str, language: Language):
        if not text:
            raise StateError("Text must not be empty")
        words = language.tokenizer.tokenize(text)
        if not words or any(not word for word in words):
            raise StateError(f"Text {text!r} contains an empty word")

        self.text = text
        self.language = language
        self.words: List[str] = words
        self.delimiter = language.tokenizer.delimiter

        # word_starts[i] = position of the first char of word i
        # word_ends[i] = boundary after word i (delimiter included, except the last word)
        self.word_starts: List[int] = []
        self.word_ends: List[int] = []
        pos = 0
        for i, word in enumerate(words):
            self.word_starts.append(pos)
            pos += len(word)
            if i < len(words) - 1:
                pos += len(self.delimiter)
            self.word_ends.append(pos)
        # a trailing delimiter belongs to the last word
        self.word_ends[-1] = len(text)

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def char_count(self) -> int:
        return len(self.text)

    def words_completed(self, char_pos: int) -> int:
        """Number of words whose boundary is at or before char_pos."""
        return bisect_right(self.word_ends, char_pos)

    def word_at(self, char_pos: int) -> int:
        """Index of the word whose span contains char_pos."""
        if not (0 <= char_pos < len(self.text)):
            raise IndexError(f"Position {char_pos} outside text of length {len(self.text)}")
        return bisect_right(self.word_ends, char_pos)

    def word_span(self, word_index: int) -> range:
        """Character positions covered by a word, delimiter included."""
        return range(self.word_starts[word_index], self.word_ends[word_index])

    def last_boundary_at_or_before(self, char_pos: int) -> int:
        """Largest word boundary <= char_pos (0 if none)."""
        index = bisect_right(self.word_ends, char_pos)
        return self.word_ends[index - 1] if index else 0
