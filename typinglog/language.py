"""
Language catalogue and word tokenizers.

A language only matters to typing analysis through three things: how its
text splits into words, whether it is logographic (one word per character,
no delimiter), and how many characters make up a "word" for WPM purposes.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, FrozenSet, List, Optional


class TextTokenizer(ABC):
    """Base tokenizer: splits text into words joined by a delimiter."""

    delimiter: str = ""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Split text into its words."""


class WhitespaceTokenizer(TextTokenizer):
    """
    Splits on single spaces.

    Consecutive spaces produce empty tokens, which callers treat as invalid
    text rather than silently collapsing. A single trailing space is part of
    the last word, so it yields no token of its own.
    """

    delimiter = " "

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        words = text.split(self.delimiter)
        if len(words) > 1 and not words[-1]:
            words.pop()
        return words


class LogographicTokenizer(TextTokenizer):
    """Every character is its own word."""

    delimiter = ""

    def tokenize(self, text: str) -> List[str]:
        return list(text)


WHITESPACE_TOKENIZER = WhitespaceTokenizer()
LOGOGRAPHIC_TOKENIZER = LogographicTokenizer()


class Language(Enum):
    ENGLISH = "en"
    AFRIKAANS = "af"
    ALBANIAN = "sq"
    ARABIC = "ar"
    BELARUSIAN = "be"
    BULGARIAN = "bg"
    CATALAN = "ca"
    CHINESE = "zh"
    CHINESE_TRADITIONAL = "zh-tw"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ESTONIAN = "et"
    FILIPINO = "tl"
    FINNISH = "fi"
    FRENCH = "fr"
    GALICIAN = "gl"
    GERMAN = "de"
    GREEK = "el"
    HEBREW = "he"
    HINDI = "hi"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    IRISH = "ga"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    MALAY = "ms"
    MALTESE = "mt"
    NORWEGIAN = "no"
    PERSIAN = "fa"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SERBIAN_LATIN = "sr-latn"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SWAHILI = "sw"
    SWEDISH = "sv"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"
    WELSH = "cy"
    YIDDISH = "yi"

    @property
    def iso_code(self) -> str:
        return self.value

    @property
    def tokenizer(self) -> TextTokenizer:
        if self.is_logographic():
            return LOGOGRAPHIC_TOKENIZER
        return WHITESPACE_TOKENIZER

    def is_logographic(self) -> bool:
        # Thai has no spaces between words, so it tokenizes like the logographic scripts
        return self in _LOGOGRAPHIC

    def chars_per_word(self) -> float:
        """Characters counted as one word when converting CPM to WPM."""
        return _CHARS_PER_WORD.get(self, 1.0 if self.is_logographic() else 5.0)

    @property
    def english_name(self) -> str:
        return _ENGLISH_NAMES.get(self, self.name.replace("_", " ").capitalize())

    @classmethod
    def from_iso_code(cls, iso_code: str) -> Optional["Language"]:
        """Return the language for an ISO code, or None if unknown."""
        try:
            return cls(iso_code)
        except ValueError:
            return None


_LOGOGRAPHIC: FrozenSet[Language] = frozenset({
    Language.CHINESE, Language.CHINESE_TRADITIONAL, Language.JAPANESE, Language.THAI,
})

# Overrides of the default chars-per-word (single point of truth)
_CHARS_PER_WORD: Dict[Language, float] = {
    Language.KOREAN: 2.5,
    Language.THAI: 3.75,
}

_ENGLISH_NAMES: Dict[Language, str] = {
    Language.CHINESE_TRADITIONAL: "Chinese",
    Language.SERBIAN: "Serbian (Cyrillic)",
    Language.SERBIAN_LATIN: "Serbian (Latin)",
}
