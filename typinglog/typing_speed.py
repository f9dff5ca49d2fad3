"""
Typing speed arithmetic.

CPM (chars per minute) is the canonical unit; WPM divides it by the
language's chars-per-word ratio.
"""

from enum import Enum
from functools import total_ordering

from .language import Language

MAX_PRECISION = 8


def calc_cpm(chars_typed: int, time_millis: float) -> float:
    """Chars per minute, 0 for a zero duration."""
    minutes = time_millis / 60000.0
    if minutes == 0:
        return 0.0
    return chars_typed / minutes


def cpm_to_wpm(cpm: float, language: Language) -> float:
    return cpm / language.chars_per_word()


def wpm_to_cpm(wpm: float, language: Language) -> float:
    return wpm * language.chars_per_word()


def calc_wpm(chars_typed: int, time_millis: float, language: Language) -> float:
    return cpm_to_wpm(calc_cpm(chars_typed, time_millis), language)


def cpm_to_time(chars_typed: int, cpm: float) -> float:
    """Milliseconds needed to type chars_typed at the given CPM, 0 for a zero speed."""
    if cpm == 0:
        return 0.0
    return chars_typed / cpm * 60000.0


def wpm_to_time(chars_typed: int, wpm: float, language: Language) -> float:
    return cpm_to_time(chars_typed, wpm_to_cpm(wpm, language))


class SpeedUnit(Enum):
    CPM = "CPM"
    WPM = "WPM"

    def to(self, other: "SpeedUnit", value: float, language: Language) -> float:
        """Convert value from this unit to other."""
        if other is self:
            return value
        if self is SpeedUnit.CPM:
            return cpm_to_wpm(value, language)
        return wpm_to_cpm(value, language)

    def calc_speed(self, chars_typed: int, time_millis: float, language: Language) -> float:
        cpm = calc_cpm(chars_typed, time_millis)
        return SpeedUnit.CPM.to(self, cpm, language)

    def time_millis(self, chars_typed: int, speed: float, language: Language) -> float:
        return cpm_to_time(chars_typed, self.to(SpeedUnit.CPM, speed, language))


def format_speed(value: float) -> str:
    """Render with at most MAX_PRECISION decimals and no trailing zeros."""
    text = f"{value:.{MAX_PRECISION}f}".rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"


@total_ordering
class TypingSpeed:
    """A speed value bound to a language, stored as CPM."""

    def __init__(self, value: float, unit: SpeedUnit, language: Language):
        if language is None:
            raise ValueError("TypingSpeed requires a language")
        self.cpm = unit.to(SpeedUnit.CPM, value, language)
        self.language = language

    @classmethod
    def from_typing(cls, chars_typed: int, time_millis: float, language: Language) -> "TypingSpeed":
        return cls(calc_cpm(chars_typed, time_millis), SpeedUnit.CPM, language)

    def get_speed(self, unit: SpeedUnit) -> float:
        return SpeedUnit.CPM.to(unit, self.cpm, self.language)

    @property
    def wpm(self) -> float:
        return self.get_speed(SpeedUnit.WPM)

    def __float__(self) -> float:
        return self.cpm

    def __int__(self) -> int:
        return round(self.cpm)

    def __str__(self) -> str:
        return f"{format_speed(self.wpm)} {SpeedUnit.WPM.value}"

    def __repr__(self) -> str:
        return f"TypingSpeed({self.cpm!r} CPM, {self.language.iso_code})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TypingSpeed):
            return NotImplemented
        return self.language is other.language and str(self) == str(other)

    def __hash__(self) -> int:
        return hash((self.language, str(self)))

    def __lt__(self, other) -> bool:
        if not isinstance(other, TypingSpeed):
            return NotImplemented
        return self.cpm < other.cpm
