"""
Typing session tracking: live input matching, edit logs, the TLv1 wire
format and accuracy/speed analysis.
"""

from .clock import Clock, ManualClock, MonotonicClock
from .edit_engine import (
    Deletion, EditOperation, EditSequence, Insertion, Substitution,
    edit_distance, edit_sequence,
)
from .exceptions import FormatError, InputError, SegmentRangeError, StateError, TypingLogError
from .input_model import InputState, TextInputModel, TextInputUpdate
from .language import Language
from .log_analyzer import TextSegment, TypingLogAnalyzer
from .log_format import format_typing_log, is_typing_log, parse_typing_log
from .replay_state import TypingLogReplayState
from .text_char_counts import TextCharCounts
from .typing_log import TypingEdit, TypingLog
from .typing_speed import SpeedUnit, TypingSpeed

__all__ = [
    'Clock', 'ManualClock', 'MonotonicClock',
    'EditOperation', 'Insertion', 'Deletion', 'Substitution', 'EditSequence',
    'edit_sequence', 'edit_distance',
    'TypingLogError', 'StateError', 'InputError', 'FormatError', 'SegmentRangeError',
    'InputState', 'TextInputModel', 'TextInputUpdate',
    'Language',
    'TypingLogAnalyzer', 'TextSegment',
    'format_typing_log', 'parse_typing_log', 'is_typing_log',
    'TypingLogReplayState',
    'TextCharCounts',
    'TypingEdit', 'TypingLog',
    'SpeedUnit', 'TypingSpeed',
]
