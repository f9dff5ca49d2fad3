"""
Tests for stepping through a typing log.
"""
import unittest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from typinglog.edit_engine import Deletion
from typinglog.exceptions import FormatError
from typinglog.language import Language
from typinglog.log_format import parse_typing_log
from typinglog.replay_state import TypingLogReplayState
from typinglog.typing_log import TypingEdit, TypingLog

from tests.typing_log_corpus import FOUR_WORDS, HI_YO_FINISHED


class TestReplayState(unittest.TestCase):

    def setUp(self):
        self.replay = TypingLogReplayState(parse_typing_log(HI_YO_FINISHED))

    def test_initial_state(self):
        self.assertEqual(self.replay.edit_buffer, "")
        self.assertEqual(self.replay.time, 0)
        self.assertEqual(self.replay.edit_cursor, 0)
        self.assertEqual(self.replay.char_cursor, 0)
        self.assertFalse(self.replay.is_replay_finished())
        self.assertEqual(self.replay.words, ["Hi", "yo"])

    def test_seek_to_end(self):
        """Replaying everything rebuilds the full text."""
        self.replay.seek_to_end()
        self.assertTrue(self.replay.is_replay_finished())
        self.assertEqual(self.replay.edit_buffer, "Hi yo")
        self.assertEqual(self.replay.time, 50)
        self.assertEqual(self.replay.char_cursor, 5)
        self.assertEqual(self.replay.edit_op_count, 5)

    def test_offsets_are_absolute(self):
        """Ops after an accepted word land behind it."""
        replay = TypingLogReplayState(parse_typing_log(FOUR_WORDS))
        replay.seek_to_end()
        self.assertEqual(replay.edit_buffer, "asdfasdf asdfasdf asdfasdf asdfasdf")
        self.assertEqual(replay.matched_prefix_length(), 35)

    def test_seek_to_edit_cursor(self):
        self.replay.seek_to_edit_cursor(2)
        self.assertEqual(self.replay.edit_buffer, "Hi")
        self.assertEqual(self.replay.time, 20)

    def test_seek_to_time(self):
        """Seeking between edits keeps the requested time."""
        self.replay.seek_to_time(25)
        self.assertEqual(self.replay.edit_buffer, "Hi")
        self.assertEqual(self.replay.time, 25)
        self.assertEqual(self.replay.char_cursor, 2)

    def test_seek_past_end_uses_last_edit_time(self):
        self.replay.seek_to_time(10000)
        self.assertTrue(self.replay.is_replay_finished())
        self.assertEqual(self.replay.time, 50)

    def test_seek_to_char_cursor(self):
        self.replay.seek_to_char_cursor(3)
        self.assertEqual(self.replay.edit_cursor, 3)
        self.assertEqual(self.replay.edit_buffer, "Hi ")

    def test_seek_backwards_resets(self):
        """Going back in time replays from the start."""
        self.replay.seek_to_end()
        self.replay.seek_to_edit_cursor(1)
        self.assertEqual(self.replay.edit_buffer, "H")
        self.assertEqual(self.replay.edit_cursor, 1)
        self.replay.seek_to_time(0)
        self.assertEqual(self.replay.edit_buffer, "")

    def test_negative_seek(self):
        """Negative targets behave like 0."""
        self.replay.seek_to_edit_cursor(-5)
        self.assertEqual(self.replay.edit_cursor, 0)
        self.replay.seek_to_time(-5)
        self.assertEqual(self.replay.time, 0)

    def test_applied_operations(self):
        """Every replayed op records its absolute position."""
        self.replay.seek_to_end()
        self.assertEqual([a.abs_pos for a in self.replay.applied], [0, 1, 2, 3, 4])
        self.assertEqual(self.replay.buffer_op_indices(), [0, 1, 2, 3, 4])

    def test_malformed_log(self):
        """An op that does not fit the buffer is a format error."""
        log = TypingLog("ab", Language.ENGLISH, [0, 0], [TypingEdit(0, (Deletion(0, "a"),), 5)])
        replay = TypingLogReplayState(log)
        with self.assertRaises(FormatError):
            replay.seek_to_end()


if __name__ == '__main__':
    unittest.main()
