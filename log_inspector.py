"""
Typing log inspector application.
"""
import time
from config_manager import ConfigManager
from typinglog import TypingLogAnalyzer, TypingLogError, TypingLogReplayState
from typinglog.log_format import format_typing_log, parse_typing_log
from typinglog.pr_log import (
    pr_err, pr_warn, pr_notice, pr_info, pr_debug, get_live_output,
)


class LogInspector:
    """Parses one typing log and reports on it."""

    def __init__(self):
        self.config_manager = ConfigManager()
        self.config = None
        self.log = None
        self.analyzer = None

    def initialize(self, argv=None):
        """Parse configuration and decode the log."""
        from typinglog.pr_log import set_log_level, PR_DEBUG, PR_INFO

        if not self.config_manager.parse_configuration(argv):
            return False
        self.config = self.config_manager

        if self.config.debug_enabled:
            set_log_level(PR_DEBUG)
        else:
            set_log_level(PR_INFO)

        try:
            self.log = parse_typing_log(self.config.log_string)
        except TypingLogError as e:
            pr_err(f"Invalid typing log from {self.config.source}: {e}")
            return False

        pr_debug(f"Parsed {len(self.log.edit_log)} edits over {len(self.log.text)} chars")
        return True

    def validate(self):
        """Check that the log re-serializes to exactly the input string."""
        reformatted = format_typing_log(self.log)
        if reformatted != self.config.log_string:
            for i, (a, b) in enumerate(zip(reformatted, self.config.log_string)):
                if a != b:
                    break
            else:
                i = min(len(reformatted), len(self.config.log_string))
            pr_err(f"Typing log does not round-trip: first difference at position {i}")
            return False
        pr_info(f"Valid typing log ({self.log.language.iso_code}, {len(self.log.text)} chars, "
                f"{len(self.log.edit_log)} edits)")
        return True

    def _replay(self):
        """Redraw the input field as it looked after every logged edit."""
        replay = TypingLogReplayState(self.log)
        delay = self.config.replay_delay / 1000.0
        with get_live_output() as live:
            while not replay.is_replay_finished():
                replay.seek_to_edit_cursor(replay.edit_cursor + 1)
                live.write_full(replay.edit_buffer)
                pr_debug(f"t={replay.time}ms edit={replay.edit_cursor} chars={replay.char_cursor}")
                if delay:
                    time.sleep(delay)

    def _display_report(self):
        """Print the analysis."""
        log = self.log
        pr_notice("--- Typing Log ---")
        pr_info(f"Language:      {log.language.english_name} ({log.language.iso_code})")
        pr_info(f"Text:          {log.text}")
        pr_info(f"Chars typed:   {log.num_chars_typed}/{len(log.text)}")
        pr_info(f"Total time:    {log.total_time} ms")
        pr_info(f"Edit ops:      {log.num_edit_ops} in {len(log.edit_log)} updates")

        pr_notice("--- Analysis ---")
        pr_info(f"Accuracy:      {self.analyzer.calc_accuracy() * 100:.2f}%")
        words = self.analyzer.get_words_with_errors()
        if words:
            pr_warn(f"Words with errors: {', '.join(words)}")
        else:
            pr_info("Words with errors: none")

        for segment in self.analyzer.get_segment_wpms(self.config.segments):
            pr_info(f"  [{segment.start_pos:>4}, {segment.end_pos:>4})  {segment.wpm:7.2f} WPM  {segment.text!r}")
        if log.num_chars_typed < len(log.text):
            pr_warn("Text was not finished; untyped segments report 0 WPM")
        pr_notice("------------------")

    def run(self, argv=None):
        """Main application entry; returns the process exit status."""
        if not self.initialize(argv):
            return 1

        if self.config.validate_only:
            return 0 if self.validate() else 1

        if self.config.dump:
            print(self.log.to_debug_string())

        try:
            if self.config.replay:
                self._replay()
            self.analyzer = TypingLogAnalyzer(self.log)
            self._display_report()
        except TypingLogError as e:
            pr_err(f"Cannot analyze typing log: {e}")
            return 1
        return 0
