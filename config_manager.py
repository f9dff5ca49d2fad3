import os
import sys
import argparse
from dotenv import load_dotenv
from typinglog.pr_log import pr_err


DEFAULT_SEGMENTS = 4


class ConfigManager:
    """Manages configuration and argument parsing for the typing log inspector."""

    def __init__(self):
        self.log_string = None
        self.source = None
        self.segments = DEFAULT_SEGMENTS
        self.validate_only = False
        self.replay = False
        self.replay_delay = 0  # milliseconds between replayed edits
        self.dump = False
        self.debug_enabled = False

        # Load environment variables
        script_dir = os.path.dirname(__file__)
        dotenv_path = os.path.join(script_dir, '.env')
        load_dotenv(dotenv_path=dotenv_path)

    @staticmethod
    def _env_int(name, default):
        """Read an integer environment default, falling back on bad values."""
        value = os.getenv(name)
        if value is None or value.strip() == "":
            return default
        try:
            return int(value)
        except ValueError:
            pr_err(f"Ignoring {name}={value!r}: not an integer")
            return default

    def setup_argument_parser(self):
        """Setup and return the argument parser."""
        parser = argparse.ArgumentParser(
            description="Inspect TLv1 typing logs: accuracy, words with errors and segment speeds.",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter
        )
        parser.add_argument(
            "log",
            nargs="?",
            default=None,
            help="Typing log string, or '-' to read it from stdin."
        )
        parser.add_argument(
            "-f", "--file",
            type=str,
            default=None,
            help="Read the typing log from this file instead."
        )
        parser.add_argument(
            "-s", "--segments",
            type=int,
            default=self._env_int("TYPINGLOG_SEGMENTS", DEFAULT_SEGMENTS),
            help="Number of text segments to report WPM for."
        )
        parser.add_argument(
            "--validate",
            action="store_true",
            help="Only check that the log parses and re-serializes to the same string."
        )
        parser.add_argument(
            "--replay",
            action="store_true",
            help="Redraw the input field edit by edit before printing the analysis."
        )
        parser.add_argument(
            "--replay-delay",
            type=int,
            default=0,
            help="Milliseconds to pause between replayed edits."
        )
        parser.add_argument(
            "--dump",
            action="store_true",
            help="Print the decoded log (timings and every edit)."
        )
        parser.add_argument(
            "-D", "--debug",
            action="count",
            default=self._env_int("TYPINGLOG_DEBUG", 0),
            help="Enable debug output."
        )
        return parser

    def _apply_parsed_args(self, args):
        """Apply parsed arguments to instance variables (single point of truth)."""
        self.segments = args.segments
        self.validate_only = args.validate
        self.replay = args.replay
        self.replay_delay = max(0, args.replay_delay)
        self.dump = args.dump
        self.debug_enabled = args.debug >= 1

    def _read_log_string(self, args):
        """Resolve the log from file, stdin or the positional argument."""
        if args.file:
            try:
                with open(args.file, 'r', encoding='utf-8') as f:
                    self.source = args.file
                    return f.read().rstrip("\r\n")
            except OSError as e:
                pr_err(f"Cannot read typing log file '{args.file}': {e}")
                return None
        if args.log == "-":
            self.source = "<stdin>"
            return sys.stdin.read().rstrip("\r\n")
        self.source = "<argument>"
        return args.log

    def parse_configuration(self, argv=None):
        """Parse configuration from command line arguments."""
        parser = self.setup_argument_parser()
        args = parser.parse_args(argv)
        self._apply_parsed_args(args)

        if args.file and args.log:
            parser.print_help()
            pr_err("Give the typing log either as an argument or with --file, not both")
            return False

        if self.segments <= 0:
            pr_err(f"--segments must be positive, got {self.segments}")
            return False

        if not args.file and args.log is None:
            parser.print_help()
            pr_err("A typing log is required")
            return False

        self.log_string = self._read_log_string(args)
        if self.log_string is None:
            return False
        if not self.log_string.strip():
            pr_err(f"Typing log from {self.source} is empty")
            return False

        return True
