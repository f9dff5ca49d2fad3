"""
Linux-style pr_* logging for typing log tools.

Messages at or above PR_ERR print immediately. Lower-priority messages are
held back while a live report (the replay of an input field) is being drawn
on stdout, then flushed once the live output ends, so diagnostics never
tear through the animated line.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Tuple
import sys

from colorama import Fore, Style, init

init(autoreset=True)


# Log levels (single point of truth)
PR_EMERG   = 0
PR_ALERT   = 1
PR_CRIT    = 2
PR_ERR     = 3
PR_WARN    = 4
PR_NOTICE  = 5
PR_INFO    = 6
PR_DEBUG   = 7

_IMMEDIATE_THRESHOLD = PR_ERR


@dataclass(frozen=True)
class _LevelStyle:
    color: str
    symbol: str
    prefix: str = ""


# Presentation per level (single point of truth)
_LEVEL_STYLES: Dict[int, _LevelStyle] = {
    PR_EMERG:  _LevelStyle(f"{Fore.RED}{Style.BRIGHT}", "✗", "EMERG: "),
    PR_ALERT:  _LevelStyle(f"{Fore.RED}{Style.BRIGHT}", "✗", "ALERT: "),
    PR_CRIT:   _LevelStyle(f"{Fore.RED}{Style.BRIGHT}", "✗", "CRIT: "),
    PR_ERR:    _LevelStyle(f"{Fore.RED}{Style.BRIGHT}", "✗"),
    PR_WARN:   _LevelStyle(f"{Fore.YELLOW}{Style.BRIGHT}", "⚠"),
    PR_NOTICE: _LevelStyle(f"{Fore.CYAN}{Style.BRIGHT}", "ℹ"),
    PR_INFO:   _LevelStyle(Fore.GREEN, "✓"),
    PR_DEBUG:  _LevelStyle(Fore.BLUE, "→"),
}

_current_log_level = PR_INFO
_live_output_active = False
_held_messages: Deque[Tuple[int, str]] = deque()


def _format_message(level: int, msg: str) -> str:
    style = _LEVEL_STYLES[level]
    return f"{style.color}{style.symbol} {style.prefix}{msg}{Style.RESET_ALL}"


def _emit(level: int, msg: str):
    print(_format_message(level, msg), file=sys.stderr)


def _log_message(level: int, msg: str):
    """Drop, hold or print a message depending on level and live output state."""
    if level > _current_log_level:
        return
    if _live_output_active and level > _IMMEDIATE_THRESHOLD:
        _held_messages.append((level, msg))
    else:
        _emit(level, msg)


class LiveOutputHandler:
    """
    Context manager for redrawing a single line of live output.

    Used to animate an input field while a typing log is replayed:
    write_full() backspaces to the common prefix of the previous and the
    new content and prints only the changed tail.

    Usage:
        with get_live_output() as live:
            live.write_full("Hel")
            pr_info("held until the block ends")
            live.write_full("Hello")
    """

    def __init__(self):
        self._active = False
        self._shown = ""

    def __enter__(self):
        global _live_output_active
        _live_output_active = True
        self._active = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """End live output, terminate the line and flush held messages."""
        global _live_output_active
        if not self._active:
            return
        self._active = False
        _live_output_active = False
        print(flush=True)
        while _held_messages:
            _emit(*_held_messages.popleft())

    @property
    def shown(self) -> str:
        return self._shown

    def write(self, text: str):
        if text:
            print(f"{Fore.WHITE}{text}{Style.RESET_ALL}", end='', flush=True)
            self._shown += text

    def write_full(self, text: str):
        """Replace the shown content with text, rewriting only what changed."""
        keep = 0
        for old, new in zip(self._shown, text):
            if old != new:
                break
            keep += 1
        erase = len(self._shown) - keep
        if erase:
            # Overwrite the erased tail with blanks so shorter content leaves no residue
            print('\b' * erase + ' ' * erase + '\b' * erase, end='', flush=True)
        tail = text[keep:]
        if tail:
            print(f"{Fore.WHITE}{tail}{Style.RESET_ALL}", end='', flush=True)
        self._shown = text


def pr_emerg(msg: str):
    """Emergency: unusable state - IMMEDIATE display."""
    _log_message(PR_EMERG, msg)


def pr_alert(msg: str):
    _log_message(PR_ALERT, msg)


def pr_crit(msg: str):
    _log_message(PR_CRIT, msg)


def pr_err(msg: str):
    """Error conditions - IMMEDIATE display."""
    _log_message(PR_ERR, msg)


def pr_warn(msg: str):
    """Warning conditions - HELD during live output."""
    _log_message(PR_WARN, msg)


def pr_notice(msg: str):
    _log_message(PR_NOTICE, msg)


def pr_info(msg: str):
    _log_message(PR_INFO, msg)


def pr_debug(msg: str):
    """Debug-level messages - HELD during live output."""
    _log_message(PR_DEBUG, msg)


def set_log_level(level: int):
    """
    Set global log level.

    Args:
        level: Log level (0-7, PR_EMERG through PR_DEBUG)
    """
    global _current_log_level

    if not (PR_EMERG <= level <= PR_DEBUG):
        pr_warn(f"Invalid log level {level}, using PR_INFO")
        _current_log_level = PR_INFO
    else:
        _current_log_level = level


def get_log_level() -> int:
    return _current_log_level


def get_live_output() -> LiveOutputHandler:
    """Return a live output handler for use in a 'with' statement."""
    return LiveOutputHandler()
