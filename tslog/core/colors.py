from __future__ import annotations
import re
from typing import Callable

from colorama import Fore, Style, just_fix_windows_console

from tslog.core.levels import LEVEL_STYLES

just_fix_windows_console()

# (text, level) -> styled text
Styler = Callable[[str, str], str]

_OPEN = {
    'red': Fore.RED,
    'yellow': Fore.YELLOW,
    'blue': Fore.BLUE,
    'reset': Style.RESET_ALL,
}

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

def wrap(text: str, color: str) -> str:
    """Wrap text in the open/close codes for ``color``."""
    if color not in _OPEN:
        return text
    close = Style.RESET_ALL if color == 'reset' else Fore.RESET
    return f"{_OPEN[color]}{text}{close}"

def ansi(text: str, level: str) -> str:
    """Color text the way the given severity is displayed."""
    return wrap(text, LEVEL_STYLES[level].color)

def plain(text: str, level: str = "") -> str:
    return text

def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub('', text)
