"""
Timestamp rendering with a small token pattern language.

    YYYY-MM-ddTHH:mm:ssZ  ->  2024-03-09T07:05:03+09:00

Text inside single quotes is copied literally ('' is a quote character).
Any character that is not part of a token is copied through unchanged.
"""
from __future__ import annotations
import re
from datetime import datetime
from typing import Callable, Dict

MONTHS = ("January", "February", "March", "April", "May", "June", "July",
          "August", "September", "October", "November", "December")
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

def _offset(moment: datetime, sep: str) -> str:
    delta = moment.utcoffset()
    minutes = int(delta.total_seconds() // 60) if delta is not None else 0
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{sep}{minutes:02d}"

def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12

TOKENS: Dict[str, Callable[[datetime], str]] = {
    "YYYY": lambda d: f"{d.year:04d}",
    "YY": lambda d: f"{d.year % 100:02d}",
    "MMMM": lambda d: MONTHS[d.month - 1],
    "MMM": lambda d: MONTHS[d.month - 1][:3],
    "MM": lambda d: f"{d.month:02d}",
    "M": lambda d: str(d.month),
    "dd": lambda d: f"{d.day:02d}",
    "d": lambda d: str(d.day),
    "wwww": lambda d: WEEKDAYS[d.weekday()],
    "www": lambda d: WEEKDAYS[d.weekday()][:3],
    "HH": lambda d: f"{d.hour:02d}",
    "H": lambda d: str(d.hour),
    "hh": lambda d: f"{_hour12(d):02d}",
    "h": lambda d: str(_hour12(d)),
    "mm": lambda d: f"{d.minute:02d}",
    "m": lambda d: str(d.minute),
    "ss": lambda d: f"{d.second:02d}",
    "s": lambda d: str(d.second),
    "SSS": lambda d: f"{d.microsecond // 1000:03d}",
    "SS": lambda d: f"{d.microsecond // 10000:02d}",
    "S": lambda d: str(d.microsecond // 100000),
    "a": lambda d: "AM" if d.hour < 12 else "PM",
    "ZZ": lambda d: _offset(d, ""),
    "Z": lambda d: _offset(d, ":"),
}

# Longest tokens first so "YYYY" wins over "YY"
_TOKEN_RE = re.compile(
    r"'((?:[^']|'')*)'|"
    + "|".join(re.escape(t) for t in sorted(TOKENS, key=len, reverse=True))
)

def format_datetime(moment: datetime, pattern: str) -> str:
    if not pattern:
        return ""
    if moment.tzinfo is None:
        moment = moment.astimezone()

    def _sub(match: re.Match) -> str:
        token = match.group(0)
        if token.startswith("'"):
            literal = match.group(1)
            return literal.replace("''", "'") if literal else "'"
        return TOKENS[token](moment)

    return _TOKEN_RE.sub(_sub, pattern)
