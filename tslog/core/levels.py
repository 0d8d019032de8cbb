"""Level metadata: ordering, colors & glyphs, indicator formatters.

Provides:
  LEVELS: severities in ascending order
  LEVEL_STYLES: mapping severity -> LevelStyle(color, symbol)
  INDICATORS: mapping indicator mode -> formatter(level) -> str
"""
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Literal, Mapping, Tuple

from tslog.core.errors import ConfigurationError

LogLevel = Literal["debug", "info", "warn", "error"]
IndicatorMode = Literal["none", "full", "initial", "symbol"]

LEVELS: Tuple[str, ...] = ("debug", "info", "warn", "error")

@dataclass(frozen=True)
class LevelStyle:
    color: str
    symbol: str

LEVEL_STYLES: Mapping[str, LevelStyle] = MappingProxyType({
    "debug": LevelStyle("reset", "✔"),
    "info": LevelStyle("blue", "ℹ"),
    "warn": LevelStyle("yellow", "⚠"),
    "error": LevelStyle("red", "✖"),
})

# Width of the longest level name
FULL_WIDTH = 5

INDICATORS: Mapping[str, Callable[[str], str]] = MappingProxyType({
    "none": lambda level: "",
    "full": lambda level: " " + level.upper().ljust(FULL_WIDTH),
    "initial": lambda level: " " + level[0].upper(),
    "symbol": lambda level: " " + LEVEL_STYLES[level].symbol,
})

def rank(level: str) -> int:
    """Position of ``level`` in the ascending severity order."""
    try:
        return LEVELS.index(level)
    except (ValueError, TypeError):
        raise ConfigurationError("log level", level, f"expected one of {', '.join(LEVELS)}") from None

def indicator(mode: str) -> Callable[[str], str]:
    try:
        return INDICATORS[mode]
    except (KeyError, TypeError):
        raise ConfigurationError("level indicator", mode, f"expected one of {', '.join(INDICATORS)}") from None
