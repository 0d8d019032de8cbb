from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from tslog.core.errors import ConfigurationError
from tslog.core.levels import IndicatorMode, LogLevel, indicator, rank

DEFAULT_TIMESTAMP_FORMAT = "YYYY-MM-ddTHH:mm:ssZ"

# Option names as spelled by the original Deno module
_ALIASES = {
    "minLogLevel": "min_level",
    "levelIndicator": "level_indicator",
    "datetimeFormat": "timestamp_format",
    "addNewLine": "add_newline",
}

@dataclass(frozen=True)
class LogOptions:
    min_level: LogLevel = "debug"               # debug, info, warn, error
    level_indicator: IndicatorMode = "symbol"   # none, full, initial, symbol
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    add_newline: bool = False

    def validate(self) -> "LogOptions":
        rank(self.min_level)
        indicator(self.level_indicator)
        if not isinstance(self.timestamp_format, str):
            raise ConfigurationError("timestamp format", self.timestamp_format, "expected a string")
        if not isinstance(self.add_newline, bool):
            raise ConfigurationError("add_newline", self.add_newline, "expected a bool")
        return self

    def merged(self, **overrides: Any) -> "LogOptions":
        """Copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "LogOptions":
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError("option", key, f"expected one of {', '.join(sorted(known))}")
            kwargs[name] = value
        return cls(**kwargs).validate()
