"""Timestamp-level-log: a small leveled, colorized console logger."""
from tslog.config import DEFAULT_TIMESTAMP_FORMAT, LogOptions
from tslog.core.errors import ConfigurationError, TslogError
from tslog.core.levels import LEVELS, LogLevel
from tslog.log import Log, logger

__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "LEVELS",
    "ConfigurationError",
    "Log",
    "LogLevel",
    "LogOptions",
    "TslogError",
    "logger",
]
