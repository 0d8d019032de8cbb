"""
Timestamp-level console logger.

    log = Log(min_level="info", level_indicator="full")
    log.info("listening on", 8080)   # 2024-03-09T07:05:03+09:00 INFO  listening on 8080

debug/info are written to stdout, warn/error to stderr. Severities below
``min_level`` are switched off at construction and do no work when called.
"""
from __future__ import annotations
import sys
from datetime import datetime
from typing import Any, Callable, FrozenSet, Mapping, Optional, TextIO, Tuple, Union

from tslog.config import LogOptions
from tslog.core.colors import Styler, ansi
from tslog.core.errors import ConfigurationError
from tslog.core.levels import LEVELS, IndicatorMode, LogLevel, indicator, rank
from tslog.core.timefmt import format_datetime

Clock = Callable[[], datetime]

def local_now() -> datetime:
    return datetime.now().astimezone()

class Log:
    __slots__ = ("options", "_live", "_indicator", "_suffix", "_styler", "_clock")

    def __init__(
        self,
        options: Union[LogOptions, Mapping[str, Any], None] = None,
        *,
        min_level: Optional[LogLevel] = None,
        level_indicator: Optional[IndicatorMode] = None,
        timestamp_format: Optional[str] = None,
        add_newline: Optional[bool] = None,
        styler: Optional[Styler] = None,
        clock: Optional[Clock] = None,
    ):
        if isinstance(options, Mapping):
            options = LogOptions.from_mapping(options)
        elif options is not None and not isinstance(options, LogOptions):
            raise ConfigurationError("options", options, "expected LogOptions or a mapping")
        opts = (options or LogOptions()).merged(
            min_level=min_level,
            level_indicator=level_indicator,
            timestamp_format=timestamp_format,
            add_newline=add_newline,
        ).validate()
        floor = rank(opts.min_level)
        init = object.__setattr__
        init(self, "options", opts)
        init(self, "_live", frozenset(lvl for lvl in LEVELS if rank(lvl) >= floor))
        init(self, "_indicator", indicator(opts.level_indicator))
        init(self, "_suffix", ("\n",) if opts.add_newline else ())
        init(self, "_styler", styler or ansi)
        init(self, "_clock", clock or local_now)

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        o = self.options
        return (f"Log(min_level={o.min_level!r}, level_indicator={o.level_indicator!r}, "
                f"timestamp_format={o.timestamp_format!r}, add_newline={o.add_newline!r})")

    @property
    def live_levels(self) -> FrozenSet[str]:
        return self._live

    def enabled(self, level: str) -> bool:
        return level in self._live

    def prefix(self, moment: datetime, level: LogLevel) -> str:
        """Timestamp + level indicator, colored for ``level``.

        Pure: depends only on the arguments and the frozen options, so it is
        safe to call directly with a fixed ``moment``.
        """
        stamp = format_datetime(moment, self.options.timestamp_format)
        return self._styler((stamp + self._indicator(level)).lstrip(), level)

    _prefix = prefix

    def _output(self, moment: datetime, level: LogLevel, msg: Tuple[Any, ...]):
        stream: TextIO = sys.stderr if level in ("warn", "error") else sys.stdout
        print(self.prefix(moment, level), *msg, *self._suffix, file=stream)

    def debug(self, *msg: Any):
        if "debug" in self._live:
            self._output(self._clock(), "debug", msg)

    def info(self, *msg: Any):
        if "info" in self._live:
            self._output(self._clock(), "info", msg)

    def warn(self, *msg: Any):
        if "warn" in self._live:
            self._output(self._clock(), "warn", msg)

    def error(self, *msg: Any):
        if "error" in self._live:
            self._output(self._clock(), "error", msg)

logger = Log()
