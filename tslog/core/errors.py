"""
Error classes for clearer exception sources.
"""
from __future__ import annotations
from typing import Any

class TslogError(Exception):
    """Base for internal errors."""

class ConfigurationError(TslogError, ValueError):
    def __init__(self, field: str, value: Any, detail: str):
        super().__init__(f"Invalid {field} {value!r}: {detail}")
        self.field = field
        self.value = value
        self.detail = detail
