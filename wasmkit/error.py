"""Diagnostic records produced while reading, validating or parsing modules."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from wasmkit.common import Location


class ErrorLevel(enum.Enum):
    WARNING = "warning"
    ERROR = "error"


def get_error_level_name(level: ErrorLevel) -> str:
    return ErrorLevel(level).value


@dataclass
class Error:
    """A single diagnostic with its severity and source location."""

    error_level: ErrorLevel = ErrorLevel.ERROR
    loc: Location = field(default_factory=Location)
    message: str = ""