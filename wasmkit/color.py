"""Terminal colour escape codes, written only when the output supports them."""

from __future__ import annotations

import enum
from typing import TextIO


class ColorCode(enum.Enum):
    DEFAULT = "\x1b[0m"
    BOLD = "\x1b[1m"
    NO_BOLD = "\x1b[22m"
    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"


class Color:
    """Writes colour codes to a stream when enabled and the stream is a terminal."""

    def __init__(self, file: TextIO | None = None, enabled: bool = True) -> None:
        self.file = file
        self.enabled = file is not None and enabled and self.supports_color(file)

    @staticmethod
    def supports_color(file: TextIO) -> bool:
        isatty = getattr(file, "isatty", None)
        if isatty is None:
            return False
        try:
            return bool(isatty())
        except (OSError, ValueError):
            return False

    def maybe_code(self, code: ColorCode) -> str:
        """Return the escape sequence if colour is enabled, else an empty string."""
        return code.value if self.enabled else ""

    def write(self, code: ColorCode) -> None:
        if self.enabled and self.file is not None:
            self.file.write(code.value)