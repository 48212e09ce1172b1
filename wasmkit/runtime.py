"""Support runtime for compiled modules: traps, exceptions and guarded calls."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Hashable


class TrapCode(enum.IntEnum):
    """Reasons a running module can trap. ``NONE`` means no trap occurred."""

    NONE = 0
    OOB = 1
    INT_OVERFLOW = 2
    DIV_BY_ZERO = 3
    INVALID_CONVERSION = 4
    UNREACHABLE = 5
    CALL_INDIRECT = 6
    UNCAUGHT_EXCEPTION = 7
    UNALIGNED = 8
    EXHAUSTION = 9


_TRAP_MESSAGES = {
    TrapCode.NONE: "No error",
    TrapCode.OOB: "Out-of-bounds access in linear memory or a table",
    TrapCode.EXHAUSTION: "Call stack exhausted",
    TrapCode.INT_OVERFLOW: "Integer overflow on divide or truncation",
    TrapCode.DIV_BY_ZERO: "Integer divide by zero",
    TrapCode.INVALID_CONVERSION: "Conversion from NaN to integer",
    TrapCode.UNREACHABLE: "Unreachable instruction executed",
    TrapCode.CALL_INDIRECT: "Invalid call_indirect or return_call_indirect",
    TrapCode.UNCAUGHT_EXCEPTION: "Uncaught exception",
    TrapCode.UNALIGNED: "Unaligned atomic memory access",
}


def strerror(code: int) -> str:
    """Return a human-readable description of a trap code."""
    try:
        return _TRAP_MESSAGES[TrapCode(code)]
    except ValueError:
        return "invalid trap code"


class WasmTrap(Exception):
    """Raised when execution traps."""

    def __init__(self, code: TrapCode) -> None:
        self.code = TrapCode(code)
        super().__init__(strerror(self.code))


def trap(code: int) -> None:
    """Raise a :class:`WasmTrap` for ``code``; ``TrapCode.NONE`` is not a trap."""
    code = TrapCode(code)
    if code is TrapCode.NONE:
        raise ValueError("cannot trap with TrapCode.NONE")
    raise WasmTrap(code)


class WasmException(Exception):
    """A module-level exception carrying a tag and its payload bytes."""

    def __init__(self, tag: Hashable | None, values: bytes) -> None:
        self.tag = tag
        self.values = bytes(values)
        super().__init__(f"exception with tag {tag!r} ({len(self.values)} bytes)")

    @property
    def size(self) -> int:
        return len(self.values)


@dataclass
class _ActiveException:
    tag: Hashable | None = None
    values: bytes = b""


class Runtime:
    """Per-thread runtime state: initialisation, active exception and call depth."""

    def __init__(self) -> None:
        self._initialized = False
        self._active = _ActiveException()
        self.call_stack_depth = 0

    def init(self) -> None:
        self._initialized = True

    def free(self) -> None:
        if not self._initialized:
            raise RuntimeError("runtime is not initialized")
        self._initialized = False

    def is_initialized(self) -> bool:
        return self._initialized

    def load_exception(self, tag: Hashable, values: bytes) -> None:
        """Make ``tag`` and ``values`` the active exception."""
        self._active = _ActiveException(tag, bytes(values))

    @property
    def exception_tag(self) -> Hashable | None:
        return self._active.tag

    @property
    def exception_size(self) -> int:
        return len(self._active.values)

    @property
    def exception(self) -> bytes:
        return self._active.values

    def throw(self) -> None:
        """Raise the active exception."""
        raise WasmException(self._active.tag, self._active.values)

    def run(self, func: Callable[..., Any], *args: Any) -> tuple[TrapCode, Any]:
        """Call ``func`` guarded against traps.

        Returns ``(TrapCode.NONE, result)`` on success or ``(code, None)`` when
        the call trapped. An exception that escapes the call counts as an
        uncaught-exception trap and exhausting the Python stack as a
        call-stack-exhaustion trap. The call depth is restored after a trap.
        """
        saved_depth = self.call_stack_depth
        try:
            return TrapCode.NONE, func(*args)
        except WasmTrap as error:
            code = error.code
        except WasmException:
            code = TrapCode.UNCAUGHT_EXCEPTION
        except RecursionError:
            code = TrapCode.EXHAUSTION
        self.call_stack_depth = saved_depth
        return code, None