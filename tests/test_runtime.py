import pytest

from wasmkit.runtime import (
    Runtime,
    TrapCode,
    WasmException,
    WasmTrap,
    strerror,
    trap,
)


@pytest.mark.parametrize(
    "code, message",
    [
        (TrapCode.NONE, "No error"),
        (TrapCode.OOB, "Out-of-bounds access in linear memory or a table"),
        (TrapCode.EXHAUSTION, "Call stack exhausted"),
        (TrapCode.DIV_BY_ZERO, "Integer divide by zero"),
        (TrapCode.UNREACHABLE, "Unreachable instruction executed"),
        (TrapCode.UNALIGNED, "Unaligned atomic memory access"),
    ],
)
def test_strerror_messages(code, message):
    assert strerror(code) == message


def test_strerror_unknown_code():
    assert strerror(1000) == "invalid trap code"


def test_trap_raises_with_code():
    with pytest.raises(WasmTrap) as info:
        trap(TrapCode.INT_OVERFLOW)
    assert info.value.code is TrapCode.INT_OVERFLOW
    assert str(info.value) == strerror(TrapCode.INT_OVERFLOW)


def test_trap_none_is_rejected():
    with pytest.raises(ValueError):
        trap(TrapCode.NONE)


def test_init_and_free():
    rt = Runtime()
    assert rt.is_initialized() is False
    rt.init()
    assert rt.is_initialized() is True
    rt.free()
    assert rt.is_initialized() is False


def test_free_without_init_fails():
    with pytest.raises(RuntimeError):
        Runtime().free()


def test_load_and_throw_exception():
    rt = Runtime()
    rt.load_exception("tag-a", b"\x01\x02\x03")
    assert rt.exception_tag == "tag-a"
    assert rt.exception_size == 3
    assert rt.exception == b"\x01\x02\x03"
    with pytest.raises(WasmException) as info:
        rt.throw()
    assert info.value.tag == "tag-a"
    assert info.value.values == b"\x01\x02\x03"
    assert info.value.size == 3


def test_run_returns_result():
    rt = Runtime()
    assert rt.run(lambda a, b: a + b, 2, 5) == (TrapCode.NONE, 7)


def test_run_catches_trap_and_restores_depth():
    rt = Runtime()
    rt.call_stack_depth = 4

    def body():
        rt.call_stack_depth += 10
        trap(TrapCode.DIV_BY_ZERO)

    assert rt.run(body) == (TrapCode.DIV_BY_ZERO, None)
    assert rt.call_stack_depth == 4


def test_run_uncaught_exception_becomes_trap():
    rt = Runtime()
    rt.load_exception(object(), b"")
    assert rt.run(rt.throw) == (TrapCode.UNCAUGHT_EXCEPTION, None)


def test_run_stack_exhaustion():
    rt = Runtime()

    def recurse(n):
        return recurse(n + 1)

    assert rt.run(recurse, 0) == (TrapCode.EXHAUSTION, None)


def test_run_lets_other_errors_through():
    rt = Runtime()

    def body():
        raise KeyError("x")

    with pytest.raises(KeyError):
        rt.run(body)