"""Arithmetic helpers with WebAssembly semantics.

Integer operations take and return unsigned bit patterns of ``bits`` width.
Any Python int is accepted and reduced to that width first. Conversions and
saturating lane operations return plain values in the target range: signed
results are negative Python ints where they are negative. Floats are Python
floats.
"""

from __future__ import annotations

import math
import struct

_F32_MAX = 3.4028234663852886e38
# Doubles strictly between these round to F32_MAX rather than to infinity.
_DEMOTE_MIN = 3.4028234663852886e38
_DEMOTE_MAX = 3.4028235677973366e38


class TrapError(Exception):
    """Raised when an operation traps, e.g. on division by zero."""


def _mask(bits: int) -> int:
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")
    return (1 << bits) - 1


def _unsigned(value: int, bits: int) -> int:
    return value & _mask(bits)


def _signed(value: int, bits: int) -> int:
    value = _unsigned(value, bits)
    if value & (1 << (bits - 1)):
        value -= 1 << bits
    return value


def _shift_amount(rhs: int, bits: int) -> int:
    return rhs & (bits - 1)


def _trunc_div(lhs: int, rhs: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


def canon_nan(value):
    """Replace any NaN with the canonical quiet NaN; other values pass through."""
    if isinstance(value, float) and math.isnan(value):
        return math.nan
    return value


def int_clz(value: int, bits: int) -> int:
    return bits - _unsigned(value, bits).bit_length()


def int_ctz(value: int, bits: int) -> int:
    value = _unsigned(value, bits)
    if value == 0:
        return bits
    return (value & -value).bit_length() - 1


def int_popcnt(value: int, bits: int) -> int:
    return bin(_unsigned(value, bits)).count("1")


def int_neg(value: int, bits: int) -> int:
    return _unsigned(-value, bits)


def int_abs(value: int, bits: int) -> int:
    """Wrapping absolute value: the most negative value is returned unchanged."""
    value = _unsigned(value, bits)
    if value & (1 << (bits - 1)):
        return _unsigned(-value, bits)
    return value


def int_shl(lhs: int, rhs: int, bits: int) -> int:
    return _unsigned(_unsigned(lhs, bits) << _shift_amount(rhs, bits), bits)


def int_shr_u(lhs: int, rhs: int, bits: int) -> int:
    return _unsigned(lhs, bits) >> _shift_amount(rhs, bits)


def int_shr_s(lhs: int, rhs: int, bits: int) -> int:
    return _unsigned(_signed(lhs, bits) >> _shift_amount(rhs, bits), bits)


def int_rotl(lhs: int, rhs: int, bits: int) -> int:
    value = _unsigned(lhs, bits)
    left = _shift_amount(rhs, bits)
    right = _shift_amount(-rhs, bits)
    return _unsigned((value << left) | (value >> right), bits)


def int_rotr(lhs: int, rhs: int, bits: int) -> int:
    value = _unsigned(lhs, bits)
    right = _shift_amount(rhs, bits)
    left = _shift_amount(-rhs, bits)
    return _unsigned((value >> right) | (value << left), bits)


def int_div_u(lhs: int, rhs: int, bits: int) -> int:
    lhs, rhs = _unsigned(lhs, bits), _unsigned(rhs, bits)
    if rhs == 0:
        raise TrapError("integer divide by zero")
    return lhs // rhs


def int_div_s(lhs: int, rhs: int, bits: int) -> int:
    lhs, rhs = _signed(lhs, bits), _signed(rhs, bits)
    if rhs == 0:
        raise TrapError("integer divide by zero")
    if lhs == -(1 << (bits - 1)) and rhs == -1:
        raise TrapError("integer overflow")
    return _unsigned(_trunc_div(lhs, rhs), bits)


def int_rem_u(lhs: int, rhs: int, bits: int) -> int:
    lhs, rhs = _unsigned(lhs, bits), _unsigned(rhs, bits)
    if rhs == 0:
        raise TrapError("integer divide by zero")
    return lhs % rhs


def int_rem_s(lhs: int, rhs: int, bits: int) -> int:
    """Signed remainder; its sign follows the dividend. MIN % -1 is 0."""
    lhs, rhs = _signed(lhs, bits), _signed(rhs, bits)
    if rhs == 0:
        raise TrapError("integer divide by zero")
    if lhs == -(1 << (bits - 1)) and rhs == -1:
        return 0
    return _unsigned(lhs - rhs * _trunc_div(lhs, rhs), bits)


def int_avgr_u(lhs: int, rhs: int, bits: int) -> int:
    """Unsigned average rounding up, computed without overflow."""
    return (_unsigned(lhs, bits) + _unsigned(rhs, bits) + 1) >> 1


def int_extend(value: int, from_bits: int, bits: int) -> int:
    """Sign-extend the low ``from_bits`` bits of ``value`` to ``bits`` bits."""
    sign_bit = 1 << (from_bits - 1)
    low = value & _mask(from_bits)
    return _unsigned((low ^ sign_bit) - sign_bit, bits)


def float_div(lhs: float, rhs: float) -> float:
    if rhs == 0:
        if math.isnan(lhs) or lhs == 0:
            return math.nan
        negative = (math.copysign(1.0, lhs) < 0) != (math.copysign(1.0, rhs) < 0)
        return -math.inf if negative else math.inf
    return canon_nan(lhs / rhs)


def float_min(lhs: float, rhs: float) -> float:
    if math.isnan(lhs) or math.isnan(rhs):
        return math.nan
    if lhs == 0 and rhs == 0:
        return lhs if math.copysign(1.0, lhs) < 0 else rhs
    return rhs if rhs < lhs else lhs


def float_max(lhs: float, rhs: float) -> float:
    if math.isnan(lhs) or math.isnan(rhs):
        return math.nan
    if lhs == 0 and rhs == 0:
        return rhs if math.copysign(1.0, lhs) < 0 else lhs
    return rhs if lhs < rhs else lhs


def float_pmin(lhs: float, rhs: float) -> float:
    """Pseudo-minimum: ``rhs < lhs ? rhs : lhs``."""
    return rhs if rhs < lhs else lhs


def float_pmax(lhs: float, rhs: float) -> float:
    """Pseudo-maximum: ``lhs < rhs ? rhs : lhs``."""
    return rhs if lhs < rhs else lhs


def _round_with(value: float, rounder) -> float:
    if math.isnan(value):
        return math.nan
    if math.isinf(value):
        return value
    return math.copysign(float(rounder(value)), value)


def float_nearest(value: float) -> float:
    """Round to the nearest integer, ties to even."""
    return _round_with(value, round)


def float_ceil(value: float) -> float:
    return _round_with(value, math.ceil)


def float_floor(value: float) -> float:
    return _round_with(value, math.floor)


def float_trunc(value: float) -> float:
    return _round_with(value, math.trunc)


def float_sqrt(value: float) -> float:
    if math.isnan(value) or value < 0:
        return math.nan
    return math.sqrt(value)


def can_convert(value: float, bits: int, signed: bool, source_is_f32: bool) -> bool:
    """Whether truncating ``value`` fits the integer type without trapping."""
    if bits == 32:
        if signed:
            if source_is_f32:
                return -2147483648.0 <= value < 2147483648.0
            return -2147483649.0 < value < 2147483648.0
        return -1.0 < value < 4294967296.0
    if bits == 64:
        if signed:
            return -9223372036854775808.0 <= value < 9223372036854775808.0
        return -1.0 < value < 18446744073709551616.0
    raise ValueError(f"unsupported integer width: {bits}")


def int_trunc(value: float, bits: int, signed: bool, source_is_f32: bool) -> int:
    """Truncate towards zero, trapping on NaN or out-of-range values."""
    if math.isnan(value):
        raise TrapError("invalid conversion to integer")
    if not can_convert(value, bits, signed, source_is_f32):
        raise TrapError("integer overflow")
    return int(value)


def int_trunc_sat(value: float, bits: int, signed: bool, source_is_f32: bool) -> int:
    """Truncate towards zero, saturating out-of-range values; NaN gives 0."""
    if math.isnan(value):
        return 0
    if not can_convert(value, bits, signed, source_is_f32):
        low, high = _range(bits, signed)
        return low if math.copysign(1.0, value) < 0 else high
    return int(value)


def demote_f64(value: float) -> float:
    """Round a double to single precision using WebAssembly rounding."""
    if -_DEMOTE_MIN <= value <= _DEMOTE_MIN:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    if _DEMOTE_MIN < value < _DEMOTE_MAX:
        return _F32_MAX
    if -_DEMOTE_MAX < value < -_DEMOTE_MIN:
        return -_F32_MAX
    if math.isnan(value):
        return math.nan
    return math.copysign(math.inf, value)


def _range(bits: int, signed: bool) -> tuple[int, int]:
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, _mask(bits)


def saturate(value: int, bits: int, signed: bool) -> int:
    """Clamp ``value`` into the range of the integer type."""
    low, high = _range(bits, signed)
    return max(low, min(high, value))


def _lane(value: int, bits: int, signed: bool) -> int:
    return _signed(value, bits) if signed else _unsigned(value, bits)


def int_add_sat(lhs: int, rhs: int, bits: int, signed: bool) -> int:
    return saturate(_lane(lhs, bits, signed) + _lane(rhs, bits, signed), bits, signed)


def int_sub_sat(lhs: int, rhs: int, bits: int, signed: bool) -> int:
    return saturate(_lane(lhs, bits, signed) - _lane(rhs, bits, signed), bits, signed)


def saturating_rounding_q_mul(lhs: int, rhs: int, bits: int) -> int:
    """Fixed-point Q multiplication with rounding and signed saturation."""
    product = _signed(lhs, bits) * _signed(rhs, bits)
    product += 1 << (bits - 2)
    product >>= bits - 1
    return saturate(product, bits, signed=True)