"""LEB128 variable-length integer encoding and decoding."""

from __future__ import annotations

_U32_MAX = (1 << 32) - 1
_U64_MAX = (1 << 64) - 1
_FIXED_U32_LENGTH = 5


class Leb128Error(ValueError):
    """Raised when a LEB128 value is truncated, too long or out of range."""


def _check_range(value: int, bits: int, signed: bool) -> int:
    """Validate ``value`` and return it as a signed or unsigned Python int.

    Signed encoders also accept the unsigned bit pattern of a negative value.
    """
    limit = 1 << bits
    if signed:
        if not -(limit >> 1) <= value < limit:
            raise ValueError(f"{value} does not fit in a signed {bits}-bit integer")
        value &= limit - 1
        if value & (limit >> 1):
            value -= limit
        return value
    if not 0 <= value < limit:
        raise ValueError(f"{value} does not fit in an unsigned {bits}-bit integer")
    return value


def _encode_unsigned(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _encode_signed(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        done = (value == 0 and not byte & 0x40) or (value == -1 and byte & 0x40)
        if done:
            out.append(byte)
            return bytes(out)
        out.append(byte | 0x80)


def _encode_fixed(value: int, length: int) -> bytes:
    """Encode into exactly ``length`` bytes; ``value`` may be negative."""
    out = bytearray()
    for position in range(length):
        byte = value & 0x7F
        value >>= 7
        out.append(byte if position == length - 1 else byte | 0x80)
    return bytes(out)


def u32_leb128_length(value: int) -> int:
    """Return the number of bytes of the shortest unsigned encoding."""
    return len(encode_u32_leb128(value))


def encode_u32_leb128(value: int) -> bytes:
    return _encode_unsigned(_check_range(value, 32, signed=False))


def encode_s32_leb128(value: int) -> bytes:
    return _encode_signed(_check_range(value, 32, signed=True))


def encode_u64_leb128(value: int) -> bytes:
    return _encode_unsigned(_check_range(value, 64, signed=False))


def encode_s64_leb128(value: int) -> bytes:
    return _encode_signed(_check_range(value, 64, signed=True))


def encode_fixed_u32_leb128(value: int) -> bytes:
    """Encode an unsigned 32-bit value padded to five bytes."""
    return _encode_fixed(_check_range(value, 32, signed=False), _FIXED_U32_LENGTH)


def encode_fixed_s32_leb128(value: int) -> bytes:
    """Encode a signed 32-bit value padded to five bytes."""
    return _encode_fixed(_check_range(value, 32, signed=True), _FIXED_U32_LENGTH)


def _decode(data: bytes, offset: int, bits: int, signed: bool) -> tuple[int, int]:
    max_length = (bits + 6) // 7
    result = 0
    shift = 0
    for length, byte in enumerate(data[offset : offset + max_length], start=1):
        result |= (byte & 0x7F) << shift
        shift += 7
        if byte & 0x80:
            continue
        if signed:
            if result & (1 << (shift - 1)):
                result -= 1 << shift
            if not -(1 << (bits - 1)) <= result < (1 << (bits - 1)):
                raise Leb128Error(f"signed LEB128 value overflows {bits} bits")
        elif result >> bits:
            raise Leb128Error(f"unsigned LEB128 value overflows {bits} bits")
        return result, length
    if len(data) - offset >= max_length:
        raise Leb128Error(f"LEB128 value longer than {max_length} bytes")
    raise Leb128Error("truncated LEB128 value")


def decode_u32_leb128(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode an unsigned 32-bit value; return ``(value, length)``."""
    return _decode(data, offset, 32, signed=False)


def decode_u64_leb128(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode an unsigned 64-bit value; return ``(value, length)``."""
    return _decode(data, offset, 64, signed=False)


def decode_s32_leb128(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a signed 32-bit value; return ``(value, length)``."""
    return _decode(data, offset, 32, signed=True)


def decode_s64_leb128(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a signed 64-bit value; return ``(value, length)``."""
    return _decode(data, offset, 64, signed=True)