"""Core value types, enumerations and small helpers shared across the toolkit."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field

PAGE_SIZE = 0x10000
MAX_PAGES32 = 0x10000
MAX_PAGES64 = 0x1000000000000

USE_NATURAL_ALIGNMENT = 0xFFFFFFFFFFFFFFFF

SYMBOL_MASK_VISIBILITY = 0x4
SYMBOL_MASK_BINDING = 0x3
SYMBOL_FLAG_UNDEFINED = 0x10
SYMBOL_FLAG_EXPORTED = 0x20
SYMBOL_FLAG_EXPLICIT_NAME = 0x40
SYMBOL_FLAG_NO_STRIP = 0x80
SYMBOL_FLAG_TLS = 0x100
SYMBOL_FLAG_ABS = 0x200
SYMBOL_FLAG_MAX = 0x3FF

SEGMENT_FLAG_STRINGS = 0x1
SEGMENT_FLAG_TLS = 0x2
SEGMENT_FLAG_RETAIN = 0x4
SEGMENT_FLAG_MAX = 0xFF


class IndexType(enum.Enum):
    """Type used to index a memory or table."""

    I32 = "i32"
    I64 = "i64"


@dataclass
class Limits:
    """Size limits of a memory or table; ``max`` is None when unbounded."""

    initial: int = 0
    max: int | None = None
    is_shared: bool = False
    is_64: bool = False

    @property
    def has_max(self) -> bool:
        return self.max is not None

    def index_type(self) -> IndexType:
        return IndexType.I64 if self.is_64 else IndexType.I32


_V128_SIZE = 16


@dataclass
class V128:
    """A 128-bit SIMD value stored as 16 little-endian bytes."""

    data: bytearray = field(default_factory=lambda: bytearray(_V128_SIZE))

    def __post_init__(self) -> None:
        self.data = bytearray(self.data)
        if len(self.data) != _V128_SIZE:
            raise ValueError(f"v128 needs {_V128_SIZE} bytes, got {len(self.data)}")

    @classmethod
    def from_u32(cls, x0: int, x1: int, x2: int, x3: int) -> "V128":
        value = cls()
        for lane, x in enumerate((x0, x1, x2, x3)):
            value.set_u32(lane, x)
        return value

    @staticmethod
    def _check_lane(lane: int, size: int) -> None:
        if lane < 0 or (lane + 1) * size > _V128_SIZE:
            raise IndexError(f"lane {lane} out of range for {size}-byte lanes")

    def _get(self, fmt: str, lane: int) -> int:
        size = struct.calcsize(fmt)
        self._check_lane(lane, size)
        return struct.unpack_from("<" + fmt, self.data, lane * size)[0]

    def _set(self, fmt: str, lane: int, value: int) -> None:
        size = struct.calcsize(fmt)
        self._check_lane(lane, size)
        mask = (1 << (size * 8)) - 1
        struct.pack_into("<" + fmt, self.data, lane * size, value & mask)

    def u8(self, lane: int) -> int:
        return self._get("B", lane)

    def u16(self, lane: int) -> int:
        return self._get("H", lane)

    def u32(self, lane: int) -> int:
        return self._get("I", lane)

    def u64(self, lane: int) -> int:
        return self._get("Q", lane)

    def set_u8(self, lane: int, value: int) -> None:
        self._set("B", lane, value)

    def set_u16(self, lane: int, value: int) -> None:
        self._set("H", lane, value)

    def set_u32(self, lane: int, value: int) -> None:
        self._set("I", lane, value)

    def set_u64(self, lane: int, value: int) -> None:
        self._set("Q", lane, value)

    def is_zero(self) -> bool:
        return not any(self.data)

    def set_zero(self) -> None:
        self.data[:] = bytes(_V128_SIZE)


@dataclass
class Location:
    """A position in a text source (line/columns) or a binary (offset)."""

    filename: str = ""
    line: int = 0
    first_column: int = 0
    last_column: int = 0
    offset: int | None = None


class LabelType(enum.Enum):
    FUNC = enum.auto()
    INIT_EXPR = enum.auto()
    BLOCK = enum.auto()
    LOOP = enum.auto()
    IF = enum.auto()
    ELSE = enum.auto()
    TRY = enum.auto()
    CATCH = enum.auto()


class SegmentKind(enum.Enum):
    ACTIVE = enum.auto()
    PASSIVE = enum.auto()
    DECLARED = enum.auto()


class ExpectedNan(enum.Enum):
    NONE = enum.auto()
    CANONICAL = enum.auto()
    ARITHMETIC = enum.auto()


class SegmentFlags(enum.IntFlag):
    """Segment flag bits as they appear in the binary format."""

    NONE = 0
    PASSIVE = 1
    EXPLICIT_INDEX = 2
    DECLARED = 3
    USE_ELEM_EXPRS = 4
    MAX = 7


class RelocType(enum.IntEnum):
    FUNC_INDEX_LEB = 0
    TABLE_INDEX_SLEB = 1
    TABLE_INDEX_I32 = 2
    MEMORY_ADDRESS_LEB = 3
    MEMORY_ADDRESS_SLEB = 4
    MEMORY_ADDRESS_I32 = 5
    TYPE_INDEX_LEB = 6
    GLOBAL_INDEX_LEB = 7
    FUNCTION_OFFSET_I32 = 8
    SECTION_OFFSET_I32 = 9
    TAG_INDEX_LEB = 10
    MEMORY_ADDRESS_REL_SLEB = 11
    TABLE_INDEX_REL_SLEB = 12
    GLOBAL_INDEX_I32 = 13
    MEMORY_ADDRESS_LEB64 = 14
    MEMORY_ADDRESS_SLEB64 = 15
    MEMORY_ADDRESS_I64 = 16
    MEMORY_ADDRESS_REL_SLEB64 = 17
    TABLE_INDEX_SLEB64 = 18
    TABLE_INDEX_I64 = 19
    TABLE_NUMBER_LEB = 20
    MEMORY_ADDRESS_TLS_SLEB = 21
    MEMORY_ADDRESS_TLS_I32 = 22


@dataclass
class Reloc:
    type: RelocType
    offset: int
    index: int
    addend: int = 0


class LinkingEntryType(enum.IntEnum):
    SEGMENT_INFO = 5
    INIT_FUNCTIONS = 6
    COMDAT_INFO = 7
    SYMBOL_TABLE = 8


class DylinkEntryType(enum.IntEnum):
    MEM_INFO = 1
    NEEDED = 2
    EXPORT_INFO = 3
    IMPORT_INFO = 4


class SymbolType(enum.IntEnum):
    FUNCTION = 0
    DATA = 1
    GLOBAL = 2
    SECTION = 3
    TAG = 4
    TABLE = 5


class ComdatType(enum.IntEnum):
    DATA = 0x0
    FUNCTION = 0x1


class SymbolVisibility(enum.IntEnum):
    DEFAULT = 0
    HIDDEN = 4


class SymbolBinding(enum.IntEnum):
    GLOBAL = 0
    WEAK = 1
    LOCAL = 2


class ExternalKind(enum.IntEnum):
    """Kinds of importable/exportable items; values match the binary format."""

    FUNC = 0
    TABLE = 1
    MEMORY = 2
    GLOBAL = 3
    TAG = 4


_SYMBOL_TYPE_NAMES = {
    SymbolType.FUNCTION: "func",
    SymbolType.GLOBAL: "global",
    SymbolType.DATA: "data",
    SymbolType.SECTION: "section",
    SymbolType.TAG: "tag",
    SymbolType.TABLE: "table",
}


def get_kind_name(kind: int) -> str:
    """Return the lower-case name of an external kind, or ``<error_kind>``."""
    try:
        return ExternalKind(kind).name.lower()
    except ValueError:
        return "<error_kind>"


def get_reloc_type_name(reloc: int) -> str:
    """Return the name of a relocation type, or ``<error_reloc_type>``."""
    try:
        return RelocType(reloc).name
    except ValueError:
        return "<error_reloc_type>"


def get_symbol_type_name(symbol_type: int) -> str:
    """Return the short name of a symbol type, or ``<error_symbol_type>``."""
    try:
        return _SYMBOL_TYPE_NAMES[SymbolType(symbol_type)]
    except ValueError:
        return "<error_symbol_type>"


def convert_backslash_to_slash(path: str) -> str:
    return path.replace("\\", "/")


def swap_bytes(data: bytes) -> bytes:
    """Return the bytes in reverse order."""
    return bytes(reversed(data))


def bytes_to_pages(size: int) -> int:
    return size >> 16


def align_up_to_page(size: int) -> int:
    return (size + PAGE_SIZE - 1) & ~(PAGE_SIZE - 1)