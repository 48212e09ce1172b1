"""Constants and section enumerations of the binary module format."""

from __future__ import annotations

import enum

BINARY_MAGIC = 0x6D736100
BINARY_VERSION = 1
BINARY_LIMITS_HAS_MAX_FLAG = 0x1
BINARY_LIMITS_IS_SHARED_FLAG = 0x2
BINARY_LIMITS_IS_64_FLAG = 0x4
BINARY_LIMITS_ALL_FLAGS = (
    BINARY_LIMITS_HAS_MAX_FLAG | BINARY_LIMITS_IS_SHARED_FLAG | BINARY_LIMITS_IS_64_FLAG
)

BINARY_SECTION_NAME = "name"
BINARY_SECTION_RELOC = "reloc"
BINARY_SECTION_LINKING = "linking"
BINARY_SECTION_TARGET_FEATURES = "target_features"
BINARY_SECTION_DYLINK = "dylink"
BINARY_SECTION_DYLINK0 = "dylink.0"
BINARY_SECTION_CODE_METADATA = "metadata.code."


class BinarySection(enum.IntEnum):
    """Section ids as encoded in the binary format."""

    CUSTOM = 0
    TYPE = 1
    IMPORT = 2
    FUNCTION = 3
    TABLE = 4
    MEMORY = 5
    TAG = 13
    GLOBAL = 6
    EXPORT = 7
    START = 8
    ELEM = 9
    DATA_COUNT = 12
    CODE = 10
    DATA = 11
    INVALID = -1


# Sections in the order they must appear in a module.
_SECTION_ORDER = (
    BinarySection.CUSTOM,
    BinarySection.TYPE,
    BinarySection.IMPORT,
    BinarySection.FUNCTION,
    BinarySection.TABLE,
    BinarySection.MEMORY,
    BinarySection.TAG,
    BinarySection.GLOBAL,
    BinarySection.EXPORT,
    BinarySection.START,
    BinarySection.ELEM,
    BinarySection.DATA_COUNT,
    BinarySection.CODE,
    BinarySection.DATA,
)


class NameSectionSubsection(enum.IntEnum):
    MODULE = 0
    FUNCTION = 1
    LOCAL = 2
    LABEL = 3
    TYPE = 4
    TABLE = 5
    MEMORY = 6
    GLOBAL = 7
    ELEM_SEGMENT = 8
    DATA_SEGMENT = 9
    FIELD = 10
    TAG = 11


def _valid_section(section: int) -> BinarySection:
    try:
        result = BinarySection(section)
    except ValueError:
        result = BinarySection.INVALID
    if result is BinarySection.INVALID:
        raise ValueError(f"invalid binary section: {section!r}")
    return result


def get_section_order(section: int) -> int:
    """Return the position a section must take in a module."""
    return _SECTION_ORDER.index(_valid_section(section))


def get_section_name(section: int) -> str:
    """Return the lower-case name of a section."""
    return _valid_section(section).name.lower()