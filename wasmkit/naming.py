"""Name generation and clean-up of module item names into identifiers."""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping
from dataclasses import dataclass, field
from typing import Any

MAX_IDENTIFIER_LENGTH = 100
MIN_CONTENT_IDENTIFIER_SIZE = 7
MAX_CONTENT_IDENTIFIER_SIZE = 30

# Common C++ keywords and library words that bloat mangled-looking names.
CXX_NAME_FILTER = frozenset(
    {
        "const",
        "std",
        "allocator",
        "char",
        "basic",
        "traits",
        "wchar",
        "t",
        "void",
        "int",
        "unsigned",
        "2",
        "cxxabiv1",
        "short",
        "4096ul",
    }
)


@dataclass
class DataSegment:
    """A data segment as far as naming is concerned."""

    name: str
    data: bytes = field(default=b"")


def index_to_alpha_name(index: int) -> str:
    """Return a short alphabetic name for an index: a, b, ..., z, aa, ba, ..."""
    chars = []
    while True:
        chars.append(chr(ord("a") + index % 26))
        index //= 26
        if index == 0:
            break
        # Continue the remaining sequence with 'a' rather than 'b'.
        index -= 1
    return "".join(chars)


def _is_ascii_alnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


def rename_to_identifier(
    name: str,
    index: int,
    bindings: MutableMapping[str, int],
    word_filter: Iterable[str] | None = None,
) -> str:
    """Turn ``name`` into a unique identifier, update ``bindings`` and return it.

    Text between parentheses is dropped, other non-alphanumeric characters
    become single underscores, and underscore-separated words found in
    ``word_filter`` are removed.
    """
    filter_set = frozenset(word_filter) if word_filter is not None else None
    s = ""
    nesting = 0
    word_start = 0
    for read, c in enumerate(name, start=1):
        if c == "(":
            nesting += 1
        if c == ")":
            nesting -= 1
        if nesting:
            continue
        if not _is_ascii_alnum(c):
            c = "_"
        if c == "_" and (not s or s[-1] == "_"):
            continue
        s += c
        if filter_set is not None and (c == "_" or read == len(name)):
            word_end = len(s) - 1 if c == "_" else len(s)
            if s[word_start:word_end] in filter_set:
                s = s[:word_start]
            word_start = len(s)
    if s.endswith("_"):
        s = s[:-1]
    s = s[:MAX_IDENTIFIER_LENGTH]
    if not s:
        s = "__empty"

    bindings.pop(name, None)
    base = s
    disambiguator = 0
    while s in bindings:
        disambiguator += 1
        s = f"{base}_{disambiguator}"
    bindings[s] = index
    return s


def rename_to_identifiers(
    things: Iterable[Any],
    bindings: MutableMapping[str, int],
    word_filter: Iterable[str] | None = None,
) -> None:
    """Rename the ``name`` attribute of every item in place."""
    filter_set = frozenset(word_filter) if word_filter is not None else None
    for index, thing in enumerate(things):
        thing.name = rename_to_identifier(thing.name, index, bindings, filter_set)


def rename_to_contents(
    segments: Iterable[DataSegment], bindings: MutableMapping[str, int]
) -> None:
    """Name generated data segments after the printable text they contain."""
    for index, segment in enumerate(segments):
        if not segment.name.startswith("d_"):
            # Named explicitly by a symbol.
            continue
        s = "d_"
        for byte in segment.data:
            c = chr(byte)
            if _is_ascii_alnum(c) or c == "_":
                s += c
            if len(s) >= MAX_CONTENT_IDENTIFIER_SIZE:
                break
        if len(s) < MIN_CONTENT_IDENTIFIER_SIZE:
            continue
        if s in bindings:
            continue
        bindings.pop(segment.name, None)
        segment.name = s
        bindings[s] = index