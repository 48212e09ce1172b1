# wasmkit

Pure-Python building blocks for working with WebAssembly modules. It has no
dependencies outside the standard library.

## What is inside

- `wasmkit.common`: core enums and value types: `Limits` (with `has_max` and
  `index_type()`), `V128` (16 little-endian bytes with `u8`/`u16`/`u32`/`u64`
  lane accessors, their `set_*` counterparts, `is_zero`, `set_zero` and
  `V128.from_u32`), `Location`, `Reloc`, and the enums `LabelType`,
  `SegmentKind`, `ExpectedNan`, `SegmentFlags`, `RelocType`,
  `LinkingEntryType`, `DylinkEntryType`, `SymbolType`, `ComdatType`,
  `SymbolVisibility`, `SymbolBinding` and `ExternalKind`. Helpers:
  `get_kind_name`, `get_reloc_type_name`, `get_symbol_type_name` (each returns
  an `<error_...>` string for unknown values), `convert_backslash_to_slash`,
  `swap_bytes`, `bytes_to_pages` and `align_up_to_page`.
- `wasmkit.binary`: format constants (`BINARY_MAGIC`, `BINARY_VERSION`, the
  limits flags, custom section names), the `BinarySection` and
  `NameSectionSubsection` enums, and `get_section_order` /
  `get_section_name`, which raise `ValueError` for an invalid section.
- `wasmkit.error`: `Error` records with an `ErrorLevel` and a `Location`, and
  `get_error_level_name`.
- `wasmkit.color`: ANSI escape codes as `ColorCode`, and a `Color` writer that
  emits them only when enabled and the stream is a terminal.
- `wasmkit.leb128`: LEB128 encoding and decoding of 32- and 64-bit signed and
  unsigned values, including five-byte fixed-width 32-bit encodings. Encoders
  raise `ValueError` for out-of-range input; decoders return
  `(value, length)` and raise `Leb128Error` on truncated, over-long or
  overflowing input.
- `wasmkit.naming`: `index_to_alpha_name`, `rename_to_identifier` and
  `rename_to_identifiers` for turning arbitrary (often mangled C++) names into
  short, unique identifiers tracked in a bindings mapping, the
  `CXX_NAME_FILTER` word set, and `rename_to_contents` for naming `DataSegment`
  objects after the printable bytes they hold.
- `wasmkit.interp_math`: WebAssembly numeric semantics on Python ints and
  floats: wrapping integer operations of a given bit width, trapping division
  and truncation (raising `TrapError`), NaN canonicalisation, float
  min/max/pmin/pmax and rounding, saturating conversions, f64-to-f32 demotion
  and saturating lane arithmetic.
- `wasmkit.runtime`: `TrapCode` with messages from `strerror`, `trap` to
  raise a `WasmTrap`, `WasmException` for tagged module exceptions, and a
  `Runtime` that holds the active exception and runs a callable, reporting
  traps as a trap code.

## Installation

```
pip install .
```

## Examples

LEB128:

```python
from wasmkit.leb128 import encode_u32_leb128, decode_u32_leb128

data = encode_u32_leb128(624485)     # b'\xe5\x8e\x26'
value, length = decode_u32_leb128(data, 0)   # (624485, 3)
```

Interpreter arithmetic:

```python
from wasmkit.interp_math import int_div_s, TrapError

try:
    int_div_s(-2**31, -1, 32)
except TrapError as exc:
    print(exc)                       # integer overflow
```

Names:

```python
from wasmkit.naming import index_to_alpha_name

index_to_alpha_name(0)               # 'a'
index_to_alpha_name(26)              # 'aa'
```

Runtime traps:

```python
from wasmkit.runtime import Runtime, TrapCode, trap, strerror

rt = Runtime()
rt.init()
code, result = rt.run(lambda: trap(TrapCode.DIV_BY_ZERO))
print(strerror(code))                # Integer divide by zero
rt.free()
```

`Runtime.run` turns a `WasmTrap` into its code, an escaping `WasmException`
into `TrapCode.UNCAUGHT_EXCEPTION` and a `RecursionError` into
`TrapCode.EXHAUSTION`; other exceptions propagate unchanged.

## What it does not do

wasmkit offers pieces, not a toolchain. It does not read, write, validate or
execute whole modules, has no text-format parser, no instruction decoder or
interpreter loop, and installs no command-line tools.

## Running the tests

```
pip install .[test]
pytest
```