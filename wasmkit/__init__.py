"""Building blocks for WebAssembly: format enums, LEB128, numeric semantics, naming and a trap runtime."""

__version__ = "0.1.0"

__all__ = [
    "binary",
    "color",
    "common",
    "error",
    "interp_math",
    "leb128",
    "naming",
    "runtime",
]