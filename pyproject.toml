[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wasmkit"
version = "0.1.0"
description = "WebAssembly building blocks: LEB128 coding, binary-format enums, interpreter arithmetic, naming helpers and a small trap runtime"
requires-python = ">=3.10"
dependencies = []
keywords = ["webassembly", "wasm", "leb128", "binary", "interpreter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wasmkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
