[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "x68game"
version = "1.0.0"
description = "Game-side helpers for X68000-style titles: bit packing, fixed-point arithmetic, sprite and BG plane models, task timing, mouse decoding and engine-sound MML"
requires-python = ">=3.10"
dependencies = []
keywords = ["x68000", "sprites", "fixed-point", "game", "bg", "mml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["x68game"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
