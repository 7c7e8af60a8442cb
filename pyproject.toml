[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "d3kit"
version = "0.1.0"
description = "Colors, ANSI sequences, linear frame buffers, system call codes, naming types and MBR block devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["framebuffer", "ansi", "color", "palette", "mbr", "block-device", "partition", "errno"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
packages = ["d3kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
