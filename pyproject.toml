[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libkern"
version = "0.1.0"
description = "A small C-style standard library: string, memory, number conversion, arithmetic, sorting and a pseudo-random generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["libc", "strtol", "strtok", "qsort", "rand", "string", "memory"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["libkern"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
