[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moorekit"
version = "1.0.0"
description = "Moore finite state machines with non-blocking timers, debounced buttons and timeout tracking for embedded-style control loops"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "moore machine",
    "finite state machine",
    "fsm",
    "embedded",
    "timer",
    "debounce",
    "wifi",
]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["moorekit"]

[tool.hatch.build.targets.sdist]
include = ["moorekit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
