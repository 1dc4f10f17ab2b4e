[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xtlo"
version = "0.1.0"
description = "Functional helpers for sequences, numbers and strings, with retry, debounce, throttle, transaction and timing utilities."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "functional",
    "collections",
    "utilities",
    "retry",
    "debounce",
    "throttle",
    "saga",
    "case-conversion",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xtlo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
