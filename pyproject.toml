[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beginnerkit"
version = "0.1.0"
description = "Small classic programming exercises: number puzzles, sorting, conversions, matrices and linked lists"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "exercises",
    "factorial",
    "prime numbers",
    "linked list",
    "matrix",
    "tower of hanoi",
    "unit conversion",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
beginnerkit = "beginnerkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["beginnerkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
