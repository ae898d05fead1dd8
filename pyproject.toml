[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ladderkit"
version = "0.1.0"
description = "Short, classic programming puzzles solved as plain Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "competitive-programming", "algorithms", "ladder"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ladderkit = "ladderkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ladderkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
