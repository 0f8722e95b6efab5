[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thinkdrills"
version = "0.1.0"
description = "Recursion, data-structure and design-pattern drills: lists, trees, student records and a cheating hangman game"
requires-python = ">=3.10"
dependencies = []
keywords = ["recursion", "linked list", "binary search tree", "hash table", "hangman", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
thinkdrills-hangman = "thinkdrills.hangman:main"

[tool.hatch.build.targets.wheel]
packages = ["thinkdrills"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
