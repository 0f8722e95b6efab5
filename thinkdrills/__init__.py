"""Recursion, data-structure and design-pattern drills, and a cheating hangman game."""

__version__ = "0.1.0"
__all__ = [
    "sequences",
    "linked",
    "trees",
    "student",
    "roster",
    "lookup",
    "profile",
    "hangman",
]