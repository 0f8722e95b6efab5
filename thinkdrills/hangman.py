"""A hangman game that keeps changing its secret word to make the player lose."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from pathlib import Path

MIN_CHOICE = 1
MAX_CHOICE = 9


def load_words(path: str | Path) -> list[str]:
    """Read whitespace-separated words from a file, skipping words with an apostrophe."""
    with open(path, encoding="utf-8") as handle:
        return [word for word in handle.read().split() if "'" not in word]


def words_of_length(words: Iterable[str], length: int) -> list[str]:
    """Keep the words of exactly ``length`` characters."""
    return [word for word in words if len(word) == length]


def words_with_letter(words: Iterable[str], letter: str) -> list[str]:
    """Keep the words that contain ``letter``."""
    return [word for word in words if letter in word]


def words_without_letter(words: Iterable[str], letter: str) -> list[str]:
    """Keep the words that do not contain ``letter``."""
    return [word for word in words if letter not in word]


def count_without_letter(words: Iterable[str], letter: str) -> int:
    """Count the words that do not contain ``letter``."""
    return sum(1 for word in words if letter not in word)


def _positions(word: str, letter: str) -> tuple[int, ...]:
    return tuple(i for i, ch in enumerate(word) if ch == letter)


def matches_pattern(word: str, letter: str, pattern: Iterable[int]) -> bool:
    """Tell whether ``letter`` occurs in ``word`` at exactly the positions in ``pattern``."""
    wanted = set(pattern)
    return all((ch == letter) == (i in wanted) for i, ch in enumerate(word))


def most_frequent_pattern(words: Iterable[str], letter: str) -> tuple[tuple[int, ...], int]:
    """Return the commonest positions of ``letter`` among words holding it, and their count.

    The pattern seen first wins ties; with no such words the result is ``((), 0)``.
    """
    counts = Counter(_positions(word, letter) for word in words_with_letter(words, letter))
    best: tuple[int, ...] = ()
    best_count = 0
    for pattern, count in counts.items():
        if count > best_count:
            best, best_count = pattern, count
    return best, best_count


def reduce_by_pattern(words: Iterable[str], letter: str, pattern: Iterable[int]) -> list[str]:
    """Keep the words in which ``letter`` sits exactly at ``pattern``."""
    positions = tuple(pattern)
    return [word for word in words if matches_pattern(word, letter, positions)]


class GuessOutcome(Enum):
    """What a guess did."""

    HIT = "hit"
    MISS = "miss"
    REPEATED = "repeated"


class CheatingHangman:
    """Hangman state in which the secret word is any word still consistent with the guesses."""

    def __init__(self, words: Iterable[str], length: int, max_misses: int) -> None:
        if length < 1:
            raise ValueError("length must be at least 1")
        if max_misses < 1:
            raise ValueError("max_misses must be at least 1")
        self._words = words_of_length(words, length)
        if not self._words:
            raise ValueError("there are no words of the given length")
        self._length = length
        self._max_misses = max_misses
        self._misses = 0
        self._discovered = 0
        self._revealed = ["*"] * length
        self._guessed: set[str] = set()

    def guess(self, letter: str) -> GuessOutcome:
        """Play a lower-case letter and report the outcome."""
        if len(letter) != 1 or not ("a" <= letter <= "z"):
            raise ValueError("guess must be a single lower-case letter")
        if self.finished():
            raise RuntimeError("the game is over")
        if letter in self._guessed:
            return GuessOutcome.REPEATED
        self._guessed.add(letter)
        missing = count_without_letter(self._words, letter)
        pattern, count = most_frequent_pattern(self._words, letter)
        if missing > count:
            self._words = words_without_letter(self._words, letter)
            self._misses += 1
            return GuessOutcome.MISS
        for position in pattern:
            self._revealed[position] = letter
        self._discovered += len(pattern)
        self._words = reduce_by_pattern(self._words, letter, pattern)
        return GuessOutcome.HIT

    def revealed(self) -> str:
        """Return the word so far, with '*' for hidden letters."""
        return "".join(self._revealed)

    def guessed_letters(self) -> list[str]:
        """Return the letters guessed so far in alphabetical order."""
        return sorted(self._guessed)

    def remaining_attempts(self) -> int:
        """Return how many wrong guesses are left."""
        return self._max_misses - self._misses

    def finished(self) -> bool:
        """Tell whether the game has ended."""
        return self._discovered >= self._length or self._misses >= self._max_misses

    def won(self) -> bool:
        """Tell whether the player has revealed the whole word."""
        return self._discovered >= self._length

    def answer(self) -> str:
        """Return the word the game claims it was thinking of."""
        return self.revealed() if self.won() else self._words[0]


def _characters() -> Iterator[str]:
    while True:
        try:
            line = input()
        except EOFError:
            return
        yield from (ch for ch in line if not ch.isspace())


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _read_choice(chars: Iterator[str], prompt: str, retry: str) -> int:
    _prompt(prompt)
    symbol = next(chars)
    while not (str(MIN_CHOICE) <= symbol <= str(MAX_CHOICE)):
        _prompt(retry)
        symbol = next(chars)
    return int(symbol)


def _read_letter(chars: Iterator[str]) -> str:
    letter = next(chars)
    while not ("a" <= letter <= "z"):
        _prompt("Enter valid lower case symbol: ")
        letter = next(chars)
    return letter


def _play(words: Sequence[str], chars: Iterator[str]) -> int:
    length = _read_choice(
        chars,
        "Enter length of word to guess in range from 1 to 9: ",
        "\nWrong value for length of word, try again: ",
    )
    if not words_of_length(words, length):
        print("There is no words of given length")
        return 0
    max_misses = _read_choice(
        chars,
        "Enter number of wrong attempts in range from 1 to 9: ",
        "\nWrong value for number of wrong attempts, try again: ",
    )
    game = CheatingHangman(words, length, max_misses)
    while not game.finished():
        print(f"\n\nWord so far: {game.revealed()}")
        print("Letters guessed: " + "".join(f"{ch} " for ch in game.guessed_letters()))
        print(f"Attempts to guess word: {game.remaining_attempts()}")
        _prompt("Letter to guess: ")
        if game.guess(_read_letter(chars)) is GuessOutcome.REPEATED:
            print("Letter already guessed, try again")
    if game.won():
        print(f"Great job. You win. Word was '{game.answer()}'.")
    else:
        print(f"Sorry. You lost. The word I was thinking of was '{game.answer()}'.")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game interactively on standard input and output."""
    parser = argparse.ArgumentParser(description="Play a hangman game that cheats.")
    parser.add_argument("words", nargs="?", default="words.txt", help="word list file")
    parser.add_argument("--list", action="store_true", help="print the word list and exit")
    args = parser.parse_args(argv)
    try:
        words = load_words(args.words)
    except OSError:
        print("File open failed. ")
        words = []
    if args.list:
        for word in words:
            print(word)
        return 0
    try:
        return _play(words, _characters())
    except StopIteration:
        print()
        return 1