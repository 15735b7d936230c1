"""Value types shared by the grid, dictionary and solver: letters, words and solutions."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Iterable, Iterator

from wordbrain.errors import (
    EmptySolutionError,
    EmptyWordError,
    InvalidCharacterError,
    InvalidCoordinatesError,
)

EMPTY = " "
MAX_SIZE = 9


@functools.total_ordering
@dataclass(frozen=True)
class Letter:
    """A single grid cell value along with the position it came from.

    Blank cells are letters holding ``EMPTY``. Letters order by
    (char, row, col), so blanks sort before any real letter.
    """

    row: int
    col: int
    char: str = EMPTY

    def __post_init__(self):
        if not isinstance(self.row, int) or not 0 <= self.row < MAX_SIZE:
            raise InvalidCoordinatesError(f"Invalid row: {self.row}")
        if not isinstance(self.col, int) or not 0 <= self.col < MAX_SIZE:
            raise InvalidCoordinatesError(f"Invalid column: {self.col}")
        if not isinstance(self.char, str):
            raise InvalidCharacterError(f"Invalid character: {self.char!r}")
        # some letters lowercase to more than one code point
        lowered = self.char.lower()
        if len(lowered) != 1 or (lowered != EMPTY and not lowered.isalpha()):
            raise InvalidCharacterError(f"Invalid character: {self.char!r}")
        object.__setattr__(self, "char", lowered)

    @property
    def is_empty(self) -> bool:
        return self.char == EMPTY

    def _key(self) -> tuple[str, int, int]:
        return self.char, self.row, self.col

    def __lt__(self, other):
        if not isinstance(other, Letter):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self):
        return self.char.upper()


@functools.total_ordering
@dataclass(frozen=True)
class Word:
    """An ordered, non-empty run of letters taken from the grid.

    Words compare letter by letter; a word that is an exact prefix of
    another sorts first.
    """

    letters: tuple[Letter, ...]

    def __post_init__(self):
        letters = tuple(self.letters)
        if not letters:
            raise EmptyWordError("Unable to build a word without letters")
        object.__setattr__(self, "letters", letters)

    @classmethod
    def of(cls, *letters: Letter) -> Word:
        return cls(letters)

    def extend(self, letter: Letter) -> Word:
        return Word(self.letters + (letter,))

    @property
    def text(self) -> str:
        """Lowercase form, as stored in the dictionary."""
        return "".join(letter.char for letter in self.letters)

    @property
    def last(self) -> Letter:
        return self.letters[-1]

    def __lt__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self.letters < other.letters

    def __len__(self):
        return len(self.letters)

    def __iter__(self) -> Iterator[Letter]:
        return iter(self.letters)

    def __str__(self):
        return self.text.upper()


@functools.total_ordering
class Solution:
    """One complete decomposition of a puzzle: the words removed, in order.

    Two solutions are the same when their words render the same, even if
    the letters were taken from different cells.
    """

    __slots__ = ("words", "_key")

    def __init__(self, words: Iterable[Word]):
        self.words: tuple[Word, ...] = tuple(words)
        if not self.words:
            raise EmptySolutionError("No words provided")
        self._key = "  ".join(str(word) for word in self.words)

    def extend(self, word: Word) -> Solution:
        return Solution(self.words + (word,))

    def __len__(self):
        return len(self.words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)

    def __eq__(self, other):
        if not isinstance(other, Solution):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other):
        if not isinstance(other, Solution):
            return NotImplemented
        return self._key < other._key

    def __hash__(self):
        return hash(self._key)

    def __str__(self):
        return f"Solution:  {self._key}"

    def __repr__(self):
        return f"Solution({[str(word) for word in self.words]!r})"
