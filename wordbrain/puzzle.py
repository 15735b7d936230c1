"""Puzzle definitions: the starting rows and the word lengths to find."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import yaml

from wordbrain.errors import InvalidCoordinatesError, InvalidLengthError, PuzzleError, RowLengthError
from wordbrain.grid import LetterGrid
from wordbrain.models import EMPTY
from wordbrain.settings import settings

# Characters accepted in a row string for an empty cell
BLANK_MARKERS = frozenset(" ._")


@dataclass(frozen=True)
class Puzzle:
    grid: LetterGrid
    lengths: tuple[int, ...]

    @classmethod
    def parse(cls, rows: Sequence[str], lengths: Sequence[int]) -> Puzzle:
        """Validate the raw rows and lengths and build the starting grid.

        Letters may be given in any case; ``.``, ``_`` and space mark empty cells.
        """
        if not rows:
            raise RowLengthError("Puzzle has no rows")
        if len(rows) > settings.MAX_GRID_SIZE:
            raise InvalidCoordinatesError(
                f"Grid size {len(rows)} exceeds the maximum of {settings.MAX_GRID_SIZE}")

        normalized = []
        for line in rows:
            if not isinstance(line, str):
                raise PuzzleError(f"Row must be a string, got {line!r}")
            normalized.append("".join(EMPTY if ch in BLANK_MARKERS else ch for ch in line))

        if not isinstance(lengths, (list, tuple)):
            raise InvalidLengthError(f"Word lengths must be a list, got {lengths!r}")
        for length in lengths:
            if isinstance(length, bool) or not isinstance(length, int) or length < 1:
                raise InvalidLengthError(f"Invalid word length: {length!r}")

        return cls(grid=LetterGrid.from_rows(*normalized), lengths=tuple(lengths))

    @classmethod
    def from_file(cls, path: str | Path) -> Puzzle:
        """Load a puzzle from a YAML file with ``rows`` and ``lengths`` keys."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Puzzle file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict) or "rows" not in data or "lengths" not in data:
            raise PuzzleError(f"Puzzle file {path} must define 'rows' and 'lengths'")
        return cls.parse(data["rows"], data["lengths"])

    @property
    def letter_count(self) -> int:
        return len(self.grid.letters())
