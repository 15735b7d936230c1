"""Immutable letter grid with 8-way adjacency, and the builder that clears cells and applies gravity."""

from __future__ import annotations

from wordbrain.errors import InvalidCoordinatesError, RowLengthError
from wordbrain.models import EMPTY, MAX_SIZE, Letter, Word


def _check_size(size: int):
    if not isinstance(size, int) or not 1 <= size <= MAX_SIZE:
        raise InvalidCoordinatesError(f"Invalid size: {size} (max: {MAX_SIZE})")


class LetterGrid:
    """A read-only N x N snapshot of the board.

    Every cell holds a Letter positioned at its own (row, col); empty
    cells hold a blank letter. Use ``GridBuilder`` to derive a new grid.
    """

    __slots__ = ("size", "_cells")

    def __init__(self, size: int, cells: tuple[tuple[Letter, ...], ...]):
        self.size = size
        self._cells = cells

    @classmethod
    def from_rows(cls, *rows: str) -> LetterGrid:
        return GridBuilder(len(rows)).set_rows(*rows).build()

    def get(self, row: int, col: int) -> Letter:
        if not 0 <= row < self.size or not 0 <= col < self.size:
            raise InvalidCoordinatesError(
                f"Out of grid bounds: {row}, {col} (max: {self.size - 1})")
        return self._cells[row][col]

    def west(self, letter: Letter) -> Letter | None:
        if letter.col == 0:
            return None
        return self.get(letter.row, letter.col - 1)

    def north_west(self, letter: Letter) -> Letter | None:
        if letter.row == 0 or letter.col == 0:
            return None
        return self.get(letter.row - 1, letter.col - 1)

    def north(self, letter: Letter) -> Letter | None:
        if letter.row == 0:
            return None
        return self.get(letter.row - 1, letter.col)

    def north_east(self, letter: Letter) -> Letter | None:
        if letter.row == 0 or letter.col == self.size - 1:
            return None
        return self.get(letter.row - 1, letter.col + 1)

    def east(self, letter: Letter) -> Letter | None:
        if letter.col == self.size - 1:
            return None
        return self.get(letter.row, letter.col + 1)

    def south_east(self, letter: Letter) -> Letter | None:
        if letter.row == self.size - 1 or letter.col == self.size - 1:
            return None
        return self.get(letter.row + 1, letter.col + 1)

    def south(self, letter: Letter) -> Letter | None:
        if letter.row == self.size - 1:
            return None
        return self.get(letter.row + 1, letter.col)

    def south_west(self, letter: Letter) -> Letter | None:
        if letter.row == self.size - 1 or letter.col == 0:
            return None
        return self.get(letter.row + 1, letter.col - 1)

    def adjacent(self, letter: Letter) -> list[Letter]:
        """Non-blank neighbours, in the order W, NW, N, NE, E, SE, S, SW."""
        neighbours = (
            self.west(letter),
            self.north_west(letter),
            self.north(letter),
            self.north_east(letter),
            self.east(letter),
            self.south_east(letter),
            self.south(letter),
            self.south_west(letter),
        )
        return [n for n in neighbours if n is not None and not n.is_empty]

    def letters(self) -> list[Letter]:
        """Non-blank cells in row-major order."""
        return [cell for row in self._cells for cell in row if not cell.is_empty]

    def rows(self) -> list[str]:
        return ["".join(cell.char for cell in row) for row in self._cells]

    def __eq__(self, other):
        if not isinstance(other, LetterGrid):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __hash__(self):
        return hash(self._cells)

    def __repr__(self):
        return f"LetterGrid({self.rows()!r})"

    def __str__(self):
        separator = "+" + "---+" * self.size
        lines = [separator]
        for row in self._cells:
            lines.append("".join(f"| {cell} " for cell in row) + "|")
            lines.append(separator)
        return "\n".join(lines)


class GridBuilder:
    """Mutable working copy of a grid. ``build()`` freezes it into a ``LetterGrid``."""

    def __init__(self, source: LetterGrid | int):
        if isinstance(source, LetterGrid):
            self.size = source.size
            self._cells = [
                [source.get(r, c) for c in range(self.size)]
                for r in range(self.size)
            ]
        else:
            _check_size(source)
            self.size = source
            self._cells = [[Letter(r, c) for c in range(self.size)] for r in range(self.size)]

    def _check(self, row: int, col: int):
        if not 0 <= row < self.size or not 0 <= col < self.size:
            raise InvalidCoordinatesError(
                f"Out of grid bounds: {row}, {col} (max: {self.size - 1})")

    def set(self, row: int, col: int, char: str) -> GridBuilder:
        self._check(row, col)
        self._cells[row][col] = Letter(row, col, char)
        return self

    def set_row(self, row: int, line: str) -> GridBuilder:
        if not 0 <= row < self.size:
            raise InvalidCoordinatesError(f"Out of grid bounds: {row} (max: {self.size - 1})")
        if len(line) != self.size:
            raise RowLengthError(f"Expected line to be length {self.size}, got {line!r}")
        for col, char in enumerate(line):
            self.set(row, col, char)
        return self

    def set_rows(self, *rows: str) -> GridBuilder:
        if len(rows) != self.size:
            raise RowLengthError(f"Expected {self.size} rows, got {len(rows)}")
        for row, line in enumerate(rows):
            self.set_row(row, line)
        return self

    def clear(self, row: int, col: int) -> GridBuilder:
        self._check(row, col)
        self._cells[row][col] = Letter(row, col)
        return self

    def clear_letter(self, letter: Letter) -> GridBuilder:
        return self.clear(letter.row, letter.col)

    def clear_word(self, word: Word) -> GridBuilder:
        for letter in word:
            self.clear(letter.row, letter.col)
        return self

    def clear_all(self) -> GridBuilder:
        for r in range(self.size):
            for c in range(self.size):
                self.clear(r, c)
        return self

    def apply_gravity(self) -> GridBuilder:
        """Drop letters straight down through blank cells, one column at a time.

        ``size`` passes are enough to settle a column with any number of gaps.
        """
        cells = self._cells
        for _ in range(self.size):
            for r in range(self.size - 2, -1, -1):
                for c in range(self.size):
                    if not cells[r][c].is_empty and cells[r + 1][c].is_empty:
                        cells[r + 1][c] = Letter(r + 1, c, cells[r][c].char)
                        cells[r][c] = Letter(r, c, EMPTY)
        return self

    def build(self) -> LetterGrid:
        return LetterGrid(self.size, tuple(tuple(row) for row in self._cells))
