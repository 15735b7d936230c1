"""Validation errors raised while setting up a puzzle."""


class PuzzleError(ValueError):
    """Base class for malformed puzzle, grid or dictionary input."""


class InvalidCoordinatesError(PuzzleError):
    """Raised for a row, column or grid size outside the board."""


class InvalidCharacterError(PuzzleError):
    """Raised when a cell is given something other than a letter or a blank."""


class RowLengthError(PuzzleError):
    """Raised when a row string (or the row count) does not match the grid size."""


class EmptyWordError(PuzzleError):
    """Raised when building a word with no letters."""


class EmptySolutionError(PuzzleError):
    """Raised when building a solution with no words."""


class InvalidLengthError(PuzzleError):
    """Raised for a target word length that is not a positive integer."""


class DictionaryLoadError(PuzzleError):
    """Raised when the word list cannot be read."""
