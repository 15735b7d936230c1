from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Sequence

from wordbrain.dictionary import Dictionary, TrieNode
from wordbrain.errors import InvalidLengthError
from wordbrain.grid import GridBuilder, LetterGrid
from wordbrain.models import Solution, Word

logger = logging.getLogger("wordbrain")


def find_words(dictionary: Dictionary, grid: LetterGrid, length: int) -> list[Word]:
    """Find every dictionary word of ``length`` letters traceable as a path on the grid.

    A path starts on any non-blank cell and steps to an adjacent non-blank
    cell not already used by the same path. The trie walk is carried along
    with the path so that dead prefixes are pruned immediately.

    Results come out in search order: start cells row-major, then
    neighbours in ``LetterGrid.adjacent`` order.
    """
    found: list[Word] = []
    size = grid.size

    def dfs(word: Word, node: TrieNode, visited: int):
        if len(word) == length:
            if node.is_word:
                found.append(word)
            return

        for adj in grid.adjacent(word.last):
            bit = 1 << (adj.row * size + adj.col)
            if visited & bit:
                continue
            child = node.children.get(adj.char)
            if child is None:  # not a prefix of any word
                continue
            dfs(word.extend(adj), child, visited | bit)

    for letter in grid.letters():
        node = dictionary.root.children.get(letter.char)
        if node is None:
            continue
        dfs(Word.of(letter), node, 1 << (letter.row * size + letter.col))

    return found


def remove_word(grid: LetterGrid, word: Word) -> LetterGrid:
    """The grid left after taking ``word`` out and letting the letters above fall."""
    return GridBuilder(grid).clear_word(word).apply_gravity().build()


def _search(
    dictionary: Dictionary,
    grid: LetterGrid,
    lengths: tuple[int, ...],
    partial: Solution | None,
    seen: dict[str, Word],
) -> list[Solution]:
    """Depth-first search for the remaining ``lengths`` on ``grid``.

    Every candidate word found at this depth is recorded in ``seen``
    (keyed by its rendered form), whether or not it leads to a solution.
    """
    if not lengths:
        return [partial] if partial is not None else []

    length, rest = lengths[0], lengths[1:]
    words = find_words(dictionary, grid, length)
    logger.debug("depth=%d length=%d candidates=%d",
                 len(partial) if partial else 0, length, len(words))
    for word in words:
        seen.setdefault(str(word), word)

    solutions: list[Solution] = []
    for word in words:
        candidate = partial.extend(word) if partial is not None else Solution([word])
        solutions.extend(_search(dictionary, remove_word(grid, word), rest, candidate, seen))
    return solutions


# Set in each worker process by _init_worker
_worker_dictionary: Dictionary | None = None


def _init_worker(dictionary: Dictionary):
    global _worker_dictionary
    _worker_dictionary = dictionary


def _search_branch(args) -> tuple[list[Solution], dict[str, Word]]:
    grid, rest, word = args
    seen: dict[str, Word] = {}
    solutions = _search(_worker_dictionary, remove_word(grid, word), rest, Solution([word]), seen)
    return solutions, seen


class Solver:
    """Finds every ordered sequence of words, of the given lengths, that clears the grid."""

    def __init__(self, dictionary: Dictionary, grid: LetterGrid, lengths: Sequence[int]):
        for length in lengths:
            if isinstance(length, bool) or not isinstance(length, int) or length < 1:
                raise InvalidLengthError(f"Invalid word length: {length!r}")
        self.dictionary = dictionary
        self.grid = grid
        self.lengths: tuple[int, ...] = tuple(lengths)
        self._all_words: dict[str, Word] = {}

    def solve(self, workers: int | None = None) -> list[Solution]:
        """Run the full search and return the distinct solutions, sorted.

        With ``workers > 1`` each first word is explored in its own process;
        the result is the same as the sequential search.
        """
        if workers is None:
            from wordbrain.settings import settings
            workers = settings.WORKERS

        logger.info("Solving %dx%d grid for lengths %s (workers=%d)",
                    self.grid.size, self.grid.size, list(self.lengths), workers)

        seen: dict[str, Word] = {}
        if workers > 1 and len(self.lengths) > 1:
            solutions = self._solve_parallel(workers, seen)
        else:
            solutions = _search(self.dictionary, self.grid, self.lengths, None, seen)

        for key, word in seen.items():
            self._all_words.setdefault(key, word)

        complete = {s for s in solutions if len(s) == len(self.lengths)}
        logger.info("Found %d solutions (%d words seen)", len(complete), len(self._all_words))
        return sorted(complete)

    def _solve_parallel(self, workers: int, seen: dict[str, Word]) -> list[Solution]:
        first = find_words(self.dictionary, self.grid, self.lengths[0])
        for word in first:
            seen.setdefault(str(word), word)

        rest = self.lengths[1:]
        tasks = [(self.grid, rest, word) for word in first]
        solutions: list[Solution] = []
        with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                 initargs=(self.dictionary,)) as executor:
            for branch_solutions, branch_seen in executor.map(_search_branch, tasks):
                solutions.extend(branch_solutions)
                for key, word in branch_seen.items():
                    seen.setdefault(key, word)
        return solutions

    def all_words(self) -> list[Word]:
        """Every distinct word seen at any depth of the search, by rendered string."""
        return [self._all_words[key] for key in sorted(self._all_words)]
