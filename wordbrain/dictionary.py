from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from wordbrain.errors import DictionaryLoadError
from wordbrain.models import Word

logger = logging.getLogger("wordbrain")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Dictionary:
    """Prefix trie of lowercase words, used to prune the path search."""

    def __init__(self):
        self.root = TrieNode()
        self._count = 0

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Dictionary:
        dictionary = cls()
        for line in lines:
            word = line.strip().lower()
            if word:
                dictionary.add(word)
        return dictionary

    def add(self, word: str):
        if not word:
            return
        node = self.root
        for ch in word.lower():
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._count += 1

    def _walk(self, word: str | Word) -> TrieNode | None:
        text = word.text if isinstance(word, Word) else word.lower()
        node = self.root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def exists(self, word: str | Word) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    def is_prefix(self, word: str | Word) -> bool:
        return self._walk(word) is not None

    def __contains__(self, word) -> bool:
        return self.exists(word)

    def __len__(self):
        return self._count


def load_dictionary(path: str | Path) -> Dictionary:
    """Build a dictionary from a word list file, one word per line."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            dictionary = Dictionary.from_lines(f)
    except OSError as e:
        raise DictionaryLoadError(f"Could not read word list {path}: {e}") from e
    logger.info("Loaded %d words from %s", len(dictionary), path)
    return dictionary
