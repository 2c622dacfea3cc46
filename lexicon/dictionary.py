"""Word-list loading and the trie-backed Dictionary."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from lexicon.constants import DEFAULT_SEARCH_PATHS, LOAD_FAILED, MINIMAL_WORDS
from lexicon.trie import LexiconTrie

log = logging.getLogger("lexicon")


def add_words_from_file(path: str, insert: Callable[[str], bool],
                        accept: Callable[[str], bool] | None = None) -> int:
    """Feed every line of *path* (stripped, lowercased) to *insert*.

    Returns the number of words *insert* reported as new, or
    ``LOAD_FAILED`` if the file cannot be opened. Blank lines are skipped,
    as are words rejected by the optional *accept* filter.
    """
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as exc:
        log.warning("Cannot read word list %s: %s", path, exc)
        return LOAD_FAILED

    added = 0
    with f:
        for line in f:
            word = line.strip().lower()
            if not word:
                continue
            if accept is not None and not accept(word):
                continue
            if insert(word):
                added += 1
    log.debug("Added %d new words from %s", added, path)
    return added


class Dictionary:
    """Lexicon trie populated from the first word list found on disk."""

    def __init__(self, dict_path: str | None = None, search_paths: list[str] | None = None):
        self.trie = LexiconTrie()
        self.source: str | None = None
        self._load(dict_path, DEFAULT_SEARCH_PATHS if search_paths is None else search_paths)

    def _load(self, dict_path: str | None, search_paths: list[str]) -> None:
        paths: list[str] = []
        if dict_path:
            paths.append(dict_path)
        paths.extend(search_paths)

        for path in paths:
            if not os.path.exists(path):
                continue
            if self.load(path) > 0:
                self.source = path
                log.info("Loaded %s words from %s", f"{self.trie.size():,}", path)
                return

        log.warning("No word list found -- using built-in minimal word list.")
        log.warning("Pass --dict PATH or run bootstrap.py to create dictionary.txt.")
        self._load_minimal()

    def _load_minimal(self) -> None:
        for w in sorted(MINIMAL_WORDS):
            self.trie.insert(w)

    def load(self, path: str) -> int:
        """Add the words in *path*; returns the count of new words or ``LOAD_FAILED``."""
        return add_words_from_file(path, self.trie.insert, accept=str.isalpha)

    def is_valid(self, word: str) -> bool:
        return self.trie.contains(word.lower())

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return self.trie.size()
