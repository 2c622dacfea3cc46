"""Shared constants for the lexicon package."""

from __future__ import annotations

import os

# Character stored on the root node; never part of a word.
ROOT_CHAR = " "

# Pattern wildcards
STAR = "*"        # zero or more characters
OPTIONAL = "?"    # zero or one character
SINGLE = "_"      # exactly one character
WILDCARDS = frozenset((STAR, OPTIONAL, SINGLE))

# Returned by the bulk loader when its source cannot be opened.
LOAD_FAILED = -1

DEFAULT_SEARCH_PATHS: list[str] = [
    "dictionary.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
]

# Used when no word list can be found on disk.
MINIMAL_WORDS: frozenset[str] = frozenset({
    "a", "an", "and", "are", "as", "at", "bat", "be", "but", "by",
    "can", "car", "card", "cart", "cat", "day", "do", "dog", "door",
    "for", "from", "had", "has", "hat", "have", "he", "her", "his",
    "how", "i", "in", "is", "it", "its", "new", "not", "now", "of",
    "old", "on", "one", "or", "our", "out", "rat", "see", "she", "that",
    "the", "this", "to", "was", "way", "we", "who", "with", "word",
    "you",
})
