"""Lexicon -- trie-backed word set with prefix, correction and wildcard search."""

from lexicon.constants import LOAD_FAILED, OPTIONAL, SINGLE, STAR
from lexicon.node import LexiconNode
from lexicon.trie import LexiconTrie
from lexicon.dictionary import Dictionary, add_words_from_file

__all__ = [
    "LOAD_FAILED",
    "OPTIONAL",
    "SINGLE",
    "STAR",
    "Dictionary",
    "LexiconNode",
    "LexiconTrie",
    "add_words_from_file",
]
