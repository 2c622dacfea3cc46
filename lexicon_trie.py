#!/usr/bin/env python3
"""
Lexicon Trie

Loads a word list into a trie and opens an interactive shell for
membership, prefix, correction and wildcard queries.

Usage:
    python lexicon_trie.py                  # search for dictionary.txt
    python lexicon_trie.py --dict words.txt
"""

from __future__ import annotations

import argparse
import logging

from lexicon.cli import run_cli
from lexicon.dictionary import Dictionary


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("lexicon")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Lexicon Trie -- word lookups, corrections and wildcard matching",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file (one word per line)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dictionary = Dictionary(args.dict)
    run_cli(dictionary)


if __name__ == "__main__":
    main()
