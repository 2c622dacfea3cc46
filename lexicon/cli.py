"""Terminal shell for querying a Dictionary."""

from __future__ import annotations

import logging
import time

from lexicon.constants import LOAD_FAILED
from lexicon.dictionary import Dictionary

log = logging.getLogger("lexicon.cli")

HELP = """\
Commands:
  add WORD              -- add a word
  remove WORD           -- remove a word
  has WORD              -- is WORD in the lexicon?
  prefix TEXT           -- does any word start with TEXT?
  list [PREFIX]         -- list words (optionally with a prefix)
  suggest WORD [DIST]   -- same-length words within DIST substitutions (default 1)
  match PATTERN         -- wildcard match: * any run, ? zero or one, _ exactly one
  load PATH             -- add words from a file
  size                  -- number of words
  help                  -- show this help
  quit                  -- leave the shell"""

_NEEDS_ARG = {"add", "remove", "has", "prefix", "suggest", "match", "load"}


def _print_words(words) -> None:
    words = sorted(words)
    if not words:
        print("  (none)")
        return
    for w in words:
        print(f"  {w}")
    print(f"  -- {len(words)} word(s)")


def run_command(dictionary: Dictionary, line: str) -> bool:
    """Execute one shell command. Returns False when the shell should exit."""
    parts = line.split()
    if not parts:
        return True
    cmd, args = parts[0].lower(), parts[1:]
    trie = dictionary.trie

    if cmd in ("quit", "exit"):
        return False
    if cmd == "help":
        print(HELP)
        return True
    if cmd in _NEEDS_ARG and not args:
        print(f"  Usage: {cmd} ARGUMENT  (type 'help' for details)")
        return True

    if cmd == "add":
        word = args[0].lower()
        print(f"  Added '{word}'" if trie.insert(word) else f"  '{word}' already present")
    elif cmd == "remove":
        word = args[0].lower()
        print(f"  Removed '{word}'" if trie.remove(word) else f"  '{word}' not found")
    elif cmd == "has":
        word = args[0].lower()
        print(f"  '{word}' is {'a word' if trie.contains(word) else 'not a word'}")
    elif cmd == "prefix":
        prefix = args[0].lower()
        found = trie.contains_prefix(prefix)
        print(f"  '{prefix}' is {'a prefix' if found else 'not a prefix'}")
    elif cmd == "list":
        prefix = args[0].lower() if args else ""
        _print_words(trie.words_with_prefix(prefix))
    elif cmd == "suggest":
        try:
            distance = int(args[1]) if len(args) > 1 else 1
        except ValueError:
            print("  Invalid.  suggest WORD [DISTANCE]")
            return True
        if distance < 0:
            print("  Distance must be zero or more.")
            return True
        t0 = time.time()
        found = trie.suggest_corrections(args[0].lower(), distance)
        log.debug("suggest took %.3fs", time.time() - t0)
        _print_words(found)
    elif cmd == "match":
        t0 = time.time()
        found = trie.match_pattern(args[0].lower())
        log.debug("match took %.3fs", time.time() - t0)
        _print_words(found)
    elif cmd == "load":
        added = dictionary.load(args[0])
        if added == LOAD_FAILED:
            print(f"  Could not read {args[0]}")
        else:
            print(f"  Added {added:,} new words ({trie.size():,} total)")
    elif cmd == "size":
        print(f"  {trie.size():,} words")
    else:
        print(f"  Unknown command '{cmd}'.  Type 'help' for a list.")
    return True


def run_cli(dictionary: Dictionary) -> None:
    """Run the interactive shell until quit or end of input."""
    print("\n" + "=" * 60)
    print("  LEXICON TRIE -- Interactive Shell")
    print("=" * 60)
    print(f"  {dictionary.trie.size():,} words loaded")
    print()
    print(HELP)
    print()

    while True:
        try:
            inp = input("  lexicon> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not run_command(dictionary, inp):
            break
