"""Lexicon trie: membership, prefix, correction and wildcard lookups."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from lexicon.constants import OPTIONAL, SINGLE, STAR
from lexicon.node import LexiconNode

log = logging.getLogger("lexicon")


class LexiconTrie:
    """Word set stored as a trie of :class:`LexiconNode`.

    Words are expected to be lowercase ASCII. The root node is blank and is
    never marked as a word, so the empty string is never stored.
    """

    def __init__(self):
        self.root = LexiconNode()
        self._num_words = 0

    # mutation

    def insert(self, word: str) -> bool:
        """Add *word*. Returns True if the lexicon changed.

        A word that already exists as a bare prefix of a longer word is
        marked and counted even though no node has to be created.
        """
        if not word:
            return False
        node = self.root
        for ch in word:
            child = node.get_child(ch)
            if child is None:
                child = LexiconNode(ch, False, node)
                node.add_child(child)
            node = child
        if node.is_word:
            return False
        node.is_word = True
        self._num_words += 1
        return True

    def remove(self, word: str) -> bool:
        """Remove *word* and prune the branch it leaves unused."""
        node = self.locate(word)
        if node is None or not node.is_word:
            return False
        node.is_word = False
        self._num_words -= 1
        self._clean_up(node)
        return True

    def _clean_up(self, node: LexiconNode) -> None:
        pruned = 0
        parent = node.parent
        while parent is not None and not node.has_children() and not node.is_word:
            parent.remove_child(node)
            pruned += 1
            node, parent = parent, parent.parent
        if pruned:
            log.debug("Pruned %d dead node(s)", pruned)

    # lookups

    def locate(self, prefix: str) -> LexiconNode | None:
        """Final node on the path spelling *prefix*, or None if there is none."""
        node = self.root
        for ch in prefix:
            node = node.get_child(ch)
            if node is None:
                return None
        return node

    def size(self) -> int:
        return self._num_words

    def contains(self, word: str) -> bool:
        node = self.locate(word)
        return node is not None and node.is_word

    def contains_prefix(self, prefix: str) -> bool:
        """True if some stored word starts with *prefix*. ``""`` always matches."""
        return self.locate(prefix) is not None

    def __len__(self) -> int:
        return self._num_words

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    # enumeration

    def all_words(self) -> Iterator[str]:
        """Yield every stored word in alphabetical order."""
        yield from self._walk(self.root, "")

    def _walk(self, node: LexiconNode, word_so_far: str) -> Iterator[str]:
        for child in node:
            word = word_so_far + child.char
            if child.is_word:
                yield word
            yield from self._walk(child, word)

    def __iter__(self) -> Iterator[str]:
        return self.all_words()

    def words_with_prefix(self, prefix: str) -> list[str]:
        """Stored words beginning with *prefix*, in alphabetical order."""
        node = self.locate(prefix)
        if node is None:
            return []
        words = [prefix] if node.is_word else []
        words.extend(self._walk(node, prefix))
        return words

    # fuzzy search

    def suggest_corrections(self, target: str, max_distance: int) -> set[str]:
        """Words of the same length as *target* differing in at most
        *max_distance* positions.

        Only substitutions are counted; words of another length can never
        be reached because each trie level consumes exactly one character
        of the target. The search is a pruned DFS, so its cost depends on
        the branching factor and the budget, not only on ``len(target)``.
        """
        suggestions: set[str] = set()
        self._suggest(target, max_distance, self.root, suggestions, "")
        return suggestions

    def _suggest(self, target: str, dist_to_go: int, node: LexiconNode,
                 suggestions: set[str], word_so_far: str) -> None:
        if dist_to_go < 0:
            return
        if not target:
            if node.is_word:
                suggestions.add(word_so_far)
            return
        head, rest = target[0], target[1:]
        for child in node:
            cost = 0 if child.char == head else 1
            self._suggest(rest, dist_to_go - cost, child, suggestions, word_so_far + child.char)

    def match_pattern(self, pattern: str) -> set[str]:
        """Words matching *pattern*.

        Besides lowercase letters the pattern may contain ``*`` (any run of
        characters, possibly empty), ``?`` (zero or one character) and
        ``_`` (exactly one character).
        """
        matches: set[str] = set()
        self._match(pattern, self.root, matches, "")
        return matches

    def _match(self, pattern: str, node: LexiconNode, matches: set[str],
               word_so_far: str) -> None:
        if not pattern:
            if node.is_word:
                matches.add(word_so_far)
            return

        head, rest = pattern[0], pattern[1:]
        if head == STAR:
            # Zero characters
            self._match(rest, node, matches, word_so_far)
            # One more character; if it is the literal after the star, the
            # star stops here and that literal is consumed as well.
            after_stars = pattern.lstrip(STAR)
            next_literal = after_stars[:1]
            for child in node:
                if child.char == next_literal:
                    next_pattern = after_stars[1:]
                else:
                    next_pattern = pattern
                self._match(next_pattern, child, matches, word_so_far + child.char)
        elif head == SINGLE:
            for child in node:
                self._match(child.char + rest, node, matches, word_so_far)
        elif head == OPTIONAL:
            self._match(rest, node, matches, word_so_far)
            self._match(SINGLE + rest, node, matches, word_so_far)
        else:
            child = node.get_child(head)
            if child is not None:
                self._match(rest, child, matches, word_so_far + head)

    def __repr__(self) -> str:
        return f"LexiconTrie({self._num_words} words)"
