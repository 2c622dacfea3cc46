"""Single vertex of the lexicon trie."""

from __future__ import annotations

import weakref
from bisect import bisect_left
from collections.abc import Iterator

from lexicon.constants import ROOT_CHAR


class LexiconNode:
    """One letter in the trie.

    Children are kept sorted by character. The parent link is a weak
    reference: it is only followed upward when pruning dead branches and
    never keeps the parent alive.
    """

    __slots__ = ("char", "is_word", "_parent", "_keys", "_children", "__weakref__")

    def __init__(self, char: str = ROOT_CHAR, is_word: bool = False,
                 parent: LexiconNode | None = None):
        self.char = char
        self.is_word = is_word
        self._parent = weakref.ref(parent) if parent is not None else None
        self._keys: list[str] = []
        self._children: list[LexiconNode] = []

    @property
    def parent(self) -> LexiconNode | None:
        """Owning node, or None for the root (or a detached node)."""
        if self._parent is None:
            return None
        return self._parent()

    def add_child(self, child: LexiconNode) -> None:
        """Insert *child* in ascending character order.

        The caller guarantees no sibling already has ``child.char``.
        """
        i = bisect_left(self._keys, child.char)
        self._keys.insert(i, child.char)
        self._children.insert(i, child)

    def remove_child(self, child: LexiconNode) -> None:
        i = bisect_left(self._keys, child.char)
        if i < len(self._children) and self._children[i] is child:
            del self._keys[i]
            del self._children[i]

    def get_child(self, char: str) -> LexiconNode | None:
        i = bisect_left(self._keys, char)
        if i < len(self._keys) and self._keys[i] == char:
            return self._children[i]
        return None

    def has_children(self) -> bool:
        return bool(self._children)

    def __iter__(self) -> Iterator[LexiconNode]:
        # Snapshot, so callers may add or remove children while iterating.
        return iter(tuple(self._children))

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        mark = "*" if self.is_word else ""
        return f"LexiconNode({self.char!r}{mark}, children={''.join(self._keys)!r})"
