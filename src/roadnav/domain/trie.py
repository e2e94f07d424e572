# domain/trie.py
"""Prefix index over canonicalized location names (26-way trie)."""

from roadnav.domain.names import canonicalize, has_letters

ALPHABET = 26
_A = ord("a")


class TrieNode:
    __slots__ = ("children", "terminal", "display_name")

    def __init__(self):
        self.children: list[TrieNode | None] = [None] * ALPHABET
        self.terminal = False
        self.display_name: str | None = None


def _letters(key: str):
    for ch in key:
        if ch == " ":
            continue
        yield ord(ch) - _A


class PrefixIndex:
    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, display_name: str) -> bool:
        key = canonicalize(display_name)
        if not has_letters(key):
            return False
        node = self.root
        for i in _letters(key):
            nxt = node.children[i]
            if nxt is None:
                nxt = node.children[i] = TrieNode()
            node = nxt
        if not node.terminal:
            self._size += 1
        node.terminal = True
        node.display_name = display_name  # last insert wins
        return True

    def prefix_search(self, prefix: str) -> set[str]:
        node = self.root
        for i in _letters(canonicalize(prefix)):
            node = node.children[i]
            if node is None:
                return set()
        return self._collect(node)

    @staticmethod
    def _collect(start: TrieNode) -> set[str]:
        out: set[str] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if node.terminal:
                out.add(node.display_name)
            stack.extend(c for c in node.children if c is not None)
        return out
