# domain/names.py
from roadnav.domain.entities.geography import Location

_KEEP = frozenset("abcdefghijklmnopqrstuvwxyz ")


def canonicalize(s: str | None) -> str:
    """Lowercase and drop everything outside a-z and space."""
    if not s:
        return ""
    return "".join(ch for ch in s.lower() if ch in _KEEP)


def has_letters(key: str) -> bool:
    return any(ch != " " for ch in key)


class NameIndex:
    """Canonical name -> locations carrying that name, in ingestion order."""

    def __init__(self):
        self._by_key: dict[str, list[Location]] = {}

    def __len__(self) -> int:
        return len(self._by_key)

    def add(self, loc: Location) -> bool:
        key = canonicalize(loc.name)
        if not has_letters(key):
            return False
        self._by_key.setdefault(key, []).append(loc)
        return True

    def locate(self, name: str) -> list[Location]:
        return list(self._by_key.get(canonicalize(name), ()))
