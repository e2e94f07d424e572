import pytest

from roadnav.domain.entities.geography import Location
from roadnav.domain.names import NameIndex, canonicalize
from roadnav.domain.trie import PrefixIndex

NAMES = [
    "Main St",
    "Mainland Market",
    "Ma's Diner",
    "Berkeley Bowl",
    "Top Dog",
    "Peet's Coffee & Tea",
]


@pytest.fixture
def trie() -> PrefixIndex:
    t = PrefixIndex()
    for n in NAMES:
        t.insert(n)
    return t


def test_canonicalize_strips_to_lowercase_letters_and_spaces():
    assert canonicalize("Peet's Coffee & Tea!") == "peets coffee  tea"
    assert canonicalize("I-80 East") == "i east"
    assert canonicalize("") == ""
    assert canonicalize(None) == ""
    assert canonicalize("Café") == "caf"


def test_empty_prefix_returns_every_name(trie: PrefixIndex):
    assert trie.prefix_search("") == set(NAMES)
    assert len(trie) == len(NAMES)


def test_prefix_is_case_insensitive(trie: PrefixIndex):
    assert trie.prefix_search("MAIN") == trie.prefix_search("main") == {"Main St", "Mainland Market"}


def test_prefix_node_itself_is_included(trie: PrefixIndex):
    # "Ma's Diner" -> "mas diner"; "ma" reaches a non-terminal node, "mas" is a prefix
    assert trie.prefix_search("ma") == {"Main St", "Mainland Market", "Ma's Diner"}
    t = PrefixIndex()
    t.insert("Ma")
    t.insert("Main")
    assert t.prefix_search("ma") == {"Ma", "Main"}


def test_spaces_and_punctuation_are_skipped(trie: PrefixIndex):
    assert trie.prefix_search("mainst") == {"Main St"}
    assert trie.prefix_search("main s") == {"Main St"}
    assert trie.prefix_search("peets coffee &") == {"Peet's Coffee & Tea"}
    assert trie.prefix_search("top-d") == {"Top Dog"}


def test_absent_prefix_returns_empty_set(trie: PrefixIndex):
    assert trie.prefix_search("zzz") == set()
    assert trie.prefix_search("mainx") == set()


def test_canonical_collision_keeps_last_display_name():
    t = PrefixIndex()
    t.insert("Main St.")
    t.insert("MAIN ST")
    assert t.prefix_search("main") == {"MAIN ST"}
    assert len(t) == 1


def test_names_without_letters_are_not_indexed():
    t = PrefixIndex()
    assert t.insert("123") is False
    assert t.insert("   ") is False
    assert t.prefix_search("") == set()


def test_search_does_not_mutate(trie: PrefixIndex):
    before = trie.prefix_search("")
    trie.prefix_search("nothing here")
    trie.prefix_search("b")
    assert trie.prefix_search("") == before


# ---------- NameIndex


def test_locate_is_exact_on_canonical_name_and_keeps_order():
    idx = NameIndex()
    a = Location(1, -122.1, 37.1, "Top Dog")
    b = Location(2, -122.2, 37.2, "TOP DOG!")
    c = Location(3, -122.3, 37.3, "Top Dogs")
    for loc in (a, b, c):
        assert idx.add(loc)
    assert idx.locate("top dog") == [a, b]
    assert idx.locate("Top Dog.") == [a, b]
    assert idx.locate("Top-Dog") == []
    assert idx.locate("top") == []
    assert len(idx) == 2


def test_locate_returns_a_copy():
    idx = NameIndex()
    idx.add(Location(1, 0.0, 0.0, "Here"))
    idx.locate("here").clear()
    assert len(idx.locate("here")) == 1


def test_name_index_ignores_letterless_names():
    idx = NameIndex()
    assert idx.add(Location(1, 0.0, 0.0, "42")) is False
    assert idx.locate("42") == []
