from dataclasses import dataclass

import pytest

from fuzzytrie.typed import TypedMatch, TypedTrie


@dataclass(frozen=True)
class Product:
    id: int
    price: float


@dataclass(frozen=True)
class Ident:
    id: int


def test_generic_wrapper_find_and_search():
    g = TypedTrie(Product)
    g.insert("iPhone", Product(id=1, price=999))
    p = g.find("iPhone")
    assert p.id == 1
    res = g.search_all("iPhone")
    assert len(res) == 1
    assert res[0].meta.price == 999.0


def test_metadata_example():
    t = TypedTrie(Ident)
    t.insert("iPhone", Ident(1))
    hits = [(hit.word, hit.meta.id) for hit in t.search_all("iphone")]
    assert hits == [("iPhone", 1)]


def test_fuzzy_collisions_keep_their_metadata():
    t = TypedTrie(str)
    t.insert("iPhone", "A")
    t.insert("iPhobe", "B")
    hits = t.search_all("iphoe")
    assert len(hits) == 2
    by_word = {hit.word: hit.meta for hit in hits}
    assert by_word == {"iPhone": "A", "iPhobe": "B"}


def test_find_missing_raises_key_error():
    t = TypedTrie(int)
    t.insert("ipad", 1)
    with pytest.raises(KeyError):
        t.find("mac")


def test_find_with_untyped_metadata_raises_key_error():
    t = TypedTrie(int)
    t.trie.insert("mac")
    with pytest.raises(KeyError):
        t.find("mac")


def test_search_all_untyped_metadata_becomes_none():
    t = TypedTrie(int)
    t.trie.insert_with_meta("mac", "not an int")
    assert t.search_all("mac") == [TypedMatch("mac", None)]


def test_insert_wrong_type_raises_type_error():
    t = TypedTrie(int)
    with pytest.raises(TypeError):
        t.insert("ipad", "one")
    assert t.search_all("ipad") == []


def test_find_round_trip_case_insensitive():
    t = TypedTrie(int)
    t.insert("Mac", 2)
    assert t.find("mac") == 2
    assert t.find("MAC") == 2


def test_delete_through_underlying_trie():
    t = TypedTrie(int)
    t.insert("ipad", 1)
    t.trie.delete("ipad")
    with pytest.raises(KeyError):
        t.find("ipad")
    assert t.search_all("ipad") == []


def test_empty_query_returns_nothing():
    t = TypedTrie(int)
    t.insert("ipad", 1)
    assert t.search_all("") == []