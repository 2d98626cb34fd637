# fuzzytrie

`fuzzytrie` is an in-memory trie for autocompletion. A search returns every
stored word that starts with the query. Fuzzy matching, accent-insensitive
normalisation, case-insensitive search and an edit-distance allowance that
grows with the query's length can each be switched on or off. Any value can
be attached to a word as metadata.

It has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

## Basic use

```python
from fuzzytrie.trie import Trie

t = Trie()
t.insert("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

t.search_all("wdn")   # ['Wednesday']
t.search_all("tsd")   # ['Thursday', 'Tuesday', 'Wednesday']
t.search("tsd", 1)    # at most one result
```

Results are ordered by edit distance first. At the same distance, direct
matches come before fuzzy ones, and after that the order is alphabetical.
Inserting an empty string does nothing, and an empty query returns an empty
list.

Words come back in the spelling they were inserted with; if several inserted
spellings share the same normalised form, all of them are returned. One
exception: when `search` is given a non-zero `limit` and there are at least
that many hits, the first `limit` hits are returned in their stored form, that
is with accents removed and in lower case when those settings are on.

## Settings

Every setting method returns the trie, so calls can be chained. Settings
apply to words inserted after the change, so set them before inserting:

```python
t = Trie().case_sensitive().without_fuzzy().without_levenshtein().without_normalisation()
t.insert("Monday", "Tuesday", "Thursday")
t.search_all("t")   # []
t.search_all("T")   # ['Thursday', 'Tuesday']
```

- `with_fuzzy()` / `without_fuzzy()`: match queries whose characters appear in
  order but not next to each other, so `"elo"` finds `"hello"`. On by default.
- `with_normalisation()` / `without_normalisation()`: ignore accents, so
  `"hello"` finds `"héllö"` and the other way round. On by default.
- `case_sensitive()` / `case_insensitive()`: case-insensitive by default.
- `default_levenshtein()`: queries of 1–2 characters allow no edits, 3–4
  characters allow one, and 5 or more allow two.
- `without_levenshtein()`: allow no edits at all.
- `custom_levenshtein(scheme)`: a mapping from minimum query length to allowed
  distance, for example `{0: 0, 10: 1, 20: 2}`. The mapping must contain the
  key `0`, otherwise `ValueError` is raised.

A `*` in a query is skipped and matches nothing by itself.

## Metadata

```python
from fuzzytrie.trie import Trie

t = Trie()
t.insert_with_meta("iPhone", "phone")
t.bulk_insert_with_meta({"ipad": 1, "mac": 2})

t.find_meta("iPhone")              # 'phone'
for match in t.search_all_meta("iphne"):
    print(match.word, match.meta)  # Match objects carry word and meta

t.delete("ipad")                   # removes the word and its metadata
```

`find_meta` looks up the exact word (after normalisation and case folding as
configured) and raises `KeyError` if it is not stored. Words inserted with
`insert` have `None` as metadata. `delete` ignores words that are not stored.
Inserting, bulk inserting and deleting are serialised by a lock, so they may
be called from several threads.

## Typed metadata

`TypedTrie` only accepts and hands back metadata of the type it was created
for:

```python
from dataclasses import dataclass
from fuzzytrie.typed import TypedTrie

@dataclass
class Product:
    id: int
    price: float

products = TypedTrie(Product)
products.insert("iPhone", Product(1, 999.0))
products.insert("iPad", Product(2, 799.0))

products.find("iPhone")                    # Product(id=1, price=999.0)
for hit in products.search_all("iphne"):   # TypedMatch objects
    print(hit.word, hit.meta)
```

- `insert` raises `TypeError` if the metadata is not of the declared type.
- `find` raises `KeyError` if the word is absent or its metadata is not of the
  declared type.
- `search_all` returns `TypedMatch` objects whose `meta` is `None` when the
  stored metadata is not of the declared type.

The underlying `Trie` is available as `products.trie`, for changing settings
and for the untyped operations such as `delete`.

## Demo

A short demonstration inserts two products, prints an exact lookup and the
results of a fuzzy search:

```
fuzzytrie-demo
```

## Limits

The trie lives in memory only: there is no way to save it to a file or load
it back, and there is no command for searching a word list from the shell.