"""A trie for autocompletion with fuzzy matching, normalisation and metadata."""

from __future__ import annotations

import threading
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

_SHORT_STRING_LEVENSHTEIN_LIMIT = 0
_MEDIUM_STRING_LEVENSHTEIN_LIMIT = 1
_LONG_STRING_LEVENSHTEIN_LIMIT = 2

_SHORT_STRING_THRESHOLD = 0
_MEDIUM_STRING_THRESHOLD = 3
_LONG_STRING_THRESHOLD = 5

# Stands in for the first character of an exhausted search string.
_REPLACEMENT_CHAR = "\ufffd"


def _strip_marks(text: str) -> str:
    """Decompose, drop non-spacing marks and recompose."""
    decomposed = unicodedata.normalize("NFD", text)
    kept = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", kept)


@dataclass(frozen=True)
class Match:
    """A search hit together with the metadata stored for it."""

    word: str
    meta: Any = None


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    word: str = ""
    meta: Any = None


@dataclass(frozen=True)
class _Score:
    distance: int
    fuzzy: bool
    meta: Any = None


class Trie:
    """Stores strings by common prefix for fast, optionally fuzzy, retrieval.

    By default fuzzy search, normalisation and case insensitivity are on, and
    the default Levenshtein scheme applies: searches of 1-2 characters allow
    no distance, 3-4 characters allow one, 5 or more allow two.
    """

    def __init__(self) -> None:
        self._root = _Node()
        self._lock = threading.Lock()
        self._original: dict[str, list[str]] = {}
        self._fuzzy = True
        self._normalised = True
        self._case_sensitive = False
        self._scheme: dict[int, int] = {}
        self._intervals: list[int] = []
        self.default_levenshtein()

    # Configuration -------------------------------------------------------

    def with_fuzzy(self) -> Trie:
        """Use fuzzy matching on search."""
        self._fuzzy = True
        return self

    def without_fuzzy(self) -> Trie:
        """Do not use fuzzy matching on search."""
        self._fuzzy = False
        return self

    def with_normalisation(self) -> Trie:
        """Ignore diacritics: "Jurg" finds "Jürgen" and vice versa."""
        self._normalised = True
        return self

    def without_normalisation(self) -> Trie:
        """Treat diacritics as significant."""
        self._normalised = False
        return self

    def case_sensitive(self) -> Trie:
        """Make search case sensitive."""
        self._case_sensitive = True
        return self

    def case_insensitive(self) -> Trie:
        """Make search case insensitive."""
        self._case_sensitive = False
        return self

    def without_levenshtein(self) -> Trie:
        """Allow no Levenshtein distance between search and matches."""
        self._scheme = {0: 0}
        self._intervals = [0]
        return self

    def default_levenshtein(self) -> Trie:
        """Use the default Levenshtein scheme."""
        self._scheme = {
            _SHORT_STRING_THRESHOLD: _SHORT_STRING_LEVENSHTEIN_LIMIT,
            _MEDIUM_STRING_THRESHOLD: _MEDIUM_STRING_LEVENSHTEIN_LIMIT,
            _LONG_STRING_THRESHOLD: _LONG_STRING_LEVENSHTEIN_LIMIT,
        }
        self._intervals = [
            _LONG_STRING_THRESHOLD,
            _MEDIUM_STRING_THRESHOLD,
            _LONG_STRING_THRESHOLD,
        ]
        return self

    def custom_levenshtein(self, scheme: Mapping[int, int]) -> Trie:
        """Use a mapping of minimum search length to allowed distance.

        The mapping must contain an entry for length zero.
        """
        if 0 not in scheme:
            raise ValueError("invalid levenshtein scheme: no entry for length 0")
        self._intervals = sorted(scheme, reverse=True)
        self._scheme = dict(scheme)
        return self

    # Mutation ------------------------------------------------------------

    def insert(self, *args: str) -> None:
        """Insert strings without metadata."""
        with self._lock:
            for entry in args:
                self._insert(entry, None)

    def insert_with_meta(self, word: str, meta: Any) -> None:
        """Insert a single string with associated metadata."""
        with self._lock:
            self._insert(word, meta)

    def bulk_insert_with_meta(self, entries: Mapping[str, Any]) -> None:
        """Insert several strings, each with its own metadata."""
        with self._lock:
            for word, meta in entries.items():
                self._insert(word, meta)

    def delete(self, word: str) -> None:
        """Remove a word and its metadata; unknown words are ignored."""
        with self._lock:
            key = self._key(word)
            self._original.pop(key, None)

            path = [self._root]
            for ch in key:
                nxt = path[-1].children.get(ch)
                if nxt is None:
                    return
                path.append(nxt)
            target = path[-1]
            target.word = ""
            target.meta = None

            for ch, parent, child in zip(
                reversed(key), reversed(path[:-1]), reversed(path[1:])
            ):
                if child.children or child.word:
                    break
                del parent.children[ch]

    # Lookup --------------------------------------------------------------

    def find_meta(self, word: str) -> Any:
        """Return the metadata stored for exactly this word.

        Raises KeyError if the word is not in the trie.
        """
        key = self._key(word)
        current = self._root
        for ch in key:
            nxt = current.children.get(ch)
            if nxt is None:
                raise KeyError(word)
            current = nxt
        if current.word == key:
            return current.meta
        raise KeyError(word)

    def search_all(self, search: str) -> list[str]:
        """Like search, without a limit."""
        return self.search(search, 0)

    def search(self, search: str, limit: int = 0) -> list[str]:
        """Return the words that have the search string as a prefix.

        Normalisation, fuzzy matching and the Levenshtein scheme apply. A
        limit of zero means no limit.
        """
        if not search:
            return []
        search = self._prepare_search(search)
        collection = self._gather(search)
        hits = self._ranked(collection)
        if limit != 0 and len(hits) >= limit:
            return hits[:limit]
        if not self._normalised and self._case_sensitive:
            return hits
        return [orig for hit in hits for orig in self._original.get(hit, [])]

    def search_all_meta(self, search: str) -> list[Match]:
        """Search without a limit, returning words with their metadata."""
        if not search:
            return []
        search = self._prepare_search(search)
        collection = self._gather(search)
        hits = [Match(word, collection[word].meta) for word in self._ranked(collection)]
        if not self._normalised and self._case_sensitive:
            return hits
        results: list[Match] = []
        for hit in hits:
            originals = self._original.get(hit.word)
            if not originals:
                results.append(hit)
            else:
                results.extend(Match(orig, hit.meta) for orig in originals)
        return results

    # Internals -----------------------------------------------------------

    def _key(self, word: str) -> str:
        if self._normalised:
            word = _strip_marks(word)
        if not self._case_sensitive:
            word = word.lower()
        return word

    def _prepare_search(self, search: str) -> str:
        return self._key(search)

    def _insert(self, entry: str, meta: Any) -> None:
        if not entry:
            return
        if self._normalised or not self._case_sensitive:
            key = self._key(entry)
            self._original.setdefault(key, []).append(entry)
            entry = key

        current = self._root
        last = len(entry) - 1
        for index, ch in enumerate(entry):
            child = current.children.get(ch)
            if child is None:
                child = _Node()
                if index == last:
                    child.word = entry
                    child.meta = meta
                current.children[ch] = child
            current = child
        if current.word == entry:
            current.meta = meta

    def _max_distance(self, search: str) -> int:
        length = len(search)
        for threshold in self._intervals:
            if length >= threshold:
                return self._scheme[threshold]
        return 0

    def _gather(self, search: str) -> dict[str, _Score]:
        collection: dict[str, _Score] = {}
        self._collect(
            collection, search, self._root, 0, self._max_distance(search),
            self._fuzzy, False,
        )
        return collection

    @staticmethod
    def _ranked(collection: Mapping[str, _Score]) -> list[str]:
        return sorted(
            collection,
            key=lambda w: (collection[w].distance, collection[w].fuzzy, w),
        )

    @staticmethod
    def _record(
        collection: dict[str, _Score], node: _Node, distance: int, fuzzy_used: bool
    ) -> None:
        previous = collection.get(node.word)
        if (
            previous is None
            or distance < previous.distance
            or (distance == previous.distance and previous.fuzzy and not fuzzy_used)
        ):
            collection[node.word] = _Score(distance, fuzzy_used, node.meta)

    def _collect_descendants(
        self, collection: dict[str, _Score], node: _Node, distance: int, fuzzy_used: bool
    ) -> None:
        stack = list(node.children.values())
        while stack:
            child = stack.pop()
            if child.word:
                self._record(collection, child, distance, fuzzy_used)
            stack.extend(child.children.values())

    def _collect(
        self,
        collection: dict[str, _Score],
        word: str,
        node: _Node,
        distance: int,
        max_distance: int,
        fuzzy_allowed: bool,
        fuzzy_used: bool,
    ) -> None:
        """Walk the trie, allowing substitution, insertion, deletion and skips."""
        if not word:
            if node.word:
                self._record(collection, node, distance, fuzzy_used)
                self._collect_descendants(collection, node, distance, fuzzy_used)
                return
            self._collect_descendants(collection, node, distance, fuzzy_used)

        if word:
            character, subword = word[0], word[1:]
        else:
            character, subword = _REPLACEMENT_CHAR, ""

        # '*' matches nothing and is skipped.
        if character == "*":
            self._collect(collection, subword, node, distance, max_distance, False, fuzzy_used)

        nxt = node.children.get(character)
        if nxt is not None:
            self._collect(collection, subword, nxt, distance, max_distance, False, fuzzy_used)

        if distance < max_distance:
            distance += 1
            for ch, child in list(node.children.items()):
                # Substitution
                self._collect(
                    collection, ch + subword, node, distance, max_distance, False, fuzzy_used
                )
                # Insertion
                self._collect(
                    collection, ch + word, node, distance, max_distance, False, fuzzy_used
                )
                if fuzzy_allowed:
                    self._collect(
                        collection, word, child, distance - 1, max_distance, True, True
                    )
            # Deletion
            self._collect(collection, subword, node, distance, max_distance, False, False)
        elif distance == 0 and fuzzy_allowed:
            for child in list(node.children.values()):
                self._collect(collection, word, child, distance, max_distance, True, True)

    def _iter_words(self) -> Iterable[str]:
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.word:
                yield node.word
            stack.extend(node.children.values())