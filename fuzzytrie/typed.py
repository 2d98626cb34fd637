"""A trie wrapper that stores metadata of a single declared type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from fuzzytrie.trie import Trie

T = TypeVar("T")


@dataclass(frozen=True)
class TypedMatch(Generic[T]):
    """A search hit with metadata of the trie's declared type.

    ``meta`` is None when the stored metadata is not of that type.
    """

    word: str
    meta: Optional[T] = None


class TypedTrie(Generic[T]):
    """A :class:`Trie` whose metadata values are all instances of one type.

    The underlying trie is available as ``trie`` for configuration and for
    the untyped operations.
    """

    def __init__(self, meta_type: type[T]) -> None:
        self.meta_type = meta_type
        self.trie = Trie()

    def insert(self, key: str, meta: T) -> None:
        """Insert a word with typed metadata.

        Raises TypeError if ``meta`` is not of the declared type.
        """
        if not isinstance(meta, self.meta_type):
            raise TypeError(
                f"metadata must be {self.meta_type.__name__}, "
                f"not {type(meta).__name__}"
            )
        self.trie.insert_with_meta(key, meta)

    def find(self, key: str) -> T:
        """Return the metadata stored for exactly this word.

        Raises KeyError if the word is absent or its metadata is not of the
        declared type.
        """
        meta = self.trie.find_meta(key)
        if not isinstance(meta, self.meta_type):
            raise KeyError(key)
        return meta

    def search_all(self, query: str) -> list[TypedMatch[T]]:
        """Search without a limit, returning words with typed metadata."""
        return [
            TypedMatch(
                hit.word,
                hit.meta if isinstance(hit.meta, self.meta_type) else None,
            )
            for hit in self.trie.search_all_meta(query)
        ]