"""A small demonstration of typed metadata search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from fuzzytrie.typed import TypedTrie


def _format_number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


@dataclass(frozen=True)
class Product:
    """A catalogue item."""

    id: int
    price: float

    def __str__(self) -> str:
        return f"{{ID:{self.id} Price:{_format_number(self.price)}}}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Insert two products, look one up exactly and one fuzzily."""
    trie: TypedTrie[Product] = TypedTrie(Product)
    trie.insert("iPhone", Product(id=1, price=999))
    trie.insert("iPad", Product(id=2, price=799))

    try:
        product = trie.find("iPhone")
    except KeyError:
        pass
    else:
        print("Exact:", product.id, _format_number(product.price))

    for hit in trie.search_all("iphne"):
        print(f"~ {hit.word} → {hit.meta}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())