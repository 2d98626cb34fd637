"""Autocompletion trie with fuzzy matching, normalisation, metadata and a typed wrapper."""

__version__ = "0.1.0"
__all__ = ["trie", "typed", "demo"]