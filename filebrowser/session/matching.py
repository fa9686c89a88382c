"""Prompt-text filtering of listing rows."""

from __future__ import annotations


def query_tokens(query: str) -> list[str]:
    return [token.casefold() for token in query.split()]


def matches_query(name: str, query: str) -> bool:
    """Return whether every whitespace token of ``query`` occurs in ``name``.

    Matching is case-insensitive; an empty query matches everything.
    """
    folded = name.casefold()
    return all(token in folded for token in query_tokens(query))


__all__ = [
    "query_tokens",
    "matches_query",
]
