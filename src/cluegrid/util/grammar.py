"""Lightweight grammar helpers for clue strings."""

from __future__ import annotations

_ARTICLES = ("the ", "a ", "an ")


def with_article(name: str) -> str:
    """Ensure weapon and place names read naturally with an article."""
    trimmed = " ".join(name.strip().split())
    if trimmed.lower().startswith(_ARTICLES):
        return trimmed
    return f"the {trimmed}"


def capitalize_first(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]
