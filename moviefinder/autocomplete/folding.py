"""Per-code-point case folding shared by the trie and its iterator."""

from __future__ import annotations


def fold(ch: str) -> str:
    """
    Case-fold a single code point the way child links are keyed.

    Always returns exactly one code point. Where the full lowercase
    mapping expands (U+0130 gives "i" plus a combining dot) only the
    first code point is kept.
    """
    lowered = ch.lower()
    return lowered if len(lowered) == 1 else lowered[0]


def fold_text(text: str) -> str:
    """Fold *text* one code point at a time, with no context rules."""
    return "".join(map(fold, text))
