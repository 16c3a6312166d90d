"""Path-data tokenizer.

Splits a `d` attribute (or any numeric attribute string) into single-letter
command tokens and numeric literal tokens. Lenient: unknown glyphs are
dropped, never an error.
"""

from __future__ import annotations

import re

# Strict decimal literal: sign, digits with optional fraction, optional exponent.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_SEPARATORS = frozenset(", \t\n")


def tokenize(path_data: str) -> tuple[str, ...]:
    """Tokenize path data into command letters and numeric strings."""
    tokens: list[str] = []
    buf: list[str] = []

    def flush() -> None:
        if buf:
            tokens.append("".join(buf))
            buf.clear()

    for ch in path_data:
        if ch.isalpha():
            flush()
            tokens.append(ch)
        elif ch == "-":
            # A minus sign always begins a new number: "1-2" -> "1", "-2"
            flush()
            buf.append(ch)
        elif ch.isdigit() or ch == ".":
            buf.append(ch)
        elif ch in _SEPARATORS:
            flush()
        else:
            flush()
    flush()
    return tuple(tokens)


def parse_number(text: str | None) -> float | None:
    """Parse a decimal literal. None for anything that is not one (incl. inf/nan)."""
    if text is None:
        return None
    stripped = text.strip()
    if not _NUMBER_RE.fullmatch(stripped):
        return None
    return float(stripped)
