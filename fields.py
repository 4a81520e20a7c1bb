"""Splitting of single- or multi-valued topic field cells."""

from __future__ import annotations

import re

_DELIMITERS = re.compile(r"[|,;]+")
_QUOTES = re.compile(r"['\"]")


def split_field_string(raw: str | None) -> list[str]:
    """Split a field cell on ``|``, ``,`` or ``;`` (optionally JSON-list quoted).

    Duplicates are kept; deduplicate at the call site if needed.
    """
    if not raw:
        return []
    text = str(raw).strip()
    if not text:
        return []

    if text.startswith("[") and text.endswith("]"):
        text = text[1:-1]

    pieces = (_QUOTES.sub("", piece).strip() for piece in _DELIMITERS.split(text))
    return [piece for piece in pieces if piece]
