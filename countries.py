"""ISO2 country code resolution for the `countries` column."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

# Research-heavy countries only. Codes missing here are returned as-is, so the
# table can be extended without touching parse_country().
ISO2_TO_NAME: Mapping[str, str] = MappingProxyType({
    "US": "United States of America",
    "GB": "United Kingdom",
    "FR": "France",
    "DE": "Germany",
    "CN": "China",
    "JP": "Japan",
    "KR": "South Korea",
    "CA": "Canada",
    "AU": "Australia",
    "BR": "Brazil",
    "IN": "India",
    "IT": "Italy",
    "ES": "Spain",
    "NL": "Netherlands",
    "SE": "Sweden",
    "NO": "Norway",
    "DK": "Denmark",
    "FI": "Finland",
    "CH": "Switzerland",
    "SG": "Singapore",
    "RU": "Russia",
    "ZA": "South Africa",
    "MX": "Mexico",
    "AR": "Argentina",
    "BE": "Belgium",
    "AT": "Austria",
    "PL": "Poland",
    "IE": "Ireland",
    "NZ": "New Zealand",
    "IL": "Israel",
})

_QUOTE_CHARS = "'\""


def parse_country(raw: Any, names: Mapping[str, str] = ISO2_TO_NAME) -> str:
    """Resolve a raw `countries` cell to a single country name.

    Accepts a plain code (``FR``) or a Python-list-like string
    (``['FR', 'DE']``, ``[]``). Only the first code is kept. Unmapped codes
    come back upper-cased; empty input gives ``""``.
    """
    if raw is None:
        return ""
    text = str(raw).strip()
    if not text:
        return ""

    if text.startswith("[") and text.endswith("]"):
        text = text[1:-1]

    parts = [_strip_quotes(part) for part in text.split(",")]
    parts = [part for part in parts if part]
    if not parts:
        return ""

    code = parts[0].upper()
    return names.get(code, code)


def _strip_quotes(value: str) -> str:
    for quote in _QUOTE_CHARS:
        value = value.replace(quote, "")
    return value.strip()
