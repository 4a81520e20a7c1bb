"""Loader and derived-value helpers for the works_with_authors.csv dataset."""

from __future__ import annotations

import csv
import io
import logging
import math
import os
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

import requests

from countries import parse_country
from models import WorkRow

WORKS_CSV_PATH = "/works_with_authors.csv"
WORKS_BASE_URL = os.getenv("WORKS_BASE_URL", "http://localhost:5173")
REQUEST_TIMEOUT_SECONDS = int(os.getenv("WORKS_REQUEST_TIMEOUT", "20"))

LOGGER = logging.getLogger(__name__)

# Candidate CSV columns per WorkRow attribute, tried in order.
COLUMN_CANDIDATES: dict[str, tuple[str, ...]] = {
    "work_id": ("work_id", "work"),
    "author_id": ("author_id",),
    "country": ("countries",),
    "field": ("topic_field_display_name",),
    "year": ("pub_year", "year"),
}


class WorksLoadError(RuntimeError):
    """Raised when the works CSV cannot be fetched."""


class WorksCache:
    """In-memory holder for the normalized works rows.

    There is no locking: two loads running at the same time both fetch and
    the last one to finish overwrites the other.
    """

    def __init__(self) -> None:
        self._rows: list[WorkRow] | None = None

    def get(self) -> list[WorkRow] | None:
        return self._rows

    def set(self, rows: list[WorkRow]) -> None:
        self._rows = rows

    def clear(self) -> None:
        self._rows = None


_CACHE = WorksCache()


def works_csv_url() -> str:
    return WORKS_BASE_URL.rstrip("/") + WORKS_CSV_PATH


def load_works(cache: WorksCache | None = None, url: str | None = None) -> list[WorkRow]:
    """Return normalized works rows, fetching the CSV on first use.

    A cache hit returns the very same list object. On failure nothing is
    cached, so the next call fetches again.

    Args:
        cache: Cache to read and populate. Defaults to the module-level cache.
        url: Override for the CSV location. Defaults to WORKS_BASE_URL + WORKS_CSV_PATH.
            Ignored on a cache hit: the cached rows are returned whichever URL
            filled the cache.

    Raises:
        WorksLoadError: the request failed or returned a non-success status.
    """
    cache = _CACHE if cache is None else cache
    cached = cache.get()
    if cached is not None:
        LOGGER.debug("Works cache hit: rows=%s", len(cached))
        return cached

    url = url or works_csv_url()
    text = _fetch_csv_text(url)

    # Short rows get "" for their missing cells so they never fall through to a candidate column.
    raw_rows = list(csv.DictReader(io.StringIO(text.lstrip("\ufeff")), restval=""))
    rows = [row for row in map(normalize_row, raw_rows) if row is not None]

    LOGGER.info(
        "Loaded %s: raw_rows=%s kept=%s dropped=%s",
        url,
        len(raw_rows),
        len(rows),
        len(raw_rows) - len(rows),
    )

    cache.set(rows)
    return rows


def _fetch_csv_text(url: str) -> str:
    try:
        response = requests.get(url, timeout=REQUEST_TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        raise WorksLoadError(f"Failed to load {url}: {exc}") from exc

    if not response.ok:
        raise WorksLoadError(
            f"Failed to load {url}: HTTP {response.status_code}"
        )
    return response.text


def normalize_row(raw: Mapping[str, Any]) -> WorkRow | None:
    """Build a WorkRow from one CSV record, or None if it is unusable.

    A row is unusable without a work id, an author id, or a numeric year.
    """
    year = _first_year(raw, COLUMN_CANDIDATES["year"])
    work_id = _as_text(_first_present(raw, COLUMN_CANDIDATES["work_id"]))
    author_id = _as_text(_first_present(raw, COLUMN_CANDIDATES["author_id"]))

    if not work_id or not author_id or year is None:
        return None

    return WorkRow(
        work_id=work_id,
        author_id=author_id,
        country=parse_country(_first_present(raw, COLUMN_CANDIDATES["country"])),
        field=_as_text(_first_present(raw, COLUMN_CANDIDATES["field"])).strip(),
        year=year,
    )


def _first_present(raw: Mapping[str, Any], columns: Iterable[str]) -> Any:
    """Value of the first column present in the row; empty cells do not fall through."""
    for column in columns:
        value = raw.get(column)
        if value is not None:
            return value
    return None


def _first_year(raw: Mapping[str, Any], columns: Iterable[str]) -> int | None:
    """First column whose value is a non-zero number; zero falls through like a blank."""
    for column in columns:
        year = _coerce_year(raw.get(column))
        if year:
            return year
    return None


def _coerce_year(value: Any) -> int | None:
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number)


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def years_from(rows: Iterable[WorkRow]) -> list[int]:
    """Distinct years present in rows, ascending."""
    return sorted({row.year for row in rows})


def short_author_id(author_id: str) -> str:
    """Last path segment of an author id, e.g. the OpenAlex ``A123`` part of its URL."""
    if not author_id:
        return ""
    last = author_id.split("/")[-1]
    return last or author_id


def count_by(rows: Iterable[WorkRow], attribute: str) -> list[tuple[Any, int]]:
    """Count rows per value of a WorkRow attribute, most common first.

    Empty values are skipped. Ties are ordered by value.
    """
    counts = Counter(getattr(row, attribute) for row in rows)
    counts.pop("", None)
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def distinct_works_by_year(rows: Iterable[WorkRow]) -> dict[int, int]:
    """Number of distinct works per year; a multi-author work counts once."""
    works_by_year: dict[int, set[str]] = {}
    for row in rows:
        works_by_year.setdefault(row.year, set()).add(row.work_id)
    return {year: len(works_by_year[year]) for year in sorted(works_by_year)}
