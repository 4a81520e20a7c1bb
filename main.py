"""CLI entrypoint: load the works dataset and log a summary of it."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from models import WorkRow
from works_data import (
    WorksLoadError,
    count_by,
    distinct_works_by_year,
    load_works,
    short_author_id,
    years_from,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Load works_with_authors.csv and summarize it")
    parser.add_argument("--url", default=None, help="CSV location (default: WORKS_BASE_URL + /works_with_authors.csv)")
    parser.add_argument("--top", type=int, default=10, help="How many countries, fields and authors to list")
    return parser.parse_args(argv)


def summarize(rows: list[WorkRow], top: int) -> None:
    """Log row counts, year coverage and the most frequent countries, fields and authors."""
    years = years_from(rows)
    logging.info(
        "Works summary: rows=%s works=%s authors=%s",
        len(rows),
        len({row.work_id for row in rows}),
        len({row.author_id for row in rows}),
    )
    if years:
        logging.info("Years: %s-%s (%s distinct)", years[0], years[-1], len(years))

    for year, works in distinct_works_by_year(rows).items():
        logging.info("  %s: %s works", year, works)

    for country, count in count_by(rows, "country")[:top]:
        logging.info("Country %s: %s authorships", country, count)
    for field, count in count_by(rows, "field")[:top]:
        logging.info("Field %s: %s authorships", field, count)
    for author_id, count in count_by(rows, "author_id")[:top]:
        logging.info("Author %s: %s authorships", short_author_id(author_id), count)


def main(argv: list[str] | None = None) -> int:
    """Initialize config, load the dataset and print the summary."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = parse_args(argv)

    try:
        rows = load_works(url=args.url)
    except WorksLoadError as exc:
        logging.error("%s", exc)
        return 1

    summarize(rows, top=args.top)
    return 0


if __name__ == "__main__":
    sys.exit(main())
