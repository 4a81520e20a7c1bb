"""Shared typed models for the works visualization data layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True, slots=True)
class WorkRow:
    """Normalized publication/authorship record loaded from works_with_authors.csv."""

    work_id: str  # OpenAlex work URL
    author_id: str  # OpenAlex author URL
    country: str  # e.g. "France"
    field: str  # topic_field_display_name
    year: int  # pub_year


# Row shapes of the sibling datasets. Declarations only, nothing here parses them.


@dataclass(frozen=True, slots=True)
class Movie:
    tconst: str
    title_type: str
    primary_title: str
    original_title: str
    year: date
    runtime_minutes: float
    average_rating: float
    num_votes: int
    genres: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Work:
    id: str
    pub_year: int
    pub_date: date
    is_published: str
    type: str
    type_crossref: str
    cited_by_count: int


@dataclass(frozen=True, slots=True)
class Author:
    """Author position on a work; `counties` is spelled as in the source export."""

    work_id: str
    a_id: str
    position: str
    counties: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Keyword:
    work_id: str
    keyword_id: str
    keyword_score: float
    keyword_name: str


@dataclass(frozen=True, slots=True)
class ReferencedWork:
    """Citation edge: work_id cites referenced_work_id."""

    work_id: str
    referenced_work_id: str


@dataclass(frozen=True, slots=True)
class Topic:
    work_id: str
    topic_id: str
    topic_display_name: str
    topic_score: float
    topic_sub_field_display_name: str
    topic_field_display_name: str
    topic_domain_display_name: str
