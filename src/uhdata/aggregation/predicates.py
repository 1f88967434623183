"""Record predicates used to filter datasets."""

from __future__ import annotations

from collections.abc import Callable

from uhdata.core.fields import (
    DOCTORAL_OUTCOME,
    FISCAL_YEAR_FIELD,
    HAWAIIAN_LEGACY_FIELD,
    HAWAIIAN_TAG,
    OUTCOME_FIELD,
)
from uhdata.models.types import Record, YearKey


def is_hawaiian(record: Record) -> bool:
    """True if the record concerns students of Hawaiian legacy."""
    return record.get(HAWAIIAN_LEGACY_FIELD) == HAWAIIAN_TAG


def is_doctoral_degree(record: Record) -> bool:
    """True if the record concerns a doctoral degree."""
    return record.get(OUTCOME_FIELD) == DOCTORAL_OUTCOME


def make_year_filter(year: YearKey) -> Callable[[Record], bool]:
    """Build a predicate matching records from the given fiscal year.

    Equality is exact: the string "2015" does not match the integer 2015.
    """

    def from_year(record: Record) -> bool:
        return record.get(FISCAL_YEAR_FIELD) == year

    return from_year
