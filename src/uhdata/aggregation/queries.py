"""Aggregate queries over a degree-award dataset.

Each query is a filter -> group -> reduce pipeline built from the
predicates and reducers modules. Queries never mutate their input and
only raise the AWARDS field errors from uhdata.core.errors.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable
from typing import TypeVar

from uhdata.aggregation.predicates import is_doctoral_degree, is_hawaiian, make_year_filter
from uhdata.aggregation.reducers import field_getter, group_reduce, sum_awards
from uhdata.core.fields import CAMPUS_FIELD, FISCAL_YEAR_FIELD, PROGRAM_FIELD, SAMPLE_HEAD_SIZE
from uhdata.models.types import Dataset, Number, Record, YearKey

H = TypeVar("H", bound=Hashable)


def _unique(values: Iterable[H]) -> list[H]:
    """Distinct values in first-occurrence order."""
    return list(dict.fromkeys(values))


# ============================================================================
# Hawaiian legacy
# ============================================================================


def hawaiian_legacy(dataset: Dataset) -> list[Record]:
    """Records concerning students of Hawaiian legacy."""
    return [record for record in dataset if is_hawaiian(record)]


def total_hawaiian_legacy(dataset: Dataset) -> Number:
    """Degrees awarded to students of Hawaiian legacy."""
    return sum_awards(hawaiian_legacy(dataset))


def percentage_hawaiian_legacy(dataset: Dataset) -> float:
    """Percentage of all degrees awarded to students of Hawaiian legacy.

    Args:
        dataset: Degree-award records.

    Returns:
        100 * hawaiian total / dataset total as a float. When the
        dataset total is 0 the result is NaN if the Hawaiian total is
        also 0, otherwise infinity with the Hawaiian total's sign.

    Raises:
        MissingFieldError: If any record has no AWARDS field.
        NonNumericFieldError: If any record's AWARDS is not a number.
    """
    records = list(dataset)
    hawaiian = total_hawaiian_legacy(records)
    total = sum_awards(records)
    if total == 0:
        if hawaiian == 0:
            return math.nan
        return math.copysign(math.inf, hawaiian)
    return float(hawaiian / total * 100)


# ============================================================================
# Fiscal year
# ============================================================================


def data_for_year(dataset: Dataset, year: YearKey) -> list[Record]:
    """Records from the given fiscal year."""
    return list(filter(make_year_filter(year), dataset))


def total_degrees_by_year(dataset: Dataset, year: YearKey) -> Number:
    """Degrees awarded in the given fiscal year.

    Returns 0 when no record matches. Records from other years are not
    checked for a valid AWARDS field.
    """
    return sum_awards(data_for_year(dataset, year))


def degrees_by_year(dataset: Dataset) -> dict[YearKey, Number]:
    """Degrees awarded per fiscal year, in first-occurrence order."""
    return group_reduce(dataset, field_getter(FISCAL_YEAR_FIELD))


def max_degrees_in_a_year(dataset: Dataset) -> Number | None:
    """Most degrees awarded in any single fiscal year.

    Returns:
        The largest per-year total, or None for an empty dataset.
    """
    totals = degrees_by_year(dataset)
    if not totals:
        return None
    return max(totals.values())


# ============================================================================
# Campus
# ============================================================================


def list_campuses(dataset: Dataset) -> list[str | None]:
    """Distinct campuses in the dataset, in first-occurrence order.

    A record without a CAMPUS field contributes None.
    """
    return _unique(record.get(CAMPUS_FIELD) for record in dataset)


def campus_degree_totals(dataset: Dataset) -> dict[str | None, Number]:
    """Degrees awarded per campus.

    Keys match list_campuses(dataset) and values sum to
    sum_awards(dataset). An empty dataset gives an empty mapping.
    """
    return group_reduce(dataset, field_getter(CAMPUS_FIELD))


# ============================================================================
# Programs
# ============================================================================


def doctoral_records(dataset: Dataset) -> list[Record]:
    """Records concerning doctoral degrees."""
    return [record for record in dataset if is_doctoral_degree(record)]


def doctoral_degree_programs(dataset: Dataset) -> list[str | None]:
    """Distinct programs (CIP_DESC) granting a doctoral degree."""
    return _unique(record.get(PROGRAM_FIELD) for record in doctoral_records(dataset))


# ============================================================================
# Sampling
# ============================================================================


def sample_records(dataset: Dataset) -> list[Record]:
    """Small sample of a dataset: its first two records plus the first
    Hawaiian-legacy record.

    The Hawaiian record is looked up over the whole dataset, so it may
    repeat one of the first two. Returns a new list; records are shared,
    not copied.
    """
    records = list(dataset)
    sample = records[:SAMPLE_HEAD_SIZE]
    first_hawaiian = next((record for record in records if is_hawaiian(record)), None)
    if first_hawaiian is not None:
        sample.append(first_hawaiian)
    return sample
