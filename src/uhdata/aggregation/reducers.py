"""Reduction helpers over degree-award records.

Every total in uhdata goes through add_awards, so the AWARDS
presence and type checks apply uniformly. Grouping is shared through
group_reduce rather than repeated per query.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Callable, Hashable
from decimal import Decimal
from functools import reduce
from typing import TypeVar

from uhdata.core.errors import MissingFieldError, NonNumericFieldError
from uhdata.core.fields import AWARDS_FIELD
from uhdata.models.types import Dataset, Number, Record

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def is_numeric(value: object) -> bool:
    """Return True if value is a real number or a Decimal.

    The check is on type, not content: "42" is not numeric, and
    neither is True.
    """
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def add_awards(total: Number, record: Record) -> Number:
    """Reduction step: add one record's AWARDS to the running total.

    Args:
        total: Accumulator.
        record: Degree-award record.

    Returns:
        total + record["AWARDS"].

    Raises:
        MissingFieldError: If the record has no AWARDS field.
        NonNumericFieldError: If AWARDS is not a number.
    """
    if AWARDS_FIELD not in record:
        logger.debug(f"Record without {AWARDS_FIELD}: {dict(record)!r}")
        raise MissingFieldError()

    awards = record[AWARDS_FIELD]
    if not is_numeric(awards):
        logger.debug(f"Non-numeric {AWARDS_FIELD}: {awards!r}")
        raise NonNumericFieldError()

    return total + awards


def sum_awards(dataset: Dataset) -> Number:
    """Total number of degrees awarded in the dataset.

    Sums left to right starting at 0. The first bad record aborts the
    whole sum; there is no partial result.

    Raises:
        MissingFieldError: If any record has no AWARDS field.
        NonNumericFieldError: If any record's AWARDS is not a number.
    """
    return reduce(add_awards, dataset, 0)


def group_by(dataset: Dataset, key: Callable[[Record], K]) -> dict[K, list[Record]]:
    """Group records by key, keeping first-occurrence order of keys."""
    groups: dict[K, list[Record]] = {}
    for record in dataset:
        groups.setdefault(key(record), []).append(record)
    return groups


def group_reduce(
    dataset: Dataset,
    key: Callable[[Record], K],
    reducer: Callable[[list[Record]], V] = sum_awards,
) -> dict[K, V]:
    """Group records by key, then reduce each group.

    Args:
        dataset: Records to group.
        key: Extracts the grouping key from a record.
        reducer: Applied to each group's records (default sum_awards).

    Returns:
        Mapping of key -> reduced value, one entry per distinct key.
    """
    return {k: reducer(records) for k, records in group_by(dataset, key).items()}


def field_getter(field: str) -> Callable[[Record], object]:
    """Return a key function reading one field (None when absent)."""

    def get(record: Record) -> object:
        return record.get(field)

    return get
