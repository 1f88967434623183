"""Dataset summary aggregation.

Computes every aggregate statistic for a dataset in one call.
Domain logic is pure - the dataset is only read, never mutated.
"""

from __future__ import annotations

import logging

from uhdata.aggregation.queries import (
    campus_degree_totals,
    degrees_by_year,
    doctoral_degree_programs,
    list_campuses,
    max_degrees_in_a_year,
    percentage_hawaiian_legacy,
)
from uhdata.aggregation.reducers import sum_awards
from uhdata.models.types import Dataset, DegreeSummary

logger = logging.getLogger(__name__)


def summarize_dataset(dataset: Dataset) -> DegreeSummary:
    """Compute all degree statistics for a dataset.

    The dataset is materialized once, so generators and other one-shot
    iterables are accepted.

    Args:
        dataset: Degree-award records.

    Returns:
        DegreeSummary with totals, percentages, per-campus and per-year
        breakdowns, and doctoral programs.

    Raises:
        MissingFieldError: If any record has no AWARDS field.
        NonNumericFieldError: If any record's AWARDS is not a number.
    """
    records = list(dataset)
    logger.debug(f"Summarizing {len(records)} records")

    # Validates every record up front; later passes cannot fail
    total = sum_awards(records)

    summary = DegreeSummary(
        record_count=len(records),
        total_degrees=total,
        percentage_hawaiian_legacy=percentage_hawaiian_legacy(records),
        campuses=list_campuses(records),
        campus_totals=campus_degree_totals(records),
        totals_by_year=degrees_by_year(records),
        max_degrees_in_a_year=max_degrees_in_a_year(records),
        doctoral_programs=doctoral_degree_programs(records),
    )

    logger.debug(
        f"Summary: total={summary.total_degrees}, "
        f"campuses={len(summary.campuses)}, years={len(summary.totals_by_year)}"
    )
    return summary
