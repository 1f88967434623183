"""Aggregation module for degree-award datasets.

Pure functions only:
- Reads caller-owned records and returns scalars, lists or mappings
- Forbidden: record mutation, IO, module-level state
"""

from uhdata.aggregation.predicates import is_doctoral_degree, is_hawaiian, make_year_filter
from uhdata.aggregation.queries import (
    campus_degree_totals,
    data_for_year,
    degrees_by_year,
    doctoral_degree_programs,
    doctoral_records,
    hawaiian_legacy,
    list_campuses,
    max_degrees_in_a_year,
    percentage_hawaiian_legacy,
    sample_records,
    total_degrees_by_year,
    total_hawaiian_legacy,
)
from uhdata.aggregation.reducers import add_awards, group_by, group_reduce, sum_awards
from uhdata.aggregation.summary import summarize_dataset

__all__ = [
    # Reducers
    "add_awards",
    "group_by",
    "group_reduce",
    "sum_awards",
    # Predicates
    "is_doctoral_degree",
    "is_hawaiian",
    "make_year_filter",
    # Queries
    "campus_degree_totals",
    "data_for_year",
    "degrees_by_year",
    "doctoral_degree_programs",
    "doctoral_records",
    "hawaiian_legacy",
    "list_campuses",
    "max_degrees_in_a_year",
    "percentage_hawaiian_legacy",
    "sample_records",
    "total_degrees_by_year",
    "total_hawaiian_legacy",
    # Summary
    "summarize_dataset",
]
