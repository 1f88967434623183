"""Record aliases and pydantic result models for uhdata.

Records stay plain mappings owned by the caller; only computed
results are modeled.
"""

from collections.abc import Hashable, Iterable, Mapping
from decimal import Decimal
from fractions import Fraction
from typing import Any

from pydantic import BaseModel, ConfigDict

Record = Mapping[str, Any]
Dataset = Iterable[Record]

# FISCAL_YEAR values may be strings or integers
YearKey = str | int | None
Number = int | float | Fraction | Decimal


class DegreeSummary(BaseModel):
    """All aggregate statistics for one dataset.

    Keys and totals are stored exactly as the queries return them:
    grouping keys keep their type (2015.0 stays a float) and totals
    keep the numeric type of the AWARDS values.
    """

    model_config = ConfigDict(frozen=True)

    record_count: int
    total_degrees: Any
    percentage_hawaiian_legacy: float  # NaN or signed inf when total_degrees == 0
    campuses: list[Hashable]
    campus_totals: dict[Hashable, Any]  # campus -> degrees
    totals_by_year: dict[Hashable, Any]  # fiscal year -> degrees
    max_degrees_in_a_year: Any  # None for an empty dataset
    doctoral_programs: list[Hashable]
