"""Field names and tag values of the degree-award record schema.

One record per campus/year/program/outcome combination:
- AWARDS: numeric count of degrees conferred (summed by every aggregation)
- HAWAIIAN_LEGACY: demographic tag, "HAWAIIAN" for the subgroup of interest
- FISCAL_YEAR: reporting year (string or integer, compared exactly)
- CAMPUS: awarding campus
- OUTCOME: award category, "Doctoral Degrees" for doctoral records
- CIP_DESC: degree program description
"""

AWARDS_FIELD = "AWARDS"
HAWAIIAN_LEGACY_FIELD = "HAWAIIAN_LEGACY"
FISCAL_YEAR_FIELD = "FISCAL_YEAR"
CAMPUS_FIELD = "CAMPUS"
OUTCOME_FIELD = "OUTCOME"
PROGRAM_FIELD = "CIP_DESC"

# Tag values
HAWAIIAN_TAG = "HAWAIIAN"
DOCTORAL_OUTCOME = "Doctoral Degrees"

# Records taken from the head of a dataset by sample_records()
SAMPLE_HEAD_SIZE = 2
