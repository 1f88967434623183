"""Shared pytest fixtures for uhdata tests."""

import pytest


@pytest.fixture
def records():
    """Two ordinary records plus one Hawaiian-legacy record (403 awards)."""
    return [
        {
            "CAMPUS": "Manoa",
            "FISCAL_YEAR": 2012,
            "HAWAIIAN_LEGACY": "NOT HAWAIIAN",
            "OUTCOME": "Bachelors Degrees",
            "CIP_DESC": "Accounting",
            "AWARDS": 175,
        },
        {
            "CAMPUS": "Manoa",
            "FISCAL_YEAR": 2012,
            "HAWAIIAN_LEGACY": "NOT HAWAIIAN",
            "OUTCOME": "Doctoral Degrees",
            "CIP_DESC": "Chemistry",
            "AWARDS": 200,
        },
        {
            "CAMPUS": "Hilo",
            "FISCAL_YEAR": 2012,
            "HAWAIIAN_LEGACY": "HAWAIIAN",
            "OUTCOME": "Bachelors Degrees",
            "CIP_DESC": "Hawaiian Studies",
            "AWARDS": 28,
        },
    ]


@pytest.fixture
def multi_year_records():
    """Records spread over three campuses and two fiscal years."""
    return [
        {
            "CAMPUS": "Manoa",
            "FISCAL_YEAR": 2013,
            "HAWAIIAN_LEGACY": "HAWAIIAN",
            "OUTCOME": "Doctoral Degrees",
            "CIP_DESC": "Linguistics",
            "AWARDS": 10,
        },
        {
            "CAMPUS": "Hilo",
            "FISCAL_YEAR": 2013,
            "HAWAIIAN_LEGACY": "NOT HAWAIIAN",
            "OUTCOME": "Doctoral Degrees",
            "CIP_DESC": "Pharmacy",
            "AWARDS": 30,
        },
        {
            "CAMPUS": "West Oahu",
            "FISCAL_YEAR": 2014,
            "HAWAIIAN_LEGACY": "NOT HAWAIIAN",
            "OUTCOME": "Bachelors Degrees",
            "CIP_DESC": "Business Administration",
            "AWARDS": 55,
        },
        {
            "CAMPUS": "Manoa",
            "FISCAL_YEAR": 2014,
            "HAWAIIAN_LEGACY": "HAWAIIAN",
            "OUTCOME": "Doctoral Degrees",
            "CIP_DESC": "Linguistics",
            "AWARDS": 5,
        },
        {
            "CAMPUS": "Hilo",
            "FISCAL_YEAR": 2014,
            "HAWAIIAN_LEGACY": "HAWAIIAN",
            "OUTCOME": "Masters Degrees",
            "CIP_DESC": "Education",
            "AWARDS": 20,
        },
    ]
