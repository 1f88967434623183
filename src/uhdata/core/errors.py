"""Data-quality errors raised while summing AWARDS.

Messages are part of the public contract and must not change.
"""

from __future__ import annotations


class AwardsFieldError(ValueError):
    """Base class for a record whose AWARDS field cannot be summed."""

    message = "Invalid AWARDS field."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MissingFieldError(AwardsFieldError):
    """Record has no AWARDS field."""

    message = "No AWARDS field."


class NonNumericFieldError(AwardsFieldError):
    """Record has an AWARDS field that is not a number."""

    message = "Non-numeric AWARDS."
