"""Exception hierarchy shared by every layer.

Services catch these and turn them into a failed ``ServiceResult``;
nothing below the CLI lets one escape as a traceback.
"""

from __future__ import annotations


class OnboardError(Exception):
    """Base class for onboardctl errors."""


class FieldValidationError(OnboardError):
    """A field value was rejected by one of its rules.

    *value* is the input the chain ran on, when the schema knows it.
    """

    def __init__(self, field: str, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
        self.value = value


class UnknownFieldError(OnboardError, KeyError):
    """A field name that is not part of the onboarding form."""

    def __init__(self, field: str) -> None:
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"Unknown field: {self.field}"


class VerificationError(OnboardError):
    """The remote corporation-number check could not be completed."""


class SubmissionError(OnboardError):
    """The profile submission endpoint refused or failed the request."""
