"""Field schemas — ordered, fail-fast rule chains for each form field.

Each schema threads the value through its rules in declared order. The
first ``Reject`` ends evaluation; a field never reports more than one
error. For corporationNumber the remote check is declared last, so it is
only reached once every structural rule has accepted the value.
"""

from __future__ import annotations

import inspect
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum

from onboardctl.domain.rules import (
    Accept,
    AsyncExists,
    ExactLength,
    MaxLength,
    Pattern,
    Reject,
    Required,
    Rule,
    RuleOutcome,
    Trim,
)


class FormField(StrEnum):
    """Onboarding form fields, in validation order."""

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    PHONE_NUMBER = "phoneNumber"
    CORPORATION_NUMBER = "corporationNumber"


NAME_MAX_LENGTH = 50
CORPORATION_NUMBER_LENGTH = 9

# re.ASCII keeps \d to [0-9]; Python would otherwise accept any Unicode digit.
PHONE_PATTERN = re.compile(r"^\+1\d{10}$", re.ASCII)
DIGITS_PATTERN = re.compile(r"^\d+$", re.ASCII)

PHONE_FORMAT_MESSAGE = (
    "Must be a valid Canadian phone number starting with +1 followed by 10 digits"
)
INVALID_CORPORATION_MESSAGE = "Invalid corporation number"


@dataclass(frozen=True)
class FieldSchema:
    """The rule chain for one field."""

    field: FormField
    rules: tuple[Rule, ...]

    async def run(self, value: str) -> RuleOutcome:
        """Apply the rules in order and return the first ``Reject`` or the final ``Accept``."""
        current = value
        for rule in self.rules:
            result = rule.apply(current)
            if inspect.isawaitable(result):
                result = await result
            if isinstance(result, Reject):
                return result
            current = result.value
        return Accept(current)


def _name_schema(field: FormField, label: str) -> FieldSchema:
    return FieldSchema(
        field,
        (
            Trim(),
            Required(f"{label} is required"),
            MaxLength(NAME_MAX_LENGTH, f"{label} must be {NAME_MAX_LENGTH} characters or less"),
        ),
    )


def build_field_schemas(
    corporation_check: Callable[[str], Awaitable[bool]],
) -> dict[FormField, FieldSchema]:
    """Build the four onboarding field schemas.

    *corporation_check* backs the corporationNumber existence rule. Pass a
    :class:`~onboardctl.domain.check_cache.CorporationCheckCache` bound
    ``check`` so repeated validations share one memo slot.
    """
    return {
        FormField.FIRST_NAME: _name_schema(FormField.FIRST_NAME, "First name"),
        FormField.LAST_NAME: _name_schema(FormField.LAST_NAME, "Last name"),
        FormField.PHONE_NUMBER: FieldSchema(
            FormField.PHONE_NUMBER,
            (
                Required("Phone number is required"),
                Pattern(PHONE_PATTERN, PHONE_FORMAT_MESSAGE),
            ),
        ),
        FormField.CORPORATION_NUMBER: FieldSchema(
            FormField.CORPORATION_NUMBER,
            (
                Required("Corporation number is required"),
                ExactLength(
                    CORPORATION_NUMBER_LENGTH,
                    f"Corporation number must be exactly {CORPORATION_NUMBER_LENGTH} digits",
                ),
                Pattern(DIGITS_PATTERN, "Corporation number must contain only digits"),
                AsyncExists(corporation_check, INVALID_CORPORATION_MESSAGE),
            ),
        ),
    }
