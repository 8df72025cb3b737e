"""Form schema — the public validation surface of the onboarding form.

``validate_field`` checks one named field; ``validate_all`` checks every
field in fixed order and stops at the first failure. Both return
normalized values (trimmed names, phone and corporation number untouched)
and raise :class:`~onboardctl.errors.FieldValidationError` otherwise.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from onboardctl.domain.check_cache import CorporationCheckCache
from onboardctl.domain.fields import FieldSchema, FormField, build_field_schemas
from onboardctl.domain.rules import Reject
from onboardctl.errors import FieldValidationError, UnknownFieldError

FIELD_ORDER: tuple[FormField, ...] = tuple(FormField)


def _raw_value(values: Mapping[str, Any], field: FormField) -> str:
    """Read *field* from a candidate mapping; missing or None reads as ``""``."""
    raw = values.get(field.value)
    if raw is None:
        return ""
    return str(raw)


class FormSchema:
    """Aggregate of the four field schemas.

    Usage::

        cache = CorporationCheckCache(verifier.verify)
        schema = FormSchema.onboarding(cache)
        values = await schema.validate_all(form_values)
    """

    def __init__(self, fields: Mapping[FormField, FieldSchema]) -> None:
        self._fields = dict(fields)

    @classmethod
    def onboarding(cls, cache: CorporationCheckCache) -> FormSchema:
        """Build the onboarding schema with *cache* backing the corporation check."""
        return cls(build_field_schemas(cache.check))

    @property
    def fields(self) -> tuple[FormField, ...]:
        return tuple(f for f in FIELD_ORDER if f in self._fields)

    def _resolve(self, name: str) -> FieldSchema:
        try:
            return self._fields[FormField(name)]
        except (ValueError, KeyError):
            raise UnknownFieldError(name) from None

    async def validate_field(self, name: str, values: Mapping[str, Any]) -> str:
        """Validate the field *name* of *values* and return its normalized value."""
        schema = self._resolve(name)
        raw = _raw_value(values, schema.field)
        outcome = await schema.run(raw)
        if isinstance(outcome, Reject):
            raise FieldValidationError(schema.field.value, outcome.message, raw)
        return outcome.value

    async def validate_all(self, values: Mapping[str, Any]) -> dict[str, str]:
        """Validate every field in order; raise on the first that fails."""
        normalized: dict[str, str] = {}
        for field in self.fields:
            normalized[field.value] = await self.validate_field(field.value, values)
        return normalized
