"""ValidationService — whole-form, single-field, and corporation checks."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from onboardctl.domain.fields import FormField
from onboardctl.errors import FieldValidationError, UnknownFieldError
from onboardctl.services.base import BaseService
from onboardctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class ValidationService(BaseService):
    """Run the form schema and report outcomes as ServiceResult."""

    async def validate_form(self, values: Mapping[str, Any]) -> ServiceResult:
        """Validate every field in fixed order, stopping at the first failure."""
        op = "validate_form"
        try:
            normalized = await self._session.schema.validate_all(values)
        except FieldValidationError as exc:
            logger.debug("Form rejected at %s: %s", exc.field, exc.message)
            return self._field_failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"values": normalized})

    async def validate_field(self, name: str, values: Mapping[str, Any]) -> ServiceResult:
        """Validate a single named field."""
        op = "validate_field"
        try:
            value = await self._session.schema.validate_field(name, values)
        except UnknownFieldError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="UNKNOWN_FIELD",
                    message=str(exc),
                    detail={"field": name, "known": [f.value for f in FormField]},
                ),
            )
        except FieldValidationError as exc:
            return self._field_failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"field": name, "value": value})

    async def verify_corporation(self, number: str) -> ServiceResult:
        """Run the corporationNumber chain, including the remote check."""
        op = "verify_corporation"
        field = FormField.CORPORATION_NUMBER
        try:
            value = await self._session.schema.validate_field(field, {field.value: number})
        except FieldValidationError as exc:
            return self._field_failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"corporation_number": value, "valid": True},
        )
