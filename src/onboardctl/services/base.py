"""BaseService — shared foundation for onboardctl services.

Every service receives a :class:`FormSession` at construction time. The
session provides the form schema, the corporation check cache, and the
HTTP collaborators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from onboardctl.domain.fields import INVALID_CORPORATION_MESSAGE, FormField
from onboardctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from onboardctl.errors import FieldValidationError
    from onboardctl.infrastructure.session import FormSession


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ValidationService(BaseService):
            async def validate_form(self, values) -> ServiceResult:
                values = await self._session.schema.validate_all(values)
                ...
    """

    def __init__(self, session: FormSession) -> None:
        self._session = session

    def _diagnostics(self, exc: FieldValidationError) -> list[str]:
        """Verifier failure behind a rejected corporation number, as warnings.

        Only a rejection by the remote check can have a verifier failure
        behind it, and only the failure recorded for the rejected value counts.
        """
        if exc.field != FormField.CORPORATION_NUMBER or exc.value is None:
            return []
        if exc.message != INVALID_CORPORATION_MESSAGE:
            return []
        error = self._session.cache.error_for(exc.value)
        if not error:
            return []
        return [f"Corporation number check failed: {error}"]

    def _field_failure(self, op: str, exc: FieldValidationError) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="INVALID_FIELD",
                message=exc.message,
                detail={"field": exc.field},
            ),
            warnings=self._diagnostics(exc),
        )
