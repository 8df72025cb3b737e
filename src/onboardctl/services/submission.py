"""SubmissionService — validate the whole form, then submit the profile."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from onboardctl.errors import FieldValidationError, SubmissionError
from onboardctl.services.base import BaseService
from onboardctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class SubmissionService(BaseService):
    """Submits onboarding profiles that pass validation."""

    async def submit(self, values: Mapping[str, Any]) -> ServiceResult:
        """Validate *values* and POST the normalized profile.

        Nothing is sent unless every field validates.
        """
        op = "submit_profile"
        try:
            normalized = await self._session.schema.validate_all(values)
        except FieldValidationError as exc:
            return self._field_failure(op, exc)

        try:
            payload = await self._session.submitter.submit(normalized)
        except SubmissionError as exc:
            logger.warning("Profile submission failed: %s", exc)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="SUBMIT_FAILED", message=str(exc)),
            )
        return ServiceResult(ok=True, op=op, data={"submitted": payload})
