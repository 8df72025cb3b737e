"""HTTP client for the profile submission endpoint."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from onboardctl.errors import SubmissionError

logger = logging.getLogger(__name__)

DEFAULT_FAILURE = "Submission failed"


def build_profile_payload(values: Mapping[str, str]) -> dict[str, str]:
    """Map form values onto the wire format the endpoint expects.

    Names are trimmed again here and ``phoneNumber`` travels as ``phone``.
    """
    return {
        "firstName": values.get("firstName", "").strip(),
        "lastName": values.get("lastName", "").strip(),
        "corporationNumber": values.get("corporationNumber", ""),
        "phone": values.get("phoneNumber", ""),
    }


def _error_message(response: httpx.Response) -> str:
    try:
        body: Any = response.json()
    except ValueError:
        return DEFAULT_FAILURE
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return DEFAULT_FAILURE


class ProfileSubmitter:
    """POSTs a validated onboarding profile."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        *,
        timeout: float = 10.0,
    ) -> None:
        self._client = client
        self._url = url
        self._timeout = timeout

    async def submit(self, values: Mapping[str, str]) -> dict[str, str]:
        """Send *values* and return the payload that was accepted."""
        payload = build_profile_payload(values)
        logger.debug("POST %s", self._url)
        try:
            response = await self._client.post(self._url, json=payload, timeout=self._timeout)
        except httpx.HTTPError as exc:
            raise SubmissionError(str(exc) or DEFAULT_FAILURE) from exc

        if not response.is_success:
            raise SubmissionError(_error_message(response))
        return payload
