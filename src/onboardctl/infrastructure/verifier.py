"""HTTP client for the remote corporation-number check.

``GET {base_url}/{number}`` answers ``{"valid": bool}``. A non-2xx status,
a transport error, or an unreadable body raises
:class:`~onboardctl.errors.VerificationError`; the check cache turns that
into a negative result.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from onboardctl.errors import VerificationError

logger = logging.getLogger(__name__)

FAILED_MESSAGE = "Failed to validate corporation number"

_NUMBER_LENGTH = 9


class HttpCorporationVerifier:
    """Async predicate backed by the verification endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        *,
        timeout: float = 10.0,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def url_for(self, number: str) -> str:
        return f"{self._base_url}/{quote(number, safe='')}"

    async def verify(self, number: str) -> bool:
        """Return whether the endpoint reports *number* as valid."""
        if len(number) != _NUMBER_LENGTH:
            return False

        url = self.url_for(number)
        logger.debug("GET %s", url)
        try:
            response = await self._client.get(url, timeout=self._timeout)
        except httpx.HTTPError as exc:
            raise VerificationError(f"{FAILED_MESSAGE}: {exc}") from exc

        if not response.is_success:
            logger.debug("Verification endpoint returned %s", response.status_code)
            raise VerificationError(FAILED_MESSAGE)

        try:
            data = response.json()
        except ValueError as exc:
            raise VerificationError(f"{FAILED_MESSAGE}: malformed response") from exc

        if not isinstance(data, dict):
            return False
        return bool(data.get("valid"))
