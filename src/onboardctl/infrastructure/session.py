"""FormSession — the per-session object graph injected into every service.

A session owns one ``httpx.AsyncClient``, the HTTP verifier and submitter
built on it, one :class:`CorporationCheckCache`, and the :class:`FormSchema`
wired to that cache. Everything validated through one session shares the
same memo slot; separate sessions never see each other's results.

Usage::

    async with FormSession(settings) as session:
        values = await session.schema.validate_all(form_values)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from onboardctl.domain.check_cache import CorporationCheckCache, Verifier
from onboardctl.domain.schema import FormSchema
from onboardctl.infrastructure.submitter import ProfileSubmitter
from onboardctl.infrastructure.verifier import HttpCorporationVerifier

if TYPE_CHECKING:
    from types import TracebackType

    from onboardctl.config.settings import OnboardSettings

logger = logging.getLogger(__name__)


def create_client(
    settings: OnboardSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build the shared HTTP client for a session."""
    return httpx.AsyncClient(
        timeout=settings.verifier.timeout,
        transport=transport,
        headers={"Accept": "application/json"},
    )


class FormSession:
    """Holds the validation engine and its collaborators for one session.

    Args:
        settings: Resolved settings (endpoint URLs and timeouts).
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
        verify: Replace the HTTP verifier with any async predicate.
    """

    def __init__(
        self,
        settings: OnboardSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        verify: Verifier | None = None,
    ) -> None:
        self.settings = settings
        self._client = create_client(settings, transport)
        self.verifier = HttpCorporationVerifier(
            self._client,
            settings.verifier.url,
            timeout=settings.verifier.timeout,
        )
        self.submitter = ProfileSubmitter(
            self._client,
            settings.submit.url,
            timeout=settings.submit.timeout,
        )
        self.cache = CorporationCheckCache(verify or self.verifier.verify)
        self.schema = FormSchema.onboarding(self.cache)

    async def aclose(self) -> None:
        """Close the HTTP client. Safe to call more than once."""
        if not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Form session closed")

    async def __aenter__(self) -> FormSession:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
