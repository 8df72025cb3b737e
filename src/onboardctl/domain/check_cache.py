"""Single-slot memo and single-flight guard for the corporation-number check.

Interactive forms re-run every rule on each keystroke, blur and submit, so
the same corporation number is checked over and over. The cache makes that
cheap and race-free:

- **Memo slot**: only the most recently settled ``(value, result)`` pair is
  remembered. Checking the same value again returns the stored result without
  calling the verifier. A different value overwrites the slot.
- **Single flight**: concurrent checks of one value share a single pending
  verifier call; every caller receives its result.
- **Ordering**: each flight gets a sequence number when it starts. A flight
  that settles after a newer one has already written the slot leaves the slot
  alone, so a slow stale response never replaces a fresher one.

INVARIANT: :meth:`CorporationCheckCache.check` never raises for verifier
failures. A failure resolves to ``False`` and is remembered as ``False``
together with its text, which :meth:`CorporationCheckCache.error_for` returns
for that value only.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeAlias

logger = logging.getLogger(__name__)

Verifier: TypeAlias = Callable[[str], Awaitable[bool]]


@dataclass(frozen=True)
class _Slot:
    value: str
    result: bool
    seq: int
    error: str | None = None


class CorporationCheckCache:
    """Memoizing, de-duplicating wrapper around a remote verifier.

    One instance is owned per form session and injected into the schema;
    separate instances never share results.

    Attributes:
        verify_calls: Number of times the verifier has been invoked.
    """

    def __init__(self, verify: Verifier) -> None:
        self._verify = verify
        self._slot: _Slot | None = None
        self._in_flight: dict[str, asyncio.Future[bool]] = {}
        self._seq = 0
        self.verify_calls = 0

    @property
    def is_validating(self) -> bool:
        """True while at least one verifier call is pending."""
        return bool(self._in_flight)

    def peek(self) -> tuple[str, bool] | None:
        """Return the remembered ``(value, result)`` pair, if any."""
        if self._slot is None:
            return None
        return self._slot.value, self._slot.result

    @property
    def last_error(self) -> str | None:
        """Failure text stored with the remembered value, if its check failed."""
        return None if self._slot is None else self._slot.error

    def error_for(self, value: str) -> str | None:
        """Failure text for *value*, or None unless the slot holds a failed check of it."""
        slot = self._slot
        if slot is None or slot.value != value:
            return None
        return slot.error

    async def check(self, value: str) -> bool:
        """Resolve whether *value* is a known corporation number."""
        slot = self._slot
        if slot is not None and slot.value == value:
            logger.debug("Corporation check memo hit for %s", value)
            return slot.result

        pending = self._in_flight.get(value)
        if pending is None:
            self._seq += 1
            pending = asyncio.ensure_future(self._settle(value, self._seq))
            self._in_flight[value] = pending
        else:
            logger.debug("Joining in-flight corporation check for %s", value)

        # A cancelled caller must not cancel the flight other callers share.
        return await asyncio.shield(pending)

    async def _settle(self, value: str, seq: int) -> bool:
        self.verify_calls += 1
        error: str | None = None
        try:
            result = bool(await self._verify(value))
        except Exception as exc:
            logger.warning("Corporation number verification failed for %s: %s", value, exc)
            error = str(exc) or type(exc).__name__
            result = False
        finally:
            self._in_flight.pop(value, None)

        if self._slot is None or self._slot.seq < seq:
            self._slot = _Slot(value, result, seq, error)
        else:
            logger.debug("Discarding stale corporation check result for %s", value)
        return result
