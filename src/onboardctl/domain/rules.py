"""Atomic field rules and their outcomes.

A rule looks at one field value and either accepts it (possibly normalized)
or rejects it with a user-facing message. Structural rules are synchronous
and pure; :class:`AsyncExists` is the only rule that awaits anything.

INVARIANT: Rules never raise for bad input. A bad value is a ``Reject``.
"""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeAlias

# ── Outcomes ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Accept:
    """The value passed; ``value`` is what the next rule sees."""

    value: str


@dataclass(frozen=True)
class Reject:
    """The value failed with a field-scoped message."""

    message: str


RuleOutcome: TypeAlias = Accept | Reject

# ── Structural rules ─────────────────────────────────────────────────


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace. Never rejects."""

    def apply(self, value: str) -> RuleOutcome:
        return Accept(value.strip())


@dataclass(frozen=True)
class Required:
    """Reject empty or whitespace-only values."""

    message: str

    def apply(self, value: str) -> RuleOutcome:
        if not value.strip():
            return Reject(self.message)
        return Accept(value)


@dataclass(frozen=True)
class MaxLength:
    """Reject values longer than *limit* characters."""

    limit: int
    message: str

    def apply(self, value: str) -> RuleOutcome:
        if len(value) > self.limit:
            return Reject(self.message)
        return Accept(value)


@dataclass(frozen=True)
class ExactLength:
    """Reject values whose raw length is not exactly *length*."""

    length: int
    message: str

    def apply(self, value: str) -> RuleOutcome:
        if len(value) != self.length:
            return Reject(self.message)
        return Accept(value)


@dataclass(frozen=True)
class Pattern:
    """Reject values that do not match *regex* in full."""

    regex: re.Pattern[str]
    message: str

    def apply(self, value: str) -> RuleOutcome:
        if self.regex.fullmatch(value) is None:
            return Reject(self.message)
        return Accept(value)


# ── Async rule ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class AsyncExists:
    """Ask an async predicate whether the value exists remotely.

    *check* is usually :meth:`CorporationCheckCache.check`; it resolves to a
    bool and must not raise.
    """

    check: Callable[[str], Awaitable[bool]]
    message: str

    async def apply(self, value: str) -> RuleOutcome:
        if await self.check(value):
            return Accept(value)
        return Reject(self.message)


Rule: TypeAlias = Trim | Required | MaxLength | ExactLength | Pattern | AsyncExists
