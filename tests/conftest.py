"""Shared pytest fixtures and test helpers for onboardctl tests."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Generator
from pathlib import Path

import httpx
import pytest
from click.testing import CliRunner

from onboardctl.config.settings import OnboardSettings

VALID_FORM: dict[str, str] = {
    "firstName": "  Ada  ",
    "lastName": " Lovelace ",
    "phoneNumber": "+14165551234",
    "corporationNumber": "123456789",
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer config and env overrides out of tests."""
    for name in ("ONBOARDCTL_CONFIG", "ONBOARDCTL_QUIET", "ONBOARDCTL_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure the root logger; put it back afterwards."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("onboardctl")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> OnboardSettings:
    """Default settings with no config file in reach."""
    return OnboardSettings.from_cli(start=tmp_path)


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class FakeVerifier:
    """Scripted async verifier that records every call.

    ``gates`` holds an :class:`asyncio.Event` per value; a call for a gated
    value stays pending until the test sets the event.
    """

    def __init__(
        self,
        valid: set[str] | None = None,
        *,
        error: Exception | None = None,
    ) -> None:
        self.valid = valid or set()
        self.error = error
        self.calls: list[str] = []
        self.gates: dict[str, asyncio.Event] = {}

    def hold(self, value: str) -> asyncio.Event:
        gate = asyncio.Event()
        self.gates[value] = gate
        return gate

    async def __call__(self, value: str) -> bool:
        self.calls.append(value)
        gate = self.gates.get(value)
        if gate is not None:
            await gate.wait()
        if self.error is not None:
            raise self.error
        return value in self.valid


class FakeApi:
    """In-memory stand-in for the verification and profile endpoints."""

    def __init__(self) -> None:
        self.valid_numbers: set[str] = {"123456789"}
        self.verify_status = 200
        self.submit_status = 200
        self.submit_message: str | None = None
        self.requests: list[httpx.Request] = []

    @property
    def verify_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "GET"]

    @property
    def submit_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if request.method == "GET" and path.startswith("/corporation-number/"):
            if self.verify_status != 200:
                return httpx.Response(self.verify_status, text="upstream error")
            number = path.rsplit("/", 1)[-1]
            return httpx.Response(
                200,
                json={"corporationNumber": number, "valid": number in self.valid_numbers},
            )
        if request.method == "POST" and path == "/profile-details":
            if self.submit_status != 200:
                body = {"message": self.submit_message} if self.submit_message else {}
                return httpx.Response(self.submit_status, json=body)
            return httpx.Response(200, json={})
        return httpx.Response(404)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def patched_api(fake_api: FakeApi, monkeypatch: pytest.MonkeyPatch) -> FakeApi:
    """Route every FormSession's HTTP client to :class:`FakeApi`."""

    def _client(
        settings: OnboardSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=fake_api.transport(),
            timeout=settings.verifier.timeout,
        )

    monkeypatch.setattr("onboardctl.infrastructure.session.create_client", _client)
    return fake_api


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from an empty directory so no onboardctl.toml is found."""
    monkeypatch.chdir(tmp_path)
