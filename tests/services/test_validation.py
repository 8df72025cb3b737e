"""Tests for ValidationService."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from onboardctl.config.settings import OnboardSettings
from onboardctl.errors import VerificationError
from onboardctl.infrastructure.session import FormSession
from onboardctl.services.validation import ValidationService
from tests.conftest import VALID_FORM, FakeApi, FakeVerifier


@pytest_asyncio.fixture
async def session(
    settings: OnboardSettings, fake_api: FakeApi
) -> AsyncGenerator[FormSession]:
    async with FormSession(settings, transport=fake_api.transport()) as s:
        yield s


class TestValidateForm:
    @pytest.mark.asyncio
    async def test_success(self, session: FormSession) -> None:
        result = await ValidationService(session).validate_form(VALID_FORM)
        assert result.ok
        assert result.op == "validate_form"
        assert result.data["values"] == {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "phoneNumber": "+14165551234",
            "corporationNumber": "123456789",
        }

    @pytest.mark.asyncio
    async def test_first_failing_field_is_reported(self, session: FormSession) -> None:
        result = await ValidationService(session).validate_form(
            {**VALID_FORM, "lastName": "", "phoneNumber": "bad"}
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_FIELD"
        assert result.error.message == "Last name is required"
        assert result.error.detail == {"field": "lastName"}
        assert result.warnings == []

    @pytest.mark.asyncio
    async def test_unknown_corporation_number(
        self, session: FormSession, fake_api: FakeApi
    ) -> None:
        result = await ValidationService(session).validate_form(
            {**VALID_FORM, "corporationNumber": "987654321"}
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "Invalid corporation number"
        assert result.warnings == []


class TestValidateField:
    @pytest.mark.asyncio
    async def test_success(self, session: FormSession) -> None:
        result = await ValidationService(session).validate_field(
            "firstName", {"firstName": "  John  "}
        )
        assert result.ok
        assert result.data == {"field": "firstName", "value": "John"}

    @pytest.mark.asyncio
    async def test_failure(self, session: FormSession) -> None:
        result = await ValidationService(session).validate_field(
            "corporationNumber", {"corporationNumber": "12345678a"}
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "Corporation number must contain only digits"

    @pytest.mark.asyncio
    async def test_unknown_field(self, session: FormSession) -> None:
        result = await ValidationService(session).validate_field("email", {})
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_FIELD"
        assert "corporationNumber" in result.error.detail["known"]


class TestVerifyCorporation:
    @pytest.mark.asyncio
    async def test_valid(self, session: FormSession) -> None:
        result = await ValidationService(session).verify_corporation("123456789")
        assert result.ok
        assert result.data == {"corporation_number": "123456789", "valid": True}

    @pytest.mark.asyncio
    async def test_structural_failure_skips_network(
        self, session: FormSession, fake_api: FakeApi
    ) -> None:
        result = await ValidationService(session).verify_corporation("12ab")
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "Corporation number must be exactly 9 digits"
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_endpoint_failure_is_invalid_with_diagnostic(
        self, session: FormSession, fake_api: FakeApi
    ) -> None:
        fake_api.verify_status = 503
        result = await ValidationService(session).verify_corporation("123456789")
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "Invalid corporation number"
        assert result.warnings == [
            "Corporation number check failed: Failed to validate corporation number"
        ]

    @pytest.mark.asyncio
    async def test_repeat_verification_is_memoized(
        self, session: FormSession, fake_api: FakeApi
    ) -> None:
        svc = ValidationService(session)
        await svc.verify_corporation("123456789")
        await svc.verify_corporation("123456789")
        assert len(fake_api.verify_requests) == 1

    @pytest.mark.asyncio
    async def test_injected_verifier_error(self, settings: OnboardSettings) -> None:
        verifier = FakeVerifier(error=VerificationError("offline"))
        async with FormSession(settings, verify=verifier) as session:
            result = await ValidationService(session).verify_corporation("123456789")
        assert not result.ok
        assert result.warnings == ["Corporation number check failed: offline"]

    @pytest.mark.asyncio
    async def test_earlier_verifier_error_not_attached_to_structural_failure(
        self, settings: OnboardSettings
    ) -> None:
        verifier = FakeVerifier(error=ConnectionError("network down"))
        async with FormSession(settings, verify=verifier) as session:
            svc = ValidationService(session)
            first = await svc.verify_corporation("123456789")
            second = await svc.verify_corporation("12345")

        assert first.warnings == ["Corporation number check failed: network down"]
        assert second.error is not None
        assert second.error.message == "Corporation number must be exactly 9 digits"
        assert second.warnings == []

    @pytest.mark.asyncio
    async def test_earlier_verifier_error_not_attached_to_other_value(
        self, settings: OnboardSettings
    ) -> None:
        verifier = FakeVerifier(error=ConnectionError("network down"))
        async with FormSession(settings, verify=verifier) as session:
            svc = ValidationService(session)
            await svc.verify_corporation("123456789")
            verifier.error = None
            result = await svc.verify_corporation("987654321")

        assert result.error is not None
        assert result.error.message == "Invalid corporation number"
        assert result.warnings == []

    @pytest.mark.asyncio
    async def test_memoized_failure_keeps_its_diagnostic(
        self, settings: OnboardSettings
    ) -> None:
        verifier = FakeVerifier(error=ConnectionError("network down"))
        async with FormSession(settings, verify=verifier) as session:
            svc = ValidationService(session)
            await svc.verify_corporation("123456789")
            again = await svc.verify_corporation("123456789")

        assert verifier.calls == ["123456789"]
        assert again.warnings == ["Corporation number check failed: network down"]
