"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, onboardctl.toml only contains
overrides. With no config file the CLI talks to the default endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_API_BASE = "https://fe-hometask-api.qa.vault.tryvault.com"


# --- onboardctl.toml sections ---


class VerifierConfig(BaseModel):
    """[verifier] section — remote corporation-number check."""

    model_config = {"frozen": True}

    url: str = f"{DEFAULT_API_BASE}/corporation-number"
    timeout: float = Field(default=10.0, gt=0)


class SubmitConfig(BaseModel):
    """[submit] section — profile submission endpoint."""

    model_config = {"frozen": True}

    url: str = f"{DEFAULT_API_BASE}/profile-details"
    timeout: float = Field(default=10.0, gt=0)
