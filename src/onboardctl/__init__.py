"""onboardctl: onboarding-form validation engine and CLI."""

__version__ = "0.1.0"
