"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Runs service coroutines inside a fresh
:class:`FormSession` and centralizes result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

import click

from onboardctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from onboardctl.config.settings import OnboardSettings
    from onboardctl.infrastructure.session import FormSession
    from onboardctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: OnboardSettings) -> None:
        self.settings = settings

        from onboardctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def run(self, operation: Callable[[FormSession], Awaitable[ServiceResult]]) -> ServiceResult:
        """Run *operation* against a session that is closed afterwards.

        The session's HTTP client is bound to the event loop, so each
        command gets its own session for the lifetime of ``asyncio.run``.
        """
        from onboardctl.infrastructure.session import FormSession

        async def _main() -> ServiceResult:
            async with FormSession(self.settings) as session:
                return await operation(session)

        return asyncio.run(_main())

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
