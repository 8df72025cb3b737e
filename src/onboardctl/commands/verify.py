"""Command: check a corporation number against the remote registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from onboardctl.commands._base import OnboardCommand

if TYPE_CHECKING:
    from onboardctl.commands._context import AppContext


@click.command(
    cls=OnboardCommand,
    examples="""\
  onboardctl verify 123456789
  onboardctl --json verify 987654321""",
)
@click.argument("number")
@click.pass_obj
def verify(app: AppContext, number: str) -> None:
    """Validate a corporation number, including the remote existence check."""
    from onboardctl.services.validation import ValidationService

    app.emit(app.run(lambda session: ValidationService(session).verify_corporation(number)))
