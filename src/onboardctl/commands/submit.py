"""Command: validate and submit an onboarding profile."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from onboardctl.commands._base import OnboardCommand, form_value_options, form_values

if TYPE_CHECKING:
    from onboardctl.commands._context import AppContext


@click.command(
    cls=OnboardCommand,
    examples="""\
  onboardctl submit --first-name Ada --last-name Lovelace \\
      --phone-number +14165551234 --corporation-number 123456789""",
)
@form_value_options
@click.pass_obj
def submit(
    app: AppContext,
    first_name: str | None,
    last_name: str | None,
    phone_number: str | None,
    corporation_number: str | None,
) -> None:
    """Validate the form and submit the profile."""
    from onboardctl.services.submission import SubmissionService

    values = form_values(first_name, last_name, phone_number, corporation_number)
    app.emit(app.run(lambda session: SubmissionService(session).submit(values)))
