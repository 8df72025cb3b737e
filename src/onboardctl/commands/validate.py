"""Command: validate onboarding form values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from onboardctl.commands._base import OnboardCommand, form_value_options, form_values
from onboardctl.domain.fields import FormField

if TYPE_CHECKING:
    from onboardctl.commands._context import AppContext


@click.command(
    cls=OnboardCommand,
    examples="""\
  onboardctl validate --first-name " Ada " --last-name Lovelace \\
      --phone-number +14165551234 --corporation-number 123456789
  onboardctl validate --field phoneNumber --phone-number +14165551234
  onboardctl --json validate --field firstName --first-name Ada""",
)
@form_value_options
@click.option(
    "--field",
    "field_name",
    type=click.Choice([f.value for f in FormField]),
    default=None,
    help="Validate only this field.",
)
@click.pass_obj
def validate(
    app: AppContext,
    first_name: str | None,
    last_name: str | None,
    phone_number: str | None,
    corporation_number: str | None,
    field_name: str | None,
) -> None:
    """Validate the form, or a single field with --field."""
    from onboardctl.services.validation import ValidationService

    values = form_values(first_name, last_name, phone_number, corporation_number)
    if field_name is None:
        result = app.run(lambda session: ValidationService(session).validate_form(values))
    else:
        result = app.run(
            lambda session: ValidationService(session).validate_field(field_name, values)
        )
    app.emit(result)
