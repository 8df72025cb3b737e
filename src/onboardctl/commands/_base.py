"""Custom Click base classes and shared options.

``OnboardCommand`` accepts an ``examples`` parameter; when ``--examples``
is passed the command prints usage examples and exits, keeping
``--help`` concise.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class OnboardCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


F = TypeVar("F", bound=Callable[..., Any])


def form_value_options(func: F) -> F:
    """Add the four form-field options to a command."""
    options = (
        click.option("--first-name", default=None, help="First name (trimmed)."),
        click.option("--last-name", default=None, help="Last name (trimmed)."),
        click.option(
            "--phone-number",
            default=None,
            help="Phone number: +1 followed by 10 digits.",
        ),
        click.option("--corporation-number", default=None, help="9-digit corporation number."),
    )
    for option in reversed(options):
        func = option(func)
    return func


def form_values(
    first_name: str | None,
    last_name: str | None,
    phone_number: str | None,
    corporation_number: str | None,
) -> dict[str, str]:
    """Build the candidate form mapping, leaving out options not given."""
    raw = {
        "firstName": first_name,
        "lastName": last_name,
        "phoneNumber": phone_number,
        "corporationNumber": corporation_number,
    }
    return {key: value for key, value in raw.items() if value is not None}
