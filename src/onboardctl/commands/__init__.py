"""Subcommand modules for onboardctl.

Provides register_commands() which uses deferred imports to keep
``onboardctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from onboardctl.commands.submit import submit
    from onboardctl.commands.validate import validate
    from onboardctl.commands.verify import verify

    cli.add_command(validate)
    cli.add_command(verify)
    cli.add_command(submit)
