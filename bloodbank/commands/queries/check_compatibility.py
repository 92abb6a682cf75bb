"""Check Blood Compatibility command."""

import click

from bloodbank.commands.base import BaseCommand
from bloodbank.commands.menu import MenuChoice
from bloodbank.commands.output import SEPARATOR
from bloodbank.commands.registry import register_command
from bloodbank.core.queries import compatibility_report
from bloodbank.core.validators import parse_blood_group


class CheckCompatibilityCommand(BaseCommand):
    """Show donor counts for every group a recipient can safely receive.

    **Example:**
        Compatible blood groups for A-:
        ------------------------------------------------------------
        Blood Group A-: 2 donors available
        Blood Group O-: 0 donors available
        ------------------------------------------------------------
    """

    choice = MenuChoice.CHECK_COMPATIBILITY

    def collect(self) -> None:
        self.ask_blood_group("Enter Blood Group to Check Compatibility")

    def validate(self) -> None:
        self.validate_required_params("blood_group")
        parse_blood_group(self.params["blood_group"])

    def execute(self) -> None:
        recipient = self.params["blood_group"]
        rows = compatibility_report(self.context.store, recipient)
        click.echo(f"\nCompatible blood groups for {recipient}:")
        click.echo(SEPARATOR)
        for group, count in rows:
            click.echo(f"Blood Group {group.value}: {count} donors available")
        click.echo(SEPARATOR)


register_command(CheckCompatibilityCommand)
