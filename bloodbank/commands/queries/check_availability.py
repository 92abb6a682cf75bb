"""Check Blood Availability command."""

import click

from bloodbank.commands.base import BaseCommand
from bloodbank.commands.menu import MenuChoice
from bloodbank.commands.registry import register_command
from bloodbank.core.queries import count_by_group
from bloodbank.core.validators import parse_blood_group


class CheckAvailabilityCommand(BaseCommand):
    """Report how many donors have exactly the requested blood group."""

    choice = MenuChoice.CHECK_AVAILABILITY

    def collect(self) -> None:
        self.ask_blood_group("Enter Blood Group to Check Availability")

    def validate(self) -> None:
        self.validate_required_params("blood_group")
        parse_blood_group(self.params["blood_group"])

    def execute(self) -> None:
        group = self.params["blood_group"]
        count = count_by_group(self.context.store, group)
        click.echo(f"Blood Group {group} is available with {count} donors.")


register_command(CheckAvailabilityCommand)
