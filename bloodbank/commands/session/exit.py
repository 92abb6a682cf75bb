"""Exit command."""

import click

from bloodbank.commands.base import BaseCommand
from bloodbank.commands.menu import MenuChoice
from bloodbank.commands.registry import register_command


class ExitCommand(BaseCommand):
    """End the session. All records are discarded."""

    choice = MenuChoice.EXIT

    def validate(self) -> None:
        pass

    def execute(self) -> None:
        click.echo("Exiting...")


register_command(ExitCommand)
