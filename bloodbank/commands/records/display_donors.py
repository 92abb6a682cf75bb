"""Display Donors command."""

from bloodbank.commands.base import BaseCommand
from bloodbank.commands.menu import MenuChoice
from bloodbank.commands.output import echo_records
from bloodbank.commands.registry import register_command


class DisplayDonorsCommand(BaseCommand):
    """List every donor in the order they were added."""

    choice = MenuChoice.DISPLAY_DONORS

    def validate(self) -> None:
        pass

    def execute(self) -> None:
        echo_records("List of Donors", self.context.store.list_donors(), "No donors available.")


register_command(DisplayDonorsCommand)
