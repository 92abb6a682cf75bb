"""Display Patients command."""

from bloodbank.commands.base import BaseCommand
from bloodbank.commands.menu import MenuChoice
from bloodbank.commands.output import echo_records
from bloodbank.commands.registry import register_command


class DisplayPatientsCommand(BaseCommand):
    """List every patient in the order they were added."""

    choice = MenuChoice.DISPLAY_PATIENTS

    def validate(self) -> None:
        pass

    def execute(self) -> None:
        echo_records(
            "List of Patients", self.context.store.list_patients(), "No patients available."
        )


register_command(DisplayPatientsCommand)
