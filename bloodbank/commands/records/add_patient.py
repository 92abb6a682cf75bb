"""Add Patient command."""

import click

from bloodbank.commands.base import BaseCommand
from bloodbank.commands.menu import MenuChoice
from bloodbank.commands.registry import register_command
from bloodbank.core.validators import parse_blood_group


class AddPatientCommand(BaseCommand):
    """Register a patient in need of blood. Any age is accepted."""

    choice = MenuChoice.ADD_PATIENT

    def collect(self) -> None:
        self.ask_text("name", "Enter Patient Name")
        self.ask_blood_group(show_valid=True)
        self.ask("age", "Enter Age", type=int)
        self.ask_text("address", "Enter Address")

    def validate(self) -> None:
        self.validate_required_params("name", "blood_group", "age", "address")
        parse_blood_group(self.params["blood_group"])

    def execute(self) -> None:
        patient = self.context.store.add_patient(
            self.params["name"],
            self.params["blood_group"],
            self.params["age"],
            self.params["address"],
        )
        click.echo(patient.confirmation)


register_command(AddPatientCommand)
