"""Add Donor command."""

import click

from bloodbank.commands.base import BaseCommand
from bloodbank.commands.menu import MenuChoice
from bloodbank.commands.registry import register_command
from bloodbank.core.validators import parse_blood_group, require_donor_age


class AddDonorCommand(BaseCommand):
    """Register a new donor.

    Prompts for name, blood group, age and address. The blood group is
    accepted in any case and stored in uppercase; donors must be between
    18 and 65 years old inclusive.
    """

    choice = MenuChoice.ADD_DONOR

    def collect(self) -> None:
        self.ask_text("name", "Enter Donor Name")
        self.ask_blood_group(show_valid=True)
        self.ask("age", "Enter Age", type=int)
        self.ask_text("address", "Enter Address")

    def validate(self) -> None:
        """Validate that required parameters are present and acceptable.

        Raises:
            ValueError: If required parameters are missing
            InvalidBloodGroupError: If the blood group is not recognised
            InvalidAgeError: If the age is outside the donor range
        """
        self.validate_required_params("name", "blood_group", "age", "address")
        parse_blood_group(self.params["blood_group"])
        require_donor_age(self.params["age"])

    def execute(self) -> None:
        donor = self.context.store.add_donor(
            self.params["name"],
            self.params["blood_group"],
            self.params["age"],
            self.params["address"],
        )
        click.echo(donor.confirmation)


register_command(AddDonorCommand)
