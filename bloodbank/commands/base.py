"""Base class for all menu commands."""

from abc import ABC, abstractmethod
from typing import Any

import click

from bloodbank.commands.menu import MenuChoice
from bloodbank.context import ShellContext
from bloodbank.core.constants import VALID_GROUPS_TEXT
from bloodbank.core.validators import normalize_blood_group


class BaseCommand(ABC):
    """Base class for all menu commands.

    A command runs in three phases: :meth:`collect` gathers any missing
    parameters from the user, :meth:`validate` rejects bad input, and
    :meth:`execute` performs the action and prints the result.
    """

    choice: MenuChoice  # e.g., MenuChoice.ADD_DONOR

    def __init__(self, context: ShellContext, **params: Any):
        """Initialize the command.

        Args:
            context: Session state the command works on
            **params: Parameters already known; these are not prompted for
        """
        self.context = context
        self.params = params

    @property
    def name(self) -> str:
        return self.choice.label

    def collect(self) -> None:
        """Prompt for parameters. Commands without input need not override this."""

    @abstractmethod
    def validate(self) -> None:
        """Validate parameters before execution.

        Raises:
            ValueError: If parameters are invalid
        """
        pass

    @abstractmethod
    def execute(self) -> None:
        """Execute the command and print its result."""
        pass

    def validate_required_params(self, *param_names: str) -> None:
        """Validate that required parameters are present.

        Args:
            *param_names: Names of required parameters

        Raises:
            ValueError: If any required parameters are missing
        """
        missing = [p for p in param_names if p not in self.params]
        if missing:
            raise ValueError(f"Missing required parameters for {self.name}: {', '.join(missing)}")

    def ask(self, param: str, text: str, **prompt_kwargs: Any) -> Any:
        """Prompt for ``param`` unless it was supplied up front.

        Args:
            param: Parameter name to fill in
            text: Prompt text shown to the user
            **prompt_kwargs: Passed through to :func:`click.prompt`

        Returns:
            The parameter value
        """
        if param not in self.params:
            self.params[param] = click.prompt(text, **prompt_kwargs)
        return self.params[param]

    def ask_text(self, param: str, text: str) -> str:
        """Prompt for free text. An empty line is accepted as an empty value."""
        return self.ask(param, text, default="", show_default=False)

    def ask_blood_group(self, text: str = "Enter Blood Group", show_valid: bool = False) -> str:
        """Prompt for a blood group and store it normalized to uppercase."""
        if "blood_group" not in self.params and show_valid:
            click.echo(f"Valid Blood Groups: {VALID_GROUPS_TEXT}")
        value = normalize_blood_group(str(self.ask_text("blood_group", text)))
        self.params["blood_group"] = value
        return value
