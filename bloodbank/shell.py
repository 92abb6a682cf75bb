"""Interactive menu loop."""

import logging
from typing import Optional

import click

from bloodbank.commands.menu import ShellState
from bloodbank.commands.registry import (
    discover_and_register_commands,
    get_command,
    registered_choices,
    run_command,
)
from bloodbank.context import ShellContext
from bloodbank.core.errors import BloodBankError

logger = logging.getLogger(__name__)

# Dynamically discover and import all command modules
discover_and_register_commands()

TITLE = "======= BLOOD BANK MANAGEMENT ======="


class Shell:
    """Menu-driven state machine over a :class:`ShellContext`.

    The shell waits in ``MENU_WAIT``, moves to the state of the selected
    command while it runs, and returns to ``MENU_WAIT`` afterwards. Rejected
    input is reported and never ends the session; only the Exit entry moves
    the shell to the terminal ``EXIT`` state.
    """

    def __init__(self, context: Optional[ShellContext] = None):
        self.context = context if context is not None else ShellContext()
        self.state = ShellState.MENU_WAIT

    @property
    def finished(self) -> bool:
        return self.state is ShellState.EXIT

    def show_menu(self) -> None:
        click.echo(f"\n{TITLE}\n")
        for choice in registered_choices():
            click.echo(f"{choice.value}. {choice.label}")

    def handle(self, selection: object) -> ShellState:
        """Run the command for one menu selection and return the resulting state.

        Args:
            selection: The text typed at the menu prompt, or a MenuChoice

        Returns:
            ``EXIT`` after the Exit entry, otherwise ``MENU_WAIT``
        """
        try:
            command_class = get_command(selection)
            self._enter(command_class.choice.state)
            run_command(command_class, self.context)
        except BloodBankError as e:
            logger.info("Rejected input in %s: %s", self.state.name, e)
            click.echo(str(e))
        if self.finished:
            return self.state
        self._enter(ShellState.MENU_WAIT)
        return self.state

    def run(self) -> None:
        """Loop over the menu until the user chooses Exit."""
        logger.debug("Shell started")
        while not self.finished:
            self.show_menu()
            self.handle(click.prompt("Enter your choice", prompt_suffix=": "))
        logger.debug(
            "Shell finished with %d donors and %d patients",
            len(self.context.store.list_donors()),
            len(self.context.store.list_patients()),
        )

    def _enter(self, state: ShellState) -> None:
        if state is not self.state:
            logger.debug("%s -> %s", self.state.name, state.name)
            self.state = state
