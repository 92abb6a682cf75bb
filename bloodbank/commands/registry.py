"""Command registry mapping menu choices to command classes."""

import importlib
import logging
import pkgutil
from pathlib import Path
from typing import Any, Dict, Type

from bloodbank.commands.base import BaseCommand
from bloodbank.commands.menu import MenuChoice
from bloodbank.context import ShellContext
from bloodbank.core.errors import InvalidMenuChoiceError

logger = logging.getLogger(__name__)

_registry: Dict[MenuChoice, Type[BaseCommand]] = {}


def register_command(command_class: Type[BaseCommand]) -> None:
    """Register a command class.

    Args:
        command_class: The command class to register

    Raises:
        ValueError: If command_class doesn't have a choice attribute
    """
    if not hasattr(command_class, "choice"):
        raise ValueError(f"Command class {command_class.__name__} must have a 'choice' attribute")
    _registry[command_class.choice] = command_class


def get_command(selection: object) -> Type[BaseCommand]:
    """Get a command class by menu selection.

    Args:
        selection: A MenuChoice, an int, or the text typed at the menu prompt

    Returns:
        The command class

    Raises:
        InvalidMenuChoiceError: If no command is registered for the selection
    """
    choice = MenuChoice.parse(selection)
    if choice not in _registry:
        raise InvalidMenuChoiceError(selection)
    return _registry[choice]


def registered_choices() -> list[MenuChoice]:
    """Return the registered menu choices in menu order."""
    return sorted(_registry)


def discover_and_register_commands() -> None:
    """Dynamically discover and import all command modules.

    Walks the category sub-packages of ``bloodbank.commands``; each command
    module calls register_command() when it is imported.
    """
    commands_dir = Path(__file__).parent

    for category_dir in commands_dir.iterdir():
        if category_dir.is_dir() and not category_dir.name.startswith("_"):
            package_name = f"bloodbank.commands.{category_dir.name}"
            for module_info in pkgutil.iter_modules([str(category_dir)]):
                if not module_info.name.startswith("_"):
                    module_name = f"{package_name}.{module_info.name}"
                    importlib.import_module(module_name)


def run_command(
    command_class: Type[BaseCommand], context: ShellContext, **params: Any
) -> BaseCommand:
    """Run a command through its collect, validate and execute phases.

    Raises:
        BloodBankError: If the command rejects its input
    """
    command = command_class(context, **params)
    command.collect()
    command.validate()
    logger.debug("Executing %s with %s", command.name, command.params)
    command.execute()
    return command


def dispatch(selection: object, context: ShellContext, **params: Any) -> BaseCommand:
    """Look up the command for a menu selection and run it.

    This is the non-interactive entry point: parameters given here are not
    prompted for. The shell looks commands up itself so that it can track
    which state it is in while one runs.

    Args:
        selection: A MenuChoice, an int, or the text typed at the menu prompt
        context: Session state the command works on
        **params: Parameters to supply instead of prompting

    Raises:
        InvalidMenuChoiceError: If the selection is not a menu entry
        BloodBankError: If the command rejects its input
    """
    return run_command(get_command(selection), context, **params)
