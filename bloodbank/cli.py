"""CLI entry point for bloodbank."""

from typing import Any, Optional

import click

from bloodbank import __version__, config
from bloodbank.context import ShellContext
from bloodbank.core.blood_groups import BloodGroup, acceptable_donors, compatible_recipients
from bloodbank.core.constants import VALID_GROUPS_TEXT
from bloodbank.core.errors import InvalidBloodGroupError
from bloodbank.core.validators import parse_blood_group
from bloodbank.shell import Shell
from bloodbank.utils.logger import setup_logger


class BloodGroupType(click.ParamType):
    """Click parameter type accepting a blood group in any case."""

    name = "blood-group"

    def convert(
        self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]
    ) -> BloodGroup:
        try:
            return parse_blood_group(value)
        except InvalidBloodGroupError:
            self.fail(f"{value!r} is not one of: {VALID_GROUPS_TEXT}", param, ctx)


BLOOD_GROUP = BloodGroupType()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(config.LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level for messages on stderr (default: $BLOODBANK_LOG_LEVEL or WARNING).",
)
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]) -> None:
    """Bloodbank - blood bank donor and patient records.

    Run without a command to start the interactive menu. Records are kept
    in memory and discarded on exit.
    """
    setup_logger(level=(log_level or config.log_level()).upper(), log_file=config.log_file())
    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


@main.command()
def shell() -> None:
    """Start the interactive menu."""
    Shell(ShellContext()).run()


@main.command()
@click.argument("group", type=BLOOD_GROUP)
def compatibility(group: BloodGroup) -> None:
    """Show which blood groups GROUP can receive from and donate to."""
    click.echo(f"{group.value} can receive from: {_join(acceptable_donors(group))}")
    click.echo(f"{group.value} can donate to: {_join(compatible_recipients(group))}")


def _join(groups: tuple[BloodGroup, ...]) -> str:
    return ", ".join(group.value for group in groups)
