"""Shared output for the record listing commands."""

from typing import Sequence

import click

from bloodbank.core.records import Person

SEPARATOR = "-" * 60


def echo_records(title: str, records: Sequence[Person], empty_message: str) -> None:
    """Print records one per line between separators, or ``empty_message``."""
    if not records:
        click.echo(empty_message)
        return
    click.echo(f"\n{title}:")
    click.echo(SEPARATOR)
    for record in records:
        click.echo(record.describe())
    click.echo(SEPARATOR)
