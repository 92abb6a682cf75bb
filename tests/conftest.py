"""Pytest configuration and shared fixtures for bloodbank tests."""

import logging
from typing import Iterator

import pytest
from click.testing import CliRunner

from bloodbank.context import ShellContext
from bloodbank.core.records import RecordStore
from bloodbank.utils.logger import LOGGER_NAME


@pytest.fixture
def store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def populated_store() -> RecordStore:
    """Store with donors [O-, O-, A+, AB-] and one patient."""
    store = RecordStore()
    store.add_donor("Alice Smith", "O-", 30, "1 Main St")
    store.add_donor("Bob Jones", "o-", 45, "2 High St")
    store.add_donor("Carol White", "A+", 18, "3 Park Ave")
    store.add_donor("Dan Brown", "AB-", 65, "4 Elm Rd")
    store.add_patient("Eve Black", "B+", 80, "5 Oak Ln")
    return store


@pytest.fixture
def context(store: RecordStore) -> ShellContext:
    return ShellContext(store=store)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_bloodbank_logger() -> Iterator[None]:
    """Drop handlers installed by CLI runs so they never outlive their streams."""
    yield
    log = logging.getLogger(LOGGER_NAME)
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    log.setLevel(logging.NOTSET)


def session_input(*lines: str) -> str:
    """Join scripted answers into stdin text for CliRunner."""
    return "\n".join(lines) + "\n"
