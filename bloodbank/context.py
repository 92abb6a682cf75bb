"""Session state shared by the shell and its commands."""

from dataclasses import dataclass, field

from bloodbank.core.records import RecordStore


@dataclass
class ShellContext:
    """Everything a command may read or change during one session."""

    store: RecordStore = field(default_factory=RecordStore)
