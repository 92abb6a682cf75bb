"""ABO/Rh blood groups and the static transfusion compatibility table."""

from enum import Enum
from typing import Dict, Tuple


class BloodGroup(str, Enum):
    """The eight canonical blood groups, in canonical enumeration order."""

    A_POS = "A+"
    A_NEG = "A-"
    B_POS = "B+"
    B_NEG = "B-"
    AB_POS = "AB+"
    AB_NEG = "AB-"
    O_POS = "O+"
    O_NEG = "O-"

    def __str__(self) -> str:
        return self.value


def _groups(*names: str) -> Tuple[BloodGroup, ...]:
    """Build a tuple of groups sorted into canonical order."""
    wanted = set(names)
    return tuple(group for group in BloodGroup if group.value in wanted)


# recipient -> donor groups the recipient can safely receive from
COMPATIBILITY: Dict[BloodGroup, Tuple[BloodGroup, ...]] = {
    BloodGroup.A_POS: _groups("A+", "A-", "O+", "O-"),
    BloodGroup.A_NEG: _groups("A-", "O-"),
    BloodGroup.B_POS: _groups("B+", "B-", "O+", "O-"),
    BloodGroup.B_NEG: _groups("B-", "O-"),
    BloodGroup.AB_POS: tuple(BloodGroup),  # Universal recipient
    BloodGroup.AB_NEG: _groups("A-", "B-", "AB-", "O-"),
    BloodGroup.O_POS: _groups("O+", "O-"),
    BloodGroup.O_NEG: _groups("O-"),
}


def acceptable_donors(recipient: BloodGroup) -> Tuple[BloodGroup, ...]:
    """Return the donor groups a recipient can receive from, in canonical order."""
    return COMPATIBILITY[recipient]


def compatible_recipients(donor: BloodGroup) -> Tuple[BloodGroup, ...]:
    """Return the recipient groups a donor can give to.

    This is the inverse of :data:`COMPATIBILITY`, so O- reaches every group
    and AB+ reaches only AB+.
    """
    return tuple(recipient for recipient in BloodGroup if donor in COMPATIBILITY[recipient])


def can_receive(recipient: BloodGroup, donor: BloodGroup) -> bool:
    """Check whether ``recipient`` may receive blood from ``donor``."""
    return donor in COMPATIBILITY[recipient]
