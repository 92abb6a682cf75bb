"""Menu selections and the shell states they lead to."""

from enum import Enum, IntEnum

from bloodbank.core.errors import InvalidMenuChoiceError


class ShellState(Enum):
    MENU_WAIT = "menu-wait"
    ADD_DONOR = "add-donor"
    ADD_PATIENT = "add-patient"
    DISPLAY_DONORS = "display-donors"
    DISPLAY_PATIENTS = "display-patients"
    CHECK_AVAILABILITY = "check-availability"
    CHECK_COMPATIBILITY = "check-compatibility"
    EXIT = "exit"


class MenuChoice(IntEnum):
    """The numbered entries of the main menu."""

    ADD_DONOR = 1
    ADD_PATIENT = 2
    DISPLAY_DONORS = 3
    DISPLAY_PATIENTS = 4
    CHECK_AVAILABILITY = 5
    CHECK_COMPATIBILITY = 6
    EXIT = 7

    @property
    def label(self) -> str:
        return MENU_LABELS[self]

    @property
    def state(self) -> ShellState:
        """The shell state entered when this entry is selected."""
        return ShellState[self.name]

    @classmethod
    def parse(cls, selection: object) -> "MenuChoice":
        """Convert a raw menu selection into a MenuChoice.

        Args:
            selection: A MenuChoice, an int, or the text typed at the prompt

        Raises:
            InvalidMenuChoiceError: If the selection is not a menu number
        """
        if isinstance(selection, cls):
            return selection
        try:
            return cls(int(str(selection).strip()))
        except ValueError:
            raise InvalidMenuChoiceError(selection) from None


MENU_LABELS = {
    MenuChoice.ADD_DONOR: "Add Donor",
    MenuChoice.ADD_PATIENT: "Add Patient",
    MenuChoice.DISPLAY_DONORS: "Display Donors",
    MenuChoice.DISPLAY_PATIENTS: "Display Patients",
    MenuChoice.CHECK_AVAILABILITY: "Check Blood Availability",
    MenuChoice.CHECK_COMPATIBILITY: "Check Blood Compatibility",
    MenuChoice.EXIT: "Exit",
}
