"""Errors raised for rejected user input."""

from bloodbank.core.constants import MAX_DONOR_AGE, MIN_DONOR_AGE, VALID_GROUPS_TEXT


class BloodBankError(ValueError):
    """Base class for input the blood bank refuses to accept."""


class InvalidBloodGroupError(BloodBankError):
    """Raised when text is not one of the eight canonical blood groups."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid blood group! Must be one of: {VALID_GROUPS_TEXT}")


class InvalidAgeError(BloodBankError):
    """Raised when a donor's age is outside the accepted range."""

    def __init__(self, age: int):
        self.age = age
        super().__init__(
            f"Invalid age! Donors must be between {MIN_DONOR_AGE} and {MAX_DONOR_AGE} years old."
        )


class InvalidMenuChoiceError(BloodBankError):
    """Raised when a menu selection does not name a command."""

    def __init__(self, choice: object):
        self.choice = choice
        super().__init__("Invalid choice! Please try again.")
