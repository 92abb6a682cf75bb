"""Input predicates for blood groups and donor ages.

The ``is_*`` functions are pure predicates. The ``parse``/``require``
variants return the accepted value or raise the matching
:class:`~bloodbank.core.errors.BloodBankError`.
"""

from bloodbank.core.blood_groups import BloodGroup
from bloodbank.core.constants import BLOOD_GROUP_NAMES, MAX_DONOR_AGE, MIN_DONOR_AGE
from bloodbank.core.errors import InvalidAgeError, InvalidBloodGroupError


def normalize_blood_group(text: str) -> str:
    """Strip surrounding whitespace and uppercase a blood group entry."""
    return text.strip().upper()


def is_valid_blood_group(text: str) -> bool:
    """Return True if ``text`` names one of the eight groups, ignoring case."""
    return normalize_blood_group(text) in BLOOD_GROUP_NAMES


def parse_blood_group(text: str) -> BloodGroup:
    """Convert user text into a :class:`BloodGroup`.

    Args:
        text: Raw input such as ``"a+"`` or ``" O- "``

    Returns:
        The matching blood group

    Raises:
        InvalidBloodGroupError: If the text is not a valid group
    """
    if isinstance(text, BloodGroup):
        return text
    normalized = normalize_blood_group(text)
    if normalized not in BLOOD_GROUP_NAMES:
        raise InvalidBloodGroupError(text)
    return BloodGroup(normalized)


def is_valid_donor_age(age: int) -> bool:
    """Return True if ``age`` is within the inclusive donor age range."""
    return MIN_DONOR_AGE <= age <= MAX_DONOR_AGE


def require_donor_age(age: int) -> int:
    """Return ``age`` unchanged, or raise InvalidAgeError if a donor can't be that age."""
    if not is_valid_donor_age(age):
        raise InvalidAgeError(age)
    return age
