"""In-memory, append-only store of donors and patients."""

import logging
from dataclasses import dataclass
from typing import ClassVar, List, Tuple

from bloodbank.core.blood_groups import BloodGroup
from bloodbank.core.validators import parse_blood_group, require_donor_age

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Person:
    """Common fields of every record kept by the blood bank."""

    kind: ClassVar[str] = "Person"

    name: str
    blood_group: BloodGroup
    age: int
    address: str

    @property
    def confirmation(self) -> str:
        """Message shown after the record is added."""
        return f"{self.kind} '{self.name}' added successfully."

    def describe(self) -> str:
        """One-line summary used when listing records."""
        return (
            f"Name: {self.name}, Blood Group: {self.blood_group.value}, "
            f"Age: {self.age}, Address: {self.address}"
        )


@dataclass(frozen=True)
class Donor(Person):
    kind: ClassVar[str] = "Donor"


@dataclass(frozen=True)
class Patient(Person):
    kind: ClassVar[str] = "Patient"


class RecordStore:
    """Holds donors and patients for the lifetime of a session.

    Records are appended in the order they are added and are never edited
    or removed. Every ``add_*`` call validates its input first, so a rejected
    record leaves the store untouched.
    """

    def __init__(self) -> None:
        self._donors: List[Donor] = []
        self._patients: List[Patient] = []

    def add_donor(self, name: str, blood_group: str, age: int, address: str) -> Donor:
        """Validate and append a donor.

        Args:
            name: Donor's full name
            blood_group: Blood group text, any case
            age: Donor's age in years
            address: Postal address

        Returns:
            The stored donor

        Raises:
            InvalidBloodGroupError: If the blood group is not recognised
            InvalidAgeError: If age is outside the donor age range
        """
        group = parse_blood_group(blood_group)
        require_donor_age(age)
        donor = Donor(name=name, blood_group=group, age=age, address=address)
        self._donors.append(donor)
        logger.debug("Added donor %r (%s), %d on record", name, group.value, len(self._donors))
        return donor

    def add_patient(self, name: str, blood_group: str, age: int, address: str) -> Patient:
        """Validate and append a patient.

        Patients have no age restriction.

        Raises:
            InvalidBloodGroupError: If the blood group is not recognised
        """
        group = parse_blood_group(blood_group)
        patient = Patient(name=name, blood_group=group, age=age, address=address)
        self._patients.append(patient)
        logger.debug(
            "Added patient %r (%s), %d on record", name, group.value, len(self._patients)
        )
        return patient

    def list_donors(self) -> Tuple[Donor, ...]:
        return tuple(self._donors)

    def list_patients(self) -> Tuple[Patient, ...]:
        return tuple(self._patients)

    def donors_of(self, group: BloodGroup) -> Tuple[Donor, ...]:
        """Return donors whose blood group is exactly ``group``."""
        return tuple(donor for donor in self._donors if donor.blood_group is group)
