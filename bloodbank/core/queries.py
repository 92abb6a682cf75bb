"""Read-only queries over a :class:`~bloodbank.core.records.RecordStore`."""

from typing import List, Tuple

from bloodbank.core.blood_groups import BloodGroup, acceptable_donors
from bloodbank.core.records import RecordStore
from bloodbank.core.validators import parse_blood_group


def count_by_group(store: RecordStore, group: str) -> int:
    """Count donors of exactly the given blood group.

    Raises:
        InvalidBloodGroupError: If ``group`` is not a valid blood group
    """
    return len(store.donors_of(parse_blood_group(group)))


def compatibility_report(
    store: RecordStore, recipient_group: str
) -> List[Tuple[BloodGroup, int]]:
    """Count available donors for every group a recipient can receive from.

    Args:
        store: Records to query
        recipient_group: The recipient's blood group, any case

    Returns:
        One ``(donor_group, count)`` row per compatible donor group, in
        canonical group order. Groups with no donors are included with 0.

    Raises:
        InvalidBloodGroupError: If ``recipient_group`` is not a valid blood group
    """
    recipient = parse_blood_group(recipient_group)
    return [(group, len(store.donors_of(group))) for group in acceptable_donors(recipient)]
