"""Tests for availability and compatibility queries."""

import pytest

from bloodbank.core.blood_groups import BloodGroup
from bloodbank.core.errors import InvalidBloodGroupError
from bloodbank.core.queries import compatibility_report, count_by_group
from bloodbank.core.records import RecordStore


class TestCountByGroup:
    """Tests for count_by_group()."""

    def test_counts_exact_matches(self, store: RecordStore) -> None:
        """After donors [O-, O-, A+], O- has two donors."""
        store.add_donor("One", "O-", 30, "x")
        store.add_donor("Two", "O-", 31, "x")
        store.add_donor("Three", "A+", 32, "x")

        assert count_by_group(store, "O-") == 2
        assert count_by_group(store, "A+") == 1

    def test_no_partial_matches(self, store: RecordStore) -> None:
        """AB+ donors are not counted as A+ or B+."""
        store.add_donor("One", "AB+", 30, "x")

        assert count_by_group(store, "A+") == 0
        assert count_by_group(store, "B+") == 0
        assert count_by_group(store, "AB+") == 1

    def test_query_is_case_insensitive(self, populated_store: RecordStore) -> None:
        assert count_by_group(populated_store, "o-") == 2

    def test_patients_not_counted(self, populated_store: RecordStore) -> None:
        assert count_by_group(populated_store, "B+") == 0

    def test_empty_store(self, store: RecordStore) -> None:
        assert count_by_group(store, "O+") == 0

    def test_invalid_group(self, store: RecordStore) -> None:
        with pytest.raises(InvalidBloodGroupError):
            count_by_group(store, "Q")


class TestCompatibilityReport:
    """Tests for compatibility_report()."""

    def test_universal_recipient_lists_all_groups(self, populated_store: RecordStore) -> None:
        report = compatibility_report(populated_store, "AB+")

        assert [group for group, _ in report] == list(BloodGroup)
        assert dict(report) == {
            BloodGroup.A_POS: 1,
            BloodGroup.A_NEG: 0,
            BloodGroup.B_POS: 0,
            BloodGroup.B_NEG: 0,
            BloodGroup.AB_POS: 0,
            BloodGroup.AB_NEG: 1,
            BloodGroup.O_POS: 0,
            BloodGroup.O_NEG: 2,
        }

    def test_o_negative_has_single_row(self, populated_store: RecordStore) -> None:
        assert compatibility_report(populated_store, "O-") == [(BloodGroup.O_NEG, 2)]

    def test_rows_follow_canonical_order(self, populated_store: RecordStore) -> None:
        report = compatibility_report(populated_store, "ab-")

        assert report == [
            (BloodGroup.A_NEG, 0),
            (BloodGroup.B_NEG, 0),
            (BloodGroup.AB_NEG, 1),
            (BloodGroup.O_NEG, 2),
        ]

    def test_zero_counts_included(self, store: RecordStore) -> None:
        assert compatibility_report(store, "A+") == [
            (BloodGroup.A_POS, 0),
            (BloodGroup.A_NEG, 0),
            (BloodGroup.O_POS, 0),
            (BloodGroup.O_NEG, 0),
        ]

    def test_invalid_group(self, store: RecordStore) -> None:
        with pytest.raises(InvalidBloodGroupError):
            compatibility_report(store, "AB")
