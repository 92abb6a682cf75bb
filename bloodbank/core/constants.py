"""Fixed domain constants."""

# Canonical enumeration order of the ABO/Rh groups.
BLOOD_GROUP_NAMES = ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")
VALID_GROUPS_TEXT = ", ".join(BLOOD_GROUP_NAMES)

MIN_DONOR_AGE = 18
MAX_DONOR_AGE = 65
