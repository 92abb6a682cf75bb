"""Domain core: blood groups, validation, records and queries."""
