"""Commands that answer availability and compatibility questions."""
