"""Menu commands and their registry."""
