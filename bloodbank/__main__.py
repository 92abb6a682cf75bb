"""Allow running the shell with ``python -m bloodbank``."""

from bloodbank.cli import main

main(prog_name="bloodbank")
