"""Runtime settings read from the environment. Uses python-dotenv.

Only ambient behaviour (logging) is configurable. Blood groups, the
compatibility table and the donor age range are fixed in
:mod:`bloodbank.core.constants`.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> None:
    """Load ``.env`` from the current directory or its parents, if present.

    Values already exported in the environment take precedence.
    """
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(env_path, override=False)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def log_level() -> str:
    """Optional: BLOODBANK_LOG_LEVEL. Default WARNING; unknown names fall back to it."""
    level = get_optional("BLOODBANK_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        logging.getLogger(__name__).warning(
            "Ignoring unknown BLOODBANK_LOG_LEVEL %r, using %s", level, DEFAULT_LOG_LEVEL
        )
        return DEFAULT_LOG_LEVEL
    return level


def log_file() -> Optional[Path]:
    """Optional: BLOODBANK_LOG_FILE. Default none (stderr only)."""
    val = get_optional("BLOODBANK_LOG_FILE")
    return Path(val) if val else None
