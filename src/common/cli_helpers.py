"""Common CLI helper utilities."""

from __future__ import annotations

import logging
import os
import sys


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging format for CLI tools.

    Logs go to stderr; stdout is reserved for data handed back to the host.

    Args:
        level: Log level name. Defaults to the LOG_LEVEL environment
            variable, then INFO.
    """
    level_name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
