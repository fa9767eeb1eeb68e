import logging
import os
from typing import Optional

from .settings import DEFAULT_SETTINGS, ENV_VARS

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the command-line tools."""
    # Only the log level is read here; the other settings are validated per command
    if level is None:
        level = os.getenv(ENV_VARS["LOG_LEVEL"]) or DEFAULT_SETTINGS["log_level"]
    logging.basicConfig(
        format=LOG_FORMAT,
        level=getattr(logging, level.upper(), logging.WARNING)
    )
