import json
import os
from datetime import tzinfo
from pathlib import Path
from typing import Any, Dict, Optional, Union

import pytz
from dotenv import load_dotenv

from ..utils.exceptions import ConfigurationError, UserMapError
from ..utils.validators import validate_truncation_length, validate_user_map

# Load environment variables
load_dotenv()

# Environment variables
ENV_VARS = {
    "TRUNCATION_LENGTH": "JIRA_SLACK_TRUNCATION_LENGTH",
    "TIMEZONE": "JIRA_SLACK_TIMEZONE",
    "USER_MAP": "JIRA_SLACK_USER_MAP",
    "LOG_LEVEL": "JIRA_SLACK_LOG_LEVEL",
}

# Formatter defaults
DEFAULT_SETTINGS = {
    "truncation_length": 1000,
    "timezone": None,
    "user_map_path": None,
    "log_level": "WARNING",
}

def _truncation_length() -> int:
    raw = os.getenv(ENV_VARS["TRUNCATION_LENGTH"])
    if not raw:
        return DEFAULT_SETTINGS["truncation_length"]
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_VARS['TRUNCATION_LENGTH']} must be an integer, got {raw!r}")
    if not validate_truncation_length(value):
        raise ConfigurationError(f"{ENV_VARS['TRUNCATION_LENGTH']} must not be negative, got {value}")
    return value

def get_settings() -> Dict[str, Any]:
    """Get all settings as a dictionary."""
    return {
        "truncation_length": _truncation_length(),
        "timezone": os.getenv(ENV_VARS["TIMEZONE"]) or DEFAULT_SETTINGS["timezone"],
        "user_map_path": os.getenv(ENV_VARS["USER_MAP"]) or DEFAULT_SETTINGS["user_map_path"],
        "log_level": (os.getenv(ENV_VARS["LOG_LEVEL"]) or DEFAULT_SETTINGS["log_level"]).upper(),
    }

def get_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """Resolve a timezone name; None means system local time."""
    if not name:
        return None
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        raise ConfigurationError(f"Unknown timezone: {name}")

def load_user_map(path: Union[str, Path]) -> Dict[str, str]:
    """Load a Jira-to-Slack username map from a JSON object file."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as e:
        raise UserMapError(f"Could not read {path}: {e}")
    except json.JSONDecodeError as e:
        raise UserMapError(f"Invalid JSON in {path}: {e}")

    if not validate_user_map(data):
        raise UserMapError(f"{path} must contain an object mapping Jira usernames to Slack usernames")
    return data
