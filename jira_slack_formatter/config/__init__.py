"""
Configuration for the Jira Slack formatter.
"""

from .settings import DEFAULT_SETTINGS, ENV_VARS, get_settings, get_timezone, load_user_map
from .logging_config import setup_logging

__all__ = [
    'DEFAULT_SETTINGS',
    'ENV_VARS',
    'get_settings',
    'get_timezone',
    'load_user_map',
    'setup_logging'
]
