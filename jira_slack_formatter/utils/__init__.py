"""
Utility functions for the Jira Slack formatter.
"""

from .formatters import format_calendar, parse_jira_timestamp
from .markup import jira_to_slack
from .validators import validate_user_map, validate_truncation_length

__all__ = [
    'format_calendar',
    'parse_jira_timestamp',
    'jira_to_slack',
    'validate_user_map',
    'validate_truncation_length'
]
