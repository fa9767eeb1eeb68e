"""
Validation utilities for the Jira Slack formatter.
"""

from typing import Any


def validate_user_map(data: Any) -> bool:
    """Validate that a username map is a flat string-to-string object."""
    if not isinstance(data, dict):
        return False
    return all(isinstance(key, str) and isinstance(value, str) for key, value in data.items())


def validate_truncation_length(value: Any) -> bool:
    """Validate a description truncation length."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
