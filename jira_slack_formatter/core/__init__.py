"""
Core functionality for the Jira Slack formatter.
"""

from .message import SlackMessage
from .response_transformer import (
    transform_description,
    transform_full_response,
    transform_jira_username_to_slack_username,
    transform_minimal_response,
)

__all__ = [
    'SlackMessage',
    'transform_description',
    'transform_full_response',
    'transform_jira_username_to_slack_username',
    'transform_minimal_response'
]
