"""
Jira Slack Formatter - Turn Jira issues into Slack message payloads.
"""

__version__ = "1.0.0"

from .core.message import SlackMessage
from .core.response_transformer import (
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
