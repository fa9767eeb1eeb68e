"""
Transformations from Jira issues onto outgoing Slack messages.
"""

import logging
from datetime import datetime, tzinfo
from typing import Any, Dict, Mapping, Optional

from .message import SlackMessage
from ..utils.formatters import format_calendar
from ..utils.markup import jira_to_slack

logger = logging.getLogger(__name__)

DEFAULT_TRUNCATION_LENGTH = 1000
NO_DESCRIPTION = "Ticket does not contain a description"
UNASSIGNED = "Unassigned"
ELLIPSIS = "..."


def transform_jira_username_to_slack_username(user_map: Mapping[str, str], username: str) -> str:
    """Translate a Jira username to a Slack handle, or "" when it isn't mapped."""
    slack_name = user_map.get(username)
    if slack_name:
        return f"@{slack_name}"
    return ""


def transform_description(description: Optional[str], truncation_length: int = DEFAULT_TRUNCATION_LENGTH) -> str:
    """
    Format a ticket description for display.

    A missing description is replaced with a placeholder. The text is cut to
    ``truncation_length`` characters (with "..." appended when anything was
    cut) and then translated from Jira markup to Slack markup, so a cut
    through a {quote} block leaves its marker untranslated.

    Args:
        description: The raw description, may be None or empty
        truncation_length: Maximum number of raw characters kept

    Returns:
        The formatted description
    """
    desc = description or NO_DESCRIPTION
    truncated = desc[:max(truncation_length, 0)]

    if len(desc) > len(truncated):
        logger.debug(f"Truncated description from {len(desc)} to {len(truncated)} characters")
        truncated = truncated + ELLIPSIS

    return jira_to_slack(truncated)


def transform_minimal_response(issue: Dict[str, Any], message: SlackMessage) -> None:
    """Prefix the message text with the issue status and priority."""
    fields = issue["fields"]
    message.text = (
        f"`Status: {fields['status']['name']}` "
        f"`Priority: {fields['priority']['name']}`: "
        f"{message.text}"
    )


def _resolve_user(user_map: Mapping[str, str], user: Dict[str, Any]) -> str:
    return transform_jira_username_to_slack_username(user_map, user.get("name")) or user.get("displayName")


def transform_full_response(
    issue: Dict[str, Any],
    message: SlackMessage,
    user_map: Optional[Mapping[str, str]] = None,
    tz: Optional[tzinfo] = None,
    now: Optional[datetime] = None,
) -> None:
    """
    Append the issue metadata fields to the message.

    Fields are added in a fixed order: Created, Updated, Status, Priority,
    Reporter, Assignee. People are shown by Slack handle when ``user_map``
    knows them and by Jira display name otherwise.

    Args:
        issue: Jira issue payload
        message: Message to append fields to
        user_map: Jira username to Slack username (empty when omitted)
        tz: Timezone for the Created/Updated dates (system local time when omitted)
        now: Reference time for the relative dates (current time when omitted)
    """
    if user_map is None:
        user_map = {}
    fields = issue["fields"]

    message.add_field("Created", format_calendar(fields["created"], now=now, tz=tz))
    message.add_field("Updated", format_calendar(fields["updated"], now=now, tz=tz))
    message.add_field("Status", fields["status"]["name"])
    message.add_field("Priority", fields["priority"]["name"])
    message.add_field("Reporter", _resolve_user(user_map, fields["reporter"]))

    assignee = UNASSIGNED
    if fields.get("assignee"):
        assignee = _resolve_user(user_map, fields["assignee"])
    message.add_field("Assignee", assignee)

    logger.debug(f"Added {len(message.fields)} fields for issue {issue.get('key', '<unknown>')}")
