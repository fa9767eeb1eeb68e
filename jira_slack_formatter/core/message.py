"""
Outgoing Slack message model.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SlackMessage:
    """
    A Slack attachment under construction.

    The transformer functions mutate ``text`` and ``fields`` in place; every
    other attribute is left to the caller.

    Attributes:
        text: Message body (Slack mrkdwn)
        fields: Ordered ``{"title", "value", "short"}`` entries
        title: Optional attachment title
        title_link: Optional URL the title links to
        color: Optional sidebar colour (hex or Slack keyword)
    """

    text: str = ""
    fields: List[Dict[str, Any]] = field(default_factory=list)
    title: Optional[str] = None
    title_link: Optional[str] = None
    color: Optional[str] = None

    def add_field(self, title: str, value: str, short: bool = True) -> None:
        """Append a field entry."""
        self.fields.append({"title": title, "value": value, "short": short})

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a Slack attachment payload.

        Returns:
            Dictionary with text, fields and whichever optional attributes are set
        """
        payload: Dict[str, Any] = {}
        if self.title is not None:
            payload["title"] = self.title
        if self.title_link is not None:
            payload["title_link"] = self.title_link
        if self.color is not None:
            payload["color"] = self.color
        payload["text"] = self.text
        payload["fields"] = [dict(entry) for entry in self.fields]
        payload["mrkdwn_in"] = ["text"]
        return payload
