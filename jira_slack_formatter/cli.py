"""
Command-line interface for the Jira Slack formatter.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .config.settings import get_settings, get_timezone, load_user_map
from .config.logging_config import setup_logging
from .core.message import SlackMessage
from .core.response_transformer import (
    transform_description,
    transform_full_response,
    transform_minimal_response,
)
from .utils.exceptions import IssueFormatError, handle_error

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="jira-slack",
    help="Jira Slack Formatter - Preview the Slack messages built from Jira issues",
    add_completion=False
)
console = Console()

def load_issue(path: Path) -> Dict[str, Any]:
    """Read a Jira issue payload from a JSON file."""
    try:
        with path.open("r", encoding="utf-8") as fh:
            issue = json.load(fh)
    except OSError as e:
        raise IssueFormatError(f"Could not read {path}: {e}")
    except json.JSONDecodeError as e:
        raise IssueFormatError(f"Invalid JSON in {path}: {e}")

    if not isinstance(issue, dict) or not isinstance(issue.get("fields"), dict):
        raise IssueFormatError(f"{path} does not contain a Jira issue with a 'fields' object")
    return issue

def build_message(
    issue: Dict[str, Any],
    full: bool = True,
    user_map: Optional[Dict[str, str]] = None,
    truncation_length: int = 1000,
    text: Optional[str] = None,
    tz=None,
) -> SlackMessage:
    """Build the Slack message a bot would post for ``issue``."""
    fields = issue["fields"]
    title = ": ".join(part for part in (issue.get("key"), fields.get("summary")) if part)
    message = SlackMessage(title=title, title_link=issue.get("self"))

    try:
        if full:
            message.text = text if text is not None else transform_description(
                fields.get("description"), truncation_length
            )
            transform_full_response(issue, message, user_map, tz=tz)
        else:
            message.text = text if text is not None else title
            transform_minimal_response(issue, message)
    except (KeyError, TypeError) as e:
        raise IssueFormatError(f"Issue is missing a required field: {e}")
    return message

def _fail(error: Exception) -> None:
    error_message = handle_error(error)
    logger.error(error_message, exc_info=True)
    console.print(f"[red]{escape(error_message)}[/red]")
    raise typer.Exit(1)

@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging")
):
    """Format Jira issues as Slack messages."""
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled")

@app.command()
def preview(
    issue_file: Path = typer.Argument(..., help="Path to a Jira issue JSON file"),
    full: bool = typer.Option(True, "--full/--minimal", help="Add the metadata fields or only the status prefix"),
    user_map_file: Optional[Path] = typer.Option(None, "--user-map", "-u", help="JSON file mapping Jira to Slack usernames"),
    truncate: Optional[int] = typer.Option(None, "--truncate", "-t", min=0, help="Description truncation length"),
    text: Optional[str] = typer.Option(None, "--text", help="Message text to use instead of the default"),
):
    """Print the Slack payload built from a Jira issue."""
    try:
        settings = get_settings()
        issue = load_issue(issue_file)
        user_map_path = user_map_file or settings["user_map_path"]
        user_map = load_user_map(user_map_path) if user_map_path else {}
        message = build_message(
            issue,
            full=full,
            user_map=user_map,
            truncation_length=truncate if truncate is not None else settings["truncation_length"],
            text=text,
            tz=get_timezone(settings["timezone"]),
        )
    except Exception as e:
        _fail(e)
    console.print_json(json.dumps(message.to_dict()))

@app.command()
def describe(
    issue_file: Path = typer.Argument(..., help="Path to a Jira issue JSON file"),
    truncate: Optional[int] = typer.Option(None, "--truncate", "-t", min=0, help="Description truncation length"),
):
    """Print the formatted description of a Jira issue."""
    try:
        settings = get_settings()
        issue = load_issue(issue_file)
        length = truncate if truncate is not None else settings["truncation_length"]
        description = transform_description(issue["fields"].get("description"), length)
    except Exception as e:
        _fail(e)
    console.print(description, markup=False, emoji=False, highlight=False, soft_wrap=True)

def main():
    setup_logging()
    app()

if __name__ == "__main__":
    main()
