"""Shared fixtures for the formatter tests.

Adds the project root to sys.path so `import jira_slack_formatter` works
without an editable install.
"""

import copy
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jira_slack_formatter.config.settings import ENV_VARS  # noqa: E402

ISSUE = {
    "key": "PROJ-1",
    "self": "https://example.atlassian.net/rest/api/2/issue/10001",
    "fields": {
        "summary": "Broken login",
        "status": {"name": "Open"},
        "priority": {"name": "High"},
        "reporter": {"name": "jdoe", "displayName": "John Doe"},
        "assignee": {"name": "asmith", "displayName": "Alice Smith"},
        "created": "2017-01-12T15:00:00.000+0000",
        "updated": "2017-01-11T09:05:00.000+0000",
        "description": "Users {quote}cannot{quote} log in",
    },
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep formatter settings from the developer's shell out of the tests."""
    for name in ENV_VARS.values():
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def issue() -> dict:
    """A fully populated Jira issue payload."""
    return copy.deepcopy(ISSUE)
