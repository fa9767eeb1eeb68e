"""Tests for the jira-slack command line."""

import json
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from jira_slack_formatter.cli import app, build_message, load_issue, main
from jira_slack_formatter.utils.exceptions import IssueFormatError

runner = CliRunner()


@pytest.fixture
def issue_file(tmp_path: Path, issue: dict) -> Path:
    path = tmp_path / "issue.json"
    path.write_text(json.dumps(issue), encoding="utf-8")
    return path


@pytest.fixture
def user_map_file(tmp_path: Path) -> Path:
    path = tmp_path / "users.json"
    path.write_text(json.dumps({"jdoe": "john"}), encoding="utf-8")
    return path


class TestPreview:
    """Tests for the preview command."""

    def test_full_payload(self, issue_file: Path, user_map_file: Path) -> None:
        result = runner.invoke(app, ["preview", str(issue_file), "--user-map", str(user_map_file)])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["title"] == "PROJ-1: Broken login"
        assert payload["text"] == "Users ```cannot``` log in"
        assert [entry["title"] for entry in payload["fields"]] == [
            "Created", "Updated", "Status", "Priority", "Reporter", "Assignee",
        ]
        values = {entry["title"]: entry["value"] for entry in payload["fields"]}
        assert values["Reporter"] == "@john"
        assert values["Assignee"] == "Alice Smith"

    def test_minimal_payload(self, issue_file: Path) -> None:
        result = runner.invoke(app, ["preview", str(issue_file), "--minimal"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["text"] == "`Status: Open` `Priority: High`: PROJ-1: Broken login"
        assert payload["fields"] == []

    def test_custom_text(self, issue_file: Path) -> None:
        result = runner.invoke(app, ["preview", str(issue_file), "--minimal", "--text", "Hi"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["text"] == "`Status: Open` `Priority: High`: Hi"

    def test_user_map_from_environment(
        self, issue_file: Path, user_map_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("JIRA_SLACK_USER_MAP", str(user_map_file))
        result = runner.invoke(app, ["preview", str(issue_file)])

        assert result.exit_code == 0
        values = {entry["title"]: entry["value"] for entry in json.loads(result.stdout)["fields"]}
        assert values["Reporter"] == "@john"

    def test_invalid_issue_file(self, tmp_path: Path) -> None:
        path = tmp_path / "issue.json"
        path.write_text("not json", encoding="utf-8")
        result = runner.invoke(app, ["preview", str(path)])

        assert result.exit_code == 1
        assert "Issue error" in result.output

    def test_issue_without_status(self, tmp_path: Path, issue: dict) -> None:
        del issue["fields"]["status"]
        path = tmp_path / "issue.json"
        path.write_text(json.dumps(issue), encoding="utf-8")
        result = runner.invoke(app, ["preview", str(path), "--minimal"])

        assert result.exit_code == 1
        assert "missing a required field" in result.output


class TestDescribe:
    """Tests for the describe command."""

    def test_description(self, issue_file: Path) -> None:
        result = runner.invoke(app, ["describe", str(issue_file)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "Users ```cannot``` log in"

    def test_truncation(self, issue_file: Path) -> None:
        result = runner.invoke(app, ["describe", str(issue_file), "--truncate", "5"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "Users..."

    def test_truncation_from_environment(self, issue_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JIRA_SLACK_TRUNCATION_LENGTH", "5")
        result = runner.invoke(app, ["describe", str(issue_file)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "Users..."

    def test_missing_description(self, tmp_path: Path, issue: dict) -> None:
        issue["fields"]["description"] = None
        path = tmp_path / "issue.json"
        path.write_text(json.dumps(issue), encoding="utf-8")
        result = runner.invoke(app, ["describe", str(path)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "Ticket does not contain a description"


class TestHelpers:
    """Tests for the issue loading and message building helpers."""

    def test_load_issue_requires_fields(self, tmp_path: Path) -> None:
        path = tmp_path / "issue.json"
        path.write_text(json.dumps({"key": "PROJ-1"}), encoding="utf-8")
        with pytest.raises(IssueFormatError):
            load_issue(path)

    def test_build_message_minimal(self, issue: dict) -> None:
        message = build_message(issue, full=False)
        assert message.text == "`Status: Open` `Priority: High`: PROJ-1: Broken login"
        assert message.title_link == issue["self"]


class TestMain:
    """Tests for the console script entry point."""

    def test_configuration_error_exits_cleanly(
        self, issue_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        monkeypatch.setenv("JIRA_SLACK_TRUNCATION_LENGTH", "abc")
        monkeypatch.setattr(sys, "argv", ["jira-slack", "describe", str(issue_file)])

        with pytest.raises(SystemExit) as excinfo:
            main()

        assert excinfo.value.code == 1
        assert "Configuration error" in capsys.readouterr().out
