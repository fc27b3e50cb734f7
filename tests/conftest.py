"""Shared test fixtures."""

from pathlib import Path

import pytest

import jira_check.settings as settings_module
from jira_check.models import Commit, LookupStatus, PullRequest, PullRequestEvent, PushEvent, TrackerVerificationResult
from jira_check.trackers.base import IssueTracker

_JIRA_ENV = ("JIRA_ORG", "JIRA_USERNAME", "JIRA_API_TOKEN", "JIRA_ALLOWED_STATUSES", "JIRA_TIMEOUT", "JIRA_DEDUPE_KEYS")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep the developer's environment, .env and config file out of every test."""
    for name in _JIRA_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    settings_module._load_toml.cache_clear()
    yield
    settings_module._load_toml.cache_clear()


class FakeTracker(IssueTracker):
    """Answers from a dict of key -> status name; unknown keys are 404."""

    def __init__(self, statuses: dict[str, str] | None = None, dedupe_keys: bool = False) -> None:
        self.statuses = statuses or {}
        self.dedupe_keys = dedupe_keys
        self.looked_up: list[str] = []

    def lookup_issue(self, key: str) -> TrackerVerificationResult:
        self.looked_up.append(key)
        status = self.statuses.get(key)
        if status is None:
            return TrackerVerificationResult(key=key, valid=False, lookup=LookupStatus.NOT_FOUND, http_status=404)
        return TrackerVerificationResult(
            key=key,
            valid=status in {"Ready For Release", "Ready For Test", "In Progress"},
            lookup=LookupStatus.OK,
            http_status=200,
            remote_status=status,
        )


@pytest.fixture
def fake_tracker_cls() -> type[FakeTracker]:
    return FakeTracker


@pytest.fixture
def tracker() -> FakeTracker:
    return FakeTracker({"ABC-12": "In Progress", "ABC-13": "Ready For Test", "DEF-7": "Done"})


@pytest.fixture
def push_event() -> PushEvent:
    return PushEvent(
        commits=[
            Commit(id="c1", message="fix bug ABC-12"),
            Commit(id="c2", message="no ticket here"),
        ]
    )


@pytest.fixture
def pr_event() -> PullRequestEvent:
    return PullRequestEvent(action="opened", pull_request=PullRequest(title="ABC-12 add login", number=7))
