"""Commit and pull request validators.

Each validator scans its subject once, on first access, and keeps the
resulting ValidationOutcome for the rest of its life.
"""

from functools import cached_property

from jira_check.keys import extract_keys, is_release_title
from jira_check.models import Commit, PullRequest, ValidationOutcome


class CommitValidator:
    def __init__(self, commit: Commit) -> None:
        self.commit = commit

    @cached_property
    def outcome(self) -> ValidationOutcome:
        keys = extract_keys(self.commit.message)
        return ValidationOutcome(subject_id=self.commit.id, is_valid=bool(keys), keys=keys)

    @property
    def is_valid(self) -> bool:
        return self.outcome.is_valid

    @property
    def keys(self) -> list[str]:
        return self.outcome.keys


class PullRequestValidator:
    """Release titles pass without keys; anything else needs at least one key."""

    def __init__(self, pull_request: PullRequest) -> None:
        self.pull_request = pull_request

    @property
    def subject_id(self) -> str:
        if self.pull_request.number is not None:
            return f"PR #{self.pull_request.number}"
        return "pull request"

    @cached_property
    def outcome(self) -> ValidationOutcome:
        title = self.pull_request.title
        if is_release_title(title):
            return ValidationOutcome(subject_id=self.subject_id, is_valid=True, keys=[])
        keys = extract_keys(title)
        return ValidationOutcome(subject_id=self.subject_id, is_valid=bool(keys), keys=keys)

    @property
    def is_valid(self) -> bool:
        return self.outcome.is_valid

    @property
    def keys(self) -> list[str]:
        return self.outcome.keys
