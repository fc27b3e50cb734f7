"""Shared pydantic models — the contract between events, validators, trackers and main.py."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Commit(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    message: str | None = None  # GitHub sends "" for empty messages; some tools send null


class PullRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    number: int | None = None


class PushEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["push"] = "push"
    commits: list[Commit]


class PullRequestEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["pull_request"] = "pull_request"
    action: str
    pull_request: PullRequest


class ValidationOutcome(BaseModel):
    """Verdict for a single commit message or pull request title."""

    model_config = ConfigDict(frozen=True)

    subject_id: str  # commit sha or "PR #12" / "pull request"
    is_valid: bool
    keys: list[str] = []


class LookupStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    OTHER = "other"
    PLACEHOLDER = "placeholder"  # never sent to the tracker


class TrackerVerificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    valid: bool
    lookup: LookupStatus
    http_status: int | None = None  # None for placeholders
    remote_status: str | None = None  # fields.status.name
    issue_type: str | None = None
    assignee: str | None = None


class Verdict(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"  # e.g. a pull_request "closed" action


class CheckReport(BaseModel):
    """Everything a single run found. Built by checker.check_event, printed by main.py."""

    model_config = ConfigDict(frozen=True)

    event: str
    verdict: Verdict
    outcomes: list[ValidationOutcome] = []
    results: list[TrackerVerificationResult] = []
    reason: str | None = None

    @property
    def keys(self) -> list[str]:
        return [key for outcome in self.outcomes for key in outcome.keys]

    @property
    def failing_outcomes(self) -> list[ValidationOutcome]:
        return [o for o in self.outcomes if not o.is_valid]

    @property
    def failing_results(self) -> list[TrackerVerificationResult]:
        return [r for r in self.results if not r.valid]

    @property
    def exit_code(self) -> int:
        return 1 if self.verdict is Verdict.FAILED else 0
