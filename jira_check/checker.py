"""Run the validators and the tracker over one CI event."""

from jira_check.errors import UnsupportedEventError
from jira_check.models import CheckReport, PullRequestEvent, PushEvent, Verdict
from jira_check.trackers.base import IssueTracker
from jira_check.validators import CommitValidator, PullRequestValidator

HANDLED_PR_ACTIONS = frozenset({"opened", "reopened", "edited", "ready_for_review", "synchronize"})


def check_push(event: PushEvent, tracker: IssueTracker) -> CheckReport:
    """Every commit needs a key; a bad commit is reported but the rest are still checked."""
    outcomes = [CommitValidator(commit).outcome for commit in event.commits]
    keys = [key for outcome in outcomes for key in outcome.keys]
    results = tracker.verify(keys)

    failed = any(not o.is_valid for o in outcomes) or any(not r.valid for r in results)
    return CheckReport(
        event=event.kind,
        verdict=Verdict.FAILED if failed else Verdict.PASSED,
        outcomes=outcomes,
        results=results,
    )


def check_pull_request(event: PullRequestEvent, tracker: IssueTracker) -> CheckReport:
    if event.action not in HANDLED_PR_ACTIONS:
        return CheckReport(
            event=event.kind,
            verdict=Verdict.SKIPPED,
            reason=f"pull_request action '{event.action}' is not checked",
        )

    outcome = PullRequestValidator(event.pull_request).outcome
    if not outcome.is_valid:
        return CheckReport(
            event=event.kind,
            verdict=Verdict.FAILED,
            outcomes=[outcome],
            reason="pull request title has no issue key",
        )

    results = tracker.verify(outcome.keys)
    return CheckReport(
        event=event.kind,
        verdict=Verdict.FAILED if any(not r.valid for r in results) else Verdict.PASSED,
        outcomes=[outcome],
        results=results,
    )


def check_event(event: PushEvent | PullRequestEvent, tracker: IssueTracker) -> CheckReport:
    match event:
        case PushEvent():
            return check_push(event, tracker)
        case PullRequestEvent():
            return check_pull_request(event, tracker)
        case _:
            raise UnsupportedEventError(f"Unsupported event {type(event).__name__}")
