"""Jira Cloud REST API v3 tracker."""

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from jira_check.errors import TrackerError
from jira_check.models import LookupStatus, TrackerVerificationResult
from jira_check.settings import JiraCheckSettings
from jira_check.trackers.base import IssueTracker

ISSUE_FIELDS = "key,assignee,status,issuetype"


class _Named(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None


class _User(BaseModel):
    model_config = ConfigDict(frozen=True)

    displayName: str | None = None


class _IssueFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: _Named | None = None
    issuetype: _Named | None = None
    assignee: _User | None = None  # null when unassigned


class _IssueBody(BaseModel):
    """The subset of GET /rest/api/3/issue/{key} requested via ISSUE_FIELDS."""

    model_config = ConfigDict(frozen=True)

    key: str | None = None
    fields: _IssueFields | None = None


def base_url(org: str) -> str:
    return f"https://{org}.atlassian.net"


class JiraTracker(IssueTracker):
    def __init__(self, settings: JiraCheckSettings) -> None:
        if not settings.org:
            raise TrackerError("Jira org is required")
        if not settings.username or not settings.api_token:
            raise TrackerError("Jira username and api_token are required")
        self._base_url = base_url(settings.org)
        self._auth = httpx.BasicAuth(settings.username, settings.api_token.get_secret_value())
        self._timeout = settings.timeout
        self.allowed_statuses = frozenset(settings.allowed_statuses)
        self.dedupe_keys = settings.dedupe_keys

    def _get(self, path: str, params: dict | None = None) -> httpx.Response:
        try:
            return httpx.get(
                f"{self._base_url}{path}",
                auth=self._auth,
                headers={"Accept": "application/json"},
                params=params or {},
                timeout=self._timeout,
            )
        except httpx.TransportError as exc:
            raise TrackerError(f"Jira request to {self._base_url}{path} failed: {exc}") from exc

    def lookup_issue(self, key: str) -> TrackerVerificationResult:
        response = self._get(f"/rest/api/3/issue/{key}", params={"fields": ISSUE_FIELDS})

        if response.status_code == 404:
            return TrackerVerificationResult(key=key, valid=False, lookup=LookupStatus.NOT_FOUND, http_status=404)
        if response.status_code != 200:
            return TrackerVerificationResult(
                key=key,
                valid=False,
                lookup=LookupStatus.OTHER,
                http_status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise TrackerError(f"Jira returned a non-JSON body for {key}") from exc
        try:
            body = _IssueBody.model_validate(data)
        except ValidationError as exc:
            raise TrackerError(f"Unexpected Jira payload for {key}: {exc}") from exc

        fields = body.fields or _IssueFields()
        status = fields.status.name if fields.status else None
        issue_type = fields.issuetype.name if fields.issuetype else None
        assignee = fields.assignee.displayName if fields.assignee else None
        return TrackerVerificationResult(
            key=key,
            valid=status in self.allowed_statuses,
            lookup=LookupStatus.OK,
            http_status=200,
            remote_status=status,
            issue_type=issue_type,
            assignee=assignee,
        )
