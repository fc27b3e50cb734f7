"""Load the CI event payload into a typed PushEvent or PullRequestEvent."""

import json
from pathlib import Path

from pydantic import ValidationError

from jira_check.errors import EventPayloadError, UnsupportedEventError
from jira_check.models import PullRequestEvent, PushEvent

Event = PushEvent | PullRequestEvent

EVENT_MODELS: dict[str, type[PushEvent] | type[PullRequestEvent]] = {
    "push": PushEvent,
    "pull_request": PullRequestEvent,
}


def parse_event(kind: str, payload: object) -> Event:
    """Validate payload against the model for kind."""
    model = EVENT_MODELS.get(kind)
    if model is None:
        raise UnsupportedEventError(f"Unsupported event '{kind}'. Valid: {', '.join(EVENT_MODELS)}")
    if not isinstance(payload, dict):
        raise EventPayloadError(f"Malformed {kind} payload: expected a JSON object")
    try:
        # kind is ours, not the payload's
        return model.model_validate({**payload, "kind": kind})
    except ValidationError as exc:
        raise EventPayloadError(f"Malformed {kind} payload: {exc}") from exc


def load_event(kind: str, path: Path) -> Event:
    """Read the JSON file GitHub Actions points GITHUB_EVENT_PATH at."""
    if kind not in EVENT_MODELS:
        raise UnsupportedEventError(f"Unsupported event '{kind}'. Valid: {', '.join(EVENT_MODELS)}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise EventPayloadError(f"Could not read event payload {path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise EventPayloadError(f"Event payload {path} is not valid JSON: {exc}") from exc
    return parse_event(kind, payload)
