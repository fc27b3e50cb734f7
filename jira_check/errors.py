"""Exceptions raised by jira-check. The CLI turns them into exit code 1."""


class JiraCheckError(RuntimeError):
    pass


class EventPayloadError(JiraCheckError):
    """The event payload could not be read or does not match the expected shape."""


class UnsupportedEventError(JiraCheckError):
    """The CI event kind is neither push nor pull_request."""


class TrackerError(JiraCheckError):
    """The issue tracker could not be reached or answered with garbage."""
