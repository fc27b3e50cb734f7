"""Abstract base class for issue trackers."""

from abc import ABC, abstractmethod

from jira_check.keys import is_placeholder_key
from jira_check.models import LookupStatus, TrackerVerificationResult


class IssueTracker(ABC):
    dedupe_keys: bool = False

    @abstractmethod
    def lookup_issue(self, key: str) -> TrackerVerificationResult: ...

    def verify(self, keys: list[str]) -> list[TrackerVerificationResult]:
        """Return one result per key, in input order, duplicates included.

        Placeholder keys are valid without a lookup. With dedupe_keys set, a
        repeated key reuses the result of its first lookup.
        """
        seen: dict[str, TrackerVerificationResult] = {}
        results = []
        for key in keys:
            if is_placeholder_key(key):
                results.append(TrackerVerificationResult(key=key, valid=True, lookup=LookupStatus.PLACEHOLDER))
                continue
            if self.dedupe_keys and key in seen:
                results.append(seen[key])
                continue
            result = self.lookup_issue(key)
            seen[key] = result
            results.append(result)
        return results
