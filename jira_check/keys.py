"""Issue key helpers: extraction, placeholder keys and release titles."""

import re

# PROJ-123; letters are matched in either case
ISSUE_KEY_RE = re.compile(r"[A-Za-z]+-[0-9]+")

# release/2401, Release/2401-b
RELEASE_TITLE_RE = re.compile(r"(?i:release)/[0-9]{4}(?:-[abc])?")


def extract_keys(text: str | None) -> list[str]:
    """Return every issue key in text, left to right.

    >>> extract_keys("ABC-1: fix, see also def-22")
    ['ABC-1', 'def-22']
    """
    if not text:
        return []
    return ISSUE_KEY_RE.findall(text)


def is_placeholder_key(key: str) -> bool:
    """PROJ-0 / PROJ-000 mean "no ticket yet" and are never looked up."""
    _, _, number = key.rpartition("-")
    return bool(number) and not number.strip("0")


def is_release_title(title: str) -> bool:
    return RELEASE_TITLE_RE.fullmatch(title.strip()) is not None
