"""Tests for jira_check.keys."""

import pytest

from jira_check.keys import extract_keys, is_placeholder_key, is_release_title


class TestExtractKeys:
    @pytest.mark.parametrize("text", ["", "no ticket here", "ABC-", "-123", "ABC 123", "ABC_123", "123-456"])
    def test_no_match(self, text: str) -> None:
        assert extract_keys(text) == []

    def test_none(self) -> None:
        assert extract_keys(None) == []

    def test_single(self) -> None:
        assert extract_keys("fix bug ABC-12") == ["ABC-12"]

    def test_left_to_right_order(self) -> None:
        assert extract_keys("XYZ-9 then ABC-1, finally DEF-22") == ["XYZ-9", "ABC-1", "DEF-22"]

    def test_lowercase_letters(self) -> None:
        assert extract_keys("see abc-5 and Mixed-6") == ["abc-5", "Mixed-6"]

    def test_duplicates_kept(self) -> None:
        assert extract_keys("ABC-1 ABC-1") == ["ABC-1", "ABC-1"]

    def test_embedded_in_branch_name(self) -> None:
        assert extract_keys("Merge branch 'feature/ABC-42-login'") == ["ABC-42"]

    def test_non_overlapping(self) -> None:
        # "A-1-2" holds one match; "1-2" has no letters
        assert extract_keys("A-1-2") == ["A-1"]

    def test_multiline_message(self) -> None:
        assert extract_keys("Add thing\n\nRefs: PROJ-100\nAlso PROJ-101") == ["PROJ-100", "PROJ-101"]


class TestPlaceholderKey:
    @pytest.mark.parametrize("key", ["ABC-0", "ABC-000", "proj-00"])
    def test_all_zeros(self, key: str) -> None:
        assert is_placeholder_key(key)

    @pytest.mark.parametrize("key", ["ABC-1", "ABC-10", "ABC-0001", "ABC-100"])
    def test_real_keys(self, key: str) -> None:
        assert not is_placeholder_key(key)


class TestReleaseTitle:
    @pytest.mark.parametrize(
        "title",
        ["release/2401", "Release/2401", "RELEASE/2312-a", "release/2401-b", "release/2401-c", " release/2402 "],
    )
    def test_release(self, title: str) -> None:
        assert is_release_title(title)

    @pytest.mark.parametrize(
        "title",
        ["release/24", "release/24011", "release/2401-d", "release/2401-B", "releases/2401", "ABC-1 release/2401"],
    )
    def test_not_release(self, title: str) -> None:
        assert not is_release_title(title)
