"""Tests for PR number / URL / branch selector parsing."""

import pytest

from gh_worktree.errors import ValidationError, ValidationFailure
from gh_worktree.validation.selector import Selector, parse_pr_number, parse_selector


@pytest.mark.unit
class TestParsePrNumber:

    @pytest.mark.parametrize("selector, expected", [
        ("123", 123),
        (" 7 ", 7),
        ("https://github.com/o/r/pull/456", 456),
        ("999999", 999999),
    ])
    def test_accepts(self, selector, expected):
        assert parse_pr_number(selector) == expected

    @pytest.mark.parametrize("selector", [
        "https://github.com/o/r/pull/abc",
        "0",
        "-1",
        "9999999",
        "12abc",
        "",
        "https://github.com/o/r/pull/1/pull/2",
        "https://github.com/o/r/pull/12/files",
    ])
    def test_rejects(self, selector):
        with pytest.raises(ValidationError):
            parse_pr_number(selector)

    def test_rejects_non_https_url(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_pr_number("http://github.com/o/r/pull/123")
        assert exc_info.value.kind is ValidationFailure.DISALLOWED

    def test_rejects_other_host(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_pr_number("https://example.com/o/r/pull/123")
        assert exc_info.value.kind is ValidationFailure.DISALLOWED


@pytest.mark.unit
class TestParseSelector:

    def test_number(self):
        assert parse_selector("42") == Selector(pr_number=42)

    def test_url(self):
        assert parse_selector("https://github.com/o/r/pull/9").is_pr

    def test_branch(self):
        selector = parse_selector("feature/x")
        assert selector == Selector(branch="feature/x")
        assert not selector.is_pr

    def test_numeric_looking_branch_is_treated_as_pr(self):
        with pytest.raises(ValidationError):
            parse_selector("0")

    def test_url_without_pull_path_is_rejected(self):
        with pytest.raises(ValidationError):
            parse_selector("https://github.com/o/r")

    @pytest.mark.parametrize("name", ["team/pull/fix", "pull/1"])
    def test_branch_containing_pull_segment(self, name):
        assert parse_selector(name) == Selector(branch=name)

    def test_unsafe_branch(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_selector("x;rm")
        assert exc_info.value.kind is ValidationFailure.UNSAFE_CHARACTERS
