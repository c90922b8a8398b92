"""Parse user-supplied selectors: a PR number, a PR URL, or a branch name."""

import re
from dataclasses import dataclass
from typing import Optional

from gh_worktree.errors import ValidationError, ValidationFailure
from gh_worktree.validation.validate import (
    validate_branch_name,
    validate_pr_number,
    validate_url,
)

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Selector:
    pr_number: Optional[int] = None
    branch: Optional[str] = None

    @property
    def is_pr(self):
        return self.pr_number is not None


def _looks_like_pr_reference(selector):
    return (
        "://" in selector
        or _INTEGER.fullmatch(selector.strip()) is not None
    )


def parse_pr_number(selector: str) -> int:
    """Return the PR number named by a bare integer or a GitHub pull URL.

    Raises:
        ValidationError: for non-numeric input, numbers outside 1-999999,
            and URLs that are not https://github.com/....
    """
    if "/pull/" in selector:
        validate_url(selector)
        parts = selector.split("/pull/")
        if len(parts) != 2:
            raise ValidationError("PR URL", ValidationFailure.MALFORMED,
                                  f"{selector!r} is not a pull request URL")
        number_text = parts[1].strip()
    else:
        number_text = selector.strip()

    if not _INTEGER.fullmatch(number_text):
        raise ValidationError("PR number", ValidationFailure.MALFORMED,
                              f"{number_text!r} is not a number")
    return validate_pr_number(int(number_text))


def parse_selector(selector: str) -> Selector:
    """Classify a selector as a PR reference or a branch name."""
    if _looks_like_pr_reference(selector):
        return Selector(pr_number=parse_pr_number(selector))
    return Selector(branch=validate_branch_name(selector.strip()))
