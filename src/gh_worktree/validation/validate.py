"""Safety checks for strings that end up in git arguments or git config.

Branch names, repository names and titles come from the GitHub API or from
the user, so they are whitelisted before being interpolated into commands.
"""

import re
from urllib.parse import urlsplit

from gh_worktree.errors import ValidationError, ValidationFailure

TRUSTED_HOST = "github.com"
MAX_PR_NUMBER = 999999
MAX_BRANCH_NAME_LENGTH = 255
MAX_REPO_NAME_LENGTH = 100

_VALID_BRANCH_NAME = re.compile(r"[A-Za-z0-9._/-]+")
_VALID_REPO_NAME = re.compile(r"[A-Za-z0-9._-]+")

_SHELL_SPECIAL = (";", "&", "|", "`", "$", "(", ")", "<", ">", "'", '"', "\\")


def sanitize_for_git_config(value: str) -> str:
    """Strip control and shell-special characters from a free-text value.

    This is a denylist: it guarantees no shell-special character survives,
    not that the text is unchanged.
    """
    value = value.replace("\x00", "")
    for whitespace in ("\n", "\r", "\t"):
        value = value.replace(whitespace, " ")
    for char in _SHELL_SPECIAL:
        value = value.replace(char, "")
    return value.strip()


def validate_branch_name(name: str, field: str = "branch name") -> str:
    if not name:
        raise ValidationError(field, ValidationFailure.EMPTY, "cannot be empty")
    if len(name) > MAX_BRANCH_NAME_LENGTH:
        raise ValidationError(field, ValidationFailure.TOO_LONG,
                              f"longer than {MAX_BRANCH_NAME_LENGTH} characters")
    if not _VALID_BRANCH_NAME.fullmatch(name):
        raise ValidationError(field, ValidationFailure.UNSAFE_CHARACTERS,
                              f"{name!r} contains unsafe characters")
    if name.startswith("-") or name.endswith("/"):
        raise ValidationError(field, ValidationFailure.MALFORMED,
                              f"{name!r} must not start with '-' or end with '/'")
    return name


def validate_repo_name(name: str, field: str = "repository name") -> str:
    if not name:
        raise ValidationError(field, ValidationFailure.EMPTY, "cannot be empty")
    if len(name) > MAX_REPO_NAME_LENGTH:
        raise ValidationError(field, ValidationFailure.TOO_LONG,
                              f"longer than {MAX_REPO_NAME_LENGTH} characters")
    if ".." in name:
        raise ValidationError(field, ValidationFailure.TRAVERSAL,
                              f"{name!r} contains path traversal")
    if not _VALID_REPO_NAME.fullmatch(name):
        raise ValidationError(field, ValidationFailure.UNSAFE_CHARACTERS,
                              f"{name!r} contains unsafe characters")
    return name


def validate_pr_number(number) -> int:
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValidationError("PR number", ValidationFailure.MALFORMED,
                              f"{number!r} is not an integer")
    if number < 1 or number > MAX_PR_NUMBER:
        raise ValidationError("PR number", ValidationFailure.MALFORMED,
                              f"{number} is outside 1-{MAX_PR_NUMBER}")
    return number


def validate_url(url: str, trusted_host: str = TRUSTED_HOST) -> str:
    """Accept only credential-free https URLs on the trusted host."""
    if not url:
        raise ValidationError("URL", ValidationFailure.EMPTY, "cannot be empty")
    try:
        parsed = urlsplit(url)
        # .port raises ValueError for a malformed port
        parsed.port
    except ValueError as e:
        raise ValidationError("URL", ValidationFailure.MALFORMED, str(e)) from e
    if parsed.scheme != "https":
        raise ValidationError("URL", ValidationFailure.DISALLOWED,
                              "only HTTPS URLs are allowed")
    if parsed.username is not None or parsed.password is not None:
        raise ValidationError("URL", ValidationFailure.DISALLOWED,
                              "URL cannot contain credentials")
    if parsed.netloc != trusted_host:
        raise ValidationError("URL", ValidationFailure.DISALLOWED,
                              f"only {trusted_host} URLs are allowed")
    return url
