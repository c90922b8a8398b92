"""Exceptions raised by gh-worktree.

Lower layers raise these; the Click commands catch GhWorktreeError at the
boundary and turn it into a single "Error: ..." line and exit status 1.
"""

from enum import Enum


class GhWorktreeError(Exception):
    """Base class for all gh-worktree failures."""


class ValidationFailure(Enum):
    EMPTY = "empty"
    TOO_LONG = "too-long"
    MALFORMED = "malformed"
    TRAVERSAL = "traversal"
    UNSAFE_CHARACTERS = "unsafe-characters"
    DISALLOWED = "disallowed"


class ValidationError(GhWorktreeError):
    """Raised when an identifier, number or URL fails the safety checks."""

    def __init__(self, field, kind, message):
        super().__init__(f"invalid {field}: {message}")
        self.field = field
        self.kind = kind


class TopologyError(GhWorktreeError):
    """Raised when the local repository layout cannot support the operation."""


class CommandFailedError(GhWorktreeError):
    """Raised when a git command in a batch exits non-zero."""

    def __init__(self, args, returncode, stderr=""):
        message = f"failed to execute git {' '.join(args)} (exit {returncode})"
        if stderr:
            message += f": {stderr.strip()}"
        super().__init__(message)
        self.args_list = list(args)
        self.returncode = returncode


class PullRequestFetchError(GhWorktreeError):
    """Raised when pull request data cannot be fetched from GitHub."""


class PromotionError(GhWorktreeError):
    """Raised when a branch worktree cannot be promoted."""


class WorktreeExistsError(GhWorktreeError):
    """Raised when the target worktree path is already taken."""


class HookConfigError(GhWorktreeError):
    """Raised when the post-create hook file cannot be read or parsed."""
