"""Worktree type metadata and promotion of branch worktrees to PR worktrees."""

from gh_worktree.errors import PromotionError
from gh_worktree.models import WorktreeType
from gh_worktree.validation.validate import (
    sanitize_for_git_config,
    validate_branch_name,
    validate_pr_number,
)
from gh_worktree.worktree.metadata import PR_NUMBER, PR_TITLE, TYPE, metadata_key

_TAGS = {t.value: t for t in (WorktreeType.PR, WorktreeType.BRANCH)}


class PromotionService:
    """Reads and writes the `gh-worktree-type` tag of a branch.

    States are unset (None), WorktreeType.BRANCH and WorktreeType.PR.
    Metadata is written to the main worktree's local config.
    """

    def __init__(self, gateway):
        self._gateway = gateway

    def get_type(self, branch_name):
        """Return the persisted type, inferring PR from a bare pr-number key.

        Worktrees created before type tags existed only carry a pr-number.
        """
        if not branch_name:
            return None
        root = self._gateway.resolve_root()
        value = self._gateway.get_config(root, metadata_key(branch_name, TYPE))
        if value:
            return _TAGS.get(value.strip())
        if self._gateway.get_config(root, metadata_key(branch_name, PR_NUMBER)):
            return WorktreeType.PR
        return None

    def set_type(self, branch_name, worktree_type):
        if worktree_type is WorktreeType.MAIN:
            raise ValueError("the main worktree is never tagged")
        root = self._gateway.resolve_root()
        self._gateway.set_config(root, metadata_key(branch_name, TYPE), worktree_type.value)

    def promote(self, branch_name, pr_number, title):
        """Mark a branch worktree as the worktree of pull request pr_number.

        The three keys are written one after another; an interruption can
        leave only some of them set.

        Raises:
            PromotionError: when the branch is already a PR worktree.
            ValidationError: for an unsafe branch name or invalid PR number.
        """
        validate_branch_name(branch_name)
        validate_pr_number(pr_number)
        if self.get_type(branch_name) is WorktreeType.PR:
            raise PromotionError(f"branch {branch_name} is already a PR worktree")

        root = self._gateway.resolve_root()
        self._gateway.set_config(root, metadata_key(branch_name, TYPE), WorktreeType.PR.value)
        self._gateway.set_config(root, metadata_key(branch_name, PR_NUMBER), str(pr_number))
        self._gateway.set_config(root, metadata_key(branch_name, PR_TITLE), sanitize_for_git_config(title))
