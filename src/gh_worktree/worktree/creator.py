"""WorktreeCreator: create PR and branch worktrees and record their metadata."""

import os

from gh_worktree.errors import WorktreeExistsError
from gh_worktree.models import WorktreeType
from gh_worktree.validation.validate import (
    sanitize_for_git_config,
    validate_branch_name,
    validate_pr_number,
)
from gh_worktree.worktree.command_synthesizer import (
    build_checkout_commands,
    resolve_branch_name,
    submodule_commands,
)
from gh_worktree.worktree.metadata import PR_NUMBER, PR_TITLE, metadata_key
from gh_worktree.worktree.paths import branch_worktree_path, pr_worktree_path
from gh_worktree.worktree.promotion import PromotionService


class WorktreeCreator:
    """Runs synthesized command batches through a GitGateway.

    Args:
        gateway: GitGateway (or a fake) for the current repository.
        current_owner: Owner login of the repository PRs are opened against.
    """

    def __init__(self, gateway, current_owner=""):
        self._gateway = gateway
        self._current_owner = current_owner

    def create_pr_worktree(self, pr, opts, stdout=None):
        """Create the worktree for a pull request and return its path.

        The batch is not transactional: when a command fails, the commands
        before it stay applied and CommandFailedError propagates.

        Raises:
            WorktreeExistsError: when `<repo>-pr<N>` already exists.
            TopologyError: when no remotes are configured.
            ValidationError: for unsafe names, before anything runs.
            CommandFailedError: for the first failing git command.
        """
        validate_pr_number(pr.number)
        root = self._gateway.resolve_root()
        worktree_path = pr_worktree_path(root, pr.number)
        if os.path.exists(worktree_path):
            raise WorktreeExistsError(
                f"worktree for PR #{pr.number} already exists at {worktree_path}"
            )

        branch_name = resolve_branch_name(pr, opts)
        plan = build_checkout_commands(
            pr,
            self._gateway.list_remotes(),
            self._current_owner,
            opts,
            worktree_path,
            branch_name,
            self._gateway.branch_exists,
        )
        self._gateway.run_batch(plan.commands, stdout=stdout)

        if not opts.detach:
            self._store_pr_metadata(root, branch_name, pr)
        return worktree_path

    def create_branch_worktree(self, branch_name, recurse_submodules=False, stdout=None):
        """Create `<repo>-<branch>` for a local branch, creating the branch if needed."""
        validate_branch_name(branch_name)
        root = self._gateway.resolve_root()
        worktree_path = branch_worktree_path(root, branch_name)
        if os.path.exists(worktree_path):
            raise WorktreeExistsError(
                f"worktree for branch {branch_name} already exists at {worktree_path}"
            )

        if self._gateway.branch_exists(branch_name):
            cmd = ["worktree", "add", worktree_path, branch_name]
        else:
            cmd = ["worktree", "add", "-b", branch_name, worktree_path]
        cmds = [cmd]
        if recurse_submodules:
            cmds.extend(submodule_commands(worktree_path))
        self._gateway.run_batch(cmds, stdout=stdout)

        PromotionService(self._gateway).set_type(branch_name, WorktreeType.BRANCH)
        return worktree_path

    def _store_pr_metadata(self, root, branch_name, pr):
        self._gateway.set_config(root, metadata_key(branch_name, PR_NUMBER), str(pr.number))
        self._gateway.set_config(root, metadata_key(branch_name, PR_TITLE), sanitize_for_git_config(pr.title))
        PromotionService(self._gateway).set_type(branch_name, WorktreeType.PR)
