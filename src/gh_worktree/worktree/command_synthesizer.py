"""Build the git command batch that checks out a pull request into a new worktree.

Everything here is a pure function of the pull request, the configured
remotes and the checkout options: nothing runs git. WorktreeCreator executes
the resulting batch.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from gh_worktree.errors import TopologyError
from gh_worktree.models import PullRequest, Remote
from gh_worktree.validation.validate import (
    TRUSTED_HOST,
    validate_branch_name,
    validate_pr_number,
    validate_repo_name,
    validate_url,
)
from gh_worktree.worktree.checkout_opts import CheckoutOpts
from gh_worktree.worktree.metadata import tracking_key

BASE_REMOTE_PREFERENCE = ("upstream", "origin")


@dataclass
class CommandPlan:
    """Ordered git invocations (without the leading `git`) plus what they were built from."""

    base_remote: Remote
    head_remote: Optional[Remote]
    branch_name: str
    commands: List[List[str]] = field(default_factory=list)


def find_base_remote(remotes: List[Remote]) -> Remote:
    """Prefer `upstream`, then `origin`, then the first configured remote.

    Raises:
        TopologyError: when no remotes are configured.
    """
    for preferred in BASE_REMOTE_PREFERENCE:
        for remote in remotes:
            if remote.name == preferred:
                return remote
    if remotes:
        return remotes[0]
    raise TopologyError("no suitable remote found")


def is_cross_repository(pr: PullRequest, current_owner: str) -> bool:
    return pr.head_repo_owner != current_owner


def find_head_remote(remotes: List[Remote], pr: PullRequest) -> Optional[Remote]:
    """Return the first remote whose URL mentions both the head owner and repo."""
    if not pr.head_repo_owner or not pr.head_repo_name:
        return None
    for remote in remotes:
        if pr.head_repo_owner in remote.url and pr.head_repo_name in remote.url:
            return remote
    return None


def submodule_commands(worktree_path):
    return [
        ["-C", worktree_path, "submodule", "sync", "--recursive"],
        ["-C", worktree_path, "submodule", "update", "--init", "--recursive"],
    ]


def resolve_branch_name(pr: PullRequest, opts: CheckoutOpts) -> str:
    return opts.branch_name or pr.head_ref


def build_checkout_commands(
    pr: PullRequest,
    remotes: List[Remote],
    current_owner: str,
    opts: CheckoutOpts,
    worktree_path: str,
    branch_name: str,
    branch_exists: Callable[[str], bool],
) -> CommandPlan:
    """Return the command batch that creates a worktree tracking the PR head.

    Args:
        pr: The pull request to check out.
        remotes: Locally configured remotes.
        current_owner: Owner of the repository the PR was opened against.
        opts: Checkout options (force, detach, submodules).
        worktree_path: Directory for the new worktree.
        branch_name: Local branch to create or reuse.
        branch_exists: Predicate telling whether a local branch already exists.

    Raises:
        TopologyError: when no remotes are configured.
        ValidationError: when a branch, repository or URL fails validation.
            Raised before any command is produced.
    """
    base_remote = find_base_remote(remotes)

    head_remote = base_remote
    if is_cross_repository(pr, current_owner):
        head_remote = find_head_remote(remotes, pr)

    plan = CommandPlan(base_remote=base_remote, head_remote=head_remote, branch_name=branch_name)
    if head_remote is not None:
        plan.commands.extend(_commands_for_existing_remote(
            head_remote, pr, opts, worktree_path, branch_name, branch_exists,
        ))
    else:
        plan.commands.extend(_commands_for_missing_remote(
            base_remote, pr, opts, worktree_path, branch_name,
        ))

    if opts.recurse_submodules:
        plan.commands.extend(submodule_commands(worktree_path))

    return plan


def _commands_for_existing_remote(remote, pr, opts, worktree_path, branch_name, branch_exists):
    validate_branch_name(pr.head_ref, field="head ref")
    validate_branch_name(branch_name)

    remote_branch = f"{remote.name}/{pr.head_ref}"
    remote_tracking_ref = f"refs/remotes/{remote_branch}"

    if opts.detach:
        return [
            ["fetch", remote.name, f"+refs/heads/{pr.head_ref}", "--no-tags"],
            ["worktree", "add", "--detach", worktree_path, "FETCH_HEAD"],
        ]

    cmds = [["fetch", remote.name, f"+refs/heads/{pr.head_ref}:{remote_tracking_ref}", "--no-tags"]]

    if branch_exists(branch_name):
        if opts.force:
            cmds.append(["worktree", "add", "--force", worktree_path, branch_name])
            cmds.append(["-C", worktree_path, "reset", "--hard", remote_tracking_ref])
        else:
            cmds.append(["worktree", "add", worktree_path, branch_name])
            cmds.append(["-C", worktree_path, "merge", "--ff-only", remote_tracking_ref])
    else:
        cmds.append(["worktree", "add", "-b", branch_name, worktree_path, remote_branch])
        cmds.append(["-C", worktree_path, "config", tracking_key(branch_name, "remote"), remote.name])
        cmds.append(["-C", worktree_path, "config", tracking_key(branch_name, "merge"),
                     f"refs/heads/{pr.head_ref}"])
    return cmds


def _commands_for_missing_remote(base_remote, pr, opts, worktree_path, branch_name):
    validate_pr_number(pr.number)
    validate_branch_name(branch_name)
    validate_branch_name(pr.head_ref, field="head ref")

    pull_ref = f"refs/pull/{pr.number}/head"

    if opts.detach:
        return [
            ["fetch", base_remote.name, pull_ref, "--no-tags"],
            ["worktree", "add", "--detach", worktree_path, "FETCH_HEAD"],
        ]

    fetch_cmd = ["fetch", base_remote.name, f"{pull_ref}:{branch_name}", "--no-tags"]
    if opts.force:
        fetch_cmd.append("--force")
    cmds = [fetch_cmd, ["worktree", "add", worktree_path, branch_name]]

    merge_ref = pull_ref
    if pr.maintainer_can_modify and pr.head_repo_name:
        validate_repo_name(pr.head_repo_name, field="head repository name")
        validate_repo_name(pr.head_repo_owner, field="head repository owner")
        push_remote = f"https://{TRUSTED_HOST}/{pr.head_repo_owner}/{pr.head_repo_name}"
        validate_url(push_remote)
        merge_ref = f"refs/heads/{pr.head_ref}"
        cmds.append(["-C", worktree_path, "config", tracking_key(branch_name, "pushRemote"), push_remote])

    cmds.append(["-C", worktree_path, "config", tracking_key(branch_name, "remote"), base_remote.name])
    cmds.append(["-C", worktree_path, "config", tracking_key(branch_name, "merge"), merge_ref])
    return cmds
