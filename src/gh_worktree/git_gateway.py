"""GitGateway: wraps GitPython Repo for remote, config, branch and worktree queries.

Provides an injectable interface for the git operations gh-worktree needs,
enabling FakeGitGateway in tests. The gateway is bound to an explicit
working directory and never consults the process cwd itself.
"""

import os
import subprocess

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from gh_worktree.errors import CommandFailedError, TopologyError
from gh_worktree.models import Remote

# `git config` exits 1 when the requested key is not set
_CONFIG_KEY_MISSING = 1


class GitGateway:
    """Git queries and command execution for one repository.

    Args:
        working_dir: Any directory inside the repository (main or linked worktree).
    """

    def __init__(self, working_dir):
        try:
            self._repo = Repo(working_dir, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise TopologyError(f"{working_dir} is not in a git repository") from e
        self._working_dir = self._repo.working_tree_dir

    def list_remotes(self):
        """Return configured remotes with their fetch URLs, in git's order."""
        return [Remote(name=remote.name, url=remote.url) for remote in self._repo.remotes]

    def resolve_root(self):
        """Return the main worktree root, even when called from a linked worktree."""
        common_dir = self._repo.common_dir
        if not os.path.isabs(common_dir):
            common_dir = os.path.join(self._working_dir, common_dir)
        return os.path.dirname(os.path.normpath(common_dir))

    def branch_exists(self, name):
        return name in [head.name for head in self._repo.heads]

    def current_branch(self, path):
        """Return the branch checked out at path, or "" when detached or unreadable."""
        try:
            branch = Repo(path, search_parent_directories=True).git.rev_parse("--abbrev-ref", "HEAD").strip()
        except (GitCommandError, InvalidGitRepositoryError, NoSuchPathError):
            return ""
        return "" if branch == "HEAD" else branch

    def get_config(self, path, key):
        """Return the local config value for key, or None when it is not set."""
        try:
            return self._git_at(path).config("--local", key).strip()
        except GitCommandError as e:
            if e.status == _CONFIG_KEY_MISSING:
                return None
            raise CommandFailedError(["config", "--local", key], e.status, e.stderr) from e

    def set_config(self, path, key, value):
        try:
            self._git_at(path).config(key, value)
        except GitCommandError as e:
            raise CommandFailedError(["config", key, value], e.status, e.stderr) from e

    def list_worktrees_porcelain(self):
        try:
            return self._repo.git.worktree("list", "--porcelain")
        except GitCommandError as e:
            raise CommandFailedError(["worktree", "list", "--porcelain"], e.status, e.stderr) from e

    def remove_worktree(self, path, force=False):
        args = ["worktree", "remove"]
        if force:
            args.append("--force")
        args.append(path)
        self.run_batch([args])

    def delete_branch(self, name):
        self.run_batch([["branch", "-D", name]])

    def run_batch(self, commands, stdout=None, stderr=None):
        """Run git commands in order, stopping at the first failure.

        Child output goes to the given streams (inherited when None). Commands
        that already ran are not undone when a later one fails.

        Raises:
            CommandFailedError: for the first command that exits non-zero.
        """
        for args in commands:
            result = subprocess.run(
                ["git", *args],
                cwd=self._working_dir,
                stdout=stdout,
                stderr=stderr,
            )
            if result.returncode != 0:
                raise CommandFailedError(args, result.returncode)

    def _git_at(self, path):
        if os.path.realpath(path) == os.path.realpath(self._working_dir):
            return self._repo.git
        return Repo(path, search_parent_directories=True).git
