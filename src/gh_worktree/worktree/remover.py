"""Remove a worktree and the local branch it had checked out."""

import click

from gh_worktree.errors import CommandFailedError


class WorktreeRemover:

    def __init__(self, gateway):
        self._gateway = gateway

    def remove(self, info, force=False):
        """Remove the worktree, then delete its branch on a best-effort basis.

        Deleting the branch also drops its `branch.<name>.*` metadata. A
        failed branch deletion is reported as a warning.

        Returns:
            True when the branch was deleted (or there was none), False otherwise.

        Raises:
            CommandFailedError: when `git worktree remove` fails.
        """
        self._gateway.remove_worktree(info.path, force=force)

        if not info.branch:
            return True
        try:
            self._gateway.delete_branch(info.branch)
        except CommandFailedError as e:
            click.echo(f"Warning: failed to delete branch {info.branch}: {e}", err=True)
            return False
        return True
