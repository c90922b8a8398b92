"""PrContext: collaborators shared by the `pr` subcommands.

Commands receive it through `click.pass_obj`. Tests pass a PrContext built
from fakes via `CliRunner().invoke(main, args, obj=context)`; the real
gateway and GitHub client are only created on first use.
"""

import os
import sys

import click

from gh_worktree.git_gateway import GitGateway
from gh_worktree.github_client import GitHubClient
from gh_worktree.hooks.runner import run_post_create_hooks
from gh_worktree.pr_cmd.menu import MenuConfig
from gh_worktree.worktree.creator import WorktreeCreator
from gh_worktree.worktree.promotion import PromotionService
from gh_worktree.worktree.registry import WorktreeRegistry
from gh_worktree.worktree.remover import WorktreeRemover


class PrContext:

    def __init__(self, cwd=None, gateway=None, gh_client=None, hook_runner=None, menu_config=None):
        self.cwd = cwd or os.getcwd()
        self._gateway = gateway
        self._gh_client = gh_client
        self._repo_ref = None
        self.hook_runner = hook_runner or run_post_create_hooks
        self.menu_config = menu_config or MenuConfig()

    @property
    def gateway(self):
        if self._gateway is None:
            self._gateway = GitGateway(self.cwd)
        return self._gateway

    @property
    def gh_client(self):
        if self._gh_client is None:
            self._gh_client = GitHubClient(cwd=self.cwd)
        return self._gh_client

    def repo_ref(self):
        if self._repo_ref is None:
            self._repo_ref = self.gh_client.current_repo()
        return self._repo_ref

    def registry(self):
        return WorktreeRegistry(self.gateway)

    def promotion(self):
        return PromotionService(self.gateway)

    def creator(self):
        return WorktreeCreator(self.gateway, current_owner=self.repo_ref().owner)

    def branch_creator(self):
        return WorktreeCreator(self.gateway)

    def remover(self):
        return WorktreeRemover(self.gateway)

    def relative_path(self, path):
        """Return path relative to the invocation directory, falling back to path."""
        try:
            return os.path.relpath(path, self.cwd)
        except ValueError:
            return path


def info(message, shell_mode=False):
    """Print a human-readable line unless running in shell mode."""
    if not shell_mode:
        click.echo(message)


def exit_with_error(error, shell_mode=False):
    """Report an unrecoverable error and exit 1; shell mode stays silent."""
    if not shell_mode:
        click.echo(f"Error: {error}", err=True)
    sys.exit(1)
