"""Top-level Click group for the gh-worktree CLI."""

import click

from gh_worktree.pr_cmd.cli import pr_group
from gh_worktree.shell_init import shell_init


@click.group()
def main():
    """gh-worktree - git worktrees for GitHub pull requests."""


main.add_command(pr_group)
main.add_command(shell_init)
