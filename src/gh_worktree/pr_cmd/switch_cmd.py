"""Click command that prints where an existing worktree lives.

The tool cannot change the parent shell's directory; `--shell` prints only
the path so a wrapper function (see `gh-worktree shell-init`) can `cd`.
"""

import click

from gh_worktree.errors import GhWorktreeError
from gh_worktree.pr_cmd.context import exit_with_error, info
from gh_worktree.pr_cmd.selection import describe, find_worktree, managed_worktrees, pick_worktree


def switch(pr_ctx, selector=None, shell_mode=False):
    """Return the relative path of the selected worktree, or None."""
    registry = pr_ctx.registry()

    if selector is None:
        candidates = managed_worktrees(registry)
        if not candidates:
            info("No PR worktrees found.", shell_mode)
            return None
        target = pick_worktree(candidates, "Select a worktree to switch to", pr_ctx.menu_config)
        if target is None:
            info("Cancelled.", shell_mode)
            return None
    else:
        target, wanted = find_worktree(registry, selector)
        if target is None:
            info(f"Worktree for {wanted} not found.", shell_mode)
            return None

    rel_path = pr_ctx.relative_path(target.path)
    if shell_mode:
        click.echo(rel_path, nl=False)
    else:
        click.echo(f"To switch to worktree for {describe(target)}:")
        click.echo(f"cd {rel_path}")
    return rel_path


@click.command("switch")
@click.argument("selector", required=False)
@click.option("-s", "--shell", "shell_mode", is_flag=True,
              help="Output path only for use in shell functions")
@click.pass_obj
def switch_cmd(pr_ctx, selector, shell_mode):
    """Switch to an existing pull request or branch worktree.

    \b
    Use as a shell function (see `gh-worktree shell-init`):
      ghws() {
        local target=$(gh-worktree pr switch --shell "$@")
        [ -n "$target" ] && cd "$target"
      }
    """
    try:
        switch(pr_ctx, selector=selector, shell_mode=shell_mode)
    except GhWorktreeError as e:
        exit_with_error(e, shell_mode)
