"""Click command that removes a worktree together with its local branch."""

import click

from gh_worktree.errors import GhWorktreeError
from gh_worktree.pr_cmd.context import exit_with_error
from gh_worktree.pr_cmd.selection import describe, find_worktree, managed_worktrees, pick_worktree


def remove(pr_ctx, selector=None, force=False):
    registry = pr_ctx.registry()

    if selector is None:
        candidates = managed_worktrees(registry)
        if not candidates:
            click.echo("No PR worktrees found.")
            return
        target = pick_worktree(candidates, "Select a worktree to remove", pr_ctx.menu_config)
        if target is None:
            click.echo("Cancelled.")
            return
    else:
        target, wanted = find_worktree(registry, selector)
        if target is None:
            click.echo(f"Worktree for {wanted} not found.")
            return

    pr_ctx.remover().remove(target, force=force)

    click.echo(f"Removed worktree for {describe(target)} at {target.path}")
    if target.title:
        click.echo(f"Title: {target.title}")


@click.command("remove")
@click.argument("selector", required=False)
@click.option("--force", is_flag=True,
              help="Remove the worktree even if it has uncommitted changes")
@click.pass_obj
def remove_cmd(pr_ctx, selector, force):
    """Remove a pull request or branch worktree and its local branch.

    SELECTOR is a PR number, a PR URL or a branch name. Without SELECTOR,
    pick one of the existing worktrees.
    """
    try:
        remove(pr_ctx, selector=selector, force=force)
    except GhWorktreeError as e:
        exit_with_error(e)
