"""Click command that lists PR (and optionally branch) worktrees."""

import click

from gh_worktree.errors import GhWorktreeError
from gh_worktree.models import WorktreeType
from gh_worktree.pr_cmd.context import exit_with_error


def list_worktrees(pr_ctx, include_branches=False):
    worktrees = pr_ctx.registry().classified_worktrees()
    pr_worktrees = [wt for wt in worktrees if wt.type is WorktreeType.PR]
    branch_worktrees = [wt for wt in worktrees if wt.type is WorktreeType.BRANCH]

    if not pr_worktrees and not (include_branches and branch_worktrees):
        click.echo("No worktrees found." if include_branches else "No PR worktrees found.")
        return

    if pr_worktrees:
        click.echo("PR worktrees:")
        for wt in pr_worktrees:
            number = f"#{wt.pr_number}" if wt.pr_number is not None else "#?"
            click.echo(f"  {number}\t{wt.branch}\t{wt.display_title}\t{pr_ctx.relative_path(wt.path)}")

    if include_branches and branch_worktrees:
        if pr_worktrees:
            click.echo()
        click.echo("Branch worktrees:")
        for wt in branch_worktrees:
            click.echo(f"  {wt.branch or '(detached)'}\t{pr_ctx.relative_path(wt.path)}")


@click.command("list")
@click.option("-a", "--all", "include_branches", is_flag=True,
              help="Also list branch worktrees")
@click.pass_obj
def list_cmd(pr_ctx, include_branches):
    """List pull request worktrees."""
    try:
        list_worktrees(pr_ctx, include_branches=include_branches)
    except GhWorktreeError as e:
        exit_with_error(e)
