"""Click command that promotes a branch worktree to a PR worktree."""

import click

from gh_worktree.errors import GhWorktreeError, PromotionError
from gh_worktree.models import WorktreeType
from gh_worktree.pr_cmd.context import exit_with_error
from gh_worktree.validation.selector import parse_pr_number
from gh_worktree.validation.validate import validate_branch_name


def promote(pr_ctx, pr_selector, branch_name=None):
    pr_number = parse_pr_number(pr_selector)
    if branch_name is None:
        branch_name = pr_ctx.gateway.current_branch(pr_ctx.cwd)
        if not branch_name:
            raise PromotionError("not on a branch; pass --branch")
    validate_branch_name(branch_name)

    worktree = pr_ctx.registry().find_by_branch(branch_name)
    if worktree is None:
        raise PromotionError(f"no worktree found for branch {branch_name}")
    if worktree.type is WorktreeType.PR:
        raise PromotionError(f"branch {branch_name} is already a PR worktree")

    repo = pr_ctx.repo_ref()
    pr = pr_ctx.gh_client.get_pull_request(repo.owner, repo.name, pr_number)
    if pr.head_ref and pr.head_ref != branch_name:
        click.echo(
            f"Warning: PR #{pr_number} head branch is {pr.head_ref}, not {branch_name}",
            err=True,
        )

    pr_ctx.promotion().promote(branch_name, pr_number, pr.title)

    click.echo(f"Promoted branch {branch_name} to PR #{pr_number}")
    if pr.title:
        click.echo(f"Title: {pr.title}")


@click.command("promote")
@click.argument("pr_selector", metavar="NUMBER")
@click.option("-b", "--branch", "branch_name", metavar="NAME",
              help="Branch whose worktree to promote (default: the current branch)")
@click.pass_obj
def promote_cmd(pr_ctx, pr_selector, branch_name):
    """Mark a branch worktree as the worktree of pull request NUMBER.

    NUMBER may also be a PR URL. The PR title is fetched from GitHub.
    """
    try:
        promote(pr_ctx, pr_selector, branch_name=branch_name)
    except GhWorktreeError as e:
        exit_with_error(e)
