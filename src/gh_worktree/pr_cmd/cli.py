"""Click group for the pull request worktree commands."""

import click

from gh_worktree.pr_cmd.checkout import checkout_cmd
from gh_worktree.pr_cmd.context import PrContext
from gh_worktree.pr_cmd.list_cmd import list_cmd
from gh_worktree.pr_cmd.promote_cmd import promote_cmd
from gh_worktree.pr_cmd.remove_cmd import remove_cmd
from gh_worktree.pr_cmd.switch_cmd import switch_cmd


@click.group("pr")
@click.pass_context
def pr_group(ctx):
    """Manage git worktrees for pull requests and branches."""
    ctx.ensure_object(PrContext)


pr_group.add_command(checkout_cmd)
pr_group.add_command(list_cmd)
pr_group.add_command(remove_cmd)
pr_group.add_command(switch_cmd)
pr_group.add_command(promote_cmd)
