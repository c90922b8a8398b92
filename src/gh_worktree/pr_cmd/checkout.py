"""Click command that checks out a pull request or local branch into a new worktree."""

import sys

import click

from gh_worktree.errors import GhWorktreeError, HookConfigError
from gh_worktree.hooks.config import load_setup_commands
from gh_worktree.pr_cmd.context import exit_with_error, info
from gh_worktree.pr_cmd.menu import select_option
from gh_worktree.validation.selector import parse_selector
from gh_worktree.worktree.checkout_opts import CheckoutOpts


def checkout(opts, pr_ctx):
    """Create the worktree named by opts.selector, or pick an open PR interactively.

    Returns:
        Path of the new worktree, or None when nothing was created.
    """
    git_stdout = sys.stderr if opts.shell_mode else None

    if opts.selector is None:
        pr = _select_open_pr(opts, pr_ctx)
        if pr is None:
            return None
    else:
        selector = parse_selector(opts.selector)
        if not selector.is_pr:
            return _checkout_branch(selector.branch, opts, pr_ctx, git_stdout)
        repo = pr_ctx.repo_ref()
        pr = pr_ctx.gh_client.get_pull_request(repo.owner, repo.name, selector.pr_number)

    worktree_path = pr_ctx.creator().create_pr_worktree(pr, opts, stdout=git_stdout)

    info(f"Created worktree for #{pr.number} at {worktree_path}", opts.shell_mode)
    if pr.title:
        info(f"Title: {pr.title}", opts.shell_mode)
    _run_setup(worktree_path, opts, pr_ctx)
    return worktree_path


def _select_open_pr(opts, pr_ctx):
    repo = pr_ctx.repo_ref()
    prs = pr_ctx.gh_client.list_open_pull_requests(repo.owner, repo.name)
    if not prs:
        info("No open pull requests found.", opts.shell_mode)
        return None

    selection = select_option(
        "Select a pull request to check out",
        [pr.candidate_label() for pr in prs],
        config=pr_ctx.menu_config,
    )
    if selection is None:
        info("Cancelled.", opts.shell_mode)
        return None
    return prs[selection]


def _checkout_branch(branch_name, opts, pr_ctx, git_stdout):
    pr_only = [flag for flag, value in (
        ("--force", opts.force),
        ("--detach", opts.detach),
        ("--branch", opts.branch_name),
    ) if value]
    if pr_only:
        raise click.UsageError(
            f"{', '.join(pr_only)} can only be used when checking out a pull request"
        )

    worktree_path = pr_ctx.branch_creator().create_branch_worktree(
        branch_name,
        recurse_submodules=opts.recurse_submodules,
        stdout=git_stdout,
    )
    info(f"Created worktree for branch {branch_name} at {worktree_path}", opts.shell_mode)
    _run_setup(worktree_path, opts, pr_ctx)
    return worktree_path


def _run_setup(worktree_path, opts, pr_ctx):
    """Run post-create hooks; problems with them never fail the checkout."""
    main_path = pr_ctx.gateway.resolve_root()
    if opts.skip_setup:
        try:
            has_hooks = bool(load_setup_commands(main_path))
        except HookConfigError:
            has_hooks = True
        if has_hooks:
            info("  (setup skipped)", opts.shell_mode)
        return

    output = sys.stderr if opts.shell_mode else sys.stdout
    try:
        pr_ctx.hook_runner(
            worktree_path,
            main_path,
            output=output,
            stdout=sys.stderr if opts.shell_mode else None,
        )
    except HookConfigError as e:
        click.echo(f"Warning: {e}", err=True)


@click.command("checkout")
@click.argument("selector", required=False)
@click.option("--recurse-submodules", is_flag=True,
              help="Update all submodules after checkout")
@click.option("-f", "--force", is_flag=True,
              help="Reset the existing local branch to the latest state of the pull request")
@click.option("--detach", is_flag=True,
              help="Checkout PR with a detached HEAD")
@click.option("-b", "--branch", "branch_name", metavar="NAME",
              help="Local branch name to use (default: the name of the head branch)")
@click.option("-s", "--shell", "shell_mode", is_flag=True,
              help="Output the worktree path only, for use in shell functions")
@click.option("--no-setup", "skip_setup", is_flag=True,
              help="Skip the post-create commands from .gh-worktree.yml")
@click.pass_obj
def checkout_cmd(pr_ctx, **kwargs):
    """Check out a pull request in a new git worktree.

    SELECTOR is a PR number (32), a PR URL
    (https://github.com/OWNER/REPO/pull/32) or a local branch name.
    Without SELECTOR, pick one of the open pull requests.
    """
    opts = CheckoutOpts(**kwargs)
    opts.validate()
    try:
        worktree_path = checkout(opts, pr_ctx)
    except GhWorktreeError as e:
        exit_with_error(e, opts.shell_mode)
    if opts.shell_mode and worktree_path:
        click.echo(worktree_path, nl=False)
