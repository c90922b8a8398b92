"""Resolve a selector (or an interactive pick) to one managed worktree."""

from gh_worktree.models import WorktreeType
from gh_worktree.pr_cmd.menu import select_option
from gh_worktree.validation.selector import parse_selector


def worktree_label(wt):
    if wt.type is WorktreeType.PR:
        return f"#{wt.pr_number}\t{wt.branch}\t{wt.display_title}"
    return f"{wt.branch or '(detached)'}\t(branch)"


def describe(wt):
    if wt.type is WorktreeType.PR:
        return f"#{wt.pr_number}"
    return f"branch {wt.branch}"


def find_worktree(registry, selector_text):
    """Return (worktree or None, description of what was looked for)."""
    selector = parse_selector(selector_text)
    if selector.is_pr:
        return registry.find_by_pr_number(selector.pr_number), f"#{selector.pr_number}"
    return registry.find_by_branch(selector.branch), f"branch {selector.branch}"


def managed_worktrees(registry):
    """PR worktrees first, then branch worktrees; the main worktree is left out."""
    worktrees = registry.classified_worktrees()
    return (
        [wt for wt in worktrees if wt.type is WorktreeType.PR]
        + [wt for wt in worktrees if wt.type is WorktreeType.BRANCH]
    )


def pick_worktree(candidates, prompt, menu_config):
    selection = select_option(prompt, [worktree_label(wt) for wt in candidates], config=menu_config)
    if selection is None:
        return None
    return candidates[selection]
