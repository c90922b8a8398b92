"""Worktree directory naming.

Worktrees live next to the main worktree:
    /path/to/repo -> /path/to/repo-pr123        (pull request)
    /path/to/repo -> /path/to/repo-feature-x    (branch feature/x)
"""

import os
import re

_PR_SUFFIX = re.compile(r"pr([0-9]+)")


def normalize_branch_for_path(branch_name):
    """Turn a branch name into a single safe path component.

    `/` becomes `-`, runs of `-` collapse, runs of dots collapse to one dot
    and leading dots are dropped.
    """
    result = branch_name.replace("/", "-")
    result = re.sub(r"-+", "-", result)
    result = re.sub(r"\.{2,}", ".", result)
    return result.lstrip(".")


def pr_worktree_path(repo_root, pr_number):
    parent_dir = os.path.dirname(repo_root)
    repo_name = os.path.basename(repo_root)
    return os.path.join(parent_dir, f"{repo_name}-pr{pr_number}")


def branch_worktree_path(repo_root, branch_name):
    """Return `<repo>-<normalized branch>`.

    A branch whose normalized name looks like `prN` gets a `branch-` prefix
    so it never takes the path of PR N.
    """
    parent_dir = os.path.dirname(repo_root)
    repo_name = os.path.basename(repo_root)
    suffix = normalize_branch_for_path(branch_name)
    if _PR_SUFFIX.fullmatch(suffix):
        suffix = f"branch-{suffix}"
    return os.path.join(parent_dir, f"{repo_name}-{suffix}")


def pr_number_from_path(path, repo_name):
    """Return N when the basename is exactly `<repo_name>-prN`, else None."""
    prefix = f"{repo_name}-"
    base_name = os.path.basename(os.path.normpath(path))
    if not base_name.startswith(prefix):
        return None
    match = _PR_SUFFIX.fullmatch(base_name[len(prefix):])
    if match is None:
        return None
    return int(match.group(1))


def resolved_parent(path):
    """Return the symlink-resolved parent directory, or the plain parent if that fails."""
    parent_dir = os.path.dirname(os.path.normpath(path))
    try:
        return os.path.realpath(parent_dir, strict=True)
    except OSError:
        return parent_dir
