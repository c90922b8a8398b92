"""Branch-scoped metadata keys stored in the repository's local git config."""

TOOL_NAME = "gh-worktree"

PR_NUMBER = "pr-number"
PR_TITLE = "pr-title"
TYPE = "type"


def metadata_key(branch_name, field):
    """Return e.g. `branch.feature/x.gh-worktree-pr-number`."""
    return f"branch.{branch_name}.{TOOL_NAME}-{field}"


def tracking_key(branch_name, field):
    """Return a git tracking key such as `branch.feature/x.merge`."""
    return f"branch.{branch_name}.{field}"


def read_pr_number(gateway, path, branch_name):
    """Return the persisted PR number for a branch, or None when absent or malformed."""
    if not branch_name:
        return None
    value = gateway.get_config(path, metadata_key(branch_name, PR_NUMBER))
    if not value:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def read_pr_title(gateway, path, branch_name):
    """Return the persisted PR title for a branch, or "" when absent."""
    if not branch_name:
        return ""
    return gateway.get_config(path, metadata_key(branch_name, PR_TITLE)) or ""
