"""Run post-create hook commands in a freshly created worktree."""

import os
import subprocess
import sys

from gh_worktree.hooks.config import load_setup_commands

MAIN_DIR_ENV_VAR = "GH_WORKTREE_MAIN_DIR"


def hook_environment(main_worktree_path, base_env=None):
    """Return the environment for hook commands: base_env plus GH_WORKTREE_MAIN_DIR."""
    env = dict(os.environ if base_env is None else base_env)
    env[MAIN_DIR_ENV_VAR] = main_worktree_path
    return env


def run_post_create_hooks(new_worktree_path, main_worktree_path, output=None, stdout=None, base_env=None):
    """Run each configured setup command with the new worktree as cwd.

    Command output goes to stdout (inherited when None); shell mode passes
    sys.stderr so stdout stays free for the worktree path.
    A failing command is recorded as a warning and the remaining commands
    still run.

    Returns:
        List of warning strings, empty when every command succeeded.
    """
    if output is None:
        output = sys.stdout
    commands = load_setup_commands(main_worktree_path)
    if not commands:
        return []

    print("→ Running post-creation setup...", file=output)
    env = hook_environment(main_worktree_path, base_env)
    warnings = []
    for command in commands:
        print(f"  ✓ {command}", file=output)
        result = subprocess.run(
            ["sh", "-c", command],
            cwd=new_worktree_path,
            env=env,
            stdout=stdout,
        )
        if result.returncode != 0:
            warning = f"Command failed (exit {result.returncode}): {command}"
            warnings.append(warning)
            print(f"  ⚠ {warning}", file=output)

    if warnings:
        print("  ⚠ Setup completed with warnings", file=output)
    else:
        print("  ✓ Setup completed", file=output)
    return warnings
