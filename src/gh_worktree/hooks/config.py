"""Load post-create hook commands from `.gh-worktree.yml` in the main worktree.

Example:

    setup:
      run:
        - npm install
        - cp "$GH_WORKTREE_MAIN_DIR/.env" .env
"""

import os

import yaml

from gh_worktree.errors import HookConfigError

CONFIG_FILE_NAME = ".gh-worktree.yml"


def config_path_for(main_worktree_path):
    return os.path.join(main_worktree_path, CONFIG_FILE_NAME)


def load_setup_commands(main_worktree_path):
    """Return the `setup.run` commands, or [] when the file does not exist.

    Raises:
        HookConfigError: when the file cannot be read, is not valid YAML,
            or `setup.run` is not a list of strings.
    """
    path = config_path_for(main_worktree_path)
    if not os.path.isfile(path):
        return []

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except OSError as e:
        raise HookConfigError(f"failed to read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise HookConfigError(f"failed to parse {path}: {e}") from e

    if config is None:
        return []
    if not isinstance(config, dict):
        raise HookConfigError(f"{path}: expected a mapping at the top level")

    setup = config.get("setup") or {}
    if not isinstance(setup, dict):
        raise HookConfigError(f"{path}: 'setup' must be a mapping")
    commands = setup.get("run") or []
    if not isinstance(commands, list) or not all(isinstance(c, str) for c in commands):
        raise HookConfigError(f"{path}: 'setup.run' must be a list of strings")
    return commands
