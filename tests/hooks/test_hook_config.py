"""Tests for loading `.gh-worktree.yml`."""

import pytest

from gh_worktree.errors import HookConfigError
from gh_worktree.hooks.config import CONFIG_FILE_NAME, load_setup_commands


def _write_config(directory, text):
    (directory / CONFIG_FILE_NAME).write_text(text)


@pytest.mark.unit
class TestLoadSetupCommands:

    def test_missing_file_means_no_hooks(self, tmp_path):
        assert load_setup_commands(str(tmp_path)) == []

    def test_empty_file_means_no_hooks(self, tmp_path):
        _write_config(tmp_path, "")
        assert load_setup_commands(str(tmp_path)) == []

    def test_reads_run_list(self, tmp_path):
        _write_config(tmp_path, "setup:\n  run:\n    - npm install\n    - cp $GH_WORKTREE_MAIN_DIR/.env .env\n")

        assert load_setup_commands(str(tmp_path)) == [
            "npm install",
            "cp $GH_WORKTREE_MAIN_DIR/.env .env",
        ]

    def test_setup_without_run(self, tmp_path):
        _write_config(tmp_path, "setup: {}\n")
        assert load_setup_commands(str(tmp_path)) == []

    def test_invalid_yaml(self, tmp_path):
        _write_config(tmp_path, "setup: [unclosed\n")
        with pytest.raises(HookConfigError, match="failed to parse"):
            load_setup_commands(str(tmp_path))

    @pytest.mark.parametrize("text", [
        "- just\n- a list\n",
        "setup: npm install\n",
        "setup:\n  run: npm install\n",
        "setup:\n  run:\n    - 1\n",
    ])
    def test_wrong_shape(self, tmp_path, text):
        _write_config(tmp_path, text)
        with pytest.raises(HookConfigError):
            load_setup_commands(str(tmp_path))
