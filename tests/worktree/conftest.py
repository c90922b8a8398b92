"""Shared fixtures for worktree tests."""

import os
import sys
import tempfile

import pytest
from git import Repo

# Ensure tests/worktree/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_git_gateway import FakeGitGateway  # noqa: E402, F401
from fake_github_client import FakeGitHubClient  # noqa: E402, F401


@pytest.fixture
def git_repo_with_commit():
    """Create `<tmp>/repo` with an initial commit; yields (repo_dir, repo)."""
    with tempfile.TemporaryDirectory() as tmpdir:
        repo_dir = os.path.join(os.path.realpath(tmpdir), "repo")
        os.makedirs(repo_dir)
        repo = Repo.init(repo_dir)
        repo.config_writer().set_value("user", "email", "test@test.com").release()
        repo.config_writer().set_value("user", "name", "Test").release()

        readme = os.path.join(repo_dir, "README.md")
        with open(readme, "w") as f:
            f.write("# Test Repo")
        repo.index.add(["README.md"])
        repo.index.commit("Initial commit")

        yield repo_dir, repo
