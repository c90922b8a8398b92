"""Shared fixtures for pr command tests."""

import os
import sys

# The fakes live with the worktree tests.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "worktree"))

from fake_git_gateway import FakeGitGateway  # noqa: E402, F401
from fake_github_client import FakeGitHubClient  # noqa: E402, F401
