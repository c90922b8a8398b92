"""GitHubClient: wraps the `gh` CLI calls that fetch pull request data."""

import json
import subprocess
from typing import List

from gh_worktree.errors import PullRequestFetchError
from gh_worktree.models import PullRequest, RepoRef


class GitHubClient:
    """Wraps GitHub CLI (gh) calls for pull request lookups.

    All subprocess calls go through _run_gh() for consistency. Network and
    authentication failures surface as PullRequestFetchError.
    """

    def __init__(self, cwd=None):
        self._cwd = cwd

    def _run_gh(self, args, **kwargs):
        return subprocess.run(
            args,
            capture_output=True,
            text=True,
            cwd=self._cwd,
            **kwargs,
        )

    def _api_json(self, endpoint):
        result = self._run_gh(["gh", "api", endpoint])
        if result.returncode != 0:
            raise PullRequestFetchError(f"gh api {endpoint} failed: {result.stderr.strip()}")
        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise PullRequestFetchError(f"gh api {endpoint} returned invalid JSON") from e

    def current_repo(self) -> RepoRef:
        result = self._run_gh(
            ["gh", "repo", "view", "--json", "owner,name"]
        )
        if result.returncode != 0:
            raise PullRequestFetchError(
                f"failed to get current repository: {result.stderr.strip()}"
            )
        try:
            data = json.loads(result.stdout)
            return RepoRef(owner=data["owner"]["login"], name=data["name"])
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            raise PullRequestFetchError("gh repo view returned unexpected output") from e

    def get_pull_request(self, owner: str, repo: str, number: int) -> PullRequest:
        data = self._api_json(f"repos/{owner}/{repo}/pulls/{number}")
        return PullRequest.from_api(data)

    def list_open_pull_requests(self, owner: str, repo: str) -> List[PullRequest]:
        data = self._api_json(f"repos/{owner}/{repo}/pulls?state=open&per_page=100")
        return [PullRequest.from_api(item) for item in data]
