"""FakeGitHubClient: test double for GitHubClient."""

from gh_worktree.errors import PullRequestFetchError
from gh_worktree.models import PullRequest, RepoRef


def make_pr(number=42, head_ref="feature", owner="owner", name="repo",
            title="Add feature", maintainer_can_modify=False):
    return PullRequest(
        number=number,
        title=title,
        head_ref=head_ref,
        head_repo_name=name,
        head_repo_owner=owner,
        base_repo_full_name="owner/repo",
        maintainer_can_modify=maintainer_can_modify,
    )


class FakeGitHubClient:
    """Test double for GitHubClient that serves canned pull requests."""

    def __init__(self, owner="owner", name="repo"):
        self._repo = RepoRef(owner=owner, name=name)
        self._pull_requests = {}
        self._open = []
        self.calls = []

    def add_pull_request(self, pr, open_pr=True):
        self._pull_requests[pr.number] = pr
        if open_pr:
            self._open.append(pr)

    def current_repo(self):
        self.calls.append(("current_repo",))
        return self._repo

    def get_pull_request(self, owner, repo, number):
        self.calls.append(("get_pull_request", owner, repo, number))
        if number not in self._pull_requests:
            raise PullRequestFetchError(f"gh api repos/{owner}/{repo}/pulls/{number} failed: Not Found")
        return self._pull_requests[number]

    def list_open_pull_requests(self, owner, repo):
        self.calls.append(("list_open_pull_requests", owner, repo))
        return list(self._open)
