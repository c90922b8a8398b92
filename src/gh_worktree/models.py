"""Value types shared by the gateway, the GitHub client and the worktree services."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class WorktreeType(Enum):
    MAIN = "main"
    PR = "pr"
    BRANCH = "branch"


@dataclass(frozen=True)
class Remote:
    name: str
    url: str


@dataclass(frozen=True)
class RepoRef:
    """Owner and name of the GitHub repository the local clone points at."""

    owner: str
    name: str


@dataclass(frozen=True)
class PullRequest:
    """Snapshot of a pull request as returned by the GitHub REST API."""

    number: int
    title: str
    head_ref: str
    head_repo_name: str
    head_repo_owner: str
    base_repo_full_name: str = ""
    maintainer_can_modify: bool = False

    @classmethod
    def from_api(cls, data):
        """Build a PullRequest from a `repos/{owner}/{repo}/pulls/{n}` payload.

        `head.repo` is null when the fork has been deleted.
        """
        head = data.get("head") or {}
        head_repo = head.get("repo") or {}
        owner = head_repo.get("owner") or {}
        base_repo = (data.get("base") or {}).get("repo") or {}
        return cls(
            number=data["number"],
            title=data.get("title") or "",
            head_ref=head.get("ref") or "",
            head_repo_name=head_repo.get("name") or "",
            head_repo_owner=owner.get("login") or "",
            base_repo_full_name=base_repo.get("full_name") or "",
            maintainer_can_modify=bool(data.get("maintainer_can_modify", False)),
        )

    def candidate_label(self):
        """Format the PR for a selection list: number, head branch, head repo."""
        return f"#{self.number}\t{self.head_ref}\t{self.head_repo_owner}/{self.head_repo_name}"


@dataclass
class WorktreeInfo:
    path: str
    commit: str = ""
    branch: str = ""
    pr_number: Optional[int] = None
    title: str = ""
    type: Optional[WorktreeType] = None

    @property
    def display_title(self):
        return self.title or "(no title)"
