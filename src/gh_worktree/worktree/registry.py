"""WorktreeRegistry: enumerate git worktrees and classify them as main, PR or branch."""

import os
from typing import List, Optional

from gh_worktree.models import WorktreeInfo, WorktreeType
from gh_worktree.worktree.metadata import read_pr_number, read_pr_title
from gh_worktree.worktree.paths import pr_number_from_path, resolved_parent
from gh_worktree.worktree.promotion import PromotionService

_BRANCH_REF_PREFIX = "refs/heads/"


def parse_worktree_porcelain(output: str) -> List[WorktreeInfo]:
    """Parse `git worktree list --porcelain` into WorktreeInfo records.

    Records are separated by blank lines; detached worktrees have no
    `branch` line and keep an empty branch.
    """
    worktrees = []
    current = None
    for line in output.splitlines():
        if not line.strip():
            if current is not None:
                worktrees.append(current)
                current = None
            continue
        if line.startswith("worktree "):
            if current is not None:
                worktrees.append(current)
            current = WorktreeInfo(path=line[len("worktree "):])
        elif current is None:
            continue
        elif line.startswith("HEAD "):
            current.commit = line[len("HEAD "):]
        elif line.startswith("branch "):
            ref = line[len("branch "):]
            current.branch = ref[len(_BRANCH_REF_PREFIX):] if ref.startswith(_BRANCH_REF_PREFIX) else ref
    if current is not None:
        worktrees.append(current)
    return worktrees


def _same_path(a, b):
    return os.path.realpath(a) == os.path.realpath(b)


class WorktreeRegistry:
    """Lists worktrees of one repository and enriches them with persisted metadata.

    Classification order for a worktree other than the main one:
      1. `<repo>-pr<N>` directory next to the main worktree -> PR N
      2. persisted type tag (or a bare pr-number key) -> that type
      3. untagged `<repo>-...` directory next to the main worktree -> branch
    Anything else is an unrelated worktree and is left out of the listings.
    """

    def __init__(self, gateway, promotion=None):
        self._gateway = gateway
        self._promotion = promotion or PromotionService(gateway)

    def list_worktrees(self) -> List[WorktreeInfo]:
        return parse_worktree_porcelain(self._gateway.list_worktrees_porcelain())

    def classified_worktrees(self) -> List[WorktreeInfo]:
        """Return every worktree this tool manages, main first, with type and metadata set."""
        root = self._gateway.resolve_root()
        repo_name = os.path.basename(root)
        parent_dir = resolved_parent(root)

        result = []
        for info in self.list_worktrees():
            worktree_type = self._classify(info, root, repo_name, parent_dir)
            if worktree_type is None:
                continue
            info.type = worktree_type
            if worktree_type is not WorktreeType.MAIN:
                self._enrich(info, root)
            result.append(info)
        return result

    def classify(self, info: WorktreeInfo) -> Optional[WorktreeType]:
        root = self._gateway.resolve_root()
        return self._classify(info, root, os.path.basename(root), resolved_parent(root))

    def pr_worktrees(self) -> List[WorktreeInfo]:
        return [wt for wt in self.classified_worktrees() if wt.type is WorktreeType.PR]

    def branch_worktrees(self) -> List[WorktreeInfo]:
        return [wt for wt in self.classified_worktrees() if wt.type is WorktreeType.BRANCH]

    def find_by_pr_number(self, pr_number) -> Optional[WorktreeInfo]:
        for wt in self.pr_worktrees():
            if wt.pr_number == pr_number:
                return wt
        return None

    def find_by_branch(self, branch_name) -> Optional[WorktreeInfo]:
        for wt in self.classified_worktrees():
            if wt.type is not WorktreeType.MAIN and wt.branch == branch_name:
                return wt
        return None

    def _classify(self, info, root, repo_name, parent_dir):
        if _same_path(info.path, root):
            return WorktreeType.MAIN
        if resolved_parent(info.path) != parent_dir:
            return None

        pr_number = pr_number_from_path(info.path, repo_name)
        if pr_number is not None:
            info.pr_number = pr_number
            return WorktreeType.PR

        persisted = self._promotion.get_type(info.branch)
        if persisted is not None:
            return persisted

        if os.path.basename(os.path.normpath(info.path)).startswith(f"{repo_name}-"):
            return WorktreeType.BRANCH
        return None

    def _enrich(self, info, root):
        info.title = read_pr_title(self._gateway, root, info.branch)
        if info.pr_number is None and info.type is WorktreeType.PR:
            info.pr_number = read_pr_number(self._gateway, root, info.branch)
