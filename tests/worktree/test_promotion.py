"""Tests for PromotionService."""

import pytest

from fake_git_gateway import FakeGitGateway
from gh_worktree.errors import PromotionError, ValidationError
from gh_worktree.models import WorktreeType
from gh_worktree.worktree.promotion import PromotionService


@pytest.mark.unit
class TestGetType:

    def test_unset(self):
        assert PromotionService(FakeGitGateway()).get_type("feature") is None

    def test_empty_branch(self):
        assert PromotionService(FakeGitGateway()).get_type("") is None

    def test_tagged(self):
        gateway = FakeGitGateway()
        gateway.config["branch.feature.gh-worktree-type"] = "branch"
        assert PromotionService(gateway).get_type("feature") is WorktreeType.BRANCH

    def test_bare_pr_number_means_pr(self):
        gateway = FakeGitGateway()
        gateway.config["branch.feature.gh-worktree-pr-number"] = "5"
        assert PromotionService(gateway).get_type("feature") is WorktreeType.PR

    def test_main_tag_is_ignored(self):
        gateway = FakeGitGateway()
        gateway.config["branch.feature.gh-worktree-type"] = "main"
        assert PromotionService(gateway).get_type("feature") is None


@pytest.mark.unit
class TestSetType:

    def test_writes_tag_at_root(self):
        gateway = FakeGitGateway(root="/r/repo")
        PromotionService(gateway).set_type("feature", WorktreeType.BRANCH)
        assert gateway.calls == [("set_config", "/r/repo", "branch.feature.gh-worktree-type", "branch")]

    def test_main_is_never_written(self):
        with pytest.raises(ValueError):
            PromotionService(FakeGitGateway()).set_type("feature", WorktreeType.MAIN)


@pytest.mark.unit
class TestPromote:

    @pytest.mark.parametrize("initial", [None, "branch"])
    def test_sets_all_three_keys(self, initial):
        gateway = FakeGitGateway()
        if initial:
            gateway.config["branch.feature.gh-worktree-type"] = initial

        PromotionService(gateway).promote("feature", 12, "Title $(whoami)")

        assert gateway.config == {
            "branch.feature.gh-worktree-type": "pr",
            "branch.feature.gh-worktree-pr-number": "12",
            "branch.feature.gh-worktree-pr-title": "Title whoami",
        }

    def test_rejected_when_already_pr(self):
        gateway = FakeGitGateway()
        gateway.config["branch.feature.gh-worktree-type"] = "pr"

        with pytest.raises(PromotionError, match="already a PR worktree"):
            PromotionService(gateway).promote("feature", 12, "t")
        assert gateway.config == {"branch.feature.gh-worktree-type": "pr"}

    def test_invalid_number(self):
        with pytest.raises(ValidationError):
            PromotionService(FakeGitGateway()).promote("feature", 0, "t")

    def test_invalid_branch(self):
        with pytest.raises(ValidationError):
            PromotionService(FakeGitGateway()).promote("bad;branch", 1, "t")
