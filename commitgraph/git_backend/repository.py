"""
Read-only git repository access using pygit2
"""

import itertools
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pygit2

from commitgraph.graph.types import BranchHead, Commit

logger = logging.getLogger(__name__)


class GraphRepository:
    """Supplies commits and branch heads for the commit graph"""

    def __init__(self, repo_path: str | None = None) -> None:
        """Initialize repository"""
        if repo_path is None:
            repo_path = self._find_repo(Path.cwd())
        else:
            repo_path = self._find_repo(Path(repo_path).resolve())

        self.repo = pygit2.Repository(repo_path)

    @staticmethod
    def _find_repo(start: Path) -> str:
        """Find git repository in start directory or parents"""
        current = start
        while True:
            if (current / ".git").exists():
                return str(current)
            if current == current.parent:
                break
            current = current.parent
        raise ValueError("Not in a git repository")

    @property
    def path(self) -> str:
        return str(Path(self.repo.workdir or self.repo.path))

    def _branch_tips(self) -> list[pygit2.Oid]:
        """OIDs of all local branch tips, falling back to HEAD."""
        tips: list[pygit2.Oid] = []
        for branch_name in self.repo.branches.local:
            branch = self.repo.branches.local[branch_name]
            tips.append(branch.peel(pygit2.Commit).id)

        if not tips and not self.repo.head_is_unborn:
            tips.append(self.repo.head.peel(pygit2.Commit).id)
        return tips

    def load_commits(self, limit: int) -> list[Commit]:
        """
        Load up to ``limit`` commits reachable from any local branch.

        Commits come newest first in topological order, so every commit
        appears before its parents. Asking again with a bigger limit returns
        the same commits followed by older ones.
        """
        tips = self._branch_tips()
        if not tips or limit <= 0:
            return []

        walker = self.repo.walk(
            tips[0], pygit2.enums.SortMode.TOPOLOGICAL | pygit2.enums.SortMode.TIME
        )
        for tip in tips[1:]:
            walker.push(tip)

        commits = [self._to_commit(c) for c in itertools.islice(walker, limit)]
        logger.debug("Loaded %d commits (limit %d) from %s", len(commits), limit, self.path)
        return commits

    @staticmethod
    def _to_commit(c: pygit2.Commit) -> Commit:
        tz = timezone(timedelta(minutes=c.commit_time_offset))
        author = c.author
        return Commit(
            id=str(c.id),
            parent_ids=tuple(str(p) for p in c.parent_ids),
            message=c.message.strip(),
            author=author.name or "Unknown",
            author_email=author.email or "",
            date=datetime.fromtimestamp(c.commit_time, tz),
        )

    def get_branch_heads(
        self, include_remotes: bool = False, include_tags: bool = False
    ) -> list[BranchHead]:
        """
        Get branch heads to label in the graph.

        Local branches come first, with the checked-out branch flagged as
        HEAD. A detached HEAD gets its own "HEAD" label.
        """
        heads: list[BranchHead] = []

        for branch_name in self.repo.branches.local:
            branch = self.repo.branches.local[branch_name]
            commit = branch.peel(pygit2.Commit)
            heads.append(BranchHead(branch_name, str(commit.id), branch.is_head()))

        if self.repo.head_is_detached:
            heads.append(BranchHead("HEAD", str(self.repo.head.target), True))

        if include_remotes:
            for branch_name in self.repo.branches.remote:
                if branch_name.endswith("/HEAD"):
                    continue
                branch = self.repo.branches.remote[branch_name]
                commit = branch.peel(pygit2.Commit)
                heads.append(BranchHead(branch_name, str(commit.id), False))

        if include_tags:
            for ref_name in self.repo.references:
                if not ref_name.startswith("refs/tags/"):
                    continue
                try:
                    commit = self.repo.references[ref_name].peel(pygit2.Commit)
                except (pygit2.GitError, ValueError) as e:
                    # Tags may point at trees or blobs
                    logger.debug("Skipping tag %s: %s", ref_name, e)
                    continue
                heads.append(BranchHead(ref_name.removeprefix("refs/tags/"), str(commit.id)))

        return heads
