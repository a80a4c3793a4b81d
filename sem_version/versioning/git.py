"""
Git access for sem-version.

Reads the latest release tag and the commits made since it, using GitPython.
Commits are returned oldest first with their full messages (subject and body).
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from .exceptions import RepositoryError

logger = logging.getLogger(__name__)

# git describe stderr fragments meaning "there is no matching tag"
NO_TAG_MARKERS = ("No names found", "No tags can describe", "fatal")


@dataclass(frozen=True)
class CommitRecord:
    """A commit as handed to the resolver: its sha and full message."""

    identifier: str
    message: str

    @property
    def subject(self) -> str:
        return self.message.split("\n", 1)[0].strip()


class GitCommitSource:
    """
    Tag and commit source backed by a local git repository.

    Args:
        repo_path: Path to the repository (or any directory inside it)
        tag_pattern: glob passed to ``git describe --match`` to select release tags

    Raises:
        RepositoryError: If ``repo_path`` is not inside a git repository
    """

    def __init__(self, repo_path: Union[str, Path], tag_pattern: str = "v*"):
        self.repo_path = Path(repo_path)
        self.tag_pattern = tag_pattern

        try:
            self.repo = Repo(self.repo_path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise RepositoryError(str(self.repo_path)) from e

    def has_commits(self) -> bool:
        """False for a freshly initialised repository without any commit."""
        try:
            self.repo.head.commit
        except ValueError:
            return False
        return True

    def latest_tag(self) -> Optional[str]:
        """
        Get the most recent tag reachable from HEAD that matches ``tag_pattern``.

        Returns:
            Tag name, or None if the repository has no release tag yet
        """
        if not self.has_commits():
            return None

        try:
            tag = self.repo.git.describe(
                "--tags", "--abbrev=0", "--match", self.tag_pattern
            )
        except GitCommandError as e:
            stderr = str(e.stderr or "")
            if any(marker in stderr for marker in NO_TAG_MARKERS):
                logger.debug(f"No tag matching '{self.tag_pattern}' found")
                return None
            raise RepositoryError(str(self.repo_path), f"git describe failed: {e}")

        return tag.strip() or None

    def commits_since(self, tag: Optional[str]) -> List[CommitRecord]:
        """
        Get all commits since ``tag`` (all commits when ``tag`` is None).

        Returns:
            List of CommitRecord, oldest first
        """
        if not self.has_commits():
            return []

        rev = f"{tag}..HEAD" if tag else "HEAD"
        try:
            commits = list(self.repo.iter_commits(rev, reverse=True))
        except GitCommandError as e:
            raise RepositoryError(
                str(self.repo_path), f"Failed to list commits for {rev}: {e}"
            )

        return [CommitRecord(commit.hexsha, commit.message) for commit in commits]
