import io
import logging
import shutil
from pathlib import Path

import pytest
from git import Actor, Repo


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("sem_version")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream  # Yield the stream to the test function

    # Cleanup after the test
    logger.removeHandler(handler)
    log_stream.close()


# git fixtures

TEST_ACTOR = Actor("Test User", "test@example.com")


class RepoBuilder:
    """Builds a throwaway git repository commit by commit."""

    def __init__(self, path: Path):
        self.path = path
        self.repo = Repo.init(path)
        self._count = 0

    def commit(self, message: str) -> str:
        self._count += 1
        changed = self.path / f"change_{self._count}.txt"
        changed.write_text(f"{message}\n")
        self.repo.index.add([str(changed)])
        commit = self.repo.index.commit(
            message, author=TEST_ACTOR, committer=TEST_ACTOR
        )
        return commit.hexsha

    def tag(self, name: str) -> None:
        self.repo.create_tag(name)


@pytest.fixture
def git_repo(tmp_path):
    """Fixture providing an empty git repository to fill with commits and tags."""
    if shutil.which("git") is None:
        pytest.skip("git binary not available")
    return RepoBuilder(tmp_path / "repo")
