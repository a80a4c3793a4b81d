"""Conventional Commits classification of raw commit messages."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .version import BumpType

# type(scope)!: description
CONVENTIONAL_SUBJECT = re.compile(r"^(\w+)(?:\(([^)]*)\))?(!)?:\s*(.*)$", re.ASCII)
BREAKING_MARKERS = ("BREAKING CHANGE:", "BREAKING-CHANGE:")


class CommitType(Enum):
    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    CHORE = "chore"
    BUILD = "build"
    CI = "ci"
    UNKNOWN = "unknown"


TYPE_ALIASES = {
    "feat": CommitType.FEAT,
    "feature": CommitType.FEAT,
    "fix": CommitType.FIX,
    "bugfix": CommitType.FIX,
    "docs": CommitType.DOCS,
    "doc": CommitType.DOCS,
    "style": CommitType.STYLE,
    "refactor": CommitType.REFACTOR,
    "perf": CommitType.PERF,
    "performance": CommitType.PERF,
    "test": CommitType.TEST,
    "tests": CommitType.TEST,
    "chore": CommitType.CHORE,
    "build": CommitType.BUILD,
    "ci": CommitType.CI,
}

PATCH_TYPES = frozenset({CommitType.FIX, CommitType.REFACTOR, CommitType.PERF})


def parse_commit_type(token: str) -> CommitType:
    """Map a type token to CommitType, folding aliases case-insensitively."""
    return TYPE_ALIASES.get(token.lower(), CommitType.UNKNOWN)


@dataclass(frozen=True)
class ClassifiedCommit:
    """A commit message broken down into its Conventional Commits parts."""

    type: CommitType
    scope: Optional[str]
    description: str
    is_breaking: bool
    breaking_description: Optional[str]
    raw_message: str

    @property
    def subject(self) -> str:
        return self.raw_message.split("\n", 1)[0].strip()

    @property
    def is_bump_type(self) -> bool:
        """Whether the commit type alone triggers a release (feat, fix, refactor, perf)."""
        return self.type == CommitType.FEAT or self.type in PATCH_TYPES

    @property
    def bump(self) -> BumpType:
        """The version increment this single commit calls for."""
        if self.is_breaking:
            return BumpType.MAJOR
        if self.type == CommitType.FEAT:
            return BumpType.MINOR
        if self.type in PATCH_TYPES:
            return BumpType.PATCH
        return BumpType.NONE


def _find_breaking_note(body: str) -> Optional[str]:
    for line in body.split("\n"):
        for marker in BREAKING_MARKERS:
            if line.startswith(marker):
                return line[len(marker) :].strip()
    return None


def classify_commit(message: str) -> ClassifiedCommit:
    """
    Classify a full commit message (subject, optional blank line, body).

    Messages that do not follow the Conventional Commits subject grammar are
    classified as ``CommitType.UNKNOWN``; this function never raises.

    Args:
        message: The raw commit message

    Returns:
        ClassifiedCommit for the message
    """
    message = message or ""
    subject, _, body = message.partition("\n")
    subject = subject.strip()

    commit_type = CommitType.UNKNOWN
    scope = None
    description = ""
    is_breaking = False

    match = CONVENTIONAL_SUBJECT.match(subject)
    if match:
        token, scope, bang, description = match.groups()
        commit_type = parse_commit_type(token)
        is_breaking = bang == "!"

    breaking_description = _find_breaking_note(body)
    if breaking_description is not None:
        is_breaking = True

    return ClassifiedCommit(
        type=commit_type,
        scope=scope,
        description=description,
        is_breaking=is_breaking,
        breaking_description=breaking_description,
        raw_message=message,
    )
