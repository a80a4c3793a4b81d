"""
Reduce a sequence of commits to a single version bump.

Precedence is strict: a breaking change dominates everything, then features,
then fixes (fix, refactor, perf). The reduction is a maximum over the per-commit
tiers and so does not depend on commit order; it stops at the first MAJOR since
nothing can outrank it.

Per-commit evaluation (``evaluate_commits``) is kept apart from the reduction
so diagnostics can report every commit without affecting the early exit.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .commits import ClassifiedCommit, classify_commit
from .rules import RuleSet
from .version import BumpType, Version

DEFAULT_INITIAL_VERSION = Version(0, 1, 0)


@dataclass(frozen=True)
class CommitEvaluation:
    """The bump a single commit calls for."""

    identifier: str
    subject: str
    bump: BumpType


def resolve_bump(bumps: Iterable[BumpType]) -> BumpType:
    """Fold per-commit bumps to their maximum, stopping at the first MAJOR."""
    decision = BumpType.NONE
    for bump in bumps:
        if bump == BumpType.MAJOR:
            return BumpType.MAJOR
        if bump > decision:
            decision = bump
    return decision


def resolve_commits(commits: Iterable[ClassifiedCommit]) -> BumpType:
    """Resolve the bump for already classified commits."""
    return resolve_bump(commit.bump for commit in commits)


def resolve_messages(messages: Iterable[str], rule_set: RuleSet) -> BumpType:
    """Resolve the bump for raw messages matched against ``rule_set``."""
    return resolve_bump(rule_set.highest_tier(message) for message in messages)


def evaluate_commits(commits, rule_set: Optional[RuleSet] = None) -> List[CommitEvaluation]:
    """
    Evaluate every commit, in the order given.

    Args:
        commits: Iterable of objects with ``identifier`` and ``message``
            attributes (see ``CommitRecord``)
        rule_set: Match messages against this rule set. When None, messages
            are classified with the Conventional Commits grammar instead.

    Returns:
        One CommitEvaluation per commit
    """
    evaluations = []
    for commit in commits:
        if rule_set is not None:
            bump = rule_set.highest_tier(commit.message)
        else:
            bump = classify_commit(commit.message).bump
        subject = commit.message.split("\n", 1)[0].strip()
        evaluations.append(CommitEvaluation(commit.identifier, subject, bump))
    return evaluations


def apply_bump(version: Version, bump: Union[BumpType, str]) -> Version:
    """Apply a bump decision to an existing version."""
    if isinstance(bump, str):
        bump = BumpType[bump.upper()]
    return version.bump(bump)


def initial_version(bump: BumpType) -> Version:
    """
    Pick the first release version when the repository has no tag yet.

    A breaking change starts at 1.0.0 and a fix alone at 0.0.1. Features, and
    histories with nothing that qualifies (including an empty history), start
    at 0.1.0.
    """
    if bump == BumpType.MAJOR:
        return Version(1, 0, 0)
    if bump == BumpType.PATCH:
        return Version(0, 0, 1)
    return DEFAULT_INITIAL_VERSION


def next_version(current: Optional[Version], bump: BumpType) -> Version:
    """Next version from the current one, or from the initial policy if untagged."""
    if current is None:
        return initial_version(bump)
    return apply_bump(current, bump)
