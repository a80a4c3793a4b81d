"""
Next-version manager.

Ties the tag/commit source, the rule set and the resolver together: reads the
latest release tag, evaluates each commit since it, reduces them to one bump
and applies it (or the initial-version policy when nothing is tagged yet).
"""

import logging
from typing import List, Optional

from .exceptions import VersioningError
from .resolver import (
    CommitEvaluation,
    DEFAULT_INITIAL_VERSION,
    evaluate_commits,
    next_version,
    resolve_bump,
)
from .rules import RuleSet, default_rule_set
from .version import BumpType, Version

logger = logging.getLogger(__name__)

STRATEGIES = ("rules", "conventional")


class NextVersionManager:
    """
    Computes the next release version for a repository.

    Two strategies are available:
    - ``rules``: match the full commit message against the RuleSet tiers
    - ``conventional``: classify the message with the Conventional Commits grammar

    Args:
        source: Tag/commit source exposing ``latest_tag()`` and
            ``commits_since(tag)`` (see ``GitCommitSource``)
        rule_set: Rule set for the ``rules`` strategy (defaults to the built-in one)
        strategy: ``"rules"`` or ``"conventional"``
    """

    def __init__(
        self,
        source,
        rule_set: Optional[RuleSet] = None,
        strategy: str = "rules",
    ):
        if strategy not in STRATEGIES:
            raise VersioningError(
                f"Unknown strategy '{strategy}'. Expected one of: {', '.join(STRATEGIES)}"
            )
        self.source = source
        self.rule_set = rule_set if rule_set is not None else default_rule_set()
        self.strategy = strategy

        self._latest_tag: Optional[str] = None
        self._tag_loaded = False

    def get_latest_tag(self) -> Optional[str]:
        """Latest release tag, read once from the source."""
        if not self._tag_loaded:
            self._latest_tag = self.source.latest_tag()
            self._tag_loaded = True
        return self._latest_tag

    def current_version(self) -> Optional[Version]:
        """
        Get the version of the latest release tag.

        Returns:
            Version, or None if the repository has no release tag

        Raises:
            VersionFormatError: If the tag is not a valid version
        """
        tag = self.get_latest_tag()
        if not tag:
            return None
        return Version.parse(tag)

    def evaluate(self) -> List[CommitEvaluation]:
        """Evaluate every commit since the latest tag, oldest first."""
        commits = self.source.commits_since(self.get_latest_tag())
        rule_set = self.rule_set if self.strategy == "rules" else None
        return evaluate_commits(commits, rule_set)

    def resolve(self) -> BumpType:
        """The bump decision for the commits since the latest tag."""
        return resolve_bump(evaluation.bump for evaluation in self.evaluate())

    def suggest_next_version(self) -> Version:
        """
        Compute the next version.

        Returns:
            The tag's version bumped according to the commits; the initial
            version when there is no tag yet

        Raises:
            VersionFormatError: If the latest tag is not a valid version
        """
        current = self.current_version()
        if current is None:
            logger.debug("No existing tags found, starting from v0.0.0")
        else:
            logger.debug(f"Current version: {self.get_latest_tag()}")

        evaluations = self.evaluate()
        if not evaluations:
            logger.debug("No new commits since last tag")
            return current if current is not None else DEFAULT_INITIAL_VERSION

        logger.debug(f"Found {len(evaluations)} commits since last tag")
        for evaluation in evaluations:
            label = evaluation.bump.name if evaluation.bump else "SKIP"
            logger.debug(f"  - [{label}] {evaluation.subject}")

        bump = resolve_bump(evaluation.bump for evaluation in evaluations)
        logger.debug(f"Resolved bump: {bump.label}")
        return next_version(current, bump)
