"""
Bump rule sets: regular expressions per version tier.

A RuleSet is built once per run, either from the defaults below (based on
Conventional Commits) or from a configuration file, and is immutable
afterwards. Patterns are applied with ``re.search`` to the full commit message,
so ``^`` anchors to the start of the message and unanchored patterns (such as
``BREAKING CHANGE:``) may match anywhere in the body.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .exceptions import InvalidPatternError
from .version import BumpType

TIERS = ("major", "minor", "patch")

DEFAULT_MAJOR_PATTERNS = [
    r"^.+!:",
    r"BREAKING CHANGE:",
    r"BREAKING-CHANGE:",
]

DEFAULT_MINOR_PATTERNS = [
    r"^feat(\(.+\))?:",
    r"^feature(\(.+\))?:",
]

DEFAULT_PATCH_PATTERNS = [
    r"^fix(\(.+\))?:",
    r"^bugfix(\(.+\))?:",
    r"^hotfix(\(.+\))?:",
    r"^refactor(\(.+\))?:",
    r"^perf(\(.+\))?:",
]

DEFAULT_CONFIG_YAML = r"""# sem-version configuration
# Each section contains regex patterns to match commit messages

# Major version bump (breaking changes)
major:
  - '^.+!:'                # type!: breaking change
  - 'BREAKING CHANGE:'     # in commit body
  - 'BREAKING-CHANGE:'     # alternative format

# Minor version bump (new features)
minor:
  - '^feat(\(.+\))?:'      # feat: or feat(scope):
  - '^feature(\(.+\))?:'   # feature: alias

# Patch version bump (bug fixes, refactoring)
patch:
  - '^fix(\(.+\))?:'       # fix:
  - '^bugfix(\(.+\))?:'    # bugfix: alias
  - '^hotfix(\(.+\))?:'    # hotfix:
  - '^refactor(\(.+\))?:'  # refactor:
  - '^perf(\(.+\))?:'      # perf:
"""


def compile_patterns(tier: str, patterns: Iterable[str]) -> Tuple[re.Pattern, ...]:
    """
    Compile the patterns of one tier.

    Raises:
        InvalidPatternError: On the first pattern that is not a valid regex
    """
    compiled = []
    for index, pattern in enumerate(patterns):
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise InvalidPatternError(
                tier, pattern, index, e.msg, position=e.pos
            ) from e
    return tuple(compiled)


@dataclass(frozen=True)
class RuleSet:
    """Compiled major/minor/patch patterns."""

    major: Tuple[re.Pattern, ...] = field(default_factory=tuple)
    minor: Tuple[re.Pattern, ...] = field(default_factory=tuple)
    patch: Tuple[re.Pattern, ...] = field(default_factory=tuple)

    @classmethod
    def from_patterns(
        cls,
        major: Optional[Iterable[str]] = None,
        minor: Optional[Iterable[str]] = None,
        patch: Optional[Iterable[str]] = None,
    ) -> "RuleSet":
        """Build a RuleSet from pattern strings; a missing tier has no patterns."""
        return cls(
            major=compile_patterns("major", major or []),
            minor=compile_patterns("minor", minor or []),
            patch=compile_patterns("patch", patch or []),
        )

    def patterns(self, tier: str) -> Tuple[re.Pattern, ...]:
        if tier not in TIERS:
            raise ValueError(f"Unknown tier: {tier}")
        return getattr(self, tier)

    def matches(self, message: str, tier: str) -> bool:
        """Return True if any pattern of ``tier`` is found in ``message``."""
        return any(regex.search(message) for regex in self.patterns(tier))

    def match_major(self, message: str) -> bool:
        return self.matches(message, "major")

    def match_minor(self, message: str) -> bool:
        return self.matches(message, "minor")

    def match_patch(self, message: str) -> bool:
        return self.matches(message, "patch")

    def highest_tier(self, message: str) -> BumpType:
        """Return the highest tier matched by ``message``, checking major first."""
        if self.match_major(message):
            return BumpType.MAJOR
        if self.match_minor(message):
            return BumpType.MINOR
        if self.match_patch(message):
            return BumpType.PATCH
        return BumpType.NONE

    def to_dict(self) -> Dict[str, List[str]]:
        """Pattern strings per tier, in configuration order."""
        return {tier: [regex.pattern for regex in self.patterns(tier)] for tier in TIERS}


def default_rule_set() -> RuleSet:
    """The Conventional Commits based rule set used when no config file exists."""
    return RuleSet.from_patterns(
        major=DEFAULT_MAJOR_PATTERNS,
        minor=DEFAULT_MINOR_PATTERNS,
        patch=DEFAULT_PATCH_PATTERNS,
    )
