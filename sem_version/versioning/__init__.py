"""
Versioning module for sem-version.

All version logic lives here so the CLI only has to wire options to it.

LAYERS:
=======

1. **Core Version Logic** (version.py):
   - Version: immutable semantic version with precedence ordering and bumps
   - BumpType: NONE < PATCH < MINOR < MAJOR
   - Helpers for parsing, incrementing and comparing version strings

2. **Rule Sets** (rules.py):
   - RuleSet: compiled regex patterns per tier (major/minor/patch)
   - Built-in Conventional Commits defaults and their YAML scaffold

3. **Commit Classification** (commits.py):
   - classify_commit: subject grammar ``type(scope)!: description`` plus
     ``BREAKING CHANGE:`` footers, degrading to ``unknown`` instead of failing

4. **Resolution** (resolver.py):
   - resolve_bump / resolve_commits / resolve_messages: maximum tier with an
     early exit on MAJOR
   - initial_version: first release policy when no tag exists (0.1.0 default)

5. **Git Integration** (git.py):
   - GitCommitSource: latest tag and commits since it, via GitPython

6. **Version Management** (manager.py):
   - NextVersionManager: tag -> commits -> decision -> next version

7. **Exception Hierarchy** (exceptions.py)
"""

from .commits import ClassifiedCommit, CommitType, classify_commit
from .exceptions import (
    ConfigError,
    InvalidPatternError,
    RepositoryError,
    VersionFormatError,
    VersioningError,
)
from .git import CommitRecord, GitCommitSource
from .manager import NextVersionManager
from .resolver import (
    DEFAULT_INITIAL_VERSION,
    CommitEvaluation,
    apply_bump,
    evaluate_commits,
    initial_version,
    next_version,
    resolve_bump,
    resolve_commits,
    resolve_messages,
)
from .rules import DEFAULT_CONFIG_YAML, RuleSet, default_rule_set
from .version import (
    BumpType,
    Version,
    compare_versions,
    increment_version,
    parse_version,
)

__all__ = [
    # Core version utilities
    "Version",
    "BumpType",
    "parse_version",
    "increment_version",
    "compare_versions",
    # Rules and classification
    "RuleSet",
    "default_rule_set",
    "DEFAULT_CONFIG_YAML",
    "CommitType",
    "ClassifiedCommit",
    "classify_commit",
    # Resolution
    "CommitEvaluation",
    "resolve_bump",
    "resolve_commits",
    "resolve_messages",
    "evaluate_commits",
    "apply_bump",
    "initial_version",
    "next_version",
    "DEFAULT_INITIAL_VERSION",
    # Git and orchestration
    "CommitRecord",
    "GitCommitSource",
    "NextVersionManager",
    # Exceptions
    "VersioningError",
    "VersionFormatError",
    "InvalidPatternError",
    "ConfigError",
    "RepositoryError",
]
