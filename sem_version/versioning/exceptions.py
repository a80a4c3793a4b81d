"""
Exception classes for the versioning module.
"""

from typing import Optional


class VersioningError(Exception):
    """Base exception for all versioning-related errors."""

    pass


class VersionFormatError(VersioningError, ValueError):
    """Raised when a version string has an invalid format."""

    def __init__(
        self,
        version_string: str,
        expected_format: str = "[v]MAJOR.MINOR.PATCH[-PRERELEASE][+METADATA]",
    ):
        self.version_string = version_string
        self.expected_format = expected_format
        super().__init__(
            f"Invalid version format: '{version_string}'. "
            f"Expected format: {expected_format}"
        )


class InvalidPatternError(VersioningError):
    """Raised when a configured bump pattern is not a valid regular expression."""

    def __init__(
        self,
        tier: str,
        pattern: str,
        index: int,
        reason: str,
        position: Optional[int] = None,
        config_path: Optional[str] = None,
    ):
        self.tier = tier
        self.pattern = pattern
        self.index = index
        self.reason = reason
        self.position = position
        self.config_path = config_path
        super().__init__(
            f"Invalid {tier} pattern #{index + 1} '{pattern}': {reason}"
        )


class ConfigError(VersioningError):
    """Raised when a configuration file cannot be read or has the wrong shape."""

    def __init__(self, config_path: str, message: str):
        self.config_path = config_path
        super().__init__(f"{config_path}: {message}")


class RepositoryError(VersioningError):
    """Raised when tags or commits cannot be read from the repository."""

    def __init__(self, repo_path: str, message: str = ""):
        self.repo_path = repo_path
        if message:
            super().__init__(f"Repository error for {repo_path}: {message}")
        else:
            super().__init__(f"Not a git repository: {repo_path}")
