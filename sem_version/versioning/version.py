"""
Version utility module for semantic version operations.

This module provides the immutable Version value used throughout sem-version,
the BumpType ordering and a few string-level helpers built on top of them.
Parsing and bumping are delegated to the semver library.
"""

from enum import IntEnum
from typing import Optional, Union

import semver

from .exceptions import VersionFormatError


SUFFIX_FORMAT = "dot-separated identifiers of [0-9A-Za-z-]"


def _parse_semver(text: str) -> semver.Version:
    """Strict SemVer 2.0.0 parse of an unprefixed version string."""
    # semver matches with \d and $, which let non-ASCII digits and a
    # trailing newline through
    if not text.isascii() or any(char.isspace() for char in text):
        raise ValueError(f"{text!r} is not valid SemVer string")
    return semver.Version.parse(text)


class BumpType(IntEnum):
    """Version increment decision, ordered NONE < PATCH < MINOR < MAJOR."""

    NONE = 0
    PATCH = 1
    MINOR = 2
    MAJOR = 3

    @property
    def label(self) -> str:
        return self.name.lower()


class Version:
    """
    A semantic version representation using semver.

    This class wraps semver.Version to accept an optional "v" prefix and to
    give the precedence used for release decisions.
    Version format: MAJOR.MINOR.PATCH with an optional -prerelease and an
    optional +metadata suffix. Instances are immutable; every bump returns a
    new Version with the suffixes cleared.

    Ordering only looks at (major, minor, patch). Equality and hashing use
    every field.
    """

    __slots__ = ("_version",)

    def __init__(
        self,
        major: int = 0,
        minor: int = 0,
        patch: int = 0,
        prerelease: Optional[str] = None,
        metadata: Optional[str] = None,
    ):
        """
        Initialize a Version from its components.

        Args:
            major: Major version component
            minor: Minor version component
            patch: Patch version component
            prerelease: Optional prerelease identifier (e.g. "rc.1")
            metadata: Optional build metadata (e.g. "build.42")

        Raises:
            VersionFormatError: If a component is negative or a suffix is malformed
        """
        for value in (major, minor, patch):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise VersionFormatError(
                    f"{major}.{minor}.{patch}",
                    "non-negative integers for major, minor and patch",
                )
        for suffix in (prerelease, metadata):
            if suffix is not None and not isinstance(suffix, str):
                raise VersionFormatError(repr(suffix), SUFFIX_FORMAT)

        version = semver.Version(major, minor, patch, prerelease, metadata)
        if prerelease is not None or metadata is not None:
            # semver only validates suffixes when parsing
            try:
                checked = _parse_semver(str(version))
            except ValueError as e:
                raise VersionFormatError(str(version), SUFFIX_FORMAT) from e
            if (checked.prerelease, checked.build) != (prerelease, metadata):
                raise VersionFormatError(str(version), SUFFIX_FORMAT)

        object.__setattr__(self, "_version", version)

    @classmethod
    def _from_semver(cls, version: semver.Version) -> "Version":
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_version", version)
        return instance

    def __setattr__(self, name, value):
        raise AttributeError("Version objects are immutable")

    @classmethod
    def parse(cls, text: str) -> "Version":
        """
        Parse a version or tag string such as "v1.2.3-rc.1+build.5".

        Raises:
            VersionFormatError: If the text does not match the grammar exactly
        """
        if not isinstance(text, str):
            raise VersionFormatError(str(text))

        stripped = text.strip()
        if stripped.startswith("v"):
            stripped = stripped[1:]

        try:
            version = _parse_semver(stripped)
        except ValueError as e:
            raise VersionFormatError(text) from e

        return cls._from_semver(version)

    @property
    def major(self) -> int:
        """Major version component."""
        return self._version.major

    @property
    def minor(self) -> int:
        """Minor version component."""
        return self._version.minor

    @property
    def patch(self) -> int:
        """Patch version component."""
        return self._version.patch

    @property
    def prerelease(self) -> Optional[str]:
        return self._version.prerelease

    @property
    def metadata(self) -> Optional[str]:
        return self._version.build

    @property
    def core(self) -> tuple:
        """The (major, minor, patch) triple used for precedence."""
        return (self.major, self.minor, self.patch)

    def render(self, prefix: str = "", include_suffixes: bool = True) -> str:
        """
        Render the version as text.

        Args:
            prefix: String placed before the numbers, typically "v" or ""
            include_suffixes: Whether to append -prerelease and +metadata
        """
        if include_suffixes:
            return f"{prefix}{self._version}"
        return f"{prefix}{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        """Return the string representation of the version."""
        return self.render()

    def __repr__(self) -> str:
        """Return the debug representation of the version."""
        return f"Version('{self.render()}')"

    def __eq__(self, other) -> bool:
        """Check if two versions are equal."""
        if not isinstance(other, Version):
            return False
        return (self.core, self.prerelease, self.metadata) == (
            other.core,
            other.prerelease,
            other.metadata,
        )

    def __lt__(self, other) -> bool:
        """Check if this version is less than another."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.core < other.core

    def __le__(self, other) -> bool:
        """Check if this version is less than or equal to another."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.core <= other.core

    def __gt__(self, other) -> bool:
        """Check if this version is greater than another."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.core > other.core

    def __ge__(self, other) -> bool:
        """Check if this version is greater than or equal to another."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.core >= other.core

    def __hash__(self) -> int:
        """Return hash of the version for use in sets/dicts."""
        return hash((self.core, self.prerelease, self.metadata))

    def bump_major(self) -> "Version":
        """Return a new Version with incremented major version."""
        return self._from_semver(self._version.bump_major())

    def bump_minor(self) -> "Version":
        """Return a new Version with incremented minor version."""
        return self._from_semver(self._version.bump_minor())

    def bump_patch(self) -> "Version":
        """Return a new Version with incremented patch version."""
        return self._from_semver(self._version.bump_patch())

    def bump(self, bump_type: BumpType) -> "Version":
        """Apply a bump decision. BumpType.NONE returns this version unchanged."""
        if bump_type == BumpType.MAJOR:
            return self.bump_major()
        if bump_type == BumpType.MINOR:
            return self.bump_minor()
        if bump_type == BumpType.PATCH:
            return self.bump_patch()
        return self


def parse_version(version_string: str) -> Version:
    """
    Parse a version string into a Version object.

    Args:
        version_string: Version string to parse

    Returns:
        Version object

    Raises:
        VersionFormatError: If version string is invalid
    """
    return Version.parse(version_string)


def increment_version(version: str, component: Union[str, BumpType] = "minor") -> str:
    """
    Increment a version string.

    Args:
        version: Current version string
        component: Which component to increment ("major", "minor", "patch")
            or a BumpType

    Returns:
        Incremented version string (without prefix or suffixes)

    Raises:
        VersionFormatError: If version string is invalid
        ValueError: If component is unknown
    """
    if isinstance(component, str):
        try:
            component = BumpType[component.upper()]
        except KeyError:
            raise ValueError(f"Unknown version component: {component}")

    if component == BumpType.NONE:
        raise ValueError(f"Unknown version component: {component.label}")

    return str(Version.parse(version).bump(component))


def compare_versions(version1: str, version2: str) -> int:
    """
    Compare two version strings by precedence.

    Returns:
        -1 if version1 < version2
         0 if version1 == version2
         1 if version1 > version2

    Raises:
        VersionFormatError: If either version string is invalid
    """
    v1 = Version.parse(version1)
    v2 = Version.parse(version2)

    if v1 < v2:
        return -1
    elif v1 > v2:
        return 1
    else:
        return 0
