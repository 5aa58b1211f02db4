# SPDX-License-Identifier: MIT
"""Semantic version value type.

A Version holds MAJOR.MINOR.PATCH with optional pre-release and build
metadata suffixes:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, -x-y-z.--
- Build metadata: +001, +20130313144700, +exp.sha.5114f85

Metadata never takes part in ordering or in ``==``. Use ``identical`` when
metadata must match as well.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .identifiers import compare_identifiers

# Dot-separated identifiers, shared by pre-release and metadata
IDENTIFIERS_PATTERN = re.compile(r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*")

# Full text grammar. Numeric pre-release identifiers may not carry leading
# zeros; metadata identifiers may.
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<metadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

MAX_COMPONENT = 2**64 - 1


class InvalidVersionError(ValueError):
    """Raised when a version or one of its components is not valid."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class InvalidPrereleaseError(InvalidVersionError):
    """Raised when a pre-release string does not follow the identifier grammar."""

    def __init__(self, prerelease: str):
        super().__init__(prerelease, f"Invalid pre-release identifier: {prerelease!r}")


class InvalidMetadataError(InvalidVersionError):
    """Raised when a build metadata string does not follow the identifier grammar."""

    def __init__(self, metadata: str):
        super().__init__(metadata, f"Invalid build metadata: {metadata!r}")


def _is_identifiers(value: object) -> bool:
    return isinstance(value, str) and IDENTIFIERS_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Construction validates the pre-release and metadata strings, raising
    InvalidPrereleaseError or InvalidMetadataError. Instances are immutable;
    use ``replace`` to derive a new version.

    Attributes:
        major: Major version number (incompatible API changes)
        minor: Minor version number (backward compatible features)
        patch: Patch version number (backward compatible fixes)
        prerelease: Optional pre-release identifiers (e.g., "alpha.1", "rc.2")
        metadata: Optional build metadata (e.g., "build.123", "exp.sha.5114f85")
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    metadata: Optional[str] = None

    def __post_init__(self) -> None:
        for field_name in ("major", "minor", "patch"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidVersionError(
                    str(value), f"{field_name} must be a non-negative integer, got {value!r}"
                )
        if self.prerelease is not None and not _is_identifiers(self.prerelease):
            raise InvalidPrereleaseError(self.prerelease)
        if self.metadata is not None and not _is_identifiers(self.metadata):
            raise InvalidMetadataError(self.metadata)

    @classmethod
    def parse(cls, text: str) -> Optional[Version]:
        """Parse ``text`` into ``cls``, returning None when it is not a valid version."""
        if not isinstance(text, str):
            return None

        match = SEMVER_PATTERN.fullmatch(text)
        if not match:
            return None

        major = int(match.group("major"))
        if major == 0:
            return None

        return cls(
            major=major,
            minor=int(match.group("minor") or 0),
            patch=int(match.group("patch") or 0),
            prerelease=match.group("prerelease"),
            metadata=match.group("metadata"),
        )

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> Version:
        """Build a Version from a structured record.

        This is the validating constructor, not the text parser, so
        ``major == 0`` is accepted here.

        Raises:
            InvalidVersionError: If a numeric field is missing or invalid
            InvalidPrereleaseError: If the pre-release string is invalid
            InvalidMetadataError: If the metadata string is invalid
        """
        missing = [key for key in ("major", "minor", "patch") if key not in record]
        if missing:
            raise InvalidVersionError(
                str(dict(record)), f"Version record is missing {', '.join(missing)}"
            )
        return cls(
            major=record["major"],
            minor=record["minor"],
            patch=record["patch"],
            prerelease=record.get("prerelease"),
            metadata=record.get("metadata"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the structured record for this version."""
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease": self.prerelease,
            "metadata": self.metadata,
        }

    def replace(self, **changes: Any) -> Version:
        """Return a new, re-validated Version with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def semver(self) -> str:
        """Return the full canonical string, including both suffixes."""
        version = self.base_version
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.metadata is not None:
            version += f"+{self.metadata}"
        return version

    def __str__(self) -> str:
        return self.semver

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return (self.major, self.minor, self.patch, self.prerelease) == (
            other.major,
            other.minor,
            other.patch,
            other.prerelease,
        )

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def identical(self, other: Version) -> bool:
        """Return True if every component matches, metadata included."""
        return self == other and self.metadata == other.metadata

    def compare(self, other: Version) -> int:
        """Compare precedence with ``other``.

        Returns:
            -1 if self < other
            0 if neither version takes precedence
            1 if self > other

        Pre-releases are compared by precedence, so constructed versions whose
        pre-releases differ only by leading zeros (``"01"`` and ``"1"``) compare
        as 0 here, and both ``<=`` and ``>=`` hold, while ``==`` is False.
        """
        for mine, theirs in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            if mine != theirs:
                return -1 if mine < theirs else 1

        # A release outranks any of its pre-releases
        if self.prerelease is None and other.prerelease is None:
            return 0
        if self.prerelease is None:
            return 1
        if other.prerelease is None:
            return -1
        if self.prerelease == other.prerelease:
            return 0
        return compare_identifiers(self.prerelease, other.prerelease)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0


MAX_VERSION = Version(MAX_COMPONENT, MAX_COMPONENT, MAX_COMPONENT)


def parse(text: str) -> Optional[Version]:
    """Parse a semantic version string, returning None if it does not match.

    A major version of zero is rejected even though the grammar allows it.
    Build such versions with the Version constructor instead.

    Examples:
        >>> parse("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, metadata=None)

        >>> parse("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', metadata='build.456')

        >>> parse("0.1.0") is None
        True
    """
    return Version.parse(text)


def parse_version(version_string: str) -> Version:
    """Parse a version string that is expected to be valid.

    Args:
        version_string: A string in MAJOR.MINOR.PATCH[-prerelease][+metadata] form

    Returns:
        The parsed Version

    Raises:
        InvalidVersionError: If the string does not parse
    """
    version = parse(version_string)
    if version is None:
        raise InvalidVersionError(str(version_string))
    return version


def is_valid_semver(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_semver("1.0.0-alpha")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("0.1.0")
        False
    """
    return parse(version_string) is not None

