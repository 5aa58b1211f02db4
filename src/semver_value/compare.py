# SPDX-License-Identifier: MIT
"""Version comparison helpers accepting strings or Version objects.

Ordering: MAJOR, MINOR, PATCH numerically, then pre-release < release.
Build metadata is ignored except by ``is_identical``.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Union

from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have equal precedence
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0", "1.0.0-rc.1")
        1
    """
    return _coerce(version1).compare(_coerce(version2))


_version_cmp_key = cmp_to_key(compare_versions)


def version_key(version: VersionLike) -> Any:
    """Return a sort key for a version, suitable for sorting.

    The key is a ``functools.cmp_to_key`` wrapper. It supports ordering
    comparisons only and is not hashable, so it cannot be used as a dict key
    or set member.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _version_cmp_key(_coerce(version))


def is_identical(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if both versions match in every component, metadata included.

    Examples:
        >>> is_identical("1.0.0+a", "1.0.0+a")
        True
        >>> is_identical("1.0.0+a", "1.0.0+b")
        False
    """
    return _coerce(version1).identical(_coerce(version2))
