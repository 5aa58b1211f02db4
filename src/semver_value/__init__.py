# SPDX-License-Identifier: MIT
"""SemVer 2.0 version parsing, validation and precedence.

This package provides an immutable Version value type, a grammar-based
parser, and precedence comparison of versions and pre-release identifiers.

Example:
    >>> from semver_value import Version, parse, compare_versions
    >>>
    >>> version = parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> version == Version(1, 2, 3, prerelease="alpha.1")
    True
    >>> version.identical(Version(1, 2, 3, prerelease="alpha.1"))
    False
    >>>
    >>> parse("0.1.0") is None
    True
    >>>
    >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
    -1
"""

__version__ = "0.1.0"

from .identifiers import compare_identifiers
from .semver import (
    Version,
    parse,
    parse_version,
    is_valid_semver,
    InvalidVersionError,
    InvalidPrereleaseError,
    InvalidMetadataError,
    IDENTIFIERS_PATTERN,
    SEMVER_PATTERN,
    MAX_COMPONENT,
    MAX_VERSION,
)
from .compare import (
    compare_versions,
    version_key,
    is_identical,
)
from .models import VersionRecord

__all__ = [
    # Version type and parsing
    "Version",
    "parse",
    "parse_version",
    "is_valid_semver",
    "InvalidVersionError",
    "InvalidPrereleaseError",
    "InvalidMetadataError",
    "IDENTIFIERS_PATTERN",
    "SEMVER_PATTERN",
    "MAX_COMPONENT",
    "MAX_VERSION",
    # Comparison
    "compare_identifiers",
    "compare_versions",
    "version_key",
    "is_identical",
    # Structured record
    "VersionRecord",
]
