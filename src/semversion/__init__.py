# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison.

This package provides an immutable semantic version type with parsing,
canonical formatting, precedence comparison and a full ordering that also
takes build metadata into account.

Example:
    >>> from semversion import SemVersion, compare_versions, is_valid_semver
    >>> version = SemVersion.parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> is_valid_semver("1.0", strict=True)
    False
    >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
    1
"""

__version__ = "0.1.0"

from .identifiers import (
    compare_component,
    is_numeric_identifier,
)
from .semver import (
    SemVersion,
    DottedVersion,
    parse_version,
    try_parse_version,
    is_valid_semver,
    coerce_version,
    InvalidVersionError,
    VersionFormatError,
    StrictModeError,
    SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    compare_by_precedence,
    precedence_matches,
    versions_equal,
    version_key,
    sort_versions,
    max_version,
)

__all__ = [
    # Version type and parsing
    "SemVersion",
    "DottedVersion",
    "parse_version",
    "try_parse_version",
    "is_valid_semver",
    "coerce_version",
    "InvalidVersionError",
    "VersionFormatError",
    "StrictModeError",
    "SEMVER_PATTERN",
    # Identifier comparison
    "compare_component",
    "is_numeric_identifier",
    # Version comparison
    "compare_versions",
    "compare_by_precedence",
    "precedence_matches",
    "versions_equal",
    "version_key",
    "sort_versions",
    "max_version",
]
