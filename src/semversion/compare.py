# SPDX-License-Identifier: MIT
"""Version comparison helpers.

These accept SemVersion objects, version strings (parsed non-strictly) or
None. None sorts before any version and two Nones are equal.

Precedence ordering: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-beta < 1.0.0
Full ordering additionally breaks precedence ties on build metadata, with
no build label sorting first.
"""

from __future__ import annotations

import functools
from typing import Iterable, Optional, Union

from .semver import SemVersion, coerce_version

VersionLike = Union[str, SemVersion, None]


def versions_equal(version1: VersionLike, version2: VersionLike) -> bool:
    """Test two versions for structural equality.

    Examples:
        >>> versions_equal(None, None)
        True
        >>> versions_equal("1.0.0+a", "1.0.0+b")
        False
    """
    v1 = coerce_version(version1)
    v2 = coerce_version(version2)
    if v1 is None:
        return v2 is None
    return v1 == v2


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions by precedence and then build metadata.

    Args:
        version1: First version (string, SemVersion or None)
        version2: Second version (string, SemVersion or None)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+build", "1.0.0")
        1
        >>> compare_versions(None, "0.0.0")
        -1
    """
    v1 = coerce_version(version1)
    v2 = coerce_version(version2)
    if v1 is None:
        return 0 if v2 is None else -1
    return v1.compare_to(v2)


def compare_by_precedence(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions by precedence, ignoring build metadata.

    Examples:
        >>> compare_by_precedence("1.0.0+build1", "1.0.0+build2")
        0
        >>> compare_by_precedence("1.0.0-alpha", "1.0.0")
        -1
    """
    v1 = coerce_version(version1)
    v2 = coerce_version(version2)
    if v1 is None:
        return 0 if v2 is None else -1
    return v1.compare_by_precedence(v2)


def precedence_matches(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if two versions have the same precedence."""
    return compare_by_precedence(version1, version2) == 0


_VersionKey = functools.cmp_to_key(compare_versions)


def version_key(version: Union[str, SemVersion]):
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _VersionKey(coerce_version(version))


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[SemVersion]:
    """Parse and sort versions in ascending order.

    None entries are kept and sort first.
    """
    return sorted(
        (coerce_version(v) for v in versions),
        key=_VersionKey,
        reverse=reverse,
    )


def max_version(versions: Iterable[VersionLike]) -> Optional[SemVersion]:
    """Return the highest version, or None if there are none.

    Examples:
        >>> str(max_version(["1.0.0-rc.1", "1.0.0", "0.9.9"]))
        '1.0.0'
    """
    best: Optional[SemVersion] = None
    for version in versions:
        candidate = coerce_version(version)
        if compare_versions(candidate, best) > 0:
            best = candidate
    return best
