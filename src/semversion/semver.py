# SPDX-License-Identifier: MIT
"""Semantic version value type.

Supports MAJOR[.MINOR[.PATCH]] with optional pre-release and build labels:
- Pre-release: -alpha, -alpha.1, -beta.11, -rc.1
- Build metadata: +build, +nightly.232, +20240101

Minor and patch default to 0 unless parsing in strict mode. Pre-release and
build labels are stored verbatim; their identifiers are only interpreted when
versions are compared.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

from .identifiers import compare_component

# Whole-string grammar; identifiers inside labels are not validated here
SEMVER_PATTERN = re.compile(
    r"(?P<major>[0-9]+)"
    r"(?:\.(?P<minor>[0-9]+))?"
    r"(?:\.(?P<patch>[0-9]+))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z.\-]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z.\-]+))?",
    re.ASCII,
)


class InvalidVersionError(ValueError):
    """Raised when a version string cannot be turned into a SemVersion."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class VersionFormatError(InvalidVersionError):
    """Raised when a version string does not match the version grammar."""


class StrictModeError(InvalidVersionError):
    """Raised when strict parsing finds the minor or patch number missing."""


class DottedVersion(NamedTuple):
    """Four part numeric version (major.minor.build.revision).

    Undefined build and revision parts are -1, matching platforms that use
    this representation for assembly and file versions.
    """

    major: int
    minor: int
    build: int = -1
    revision: int = -1

    @classmethod
    def parse(cls, text: str) -> "DottedVersion":
        """Parse a dotted numeric version with two to four parts.

        Raises:
            VersionFormatError: If the text is not 2-4 dot separated integers

        Examples:
            >>> DottedVersion.parse("4.0.30319.42000")
            DottedVersion(major=4, minor=0, build=30319, revision=42000)
            >>> DottedVersion.parse("1.2")
            DottedVersion(major=1, minor=2, build=-1, revision=-1)
        """
        parts = text.split(".") if isinstance(text, str) else []
        if not 2 <= len(parts) <= 4 or not all(p.isascii() and p.isdigit() for p in parts):
            raise VersionFormatError(str(text), f"Invalid dotted version: {text}")
        return cls(*(int(p) for p in parts))


@dataclass(frozen=True, slots=True)
class SemVersion:
    """An immutable semantic version.

    Equality and hashing cover all five fields with exact string comparison
    for the labels. Ordering follows precedence first and then the build
    label, so two versions that differ only in build metadata are ordered
    but still have matching precedence.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release label, empty when absent (e.g. "alpha.1")
        build: Build metadata label, empty when absent (e.g. "nightly.232")
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    build: str = ""

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must not be negative: {value}")
        if self.prerelease is None:
            object.__setattr__(self, "prerelease", "")
        if self.build is None:
            object.__setattr__(self, "build", "")

    @classmethod
    def parse(cls, version_string: str, strict: bool = False) -> "SemVersion":
        """Parse a version string, see :func:`parse_version`."""
        if not isinstance(version_string, str):
            raise VersionFormatError(
                str(version_string),
                f"Version must be a string, got {type(version_string).__name__}",
            )

        match = SEMVER_PATTERN.fullmatch(version_string)
        if not match:
            raise VersionFormatError(version_string)

        minor = match.group("minor")
        if minor is None and strict:
            raise StrictModeError(
                version_string,
                f"Invalid version (no minor version given in strict mode): {version_string}",
            )
        patch = match.group("patch")
        if patch is None and strict:
            raise StrictModeError(
                version_string,
                f"Invalid version (no patch version given in strict mode): {version_string}",
            )

        return cls(
            major=int(match.group("major")),
            minor=int(minor) if minor is not None else 0,
            patch=int(patch) if patch is not None else 0,
            prerelease=match.group("prerelease") or "",
            build=match.group("build") or "",
        )

    @classmethod
    def try_parse(cls, version_string: str, strict: bool = False) -> Optional["SemVersion"]:
        """Parse a version string, returning None instead of raising."""
        try:
            return cls.parse(version_string, strict)
        except InvalidVersionError:
            return None

    @classmethod
    def from_dotted(cls, version: Union[DottedVersion, tuple[int, int, int, int]]) -> "SemVersion":
        """Convert a four part numeric version.

        The revision becomes the patch number and a positive build number
        becomes the build label.

        Raises:
            TypeError: If version is None

        Examples:
            >>> str(SemVersion.from_dotted(DottedVersion(1, 2, 45, 3)))
            '1.2.3+45'
            >>> str(SemVersion.from_dotted(DottedVersion(1, 2)))
            '1.2.0'
        """
        if version is None:
            raise TypeError("version must not be None")

        major, minor, build, revision = version
        return cls(
            major=major,
            minor=minor,
            patch=revision if revision >= 0 else 0,
            build=str(build) if build > 0 else "",
        )

    def change(
        self,
        major: Optional[int] = None,
        minor: Optional[int] = None,
        patch: Optional[int] = None,
        prerelease: Optional[str] = None,
        build: Optional[str] = None,
    ) -> "SemVersion":
        """Return a copy with the given fields replaced.

        Fields passed as None keep their current value.

        Examples:
            >>> str(SemVersion(1, 2, 3).change(major=2))
            '2.2.3'
        """
        return SemVersion(
            major=self.major if major is None else major,
            minor=self.minor if minor is None else minor,
            patch=self.patch if patch is None else patch,
            prerelease=self.prerelease if prerelease is None else prerelease,
            build=self.build if build is None else build,
        )

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def compare_by_precedence(self, other: Optional["SemVersion"]) -> int:
        """Compare by precedence, ignoring build metadata.

        Returns:
            -1, 0 or 1. Any version is greater than None.
        """
        if other is None:
            return 1

        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        return compare_component(self.prerelease, other.prerelease, lower=True)

    def precedence_matches(self, other: Optional["SemVersion"]) -> bool:
        """Return True if both versions have the same precedence."""
        return self.compare_by_precedence(other) == 0

    def compare_to(self, other: Optional["SemVersion"]) -> int:
        """Compare by precedence, then by build label.

        A version without build metadata sorts before one with it.

        Returns:
            -1, 0 or 1. Any version is greater than None.
        """
        if other is None:
            return 1

        result = self.compare_by_precedence(other)
        if result != 0:
            return result

        return compare_component(self.build, other.build)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemVersion):
            return NotImplemented
        return self == other or self.compare_to(other) < 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemVersion):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemVersion):
            return NotImplemented
        return self == other or self.compare_to(other) > 0


def parse_version(version_string: str, strict: bool = False) -> SemVersion:
    """Parse a semantic version string into a SemVersion object.

    Args:
        version_string: A string of the form MAJOR[.MINOR[.PATCH]][-prerelease][+build]
        strict: If True, minor and patch must be present

    Returns:
        A SemVersion with parsed components

    Raises:
        VersionFormatError: If the string does not match the version grammar
        StrictModeError: If strict and the minor or patch number is missing

    Examples:
        >>> parse_version("1.2.3")
        SemVersion(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("1")
        SemVersion(major=1, minor=0, patch=0, prerelease='', build='')

        >>> parse_version("2.0.0-rc.1+build.456")
        SemVersion(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    return SemVersion.parse(version_string, strict)


def try_parse_version(version_string: str, strict: bool = False) -> Optional[SemVersion]:
    """Parse a semantic version string, returning None if it is invalid.

    Examples:
        >>> try_parse_version("not-a-version") is None
        True
    """
    return SemVersion.try_parse(version_string, strict)


def is_valid_semver(version_string: str, strict: bool = False) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0")
        True
        >>> is_valid_semver("1.0", strict=True)
        False
    """
    return SemVersion.try_parse(version_string, strict) is not None


def coerce_version(value: Union[str, SemVersion, None]) -> Optional[SemVersion]:
    """Convert a string to a SemVersion, passing SemVersion and None through.

    Raises:
        InvalidVersionError: If value is a string that cannot be parsed
    """
    if value is None or isinstance(value, SemVersion):
        return value
    return SemVersion.parse(value)
