# SPDX-License-Identifier: MIT
"""Property-based tests for SemVersion parsing and ordering.

These tests verify that:
- Formatting and parsing round-trip for every constructible version
- The full ordering is antisymmetric, transitive and agrees with equality
- Precedence ignores build metadata
- change never mutates the original version
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from semversion import SemVersion, compare_component, compare_versions, parse_version


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=10**12)

# Any label the parser accepts, or no label at all
raw_labels = st.one_of(st.just(""), st.from_regex(r"[0-9A-Za-z.\-]+", fullmatch=True))

# Labels built from a small identifier pool so that ties and prefixes happen
identifiers = st.sampled_from(["alpha", "beta", "rc", "RC", "0", "1", "2", "11", "01", "x-y"])
pooled_labels = st.lists(identifiers, max_size=3).map(".".join)

versions = st.builds(SemVersion, numbers, numbers, numbers, raw_labels, raw_labels)
pooled_versions = st.builds(
    SemVersion,
    st.integers(min_value=0, max_value=2),
    st.integers(min_value=0, max_value=2),
    st.integers(min_value=0, max_value=2),
    pooled_labels,
    pooled_labels,
)


# =============================================================================
# Round-trip
# =============================================================================


class TestRoundTrip:
    """Formatting a version and parsing it back gives an equal version."""

    @given(version=versions)
    @settings(max_examples=200)
    def test_parse_str_round_trip(self, version: SemVersion):
        """parse(str(v)) == v for any valid components."""
        assert parse_version(str(version)) == version

    @given(version=versions)
    @settings(max_examples=100)
    def test_strict_round_trip(self, version: SemVersion):
        """The canonical form always carries minor and patch."""
        assert parse_version(str(version), strict=True) == version

    @given(version=versions)
    @settings(max_examples=100)
    def test_canonical_form_is_stable(self, version: SemVersion):
        """Formatting is idempotent through parsing."""
        text = str(version)
        assert str(parse_version(text)) == text


# =============================================================================
# Ordering
# =============================================================================


class TestOrdering:
    """The full comparator defines a consistent total preorder."""

    @given(a=pooled_versions, b=pooled_versions)
    @settings(max_examples=300)
    def test_antisymmetry(self, a: SemVersion, b: SemVersion):
        """compare(a, b) == -compare(b, a)."""
        assert compare_versions(a, b) == -compare_versions(b, a)
        assert a.compare_by_precedence(b) == -b.compare_by_precedence(a)

    @given(a=pooled_versions, b=pooled_versions, c=pooled_versions)
    @settings(max_examples=300)
    def test_transitivity(self, a: SemVersion, b: SemVersion, c: SemVersion):
        """a <= b and b <= c implies a <= c under compare."""
        if compare_versions(a, b) <= 0 and compare_versions(b, c) <= 0:
            assert compare_versions(a, c) <= 0

    @given(a=pooled_versions, b=pooled_versions)
    @settings(max_examples=300)
    def test_equality_implies_zero(self, a: SemVersion, b: SemVersion):
        """Equal versions compare as 0 and hash alike."""
        if a == b:
            assert compare_versions(a, b) == 0
            assert hash(a) == hash(b)

    @given(a=pooled_versions, b=pooled_versions)
    @settings(max_examples=300)
    def test_operators_agree_with_compare(self, a: SemVersion, b: SemVersion):
        """Strict operators follow compare exactly."""
        result = compare_versions(a, b)
        assert (a < b) == (result < 0)
        assert (a > b) == (result > 0)

    @given(version=pooled_versions, build1=pooled_labels, build2=pooled_labels)
    @settings(max_examples=200)
    def test_precedence_ignores_build(self, version: SemVersion, build1: str, build2: str):
        """Changing only the build label keeps precedence equal."""
        a = version.change(build=build1)
        b = version.change(build=build2)
        assert a.precedence_matches(b)
        assert compare_versions(a, b) == compare_component(build1, build2)

    @given(version=pooled_versions)
    def test_release_after_prerelease(self, version: SemVersion):
        """A version without a pre-release outranks the same version with one."""
        release = version.change(prerelease="")
        if version.prerelease:
            assert version.compare_by_precedence(release) == -1


# =============================================================================
# Immutability
# =============================================================================


class TestChangeImmutability:
    """change returns a new value and leaves the original untouched."""

    @given(version=versions, major=numbers, prerelease=raw_labels)
    @settings(max_examples=100)
    def test_change_leaves_original(self, version: SemVersion, major: int, prerelease: str):
        """The original keeps its fields after change."""
        before = str(version)
        changed = version.change(major=major, prerelease=prerelease)
        assert str(version) == before
        assert changed.major == major
        assert changed.prerelease == prerelease
        assert (changed.minor, changed.patch, changed.build) == (
            version.minor,
            version.patch,
            version.build,
        )
