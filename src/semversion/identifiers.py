# SPDX-License-Identifier: MIT
"""Dotted identifier comparison shared by pre-release and build labels.

A label such as ``alpha.1`` or ``nightly.232`` is a ``.``-separated sequence
of identifiers. Identifiers that are whole integers compare numerically,
anything else compares ordinally (by code point, case-sensitive).
"""

from __future__ import annotations

import re
from typing import Optional

# Signed ASCII integer literal
_NUMERIC_PATTERN = re.compile(r"-?[0-9]+", re.ASCII)


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if the identifier parses fully as an integer.

    Examples:
        >>> is_numeric_identifier("11")
        True
        >>> is_numeric_identifier("rc1")
        False
    """
    return _NUMERIC_PATTERN.fullmatch(identifier) is not None


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_component(a: Optional[str], b: Optional[str], lower: bool = False) -> int:
    """Compare two dotted identifier labels.

    Args:
        a: First label (``None`` is treated as empty)
        b: Second label (``None`` is treated as empty)
        lower: If True, an empty label sorts after a non-empty one (the
            pre-release rule). If False, an empty label sorts first (the
            build metadata rule).

    Returns:
        -1 if a < b
        0 if a == b
        1 if a > b

    Examples:
        >>> compare_component("alpha", "alpha.1")
        -1
        >>> compare_component("beta.11", "beta.2")
        1
        >>> compare_component("", "rc.1", lower=True)
        1
        >>> compare_component("1", "a")
        -1
    """
    a_empty = not a
    b_empty = not b
    if a_empty and b_empty:
        return 0
    if a_empty:
        return 1 if lower else -1
    if b_empty:
        return -1 if lower else 1

    a_parts = a.split(".")
    b_parts = b.split(".")

    for a_part, b_part in zip(a_parts, b_parts):
        a_numeric = is_numeric_identifier(a_part)
        b_numeric = is_numeric_identifier(b_part)

        if a_numeric and b_numeric:
            result = _sign(int(a_part) - int(b_part))
            if result != 0:
                return result
        elif a_numeric:
            # Numeric identifiers always have lower precedence
            return -1
        elif b_numeric:
            return 1
        elif a_part != b_part:
            return -1 if a_part < b_part else 1

    # Shorter label loses when every shared identifier is equal
    return _sign(len(a_parts) - len(b_parts))
