# SPDX-License-Identifier: MIT
"""Precedence comparison for dot-separated identifier strings.

Segments are compared pairwise: numerically when both are ASCII digits,
otherwise lexicographically by code point. A string whose segments are a
strict prefix of another's sorts first (alpha < alpha.1).

Note that a numeric segment against an alphanumeric one is compared
lexicographically rather than always sorting the numeric one first.
"""

from __future__ import annotations


def _is_numeric(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def _segments(identifiers: str) -> list[str]:
    # Empty segments are skipped, so "a..b" compares like "a.b"
    return [segment for segment in identifiers.split(".") if segment]


def compare_identifiers(a: str, b: str) -> int:
    """Compare two dot-separated identifier strings by precedence.

    No validation is done here; callers are expected to have checked the
    identifier grammar already.

    Returns:
        -1 if a < b
        0 if a and b have equal precedence
        1 if a > b

    Examples:
        >>> compare_identifiers("alpha", "alpha.1")
        -1
        >>> compare_identifiers("beta.11", "beta.2")
        1
        >>> compare_identifiers("rc.1", "rc.1")
        0
    """
    segments_a = _segments(a)
    segments_b = _segments(b)

    for index in range(max(len(segments_a), len(segments_b))):
        if index >= len(segments_a):
            return -1
        if index >= len(segments_b):
            return 1

        seg_a = segments_a[index]
        seg_b = segments_b[index]

        if _is_numeric(seg_a) and _is_numeric(seg_b):
            num_a, num_b = int(seg_a), int(seg_b)
            if num_a != num_b:
                return -1 if num_a < num_b else 1
        elif seg_a != seg_b:
            return -1 if seg_a < seg_b else 1

    return 0
