"""Dotted numeric version ordering and filtering."""

import re
from functools import cmp_to_key
from itertools import zip_longest

_LEADING_DIGITS = re.compile(r"\d+")


def _segments(version: str) -> list[int]:
    """Split a version into integer segments.

    A segment without leading digits counts as 0.
    """
    parts = []
    for raw in version.split("."):
        match = _LEADING_DIGITS.match(raw)
        parts.append(int(match.group()) if match else 0)
    return parts


def compare_versions(a: str, b: str) -> int:
    """Compare two dotted versions numerically.

    Missing trailing segments count as zero, so ``"2.1"`` equals ``"2.1.0"``.

    Returns:
        Negative if a < b, zero if equal, positive if a > b
    """
    for part_a, part_b in zip_longest(_segments(a), _segments(b), fillvalue=0):
        if part_a != part_b:
            return part_a - part_b
    return 0


def sort_versions_descending(versions: list[str]) -> list[str]:
    """Return versions ordered newest first."""
    return sorted(versions, key=cmp_to_key(compare_versions), reverse=True)


def is_prerelease(version: str) -> bool:
    """Check for a pre-release marker (any hyphen)."""
    return "-" in version


def filter_versions(versions: list[str], prefix: str, limit: int = 10) -> list[str]:
    """Select stable versions starting with ``prefix``, newest first.

    Args:
        versions: Raw version strings from the version index
        prefix: The partial version the user typed (may be empty)
        limit: Maximum number of versions to return

    Returns:
        At most ``limit`` versions, sorted descending
    """
    candidates = [v for v in versions if not is_prerelease(v) and v.startswith(prefix)]
    return sort_versions_descending(candidates)[:limit]
