"""Compatibility scoring.

The score starts at 100 and loses a fixed penalty for every issue
(by severity) and every warning.  It never drops below zero.
"""

from __future__ import annotations

from collections.abc import Iterable

from cranksmith.core.results import CompatibilityIssue, CompatibilityWarning, Severity

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MAX_SCORE: int = 100
ISSUE_PENALTIES: dict[Severity, int] = {
    Severity.ERROR: 30,
    Severity.WARNING: 10,
    Severity.INFO: 5,
}
WARNING_PENALTY: int = 5


def calculate_compatibility_score(
    issues: Iterable[CompatibilityIssue],
    warnings: Iterable[CompatibilityWarning],
) -> int:
    """Score a component selection from its issues and warnings.

    Args:
        issues: Issues found by the pairwise checks.
        warnings: Warnings found by the pairwise checks.

    Returns:
        Integer score in ``[0, 100]``.
    """
    score: int = MAX_SCORE
    for issue in issues:
        score -= ISSUE_PENALTIES[issue.severity]
    for _ in warnings:
        score -= WARNING_PENALTY
    return max(0, score)
