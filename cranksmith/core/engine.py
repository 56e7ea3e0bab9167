"""Compatibility engine entry point.

Runs every pairwise check whose two components are present, attaches a gear
analysis when both cassette and crankset are present, and scores the
result.  Missing components are skipped, so a selection can be checked
while it is still being assembled.
"""

from __future__ import annotations

from cranksmith.core.components import Drivetrain
from cranksmith.core.gearing import analyze_gear_ratios
from cranksmith.core.pairs import (
    check_cassette_chain,
    check_cassette_derailleur,
    check_chain_derailleur,
)
from cranksmith.core.results import (
    CompatibilityIssue,
    CompatibilityResult,
    CompatibilityWarning,
    GearAnalysis,
    PairCheck,
    Severity,
)
from cranksmith.core.scoring import calculate_compatibility_score


def _pair_checks(drivetrain: Drivetrain) -> list[PairCheck]:
    checks: list[PairCheck] = []
    cassette = drivetrain.cassette
    chain = drivetrain.chain
    derailleur = drivetrain.rear_derailleur

    if cassette is not None and chain is not None:
        checks.append(check_cassette_chain(cassette, chain))
    if cassette is not None and derailleur is not None:
        checks.append(check_cassette_derailleur(cassette, derailleur))
    if chain is not None and derailleur is not None:
        checks.append(check_chain_derailleur(chain, derailleur))
    return checks


def check_compatibility(drivetrain: Drivetrain) -> CompatibilityResult:
    """Check a (possibly partial) drivetrain selection.

    Pair order is cassette/chain, cassette/derailleur, chain/derailleur;
    issues and warnings keep that order.

    Args:
        drivetrain: Zero to four selected components.

    Returns:
        A new :class:`CompatibilityResult`.  ``is_compatible`` is ``False``
        only when at least one issue has error severity.
    """
    issues: list[CompatibilityIssue] = []
    warnings: list[CompatibilityWarning] = []
    for check in _pair_checks(drivetrain):
        issues.extend(check.issues)
        warnings.extend(check.warnings)

    gear_analysis: GearAnalysis | None = None
    if drivetrain.cassette is not None and drivetrain.crankset is not None:
        gear_analysis = analyze_gear_ratios(drivetrain.cassette, drivetrain.crankset)

    return CompatibilityResult(
        is_compatible=all(issue.severity is not Severity.ERROR for issue in issues),
        compatibility_score=calculate_compatibility_score(issues, warnings),
        issues=tuple(issues),
        warnings=tuple(warnings),
        gear_analysis=gear_analysis,
    )
