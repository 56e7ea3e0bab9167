"""Pairwise compatibility checks between drivetrain components.

Each check compares exactly two components and returns a
:class:`~cranksmith.core.results.PairCheck`.  Incompatibilities are data:
nothing here raises for a mismatched build.
"""

from __future__ import annotations

from cranksmith.core.components import Cassette, Chain, RearDerailleur
from cranksmith.core.results import (
    CompatibilityIssue,
    CompatibilityWarning,
    PairCheck,
    Severity,
)
from cranksmith.core.standards import (
    allowed_chain_standards,
    chain_shifting_standard,
    required_chain_standard,
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CHAIN_CASSETTE: str = "Chain/Cassette"
DERAILLEUR_CASSETTE: str = "Derailleur/Cassette"
CHAIN_DERAILLEUR: str = "Chain/Derailleur"

# Fraction of the derailleur's max cog above which a near-limit warning fires.
NEAR_CAPACITY_FRACTION: float = 0.9


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def check_cassette_chain(cassette: Cassette, chain: Chain) -> PairCheck:
    """Check speed count and chain standard between a cassette and a chain."""
    issues: list[CompatibilityIssue] = []

    if cassette.speeds != chain.speeds:
        issues.append(
            CompatibilityIssue(
                component=CHAIN_CASSETTE,
                issue="Speed mismatch",
                severity=Severity.ERROR,
                description=(
                    f"{chain.speeds}-speed chain not compatible with "
                    f"{cassette.speeds}-speed cassette"
                ),
                solution=f"Use a {cassette.speeds}-speed chain",
            )
        )

    required = required_chain_standard(cassette.chain_compatibility)
    if chain.chain_standard not in allowed_chain_standards(required):
        issues.append(
            CompatibilityIssue(
                component=CHAIN_CASSETTE,
                issue="Chain standard incompatible",
                severity=Severity.ERROR,
                description=(
                    f"{chain.chain_standard.value} chain not compatible with "
                    f"{required.value} cassette"
                ),
                solution=f"Use a {required.value} compatible chain",
            )
        )

    return PairCheck(issues=tuple(issues))


def check_cassette_derailleur(
    cassette: Cassette, derailleur: RearDerailleur
) -> PairCheck:
    """Check speed count and cog capacity between a cassette and a derailleur.

    The near-capacity warning is evaluated independently of the
    cog-too-large error, so a cassette whose largest cog exceeds the
    derailleur's limit reports both.
    """
    issues: list[CompatibilityIssue] = []
    warnings: list[CompatibilityWarning] = []

    if cassette.speeds != derailleur.speeds:
        issues.append(
            CompatibilityIssue(
                component=DERAILLEUR_CASSETTE,
                issue="Speed mismatch",
                severity=Severity.ERROR,
                description=(
                    f"{derailleur.speeds}-speed derailleur not compatible with "
                    f"{cassette.speeds}-speed cassette"
                ),
            )
        )

    largest = cassette.largest_cog
    if largest > derailleur.max_cog_size:
        issues.append(
            CompatibilityIssue(
                component=DERAILLEUR_CASSETTE,
                issue="Cog size too large",
                severity=Severity.ERROR,
                description=(
                    f"{largest}T largest cog exceeds derailleur's "
                    f"{derailleur.max_cog_size}T capacity"
                ),
                solution=(
                    f"Use a derailleur with {largest}T+ capacity or smaller cassette"
                ),
            )
        )

    if largest > derailleur.max_cog_size * NEAR_CAPACITY_FRACTION:
        warnings.append(
            CompatibilityWarning(
                component=DERAILLEUR_CASSETTE,
                warning="Near capacity limit",
                description=(
                    f"{largest}T cog is close to derailleur's "
                    f"{derailleur.max_cog_size}T limit"
                ),
                recommendation="Consider upgrading derailleur for better performance",
            )
        )

    return PairCheck(issues=tuple(issues), warnings=tuple(warnings))


def check_chain_derailleur(chain: Chain, derailleur: RearDerailleur) -> PairCheck:
    """Check speed count and shifting standard between a chain and a derailleur."""
    issues: list[CompatibilityIssue] = []

    if chain.speeds != derailleur.speeds:
        issues.append(
            CompatibilityIssue(
                component=CHAIN_DERAILLEUR,
                issue="Speed mismatch",
                severity=Severity.ERROR,
                description=(
                    f"{chain.speeds}-speed chain not compatible with "
                    f"{derailleur.speeds}-speed derailleur"
                ),
            )
        )

    shifting = chain_shifting_standard(chain.chain_standard)
    if shifting != derailleur.shifting_standard:
        issues.append(
            CompatibilityIssue(
                component=CHAIN_DERAILLEUR,
                issue="Shifting standard mismatch",
                severity=Severity.ERROR,
                description=(
                    f"{shifting.value} chain not compatible with "
                    f"{derailleur.shifting_standard.value} derailleur"
                ),
            )
        )

    return PairCheck(issues=tuple(issues))
