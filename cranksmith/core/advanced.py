"""Complete-build analysis: drivetrain efficiency and recommendations.

This layer sits on top of :func:`check_compatibility` and only accepts a
complete build (all four components).  The efficiency figures are coarse
heuristics: a nominal 52 mm chainline, a 95 % baseline drivetrain
efficiency reduced for mixed-brand or off-standard chains, and a
cross-chaining index that is higher for multi-ring cranksets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cranksmith.core.components import Cassette, Chain, Crankset, Drivetrain
from cranksmith.core.engine import check_compatibility
from cranksmith.core.gearing import LARGE_GAP_PCT
from cranksmith.core.results import CompatibilityResult, GearAnalysis
from cranksmith.core.standards import required_chain_standard

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

NOMINAL_CHAINLINE_MM: float = 52.0
BASE_DRIVETRAIN_EFFICIENCY: float = 95.0
MIXED_BRAND_PENALTY: float = 1.0
OFF_STANDARD_CHAIN_PENALTY: float = 2.0
EFFICIENCY_ADVISORY_THRESHOLD: float = 94.0
CROSS_CHAIN_MULTI_RING: int = 15
CROSS_CHAIN_SINGLE_RING: int = 5
CROSS_CHAIN_ADVISORY_THRESHOLD: int = 10


class IncompleteBuildError(ValueError):
    """Raised when a build analysis is requested for a partial drivetrain."""


# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DrivetrainEfficiency:
    """Heuristic drivetrain efficiency figures.

    Attributes:
        chainline: Chainline in mm.
        drivetrain: Estimated power-transfer efficiency in percent.
        cross_chaining: Relative cross-chaining exposure index.
        recommendations: Advisory notes.
    """

    chainline: float
    drivetrain: float
    cross_chaining: int
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "chainline": self.chainline,
            "drivetrain": self.drivetrain,
            "crossChaining": self.cross_chaining,
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class Recommendation:
    """A build improvement suggestion."""

    type: str
    priority: str
    title: str
    description: str
    suggestion: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "priority": self.priority,
            "title": self.title,
            "description": self.description,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class BuildAnalysis:
    """Full analysis of a complete build."""

    compatibility: CompatibilityResult
    efficiency: DrivetrainEfficiency
    recommendations: tuple[Recommendation, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "compatibility": self.compatibility.to_dict(),
            "efficiency": self.efficiency.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
        }


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------


def analyze_efficiency(
    cassette: Cassette, chain: Chain, crankset: Crankset
) -> DrivetrainEfficiency:
    """Estimate drivetrain efficiency and cross-chaining exposure."""
    drivetrain = BASE_DRIVETRAIN_EFFICIENCY
    if cassette.manufacturer != chain.manufacturer:
        drivetrain -= MIXED_BRAND_PENALTY
    if chain.chain_standard != required_chain_standard(cassette.chain_compatibility):
        drivetrain -= OFF_STANDARD_CHAIN_PENALTY

    cross_chaining = (
        CROSS_CHAIN_MULTI_RING if crankset.is_multi_ring else CROSS_CHAIN_SINGLE_RING
    )

    notes: list[str] = []
    if drivetrain < EFFICIENCY_ADVISORY_THRESHOLD:
        notes.append(
            "Consider matching chain and cassette brands for optimal efficiency"
        )
    if cross_chaining > CROSS_CHAIN_ADVISORY_THRESHOLD:
        notes.append("Single chainring setup would reduce cross-chain usage")

    return DrivetrainEfficiency(
        chainline=NOMINAL_CHAINLINE_MM,
        drivetrain=drivetrain,
        cross_chaining=cross_chaining,
        recommendations=tuple(notes),
    )


def gear_recommendations(gear_analysis: GearAnalysis | None) -> list[Recommendation]:
    """Suggest cassette changes when the gear spacing has a large jump."""
    if gear_analysis is None or gear_analysis.largest_gap <= LARGE_GAP_PCT:
        return []
    return [
        Recommendation(
            type="gear-ratio",
            priority="high",
            title="Large gear steps detected",
            description=(
                f"Your largest gear step is {gear_analysis.largest_gap:.1f}%, "
                "which may cause difficult transitions."
            ),
            suggestion="Consider a cassette with more evenly spaced cogs",
        )
    ]


def analyze_build(drivetrain: Drivetrain) -> BuildAnalysis:
    """Run compatibility, efficiency and recommendation analysis.

    Args:
        drivetrain: A complete selection.

    Returns:
        The combined :class:`BuildAnalysis`.

    Raises:
        IncompleteBuildError: If any of the four components is missing.
    """
    if (
        drivetrain.cassette is None
        or drivetrain.chain is None
        or drivetrain.rear_derailleur is None
        or drivetrain.crankset is None
    ):
        raise IncompleteBuildError("Complete build required for analysis.")

    compatibility = check_compatibility(drivetrain)
    efficiency = analyze_efficiency(
        drivetrain.cassette, drivetrain.chain, drivetrain.crankset
    )
    return BuildAnalysis(
        compatibility=compatibility,
        efficiency=efficiency,
        recommendations=tuple(gear_recommendations(compatibility.gear_analysis)),
    )
