"""Core compatibility engine modules for CrankSmith."""

from cranksmith.core.advanced import (
    BuildAnalysis,
    DrivetrainEfficiency,
    IncompleteBuildError,
    Recommendation,
    analyze_build,
    analyze_efficiency,
    gear_recommendations,
)
from cranksmith.core.components import (
    Cassette,
    Chain,
    ComponentDataError,
    Crankset,
    Drivetrain,
    RearDerailleur,
    parse_tooth_counts,
)
from cranksmith.core.engine import check_compatibility
from cranksmith.core.gearing import (
    analyze_gear_ratios,
    gear_efficiency,
    gear_ratios,
    gear_steps,
)
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
from cranksmith.core.standards import (
    BBStandard,
    BikeType,
    CageLength,
    ChainStandard,
    FreehubStandard,
    ShiftingStandard,
    allowed_chain_standards,
    chain_shifting_standard,
    required_chain_standard,
)

__all__ = [
    "BBStandard",
    "BikeType",
    "BuildAnalysis",
    "CageLength",
    "Cassette",
    "Chain",
    "ChainStandard",
    "CompatibilityIssue",
    "CompatibilityResult",
    "CompatibilityWarning",
    "ComponentDataError",
    "Crankset",
    "Drivetrain",
    "DrivetrainEfficiency",
    "FreehubStandard",
    "GearAnalysis",
    "IncompleteBuildError",
    "PairCheck",
    "RearDerailleur",
    "Recommendation",
    "Severity",
    "ShiftingStandard",
    "allowed_chain_standards",
    "analyze_build",
    "analyze_efficiency",
    "analyze_gear_ratios",
    "calculate_compatibility_score",
    "chain_shifting_standard",
    "check_cassette_chain",
    "check_cassette_derailleur",
    "check_chain_derailleur",
    "check_compatibility",
    "gear_efficiency",
    "gear_ratios",
    "gear_recommendations",
    "gear_steps",
    "parse_tooth_counts",
    "required_chain_standard",
]
