"""Result containers produced by the compatibility engine.

Every container is built fresh per engine call and never mutated afterwards.
``to_dict`` renders the camelCase shape the web layer serialises as JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class CompatibilityIssue:
    """A problem found between two components.

    Attributes:
        component: Pair label used for display grouping, e.g.
            ``"Chain/Cassette"``.
        issue: Short issue label, e.g. ``"Speed mismatch"``.
        severity: Only :attr:`Severity.ERROR` blocks compatibility.
        description: Human-readable explanation.
        solution: Optional fix suggestion.
    """

    component: str
    issue: str
    severity: Severity
    description: str
    solution: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "component": self.component,
            "issue": self.issue,
            "severity": self.severity.value,
            "description": self.description,
        }
        if self.solution is not None:
            data["solution"] = self.solution
        return data


@dataclass(frozen=True)
class CompatibilityWarning:
    """Advisory note about a component pair; never blocks compatibility."""

    component: str
    warning: str
    description: str
    recommendation: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "component": self.component,
            "warning": self.warning,
            "description": self.description,
        }
        if self.recommendation is not None:
            data["recommendation"] = self.recommendation
        return data


@dataclass(frozen=True)
class PairCheck:
    """Issues and warnings produced by one pairwise check."""

    issues: tuple[CompatibilityIssue, ...] = ()
    warnings: tuple[CompatibilityWarning, ...] = ()


@dataclass(frozen=True)
class GearAnalysis:
    """Gear-ratio statistics for a cassette and crankset.

    Attributes:
        ratios: Every chainring/cog ratio, sorted ascending.
        min_ratio: Smallest ratio (easiest gear).
        max_ratio: Largest ratio (hardest gear).
        range: ``max_ratio - min_ratio``.
        steps: Percentage increase between consecutive sorted ratios.
        average_step: Mean of ``steps``.
        largest_gap: Maximum of ``steps``.
        efficiency: Step-consistency score in [0, 100].
    """

    ratios: tuple[float, ...]
    min_ratio: float
    max_ratio: float
    range: float
    steps: tuple[float, ...]
    average_step: float
    largest_gap: float
    efficiency: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "ratios": list(self.ratios),
            "minRatio": self.min_ratio,
            "maxRatio": self.max_ratio,
            "range": self.range,
            "steps": list(self.steps),
            "averageStep": self.average_step,
            "largestGap": self.largest_gap,
            "efficiency": self.efficiency,
        }


@dataclass(frozen=True)
class CompatibilityResult:
    """Outcome of :func:`cranksmith.core.engine.check_compatibility`.

    Attributes:
        is_compatible: ``True`` iff no issue has error severity.
        compatibility_score: Integer score in [0, 100].
        issues: Issues in check order.
        warnings: Warnings in check order.
        gear_analysis: Present only when cassette and crankset were given.
    """

    is_compatible: bool
    compatibility_score: int
    issues: tuple[CompatibilityIssue, ...] = ()
    warnings: tuple[CompatibilityWarning, ...] = ()
    gear_analysis: GearAnalysis | None = None

    @property
    def errors(self) -> tuple[CompatibilityIssue, ...]:
        """Issues with error severity."""
        return tuple(i for i in self.issues if i.severity is Severity.ERROR)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "isCompatible": self.is_compatible,
            "compatibilityScore": self.compatibility_score,
            "issues": [issue.to_dict() for issue in self.issues],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }
        if self.gear_analysis is not None:
            data["gearAnalysis"] = self.gear_analysis.to_dict()
        return data
