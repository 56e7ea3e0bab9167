"""Gear-ratio analysis for a cassette and crankset.

Every chainring is combined with every cog, and the resulting ratios are
sorted into the order a rider perceives them, easiest to hardest:

    ratio = chainring_teeth / cog_teeth

The step between two consecutive sorted ratios is expressed as a percentage
of the lower one.  The efficiency score rewards steps that sit close to an
ideal 17 % and penalises any single jump above 25 %:

    efficiency = 100 - 2 * mean(|step - 17|) - 3 * max(0, largest_gap - 25)

clamped to ``[0, 100]``.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from cranksmith.core.components import Cassette, Crankset
from cranksmith.core.results import GearAnalysis

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

IDEAL_STEP_PCT: float = 17.0
LARGE_GAP_PCT: float = 25.0
STEP_DEVIATION_WEIGHT: float = 2.0
LARGE_GAP_WEIGHT: float = 3.0


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def gear_ratios(chainrings: Sequence[int], cogs: Sequence[int]) -> NDArray[np.float64]:
    """Return every chainring/cog ratio, sorted ascending.

    The result has ``len(chainrings) * len(cogs)`` entries.
    """
    rings = np.asarray(chainrings, dtype=np.float64)
    sprockets = np.asarray(cogs, dtype=np.float64)
    return np.sort(np.divide.outer(rings, sprockets).ravel())


def gear_steps(ratios: Sequence[float] | NDArray[np.float64]) -> NDArray[np.float64]:
    """Percentage increase from each sorted ratio to the next.

    Args:
        ratios: Ratios sorted ascending.

    Returns:
        Array of ``len(ratios) - 1`` step percentages.

    Raises:
        ValueError: If any ratio is not strictly positive, since a step is
            relative to the lower ratio.
    """
    values = np.asarray(ratios, dtype=np.float64)
    if values.size and np.any(values <= 0.0):
        raise ValueError("gear ratios must be > 0 to compute steps.")
    return np.diff(values) / values[:-1] * 100.0


def gear_efficiency(steps: Sequence[float] | NDArray[np.float64], largest_gap: float) -> float:
    """Score step consistency on a 0-100 scale.

    An empty step list (single-ratio drivetrain) scores 100.
    """
    values = np.asarray(steps, dtype=np.float64)
    if values.size == 0:
        return 100.0
    deviation = float(np.mean(np.abs(values - IDEAL_STEP_PCT)))
    efficiency = 100.0
    efficiency -= deviation * STEP_DEVIATION_WEIGHT
    efficiency -= max(0.0, largest_gap - LARGE_GAP_PCT) * LARGE_GAP_WEIGHT
    return max(0.0, min(100.0, efficiency))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_gear_ratios(cassette: Cassette, crankset: Crankset) -> GearAnalysis:
    """Compute gear-ratio statistics for a cassette and crankset.

    Args:
        cassette: Cassette supplying the cog tooth counts.
        crankset: Crankset supplying the chainring tooth counts.

    Returns:
        A :class:`GearAnalysis` over all ``chainrings x cogs`` ratios.
        When only one ratio exists, ``average_step`` and ``largest_gap``
        are ``0.0``.
    """
    ratios = gear_ratios(crankset.chainrings, cassette.cogs)
    steps = gear_steps(ratios)

    min_ratio = float(ratios[0])
    max_ratio = float(ratios[-1])

    if steps.size:
        average_step = float(np.mean(steps))
        largest_gap = float(np.max(steps))
    else:
        average_step = 0.0
        largest_gap = 0.0

    return GearAnalysis(
        ratios=tuple(ratios.tolist()),
        min_ratio=min_ratio,
        max_ratio=max_ratio,
        range=max_ratio - min_ratio,
        steps=tuple(steps.tolist()),
        average_step=average_step,
        largest_gap=largest_gap,
        efficiency=gear_efficiency(steps, largest_gap),
    )
