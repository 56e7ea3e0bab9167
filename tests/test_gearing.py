"""Tests for the gear-ratio analysis."""

import numpy as np
import pytest

from cranksmith.core.components import Cassette, Crankset
from cranksmith.core.gearing import (
    analyze_gear_ratios,
    gear_efficiency,
    gear_ratios,
    gear_steps,
)

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _cassette(cogs: str) -> Cassette:
    return Cassette(
        manufacturer="Test",
        model="Cassette",
        speeds=len(cogs.split("-")),
        cogs=cogs,
        freehub_standard="Shimano HG",
        chain_compatibility="Shimano HG",
    )


def _crankset(chainrings: str) -> Crankset:
    return Crankset(
        manufacturer="Test",
        model="Crankset",
        chainrings=chainrings,
        bb_standard="BSA",
        crank_length=175.0,
    )


# ---------------------------------------------------------------------------
# analyze_gear_ratios
# ---------------------------------------------------------------------------


def test_single_ring_eagle_range() -> None:
    """A 32T ring on a 10-50 cassette spans 0.64 to 3.2."""
    analysis = analyze_gear_ratios(
        _cassette("10-12-14-16-18-21-24-28-32-36-42-50"), _crankset("32")
    )
    assert len(analysis.ratios) == 12
    assert analysis.min_ratio == pytest.approx(0.64)
    assert analysis.max_ratio == pytest.approx(3.2)
    assert analysis.range == pytest.approx(2.56)


def test_ratio_count_is_rings_times_cogs() -> None:
    analysis = analyze_gear_ratios(
        _cassette("11-12-13-14-16-18-20-22-25-28-32"), _crankset("50-34")
    )
    assert len(analysis.ratios) == 22
    assert len(analysis.steps) == 21


def test_ratios_sorted_and_bounded() -> None:
    analysis = analyze_gear_ratios(
        _cassette("11-12-13-14-16-18-20-22-25-28-32"), _crankset("50-34")
    )
    assert list(analysis.ratios) == sorted(analysis.ratios)
    assert all(analysis.min_ratio <= r <= analysis.max_ratio for r in analysis.ratios)
    assert analysis.range == analysis.max_ratio - analysis.min_ratio
    assert analysis.min_ratio == pytest.approx(34 / 32)
    assert analysis.max_ratio == pytest.approx(50 / 11)


def test_step_statistics_match_steps() -> None:
    analysis = analyze_gear_ratios(
        _cassette("10-12-14-16-18-21-24-28-32-36-42-50"), _crankset("32")
    )
    assert analysis.largest_gap == max(analysis.steps)
    assert analysis.average_step == pytest.approx(
        sum(analysis.steps) / len(analysis.steps)
    )


def test_steps_are_percentages_of_lower_ratio() -> None:
    analysis = analyze_gear_ratios(_cassette("10-20"), _crankset("40"))
    assert analysis.ratios == (2.0, 4.0)
    assert analysis.steps == (100.0,)


def test_single_ratio_has_no_steps() -> None:
    analysis = analyze_gear_ratios(_cassette("16"), _crankset("32"))
    assert analysis.ratios == (2.0,)
    assert analysis.steps == ()
    assert analysis.average_step == 0.0
    assert analysis.largest_gap == 0.0
    assert analysis.efficiency == 100.0
    assert analysis.range == 0.0


def test_duplicate_ratios_give_zero_step() -> None:
    # 40/20 and 20/10 are both 2.0.
    analysis = analyze_gear_ratios(_cassette("10-20"), _crankset("40-20"))
    assert analysis.ratios == (1.0, 2.0, 2.0, 4.0)
    assert analysis.steps == (100.0, 0.0, 100.0)


def test_analysis_returns_plain_floats() -> None:
    analysis = analyze_gear_ratios(_cassette("11-13-15"), _crankset("34"))
    assert all(type(r) is float for r in analysis.ratios)
    assert type(analysis.efficiency) is float


def test_analysis_is_deterministic() -> None:
    cassette = _cassette("10-12-14-16-18-21-24-28-33-39-45-51")
    crankset = _crankset("34")
    assert analyze_gear_ratios(cassette, crankset) == analyze_gear_ratios(
        cassette, crankset
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def test_gear_ratios_cartesian_product() -> None:
    ratios = gear_ratios((40, 30), (10, 15))
    np.testing.assert_allclose(ratios, [2.0, 40 / 15, 3.0, 4.0])


def test_gear_steps_rejects_zero_ratio() -> None:
    with pytest.raises(ValueError, match="> 0"):
        gear_steps([0.0, 1.0, 2.0])


def test_gear_steps_empty_and_single() -> None:
    assert gear_steps([]).size == 0
    assert gear_steps([1.5]).size == 0


def test_gear_steps_values() -> None:
    np.testing.assert_allclose(
        gear_steps([1.0, 1.17, 1.5]), [17.0, (1.5 - 1.17) / 1.17 * 100]
    )


def test_efficiency_ideal_steps() -> None:
    assert gear_efficiency([17.0, 17.0, 17.0], 17.0) == pytest.approx(100.0)


def test_efficiency_penalises_deviation() -> None:
    # Mean absolute deviation 2 -> minus 4.
    assert gear_efficiency([15.0, 19.0], 19.0) == pytest.approx(96.0)


def test_efficiency_penalises_large_gap() -> None:
    # Deviation 13 -> minus 26; gap 5 over 25 -> minus 15.
    assert gear_efficiency([30.0], 30.0) == pytest.approx(59.0)


def test_efficiency_clamped_to_zero() -> None:
    assert gear_efficiency([100.0], 100.0) == 0.0


def test_efficiency_empty_steps() -> None:
    assert gear_efficiency([], 0.0) == 100.0
