"""CLI entrypoint for the CrankSmith drivetrain compatibility engine.

Usage:
    python main.py --cassette CS-M8100 --chain CN-M8100 \
        --derailleur RD-M8100 --crankset FC-M8100

Components are selected by model name from the catalog.  At least two
components are required.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from cranksmith import __version__
from cranksmith.config import (
    CASSETTES,
    CHAINS,
    CRANKSETS,
    REAR_DERAILLEURS,
    Catalog,
    load_catalog,
)
from cranksmith.core.advanced import analyze_build
from cranksmith.core.components import Drivetrain
from cranksmith.core.engine import check_compatibility
from cranksmith.core.results import CompatibilityResult

MIN_COMPONENTS: int = 2


def _select(catalog: Catalog, args: argparse.Namespace) -> Drivetrain:
    def pick(kind: str, model: str | None):
        return catalog.find(kind, model) if model else None

    return Drivetrain(
        cassette=pick(CASSETTES, args.cassette),
        chain=pick(CHAINS, args.chain),
        rear_derailleur=pick(REAR_DERAILLEURS, args.derailleur),
        crankset=pick(CRANKSETS, args.crankset),
    )


def _print_report(result: CompatibilityResult) -> None:
    verdict = "COMPATIBLE" if result.is_compatible else "NOT COMPATIBLE"
    print(f"\nVerdict : {verdict}")
    print(f"Score   : {result.compatibility_score}/100")

    if result.issues:
        print("\nIssues:")
        for issue in result.issues:
            print(f"  [{issue.severity.value:>7}] {issue.component}: {issue.issue}")
            print(f"            {issue.description}")
            if issue.solution:
                print(f"            -> {issue.solution}")

    if result.warnings:
        print("\nWarnings:")
        for warning in result.warnings:
            print(f"  {warning.component}: {warning.warning}")
            print(f"    {warning.description}")
            if warning.recommendation:
                print(f"    -> {warning.recommendation}")

    gears = result.gear_analysis
    if gears is not None:
        print("\nGear analysis:")
        print(f"  Ratios      : {len(gears.ratios)}")
        print(f"  Range       : {gears.min_ratio:.2f} - {gears.max_ratio:.2f}")
        print(f"  Avg step    : {gears.average_step:.1f}%")
        print(f"  Largest gap : {gears.largest_gap:.1f}%")
        print(f"  Efficiency  : {gears.efficiency:.1f}/100")


def main(argv: list[str] | None = None) -> int:
    """Check a component selection from the catalog.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = compatible, 1 = incompatible, 2 = usage error).
    """
    parser = argparse.ArgumentParser(description="Check drivetrain compatibility")
    parser.add_argument("--cassette", type=str, default=None, help="Cassette model")
    parser.add_argument("--chain", type=str, default=None, help="Chain model")
    parser.add_argument("--derailleur", type=str, default=None, help="Rear derailleur model")
    parser.add_argument("--crankset", type=str, default=None, help="Crankset model")
    parser.add_argument("--catalog", type=Path, default=None, help="Catalog YAML path")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a report")
    parser.add_argument(
        "--full", action="store_true", help="Run the complete-build analysis"
    )
    args = parser.parse_args(argv)

    catalog = load_catalog(args.catalog)
    try:
        drivetrain = _select(catalog, args)
    except KeyError as exc:
        print(f"error: {exc.args[0]}", file=sys.stderr)
        return 2

    if drivetrain.component_count < MIN_COMPONENTS:
        print(
            f"error: at least {MIN_COMPONENTS} components required for "
            "compatibility check",
            file=sys.stderr,
        )
        return 2

    if args.full:
        if not drivetrain.is_complete:
            print("error: complete build required for analysis", file=sys.stderr)
            return 2
        analysis = analyze_build(drivetrain)
        result = analysis.compatibility
        payload = analysis.to_dict()
    else:
        result = check_compatibility(drivetrain)
        payload = result.to_dict()

    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print(f"CrankSmith Compatibility Engine v{__version__}")
        print("=" * 56)
        _print_report(result)
        if args.full:
            eff = analysis.efficiency
            print("\nEfficiency:")
            print(f"  Chainline      : {eff.chainline:.0f} mm")
            print(f"  Drivetrain     : {eff.drivetrain:.0f}%")
            print(f"  Cross-chaining : {eff.cross_chaining}")
            for note in analysis.efficiency.recommendations:
                print(f"  - {note}")
            for rec in analysis.recommendations:
                print(f"  [{rec.priority}] {rec.title}: {rec.suggestion}")

    return 0 if result.is_compatible else 1


if __name__ == "__main__":
    sys.exit(main())
