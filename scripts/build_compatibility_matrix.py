#!/usr/bin/env python
"""Check every drivetrain combination in the catalog.

For each cassette x chain x rear derailleur x crankset combination the
compatibility engine is run and the verdict, score and gear-analysis
summary are written to ``results/compatibility_matrix.json``.  A short
summary of the best-scoring compatible builds is printed.

Usage
-----
::

    python scripts/build_compatibility_matrix.py [path/to/catalog.yaml]
"""

from __future__ import annotations

import itertools
import json
import os
import sys
from pathlib import Path
from typing import Any

# Ensure the project root is on the import path when running as a script.
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from cranksmith.config import Catalog, load_catalog  # noqa: E402
from cranksmith.core.components import Drivetrain  # noqa: E402
from cranksmith.core.engine import check_compatibility  # noqa: E402

RESULTS_DIR: str = os.path.join(_project_root, "results")
OUTPUT_PATH: str = os.path.join(RESULTS_DIR, "compatibility_matrix.json")
TOP_N: int = 5


def build_matrix(catalog: Catalog) -> list[dict[str, Any]]:
    """Run the engine over every full combination in *catalog*.

    Returns:
        One row per combination, sorted by descending score then by model
        names so the output is stable.
    """
    rows: list[dict[str, Any]] = []
    for cassette, chain, derailleur, crankset in itertools.product(
        catalog.cassettes,
        catalog.chains,
        catalog.rear_derailleurs,
        catalog.cranksets,
    ):
        result = check_compatibility(
            Drivetrain(
                cassette=cassette,
                chain=chain,
                rear_derailleur=derailleur,
                crankset=crankset,
            )
        )
        gears = result.gear_analysis
        rows.append(
            {
                "cassette": cassette.model,
                "chain": chain.model,
                "rearDerailleur": derailleur.model,
                "crankset": crankset.model,
                "isCompatible": result.is_compatible,
                "compatibilityScore": result.compatibility_score,
                "errors": [issue.issue for issue in result.errors],
                "warnings": [w.warning for w in result.warnings],
                "gearRange": round(gears.range, 4) if gears else None,
                "gearEfficiency": round(gears.efficiency, 2) if gears else None,
            }
        )

    rows.sort(
        key=lambda r: (
            -r["compatibilityScore"],
            r["cassette"],
            r["chain"],
            r["rearDerailleur"],
            r["crankset"],
        )
    )
    return rows


def main() -> None:
    """Build and save the compatibility matrix."""
    catalog_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    catalog = load_catalog(catalog_path)

    rows = build_matrix(catalog)
    compatible = [r for r in rows if r["isCompatible"]]

    os.makedirs(RESULTS_DIR, exist_ok=True)
    with open(OUTPUT_PATH, "w", encoding="utf-8") as fh:
        json.dump({"combinations": rows}, fh, indent=2)

    print(f"Checked {len(rows)} combinations; {len(compatible)} compatible.")
    print(f"Results written to {OUTPUT_PATH}\n")
    print(f"  {'Score':>5}  Build")
    for row in compatible[:TOP_N]:
        build = " / ".join(
            (row["cassette"], row["chain"], row["rearDerailleur"], row["crankset"])
        )
        print(f"  {row['compatibilityScore']:5d}  {build}")


if __name__ == "__main__":
    main()
