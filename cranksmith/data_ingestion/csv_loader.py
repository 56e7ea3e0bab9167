"""Tabular catalog ingestion for the CrankSmith engine.

Catalog exports arrive as one CSV file per component kind with snake_case
column headers matching the record fields (``speeds``, ``cogs``,
``chain_standard`` ...).  Rows are converted with the same validation used
for the YAML catalog, so a corrupt row fails loudly at load time.

Tooth-count columns (``cogs``, ``chainrings``) are read as strings so that
``"10-12-14"`` is never mangled by type inference.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from cranksmith.config import SCHEMAS, build_component
from cranksmith.core.components import ComponentDataError

logger = logging.getLogger(__name__)


def load_component_table(path: Path | str, kind: str) -> list[Any]:
    """Load components of one kind from a CSV export.

    Args:
        path: CSV file path.
        kind: Component kind, e.g. ``"cassettes"`` or ``"cranksets"``.

    Returns:
        Component records in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If *kind* is unknown.
        ComponentDataError: If a required column is absent or a row holds
            malformed values.
    """
    if kind not in SCHEMAS:
        raise ValueError(f"Unknown component kind '{kind}'")
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Component table not found: {csv_path}")

    schema = SCHEMAS[kind]
    header = pd.read_csv(csv_path, nrows=0).columns
    text_columns = {
        name: str for name in schema.teeth + ("model", "series") if name in header
    }
    df = pd.read_csv(csv_path, dtype=text_columns)

    missing = [name for name in schema.required if name not in df.columns]
    if missing:
        raise ComponentDataError(
            f"{csv_path.name} is missing required column(s): {', '.join(missing)}"
        )

    # Blank cells become None rather than NaN.
    df = df.astype(object).where(df.notna(), None)

    components: list[Any] = []
    for idx, record in enumerate(df.to_dict(orient="records")):
        row = {
            key: value.item() if isinstance(value, np.generic) else value
            for key, value in record.items()
        }
        where = f"{csv_path.name} row {idx} ({row.get('model') or '<unknown>'})"
        components.append(build_component(kind, row, where))

    logger.debug("Loaded %d %s from %s", len(components), kind, csv_path)
    return components
