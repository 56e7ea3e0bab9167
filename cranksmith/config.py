"""Component catalog loader for the CrankSmith engine.

The catalog is the boundary where raw records become validated component
objects.  Tooth-count strings are parsed here once; anything malformed is
rejected with a :class:`ComponentDataError` that names the offending entry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from cranksmith.core.components import (
    Cassette,
    Chain,
    ComponentDataError,
    Crankset,
    RearDerailleur,
)

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent / "data"
CATALOG_PATH: Path = DATA_DIR / "catalog.yaml"

CASSETTES = "cassettes"
CHAINS = "chains"
REAR_DERAILLEURS = "rear_derailleurs"
CRANKSETS = "cranksets"
COMPONENT_KINDS: tuple[str, ...] = (CASSETTES, CHAINS, REAR_DERAILLEURS, CRANKSETS)

_COMMON_OPTIONAL_INT: tuple[str, ...] = ("year", "weight", "msrp")
_COMMON_OPTIONAL_STR: tuple[str, ...] = ("series", "bike_type")


@dataclass(frozen=True)
class _KindSchema:
    """Field layout of one component kind."""

    factory: Callable[..., Any]
    required_int: tuple[str, ...] = ()
    required_str: tuple[str, ...] = ()
    required_float: tuple[str, ...] = ()
    teeth: tuple[str, ...] = ()
    optional_int: tuple[str, ...] = ()
    optional_str: tuple[str, ...] = ()
    optional_bool: tuple[str, ...] = ()

    @property
    def required(self) -> tuple[str, ...]:
        return (
            ("manufacturer", "model")
            + self.required_int
            + self.required_str
            + self.required_float
            + self.teeth
        )


SCHEMAS: dict[str, _KindSchema] = {
    CASSETTES: _KindSchema(
        factory=Cassette,
        required_int=("speeds",),
        required_str=("freehub_standard", "chain_compatibility"),
        teeth=("cogs",),
    ),
    CHAINS: _KindSchema(
        factory=Chain,
        required_int=("speeds",),
        required_str=("chain_standard",),
        optional_int=("links",),
        optional_str=("master_link",),
    ),
    REAR_DERAILLEURS: _KindSchema(
        factory=RearDerailleur,
        required_int=("speeds", "max_cog_size"),
        required_str=("cage_length", "shifting_standard"),
        optional_int=("min_cog_size", "total_capacity"),
        optional_bool=("clutch",),
    ),
    CRANKSETS: _KindSchema(
        factory=Crankset,
        required_str=("bb_standard",),
        required_float=("crank_length",),
        teeth=("chainrings",),
    ),
}


# ---------------------------------------------------------------------------
# Value conversion
# ---------------------------------------------------------------------------


def _is_missing(value: Any) -> bool:
    # NaN is the only value not equal to itself.
    return value is None or (isinstance(value, float) and value != value)


def _to_int(value: Any, name: str, where: str) -> int:
    if isinstance(value, bool):
        raise ComponentDataError(f"{where}: '{name}' must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ComponentDataError(f"{where}: '{name}' must be an integer, got {value!r}")


def _to_float(value: Any, name: str, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ComponentDataError(f"{where}: '{name}' must be numeric, got {value!r}")
    try:
        return float(value)
    except ValueError as exc:
        raise ComponentDataError(
            f"{where}: '{name}' must be numeric, got {value!r}"
        ) from exc


def _to_bool(value: Any, name: str, where: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "yes", "1"):
        return True
    if isinstance(value, str) and value.strip().lower() in ("false", "no", "0"):
        return False
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ComponentDataError(f"{where}: '{name}' must be a boolean, got {value!r}")


def build_component(kind: str, entry: Mapping[str, Any], where: str) -> Any:
    """Convert one raw catalog record into a component object.

    Args:
        kind: One of :data:`COMPONENT_KINDS`.
        entry: Raw field mapping (YAML entry or CSV row).  Missing optional
            values may be ``None`` or NaN.
        where: Location label used in error messages.

    Returns:
        A :class:`Cassette`, :class:`Chain`, :class:`RearDerailleur` or
        :class:`Crankset`.

    Raises:
        ValueError: If *kind* is unknown.
        ComponentDataError: If a required field is missing or a value
            cannot be converted.
    """
    if kind not in SCHEMAS:
        raise ValueError(f"Unknown component kind '{kind}'")
    schema = SCHEMAS[kind]

    for name in schema.required:
        if _is_missing(entry.get(name)):
            raise ComponentDataError(f"{where} is missing required field '{name}'")

    kwargs: dict[str, Any] = {
        "manufacturer": str(entry["manufacturer"]),
        "model": str(entry["model"]),
    }
    for name in schema.required_int:
        kwargs[name] = _to_int(entry[name], name, where)
    for name in schema.required_str:
        kwargs[name] = str(entry[name])
    for name in schema.required_float:
        kwargs[name] = _to_float(entry[name], name, where)
    for name in schema.teeth:
        raw = entry[name]
        # An unquoted single ring ("chainrings: 32") arrives as an int.
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            raw = str(_to_int(raw, name, where))
        kwargs[name] = raw

    for name in _COMMON_OPTIONAL_INT + schema.optional_int:
        if not _is_missing(entry.get(name)):
            kwargs[name] = _to_int(entry[name], name, where)
    for name in _COMMON_OPTIONAL_STR + schema.optional_str:
        if not _is_missing(entry.get(name)):
            kwargs[name] = str(entry[name])
    for name in schema.optional_bool:
        if not _is_missing(entry.get(name)):
            kwargs[name] = _to_bool(entry[name], name, where)

    try:
        return schema.factory(**kwargs)
    except ComponentDataError as exc:
        raise ComponentDataError(f"{where}: {exc}") from exc


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


@dataclass
class Catalog:
    """In-memory component catalog, one list per component kind."""

    cassettes: list[Cassette] = field(default_factory=list)
    chains: list[Chain] = field(default_factory=list)
    rear_derailleurs: list[RearDerailleur] = field(default_factory=list)
    cranksets: list[Crankset] = field(default_factory=list)

    def components(self, kind: str) -> list[Any]:
        """Return the component list for *kind*."""
        if kind not in COMPONENT_KINDS:
            raise ValueError(f"Unknown component kind '{kind}'")
        return getattr(self, kind)

    def find(self, kind: str, model: str) -> Any:
        """Look up a component of *kind* by model name.

        Raises:
            KeyError: If no component of that kind has the model name.
        """
        for component in self.components(kind):
            if component.model == model:
                return component
        raise KeyError(f"No {kind} entry with model '{model}'")


def load_catalog(path: Path | None = None) -> Catalog:
    """Load the component catalog from a YAML file.

    The file holds one top-level list per component kind (``cassettes``,
    ``chains``, ``rear_derailleurs``, ``cranksets``); absent kinds load as
    empty lists.

    Args:
        path: Optional override for the catalog file path.

    Returns:
        A populated :class:`Catalog`.

    Raises:
        FileNotFoundError: If the catalog file does not exist.
        ComponentDataError: If any entry is missing fields or holds
            malformed values.
    """
    catalog_path = path or CATALOG_PATH
    if not catalog_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {catalog_path}")

    with open(catalog_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise ComponentDataError(f"Catalog {catalog_path} must be a mapping of lists")

    catalog = Catalog()
    for kind in COMPONENT_KINDS:
        entries = data.get(kind) or []
        if not isinstance(entries, list):
            raise ComponentDataError(f"Catalog section '{kind}' must be a list")
        target = catalog.components(kind)
        for idx, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ComponentDataError(f"{kind} entry {idx} must be a mapping")
            where = f"{kind} entry {idx} ({entry.get('model', '<unknown>')})"
            target.append(build_component(kind, entry, where))
        logger.debug("Loaded %d %s from %s", len(target), kind, catalog_path)

    return catalog
