"""Drivetrain component records.

Catalog data stores cassette cogs and crankset chainrings as hyphen-encoded
tooth counts (``"10-12-14-16-18-21-24-28-33-39-45-51"``, ``"50-34"``).  The
records below parse that encoding once, at construction, into a tuple of
positive integers.  Malformed catalog data raises :class:`ComponentDataError`
immediately rather than surfacing later inside the gear-ratio analysis.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from cranksmith.core.standards import (
    BBStandard,
    BikeType,
    CageLength,
    ChainStandard,
    FreehubStandard,
    ShiftingStandard,
)


class ComponentDataError(ValueError):
    """Raised when component data is malformed (corrupt catalog record)."""


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def parse_tooth_counts(value: str | Sequence[int], field_name: str) -> tuple[int, ...]:
    """Parse a tooth-count encoding into a tuple of positive integers.

    Args:
        value: Either a hyphen-separated string such as ``"50-34"`` or a
            sequence of integers.
        field_name: Name used in error messages.

    Returns:
        The tooth counts in their original order.

    Raises:
        ComponentDataError: If the value is empty, contains a token that is
            not an integer, or contains a count below 1.
    """
    if isinstance(value, str):
        tokens = value.split("-")
        counts: list[int] = []
        for token in tokens:
            token = token.strip()
            try:
                counts.append(int(token))
            except ValueError as exc:
                raise ComponentDataError(
                    f"{field_name} contains non-numeric token {token!r} in {value!r}"
                ) from exc
    else:
        counts = []
        for item in value:
            if isinstance(item, bool) or not isinstance(item, int):
                raise ComponentDataError(
                    f"{field_name} must contain integers, got {item!r}"
                )
            counts.append(int(item))

    if not counts:
        raise ComponentDataError(f"{field_name} must contain at least one tooth count.")
    for count in counts:
        if count < 1:
            raise ComponentDataError(
                f"{field_name} tooth counts must be >= 1, got {count}"
            )
    return tuple(counts)


def _require_positive_int(value: object, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ComponentDataError(f"{field_name} must be a positive integer, got {value!r}")


def _coerce_enum(record: object, field_name: str, enum_cls: type[Enum]) -> None:
    """Replace a raw string field on a frozen record with its enum member."""
    raw = getattr(record, field_name)
    if isinstance(raw, enum_cls):
        return
    try:
        member = enum_cls(raw)
    except ValueError as exc:
        allowed = ", ".join(repr(m.value) for m in enum_cls)
        raise ComponentDataError(
            f"{field_name} must be one of {allowed}, got {raw!r}"
        ) from exc
    object.__setattr__(record, field_name, member)


def _validate_common(record: _Component) -> None:
    if not record.manufacturer:
        raise ComponentDataError("manufacturer must not be empty.")
    if not record.model:
        raise ComponentDataError("model must not be empty.")
    if record.weight is not None and record.weight < 0:
        raise ComponentDataError("weight must be >= 0 grams.")
    if record.msrp is not None and record.msrp < 0:
        raise ComponentDataError("msrp must be >= 0 cents.")
    if record.bike_type is not None:
        _coerce_enum(record, "bike_type", BikeType)


# ---------------------------------------------------------------------------
# Component records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class _Component:
    """Descriptive fields shared by every catalog component.

    Only ``manufacturer`` and ``model`` are required; the rest is catalog
    metadata that callers use for display.

    Attributes:
        manufacturer: Brand name, e.g. ``"SRAM"``.
        model: Model designation, e.g. ``"PG-1230"``.
        series: Product family, e.g. ``"GX Eagle"``.
        year: Model year.
        weight: Weight in grams.
        msrp: Retail price in integer cents.
        bike_type: Intended discipline.
    """

    manufacturer: str
    model: str
    series: str | None = None
    year: int | None = None
    weight: int | None = None
    msrp: int | None = None
    bike_type: BikeType | None = None


@dataclass(frozen=True, kw_only=True)
class Cassette(_Component):
    """Rear sprocket cluster.

    Attributes:
        speeds: Number of cogs the drivetrain indexes.
        cogs: Tooth counts, smallest to largest.  Accepts the hyphen-encoded
            catalog string on construction.
        freehub_standard: Freehub body interface.
        chain_compatibility: Free-text tag used to infer the chain standard
            the cassette requires.
    """

    speeds: int
    cogs: tuple[int, ...]
    freehub_standard: FreehubStandard
    chain_compatibility: str

    def __post_init__(self) -> None:
        """Parse cogs and validate cassette parameters."""
        _validate_common(self)
        _require_positive_int(self.speeds, "speeds")
        cogs = parse_tooth_counts(self.cogs, "cogs")
        if any(a >= b for a, b in zip(cogs, cogs[1:])):
            raise ComponentDataError(f"cogs must be strictly ascending, got {cogs}")
        object.__setattr__(self, "cogs", cogs)
        _coerce_enum(self, "freehub_standard", FreehubStandard)

    @property
    def largest_cog(self) -> int:
        return self.cogs[-1]

    @property
    def smallest_cog(self) -> int:
        return self.cogs[0]


@dataclass(frozen=True, kw_only=True)
class Chain(_Component):
    """Drive chain.

    Attributes:
        speeds: Speed count the chain is built for.
        chain_standard: Chain profile standard.
        links: Number of links as sold.
        master_link: Connector description, e.g. ``"PowerLock"``.
    """

    speeds: int
    chain_standard: ChainStandard
    links: int | None = None
    master_link: str | None = None

    def __post_init__(self) -> None:
        """Validate chain parameters."""
        _validate_common(self)
        _require_positive_int(self.speeds, "speeds")
        _coerce_enum(self, "chain_standard", ChainStandard)
        if self.links is not None:
            _require_positive_int(self.links, "links")


@dataclass(frozen=True, kw_only=True)
class RearDerailleur(_Component):
    """Rear derailleur.

    Attributes:
        speeds: Speed count the derailleur indexes.
        cage_length: Cage size.
        max_cog_size: Largest cog tooth count the derailleur can wrap.
        min_cog_size: Smallest supported cog, if published.
        total_capacity: Total wrap capacity in teeth, if published.
        shifting_standard: Cable-pull / shifting family.
        clutch: Whether the derailleur has a chain-retention clutch.
    """

    speeds: int
    cage_length: CageLength
    max_cog_size: int
    shifting_standard: ShiftingStandard
    min_cog_size: int | None = None
    total_capacity: int | None = None
    clutch: bool = False

    def __post_init__(self) -> None:
        """Validate derailleur parameters."""
        _validate_common(self)
        _require_positive_int(self.speeds, "speeds")
        _require_positive_int(self.max_cog_size, "max_cog_size")
        if self.min_cog_size is not None:
            _require_positive_int(self.min_cog_size, "min_cog_size")
            if self.min_cog_size > self.max_cog_size:
                raise ComponentDataError("min_cog_size must be <= max_cog_size.")
        if self.total_capacity is not None:
            _require_positive_int(self.total_capacity, "total_capacity")
        _coerce_enum(self, "cage_length", CageLength)
        _coerce_enum(self, "shifting_standard", ShiftingStandard)


@dataclass(frozen=True, kw_only=True)
class Crankset(_Component):
    """Crankset with one or more chainrings.

    Attributes:
        chainrings: Chainring tooth counts as listed by the manufacturer
            (``"50-34"`` → ``(50, 34)``).
        bb_standard: Bottom bracket interface.
        crank_length: Crank arm length in mm.
    """

    chainrings: tuple[int, ...]
    bb_standard: BBStandard
    crank_length: float

    def __post_init__(self) -> None:
        """Parse chainrings and validate crankset parameters."""
        _validate_common(self)
        object.__setattr__(
            self, "chainrings", parse_tooth_counts(self.chainrings, "chainrings")
        )
        _coerce_enum(self, "bb_standard", BBStandard)
        if self.crank_length <= 0.0:
            raise ComponentDataError("crank_length must be > 0 mm.")

    @property
    def is_multi_ring(self) -> bool:
        return len(self.chainrings) > 1


# ---------------------------------------------------------------------------
# Engine input
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Drivetrain:
    """A partial or complete component selection.

    Any field may be ``None``; users typically add parts one at a time.
    """

    cassette: Cassette | None = None
    chain: Chain | None = None
    rear_derailleur: RearDerailleur | None = None
    crankset: Crankset | None = None

    @property
    def component_count(self) -> int:
        """Number of components present in the selection."""
        parts = (self.cassette, self.chain, self.rear_derailleur, self.crankset)
        return sum(1 for part in parts if part is not None)

    @property
    def is_complete(self) -> bool:
        return self.component_count == 4
