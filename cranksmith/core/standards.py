"""Drivetrain standards and the policy tables that relate them.

Chain-standard inference from a cassette's free-text ``chain_compatibility``
tag is an ordered substring match.  The order matters: a tag such as
``"SRAM Eagle (HG+ compatible)"`` must resolve to Eagle, so the table is
scanned top to bottom and the first hit wins.
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class BikeType(str, Enum):
    MTB = "mtb"
    ROAD = "road"
    GRAVEL = "gravel"
    HYBRID = "hybrid"


class FreehubStandard(str, Enum):
    SHIMANO_HG = "Shimano HG"
    SRAM_XD = "SRAM XD"
    SRAM_XDR = "SRAM XDR"
    SHIMANO_MICROSPLINE = "Shimano Microspline"
    CAMPAGNOLO = "Campagnolo"


class ChainStandard(str, Enum):
    HG = "HG"
    HG_PLUS = "HG+"
    EAGLE = "Eagle"
    FLAT_TOP = "Flat Top"
    CAMPAGNOLO = "Campagnolo"


class ShiftingStandard(str, Enum):
    SHIMANO = "Shimano"
    SRAM = "SRAM"
    CAMPAGNOLO = "Campagnolo"


class CageLength(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class BBStandard(str, Enum):
    BSA = "BSA"
    BB30 = "BB30"
    PF30 = "PF30"
    BB86 = "BB86"
    BB92 = "BB92"
    T47 = "T47"
    PRESSFIT_BB86 = "PressFit BB86"


# ---------------------------------------------------------------------------
# Policy tables
# ---------------------------------------------------------------------------

# Scanned in order; first substring found in the cassette tag wins.
CHAIN_STANDARD_INFERENCE: tuple[tuple[str, ChainStandard], ...] = (
    ("Eagle", ChainStandard.EAGLE),
    ("HG+", ChainStandard.HG_PLUS),
    ("Flat Top", ChainStandard.FLAT_TOP),
)
DEFAULT_CHAIN_STANDARD: ChainStandard = ChainStandard.HG

# Required cassette chain standard -> chain standards that may run on it.
CHAIN_COMPATIBILITY: dict[ChainStandard, frozenset[ChainStandard]] = {
    ChainStandard.HG: frozenset({ChainStandard.HG, ChainStandard.HG_PLUS}),
    ChainStandard.HG_PLUS: frozenset({ChainStandard.HG_PLUS}),
    ChainStandard.EAGLE: frozenset({ChainStandard.EAGLE}),
    ChainStandard.FLAT_TOP: frozenset({ChainStandard.FLAT_TOP}),
}

# Chain standards not listed here shift as Shimano.
CHAIN_SHIFTING_STANDARD: dict[ChainStandard, ShiftingStandard] = {
    ChainStandard.EAGLE: ShiftingStandard.SRAM,
    ChainStandard.FLAT_TOP: ShiftingStandard.SRAM,
}
DEFAULT_SHIFTING_STANDARD: ShiftingStandard = ShiftingStandard.SHIMANO


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def required_chain_standard(chain_compatibility: str) -> ChainStandard:
    """Infer the chain standard a cassette requires from its compatibility tag.

    Args:
        chain_compatibility: Free-text tag from the catalog, e.g.
            ``"SRAM Eagle"`` or ``"Shimano HG+"``.

    Returns:
        The first matching entry of :data:`CHAIN_STANDARD_INFERENCE`, or
        :data:`DEFAULT_CHAIN_STANDARD` when nothing matches.
    """
    for needle, standard in CHAIN_STANDARD_INFERENCE:
        if needle in chain_compatibility:
            return standard
    return DEFAULT_CHAIN_STANDARD


def allowed_chain_standards(required: ChainStandard) -> frozenset[ChainStandard]:
    """Return the chain standards accepted by a cassette requiring *required*.

    Standards absent from :data:`CHAIN_COMPATIBILITY` accept nothing.
    """
    return CHAIN_COMPATIBILITY.get(required, frozenset())


def chain_shifting_standard(chain_standard: ChainStandard) -> ShiftingStandard:
    """Return the derailleur shifting standard a chain standard belongs to."""
    return CHAIN_SHIFTING_STANDARD.get(chain_standard, DEFAULT_SHIFTING_STANDARD)
