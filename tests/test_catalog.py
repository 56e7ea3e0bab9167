"""Tests for the YAML component catalog loader."""

from pathlib import Path

import pytest

from cranksmith.config import (
    CASSETTES,
    CHAINS,
    COMPONENT_KINDS,
    CRANKSETS,
    REAR_DERAILLEURS,
    build_component,
    load_catalog,
)
from cranksmith.core.components import (
    Cassette,
    Chain,
    ComponentDataError,
    Crankset,
    Drivetrain,
    RearDerailleur,
)
from cranksmith.core.engine import check_compatibility
from cranksmith.core.standards import BikeType, ChainStandard

# ---------------------------------------------------------------------------
# Bundled catalog
# ---------------------------------------------------------------------------


def test_bundled_catalog_loads_every_kind() -> None:
    catalog = load_catalog()
    assert len(catalog.cassettes) == 4
    assert len(catalog.chains) == 3
    assert len(catalog.rear_derailleurs) == 3
    assert len(catalog.cranksets) == 3
    assert all(isinstance(c, Cassette) for c in catalog.cassettes)
    assert all(isinstance(c, Chain) for c in catalog.chains)
    assert all(isinstance(d, RearDerailleur) for d in catalog.rear_derailleurs)
    assert all(isinstance(c, Crankset) for c in catalog.cranksets)


def test_bundled_models_are_unique_per_kind() -> None:
    catalog = load_catalog()
    for kind in COMPONENT_KINDS:
        models = [c.model for c in catalog.components(kind)]
        assert len(set(models)) == len(models)


def test_catalog_parses_tooth_counts() -> None:
    catalog = load_catalog()
    xt = catalog.find(CASSETTES, "CS-M8100")
    assert xt.cogs[-1] == 51
    assert xt.bike_type is BikeType.MTB
    assert catalog.find(CRANKSETS, "FC-R7000").chainrings == (50, 34)
    assert catalog.find(CRANKSETS, "GX Eagle DUB").chainrings == (32,)


def test_find_unknown_model() -> None:
    catalog = load_catalog()
    with pytest.raises(KeyError, match="No chains entry"):
        catalog.find(CHAINS, "Nonexistent")


def test_unknown_kind_rejected() -> None:
    catalog = load_catalog()
    with pytest.raises(ValueError, match="Unknown component kind"):
        catalog.components("wheels")


def test_bundled_deore_build_is_compatible() -> None:
    catalog = load_catalog()
    result = check_compatibility(
        Drivetrain(
            cassette=catalog.find(CASSETTES, "CS-M8100"),
            chain=catalog.find(CHAINS, "CN-M8100"),
            rear_derailleur=catalog.find(REAR_DERAILLEURS, "RD-M8100"),
            crankset=catalog.find(CRANKSETS, "FC-M8100"),
        )
    )
    assert result.is_compatible
    assert result.issues == ()


def test_bundled_cross_brand_build_is_incompatible() -> None:
    catalog = load_catalog()
    result = check_compatibility(
        Drivetrain(
            cassette=catalog.find(CASSETTES, "XG-1275"),
            chain=catalog.find(CHAINS, "CN-M8100"),
            rear_derailleur=catalog.find(REAR_DERAILLEURS, "RD-M8100"),
        )
    )
    assert not result.is_compatible
    assert [i.issue for i in result.issues] == ["Chain standard incompatible"]


# ---------------------------------------------------------------------------
# Custom files
# ---------------------------------------------------------------------------


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "missing.yaml")


def test_empty_file_gives_empty_catalog(tmp_path: Path) -> None:
    path = tmp_path / "catalog.yaml"
    path.write_text("", encoding="utf-8")
    catalog = load_catalog(path)
    assert catalog.cassettes == []
    assert catalog.cranksets == []


def test_unquoted_single_chainring(tmp_path: Path) -> None:
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "cranksets:\n"
        "  - manufacturer: Race Face\n"
        "    model: Turbine\n"
        "    chainrings: 30\n"
        "    bb_standard: BSA\n"
        "    crank_length: 170\n",
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert catalog.cranksets[0].chainrings == (30,)
    assert catalog.cranksets[0].crank_length == 170.0


def test_missing_required_field(tmp_path: Path) -> None:
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "chains:\n"
        "  - manufacturer: KMC\n"
        "    model: X12\n"
        "    chain_standard: HG\n",
        encoding="utf-8",
    )
    with pytest.raises(ComponentDataError, match="chains entry 0 .X12. .*'speeds'"):
        load_catalog(path)


def test_malformed_cogs_names_entry(tmp_path: Path) -> None:
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "cassettes:\n"
        "  - manufacturer: SRAM\n"
        "    model: Broken\n"
        "    speeds: 12\n"
        "    cogs: 10-12-xx\n"
        "    freehub_standard: SRAM XD\n"
        "    chain_compatibility: SRAM Eagle\n",
        encoding="utf-8",
    )
    with pytest.raises(ComponentDataError, match="cassettes entry 0 .Broken."):
        load_catalog(path)


def test_section_must_be_list(tmp_path: Path) -> None:
    path = tmp_path / "catalog.yaml"
    path.write_text("chains: {model: X12}\n", encoding="utf-8")
    with pytest.raises(ComponentDataError, match="must be a list"):
        load_catalog(path)


# ---------------------------------------------------------------------------
# build_component
# ---------------------------------------------------------------------------


def test_build_component_converts_strings() -> None:
    chain = build_component(
        CHAINS,
        {
            "manufacturer": "KMC",
            "model": "X12",
            "speeds": "12",
            "chain_standard": "HG",
            "links": 126.0,
            "master_link": None,
        },
        "row 0",
    )
    assert chain.speeds == 12
    assert chain.links == 126
    assert chain.master_link is None
    assert chain.chain_standard is ChainStandard.HG


def test_build_component_bool_parsing() -> None:
    rd = build_component(
        REAR_DERAILLEURS,
        {
            "manufacturer": "Shimano",
            "model": "RD-R7000",
            "speeds": 11,
            "max_cog_size": 34,
            "cage_length": "medium",
            "shifting_standard": "Shimano",
            "clutch": "no",
        },
        "row 0",
    )
    assert rd.clutch is False


def test_build_component_rejects_bad_integer() -> None:
    with pytest.raises(ComponentDataError, match="'speeds' must be an integer"):
        build_component(
            CHAINS,
            {"manufacturer": "KMC", "model": "X", "speeds": 11.5, "chain_standard": "HG"},
            "row 3",
        )


def test_build_component_unknown_kind() -> None:
    with pytest.raises(ValueError, match="Unknown component kind"):
        build_component("wheels", {}, "row 0")
