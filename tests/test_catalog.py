"""Catalog loading, unit normalisation and lookups."""

import dataclasses
import math

import pytest

from s16design import (
    AngleSection,
    CatalogDataError,
    ChannelSection,
    HollowSection,
    ISection,
    SectionFamily,
    SectionNotFoundError,
    TeeSection,
    clear_cache,
    group_by_nominal_depth,
    list_families,
    list_sections,
    load_catalog,
    load_section,
)


def test_w_section_properties_are_in_base_units(w460x74):
    assert isinstance(w460x74, ISection)
    assert w460x74.family is SectionFamily.W
    assert w460x74.imperial_designation == "W18x50"
    assert w460x74.mass == 74.4
    assert w460x74.A == 9484
    assert math.isclose(w460x74.Ix, 332.98e6)
    assert math.isclose(w460x74.Sx, 1457e3)
    assert math.isclose(w460x74.Zx, 1655e3)
    assert math.isclose(w460x74.J, 516.1e3)
    assert math.isclose(w460x74.Cw, 816.3e9)
    assert w460x74.nominal_depth == 460


def test_records_are_frozen(w460x74):
    with pytest.raises(dataclasses.FrozenInstanceError):
        w460x74.mass = 1.0


def test_catalog_preserves_csv_order(w_sections):
    designations = [s.designation for s in w_sections]
    assert designations[0] == "W150x22"
    assert designations.index("W460x74") < designations.index("W530x74")


def test_every_family_record_has_its_shape_type():
    assert all(isinstance(s, ChannelSection) for s in load_catalog("C"))
    assert all(isinstance(s, AngleSection) for s in load_catalog("L"))
    hss = load_catalog(SectionFamily.HSS_G40)
    assert all(isinstance(s, HollowSection) for s in hss)
    assert {s.section_type for s in hss} == {"SQUARE"}


def test_hollow_torsion_constants_are_scaled():
    hss = load_section("HSS-G40", "HSS102x102x6.4")
    assert math.isclose(hss.J, 5328e3)
    assert math.isclose(hss.C, 102e3)


def test_lookup_is_case_insensitive():
    assert load_section("w", "w310x97").designation == "W310x97"


def test_unknown_designation_raises_not_found():
    with pytest.raises(SectionNotFoundError, match="W999x1"):
        load_section("W", "W999x1")


def test_unknown_family_raises_not_found():
    with pytest.raises(SectionNotFoundError):
        load_catalog("XYZ")


def test_every_family_ships_data():
    assert list_families() == list(SectionFamily)
    for fam in SectionFamily:
        records = load_catalog(fam)
        assert records, fam
        assert all(r.family is fam for r in records)


@pytest.mark.parametrize(
    "family, record_type",
    [
        ("S", ISection),
        ("M", ISection),
        ("HP", ISection),
        ("WWF", ISection),
        ("WRF", ISection),
        ("SLB", ISection),
        ("MC", ChannelSection),
        ("WT", TeeSection),
        ("WWT", TeeSection),
        ("2L", AngleSection),
        ("HSS-A500", HollowSection),
    ],
)
def test_family_records_match_shape_kind(family, record_type):
    assert all(isinstance(s, record_type) for s in load_catalog(family))


def test_rectangular_hss_is_typed_rect():
    hss = load_section("HSS-A500", "HSS203x102x6.4")
    assert hss.section_type == "RECT"
    assert hss.d > hss.b
    assert hss.Ix > hss.Iy


def test_welded_shapes_have_no_imperial_designation():
    wwf = load_section("WWF", "WWF1000x223")
    assert wwf.imperial_designation == ""
    assert wwf.nominal_depth == 1000
    assert math.isclose(wwf.Cw, 26788.0e9)


def test_double_angle_uses_governing_radius():
    pair = load_section("2L", "2L102x102x9.5")
    assert pair.rz == min(pair.rx, pair.ry)


def test_list_sections_search_matches_metric_and_imperial():
    assert list_sections("W", "460x7") == ["W460x74"]
    assert list_sections("W", "w18x50") == ["W460x74"]
    assert len(list_sections("W")) == len(load_catalog("W"))


def test_group_by_nominal_depth(w_sections):
    groups = group_by_nominal_depth(w_sections)
    assert [s.designation for s in groups[460]] == [
        "W460x52", "W460x60", "W460x68", "W460x74", "W460x89",
    ]


def test_group_by_depth_falls_back_to_actual_depth():
    groups = group_by_nominal_depth(load_catalog("C"))
    assert [s.designation for s in groups[150]] == ["C150x12", "C150x16"]


# ── Data faults ───────────────────────────────────────────────

_W_HEADER = "Dsg,Ds_i,Dnom,Mass,A,D,B,T,W,BT,HW,Ix,Sx,Rx,Zx,Iy,Sy,Ry,Zy,J,Cw\n"
_W_ROW = "W460x74,W18x50,460,74.4,9484,457,190,14.5,9.0,6.55,47.6,332.98,1457,187.5,1655,16.69,175,41.9,272,516.1,816.3\n"


def _write_catalog(tmp_path, monkeypatch, body):
    (tmp_path / "W_section.csv").write_text(_W_HEADER + body, encoding="utf-8")
    monkeypatch.setenv("S16_CATALOG_DIR", str(tmp_path))
    clear_cache()


def test_catalog_dir_override(tmp_path, monkeypatch):
    _write_catalog(tmp_path, monkeypatch, _W_ROW)
    assert [s.designation for s in load_catalog("W")] == ["W460x74"]


def test_duplicate_designation_is_a_data_error(tmp_path, monkeypatch):
    _write_catalog(tmp_path, monkeypatch, _W_ROW + _W_ROW)
    with pytest.raises(CatalogDataError, match="duplicate"):
        load_catalog("W")


def test_negative_value_is_a_data_error(tmp_path, monkeypatch):
    _write_catalog(tmp_path, monkeypatch, _W_ROW.replace(",74.4,", ",-74.4,"))
    with pytest.raises(CatalogDataError, match="negative"):
        load_catalog("W")


def test_non_numeric_value_is_a_data_error(tmp_path, monkeypatch):
    _write_catalog(tmp_path, monkeypatch, _W_ROW.replace(",9484,", ",n/a,"))
    with pytest.raises(CatalogDataError, match="not numeric"):
        load_catalog("W")


def test_family_without_data_is_empty(tmp_path, monkeypatch):
    _write_catalog(tmp_path, monkeypatch, _W_ROW)
    assert load_catalog("WWF") == ()
    assert list_families() == [SectionFamily.W]
