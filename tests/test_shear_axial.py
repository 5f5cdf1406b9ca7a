"""Shear, tension and compression resistances."""

import dataclasses
import math

import pytest

from s16design import (
    BucklingAxis,
    PreconditionError,
    UnsupportedSectionError,
    column_resistance,
    load_section,
    shear_resistance,
    tensile_resistance,
)


# ── Shear ─────────────────────────────────────────────────────


def test_stocky_web_shear_yields(w460x74):
    # Aw = 457 × 9.0, h/w 47.6 < 1014/√350 = 54.2
    assert shear_resistance(w460x74, 350) == pytest.approx(0.9 * 457 * 9.0 * 0.66 * 350 / 1e3)
    assert shear_resistance(w460x74, 350) == pytest.approx(855.09, rel=1e-4)


def test_slender_web_reduces_shear_stress(w460x74):
    slender = dataclasses.replace(w460x74, hw=80.0)
    threshold = 1014 / math.sqrt(350)
    expected = 0.9 * 457 * 9.0 * 0.66 * 350 * (threshold / 80.0) / 1e3
    assert shear_resistance(slender, 350) == pytest.approx(expected)
    assert shear_resistance(slender, 350) < shear_resistance(w460x74, 350)


def test_hss_shear_uses_both_walls():
    hss = load_section("HSS-G40", "HSS152x152x9.5")
    assert shear_resistance(hss, 350) == pytest.approx(0.9 * 2 * 152 * 9.52 * 0.66 * 350 / 1e3)


def test_angle_shear_is_not_covered():
    with pytest.raises(UnsupportedSectionError):
        shear_resistance(load_section("L", "L102x102x9.5"), 350)


def test_zero_web_thickness_is_rejected(w460x74):
    with pytest.raises(PreconditionError):
        shear_resistance(dataclasses.replace(w460x74, w=0.0), 350)


# ── Tension ───────────────────────────────────────────────────


def test_tension_is_gross_yielding(w460x74):
    assert tensile_resistance(w460x74, 350) == pytest.approx(0.9 * 9484 * 350 / 1e3)


# ── Compression ───────────────────────────────────────────────


def test_weak_axis_column(w250x73):
    r = column_resistance(w250x73, 350, 1.0, 4000)
    assert r.axis is BucklingAxis.WEAK
    assert r.r == 64.5
    assert r.KL == 4000
    assert r.slenderness == pytest.approx(4000 / 64.5)
    assert r.Fe == pytest.approx(math.pi**2 * 200_000 / (4000 / 64.5) ** 2)
    assert r.lambda_ == pytest.approx(math.sqrt(350 / r.Fe))
    assert r.Cr == pytest.approx(2061.87, rel=1e-4)


def test_strong_axis_column_is_stronger(w250x73):
    weak = column_resistance(w250x73, 350, 1.0, 4000, BucklingAxis.WEAK)
    strong = column_resistance(w250x73, 350, 1.0, 4000, "strong")
    assert strong.r == 110.5
    assert strong.Cr == pytest.approx(2651.22, rel=1e-4)
    assert strong.Cr > weak.Cr


def test_effective_length_factor_multiplies_length(w250x73):
    doubled = column_resistance(w250x73, 350, 2.0, 4000)
    assert doubled.KL == 8000
    assert doubled.Cr == pytest.approx(column_resistance(w250x73, 350, 1.0, 8000).Cr)
    assert doubled.Cr == pytest.approx(902.53, rel=1e-4)


def test_compression_never_exceeds_squash_load(w250x73):
    squash = 0.9 * w250x73.A * 350 / 1e3
    for length in (100, 1000, 4000, 10000):
        assert column_resistance(w250x73, 350, 1.0, length).Cr < squash


def test_compression_decreases_with_length(w250x73):
    values = [column_resistance(w250x73, 350, 1.0, L).Cr for L in range(1000, 12001, 1000)]
    assert values == sorted(values, reverse=True)
    assert len(set(values)) == len(values)


def test_angle_buckles_about_minor_principal_axis():
    angle = load_section("L", "L102x102x9.5")
    assert column_resistance(angle, 350, 1.0, 2000).r == 19.8


@pytest.mark.parametrize("K, L", [(0, 4000), (1.0, 0), (-1.0, 4000)])
def test_invalid_column_inputs(w250x73, K, L):
    with pytest.raises(PreconditionError):
        column_resistance(w250x73, 350, K, L)


def test_unknown_axis_is_rejected(w250x73):
    with pytest.raises(PreconditionError):
        column_resistance(w250x73, 350, 1.0, 4000, "diagonal")
