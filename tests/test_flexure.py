"""Moment resistance and lateral-torsional buckling."""

import dataclasses

import pytest

from s16design import (
    PreconditionError,
    UnsupportedSectionError,
    critical_elastic_moment,
    lateral_torsional_buckling,
    load_section,
    ltb_moment_resistance,
    moment_resistance,
)
from s16design.material import PHI


def test_class_1_uses_plastic_modulus(w460x74):
    assert moment_resistance(w460x74, 350) == pytest.approx(0.9 * 1655e3 * 350 / 1e6)
    assert moment_resistance(w460x74, 350) == pytest.approx(521.325)


def test_class_3_uses_elastic_modulus():
    w530x72 = load_section("W", "W530x72")
    assert moment_resistance(w530x72, 350) == pytest.approx(480.06)


def test_channels_always_use_elastic_modulus():
    channel = load_section("C", "C250x30")
    assert moment_resistance(channel, 350) == pytest.approx(PHI * 258.9e3 * 350 / 1e6)


def test_short_span_reaches_plastic_moment(w460x74):
    r = lateral_torsional_buckling(w460x74, 350, 2000)
    assert r.governing_case == "yielding"
    assert r.Mr == pytest.approx(PHI * r.Mp)
    assert r.Mp == pytest.approx(579.25)


def test_intermediate_span_is_inelastic(w460x74):
    r = lateral_torsional_buckling(w460x74, 350, 3000)
    assert r.governing_case == "inelastic_ltb"
    assert r.Mu == pytest.approx(894.89, rel=1e-4)
    assert r.Mr == pytest.approx(490.87, rel=1e-4)


def test_long_span_is_elastic(w460x74):
    r = lateral_torsional_buckling(w460x74, 350, 6000)
    assert r.governing_case == "elastic_ltb"
    assert r.Mu == pytest.approx(278.08, rel=1e-4)
    assert r.Mr == pytest.approx(PHI * r.Mu)
    assert r.unbraced_length == 6000
    assert r.omega2 == 1.0


def test_ltb_never_exceeds_supported_resistance(w460x74):
    supported = moment_resistance(w460x74, 350)
    for length in range(500, 15001, 500):
        assert lateral_torsional_buckling(w460x74, 350, length).Mr <= supported + 1e-9


def test_ltb_resistance_decreases_with_length(w460x74):
    values = [lateral_torsional_buckling(w460x74, 350, L).Mr for L in range(1000, 12001, 1000)]
    assert values == sorted(values, reverse=True)


def test_omega2_scales_critical_moment(w460x74):
    base = critical_elastic_moment(w460x74, 6000)
    assert critical_elastic_moment(w460x74, 6000, omega2=1.75) == pytest.approx(1.75 * base)


def test_branches_meet_at_two_thirds_mp():
    Mp = 1000.0
    Mu = 0.67 * Mp
    elastic, case = ltb_moment_resistance(Mp, Mu)
    assert case == "elastic_ltb"
    inelastic, case = ltb_moment_resistance(Mp, Mu * (1 + 1e-12))
    assert case == "inelastic_ltb"
    assert inelastic == pytest.approx(elastic, rel=1e-3)


def test_class_3_section_cannot_be_checked_for_ltb():
    with pytest.raises(UnsupportedSectionError):
        lateral_torsional_buckling(load_section("W", "W530x72"), 350, 4000)


def test_non_i_shape_cannot_be_checked_for_ltb():
    with pytest.raises(UnsupportedSectionError):
        lateral_torsional_buckling(load_section("C", "C250x30"), 350, 4000)


@pytest.mark.parametrize("length, omega2", [(0, 1.0), (-100, 1.0), (4000, 0.0)])
def test_invalid_ltb_inputs(w460x74, length, omega2):
    with pytest.raises(PreconditionError):
        lateral_torsional_buckling(w460x74, 350, length, omega2)


def test_unsupported_error_is_a_precondition_error():
    assert issubclass(UnsupportedSectionError, PreconditionError)


def test_zero_warping_still_gives_torsional_resistance(w460x74):
    no_warping = dataclasses.replace(w460x74, Cw=0.0)
    assert 0 < critical_elastic_moment(no_warping, 6000) < critical_elastic_moment(w460x74, 6000)
