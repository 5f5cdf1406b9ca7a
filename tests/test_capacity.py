"""Single-section capacity check."""

import pytest

from s16design import PreconditionError, SectionCapacityS16, SteelGrade, load_section


def test_supported_capacity(w460x74):
    check = SectionCapacityS16(section=w460x74, steel_grade="350W", Mf=500.0, Vf=200.0)
    assert check.check_all() is True
    assert check.grade is SteelGrade.G350W
    assert check.Fy == 350
    assert check.section_class == 1
    assert check.moment_basis == "plastic"
    assert check.Mr == pytest.approx(521.325)
    assert check.Vr == pytest.approx(855.09, rel=1e-4)
    assert check.Tr == pytest.approx(0.9 * 9484 * 350 / 1e3)
    assert check.moment_util == pytest.approx(500 / 521.325)
    assert check.Cr is None
    assert check.compression_util is None


def test_unsupported_capacity_reports_ltb(w460x74):
    check = SectionCapacityS16(section=w460x74, unbraced_length=6000.0, Mf=300.0)
    assert check.check_all() is False
    assert check.ltb_result is not None
    assert check.moment_basis == "elastic_ltb"
    assert check.Mr == pytest.approx(250.27, rel=1e-4)
    assert check.moment_util > 1.0


def test_class_3_unsupported_falls_back_to_elastic_resistance():
    check = SectionCapacityS16(section=load_section("W", "W530x72"), unbraced_length=4000.0)
    check.check_all()
    assert check.ltb_result is None
    assert check.moment_basis == "elastic"
    assert check.Mr == pytest.approx(480.06)


def test_compression_step(w250x73):
    check = SectionCapacityS16(section=w250x73, column_length=4000.0, Cf=2000.0)
    assert check.check_all() is True
    assert check.Cr == pytest.approx(2061.87, rel=1e-4)
    assert check.compression_util == pytest.approx(2000.0 / check.Cr)
    assert check.buckling_result.axis.value == "weak"


def test_angle_has_no_shear_resistance():
    check = SectionCapacityS16(section=load_section("L", "L102x102x9.5"), Vf=10.0)
    assert check.check_all() is True
    assert check.Vr is None
    assert check.shear_util is None


def test_demands_left_at_zero_are_not_checked(w460x74):
    check = SectionCapacityS16(section=w460x74)
    assert check.check_all() is True
    assert check.moment_util is None
    assert check.shear_util is None
    assert check.tension_util is None


def test_unknown_grade(w460x74):
    with pytest.raises(PreconditionError):
        SectionCapacityS16(section=w460x74, steel_grade="S275").check_all()


def test_print_summary(w460x74, capsys):
    check = SectionCapacityS16(section=w460x74, unbraced_length=3000.0, column_length=3000.0,
                               Mf=400.0, Vf=150.0, Cf=1000.0)
    check.check_all()
    check.print_summary()
    out = capsys.readouterr().out
    assert "W460x74" in out
    assert "inelastic_ltb" in out
    assert "OVERALL: PASS" in out
