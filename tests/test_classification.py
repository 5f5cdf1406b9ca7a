"""Local buckling classification (S16-19 Table 2)."""

import dataclasses
import math

import pytest

from s16design import PreconditionError, classify, load_catalog, load_section


def test_compact_w_section_is_class_1(w460x74):
    c = classify(w460x74, 350)
    assert (c.flange_class, c.web_class, c.overall_class) == (1, 1, 1)
    assert c.flange_ratio == 6.55
    assert c.web_ratio == 47.6
    assert c.governed_by == "flange"


def test_limits_scale_with_root_fy(w460x74):
    c = classify(w460x74, 350)
    root = math.sqrt(350)
    assert c.flange_limits == pytest.approx((145 / root, 170 / root, 200 / root))
    assert c.web_limits == pytest.approx((1100 / root, 1700 / root, 1900 / root))


def test_flange_between_class_2_and_3_limits():
    # b/t 9.50 exceeds 170/√350 = 9.087 but not 200/√350 = 10.69
    c = classify(load_section("W", "W530x72"), 350)
    assert c.flange_class == 3
    assert c.overall_class == 3
    assert c.governed_by == "flange"


def test_slender_flange_is_class_4():
    # b/t 11.52 > 200/√350
    assert classify(load_section("W", "W150x22"), 350).overall_class == 4


def test_web_governs_when_slender(w460x74):
    # b/t 6.55 stays class 1; h/w 60.0 > 1100/√350 = 58.8 → class 2 web
    c = classify(dataclasses.replace(w460x74, hw=60.0), 350)
    assert (c.flange_class, c.web_class) == (1, 2)
    assert c.overall_class == 2
    assert c.governed_by == "web"


def test_flange_reported_when_classes_tie():
    # W410x39: b/t 7.95 > 145/√350 = 7.75 and h/w 60.5 > 58.8, both class 2
    c = classify(load_section("W", "W410x39"), 350)
    assert (c.flange_class, c.web_class) == (2, 2)
    assert c.governed_by == "flange"


def test_ratio_on_limit_takes_lower_class(w460x74):
    # at Fy = 100 the class 1 flange limit is exactly 14.5
    on_limit = dataclasses.replace(w460x74, bt=14.5)
    assert classify(on_limit, 100).flange_class == 1
    past_limit = dataclasses.replace(w460x74, bt=14.51)
    assert classify(past_limit, 100).flange_class == 2


@pytest.mark.parametrize("designation", ["W150x22", "W530x72", "W310x97", "W360x134", "W410x39"])
def test_higher_fy_never_lowers_class(designation):
    section = load_section("W", designation)
    classes = [classify(section, fy).overall_class for fy in (250, 300, 345, 350, 400, 450)]
    assert classes == sorted(classes)


def test_grade_300w_relaxes_class():
    section = load_section("W", "W530x72")
    assert classify(section, 300).flange_class == 2
    assert classify(section, 350).flange_class == 3


def test_hss_walls_use_hollow_limits():
    hss = load_section("HSS-G40", "HSS203x203x6.4")  # b/t 28.0
    c = classify(hss, 350)
    # 525/√350 = 28.06
    assert c.flange_class == 2
    assert c.web_class == 1
    assert c.flange_limits[0] == pytest.approx(420 / math.sqrt(350))


def test_angle_legs_are_class_3_or_4():
    # 200/√300 = 11.55
    assert classify(load_section("L", "L102x102x9.5"), 300).overall_class == 3
    c = classify(load_section("L", "L127x127x9.5"), 300)
    assert c.flange_class == 4
    assert c.web_class == 1


def test_channels_classify_like_i_shapes():
    for section in load_catalog("C"):
        c = classify(section, 350)
        assert c.overall_class == max(c.flange_class, c.web_class)


@pytest.mark.parametrize("fy", [0, -350])
def test_non_positive_fy_is_rejected(w460x74, fy):
    with pytest.raises(PreconditionError):
        classify(w460x74, fy)
