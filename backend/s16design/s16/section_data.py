"""Section records for rolled and welded steel shapes (CISC tables).

All fields are held in base N-mm units, already normalised by the catalog
loader from the scaled values printed in the handbook:

- Dimensions, radii of gyration, centroid offsets: mm
- Areas: mm²
- Section moduli: mm³
- Second moments of area, torsional constant: mm⁴
- Warping constant: mm⁶
- Mass: kg/m
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ShapeKind(Enum):
    I_SHAPE = "I-shape"
    CHANNEL = "channel"
    ANGLE = "angle"
    TEE = "tee"
    HOLLOW = "hollow"


class SectionFamily(str, Enum):
    """Catalog partitions, one per manufactured shape series."""

    W = "W"
    C = "C"
    MC = "MC"
    L = "L"
    L2 = "2L"
    S = "S"
    M = "M"
    HP = "HP"
    WT = "WT"
    WWT = "WWT"
    WWF = "WWF"
    WRF = "WRF"
    SLB = "SLB"
    HSS_A500 = "HSS-A500"
    HSS_G40 = "HSS-G40"

    @property
    def kind(self) -> ShapeKind:
        return _FAMILY_KIND[self]

    @property
    def description(self) -> str:
        return _FAMILY_DESCRIPTION[self]


_FAMILY_KIND: dict[SectionFamily, ShapeKind] = {
    SectionFamily.W: ShapeKind.I_SHAPE,
    SectionFamily.S: ShapeKind.I_SHAPE,
    SectionFamily.M: ShapeKind.I_SHAPE,
    SectionFamily.HP: ShapeKind.I_SHAPE,
    SectionFamily.WWF: ShapeKind.I_SHAPE,
    SectionFamily.WRF: ShapeKind.I_SHAPE,
    SectionFamily.SLB: ShapeKind.I_SHAPE,
    SectionFamily.C: ShapeKind.CHANNEL,
    SectionFamily.MC: ShapeKind.CHANNEL,
    SectionFamily.L: ShapeKind.ANGLE,
    SectionFamily.L2: ShapeKind.ANGLE,
    SectionFamily.WT: ShapeKind.TEE,
    SectionFamily.WWT: ShapeKind.TEE,
    SectionFamily.HSS_A500: ShapeKind.HOLLOW,
    SectionFamily.HSS_G40: ShapeKind.HOLLOW,
}

_FAMILY_DESCRIPTION: dict[SectionFamily, str] = {
    SectionFamily.W: "Wide Flange Sections",
    SectionFamily.C: "Channel Sections",
    SectionFamily.MC: "Miscellaneous Channels",
    SectionFamily.L: "Angle Sections (Single)",
    SectionFamily.L2: "Double Angle Sections",
    SectionFamily.S: "American Standard Beams",
    SectionFamily.M: "Miscellaneous Beams",
    SectionFamily.HP: "H-Pile Sections",
    SectionFamily.WT: "Structural Tees (cut from W)",
    SectionFamily.WWT: "Welded Wide Flange Tees",
    SectionFamily.WWF: "Welded Wide Flange",
    SectionFamily.WRF: "Welded Reduced Flange",
    SectionFamily.SLB: "Slender Beams",
    SectionFamily.HSS_A500: "Hollow Structural Sections (ASTM A500)",
    SectionFamily.HSS_G40: "Hollow Structural Sections (CSA G40)",
}


@dataclass(frozen=True)
class SectionRecord:
    """Properties shared by every catalog shape."""

    family: SectionFamily
    designation: str             # e.g. "W310x97"
    imperial_designation: str    # e.g. "W12x65"
    mass: float    # kg/m
    A: float       # mm²   — gross area
    d: float       # mm    — overall depth
    b: float       # mm    — flange / leg / wall width
    Ix: float      # mm⁴   — strong axis
    Sx: float      # mm³
    Zx: float      # mm³
    rx: float      # mm
    Iy: float      # mm⁴   — weak axis
    Sy: float      # mm³
    Zy: float      # mm³
    ry: float      # mm
    J: float       # mm⁴   — St Venant torsion constant

    @property
    def kind(self) -> ShapeKind:
        return self.family.kind


@dataclass(frozen=True)
class ISection(SectionRecord):
    """Doubly-symmetric I-shape (W, S, M, HP, WWF, WRF, SLB)."""

    t: float = 0.0    # mm  — flange thickness
    w: float = 0.0    # mm  — web thickness
    bt: float = 0.0   # b_el/t of the flange (b/2t)
    hw: float = 0.0   # h/w of the web
    Cw: float = 0.0   # mm⁶ — warping constant
    nominal_depth: float | None = None  # mm


@dataclass(frozen=True)
class ChannelSection(SectionRecord):
    """Channel (C, MC); singly symmetric about the strong axis."""

    t: float = 0.0
    w: float = 0.0
    bt: float = 0.0   # b/t of the full flange
    hw: float = 0.0
    Cw: float = 0.0
    x_bar: float = 0.0  # mm — centroid from the back of the web


@dataclass(frozen=True)
class TeeSection(SectionRecord):
    """Structural tee (WT, WWT)."""

    t: float = 0.0
    w: float = 0.0
    bt: float = 0.0
    dw: float = 0.0     # d/w of the stem
    y_bar: float = 0.0  # mm — centroid from the flange face


@dataclass(frozen=True)
class AngleSection(SectionRecord):
    """Single or double angle (L, 2L)."""

    t: float = 0.0
    bt: float = 0.0     # b/t of the longer leg
    rz: float = 0.0     # mm — minimum principal radius of gyration
    x_bar: float = 0.0  # mm
    y_bar: float = 0.0  # mm
