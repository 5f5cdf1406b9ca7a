"""Factored moment resistance (CSA S16-19 cl. 13.5 and 13.6).

Laterally supported members use the plastic or elastic modulus depending on
class. Laterally unsupported doubly-symmetric class 1/2 I-shapes are checked
for lateral-torsional buckling per cl. 13.6(a).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..errors import PreconditionError, UnsupportedSectionError
from ..material import E_STEEL, G_STEEL, PHI
from .classification import classify
from .section_data import ISection, SectionRecord, ShapeKind

# Mu above this fraction of Mp → inelastic formula (cl. 13.6(a)(i))
INELASTIC_THRESHOLD = 0.67

_PLASTIC_KINDS = (ShapeKind.I_SHAPE, ShapeKind.HOLLOW)


@dataclass(frozen=True)
class LTBResult:
    Mu: float               # kNm — critical elastic moment
    Mp: float               # kNm — plastic moment
    Mr: float               # kNm — factored moment resistance
    governing_case: str     # "yielding" | "inelastic_ltb" | "elastic_ltb"
    omega2: float
    unbraced_length: float  # mm


def flexural_modulus(section: SectionRecord, Fy: float) -> tuple[float, str]:
    """Return the strong-axis modulus (mm³) and its basis, "plastic" or "elastic".

    Class 1/2 I-shapes and HSS use ``Zx``; class 3/4 sections, and all
    singly-symmetric shapes (channels, tees, angles), use ``Sx``.
    """
    cls = classify(section, Fy).overall_class
    if cls <= 2 and section.kind in _PLASTIC_KINDS:
        return section.Zx, "plastic"
    return section.Sx, "elastic"


def moment_resistance(section: SectionRecord, Fy: float) -> float:
    """Laterally supported Mr in kNm."""
    modulus, _ = flexural_modulus(section, Fy)
    return PHI * modulus * Fy / 1e6


def critical_elastic_moment(
    section: ISection, unbraced_length: float, omega2: float = 1.0
) -> float:
    """Mu in N·mm for a doubly-symmetric I-shape.

    Mu = (ω₂π/L)·√(E·Iy·G·J + (πE/L)²·Iy·Cw)
    """
    L = unbraced_length
    if L <= 0:
        raise PreconditionError(f"Unbraced length must be positive, got {L}")
    if omega2 <= 0:
        raise PreconditionError(f"omega2 must be positive, got {omega2}")
    torsion = E_STEEL * section.Iy * G_STEEL * section.J
    warping = (math.pi * E_STEEL / L) ** 2 * section.Iy * section.Cw
    return omega2 * math.pi / L * math.sqrt(torsion + warping)


def ltb_moment_resistance(Mp: float, Mu: float) -> tuple[float, str]:
    """Mr and governing case from Mp and Mu (any consistent unit)."""
    if Mp <= 0 or Mu <= 0:
        raise PreconditionError(f"Mp and Mu must be positive (Mp={Mp}, Mu={Mu})")
    phi_mp = PHI * Mp
    if Mu > INELASTIC_THRESHOLD * Mp:
        inelastic = 1.15 * PHI * Mp * (1.0 - 0.28 * Mp / Mu)
        if inelastic >= phi_mp:
            return phi_mp, "yielding"
        return inelastic, "inelastic_ltb"
    return PHI * Mu, "elastic_ltb"


def lateral_torsional_buckling(
    section: SectionRecord,
    Fy: float,
    unbraced_length: float,
    omega2: float = 1.0,
) -> LTBResult:
    """LTB resistance of a laterally unsupported class 1/2 I-shape."""
    if not isinstance(section, ISection):
        raise UnsupportedSectionError(
            f"LTB is only implemented for I-shapes, not {section.kind.value} "
            f"section {section.designation}"
        )
    cls = classify(section, Fy).overall_class
    if cls > 2:
        raise UnsupportedSectionError(
            f"{section.designation} is class {cls}; LTB requires class 1 or 2"
        )

    Mu = critical_elastic_moment(section, unbraced_length, omega2)
    Mp = section.Zx * Fy
    Mr, case = ltb_moment_resistance(Mp, Mu)
    return LTBResult(
        Mu=Mu / 1e6,
        Mp=Mp / 1e6,
        Mr=Mr / 1e6,
        governing_case=case,
        omega2=omega2,
        unbraced_length=unbraced_length,
    )
