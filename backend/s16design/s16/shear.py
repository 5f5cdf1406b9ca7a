"""Factored shear resistance of webs (CSA S16-19 cl. 13.4.1.1)."""

from __future__ import annotations

import math

from ..errors import PreconditionError, UnsupportedSectionError
from ..material import PHI
from .hollow_section_data import HollowSection
from .section_data import AngleSection, SectionRecord

# Web slenderness below which the full 0.66 Fy is available
SHEAR_YIELD_COEFF = 1014.0


def shear_area(section: SectionRecord) -> tuple[float, float]:
    """Return ``(Aw, h/w)`` for the shear-carrying web(s), Aw in mm²."""
    if isinstance(section, AngleSection):
        raise UnsupportedSectionError(
            f"Shear resistance of angle {section.designation} is not covered"
        )
    if isinstance(section, HollowSection):
        thickness, ratio = section.t, section.ht
        Aw = 2.0 * section.d * thickness
    else:
        thickness = getattr(section, "w", 0.0)
        ratio = getattr(section, "hw", 0.0) or getattr(section, "dw", 0.0)
        Aw = section.d * thickness
    if section.d <= 0 or thickness <= 0:
        raise PreconditionError(
            f"{section.designation} has no web (d={section.d}, t={thickness})"
        )
    return Aw, ratio


def shear_resistance(section: SectionRecord, Fy: float) -> float:
    """Vr in kN: ``φ·Aw·Fs`` with Fs reduced for slender webs."""
    if Fy <= 0:
        raise PreconditionError(f"Yield strength must be positive, got {Fy}")
    Aw, ratio = shear_area(section)
    threshold = SHEAR_YIELD_COEFF / math.sqrt(Fy)
    Fs = 0.66 * Fy
    if ratio > threshold:
        Fs *= threshold / ratio
    return PHI * Aw * Fs / 1e3
