"""Local-buckling classification of cross-sections (CSA S16-19 Table 2).

Class 1 to 3 limits are expressed as ``k / sqrt(Fy)``; an element whose
width-to-thickness ratio exceeds the class 3 limit is class 4. Each element
is classified separately and the section takes the worst (highest) class.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..errors import PreconditionError
from .hollow_section_data import HollowSection
from .section_data import (
    AngleSection,
    ChannelSection,
    ISection,
    SectionRecord,
    TeeSection,
)

# ── Table 2 coefficients (class 1, 2, 3) ──────────────────────
FLANGE_COEFFS = (145.0, 170.0, 200.0)   # flange outstand in flexure
WEB_COEFFS = (1100.0, 1700.0, 1900.0)   # web in flexure
HSS_WALL_COEFFS = (420.0, 525.0, 670.0)  # HSS flange (wall) in flexure
TEE_STEM_COEFF = 340.0                   # class 3 only
ANGLE_LEG_COEFF = 200.0                  # class 3 only

_NO_LIMIT = (math.inf, math.inf, math.inf)


@dataclass(frozen=True)
class SectionClassification:
    flange_class: int
    web_class: int
    overall_class: int
    flange_ratio: float
    web_ratio: float
    flange_limits: tuple[float, float, float]
    web_limits: tuple[float, float, float]

    @property
    def governed_by(self) -> str:
        return "flange" if self.flange_class >= self.web_class else "web"


def _limits(coeffs: tuple[float, float, float], Fy: float) -> tuple[float, float, float]:
    root = math.sqrt(Fy)
    return (coeffs[0] / root, coeffs[1] / root, coeffs[2] / root)


def _class_from_limits(ratio: float, limits: tuple[float, float, float]) -> int:
    for cls, limit in enumerate(limits, start=1):
        if ratio <= limit:
            return cls
    return 4


def _class3_only(ratio: float, coeff: float, Fy: float) -> tuple[int, tuple[float, float, float]]:
    # Elements with no class 1/2 provision: limits 1 and 2 collapse to zero
    limit3 = coeff / math.sqrt(Fy)
    return (3 if ratio <= limit3 else 4), (0.0, 0.0, limit3)


def classify(section: SectionRecord, Fy: float) -> SectionClassification:
    """Classify ``section`` for flexure at yield strength ``Fy`` (MPa)."""
    if Fy <= 0:
        raise PreconditionError(f"Yield strength must be positive, got {Fy}")

    if isinstance(section, HollowSection):
        flange_ratio, web_ratio = section.bt, section.ht
        flange_limits = _limits(HSS_WALL_COEFFS, Fy)
        web_limits = _limits(WEB_COEFFS, Fy)
        flange_class = _class_from_limits(flange_ratio, flange_limits)
        web_class = _class_from_limits(web_ratio, web_limits)
    elif isinstance(section, (ISection, ChannelSection)):
        flange_ratio, web_ratio = section.bt, section.hw
        flange_limits = _limits(FLANGE_COEFFS, Fy)
        web_limits = _limits(WEB_COEFFS, Fy)
        flange_class = _class_from_limits(flange_ratio, flange_limits)
        web_class = _class_from_limits(web_ratio, web_limits)
    elif isinstance(section, TeeSection):
        flange_ratio, web_ratio = section.bt, section.dw
        flange_limits = _limits(FLANGE_COEFFS, Fy)
        flange_class = _class_from_limits(flange_ratio, flange_limits)
        web_class, web_limits = _class3_only(web_ratio, TEE_STEM_COEFF, Fy)
    elif isinstance(section, AngleSection):
        flange_ratio, web_ratio = section.bt, 0.0
        flange_class, flange_limits = _class3_only(flange_ratio, ANGLE_LEG_COEFF, Fy)
        web_class, web_limits = 1, _NO_LIMIT
    else:
        raise PreconditionError(f"Cannot classify section of type {type(section).__name__}")

    return SectionClassification(
        flange_class=flange_class,
        web_class=web_class,
        overall_class=max(flange_class, web_class),
        flange_ratio=flange_ratio,
        web_ratio=web_ratio,
        flange_limits=flange_limits,
        web_limits=web_limits,
    )
