"""Axial resistance: tension yielding (cl. 13.2) and compression (cl. 13.3)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ..errors import PreconditionError
from ..material import E_STEEL, N_COLUMN, PHI
from .section_data import AngleSection, SectionRecord


class BucklingAxis(str, Enum):
    STRONG = "strong"
    WEAK = "weak"

    @classmethod
    def parse(cls, value: "BucklingAxis | str") -> "BucklingAxis":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise PreconditionError(
                f"Unknown buckling axis {value!r}; use 'strong' or 'weak'"
            ) from None


@dataclass(frozen=True)
class ColumnBucklingResult:
    KL: float           # mm
    slenderness: float  # KL/r
    Fe: float           # MPa — elastic buckling stress
    lambda_: float      # non-dimensional slenderness
    Cr: float           # kN
    axis: BucklingAxis
    r: float            # mm


def tensile_resistance(section: SectionRecord, Fy: float) -> float:
    """Tr in kN, gross-section yielding ``φ·A·Fy``."""
    if Fy <= 0:
        raise PreconditionError(f"Yield strength must be positive, got {Fy}")
    return PHI * section.A * Fy / 1e3


def radius_of_gyration(section: SectionRecord, axis: BucklingAxis) -> float:
    if axis is BucklingAxis.STRONG:
        return section.rx
    # angles buckle about their minimum radius of gyration
    if isinstance(section, AngleSection) and section.rz > 0:
        return section.rz
    return section.ry


def column_resistance(
    section: SectionRecord,
    Fy: float,
    K: float,
    L: float,
    axis: BucklingAxis | str = BucklingAxis.WEAK,
) -> ColumnBucklingResult:
    """Flexural buckling resistance ``Cr = φFyA/(1+λ^2n)^(1/n)``, n = 1.34."""
    axis = BucklingAxis.parse(axis)
    if Fy <= 0:
        raise PreconditionError(f"Yield strength must be positive, got {Fy}")
    if K <= 0:
        raise PreconditionError(f"Effective length factor must be positive, got {K}")
    if L <= 0:
        raise PreconditionError(f"Unbraced length must be positive, got {L}")
    r = radius_of_gyration(section, axis)
    if r <= 0:
        raise PreconditionError(
            f"{section.designation} has no radius of gyration about the {axis.value} axis"
        )

    KL = K * L
    slenderness = KL / r
    Fe = math.pi ** 2 * E_STEEL / slenderness ** 2
    lam = math.sqrt(Fy / Fe)
    n = N_COLUMN
    Cr = PHI * Fy * section.A / (1.0 + lam ** (2 * n)) ** (1.0 / n) / 1e3
    return ColumnBucklingResult(
        KL=KL, slenderness=slenderness, Fe=Fe, lambda_=lam, Cr=Cr, axis=axis, r=r
    )
