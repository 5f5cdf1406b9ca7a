"""Single-section capacity check to CSA S16-19.

Implements Steps 1-6 of the capacity workflow for one catalog section:
  1. Yield strength from the steel grade
  2. Cross-section classification (Table 2)
  3. Moment resistance — supported (cl. 13.5) or LTB (cl. 13.6)
  4. Shear resistance (cl. 13.4.1.1)
  5. Tension resistance (cl. 13.2)
  6. Compression resistance (cl. 13.3)
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import UnsupportedSectionError
from ..material import SteelGrade
from .axial import BucklingAxis, ColumnBucklingResult, column_resistance, tensile_resistance
from .classification import SectionClassification, classify
from .flexure import (
    LTBResult,
    flexural_modulus,
    lateral_torsional_buckling,
    moment_resistance,
)
from .section_data import SectionRecord
from .shear import shear_resistance


def _util(demand: float, capacity: float | None) -> float | None:
    if capacity is None or capacity <= 0:
        return None
    return abs(demand) / capacity


@dataclass
class SectionCapacityS16:
    """S16 resistances of one section, with optional demand checks."""

    section: SectionRecord
    steel_grade: SteelGrade | str = SteelGrade.G350W

    # Flexure: None = continuous lateral support
    unbraced_length: float | None = None  # mm
    omega2: float = 1.0

    # Compression
    K: float = 1.0
    column_length: float | None = None    # mm; None skips Step 6
    axis: BucklingAxis | str = BucklingAxis.WEAK

    # Factored demands (0 = not checked)
    Mf: float = 0.0   # kNm
    Vf: float = 0.0   # kN
    Tf: float = 0.0   # kN
    Cf: float = 0.0   # kN

    # ── Results populated by check_all() ──────────────────────
    # Step 1
    grade: SteelGrade | None = None
    Fy: float = 0.0

    # Step 2
    classification: SectionClassification | None = None
    section_class: int = 0

    # Step 3
    Mr: float = 0.0
    moment_basis: str = ""    # "plastic" | "elastic" | LTB governing case
    ltb_result: LTBResult | None = None
    moment_util: float | None = None

    # Step 4
    Vr: float | None = None   # None where shear is not covered (angles)
    shear_util: float | None = None

    # Step 5
    Tr: float = 0.0
    tension_util: float | None = None

    # Step 6
    buckling_result: ColumnBucklingResult | None = None
    Cr: float | None = None
    compression_util: float | None = None

    overall_ok: bool = False

    # ══════════════════════════════════════════════════════════
    #  Public API
    # ══════════════════════════════════════════════════════════

    def check_all(self) -> bool:
        self._step1_yield_strength()
        self._step2_classify()
        self._step3_moment()
        self._step4_shear()
        self._step5_tension()
        self._step6_compression()
        utils = [
            u
            for u in (self.moment_util, self.shear_util, self.tension_util, self.compression_util)
            if u is not None
        ]
        self.overall_ok = all(u <= 1.0 for u in utils)
        return self.overall_ok

    # ══════════════════════════════════════════════════════════
    #  Step 1 — Yield strength
    # ══════════════════════════════════════════════════════════

    def _step1_yield_strength(self) -> None:
        self.grade = SteelGrade.parse(self.steel_grade)
        self.Fy = self.grade.Fy

    # ══════════════════════════════════════════════════════════
    #  Step 2 — Classification (Table 2)
    # ══════════════════════════════════════════════════════════

    def _step2_classify(self) -> None:
        self.classification = classify(self.section, self.Fy)
        self.section_class = self.classification.overall_class

    # ══════════════════════════════════════════════════════════
    #  Step 3 — Moment resistance (cl. 13.5 / 13.6)
    # ══════════════════════════════════════════════════════════

    def _step3_moment(self) -> None:
        self.ltb_result = None
        if self.unbraced_length is not None:
            try:
                self.ltb_result = lateral_torsional_buckling(
                    self.section, self.Fy, self.unbraced_length, self.omega2
                )
            except UnsupportedSectionError:
                # class 3/4 or non-I shapes: report the supported resistance
                self.ltb_result = None

        if self.ltb_result is not None:
            self.Mr = self.ltb_result.Mr
            self.moment_basis = self.ltb_result.governing_case
        else:
            self.Mr = moment_resistance(self.section, self.Fy)
            _, self.moment_basis = flexural_modulus(self.section, self.Fy)
        self.moment_util = _util(self.Mf, self.Mr) if self.Mf else None

    # ══════════════════════════════════════════════════════════
    #  Step 4 — Shear resistance (cl. 13.4.1.1)
    # ══════════════════════════════════════════════════════════

    def _step4_shear(self) -> None:
        try:
            self.Vr = shear_resistance(self.section, self.Fy)
        except UnsupportedSectionError:
            self.Vr = None
        self.shear_util = _util(self.Vf, self.Vr) if self.Vf else None

    # ══════════════════════════════════════════════════════════
    #  Step 5 — Tension (cl. 13.2)
    # ══════════════════════════════════════════════════════════

    def _step5_tension(self) -> None:
        self.Tr = tensile_resistance(self.section, self.Fy)
        self.tension_util = _util(self.Tf, self.Tr) if self.Tf else None

    # ══════════════════════════════════════════════════════════
    #  Step 6 — Compression (cl. 13.3)
    # ══════════════════════════════════════════════════════════

    def _step6_compression(self) -> None:
        if self.column_length is None:
            self.buckling_result = None
            self.Cr = None
            self.compression_util = None
            return
        self.buckling_result = column_resistance(
            self.section, self.Fy, self.K, self.column_length, self.axis
        )
        self.Cr = self.buckling_result.Cr
        self.compression_util = _util(self.Cf, self.Cr) if self.Cf else None

    # ══════════════════════════════════════════════════════════
    #  Summary printing
    # ══════════════════════════════════════════════════════════

    def print_summary(self) -> None:
        P = "PASS"
        F = "FAIL"
        sec = self.section
        cl = self.classification

        def status(util: float | None) -> str:
            if util is None:
                return ""
            return f"util = {util:.3f}  {P if util <= 1.0 else F}"

        print(f"\n{'='*68}")
        print(f"  S16-19 Section Capacity — {sec.designation}  ({self.grade.value if self.grade else self.steel_grade})")
        print(f"{'='*68}")
        print(f"  Fy = {self.Fy:.0f} MPa   Class {self.section_class}"
              + (f"   (governed by {cl.governed_by})" if cl else ""))
        print(f"{'─'*68}")
        print(f"  Moment         Mr  = {self.Mr:>8.1f} kNm   [{self.moment_basis}]  {status(self.moment_util)}")
        if self.ltb_result is not None:
            print(f"    LTB  Mu = {self.ltb_result.Mu:.1f} kNm   Mp = {self.ltb_result.Mp:.1f} kNm   "
                  f"L = {self.ltb_result.unbraced_length:.0f} mm")
        if self.Vr is not None:
            print(f"  Shear          Vr  = {self.Vr:>8.1f} kN    {status(self.shear_util)}")
        else:
            print("  Shear          not covered for this shape")
        print(f"  Tension        Tr  = {self.Tr:>8.1f} kN    {status(self.tension_util)}")
        if self.buckling_result is not None:
            br = self.buckling_result
            print(f"  Compression    Cr  = {br.Cr:>8.1f} kN    KL/r = {br.slenderness:.1f}  "
                  f"λ = {br.lambda_:.3f}  {status(self.compression_util)}")
        print(f"{'─'*68}")
        print(f"  OVERALL: {P if self.overall_ok else F}")
        print(f"{'='*68}")
