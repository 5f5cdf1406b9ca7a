"""Pydantic request/response models for the API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


# ── Request Models ────────────────────────────────────────────


class SectionFiltersInput(BaseModel):
    min_depth: float | None = None             # mm
    min_flange_width: float | None = None      # mm
    min_flange_thickness: float | None = None  # mm
    min_web_thickness: float | None = None     # mm


class NBCLoadsInput(BaseModel):
    D: float = 0.0  # kN/m
    L: float = 0.0
    S: float = 0.0
    W: float = 0.0
    E: float = 0.0


class BeamDesignRequest(BaseModel):
    mode: Literal["direct", "udl", "nbc"] = "direct"
    steel_grade: str = "350W"
    lateral_support: Literal["continuous", "unsupported"] = "continuous"
    unbraced_length: float | None = None  # mm
    omega2: float = 1.0
    families: list[str] = ["W"]
    filters: SectionFiltersInput | None = None
    max_results: int = 10
    # direct
    Mf: float | None = None  # kNm
    Vf: float | None = None  # kN
    # udl / nbc
    span: float | None = None   # mm
    w_uls: float | None = None  # kN/m
    w_sls: float | None = None  # kN/m
    nbc: NBCLoadsInput | None = None
    deflection_limit: Literal[240, 300, 360] = 360


class ColumnDesignRequest(BaseModel):
    factored_axial_load: float  # kN
    unbraced_length: float      # mm
    effective_length_factor: float = 1.0
    steel_grade: str = "350W"
    buckling_axis: Literal["strong", "weak"] = "weak"
    families: list[str] = ["W"]
    filters: SectionFiltersInput | None = None
    max_results: int = 10


class CapacityRequest(BaseModel):
    family: str = "W"
    designation: str
    steel_grade: str = "350W"
    unbraced_length: float | None = None  # mm; None = continuous support
    omega2: float = 1.0
    effective_length_factor: float = 1.0
    column_length: float | None = None    # mm
    buckling_axis: Literal["strong", "weak"] = "weak"
    Mf: float = 0.0
    Vf: float = 0.0
    Tf: float = 0.0
    Cf: float = 0.0


# ── Response Models ───────────────────────────────────────────


class FamilyInfo(BaseModel):
    family: str
    description: str
    kind: str
    count: int


class SectionInfo(BaseModel):
    family: str
    designation: str
    imperial_designation: str
    kind: str
    mass: float   # kg/m
    A: float      # mm²
    d: float      # mm
    b: float      # mm
    t: float | None = None
    w: float | None = None
    Ix: float     # mm⁴
    Sx: float     # mm³
    Zx: float     # mm³
    rx: float     # mm
    Iy: float     # mm⁴
    ry: float     # mm
    J: float      # mm⁴
    Cw: float | None = None  # mm⁶
    nominal_depth: float | None = None


class ClassificationOutput(BaseModel):
    flange_class: int
    web_class: int
    overall_class: int
    flange_ratio: float
    web_ratio: float
    flange_limits: list[float]
    web_limits: list[float]
    governed_by: str


class LTBOutput(BaseModel):
    Mu: float  # kNm
    Mp: float
    Mr: float
    governing_case: str
    omega2: float
    unbraced_length: float


class BucklingOutput(BaseModel):
    KL: float
    slenderness: float
    Fe: float
    lambda_: float
    Cr: float
    axis: str
    r: float


class BeamResultOutput(BaseModel):
    designation: str
    family: str
    mass: float
    Mr: float
    Vr: float
    moment_utilization: float
    shear_utilization: float
    deflection_utilization: float | None = None
    deflection: float | None = None  # mm
    classification: ClassificationOutput
    ltb: LTBOutput | None = None


class CombinationOutput(BaseModel):
    name: str
    value: float
    is_governing: bool


class CombinationsOutput(BaseModel):
    uls: list[CombinationOutput]
    sls: list[CombinationOutput]
    w_uls: float
    w_sls: float


class DeflectionOutput(BaseModel):
    required_ix: float
    allowable_deflection: float
    span: float
    w_sls: float
    limit: int


class BeamDesignOutput(BaseModel):
    Mf: float
    Vf: float
    deflection: DeflectionOutput | None = None
    combinations: CombinationsOutput | None = None
    results: list[BeamResultOutput]


class ColumnResultOutput(BaseModel):
    designation: str
    family: str
    mass: float
    Cr: float
    utilization: float
    classification: ClassificationOutput
    buckling: BucklingOutput


class ColumnDesignOutput(BaseModel):
    results: list[ColumnResultOutput]


class CapacityOutput(BaseModel):
    designation: str
    steel_grade: str
    Fy: float
    classification: ClassificationOutput
    Mr: float
    moment_basis: str
    ltb: LTBOutput | None = None
    Vr: float | None = None
    Tr: float
    Cr: float | None = None
    buckling: BucklingOutput | None = None
    moment_util: float | None = None
    shear_util: float | None = None
    tension_util: float | None = None
    compression_util: float | None = None
    overall_ok: bool
