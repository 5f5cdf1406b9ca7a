"""FastAPI application — CSA S16-19 member design API."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from s16design import (
    BeamDesignMode,
    CatalogDataError,
    ColumnDesignInputs,
    DesignInputs,
    NBCLoads,
    PreconditionError,
    SectionCapacityS16,
    SectionFilters,
    SectionNotFoundError,
    Settings,
    SteelGrade,
    derive_code_combinations,
    derive_design_loads,
    list_families,
    list_sections,
    load_catalog,
    load_section,
    search_optimal_beam,
    search_optimal_column,
)
from s16design.designer import DesignResult
from s16design.load import CombinationResult, DeflectionRequirement
from s16design.s16 import ColumnBucklingResult, LTBResult, SectionClassification
from s16design.s16.section_data import SectionRecord

from .schemas import (
    BeamDesignOutput,
    BeamDesignRequest,
    BeamResultOutput,
    BucklingOutput,
    CapacityOutput,
    CapacityRequest,
    ClassificationOutput,
    ColumnDesignOutput,
    ColumnDesignRequest,
    ColumnResultOutput,
    CombinationOutput,
    CombinationsOutput,
    DeflectionOutput,
    FamilyInfo,
    LTBOutput,
    NBCLoadsInput,
    SectionFiltersInput,
    SectionInfo,
)

app = FastAPI(title="S16 Steel Design API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(Settings.from_env().cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

T = TypeVar("T")


def _run(fn: Callable[[], T]) -> T:
    """Call into the engine, mapping its errors onto HTTP status codes."""
    try:
        return fn()
    except SectionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PreconditionError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except CatalogDataError as e:
        logger.exception("Catalog data fault")
        raise HTTPException(status_code=500, detail=str(e))


# ── Converters ────────────────────────────────────────────────


def _section_info(sec: SectionRecord) -> SectionInfo:
    return SectionInfo(
        family=sec.family.value,
        designation=sec.designation,
        imperial_designation=sec.imperial_designation,
        kind=sec.kind.value,
        mass=sec.mass,
        A=sec.A,
        d=sec.d,
        b=sec.b,
        t=getattr(sec, "t", None),
        w=getattr(sec, "w", None),
        Ix=sec.Ix,
        Sx=sec.Sx,
        Zx=sec.Zx,
        rx=sec.rx,
        Iy=sec.Iy,
        ry=sec.ry,
        J=sec.J,
        Cw=getattr(sec, "Cw", None),
        nominal_depth=getattr(sec, "nominal_depth", None),
    )


def _classification(c: SectionClassification) -> ClassificationOutput:
    return ClassificationOutput(
        flange_class=c.flange_class,
        web_class=c.web_class,
        overall_class=c.overall_class,
        flange_ratio=c.flange_ratio,
        web_ratio=c.web_ratio,
        flange_limits=list(c.flange_limits),
        # angles carry no web limit; JSON has no infinity
        web_limits=[v if v != float("inf") else 0.0 for v in c.web_limits],
        governed_by=c.governed_by,
    )


def _ltb(r: LTBResult | None) -> LTBOutput | None:
    if r is None:
        return None
    return LTBOutput(
        Mu=round(r.Mu, 3),
        Mp=round(r.Mp, 3),
        Mr=round(r.Mr, 3),
        governing_case=r.governing_case,
        omega2=r.omega2,
        unbraced_length=r.unbraced_length,
    )


def _buckling(r: ColumnBucklingResult | None) -> BucklingOutput | None:
    if r is None:
        return None
    return BucklingOutput(
        KL=r.KL,
        slenderness=round(r.slenderness, 3),
        Fe=round(r.Fe, 3),
        lambda_=round(r.lambda_, 4),
        Cr=round(r.Cr, 3),
        axis=r.axis.value,
        r=r.r,
    )


def _beam_result(r: DesignResult) -> BeamResultOutput:
    return BeamResultOutput(
        designation=r.section.designation,
        family=r.section.family.value,
        mass=r.section.mass,
        Mr=round(r.Mr, 3),
        Vr=round(r.Vr, 3),
        moment_utilization=round(r.moment_utilization, 4),
        shear_utilization=round(r.shear_utilization, 4),
        deflection_utilization=(
            round(r.deflection_utilization, 4) if r.deflection_utilization is not None else None
        ),
        deflection=round(r.deflection, 3) if r.deflection is not None else None,
        classification=_classification(r.classification),
        ltb=_ltb(r.ltb_result),
    )


def _combinations(c: CombinationResult | None) -> CombinationsOutput | None:
    if c is None:
        return None

    def rows(combos):
        return [
            CombinationOutput(name=x.name, value=round(x.value, 4), is_governing=x.is_governing)
            for x in combos
        ]

    return CombinationsOutput(uls=rows(c.uls), sls=rows(c.sls), w_uls=c.w_uls, w_sls=c.w_sls)


def _deflection(d: DeflectionRequirement | None) -> DeflectionOutput | None:
    if d is None:
        return None
    return DeflectionOutput(
        required_ix=d.required_ix,
        allowable_deflection=d.allowable_deflection,
        span=d.span,
        w_sls=d.w_sls,
        limit=d.limit,
    )


def _filters(f: SectionFiltersInput | None) -> SectionFilters | None:
    if f is None:
        return None
    return SectionFilters(**f.model_dump())


def _nbc(n: NBCLoadsInput | None) -> NBCLoads | None:
    return NBCLoads(**n.model_dump()) if n is not None else None


def _candidates(families: list[str]) -> list[SectionRecord]:
    sections: list[SectionRecord] = []
    for family in families:
        sections.extend(load_catalog(family))
    return sections


# ── Section catalog ───────────────────────────────────────────


@app.get("/api/families", response_model=list[FamilyInfo])
def get_families() -> list[FamilyInfo]:
    """List section families with catalog data."""
    return _run(
        lambda: [
            FamilyInfo(
                family=fam.value,
                description=fam.description,
                kind=fam.kind.value,
                count=len(load_catalog(fam)),
            )
            for fam in list_families()
        ]
    )


@app.get("/api/sections", response_model=list[SectionInfo])
def get_sections(family: str = "W", search: str | None = None) -> list[SectionInfo]:
    """List sections of a family, optionally filtered by designation."""

    def build() -> list[SectionInfo]:
        return [_section_info(load_section(family, d)) for d in list_sections(family, search)]

    return _run(build)


@app.get("/api/sections/{family}/{designation}", response_model=SectionInfo)
def get_section(family: str, designation: str) -> SectionInfo:
    """Full properties of one section."""
    return _run(lambda: _section_info(load_section(family, designation)))


# ── Design ────────────────────────────────────────────────────


@app.post("/api/capacity", response_model=CapacityOutput)
def capacity(data: CapacityRequest) -> CapacityOutput:
    """Resistances of a single section, with optional demand checks."""

    def build() -> CapacityOutput:
        check = SectionCapacityS16(
            section=load_section(data.family, data.designation),
            steel_grade=data.steel_grade,
            unbraced_length=data.unbraced_length,
            omega2=data.omega2,
            K=data.effective_length_factor,
            column_length=data.column_length,
            axis=data.buckling_axis,
            Mf=data.Mf,
            Vf=data.Vf,
            Tf=data.Tf,
            Cf=data.Cf,
        )
        check.check_all()
        return CapacityOutput(
            designation=check.section.designation,
            steel_grade=check.grade.value,
            Fy=check.Fy,
            classification=_classification(check.classification),
            Mr=round(check.Mr, 3),
            moment_basis=check.moment_basis,
            ltb=_ltb(check.ltb_result),
            Vr=round(check.Vr, 3) if check.Vr is not None else None,
            Tr=round(check.Tr, 3),
            Cr=round(check.Cr, 3) if check.Cr is not None else None,
            buckling=_buckling(check.buckling_result),
            moment_util=check.moment_util,
            shear_util=check.shear_util,
            tension_util=check.tension_util,
            compression_util=check.compression_util,
            overall_ok=check.overall_ok,
        )

    return _run(build)


@app.post("/api/beam-design", response_model=BeamDesignOutput)
def beam_design(data: BeamDesignRequest) -> BeamDesignOutput:
    """Lightest adequate beams for direct, UDL or NBC loading."""

    def build() -> BeamDesignOutput:
        loads = derive_design_loads(
            BeamDesignMode(data.mode),
            Mf=data.Mf,
            Vf=data.Vf,
            span=data.span,
            w_uls=data.w_uls,
            w_sls=data.w_sls,
            nbc=_nbc(data.nbc),
            deflection_limit=data.deflection_limit,
        )
        inputs = DesignInputs(
            factored_moment=loads.Mf,
            factored_shear=loads.Vf,
            steel_grade=data.steel_grade,
            lateral_support=data.lateral_support,
            unbraced_length=data.unbraced_length,
            omega2=data.omega2,
            filters=_filters(data.filters),
        )
        results = search_optimal_beam(_candidates(data.families), inputs, loads.deflection)
        return BeamDesignOutput(
            Mf=round(loads.Mf, 4),
            Vf=round(loads.Vf, 4),
            deflection=_deflection(loads.deflection),
            combinations=_combinations(loads.combinations),
            results=[_beam_result(r) for r in results[: data.max_results]],
        )

    return _run(build)


@app.post("/api/column-design", response_model=ColumnDesignOutput)
def column_design(data: ColumnDesignRequest) -> ColumnDesignOutput:
    """Lightest adequate columns for an axial load."""

    def build() -> ColumnDesignOutput:
        inputs = ColumnDesignInputs(
            factored_axial_load=data.factored_axial_load,
            unbraced_length=data.unbraced_length,
            effective_length_factor=data.effective_length_factor,
            steel_grade=data.steel_grade,
            buckling_axis=data.buckling_axis,
            filters=_filters(data.filters),
        )
        results = search_optimal_column(_candidates(data.families), inputs)
        return ColumnDesignOutput(
            results=[
                ColumnResultOutput(
                    designation=r.section.designation,
                    family=r.section.family.value,
                    mass=r.section.mass,
                    Cr=round(r.Cr, 3),
                    utilization=round(r.utilization, 4),
                    classification=_classification(r.classification),
                    buckling=_buckling(r.buckling_result),
                )
                for r in results[: data.max_results]
            ]
        )

    return _run(build)


@app.post("/api/loads/combinations", response_model=CombinationsOutput)
def load_combinations(data: NBCLoadsInput) -> CombinationsOutput:
    """NBC 2020 ULS/SLS combinations with the governing ones flagged."""
    return _run(lambda: _combinations(derive_code_combinations(_nbc(data))))


@app.get("/api/grades")
def get_grades() -> list[dict[str, float | str]]:
    """Recognised steel grades and their stresses (MPa)."""
    return [{"grade": g.value, "label": g.label, "Fy": g.Fy, "Fu": g.Fu} for g in SteelGrade]
