"""Optimal-section search — lightest adequate member from the catalog.

Each candidate goes through the same pipeline: dimension filters, the
deflection gate, classification, factored resistances, utilisations.
Survivors are returned sorted by mass (stable, so catalog order breaks ties).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import NoReturn

from loguru import logger

from .catalog import load_catalog
from .errors import CatalogDataError, PreconditionError, UnsupportedSectionError
from .load import DeflectionRequirement, actual_deflection
from .material import SteelGrade
from .s16.axial import BucklingAxis, ColumnBucklingResult, column_resistance
from .s16.classification import SectionClassification, classify
from .s16.flexure import LTBResult, lateral_torsional_buckling, moment_resistance
from .s16.section_data import (
    AngleSection,
    ISection,
    SectionFamily,
    SectionRecord,
    ShapeKind,
)
from .s16.shear import shear_resistance

CHANNEL_FAMILIES = (SectionFamily.C, SectionFamily.MC)


class LateralSupport(str, Enum):
    CONTINUOUS = "continuous"
    UNSUPPORTED = "unsupported"

    @classmethod
    def parse(cls, value: "LateralSupport | str") -> "LateralSupport":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise PreconditionError(f"Unknown lateral support {value!r}") from None


@dataclass(frozen=True)
class SectionFilters:
    """Minimum dimensions (mm); ``None`` leaves a dimension unconstrained."""

    min_depth: float | None = None
    min_flange_width: float | None = None
    min_flange_thickness: float | None = None
    min_web_thickness: float | None = None

    def accepts(self, section: SectionRecord) -> bool:
        checks = (
            (self.min_depth, section.d),
            (self.min_flange_width, section.b),
            (self.min_flange_thickness, getattr(section, "t", 0.0)),
            # HSS have no separate web; the wall thickness stands in
            (self.min_web_thickness, getattr(section, "w", getattr(section, "t", 0.0))),
        )
        return all(minimum is None or value >= minimum for minimum, value in checks)


@dataclass(frozen=True)
class DesignInputs:
    factored_moment: float   # kNm
    factored_shear: float    # kN
    steel_grade: SteelGrade | str = SteelGrade.G350W
    lateral_support: LateralSupport = LateralSupport.CONTINUOUS
    unbraced_length: float | None = None  # mm, required when unsupported
    omega2: float = 1.0
    filters: SectionFilters | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "steel_grade", SteelGrade.parse(self.steel_grade))
        support = LateralSupport.parse(self.lateral_support)
        object.__setattr__(self, "lateral_support", support)

        if self.factored_moment < 0 or self.factored_shear < 0:
            raise PreconditionError(
                f"Factored moment and shear must be non-negative "
                f"(Mf={self.factored_moment}, Vf={self.factored_shear})"
            )
        if self.omega2 <= 0:
            raise PreconditionError(f"omega2 must be positive, got {self.omega2}")
        if support is LateralSupport.UNSUPPORTED and (
            self.unbraced_length is None or self.unbraced_length <= 0
        ):
            raise PreconditionError(
                "A positive unbraced length is required for an unsupported beam"
            )

    @property
    def Fy(self) -> float:
        return self.steel_grade.Fy


@dataclass(frozen=True)
class ColumnDesignInputs:
    factored_axial_load: float        # kN
    unbraced_length: float            # mm
    effective_length_factor: float = 1.0
    steel_grade: SteelGrade | str = SteelGrade.G350W
    buckling_axis: BucklingAxis | str = BucklingAxis.WEAK
    filters: SectionFilters | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "steel_grade", SteelGrade.parse(self.steel_grade))
        object.__setattr__(self, "buckling_axis", BucklingAxis.parse(self.buckling_axis))
        if self.factored_axial_load < 0:
            raise PreconditionError(
                f"Factored axial load must be non-negative, got {self.factored_axial_load}"
            )
        if self.effective_length_factor <= 0:
            raise PreconditionError(
                f"Effective length factor must be positive, got {self.effective_length_factor}"
            )
        if self.unbraced_length <= 0:
            raise PreconditionError(
                f"Unbraced length must be positive, got {self.unbraced_length}"
            )

    @property
    def Fy(self) -> float:
        return self.steel_grade.Fy


@dataclass(frozen=True)
class DesignResult:
    section: SectionRecord
    Mr: float   # kNm
    Vr: float   # kN
    moment_utilization: float
    shear_utilization: float
    is_adequate: bool
    classification: SectionClassification
    ltb_result: LTBResult | None = None
    deflection_utilization: float | None = None
    deflection: float | None = None  # mm, under w_sls

    @property
    def governing_utilization(self) -> float:
        utils = [self.moment_utilization, self.shear_utilization]
        if self.deflection_utilization is not None:
            utils.append(self.deflection_utilization)
        return max(utils)


@dataclass(frozen=True)
class ColumnDesignResult:
    section: SectionRecord
    Cr: float   # kN
    utilization: float
    is_adequate: bool
    classification: SectionClassification
    buckling_result: ColumnBucklingResult


def _zero_resistance(section: SectionRecord, detail: str) -> NoReturn:
    logger.error(
        "{} {} gives no usable resistance: {}", section.family.value, section.designation, detail
    )
    raise CatalogDataError(
        f"Section {section.designation} has a non-positive resistance ({detail}); "
        f"check its catalog properties"
    )


def _passes_filters(section: SectionRecord, filters: SectionFilters | None) -> bool:
    return filters is None or filters.accepts(section)


def search_optimal_beam(
    sections: Iterable[SectionRecord],
    inputs: DesignInputs,
    deflection: DeflectionRequirement | None = None,
) -> list[DesignResult]:
    """Return every adequate section for ``inputs``, lightest first."""
    Mf, Vf = inputs.factored_moment, inputs.factored_shear
    if Mf == 0 and Vf == 0:
        logger.debug("Beam search skipped: Mf = Vf = 0")
        return []

    Fy = inputs.Fy
    unsupported = inputs.lateral_support is LateralSupport.UNSUPPORTED
    results: list[DesignResult] = []
    counts = {"candidates": 0, "filtered": 0, "deflection": 0, "skipped": 0, "rejected": 0}

    for section in sections:
        counts["candidates"] += 1
        if isinstance(section, AngleSection):
            counts["skipped"] += 1
            continue
        if not _passes_filters(section, inputs.filters):
            counts["filtered"] += 1
            continue

        deflection_util = None
        delta = None
        if deflection is not None:
            if section.Ix < deflection.required_ix:
                counts["deflection"] += 1
                continue
            deflection_util = deflection.required_ix / section.Ix
            delta = actual_deflection(deflection.w_sls, deflection.span, section.Ix)

        classification = classify(section, Fy)
        ltb_result = None
        if unsupported and (
            classification.overall_class > 2 or not isinstance(section, ISection)
        ):
            counts["skipped"] += 1
            continue
        try:
            if unsupported:
                ltb_result = lateral_torsional_buckling(
                    section, Fy, inputs.unbraced_length, inputs.omega2
                )
                Mr = ltb_result.Mr
            else:
                Mr = moment_resistance(section, Fy)
            Vr = shear_resistance(section, Fy)
        except PreconditionError as exc:
            _zero_resistance(section, str(exc))
        if Mr <= 0 or Vr <= 0:
            _zero_resistance(section, f"Mr={Mr}, Vr={Vr}")

        moment_util = Mf / Mr
        shear_util = Vf / Vr
        if moment_util > 1.0 or shear_util > 1.0:
            counts["rejected"] += 1
            continue

        results.append(
            DesignResult(
                section=section,
                Mr=Mr,
                Vr=Vr,
                moment_utilization=moment_util,
                shear_utilization=shear_util,
                is_adequate=True,
                classification=classification,
                ltb_result=ltb_result,
                deflection_utilization=deflection_util,
                deflection=delta,
            )
        )

    results.sort(key=lambda r: r.section.mass)
    logger.debug(
        "Beam search Mf={:.1f} kNm Vf={:.1f} kN ({}): {} candidates, {} filtered, "
        "{} failed deflection, {} skipped, {} rejected, {} accepted",
        Mf, Vf, inputs.lateral_support.value, counts["candidates"], counts["filtered"],
        counts["deflection"], counts["skipped"], counts["rejected"], len(results),
    )
    return results


def search_optimal_column(
    sections: Iterable[SectionRecord],
    inputs: ColumnDesignInputs,
) -> list[ColumnDesignResult]:
    """Return every section whose Cr carries ``Cf``, lightest first."""
    Cf = inputs.factored_axial_load
    if Cf == 0:
        logger.debug("Column search skipped: Cf = 0")
        return []

    Fy = inputs.Fy
    results: list[ColumnDesignResult] = []
    candidates = filtered = slender = rejected = 0

    for section in sections:
        candidates += 1
        if not _passes_filters(section, inputs.filters):
            filtered += 1
            continue

        classification = classify(section, Fy)
        # class 4 needs effective-area reductions, not covered here
        if classification.overall_class > 3:
            slender += 1
            continue
        try:
            buckling = column_resistance(
                section,
                Fy,
                inputs.effective_length_factor,
                inputs.unbraced_length,
                inputs.buckling_axis,
            )
        except PreconditionError as exc:
            _zero_resistance(section, str(exc))
        if buckling.Cr <= 0:
            _zero_resistance(section, f"Cr={buckling.Cr}")

        utilization = Cf / buckling.Cr
        if utilization > 1.0:
            rejected += 1
            continue
        results.append(
            ColumnDesignResult(
                section=section,
                Cr=buckling.Cr,
                utilization=utilization,
                is_adequate=True,
                classification=classification,
                buckling_result=buckling,
            )
        )

    results.sort(key=lambda r: r.section.mass)
    logger.debug(
        "Column search Cf={:.1f} kN KL={:.0f} mm ({} axis): {} candidates, "
        "{} filtered, {} class 4, {} rejected, {} accepted",
        Cf, inputs.effective_length_factor * inputs.unbraced_length,
        inputs.buckling_axis.value, candidates, filtered, slender, rejected, len(results),
    )
    return results


def search_optimal_channel(
    inputs: DesignInputs,
    deflection: DeflectionRequirement | None = None,
    families: Iterable[SectionFamily | str] = CHANNEL_FAMILIES,
) -> list[DesignResult]:
    """Beam search over the channel families, continuous support only."""
    if inputs.lateral_support is not LateralSupport.CONTINUOUS:
        raise UnsupportedSectionError(
            "Channel selection requires continuous lateral support"
        )
    sections: list[SectionRecord] = []
    for family in families:
        records = load_catalog(family)
        if records and records[0].kind is not ShapeKind.CHANNEL:
            raise PreconditionError(f"Family {records[0].family.value} is not a channel family")
        sections.extend(records)
    return search_optimal_beam(sections, inputs, deflection)
