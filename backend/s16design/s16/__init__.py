"""CSA S16-19 member checks: classification and factored resistances."""

from .axial import BucklingAxis, ColumnBucklingResult, column_resistance, tensile_resistance
from .capacity import SectionCapacityS16
from .classification import SectionClassification, classify
from .flexure import (
    LTBResult,
    critical_elastic_moment,
    flexural_modulus,
    lateral_torsional_buckling,
    ltb_moment_resistance,
    moment_resistance,
)
from .hollow_section_data import HollowSection
from .section_data import (
    AngleSection,
    ChannelSection,
    ISection,
    SectionFamily,
    SectionRecord,
    ShapeKind,
    TeeSection,
)
from .shear import shear_resistance

__all__ = [
    "AngleSection",
    "BucklingAxis",
    "ChannelSection",
    "ColumnBucklingResult",
    "HollowSection",
    "ISection",
    "LTBResult",
    "SectionCapacityS16",
    "SectionClassification",
    "SectionFamily",
    "SectionRecord",
    "ShapeKind",
    "TeeSection",
    "classify",
    "column_resistance",
    "critical_elastic_moment",
    "flexural_modulus",
    "lateral_torsional_buckling",
    "ltb_moment_resistance",
    "moment_resistance",
    "shear_resistance",
    "tensile_resistance",
]
