"""s16design — CSA S16-19 steel member classification, resistance and selection."""

from .catalog import (
    clear_cache,
    group_by_nominal_depth,
    list_families,
    list_sections,
    load_catalog,
    load_section,
)
from .designer import (
    ColumnDesignInputs,
    ColumnDesignResult,
    DesignInputs,
    DesignResult,
    LateralSupport,
    SectionFilters,
    search_optimal_beam,
    search_optimal_channel,
    search_optimal_column,
)
from .errors import (
    CatalogDataError,
    PreconditionError,
    S16Error,
    SectionNotFoundError,
    UnsupportedSectionError,
)
from .load import (
    BeamDesignMode,
    BeamLoads,
    CombinationResult,
    DeflectionRequirement,
    DesignLoads,
    LoadCombination,
    NBCLoads,
    actual_deflection,
    derive_code_combinations,
    derive_design_loads,
    derive_simply_supported_loads,
    required_inertia_for_deflection,
)
from .logging_utils import configure_logging
from .material import SteelGrade
from .s16 import (
    AngleSection,
    BucklingAxis,
    ChannelSection,
    ColumnBucklingResult,
    HollowSection,
    ISection,
    LTBResult,
    SectionCapacityS16,
    SectionClassification,
    SectionFamily,
    SectionRecord,
    ShapeKind,
    TeeSection,
    classify,
    column_resistance,
    critical_elastic_moment,
    lateral_torsional_buckling,
    ltb_moment_resistance,
    moment_resistance,
    shear_resistance,
    tensile_resistance,
)
from .settings import Settings

__all__ = [
    "AngleSection",
    "BeamDesignMode",
    "BeamLoads",
    "BucklingAxis",
    "CatalogDataError",
    "ChannelSection",
    "ColumnBucklingResult",
    "ColumnDesignInputs",
    "ColumnDesignResult",
    "CombinationResult",
    "DeflectionRequirement",
    "DesignInputs",
    "DesignLoads",
    "DesignResult",
    "HollowSection",
    "ISection",
    "LTBResult",
    "LateralSupport",
    "LoadCombination",
    "NBCLoads",
    "PreconditionError",
    "S16Error",
    "SectionCapacityS16",
    "SectionClassification",
    "SectionFamily",
    "SectionFilters",
    "SectionNotFoundError",
    "SectionRecord",
    "Settings",
    "ShapeKind",
    "SteelGrade",
    "TeeSection",
    "UnsupportedSectionError",
    "actual_deflection",
    "classify",
    "clear_cache",
    "column_resistance",
    "configure_logging",
    "critical_elastic_moment",
    "derive_code_combinations",
    "derive_design_loads",
    "derive_simply_supported_loads",
    "group_by_nominal_depth",
    "lateral_torsional_buckling",
    "list_families",
    "list_sections",
    "load_catalog",
    "load_section",
    "ltb_moment_resistance",
    "moment_resistance",
    "required_inertia_for_deflection",
    "search_optimal_beam",
    "search_optimal_channel",
    "search_optimal_column",
    "shear_resistance",
    "tensile_resistance",
]
