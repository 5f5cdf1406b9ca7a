"""Steel section catalog — loads CISC shape tables from CSV data.

One CSV per family (``<family>_section.csv``) with the handbook's short-code
columns. Values are stored at the handbook's scaled units and multiplied out
once here, so every record holds base N-mm units.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from loguru import logger

from .errors import CatalogDataError, SectionNotFoundError
from .s16.hollow_section_data import HollowSection
from .s16.section_data import (
    AngleSection,
    ChannelSection,
    ISection,
    SectionFamily,
    SectionRecord,
    ShapeKind,
    TeeSection,
)
from .settings import Settings

# Handbook scale per column: Ix ×10⁶ mm⁴, S/Z ×10³ mm³, J ×10³ mm⁴,
# Cw ×10⁹ mm⁶, HSS torsional constant C ×10³ mm³.
_SCALE: dict[str, float] = {
    "Ix": 1e6,
    "Iy": 1e6,
    "Sx": 1e3,
    "Sy": 1e3,
    "Zx": 1e3,
    "Zy": 1e3,
    "J": 1e3,
    "Cw": 1e9,
    "C": 1e3,
}

_COMMON_COLUMNS: dict[str, str] = {
    "Mass": "mass",
    "A": "A",
    "D": "d",
    "B": "b",
    "Ix": "Ix",
    "Sx": "Sx",
    "Zx": "Zx",
    "Rx": "rx",
    "Iy": "Iy",
    "Sy": "Sy",
    "Zy": "Zy",
    "Ry": "ry",
    "J": "J",
}

_KIND_COLUMNS: dict[ShapeKind, dict[str, str]] = {
    ShapeKind.I_SHAPE: {"T": "t", "W": "w", "BT": "bt", "HW": "hw", "Cw": "Cw"},
    ShapeKind.CHANNEL: {"T": "t", "W": "w", "BT": "bt", "HW": "hw", "Cw": "Cw", "X": "x_bar"},
    ShapeKind.TEE: {"T": "t", "W": "w", "BT": "bt", "DW": "dw", "Y": "y_bar"},
    ShapeKind.ANGLE: {"T": "t", "BT": "bt", "Rz": "rz", "X": "x_bar", "Y": "y_bar"},
    ShapeKind.HOLLOW: {"T": "t", "BT": "bt", "HT": "ht", "C": "C"},
}

_RECORD_TYPES: dict[ShapeKind, type[SectionRecord]] = {
    ShapeKind.I_SHAPE: ISection,
    ShapeKind.CHANNEL: ChannelSection,
    ShapeKind.TEE: TeeSection,
    ShapeKind.ANGLE: AngleSection,
    ShapeKind.HOLLOW: HollowSection,
}

_CATALOG: dict[SectionFamily, tuple[SectionRecord, ...]] = {}
_INDEX: dict[SectionFamily, dict[str, SectionRecord]] = {}


def _data_dir() -> Path:
    return Settings.from_env().catalog_dir


def _csv_path(family: SectionFamily) -> Path:
    return _data_dir() / f"{family.value}_section.csv"


def _parse_family(family: SectionFamily | str) -> SectionFamily:
    if isinstance(family, SectionFamily):
        return family
    key = str(family).strip().upper()
    for candidate in SectionFamily:
        if candidate.value == key:
            return candidate
    raise SectionNotFoundError(
        f"Section family '{family}' not found. "
        f"Use list_families() to see available families."
    )


def _parse_value(path: Path, line: int, column: str, raw: str | None) -> float:
    text = (raw or "").strip()
    try:
        value = float(text)
    except ValueError:
        logger.error("{}:{} column {} is not numeric: {!r}", path.name, line, column, raw)
        raise CatalogDataError(
            f"{path.name} line {line}: column '{column}' is not numeric ({raw!r})"
        ) from None
    if value < 0:
        logger.error("{}:{} column {} is negative: {}", path.name, line, column, value)
        raise CatalogDataError(
            f"{path.name} line {line}: column '{column}' is negative ({value})"
        )
    return value * _SCALE.get(column, 1.0)


def _build_record(
    family: SectionFamily, path: Path, line: int, row: dict[str, str]
) -> SectionRecord:
    kind = family.kind
    designation = (row.get("Dsg") or "").strip()
    if not designation:
        logger.error("{}:{} has no designation", path.name, line)
        raise CatalogDataError(f"{path.name} line {line}: missing designation")

    kwargs: dict[str, Any] = {
        "family": family,
        "designation": designation,
        "imperial_designation": (row.get("Ds_i") or "").strip(),
    }
    for column, name in {**_COMMON_COLUMNS, **_KIND_COLUMNS[kind]}.items():
        kwargs[name] = _parse_value(path, line, column, row.get(column))

    if kind is ShapeKind.I_SHAPE and (row.get("Dnom") or "").strip():
        kwargs["nominal_depth"] = _parse_value(path, line, "Dnom", row["Dnom"])
    if kind is ShapeKind.HOLLOW:
        kwargs["section_type"] = "SQUARE" if kwargs["d"] == kwargs["b"] else "RECT"

    return _RECORD_TYPES[kind](**kwargs)


def _load_csv(family: SectionFamily, path: Path) -> tuple[SectionRecord, ...]:
    """Parse one family CSV; raises CatalogDataError on any bad row."""
    records: list[SectionRecord] = []
    seen: set[str] = set()
    with open(path, encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        required = set(_COMMON_COLUMNS) | set(_KIND_COLUMNS[family.kind]) | {"Dsg"}
        missing = required - set(reader.fieldnames or [])
        if missing:
            logger.error("{} is missing columns {}", path.name, sorted(missing))
            raise CatalogDataError(f"{path.name}: missing columns {sorted(missing)}")
        # header is line 1
        for line, row in enumerate(reader, start=2):
            record = _build_record(family, path, line, row)
            key = record.designation.upper()
            if key in seen:
                logger.error("{}:{} duplicate designation {}", path.name, line, record.designation)
                raise CatalogDataError(
                    f"{path.name} line {line}: duplicate designation '{record.designation}'"
                )
            seen.add(key)
            records.append(record)
    return tuple(records)


def _ensure_loaded(family: SectionFamily) -> None:
    """Load a family's CSV on first access."""
    if family in _CATALOG:
        return
    path = _csv_path(family)
    if not path.exists():
        logger.warning("No catalog data for family {} ({})", family.value, path)
        records: tuple[SectionRecord, ...] = ()
    else:
        records = _load_csv(family, path)
        logger.info("Loaded {} {} sections from {}", len(records), family.value, path)
    _CATALOG[family] = records
    _INDEX[family] = {r.designation.upper(): r for r in records}


def clear_cache() -> None:
    """Forget every loaded family so the next access re-reads the CSVs."""
    _CATALOG.clear()
    _INDEX.clear()


def load_catalog(family: SectionFamily | str) -> tuple[SectionRecord, ...]:
    """Return every record of a family in catalog (CSV) order."""
    fam = _parse_family(family)
    _ensure_loaded(fam)
    return _CATALOG[fam]


def load_section(family: SectionFamily | str, designation: str) -> SectionRecord:
    """Look up a section by metric designation (e.g. ``"W310x97"``)."""
    fam = _parse_family(family)
    _ensure_loaded(fam)
    try:
        return _INDEX[fam][designation.strip().upper()]
    except KeyError:
        raise SectionNotFoundError(
            f"Section '{designation}' not found in family {fam.value}. "
            f"Use list_sections() to see available designations."
        ) from None


def list_sections(family: SectionFamily | str, search: str | None = None) -> list[str]:
    """Return designations of a family, optionally filtered by ``search``.

    The search is a case-insensitive substring match against both the
    metric and the imperial designation.
    """
    records = load_catalog(family)
    if search is None or not search.strip():
        return [r.designation for r in records]
    needle = search.strip().upper()
    return [
        r.designation
        for r in records
        if needle in r.designation.upper() or needle in r.imperial_designation.upper()
    ]


def list_families() -> list[SectionFamily]:
    """Return the families that have catalog data available."""
    return [fam for fam in SectionFamily if _csv_path(fam).exists()]


def group_by_nominal_depth(
    sections: Iterable[SectionRecord],
) -> dict[float, list[SectionRecord]]:
    """Group records by nominal depth, keeping first-seen order.

    Records without a tabulated nominal depth fall back to their actual
    depth rounded to the nearest 10 mm.
    """
    groups: dict[float, list[SectionRecord]] = {}
    for section in sections:
        nominal = getattr(section, "nominal_depth", None)
        if nominal is None:
            nominal = float(round(section.d / 10.0) * 10)
        groups.setdefault(nominal, []).append(section)
    return groups
