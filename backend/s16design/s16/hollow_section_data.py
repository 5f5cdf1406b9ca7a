"""Geometric properties of a hollow structural section (HSS) for S16 design."""

from __future__ import annotations

from dataclasses import dataclass

from .section_data import SectionRecord


@dataclass(frozen=True)
class HollowSection(SectionRecord):
    """Square or rectangular HSS (CSA G40 or ASTM A500).

    ``d`` and ``b`` are the outside dimensions; ``bt`` and ``ht`` are the
    flat-width ratios tabulated by CISC, (b - 4t)/t and (d - 4t)/t.
    """

    t: float = 0.0       # mm  — design wall thickness
    bt: float = 0.0      # wall (flange) width-to-thickness
    ht: float = 0.0      # web height-to-thickness
    C: float = 0.0       # mm³ — torsional shear constant
    section_type: str = "SQUARE"  # "SQUARE" or "RECT"
