"""Steel grades and material constants for CSA S16-19 design."""

from __future__ import annotations

from enum import Enum

from .errors import PreconditionError

E_STEEL = 200_000.0  # MPa
G_STEEL = 77_000.0   # MPa
PHI = 0.9            # S16-19 cl. 13.1 resistance factor for structural steel
N_COLUMN = 1.34      # cl. 13.3.1 exponent for hot-rolled / class C HSS


class SteelGrade(str, Enum):
    """Recognised steel grades (CSA G40.21 and ASTM A992)."""

    G300W = "300W"
    G350W = "350W"
    G345W = "345W"

    @property
    def Fy(self) -> float:
        return _GRADE_STRESSES[self][0]

    @property
    def Fu(self) -> float:
        return _GRADE_STRESSES[self][1]

    @property
    def label(self) -> str:
        return _GRADE_LABELS[self]

    @classmethod
    def parse(cls, value: "SteelGrade | str") -> "SteelGrade":
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        for grade in cls:
            if grade.value == key:
                return grade
        raise PreconditionError(
            f"Unknown steel grade {value!r}. Use one of: "
            f"{', '.join(g.value for g in cls)}"
        )


# (Fy, Fu) in MPa
_GRADE_STRESSES: dict[SteelGrade, tuple[float, float]] = {
    SteelGrade.G300W: (300.0, 450.0),
    SteelGrade.G350W: (350.0, 450.0),
    SteelGrade.G345W: (345.0, 450.0),
}

_GRADE_LABELS: dict[SteelGrade, str] = {
    SteelGrade.G300W: "CSA G40.21 300W",
    SteelGrade.G350W: "CSA G40.21 350W",
    SteelGrade.G345W: "ASTM A992",
}
