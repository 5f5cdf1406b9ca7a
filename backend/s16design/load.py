"""Design load derivation for simply supported beams.

Three ways of arriving at the factored Mf / Vf a beam search runs against:

- DIRECT: the caller supplies Mf and Vf.
- UDL:    factored (ULS) and service (SLS) line loads on a simple span.
- NBC:    specified D, L, S, W, E line loads combined per NBC 2020
          cl. 4.1.3.2; the governing ULS/SLS values feed the UDL path.

Line loads are in kN/m and spans in mm. Deflection uses the identity
1 kN/m = 1 N/mm so no conversion is needed against E in MPa.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import PreconditionError
from .material import E_STEEL


class BeamDesignMode(str, Enum):
    DIRECT = "direct"
    UDL = "udl"
    NBC = "nbc"


@dataclass(frozen=True)
class BeamLoads:
    Mf: float  # kNm
    Vf: float  # kN


@dataclass(frozen=True)
class DeflectionRequirement:
    required_ix: float           # mm⁴
    allowable_deflection: float  # mm
    span: float                  # mm
    w_sls: float                 # kN/m
    limit: float                 # L/limit


@dataclass(frozen=True)
class NBCLoads:
    """Specified (unfactored) line loads in kN/m."""

    D: float = 0.0  # dead
    L: float = 0.0  # live
    S: float = 0.0  # snow
    W: float = 0.0  # wind
    E: float = 0.0  # earthquake


@dataclass(frozen=True)
class LoadCombination:
    name: str
    value: float  # kN/m
    is_governing: bool = False


@dataclass(frozen=True)
class CombinationResult:
    uls: tuple[LoadCombination, ...]
    sls: tuple[LoadCombination, ...]

    @property
    def governing_uls(self) -> LoadCombination:
        return next(c for c in self.uls if c.is_governing)

    @property
    def governing_sls(self) -> LoadCombination:
        return next(c for c in self.sls if c.is_governing)

    @property
    def w_uls(self) -> float:
        return self.governing_uls.value

    @property
    def w_sls(self) -> float:
        return self.governing_sls.value


@dataclass(frozen=True)
class DesignLoads:
    mode: BeamDesignMode
    Mf: float  # kNm
    Vf: float  # kN
    deflection: DeflectionRequirement | None = None
    combinations: CombinationResult | None = None


# ── NBC 2020 cl. 4.1.3.2 ──────────────────────────────────────
# (name, {load: factor}); order matters for tie-breaking
_ULS_COMBINATIONS: tuple[tuple[str, dict[str, float]], ...] = (
    ("1.4D", {"D": 1.4}),
    ("1.25D + 1.5L", {"D": 1.25, "L": 1.5}),
    ("1.25D + 1.5S", {"D": 1.25, "S": 1.5}),
    ("1.25D + 1.4W", {"D": 1.25, "W": 1.4}),
    ("1.0D + 1.0E", {"D": 1.0, "E": 1.0}),
    ("1.25D + 1.5L + 0.5S", {"D": 1.25, "L": 1.5, "S": 0.5}),
    ("1.25D + 1.5S + 0.5L", {"D": 1.25, "S": 1.5, "L": 0.5}),
    ("1.25D + 1.4W + 0.5L", {"D": 1.25, "W": 1.4, "L": 0.5}),
    ("1.0D + 1.0E + 0.5L + 0.25S", {"D": 1.0, "E": 1.0, "L": 0.5, "S": 0.25}),
)

_SLS_COMBINATIONS: tuple[tuple[str, dict[str, float]], ...] = (
    ("1.0D + 1.0L", {"D": 1.0, "L": 1.0}),
    ("1.0D + 1.0S", {"D": 1.0, "S": 1.0}),
    ("1.0D + 1.0L + 0.5S", {"D": 1.0, "L": 1.0, "S": 0.5}),
    ("1.0D + 1.0S + 0.5L", {"D": 1.0, "S": 1.0, "L": 0.5}),
)


def _check_span(L: float) -> None:
    if L <= 0:
        raise PreconditionError(f"Span must be positive, got {L} mm")


def _check_limit(limit: float) -> None:
    if limit <= 0:
        raise PreconditionError(f"Deflection limit must be positive, got L/{limit}")


def derive_simply_supported_loads(w: float, L: float) -> BeamLoads:
    """Mf = wL²/8 and Vf = wL/2 for UDL ``w`` (kN/m) over span ``L`` (mm)."""
    _check_span(L)
    if w < 0:
        raise PreconditionError(f"Line load must be non-negative, got {w} kN/m")
    span_m = L / 1000.0
    return BeamLoads(Mf=w * span_m ** 2 / 8.0, Vf=w * span_m / 2.0)


def required_inertia_for_deflection(w_sls: float, L: float, limit: float) -> DeflectionRequirement:
    """Minimum Ix (mm⁴) keeping the midspan deflection within L/limit."""
    _check_span(L)
    _check_limit(limit)
    if w_sls < 0:
        raise PreconditionError(f"Service load must be non-negative, got {w_sls} kN/m")
    allowable = L / limit
    required_ix = 5.0 * w_sls * L ** 4 / (384.0 * E_STEEL * allowable)
    return DeflectionRequirement(
        required_ix=required_ix,
        allowable_deflection=allowable,
        span=L,
        w_sls=w_sls,
        limit=limit,
    )


def actual_deflection(w_sls: float, L: float, Ix: float) -> float:
    """Midspan deflection in mm, 5wL⁴/(384EI)."""
    _check_span(L)
    if Ix <= 0:
        raise PreconditionError(f"Ix must be positive, got {Ix} mm⁴")
    return 5.0 * w_sls * L ** 4 / (384.0 * E_STEEL * Ix)


def _evaluate(
    combos: tuple[tuple[str, dict[str, float]], ...], loads: NBCLoads, label: str
) -> tuple[LoadCombination, ...]:
    values = [
        (name, sum(factor * getattr(loads, key) for key, factor in factors.items()))
        for name, factors in combos
    ]
    valid = [(name, value) for name, value in values if value > 0]
    if not valid:
        raise PreconditionError(f"No {label} load combination is positive for {loads}")
    governing = 0
    for i, (_, value) in enumerate(valid):
        if value > valid[governing][1]:
            governing = i
    return tuple(
        LoadCombination(name=name, value=value, is_governing=(i == governing))
        for i, (name, value) in enumerate(valid)
    )


def derive_code_combinations(loads: NBCLoads) -> CombinationResult:
    """Evaluate the NBC ULS and SLS combinations, dropping non-positive ones."""
    return CombinationResult(
        uls=_evaluate(_ULS_COMBINATIONS, loads, "ULS"),
        sls=_evaluate(_SLS_COMBINATIONS, loads, "SLS"),
    )


def derive_design_loads(
    mode: BeamDesignMode | str,
    *,
    Mf: float | None = None,
    Vf: float | None = None,
    span: float | None = None,
    w_uls: float | None = None,
    w_sls: float | None = None,
    nbc: NBCLoads | None = None,
    deflection_limit: float = 360,
) -> DesignLoads:
    """Resolve any of the three beam design modes to Mf, Vf and deflection.

    In UDL mode the deflection requirement is only produced when ``w_sls``
    is given.
    """
    try:
        mode = BeamDesignMode(mode.strip().lower())
    except ValueError:
        raise PreconditionError(f"Unknown beam design mode {mode!r}") from None

    if mode is BeamDesignMode.DIRECT:
        if Mf is None or Vf is None:
            raise PreconditionError("Direct mode requires both Mf and Vf")
        if Mf < 0 or Vf < 0:
            raise PreconditionError(f"Mf and Vf must be non-negative (Mf={Mf}, Vf={Vf})")
        return DesignLoads(mode=mode, Mf=Mf, Vf=Vf)

    if span is None:
        raise PreconditionError(f"{mode.value.upper()} mode requires a span")

    combinations = None
    if mode is BeamDesignMode.NBC:
        if nbc is None:
            raise PreconditionError("NBC mode requires specified loads")
        combinations = derive_code_combinations(nbc)
        w_uls, w_sls = combinations.w_uls, combinations.w_sls
    elif w_uls is None:
        raise PreconditionError("UDL mode requires a factored line load")

    forces = derive_simply_supported_loads(w_uls, span)
    deflection = None
    if w_sls is not None:
        deflection = required_inertia_for_deflection(w_sls, span, deflection_limit)
    return DesignLoads(
        mode=mode,
        Mf=forces.Mf,
        Vf=forces.Vf,
        deflection=deflection,
        combinations=combinations,
    )
