from __future__ import annotations

from typing import Sequence, Tuple

from beam_calc.domain.beam import BeamConfig
from beam_calc.domain.loads import Load, UniformLoad
from beam_calc.domain.results import ReactionResult
from beam_calc.engine.numeric import div, nan_max

MM_TO_M = 1e-3


def _simple_reactions(config: BeamConfig, loads: Sequence[Load]) -> Tuple[float, float]:
    """
    ΣM respecto a cada apoyo, carga por carga.
    Distribuida => puntual equivalente w·Lq en el centroide.
    """
    left = float(config.left_support_mm) * MM_TO_M
    right = float(config.right_support_mm) * MM_TO_M
    span = right - left

    R1 = 0.0
    R2 = 0.0
    for ld in loads:
        F = ld.total_n
        x = float(ld.centroid_mm) * MM_TO_M
        R1 += div(F * (right - x), span)
        R2 += div(F * (x - left), span)
    return R1, R2


def _simple_max_moment(config: BeamConfig, loads: Sequence[Load], R1: float) -> float:
    """
    M máximo muestreado SOLO en bordes de carga (no es un extremo global):
      - puntual en x:      R1·(x - left)
      - distribuida [x0,x1]:
          R1·(x0 - left) - w·Lq·(x0 - left + Lq/2)/2
          R1·(x1 - left) - w·Lq·(x1 - left - Lq/2)/2
    Se parte de 0 (momentos negativos no cuentan).
    """
    left = float(config.left_support_mm) * MM_TO_M
    M_max = 0.0
    for ld in loads:
        x0 = float(ld.start_mm) * MM_TO_M
        if isinstance(ld, UniformLoad):
            x1 = float(ld.x1_mm) * MM_TO_M
            Lq = x1 - x0
            w = float(ld.magnitude_n_per_m)
            M_start = R1 * (x0 - left) - (w * Lq * (x0 - left + Lq / 2.0) / 2.0)
            M_end = R1 * (x1 - left) - (w * Lq * (x1 - left - Lq / 2.0) / 2.0)
            M_max = nan_max(M_max, M_start, M_end)
        else:
            M_max = nan_max(M_max, R1 * (x0 - left))
    return M_max


def _cantilever(config: BeamConfig, loads: Sequence[Load]) -> Tuple[float, float]:
    """Empotramiento en x=L: R1 = Σ cargas; M = máx. momento individual en el empotramiento."""
    L = config.length_m
    R1 = 0.0
    M_max = 0.0
    for ld in loads:
        F = ld.total_n
        R1 += F
        M_max = nan_max(M_max, F * (L - float(ld.centroid_mm) * MM_TO_M))
    return R1, M_max


def solve_reactions(config: BeamConfig, loads: Sequence[Load]) -> ReactionResult:
    """
    Reacciones y extremos (N, N·m). Posiciones de entrada en mm.

    Sin validación: apoyos coincidentes o luces nulas dan inf/nan.
    """
    if config.is_cantilever:
        R1, M_max = _cantilever(config, loads)
        R2 = 0.0
    else:
        R1, R2 = _simple_reactions(config, loads)
        M_max = _simple_max_moment(config, loads, R1)

    return ReactionResult(
        r1=R1,
        r2=R2,
        max_shear=nan_max(abs(R1), abs(R2)),
        max_moment=M_max,
    )
