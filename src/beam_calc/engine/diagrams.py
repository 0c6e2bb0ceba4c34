from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from beam_calc.domain.beam import BeamConfig
from beam_calc.domain.loads import Load, PointLoad, UniformLoad
from beam_calc.domain.results import Curve, ReactionResult
from beam_calc.engine.reactions import solve_reactions

MM_TO_M = 1e-3
DEFAULT_SAMPLES = 100


def _split_loads(loads: Sequence[Load]):
    """Arrays (m, N, N/m) por tipo de carga."""
    points: List[PointLoad] = [ld for ld in loads if isinstance(ld, PointLoad)]
    dists: List[UniformLoad] = [ld for ld in loads if isinstance(ld, UniformLoad)]

    pf_x = np.array([float(p.x_mm) * MM_TO_M for p in points], dtype=float)
    pf_P = np.array([float(p.magnitude_n) for p in points], dtype=float)

    dl_a = np.array([float(d.x0_mm) * MM_TO_M for d in dists], dtype=float)
    dl_b = np.array([float(d.x1_mm) * MM_TO_M for d in dists], dtype=float)
    dl_w = np.array([float(d.magnitude_n_per_m) for d in dists], dtype=float)
    return pf_x, pf_P, dl_a, dl_b, dl_w


# -------------------------
# Viga simple: superposición con funciones escalón
# -------------------------
def _simple_V_M(
    x: np.ndarray, config: BeamConfig, loads: Sequence[Load], R1: float, R2: float
) -> Tuple[np.ndarray, np.ndarray]:
    left = float(config.left_support_mm) * MM_TO_M
    right = float(config.right_support_mm) * MM_TO_M

    # reacciones (+ arriba): entran al pasar su apoyo
    H1 = (x >= left).astype(float)
    H2 = (x >= right).astype(float)
    V = R1 * H1 + R2 * H2
    M = R1 * (x - left) * H1 + R2 * (x - right) * H2

    pf_x, pf_P, dl_a, dl_b, dl_w = _split_loads(loads)

    # puntuales: V -= P·H(x-a), M -= P·(x-a)·H(x-a)
    if pf_x.size:
        dx = x[:, None] - pf_x[None, :]
        V -= ((dx >= 0.0).astype(float)) @ pf_P
        M -= np.sum(pf_P[None, :] * dx * (dx > 0.0), axis=1)

    # distribuidas: tramo cargado l = clip(x-a, 0, b-a), resultante en a + l/2
    if dl_a.size:
        a = dl_a[None, :]
        b = dl_b[None, :]
        w = dl_w[None, :]
        lx = np.clip(x[:, None] - a, 0.0, b - a)
        V -= np.sum(w * lx, axis=1)
        M -= np.sum(w * lx * (x[:, None] - (a + 0.5 * lx)), axis=1)

    return V, M


# -------------------------
# Voladizo: cuerpo libre de cada carga por separado
# -------------------------
def _cantilever_load_V_M(x: np.ndarray, L: float, ld: Load) -> Tuple[np.ndarray, np.ndarray]:
    V = np.zeros_like(x, dtype=float)
    M = np.zeros_like(x, dtype=float)

    if isinstance(ld, UniformLoad):
        a = float(ld.x0_mm) * MM_TO_M
        b = float(ld.x1_mm) * MM_TO_M
        w = float(ld.magnitude_n_per_m)
        Lq = b - a

        before = x <= a
        V[before] = -w * Lq
        M[before] = -w * Lq * (L - 0.5 * (a + b))

        inside = (x > a) & (x < b)
        r = b - x[inside]
        V[inside] = -w * r
        M[inside] = -w * r * r / 2.0
    else:
        a = float(ld.x_mm) * MM_TO_M
        P = float(ld.magnitude_n)
        before = x <= a
        V[before] = -P
        M[before] = -P * (L - a)

    return V, M


def _cantilever_V_M(
    x: np.ndarray, config: BeamConfig, loads: Sequence[Load], superpose: bool
) -> Tuple[np.ndarray, np.ndarray]:
    """
    superpose=True: suma de las curvas de cada carga.
    superpose=False: cada carga pisa a las anteriores (queda la última).
    """
    L = config.length_m
    V = np.zeros_like(x, dtype=float)
    M = np.zeros_like(x, dtype=float)
    for ld in loads:
        Vi, Mi = _cantilever_load_V_M(x, L, ld)
        if superpose:
            V += Vi
            M += Mi
        else:
            V, M = Vi, Mi
    return V, M


def sample_curves(
    config: BeamConfig,
    loads: Sequence[Load],
    reactions: Optional[ReactionResult] = None,
    n: int = DEFAULT_SAMPLES,
    superpose: bool = True,
) -> Tuple[Curve, Curve]:
    """
    Curvas V(x) [N] y M(x) [N·m] en n puntos equiespaciados sobre [0, L] (x en mm).

    Si no se pasan reacciones se calculan con solve_reactions.
    """
    if reactions is None:
        reactions = solve_reactions(config, loads)

    x_mm = np.linspace(0.0, float(config.length_mm), int(n), dtype=float)
    x = x_mm * MM_TO_M

    with np.errstate(invalid="ignore", over="ignore"):
        if config.is_cantilever:
            V, M = _cantilever_V_M(x, config, loads, superpose)
        else:
            V, M = _simple_V_M(x, config, loads, float(reactions.r1), float(reactions.r2))

    # curvas de solo lectura
    x_mm_m = x_mm.copy()
    for arr in (x_mm, x_mm_m, V, M):
        arr.setflags(write=False)
    return Curve(x_mm=x_mm, values=V), Curve(x_mm=x_mm_m, values=M)
