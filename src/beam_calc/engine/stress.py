from __future__ import annotations

from beam_calc.domain.results import StressResult
from beam_calc.engine.numeric import div

PA_PER_MPA = 1e6

# Corte parabólico (τmax = 1.5·V/A), aplicado igual a todas las formas.
SHEAR_SHAPE_FACTOR = 1.5


def evaluate_stress(
    *,
    max_moment: float,
    max_shear: float,
    section_modulus: float,
    area: float,
    yield_strength_mpa: float,
) -> StressResult:
    """
    σ = M / Z        [MPa]
    τ = 1.5 · V / A  [MPa]
    FS = fy / σ

    Unidades de entrada: N·m, N, m³, m², MPa.
    σ = 0 o fy = 0 => FS inf/nan (se propaga, no se corrige).
    """
    sigma = div(max_moment, section_modulus) / PA_PER_MPA
    tau = div(SHEAR_SHAPE_FACTOR * max_shear, area) / PA_PER_MPA
    fs = div(yield_strength_mpa, sigma)
    return StressResult(
        normal_stress_mpa=sigma,
        shear_stress_mpa=tau,
        safety_factor=fs,
    )
