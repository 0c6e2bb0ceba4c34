from __future__ import annotations

import logging
from typing import Sequence

from beam_calc.domain.beam import BeamConfig
from beam_calc.domain.cases import BeamCase
from beam_calc.domain.loads import Load, describe_load
from beam_calc.domain.results import AnalysisResult
from beam_calc.engine.reactions import solve_reactions
from beam_calc.engine.stress import evaluate_stress
from beam_calc.materials.material_db import Material
from beam_calc.sections.shapes import CrossSection, section_properties

logger = logging.getLogger(__name__)

GRAVITY = 9.81  # m/s²


def analyze(
    config: BeamConfig,
    loads: Sequence[Load],
    section: CrossSection,
    material: Material,
    gravity: float = GRAVITY,
) -> AnalysisResult:
    """
    Corrida completa: reacciones -> propiedades de sección -> tensiones -> peso propio.

    Función pura: se recalcula todo en cada cambio de entrada.
    """
    reactions = solve_reactions(config, loads)
    props = section_properties(section)
    stress = evaluate_stress(
        max_moment=reactions.max_moment,
        max_shear=reactions.max_shear,
        section_modulus=props.section_modulus_m3,
        area=props.area_m2,
        yield_strength_mpa=float(material.yield_strength_mpa),
    )

    L = config.length_m
    weight = props.area_m2 * L * float(material.density_kg_m3) * float(gravity)

    logger.debug(
        "analyze: %s L=%g mm, %d carga(s), R1=%g N, R2=%g N, Mmax=%g N·m, FS=%g",
        config.beam_type.value, config.length_mm, len(loads),
        reactions.r1, reactions.r2, reactions.max_moment, stress.safety_factor,
    )
    for k, ld in enumerate(loads, start=1):
        logger.debug("  carga %d: %s", k, describe_load(ld))

    return AnalysisResult(
        max_shear_force=reactions.max_shear,
        max_bending_moment=reactions.max_moment,
        max_normal_stress=stress.normal_stress_mpa,
        max_shear_stress=stress.shear_stress_mpa,
        safety_factor=stress.safety_factor,
        center_of_gravity=L / 2.0,
        moment_of_inertia=props.moment_of_inertia_m4,
        section_modulus=props.section_modulus_m3,
        beam_weight=weight,
        r1=reactions.r1,
        r2=reactions.r2,
        area=props.area_m2,
    )


def analyze_case(case: BeamCase, gravity: float = GRAVITY) -> AnalysisResult:
    return analyze(case.config, case.loads, case.section, case.material, gravity=gravity)
