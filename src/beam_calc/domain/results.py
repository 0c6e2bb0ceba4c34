from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np


@dataclass(frozen=True)
class ReactionResult:
    r1: float          # N (apoyo izquierdo / empotramiento)
    r2: float          # N (apoyo derecho; 0 en voladizo)
    max_shear: float   # N
    max_moment: float  # N·m


@dataclass(frozen=True)
class StressResult:
    normal_stress_mpa: float
    shear_stress_mpa: float
    safety_factor: float


@dataclass(frozen=True)
class AnalysisResult:
    max_shear_force: float      # N
    max_bending_moment: float   # N·m
    max_normal_stress: float    # MPa
    max_shear_stress: float     # MPa
    safety_factor: float
    center_of_gravity: float    # m
    moment_of_inertia: float    # m⁴
    section_modulus: float      # m³
    beam_weight: float          # N

    r1: float = 0.0
    r2: float = 0.0
    area: float = 0.0           # m²

    def display_values(self) -> Dict[str, float]:
        """Valores redondeados solo para mostrar (el resultado guarda precisión completa)."""
        return {
            "max_shear_force": round(self.max_shear_force, 2),
            "max_bending_moment": round(self.max_bending_moment, 2),
            "max_normal_stress": round(self.max_normal_stress, 2),
            "max_shear_stress": round(self.max_shear_stress, 2),
            "safety_factor": round(self.safety_factor, 2),
            "center_of_gravity": round(self.center_of_gravity, 3),
            "moment_of_inertia": round(self.moment_of_inertia, 6),
            "section_modulus": round(self.section_modulus, 6),
            "beam_weight": round(self.beam_weight, 2),
        }


@dataclass(frozen=True)
class Curve:
    """Curva muestreada: x en mm, valores en N (corte) o N·m (momento)."""
    x_mm: np.ndarray
    values: np.ndarray

    def __len__(self) -> int:
        return int(self.x_mm.size)

    def points(self) -> List[Tuple[float, float]]:
        return [(float(x), float(v)) for x, v in zip(self.x_mm, self.values)]

    def max_abs(self) -> float:
        if not self.values.size:
            return 0.0
        return float(np.max(np.abs(self.values)))
