from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from beam_calc.domain.beam import BeamConfig, simple
from beam_calc.domain.loads import Load, PointLoad
from beam_calc.materials.material_db import A36, Material
from beam_calc.sections.shapes import CrossSection, Rectangular

MAX_LOADS = 3


@dataclass(frozen=True)
class BeamCase:
    """
    Caso completo para el motor (reemplaza el estado global del formulario):
      - geometría y apoyos
      - cargas (1..3, en orden de carga)
      - sección transversal
      - material

    Inmutable: cada cambio devuelve un caso nuevo y se recalcula todo.
    """
    config: BeamConfig
    loads: Tuple[Load, ...]
    section: CrossSection
    material: Material

    @classmethod
    def default(cls) -> "BeamCase":
        """Caso inicial de la calculadora: 1000 mm, P=1000 N al centro, 100x200, A36."""
        return cls(
            config=simple(1000.0, 0.0, 1000.0),
            loads=(PointLoad(magnitude_n=1000.0, x_mm=500.0),),
            section=Rectangular(width_mm=100.0, height_mm=200.0),
            material=A36,
        )

    def with_load_added(self, load: Load | None = None) -> "BeamCase":
        """Agrega una carga (por defecto P=1000 N a mitad de luz). Máximo MAX_LOADS."""
        if len(self.loads) >= MAX_LOADS:
            raise ValueError(f"At most {MAX_LOADS} loads are allowed.")
        if load is None:
            load = PointLoad(magnitude_n=1000.0, x_mm=self.config.length_mm / 2.0)
        return replace(self, loads=self.loads + (load,))

    def with_load_removed(self, index: int) -> "BeamCase":
        if not 0 <= index < len(self.loads):
            raise IndexError(f"Load index out of range: {index}")
        if len(self.loads) <= 1:
            raise ValueError("At least one load is required.")
        return replace(self, loads=self.loads[:index] + self.loads[index + 1:])

    def with_load_replaced(self, index: int, load: Load) -> "BeamCase":
        if not 0 <= index < len(self.loads):
            raise IndexError(f"Load index out of range: {index}")
        loads = list(self.loads)
        loads[index] = load
        return replace(self, loads=tuple(loads))

    def with_config(self, config: BeamConfig) -> "BeamCase":
        return replace(self, config=config)

    def with_section(self, section: CrossSection) -> "BeamCase":
        return replace(self, section=section)

    def with_material(self, material: Material) -> "BeamCase":
        return replace(self, material=material)
