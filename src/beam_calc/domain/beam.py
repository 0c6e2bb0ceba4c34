from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BeamType(str, Enum):
    SIMPLE = "simple"
    CANTILEVER = "cantilever"


@dataclass(frozen=True)
class BeamConfig:
    """
    Geometría de la viga (todo en mm).

    - SIMPLE: dos apoyos en left_support_mm / right_support_mm (0 <= left < right <= L).
    - CANTILEVER: libre en x=0, empotrada en x=L (brazo de palanca L - x).
      Los apoyos se ignoran.

    No se valida acá: ver engine.validate.
    """
    beam_type: BeamType
    length_mm: float
    left_support_mm: float = 0.0
    right_support_mm: float = 0.0

    @property
    def is_cantilever(self) -> bool:
        return self.beam_type == BeamType.CANTILEVER

    @property
    def length_m(self) -> float:
        return float(self.length_mm) / 1000.0


def simple(length_mm: float, left_support_mm: float = 0.0, right_support_mm: float | None = None) -> BeamConfig:
    """Viga simplemente apoyada; por defecto apoyos en los extremos."""
    if right_support_mm is None:
        right_support_mm = length_mm
    return BeamConfig(
        beam_type=BeamType.SIMPLE,
        length_mm=float(length_mm),
        left_support_mm=float(left_support_mm),
        right_support_mm=float(right_support_mm),
    )


def cantilever(length_mm: float) -> BeamConfig:
    return BeamConfig(beam_type=BeamType.CANTILEVER, length_mm=float(length_mm))
