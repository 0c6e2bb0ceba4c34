from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

POINT = "point"
UNIFORM = "uniform"


@dataclass(frozen=True)
class PointLoad:
    magnitude_n: float   # N (+ hacia abajo)
    x_mm: float

    @property
    def kind(self) -> str:
        return POINT

    @property
    def start_mm(self) -> float:
        return float(self.x_mm)

    @property
    def end_mm(self) -> Optional[float]:
        return None

    @property
    def total_n(self) -> float:
        return float(self.magnitude_n)

    @property
    def centroid_mm(self) -> float:
        return float(self.x_mm)


@dataclass(frozen=True)
class UniformLoad:
    magnitude_n_per_m: float   # N/m (+ hacia abajo)
    x0_mm: float
    x1_mm: float

    @property
    def kind(self) -> str:
        return UNIFORM

    @property
    def start_mm(self) -> float:
        return float(self.x0_mm)

    @property
    def end_mm(self) -> Optional[float]:
        return float(self.x1_mm)

    @property
    def span_m(self) -> float:
        return (float(self.x1_mm) - float(self.x0_mm)) / 1000.0

    @property
    def total_n(self) -> float:
        """Resultante w·Lq (N)."""
        return float(self.magnitude_n_per_m) * self.span_m

    @property
    def centroid_mm(self) -> float:
        return 0.5 * (float(self.x0_mm) + float(self.x1_mm))


Load = Union[PointLoad, UniformLoad]


def describe_load(load: Load) -> str:
    """Texto corto para tablas y logs."""
    if isinstance(load, UniformLoad):
        return (
            f"Uniform Load: w={load.magnitude_n_per_m:g} N/m "
            f"[{load.x0_mm:g}, {load.x1_mm:g}] mm"
        )
    return f"Point Load: P={load.magnitude_n:g} N @ x={load.x_mm:g} mm"
