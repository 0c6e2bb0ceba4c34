from __future__ import annotations

import numpy as np


def div(a: float, b: float) -> float:
    """
    División con semántica IEEE: x/0 -> ±inf, 0/0 -> nan (sin excepción).

    El motor no valida geometría; los resultados degenerados se propagan
    tal cual hacia quien llama.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(a) / np.float64(b))


def nan_max(*values: float) -> float:
    """max() que propaga nan (el max() nativo lo descarta según el orden)."""
    return float(np.max(np.asarray(values, dtype=float)))
