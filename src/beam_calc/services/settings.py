from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

ENV_PREFIX = "BEAM_CALC_"

_TRUE = {"1", "true", "yes", "on", "si", "sí"}


@dataclass(frozen=True)
class Settings:
    """
    Parámetros de la aplicación (no del caso de cálculo).

    Cada campo se puede pisar con una variable de entorno BEAM_CALC_<CAMPO>,
    p. ej. BEAM_CALC_N_SAMPLES=200 o BEAM_CALC_LOG_DIR=/tmp/logs.
    """
    n_samples: int = 100
    gravity: float = 9.81
    superpose_cantilever: bool = True

    log_dir: str = "logs"
    log_name: str = "beam_calc.log"
    log_level: str = "INFO"

    report_name: str = "beam_analysis_report.pdf"
    chart_dpi: int = 150

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        kwargs = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None or raw.strip() == "":
                continue
            kwargs[f.name] = _coerce(f.name, raw.strip(), getattr(cls, f.name))
        return cls(**kwargs)


def _coerce(name: str, raw: str, default):
    if isinstance(default, bool):
        return raw.lower() in _TRUE
    try:
        if isinstance(default, int):
            return int(raw)
        if isinstance(default, float):
            return float(raw.replace(",", "."))
    except ValueError as exc:
        raise ValueError(f"Invalid value for {ENV_PREFIX}{name.upper()}: {raw!r}") from exc
    return raw
