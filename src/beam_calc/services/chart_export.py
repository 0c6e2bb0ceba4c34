from __future__ import annotations

import logging
import os
from typing import Callable, Dict, Optional

from matplotlib.figure import Figure

from beam_calc.domain.cases import BeamCase
from beam_calc.engine.diagrams import sample_curves
from beam_calc.services.settings import Settings
from beam_calc.view.renderer_beam import render_beam
from beam_calc.view.renderer_vm import render_moment, render_shear

logger = logging.getLogger(__name__)

CHART_FILES = {
    "beam": "beam.png",
    "shear": "shear.png",
    "moment": "moment.png",
}


def _save(draw: Callable[[object], None], path: str, *, size=(8.0, 3.2), dpi: int = 150) -> None:
    # Figure sin pyplot: no depende de un backend interactivo
    fig = Figure(figsize=size)
    ax = fig.add_subplot(111)
    draw(ax)
    fig.tight_layout()
    fig.savefig(path, dpi=dpi, facecolor="white")


def export_charts(
    case: BeamCase,
    out_dir: str,
    settings: Optional[Settings] = None,
) -> Dict[str, str]:
    """
    Genera beam.png, shear.png y moment.png en out_dir.

    Cada imagen es independiente: si una falla se registra en el log y se
    sigue con las demás. Devuelve {clave: path} solo de las generadas.
    """
    settings = settings or Settings.from_env()
    os.makedirs(out_dir, exist_ok=True)

    shear, moment = sample_curves(
        case.config,
        case.loads,
        n=settings.n_samples,
        superpose=settings.superpose_cantilever,
    )

    jobs = {
        "beam": lambda ax: render_beam(ax, case.config, case.loads),
        "shear": lambda ax: render_shear(ax, shear),
        "moment": lambda ax: render_moment(ax, moment),
    }

    out: Dict[str, str] = {}
    for key, draw in jobs.items():
        path = os.path.join(out_dir, CHART_FILES[key])
        try:
            _save(draw, path, dpi=settings.chart_dpi)
        except Exception:
            logger.exception("No se pudo generar el gráfico '%s' (%s)", key, path)
            continue
        logger.info("Gráfico '%s' guardado en %s", key, path)
        out[key] = path
    return out
