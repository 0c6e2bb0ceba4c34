from __future__ import annotations

from typing import List, Optional, Set, Tuple

import numpy as np

from beam_calc.domain.results import Curve
from beam_calc.view.style import RenderStyle


# -------------------------
# Helpers formato
# -------------------------
def _fmt_plain(v: float, decimals: int = 2) -> str:
    """Formato fijo (sin notación científica) y recorte de ceros."""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _clamp(v: float, lo: float, hi: float) -> float:
    return float(min(max(v, lo), hi))


def _finite(y: np.ndarray) -> np.ndarray:
    return y[np.isfinite(y)]


def _y_limits(y: np.ndarray, y_zoom: float) -> Tuple[float, float]:
    fin = _finite(y)
    ymax = float(np.max(np.abs(fin))) if fin.size else 1.0
    ymax = max(ymax, 1.0)
    pad = 1.15
    return -ymax * y_zoom * pad, ymax * y_zoom * pad


# -------------------------
# Extremos (global máx/mín, con filtro de amplitud)
# -------------------------
def _extrema_indices(x: np.ndarray, y: np.ndarray) -> List[Tuple[str, int]]:
    """
    Máximo y mínimo global de la curva, descartando valores ~0
    (no se etiqueta la línea base).
    """
    fin = np.isfinite(y)
    if not np.any(fin):
        return []

    yy = np.where(fin, y, 0.0)
    max_abs = max(float(np.max(np.abs(yy))), 1.0)
    y_abs_min = 0.01 * max_abs

    out: List[Tuple[str, int]] = []
    seen: Set[int] = set()
    for kind, i in (("max", int(np.argmax(yy))), ("min", int(np.argmin(yy)))):
        if i in seen or abs(float(yy[i])) < y_abs_min:
            continue
        seen.add(i)
        out.append((kind, i))

    out.sort(key=lambda ki: float(x[ki[1]]))
    return out


def _annotate_extrema(ax, x: np.ndarray, y: np.ndarray, unit: str, style: RenderStyle):
    """
    Marca máximo/mínimo y anota el valor.
    - Máximo: label arriba
    - Mínimo: label abajo
    - Reubica labels dentro del recuadro
    """
    picked = _extrema_indices(x, y)
    if not picked:
        return

    x_min, x_max = ax.get_xlim()
    y_min, y_max = ax.get_ylim()
    mx = 0.03 * max(1.0, float(x_max - x_min))
    my = 0.03 * max(1.0, float(y_max - y_min))

    for kind, i in picked:
        xi = float(x[i])
        yi = float(y[i])

        ax.scatter([xi], [yi], s=18, zorder=6)

        if kind == "max":
            tx, ty, va = xi, yi + my, "bottom"
        else:
            tx, ty, va = xi, yi - my, "top"

        tx = _clamp(tx, x_min + mx, x_max - mx)
        ty = _clamp(ty, y_min + my, y_max - my)

        ax.text(
            tx, ty,
            f"{_fmt_plain(yi, 2)} {unit}",
            ha="center", va=va, fontsize=style.font_size - 1, zorder=7,
        )


# -------------------------
# Render
# -------------------------
def _render_curve(ax, curve: Curve, *, color: str, ylabel: str, title: str, unit: str,
                  y_zoom: float, xlim: Optional[Tuple[float, float]], style: RenderStyle):
    ax.clear()
    x = np.asarray(curve.x_mm, dtype=float)
    y = np.asarray(curve.values, dtype=float)

    ax.plot(x, y, color=color, lw=style.curve_lw)
    ax.fill_between(x, y, 0.0, color=color, alpha=0.15)
    ax.axhline(0.0, linewidth=1.0, color="black")

    if xlim is None:
        x0 = float(x[0]) if x.size else 0.0
        x1 = float(x[-1]) if x.size else 1.0
        ax.set_xlim(x0, x1 if x1 > x0 else x0 + 1.0)
    else:
        ax.set_xlim(xlim[0], xlim[1])

    ax.set_ylim(*_y_limits(y, y_zoom))

    _annotate_extrema(ax, x, y, unit, style)

    ax.set_ylabel(ylabel)
    ax.set_xlabel("Position [mm]")
    ax.set_title(title)
    ax.grid(True, alpha=0.25, linestyle="--")


def render_shear(ax, curve: Curve, y_zoom: float = 1.0, xlim: Optional[Tuple[float, float]] = None,
                 style: Optional[RenderStyle] = None):
    style = style or RenderStyle()
    _render_curve(
        ax, curve,
        color=style.shear_color, ylabel="Shear Force [N]", title="Shear Force Diagram",
        unit="N", y_zoom=y_zoom, xlim=xlim, style=style,
    )


def render_moment(ax, curve: Curve, y_zoom: float = 1.0, xlim: Optional[Tuple[float, float]] = None,
                  style: Optional[RenderStyle] = None):
    style = style or RenderStyle()
    _render_curve(
        ax, curve,
        color=style.moment_color, ylabel="Bending Moment [N·m]", title="Bending Moment Diagram",
        unit="N·m", y_zoom=y_zoom, xlim=xlim, style=style,
    )
