from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
from matplotlib.patches import Polygon, Rectangle

from beam_calc.domain.beam import BeamConfig
from beam_calc.domain.loads import Load, UniformLoad
from beam_calc.view.style import RenderStyle


# -------------------------
# Helpers
# -------------------------
def _draw_arrow(ax, x: float, y0: float, y1: float, style: RenderStyle):
    ax.annotate(
        "",
        xy=(x, y1),
        xytext=(x, y0),
        arrowprops=dict(
            arrowstyle="-|>",
            lw=style.arrow_lw,
            mutation_scale=style.arrow_scale,
            color=style.load_color,
            shrinkA=0,
            shrinkB=0,
        ),
    )


def _draw_pin(ax, x: float, size: float, style: RenderStyle):
    """Apoyo simple: triángulo bajo la viga."""
    tri = Polygon(
        [(x, 0.0), (x - size / 2.0, -size), (x + size / 2.0, -size)],
        closed=True,
        fill=False,
        edgecolor="black",
        linewidth=style.support_lw,
    )
    ax.add_patch(tri)


def _draw_fixed(ax, x: float, size: float, style: RenderStyle):
    """Empotramiento: placa vertical con rayado."""
    h = 1.5 * size
    ax.plot([x, x], [-h, h], color="black", linewidth=style.support_lw * 1.5)
    for yi in np.linspace(-h, h, 7):
        ax.plot([x, x + 0.5 * size], [yi, yi - 0.5 * size], color="black", linewidth=0.8)


# -------------------------
# Render
# -------------------------
def render_beam(
    ax,
    config: BeamConfig,
    loads: Sequence[Load],
    style: Optional[RenderStyle] = None,
):
    """
    Esquema de la viga: apoyos, cargas puntuales (flechas) y distribuidas
    (franja con flechas). Cargas positivas se dibujan hacia abajo.
    """
    style = style or RenderStyle()
    L = max(float(config.length_mm), 1.0)

    ax.clear()

    arrow_h = (style.arrow_height_pctL / 100.0) * L
    dist_h = (style.dist_height_pctL / 100.0) * L
    sup = (style.support_size_pctL / 100.0) * L

    # Viga
    ax.plot([0, L], [0, 0], linewidth=style.beam_lw, color="black", solid_capstyle="butt")

    # Apoyos
    if config.is_cantilever:
        _draw_fixed(ax, L, sup, style)
    else:
        _draw_pin(ax, float(config.left_support_mm), sup, style)
        _draw_pin(ax, float(config.right_support_mm), sup, style)

    for ld in loads:
        if isinstance(ld, UniformLoad):
            x1, x2 = float(ld.x0_mm), float(ld.x1_mm)
            w = float(ld.magnitude_n_per_m)
            sgn = 1.0 if w >= 0 else -1.0
            y_top = sgn * dist_h

            ax.add_patch(Rectangle(
                (x1, min(0.0, y_top)),
                x2 - x1,
                dist_h,
                facecolor=style.load_color,
                alpha=style.dist_rect_alpha,
                edgecolor=style.load_color,
                linewidth=0.9,
            ))
            for xi in np.linspace(x1, x2, max(2, int(style.dist_arrows))):
                _draw_arrow(ax, float(xi), y_top, 0.0, style)

            ax.text(
                (x1 + x2) / 2.0,
                y_top + sgn * 0.03 * L,
                f"{w:.2f} N/m",
                ha="center",
                va="bottom" if sgn > 0 else "top",
                fontsize=style.font_size,
                color=style.load_color,
            )
        else:
            x = float(ld.x_mm)
            P = float(ld.magnitude_n)
            sgn = 1.0 if P >= 0 else -1.0
            y0 = sgn * arrow_h
            _draw_arrow(ax, x, y0, 0.0, style)
            ax.text(
                x,
                y0 + sgn * 0.02 * L,
                f"{P:.2f} N",
                ha="center",
                va="bottom" if sgn > 0 else "top",
                fontsize=style.font_size,
                color=style.load_color,
            )

    # Cotas 0 y L
    ax.text(0.0, -2.2 * sup, "0", ha="center", va="top", fontsize=style.font_size)
    ax.text(L, -2.2 * sup, f"{L:g}", ha="center", va="top", fontsize=style.font_size)

    margin = 0.06 * L
    ax.set_xlim(-margin, L + margin)
    y_ext = max(arrow_h, dist_h) * 1.6
    ax.set_ylim(-y_ext, y_ext)
    ax.set_title(f"Beam Length: {L:g} mm")
    ax.set_axis_off()
