from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class RenderStyle:
    beam_lw: float = 4.0

    arrow_lw: float = 1.5
    arrow_scale: float = 12.0
    load_color: str = "red"

    dist_arrows: int = 5
    dist_rect_alpha: float = 0.12

    support_size_pctL: float = 3.0
    support_lw: float = 1.5

    # Alturas relativas a L
    arrow_height_pctL: float = 12.0
    dist_height_pctL: float = 8.0

    shear_color: str = "#8884d8"
    moment_color: str = "#82ca9d"
    curve_lw: float = 1.6

    font_size: int = 9
