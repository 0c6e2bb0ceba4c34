from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from beam_calc.engine.numeric import div

MM_TO_M = 1e-3


@dataclass(frozen=True)
class SectionProperties:
    area_m2: float
    moment_of_inertia_m4: float
    section_modulus_m3: float


def _rect_I(b: float, h: float) -> float:
    """I de un rectángulo b x h respecto a su eje centroidal horizontal."""
    return (b * h**3) / 12.0


@dataclass(frozen=True)
class Rectangular:
    width_mm: float
    height_mm: float

    @property
    def name(self) -> str:
        return "Rectangular"

    def props(self) -> SectionProperties:
        w = float(self.width_mm) * MM_TO_M
        h = float(self.height_mm) * MM_TO_M
        area = w * h
        inertia = _rect_I(w, h)
        return SectionProperties(area, inertia, div(inertia, h / 2.0))


@dataclass(frozen=True)
class IBeam:
    """
    Doble T simétrica: 2 alas (bf x tf) + alma (tw x (h - 2tf)).

    El término propio del ala usa bf*tf³/6 (no /12); CChannel usa /12.
    """
    flange_width_mm: float
    flange_thickness_mm: float
    web_thickness_mm: float
    height_mm: float

    @property
    def name(self) -> str:
        return "I Beam"

    def props(self) -> SectionProperties:
        bf = float(self.flange_width_mm) * MM_TO_M
        tf = float(self.flange_thickness_mm) * MM_TO_M
        tw = float(self.web_thickness_mm) * MM_TO_M
        h = float(self.height_mm) * MM_TO_M

        area = _flanged_area(bf, tf, tw, h)
        I_flange = (bf * tf**3) / 6.0 + 2.0 * bf * tf * ((h - tf) / 2.0) ** 2
        I_web = _rect_I(tw, h - 2.0 * tf)
        inertia = 2.0 * I_flange + I_web
        return SectionProperties(area, inertia, div(inertia, h / 2.0))


@dataclass(frozen=True)
class CChannel:
    """Canal C: mismas cotas que la doble T, ala con bf*tf³/12 + Steiner."""
    flange_width_mm: float
    flange_thickness_mm: float
    web_thickness_mm: float
    height_mm: float

    @property
    def name(self) -> str:
        return "C Channel"

    def props(self) -> SectionProperties:
        bf = float(self.flange_width_mm) * MM_TO_M
        tf = float(self.flange_thickness_mm) * MM_TO_M
        tw = float(self.web_thickness_mm) * MM_TO_M
        h = float(self.height_mm) * MM_TO_M

        area = _flanged_area(bf, tf, tw, h)
        I_flange = _rect_I(bf, tf) + bf * tf * ((h - tf) / 2.0) ** 2
        I_web = _rect_I(tw, h - 2.0 * tf)
        inertia = 2.0 * I_flange + I_web
        return SectionProperties(area, inertia, div(inertia, h / 2.0))


@dataclass(frozen=True)
class Circular:
    diameter_mm: float

    @property
    def name(self) -> str:
        return "Circular"

    def props(self) -> SectionProperties:
        d = float(self.diameter_mm) * MM_TO_M
        area = math.pi * d**2 / 4.0
        inertia = math.pi * d**4 / 64.0
        return SectionProperties(area, inertia, div(inertia, d / 2.0))


CrossSection = Union[Rectangular, IBeam, CChannel, Circular]


def _flanged_area(bf: float, tf: float, tw: float, h: float) -> float:
    return 2.0 * bf * tf + (h - 2.0 * tf) * tw


def section_properties(shape: CrossSection) -> SectionProperties:
    """Área [m²], I [m⁴] y Z [m³] de la sección (cotas de entrada en mm)."""
    return shape.props()
