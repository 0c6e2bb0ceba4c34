from __future__ import annotations

from typing import List

from beam_calc.domain.cases import MAX_LOADS, BeamCase
from beam_calc.domain.loads import UniformLoad
from beam_calc.sections.shapes import CChannel, Circular, IBeam, Rectangular

# El motor no valida nada: esto es para quien arma el caso (UI, scripts).


def _check_section(case: BeamCase) -> List[str]:
    s = case.section
    notes: List[str] = []
    if isinstance(s, Rectangular):
        dims = {"width": s.width_mm, "height": s.height_mm}
    elif isinstance(s, (IBeam, CChannel)):
        dims = {
            "flange width": s.flange_width_mm,
            "flange thickness": s.flange_thickness_mm,
            "web thickness": s.web_thickness_mm,
            "height": s.height_mm,
        }
    elif isinstance(s, Circular):
        dims = {"diameter": s.diameter_mm}
    else:
        return [f"Unknown cross-section type: {type(s).__name__}"]

    for name, v in dims.items():
        if not float(v) > 0:
            notes.append(f"{s.name}: {name} must be > 0 (got {v:g} mm).")

    if isinstance(s, (IBeam, CChannel)) and not s.height_mm > 2.0 * s.flange_thickness_mm:
        notes.append(
            f"{s.name}: height ({s.height_mm:g} mm) must exceed twice the flange thickness "
            f"({s.flange_thickness_mm:g} mm)."
        )
    return notes


def validate_case(case: BeamCase) -> List[str]:
    """
    Devuelve la lista de problemas del caso (vacía => válido).
    Mensajes en texto plano, listos para mostrar al usuario.
    """
    notes: List[str] = []
    cfg = case.config
    L = float(cfg.length_mm)

    if not L > 0:
        notes.append(f"Beam length must be > 0 (got {L:g} mm).")

    if not cfg.is_cantilever:
        left = float(cfg.left_support_mm)
        right = float(cfg.right_support_mm)
        if not (0.0 <= left < right <= L):
            notes.append(
                f"Supports must satisfy 0 <= left < right <= length "
                f"(left={left:g}, right={right:g}, length={L:g} mm)."
            )

    n = len(case.loads)
    if n < 1:
        notes.append("At least one load is required.")
    elif n > MAX_LOADS:
        notes.append(f"At most {MAX_LOADS} loads are allowed (got {n}).")

    for k, ld in enumerate(case.loads, start=1):
        x0 = float(ld.start_mm)
        if not (0.0 <= x0 <= L):
            notes.append(f"Load {k}: start position {x0:g} mm is outside the beam [0, {L:g}].")
        if isinstance(ld, UniformLoad):
            x1 = float(ld.x1_mm)
            if not (x0 < x1 <= L):
                notes.append(
                    f"Load {k}: end position {x1:g} mm must be > start ({x0:g} mm) and <= {L:g} mm."
                )

    notes.extend(_check_section(case))

    mat = case.material
    if not float(mat.yield_strength_mpa) > 0:
        notes.append(f"Material '{mat.name}': yield strength must be > 0.")
    if not float(mat.density_kg_m3) > 0:
        notes.append(f"Material '{mat.name}': density must be > 0.")

    return notes


def ensure_valid(case: BeamCase) -> BeamCase:
    """Igual que validate_case pero lanza ValueError si hay problemas."""
    notes = validate_case(case)
    if notes:
        raise ValueError("Invalid beam case:\n" + "\n".join(f"- {n}" for n in notes))
    return case
