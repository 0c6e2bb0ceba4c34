from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

CUSTOM = "Custom"


@dataclass(frozen=True)
class Material:
    """
    Material para la verificación elástica.

      - yield_strength_mpa: fy [MPa]
      - elastic_modulus_gpa: E [GPa]
      - density_kg_m3: ρ [kg/m³] (peso propio)
      - poissons_ratio, thermal_expansion [µm/m·°C]: solo informativos

    custom=True identifica el material ingresado a mano por el usuario.
    """
    name: str
    yield_strength_mpa: float
    elastic_modulus_gpa: float
    density_kg_m3: float
    poissons_ratio: float = 0.0
    thermal_expansion: float = 0.0
    custom: bool = False


A36 = Material("ASTM A36 Structural Steel", 250.0, 200.0, 7850.0, 0.3, 12.0)
A992 = Material("ASTM A992 Structural Steel", 345.0, 200.0, 7850.0, 0.3, 12.0)
A572_GR50 = Material("ASTM A572 Grade 50 Steel", 345.0, 200.0, 7850.0, 0.3, 12.0)

STANDARD_MATERIALS: Dict[str, Material] = {m.name: m for m in (A36, A992, A572_GR50)}


def custom_material(
    yield_strength_mpa: float,
    elastic_modulus_gpa: float,
    density_kg_m3: float,
    name: str = CUSTOM,
) -> Material:
    return Material(
        name=name,
        yield_strength_mpa=float(yield_strength_mpa),
        elastic_modulus_gpa=float(elastic_modulus_gpa),
        density_kg_m3=float(density_kg_m3),
        custom=True,
    )


class MaterialDB:
    def __init__(self, materials: List[Material]):
        self.materials: List[Material] = list(materials)
        self.by_name: Dict[str, Material] = {m.name.strip(): m for m in self.materials if m.name.strip()}

    def names(self) -> List[str]:
        return [m.name for m in self.materials]

    def get(self, name: str) -> Optional[Material]:
        return self.by_name.get((name or "").strip())

    def __len__(self) -> int:
        return len(self.materials)

    @classmethod
    def standard(cls) -> "MaterialDB":
        return cls(list(STANDARD_MATERIALS.values()))

    @classmethod
    def from_txt(cls, path: str | Path) -> "MaterialDB":
        """
        Tabla de texto separada por ';' (una fila por material):

            name;yield_mpa;e_gpa;density;nu;alpha

        - Header opcional (se detecta si la primera fila trae 'name').
        - Líneas vacías y comentarios (# o //) se ignoran.
        - nu y alpha son opcionales; coma decimal aceptada.
        - Filas sin fy, E o ρ numéricos se descartan.
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Material file not found: {p}")

        rows: List[List[str]] = []
        for ln in p.read_text(encoding="utf-8", errors="replace").splitlines():
            t = ln.strip()
            if not t or t.startswith("#") or t.startswith("//"):
                continue
            rows.append([c.strip() for c in t.split(";")])

        if not rows:
            raise ValueError(f"Material file is empty: {p}")

        if rows[0] and rows[0][0].lower() in {"name", "material", "id"}:
            rows = rows[1:]

        mats: List[Material] = []
        for r in rows:
            name = r[0] if r else ""
            if not name:
                continue
            fy = _try_float(_cell(r, 1))
            e = _try_float(_cell(r, 2))
            rho = _try_float(_cell(r, 3))
            if fy is None or e is None or rho is None:
                continue
            mats.append(Material(
                name=name,
                yield_strength_mpa=fy,
                elastic_modulus_gpa=e,
                density_kg_m3=rho,
                poissons_ratio=_try_float(_cell(r, 4)) or 0.0,
                thermal_expansion=_try_float(_cell(r, 5)) or 0.0,
            ))

        if not mats:
            raise ValueError(f"No valid materials in {p}: expected name;yield_mpa;e_gpa;density rows.")

        # orden estable para listas desplegables
        mats.sort(key=lambda m: m.name.upper())
        return cls(mats)


def _cell(row: List[str], i: int) -> str:
    return row[i] if i < len(row) else ""


def _try_float(s: str) -> Optional[float]:
    t = (s or "").strip().replace(",", ".")
    if t == "":
        return None
    try:
        return float(t)
    except ValueError:
        return None
