import pytest

from beam_calc.materials.material_db import (
    A36,
    CUSTOM,
    STANDARD_MATERIALS,
    MaterialDB,
    custom_material,
)


def test_standard_presets():
    assert set(STANDARD_MATERIALS) == {
        "ASTM A36 Structural Steel",
        "ASTM A992 Structural Steel",
        "ASTM A572 Grade 50 Steel",
    }
    assert A36.yield_strength_mpa == 250.0
    assert STANDARD_MATERIALS["ASTM A992 Structural Steel"].yield_strength_mpa == 345.0
    for m in STANDARD_MATERIALS.values():
        assert m.elastic_modulus_gpa == 200.0
        assert m.density_kg_m3 == 7850.0
        assert m.poissons_ratio == 0.3
        assert not m.custom


def test_custom_material():
    m = custom_material(300, 210, 7800)
    assert m.name == CUSTOM
    assert m.custom
    assert m.yield_strength_mpa == 300.0


def test_standard_db_lookup():
    db = MaterialDB.standard()
    assert len(db) == 3
    assert db.get(" ASTM A36 Structural Steel ") is A36
    assert db.get("nope") is None


def test_from_txt(tmp_path):
    p = tmp_path / "materials.txt"
    p.write_text(
        "name;yield_mpa;e_gpa;density;nu;alpha\n"
        "# comentario\n"
        "\n"
        "Aluminio 6061-T6;276;68,9;2700;0,33;23.6\n"
        "Madera;40;12;600\n"
        "Sin datos;;;\n",
        encoding="utf-8",
    )
    db = MaterialDB.from_txt(p)
    assert db.names() == ["Aluminio 6061-T6", "Madera"]

    al = db.get("Aluminio 6061-T6")
    assert al.elastic_modulus_gpa == pytest.approx(68.9)
    assert al.poissons_ratio == pytest.approx(0.33)
    assert al.thermal_expansion == pytest.approx(23.6)

    wood = db.get("Madera")
    assert wood.poissons_ratio == 0.0


def test_from_txt_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        MaterialDB.from_txt(tmp_path / "missing.txt")


def test_from_txt_without_valid_rows(tmp_path):
    p = tmp_path / "bad.txt"
    p.write_text("# solo comentarios\n", encoding="utf-8")
    with pytest.raises(ValueError):
        MaterialDB.from_txt(p)

    p.write_text("name;yield_mpa\nX;abc\n", encoding="utf-8")
    with pytest.raises(ValueError):
        MaterialDB.from_txt(p)
