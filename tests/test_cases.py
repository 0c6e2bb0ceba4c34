import dataclasses

import pytest

from beam_calc.domain.beam import BeamType, cantilever
from beam_calc.domain.cases import MAX_LOADS, BeamCase
from beam_calc.domain.loads import PointLoad, UniformLoad, describe_load
from beam_calc.materials.material_db import A992
from beam_calc.sections.shapes import Circular


def test_default_case():
    case = BeamCase.default()
    assert case.config.beam_type == BeamType.SIMPLE
    assert case.config.length_mm == 1000.0
    assert case.config.right_support_mm == 1000.0
    assert case.loads == (PointLoad(magnitude_n=1000.0, x_mm=500.0),)
    assert case.material.name == "ASTM A36 Structural Steel"


def test_add_load_defaults_to_midspan_point_load():
    case = BeamCase.default().with_config(cantilever(3000)).with_load_added()
    assert len(case.loads) == 2
    assert case.loads[-1] == PointLoad(magnitude_n=1000.0, x_mm=1500.0)


def test_at_most_three_loads():
    case = BeamCase.default()
    for _ in range(MAX_LOADS - 1):
        case = case.with_load_added()
    assert len(case.loads) == MAX_LOADS
    with pytest.raises(ValueError):
        case.with_load_added()


def test_cannot_remove_last_load():
    with pytest.raises(ValueError):
        BeamCase.default().with_load_removed(0)


def test_remove_and_replace_keep_order():
    udl = UniformLoad(magnitude_n_per_m=500, x0_mm=0, x1_mm=400)
    case = BeamCase.default().with_load_added(udl).with_load_added(PointLoad(200, 900))
    case = case.with_load_removed(0)
    assert case.loads[0] == udl

    case = case.with_load_replaced(1, PointLoad(300, 100))
    assert case.loads == (udl, PointLoad(300, 100))

    with pytest.raises(IndexError):
        case.with_load_replaced(5, udl)


def test_cases_are_immutable_values():
    base = BeamCase.default()
    changed = base.with_section(Circular(diameter_mm=50)).with_material(A992)
    assert base.section != changed.section
    assert base.material.name != changed.material.name
    with pytest.raises(dataclasses.FrozenInstanceError):
        base.loads = ()


def test_load_helpers():
    udl = UniformLoad(magnitude_n_per_m=1000, x0_mm=200, x1_mm=600)
    assert udl.kind == "uniform"
    assert udl.total_n == pytest.approx(400.0)
    assert udl.centroid_mm == pytest.approx(400.0)
    p = PointLoad(magnitude_n=10, x_mm=5)
    assert p.kind == "point"
    assert p.end_mm is None


def test_describe_load():
    assert describe_load(PointLoad(magnitude_n=1500, x_mm=250.5)) == "Point Load: P=1500 N @ x=250.5 mm"
    udl = UniformLoad(magnitude_n_per_m=-300, x0_mm=100, x1_mm=900)
    assert describe_load(udl) == "Uniform Load: w=-300 N/m [100, 900] mm"
