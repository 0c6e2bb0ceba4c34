import math

import pytest

from beam_calc.sections.shapes import CChannel, Circular, IBeam, Rectangular, section_properties


def test_rectangular_properties():
    p = section_properties(Rectangular(width_mm=100, height_mm=200))
    assert p.area_m2 == pytest.approx(0.02)
    assert p.moment_of_inertia_m4 == pytest.approx(0.1 * 0.2**3 / 12, abs=1e-9)
    assert p.moment_of_inertia_m4 == pytest.approx(6.667e-5, abs=1e-6)
    assert p.section_modulus_m3 == pytest.approx(6.667e-4, rel=1e-3)


def test_circular_properties():
    p = section_properties(Circular(diameter_mm=100))
    assert p.area_m2 == pytest.approx(math.pi * 0.05**2)
    assert p.area_m2 == pytest.approx(0.007854, rel=1e-4)
    assert p.moment_of_inertia_m4 == pytest.approx(4.909e-6, rel=1e-3)
    assert p.section_modulus_m3 == pytest.approx(p.moment_of_inertia_m4 / 0.05)


def test_ibeam_properties_match_flange_formula():
    bf, tf, tw, h = 0.1, 0.01, 0.006, 0.2
    p = section_properties(IBeam(flange_width_mm=100, flange_thickness_mm=10, web_thickness_mm=6, height_mm=200))

    I_flange = bf * tf**3 / 6 + 2 * bf * tf * ((h - tf) / 2) ** 2
    I_web = tw * (h - 2 * tf) ** 3 / 12
    assert p.area_m2 == pytest.approx(2 * bf * tf + (h - 2 * tf) * tw)
    assert p.area_m2 == pytest.approx(0.00308)
    assert p.moment_of_inertia_m4 == pytest.approx(2 * I_flange + I_web)
    assert p.moment_of_inertia_m4 == pytest.approx(3.904933e-5, rel=1e-5)
    assert p.section_modulus_m3 == pytest.approx(p.moment_of_inertia_m4 / 0.1)


def test_channel_uses_single_steiner_term():
    bf, tf, tw, h = 0.1, 0.01, 0.006, 0.2
    dims = dict(flange_width_mm=100, flange_thickness_mm=10, web_thickness_mm=6, height_mm=200)
    c = section_properties(CChannel(**dims))
    i = section_properties(IBeam(**dims))

    I_flange = bf * tf**3 / 12 + bf * tf * ((h - tf) / 2) ** 2
    I_web = tw * (h - 2 * tf) ** 3 / 12
    assert c.area_m2 == pytest.approx(i.area_m2)
    assert c.moment_of_inertia_m4 == pytest.approx(2 * I_flange + I_web)
    assert c.moment_of_inertia_m4 < i.moment_of_inertia_m4


def test_shape_props_method_matches_function():
    shape = Rectangular(width_mm=50, height_mm=80)
    assert shape.props() == section_properties(shape)


def test_zero_height_propagates_nan_modulus():
    p = section_properties(Rectangular(width_mm=100, height_mm=0))
    assert p.area_m2 == 0.0
    assert math.isnan(p.section_modulus_m3)
