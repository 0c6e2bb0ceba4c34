import os

from matplotlib.figure import Figure

import beam_calc.services.chart_export as chart_export
from beam_calc.domain.beam import cantilever
from beam_calc.domain.cases import BeamCase
from beam_calc.domain.loads import PointLoad, UniformLoad
from beam_calc.engine.diagrams import sample_curves
from beam_calc.services.chart_export import CHART_FILES, export_charts
from beam_calc.services.settings import Settings
from beam_calc.view.renderer_beam import render_beam
from beam_calc.view.renderer_vm import render_moment, render_shear


def test_export_charts_creates_three_pngs(tmp_path):
    out = export_charts(BeamCase.default(), str(tmp_path), settings=Settings(chart_dpi=60))
    assert set(out) == set(CHART_FILES)
    for key, path in out.items():
        assert os.path.basename(path) == CHART_FILES[key]
        assert os.path.getsize(path) > 0


def test_export_charts_keeps_going_when_one_fails(tmp_path, monkeypatch):
    def boom(ax, curve, **kwargs):
        raise RuntimeError("render failed")

    monkeypatch.setattr(chart_export, "render_shear", boom)
    out = export_charts(BeamCase.default(), str(tmp_path), settings=Settings(chart_dpi=60))
    assert set(out) == {"beam", "moment"}
    assert not os.path.exists(tmp_path / CHART_FILES["shear"])


def test_renderers_on_cantilever():
    cfg = cantilever(2000)
    loads = [PointLoad(500, 0), UniformLoad(-200, 1000, 1800)]
    shear, moment = sample_curves(cfg, loads, n=50)

    fig = Figure()
    ax_beam, ax_v, ax_m = fig.subplots(3, 1)
    render_beam(ax_beam, cfg, loads)
    render_shear(ax_v, shear)
    render_moment(ax_m, moment, xlim=(0.0, 2000.0))

    assert ax_beam.get_title() == "Beam Length: 2000 mm"
    assert ax_v.get_title() == "Shear Force Diagram"
    assert ax_m.get_xlim() == (0.0, 2000.0)
    assert ax_m.get_ylabel() == "Bending Moment [N·m]"


def test_render_curve_with_nan_values():
    from beam_calc.domain.results import Curve

    fig = Figure()
    ax = fig.add_subplot(111)
    render_shear(ax, Curve(x_mm=(0.0, 1.0, 2.0), values=(float("nan"),) * 3))
    lo, hi = ax.get_ylim()
    assert lo < 0 < hi


def test_render_beam_without_color_warnings(recwarn):
    fig = Figure()
    ax = fig.add_subplot(111)
    render_beam(ax, BeamCase.default().config, [PointLoad(1000, 500), UniformLoad(300, 0, 400)])
    assert not [w for w in recwarn if "color" in str(w.message)]
