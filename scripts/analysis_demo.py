from beam_calc.domain.beam import simple
from beam_calc.domain.loads import PointLoad, UniformLoad
from beam_calc.engine.analysis import analyze
from beam_calc.materials.material_db import A992
from beam_calc.sections.shapes import IBeam


config = simple(6000, left_support_mm=0, right_support_mm=6000)
loads = [
    PointLoad(magnitude_n=12000, x_mm=2000),                     # + hacia abajo
    UniformLoad(magnitude_n_per_m=3000, x0_mm=0, x1_mm=6000),    # N/m
]
section = IBeam(flange_width_mm=150, flange_thickness_mm=10, web_thickness_mm=6, height_mm=300)

res = analyze(config, loads, section, A992)
print("R1 [N] =", res.r1)
print("R2 [N] =", res.r2)
for k, v in res.display_values().items():
    print(f"{k} = {v}")
