from beam_calc.domain.beam import cantilever, simple
from beam_calc.domain.loads import PointLoad, UniformLoad
from beam_calc.engine.diagrams import sample_curves

loads = [
    PointLoad(magnitude_n=1000, x_mm=500),
    UniformLoad(magnitude_n_per_m=2000, x0_mm=200, x1_mm=800),
]

V, M = sample_curves(simple(1000), loads)
print("V(0) =", V.values[0], " V(L) =", V.values[-1])
print("M(0) =", M.values[0], " M(L) =", M.values[-1])
print("|M|max (muestreado) =", M.max_abs())

V, M = sample_curves(cantilever(1000), loads)
print("Voladizo V(0) =", V.values[0], " M(0) =", M.values[0])

V_old, M_old = sample_curves(cantilever(1000), loads, superpose=False)
print("Voladizo (última carga) V(0) =", V_old.values[0], " M(0) =", M_old.values[0])
