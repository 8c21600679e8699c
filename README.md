# latticeflow

A small lattice Boltzmann solver for fluid flow on a rectangular grid, built
on numpy.

It has:

- lattices: D2Q9, D3Q15, D3Q19 and D3Q27 (`LatticeType`)
- collision operators (`CollisionType`): single relaxation time (`SRT`) for
  every lattice; for D2Q9 also multiple relaxation time (`MRT`), two
  relaxation time (`TRT`) and entropic (`ENTROPIC`). Any lattice other than
  D2Q9 always uses SRT, whatever is asked for.
- boundaries (`BoundaryType`): `BOUNCE_BACK` reflects on every x and y wall;
  `VELOCITY` imposes a Zou-He inlet at `x = 0` (inlet speed 0.001) and
  reflects on the other x and y walls.

## Installation

```
pip install .
```

## Command line

```
latticeflow
```

This runs the default case: a 100 × 100 × 1 D2Q9 grid with SRT collision and
a velocity inlet, for 100 steps. Before step 0, 10, 20, … finishes, the speed
on the `z = 0` slice is printed, one grid row per line.

Options:

- `--lattice {D2Q9,D3Q15,D3Q19,D3Q27}` (default `D2Q9`)
- `--collision {SRT,MRT,TRT,ENTROPIC}` (default `SRT`)
- `--boundary {BOUNCE_BACK,VELOCITY,PRESSURE,PERIODIC,INLET_OUTLET,OPEN}`
  (default `VELOCITY`)
- `--steps N` (default 100)

The command always uses the 100 × 100 × 1 grid. If the velocity field becomes
infinite or NaN, the message goes to standard error and the exit status is 1.

## Library use

```python
from latticeflow.lattice import LatticeType, CollisionType, BoundaryType
from latticeflow.simulation import Simulation

sim = Simulation(LatticeType.D2Q9, CollisionType.MRT, BoundaryType.VELOCITY, 50)
sim.run()
speed = sim.velocity_magnitude()   # numpy array of shape (nx, ny), z = 0 slice
```

`Simulation.visualize()` prints that field as text.

The individual steps can be called directly, on a grid of any size:

```python
from latticeflow.lattice import init_lbm_data, LatticeType, CollisionType, BoundaryType
from latticeflow.collision import compute_macro, collide
from latticeflow.stream import stream
from latticeflow.boundary import apply_boundary

data = init_lbm_data(LatticeType.D2Q9, 20, 20, 1)
compute_macro(data)
collide(data, CollisionType.SRT)
stream(data)
apply_boundary(data, BoundaryType.BOUNCE_BACK)
```

- `init_lbm_data(lattice_type, nx, ny, nz)` returns an `LBMData` at rest with
  unit density and `f` at equilibrium. `f` has shape `(nx, ny, nz, q)`;
  `rho`, `ux`, `uy` and `uz` have shape `(nx, ny, nz)`. Grid sizes must be
  positive integers, otherwise `ValueError` is raised.
- `make_lattice(lattice_type)` returns a `Lattice` with velocities `c`,
  weights `w`, opposite directions `opp` and `q`; `Lattice.describe()` lists
  them as text.
- `equilibrium(lattice, rho, ux, uy, uz)` gives the second-order equilibrium
  distribution.
- `compute_macro` recomputes density and velocity. Density below 1e-10 is
  clamped for the division only, with a logged warning. It raises
  `NumericalError` if the velocity becomes infinite or NaN.
- `stream` moves populations to their neighbours; those that would leave the
  grid are dropped.

Diagnostics go through the standard `logging` module (`latticeflow.*`
loggers).

## What it does not do

- `PRESSURE`, `PERIODIC`, `INLET_OUTLET` and `OPEN` are accepted but leave the
  distributions unchanged; there are no periodic or pressure boundaries.
- Output is text on standard output only: nothing is written to files and
  there is no graphical display.

## Tests

```
pip install .[test]
pytest
```