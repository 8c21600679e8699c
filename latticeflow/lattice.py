"""Lattice definitions and the simulation state they act on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

NX = 100
NY = 100
NZ = 1
OMEGA = 1.0
VELOCITY_INLET = 0.001
DENSITY_OUTLET = 1.0


class LatticeType(Enum):
    """Discrete velocity sets."""

    D2Q9 = 0
    D3Q15 = 1
    D3Q19 = 2
    D3Q27 = 3


class CollisionType(Enum):
    """Collision operators."""

    SRT = 0
    MRT = 1
    TRT = 2
    ENTROPIC = 3


class BoundaryType(Enum):
    """Boundary treatments."""

    BOUNCE_BACK = 0
    VELOCITY = 1
    PRESSURE = 2
    PERIODIC = 3
    INLET_OUTLET = 4
    OPEN = 5


_AXES = [(1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1)]
_EDGES = [
    (1, 1, 0), (-1, -1, 0), (1, -1, 0), (-1, 1, 0),
    (1, 0, 1), (-1, 0, -1), (1, 0, -1), (-1, 0, 1),
    (0, 1, 1), (0, -1, -1), (0, 1, -1), (0, -1, 1),
]
_CORNERS = [
    (1, 1, 1), (-1, -1, -1), (1, -1, 1), (-1, 1, -1),
    (1, 1, -1), (-1, -1, 1), (1, -1, -1), (-1, 1, 1),
]

# (velocities, weights) for each lattice, in the order the directions are numbered.
_TABLES: dict[LatticeType, tuple[list[tuple[int, int, int]], list[float]]] = {
    LatticeType.D2Q9: (
        [
            (0, 0, 0), (1, 0, 0), (0, 1, 0), (-1, 0, 0), (0, -1, 0),
            (1, 1, 0), (-1, 1, 0), (-1, -1, 0), (1, -1, 0),
        ],
        [4.0 / 9.0] + [1.0 / 9.0] * 4 + [1.0 / 36.0] * 4,
    ),
    LatticeType.D3Q15: (
        [(0, 0, 0)] + _AXES + _CORNERS,
        [2.0 / 9.0] + [1.0 / 9.0] * 6 + [1.0 / 72.0] * 8,
    ),
    LatticeType.D3Q19: (
        [(0, 0, 0)] + _AXES + _EDGES,
        [1.0 / 3.0] + [1.0 / 18.0] * 6 + [1.0 / 36.0] * 12,
    ),
    LatticeType.D3Q27: (
        [(0, 0, 0)] + _AXES + _EDGES + _CORNERS,
        [8.0 / 27.0] + [2.0 / 27.0] * 6 + [1.0 / 54.0] * 12 + [1.0 / 216.0] * 8,
    ),
}


@dataclass(frozen=True, eq=False)
class Lattice:
    """A discrete velocity set: velocities ``c``, weights ``w`` and opposite directions."""

    lattice_type: LatticeType
    c: np.ndarray
    w: np.ndarray
    opp: np.ndarray

    @property
    def q(self) -> int:
        """Number of discrete directions."""
        return len(self.w)

    def describe(self) -> str:
        """Return a listing of every direction's velocity, weight and opposite."""
        lines = [f"{self.lattice_type.name} Lattice Velocities (q={self.q}):"]
        for j, (cj, wj, oj) in enumerate(zip(self.c, self.w, self.opp)):
            lines.append(
                f"Dir {j}: c=({cj[0]:f}, {cj[1]:f}, {cj[2]:f}), w={wj:f}, opp={int(oj)}"
            )
        return "\n".join(lines)


def make_lattice(lattice_type: LatticeType) -> Lattice:
    """Build the lattice of the given type."""
    try:
        velocities, weights = _TABLES[LatticeType(lattice_type)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"unknown lattice type: {lattice_type!r}") from exc
    index = {v: j for j, v in enumerate(velocities)}
    opposites = [index[(-x, -y, -z)] for x, y, z in velocities]

    c = np.array(velocities, dtype=float)
    w = np.array(weights, dtype=float)
    opp = np.array(opposites, dtype=int)
    for arr in (c, w, opp):
        arr.flags.writeable = False
    return Lattice(LatticeType(lattice_type), c, w, opp)


@dataclass(eq=False)
class LBMData:
    """Distribution functions and macroscopic fields on an ``nx`` by ``ny`` by ``nz`` grid.

    ``f`` and ``f_new`` have shape ``(nx, ny, nz, q)``; ``rho``, ``ux``, ``uy``
    and ``uz`` have shape ``(nx, ny, nz)``.
    """

    lattice: Lattice
    nx: int
    ny: int
    nz: int
    f: np.ndarray = field(repr=False)
    f_new: np.ndarray = field(repr=False)
    rho: np.ndarray = field(repr=False)
    ux: np.ndarray = field(repr=False)
    uy: np.ndarray = field(repr=False)
    uz: np.ndarray = field(repr=False)

    @property
    def shape(self) -> tuple[int, int, int]:
        """Grid dimensions."""
        return (self.nx, self.ny, self.nz)

    def size(self) -> int:
        """Number of grid nodes."""
        return self.nx * self.ny * self.nz


def init_lbm_data(
    lattice_type: LatticeType = LatticeType.D2Q9,
    nx: int = NX,
    ny: int = NY,
    nz: int = NZ,
) -> LBMData:
    """Create a grid at rest with unit density, ``f`` set to equilibrium."""
    for name, value in (("nx", nx), ("ny", ny), ("nz", nz)):
        if int(value) != value or value < 1:
            raise ValueError(f"{name} must be a positive integer, got {value!r}")
    lattice = make_lattice(lattice_type)
    shape = (int(nx), int(ny), int(nz))

    rho = np.ones(shape)
    ux = np.zeros(shape)
    uy = np.zeros(shape)
    uz = np.zeros(shape)

    u = np.stack((ux, uy, uz), axis=-1)
    ciu = u @ lattice.c.T
    u2 = np.sum(u * u, axis=-1)[..., None]
    f = lattice.w * rho[..., None] * (1.0 + 3.0 * ciu + 4.5 * ciu * ciu - 1.5 * u2)

    return LBMData(
        lattice=lattice,
        nx=shape[0],
        ny=shape[1],
        nz=shape[2],
        f=f,
        f_new=np.zeros_like(f),
        rho=rho,
        ux=ux,
        uy=uy,
        uz=uz,
    )