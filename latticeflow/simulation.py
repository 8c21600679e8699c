"""Time stepping driver and text output of the velocity field."""

from __future__ import annotations

import argparse
import sys

import numpy as np

from .boundary import apply_boundary
from .collision import NumericalError, collide, compute_macro
from .lattice import BoundaryType, CollisionType, LatticeType, init_lbm_data
from .stream import stream

_FRAME_INTERVAL = 10


class Simulation:
    """A lattice Boltzmann run on the default grid."""

    def __init__(
        self,
        lattice_type: LatticeType,
        collision_type: CollisionType,
        boundary_type: BoundaryType,
        steps: int = 100,
    ) -> None:
        self.lattice_type = LatticeType(lattice_type)
        self.collision_type = CollisionType(collision_type)
        self.boundary_type = BoundaryType(boundary_type)
        self.steps = steps
        self.data = init_lbm_data(self.lattice_type)

    def run(self) -> None:
        """Advance ``steps`` time steps, printing the field every tenth step."""
        for step in range(self.steps):
            compute_macro(self.data)
            collide(self.data, self.collision_type)
            stream(self.data)
            apply_boundary(self.data, self.boundary_type)
            if step % _FRAME_INTERVAL == 0:
                self.visualize()

    def velocity_magnitude(self) -> np.ndarray:
        """Speed on the z=0 slice, shape ``(nx, ny)``."""
        d = self.data
        ux, uy, uz = d.ux[:, :, 0], d.uy[:, :, 0], d.uz[:, :, 0]
        return np.sqrt(ux * ux + uy * uy + uz * uz)

    def visualize(self) -> None:
        """Print the z=0 speed field, one grid row per line."""
        print("\nVelocity magnitude (z=0 slice):")
        for row in self.velocity_magnitude():
            print("".join(f"{float(value):g} " for value in row))


def main(argv: list[str] | None = None) -> int:
    """Run a simulation from the command line."""
    parser = argparse.ArgumentParser(description="Lattice Boltzmann flow simulation.")
    parser.add_argument(
        "--lattice", choices=[t.name for t in LatticeType], default=LatticeType.D2Q9.name
    )
    parser.add_argument(
        "--collision", choices=[t.name for t in CollisionType], default=CollisionType.SRT.name
    )
    parser.add_argument(
        "--boundary", choices=[t.name for t in BoundaryType], default=BoundaryType.VELOCITY.name
    )
    parser.add_argument("--steps", type=int, default=100)
    args = parser.parse_args(argv)

    simulation = Simulation(
        LatticeType[args.lattice],
        CollisionType[args.collision],
        BoundaryType[args.boundary],
        args.steps,
    )
    try:
        simulation.run()
    except NumericalError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0