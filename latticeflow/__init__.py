"""Lattice Boltzmann fluid flow: lattices, collision, streaming, boundaries and a driver."""

__version__ = "0.1.0"
__all__ = ["lattice", "collision", "stream", "boundary", "simulation"]