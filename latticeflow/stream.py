"""Streaming step: move each distribution to the neighbouring node it points at."""

from __future__ import annotations

import logging

import numpy as np

from .lattice import LBMData

logger = logging.getLogger(__name__)


def _spans(shift: int, n: int) -> tuple[slice, slice]:
    """Source and destination slices along one axis for an integer shift."""
    length = max(n - abs(shift), 0)
    src_start = max(-shift, 0)
    dst_start = max(shift, 0)
    return (
        slice(src_start, src_start + length),
        slice(dst_start, dst_start + length),
    )


def stream(data: LBMData) -> None:
    """Propagate ``f`` along the lattice velocities, then swap ``f`` and ``f_new``.

    Populations that would leave the grid are dropped; entries of the new
    ``f`` that nothing streams into keep whatever ``f_new`` held before.
    Raises ``ValueError`` if a nine-direction lattice has a velocity with a
    non-zero z component.
    """
    lattice = data.lattice
    if lattice.q == 9:
        bad = np.flatnonzero(lattice.c[:, 2] != 0)
        if bad.size:
            j = int(bad[0])
            cj = lattice.c[j]
            raise ValueError(
                f"Invalid z-velocity for D2Q9 at dir={j}: "
                f"c=({cj[0]:f}, {cj[1]:f}, {cj[2]:f})"
            )

    nodes = data.size()
    for j, velocity in enumerate(lattice.c.astype(int)):
        src_x, dst_x = _spans(int(velocity[0]), data.nx)
        src_y, dst_y = _spans(int(velocity[1]), data.ny)
        src_z, dst_z = _spans(int(velocity[2]), data.nz)
        data.f_new[dst_x, dst_y, dst_z, j] = data.f[src_x, src_y, src_z, j]

        moved = (
            (src_x.stop - src_x.start)
            * (src_y.stop - src_y.start)
            * (src_z.stop - src_z.start)
        )
        if moved < nodes:
            logger.debug(
                "Out-of-bounds streaming for dir=%d: %d of %d nodes leave the grid",
                j,
                nodes - moved,
                nodes,
            )

    data.f, data.f_new = data.f_new, data.f
    logger.debug(
        "After streaming, f at index 0: %s",
        " ".join(f"{v:f}" for v in data.f[0, 0, 0]),
    )