"""Boundary conditions applied after streaming."""

from __future__ import annotations

import logging

import numpy as np

from .lattice import VELOCITY_INLET, BoundaryType, LBMData

logger = logging.getLogger(__name__)

_UNKNOWN_AT_INLET = (1, 5, 8)


def _wall_mask(data: LBMData, *, include_inlet: bool) -> np.ndarray:
    xs = np.arange(data.nx)[:, None, None]
    ys = np.arange(data.ny)[None, :, None]
    mask = (xs == data.nx - 1) | (ys == 0) | (ys == data.ny - 1)
    if include_inlet:
        mask = mask | (xs == 0)
    return np.broadcast_to(mask, data.shape)


def _bounce_back(data: LBMData, mask: np.ndarray) -> None:
    # Directions are overwritten in order, so later ones see earlier updates.
    for j, j_opp in enumerate(data.lattice.opp):
        data.f[mask, j] = data.f[mask, j_opp]


def _zou_he_inlet(data: LBMData) -> None:
    inlet = data.f[0]
    known = [j for j in range(data.lattice.q) if j not in _UNKNOWN_AT_INLET]
    rho = inlet[..., known].sum(axis=-1) / (1.0 - VELOCITY_INLET)
    inlet[..., 1] = inlet[..., 3] + (2.0 / 3.0) * rho * VELOCITY_INLET
    inlet[..., 5] = (
        inlet[..., 7]
        + 0.5 * (inlet[..., 4] - inlet[..., 2])
        + (1.0 / 6.0) * rho * VELOCITY_INLET
    )
    inlet[..., 8] = (
        inlet[..., 6]
        + 0.5 * (inlet[..., 2] - inlet[..., 4])
        + (1.0 / 6.0) * rho * VELOCITY_INLET
    )


def apply_boundary(data: LBMData, boundary_type: BoundaryType) -> None:
    """Apply the boundary treatment in place.

    ``BOUNCE_BACK`` reflects on every x and y wall. ``VELOCITY`` imposes a
    Zou-He inlet at x=0 and reflects on the other walls. Other types leave
    ``f`` unchanged.
    """
    boundary_type = BoundaryType(boundary_type)
    if boundary_type is BoundaryType.BOUNCE_BACK:
        _bounce_back(data, _wall_mask(data, include_inlet=True))
    elif boundary_type is BoundaryType.VELOCITY:
        _zou_he_inlet(data)
        _bounce_back(data, _wall_mask(data, include_inlet=False))
        logger.debug(
            "After boundary, f at index 0: %s",
            " ".join(f"{v:f}" for v in data.f[0, 0, 0]),
        )