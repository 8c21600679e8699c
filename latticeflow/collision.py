"""Macroscopic moments and collision operators."""

from __future__ import annotations

import logging

import numpy as np

from .lattice import OMEGA, CollisionType, Lattice, LBMData

logger = logging.getLogger(__name__)

_RHO_FLOOR = 1e-10

# Relaxation rates of the D2Q9 moment-space operator.
_MRT_RATES = np.array([0.0, 1.19, 1.4, 0.0, 1.2, 0.0, 1.2, 1.98, 1.98])

_ENTROPIC_ITERATIONS = 20


class NumericalError(ArithmeticError):
    """Raised when the macroscopic velocity becomes infinite or NaN."""


def equilibrium(lattice: Lattice, rho, ux, uy, uz) -> np.ndarray:
    """Second-order equilibrium distribution; the last axis runs over directions."""
    rho = np.asarray(rho, dtype=float)
    u = np.stack(np.broadcast_arrays(*(np.asarray(v, dtype=float) for v in (ux, uy, uz))), axis=-1)
    ciu = u @ lattice.c.T
    u2 = np.sum(u * u, axis=-1)[..., None]
    return lattice.w * rho[..., None] * (1.0 + 3.0 * ciu + 4.5 * ciu * ciu - 1.5 * u2)


def compute_macro(data: LBMData) -> None:
    """Recompute density and velocity fields from the distribution functions.

    Density below 1e-10 is clamped for the velocity division only; the stored
    density keeps its computed value.
    """
    lattice = data.lattice
    rho = data.f.sum(axis=-1)
    momentum = data.f @ lattice.c

    low = rho < _RHO_FLOOR
    for index in np.flatnonzero(low):
        logger.warning("Zero density at index %d, clamping rho to 1e-10", index)
    divisor = np.where(low, _RHO_FLOOR, rho)

    data.rho[...] = rho
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        data.ux[...] = momentum[..., 0] / divisor
        data.uy[...] = momentum[..., 1] / divisor
        data.uz[...] = momentum[..., 2] / divisor

    bad = ~(np.isfinite(data.ux) & np.isfinite(data.uy) & np.isfinite(data.uz))
    if bad.any():
        flat = int(np.flatnonzero(bad)[0])
        pos = np.unravel_index(flat, bad.shape)
        raise NumericalError(
            f"Numerical error at index {flat}: rho={divisor[pos]:f}, "
            f"ux={data.ux[pos]:f}, uy={data.uy[pos]:f}, uz={data.uz[pos]:f}"
        )


def collide(data: LBMData, collision_type: CollisionType) -> None:
    """Relax the distribution functions in place with the chosen operator.

    Any lattice other than D2Q9 always uses the single-relaxation-time operator.
    """
    collision_type = CollisionType(collision_type)
    if data.lattice.q != 9 or collision_type is CollisionType.SRT:
        _collide_srt(data)
    elif collision_type is CollisionType.MRT:
        _collide_mrt(data)
    elif collision_type is CollisionType.TRT:
        _collide_trt(data)
    else:
        _collide_entropic(data)


def _collide_srt(data: LBMData) -> None:
    feq = equilibrium(data.lattice, data.rho, data.ux, data.uy, data.uz)
    data.f += OMEGA * (feq - data.f)


def _collide_mrt(data: LBMData) -> None:
    rho, ux, uy = data.rho, data.ux, data.uy
    f = [data.f[..., j] for j in range(9)]

    m = np.stack(
        (
            f[0] + f[1] + f[2] + f[3] + f[4] + f[5] + f[6] + f[7] + f[8],
            -4 * f[0] - f[1] - f[2] - f[3] - f[4] + 2 * (f[5] + f[6] + f[7] + f[8]),
            2 * f[0] + f[1] + f[2] + f[3] + f[4] - f[5] - f[6] - f[7] - f[8],
            f[1] - f[3],
            -f[1] + f[3],
            f[2] - f[4],
            -f[2] + f[4],
            f[5] + f[6] - f[7] - f[8],
            f[5] - f[6] + f[7] - f[8],
        ),
        axis=-1,
    )
    u2 = ux * ux + uy * uy
    meq = np.stack(
        (
            rho,
            -2 * rho + 3 * rho * u2,
            rho - 3 * rho * u2,
            rho * ux,
            -rho * ux,
            rho * uy,
            -rho * uy,
            rho * (ux * ux - uy * uy),
            rho * ux * uy,
        ),
        axis=-1,
    )
    m = m - _MRT_RATES * (m - meq)
    m0, m1, m2, m3, m4, m5, m6, m7, m8 = (m[..., k] for k in range(9))

    data.f[...] = np.stack(
        (
            (m0 - 4 * m1 + 2 * m2) / 9.0,
            (m0 - m1 + m2 + 3 * m3 - 3 * m4) / 9.0,
            (m0 - m1 + m2 + 3 * m5 - 3 * m6) / 9.0,
            (m0 - m1 + m2 - 3 * m3 + 3 * m4) / 9.0,
            (m0 - m1 + m2 - 3 * m5 + 3 * m6) / 9.0,
            (m0 + 2 * m1 - m2 + 3 * m7 + 3 * m8) / 36.0,
            (m0 + 2 * m1 - m2 + 3 * m7 - 3 * m8) / 36.0,
            (m0 + 2 * m1 - m2 - 3 * m7 + 3 * m8) / 36.0,
            (m0 + 2 * m1 - m2 - 3 * m7 - 3 * m8) / 36.0,
        ),
        axis=-1,
    )


def _collide_trt(data: LBMData) -> None:
    omega_plus, omega_minus = OMEGA, 1.0
    feq = equilibrium(data.lattice, data.rho, data.ux, data.uy, 0.0)
    # Directions are updated one after another, each seeing the already
    # relaxed value of its opposite when that came earlier.
    for j, j_opp in enumerate(data.lattice.opp):
        fj = data.f[..., j]
        fo = data.f[..., j_opp]
        f_plus = 0.5 * (fj + fo)
        f_minus = 0.5 * (fj - fo)
        feq_plus = 0.5 * (feq[..., j] + feq[..., j_opp])
        feq_minus = 0.5 * (feq[..., j] - feq[..., j_opp])
        data.f[..., j] = (
            f_plus - omega_plus * (f_plus - feq_plus)
            + f_minus - omega_minus * (f_minus - feq_minus)
        )


def _entropy(f: np.ndarray, w: np.ndarray) -> np.ndarray:
    return np.sum(f * np.log(f / w), axis=-1)


def _collide_entropic(data: LBMData) -> None:
    w = data.lattice.w
    f = data.f.copy()
    feq = equilibrium(data.lattice, data.rho, data.ux, data.uy, 0.0)
    delta = feq - f

    with np.errstate(divide="ignore", invalid="ignore"):
        h_eq = _entropy(feq, w)
        alpha_min = np.zeros(data.rho.shape)
        alpha_max = np.full(data.rho.shape, 2.0)
        alpha = np.ones(data.rho.shape)
        for _ in range(_ENTROPIC_ITERATIONS):
            alpha = 0.5 * (alpha_min + alpha_max)
            h_alpha = _entropy(f + alpha[..., None] * delta, w)
            above = h_alpha > h_eq
            alpha_max = np.where(above, alpha, alpha_max)
            alpha_min = np.where(above, alpha_min, alpha)

    data.f[...] = f + alpha[..., None] * delta