"""Lattice parameters to Cartesian lattice vectors.

Uses the standard crystallographic setting: ``v1`` lies along ``x``,
``v2`` lies in the ``xy`` plane and ``v3`` is fixed by the remaining
angles.
"""

from __future__ import annotations

import logging
import math

from latticeview._constants import (
    ANGLE_TOLERANCE,
    COS_SNAP_TOLERANCE,
    HEXAGONAL_GAMMA,
    SIN_GAMMA_TOLERANCE,
)
from latticeview.errors import InvalidLatticeError
from latticeview.model import LatticeConvention, LatticeParameters, LatticeVectors

logger = logging.getLogger(__name__)


def _snap(value: float) -> float:
    """Return ``0.0`` for values within floating noise of zero."""
    return 0.0 if abs(value) < COS_SNAP_TOLERANCE else value


def _solve_hexagonal(params: LatticeParameters) -> LatticeVectors:
    """Hexagonal setting: ``c`` along ``z``, ``gamma`` exactly 120 degrees."""
    gamma = math.radians(HEXAGONAL_GAMMA)
    return LatticeVectors(
        v1=(params.a, 0.0, 0.0),
        v2=(params.b * math.cos(gamma), params.b * math.sin(gamma), 0.0),
        v3=(0.0, 0.0, params.c),
    )


def _solve_general(params: LatticeParameters) -> LatticeVectors:
    """General (triclinic) construction.

    Raises:
        InvalidLatticeError: If ``sin(gamma)`` is too close to zero or the
            height of ``v3`` above the ``xy`` plane is imaginary.
    """
    alpha, beta, gamma = (math.radians(x) for x in params.angles)
    cos_alpha = _snap(math.cos(alpha))
    cos_beta = _snap(math.cos(beta))
    cos_gamma = math.cos(gamma)
    sin_gamma = math.sin(gamma)

    if abs(sin_gamma) < SIN_GAMMA_TOLERANCE:
        raise InvalidLatticeError(
            f"sin(gamma) is too close to zero for gamma={params.gamma}"
        )

    # Direction cosine of v3 along y, and the remaining z component.
    cy = (cos_alpha - cos_beta * cos_gamma) / sin_gamma
    radicand = 1.0 - cos_beta**2 - cy**2
    if radicand < 0.0:
        raise InvalidLatticeError(
            f"angles alpha={params.alpha}, beta={params.beta}, "
            f"gamma={params.gamma} do not describe a realisable cell"
        )

    c = params.c
    return LatticeVectors(
        v1=(params.a, 0.0, 0.0),
        v2=(params.b * cos_gamma, params.b * sin_gamma, 0.0),
        v3=(c * cos_beta, c * cy, c * math.sqrt(radicand)),
    )


_SOLVERS = {
    LatticeConvention.GENERAL: _solve_general,
    LatticeConvention.HEXAGONAL: _solve_hexagonal,
}


def solve(
    params: LatticeParameters,
    *,
    tol: float = ANGLE_TOLERANCE,
) -> LatticeVectors:
    """Convert lattice parameters to Cartesian lattice vectors.

    Parameter sets within *tol* degrees of the hexagonal setting
    (``alpha = beta = 90``, ``gamma = 120``) are built directly; the
    result agrees with the general formula to floating precision.

    Args:
        params: Edge lengths and angles (degrees).
        tol: Angle tolerance in degrees for convention matching.

    Returns:
        The three lattice vectors.

    Raises:
        InvalidLatticeError: If the parameters describe a degenerate
            cell.
    """
    convention = params.convention(tol)
    logger.debug(
        "Solving lattice vectors for %s using the %s convention",
        params, convention.value,
    )
    return _SOLVERS[convention](params)


def solve_general(params: LatticeParameters) -> LatticeVectors:
    """Solve with the general formula, bypassing convention dispatch."""
    return _solve_general(params)
