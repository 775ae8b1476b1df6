"""Fractional basis coordinates to Cartesian atom positions."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from latticeview.model import BasisAtom, CartesianAtom, LatticeVectors


def fractional_coords(basis: Sequence[BasisAtom]) -> np.ndarray:
    """Stack basis positions into an ``(n_atoms, 3)`` array."""
    if not basis:
        return np.empty((0, 3))
    return np.array([atom.position for atom in basis], dtype=float)


def expand(
    vectors: LatticeVectors,
    basis: Sequence[BasisAtom],
) -> list[CartesianAtom]:
    """Place each basis atom at ``u*v1 + v*v2 + w*v3``.

    Output order matches *basis*.  Fractional coordinates outside
    ``[0, 1]`` are placed as given, and each atom's kind is passed
    through unchanged.

    Args:
        vectors: Lattice vectors of the cell.
        basis: Atoms in fractional coordinates.

    Returns:
        One :class:`CartesianAtom` per basis atom.
    """
    cart = fractional_coords(basis) @ vectors.matrix
    return [
        CartesianAtom(position=pos, kind=atom.kind)
        for atom, pos in zip(basis, cart)
    ]
