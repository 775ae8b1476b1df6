"""Cell outline geometry: parallelepiped edges and the hexagonal prism."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from latticeview.errors import InvalidLatticeError
from latticeview.model import EdgeSegment, LatticeVectors

# The 12 edges of a unit cube, as pairs of vertex indices.
# Vertices are the 8 corners at fractional coordinates {0,1}^3.
_CUBE_EDGES: list[tuple[int, int]] = []
for _i in range(8):
    for _bit in range(3):
        _j = _i ^ (1 << _bit)  # flip one bit
        if _j > _i:
            _CUBE_EDGES.append((_i, _j))

# Fractional coordinates of the 8 cube corners (row-order matches
# the bit-pattern vertex indexing: 0->(0,0,0), 1->(1,0,0), ..., 7->(1,1,1)).
_FRAC_CORNERS = np.array([
    [(v >> 0) & 1, (v >> 1) & 1, (v >> 2) & 1]
    for v in range(8)
], dtype=float)

_HEX_SIDES = 6


def cell_corners(vectors: LatticeVectors) -> np.ndarray:
    """The 8 corners of the cell spanned by *vectors*.

    Corner ``i`` is the sum of the lattice vectors selected by the bits
    of ``i`` (bit 0 for ``v1``, bit 1 for ``v2``, bit 2 for ``v3``).

    Returns:
        Array of shape ``(8, 3)``.
    """
    return _FRAC_CORNERS @ vectors.matrix


def build_cell_edges(vectors: LatticeVectors) -> list[EdgeSegment]:
    """The 12 edges of the parallelepiped spanned by *vectors*.

    Each edge joins two corners that differ along exactly one lattice
    vector, so no edge is repeated and no diagonal is included.  Every
    corner is shared by exactly three edges.
    """
    corners = cell_corners(vectors)
    return [EdgeSegment(corners[i], corners[j]) for i, j in _CUBE_EDGES]


def hexagonal_prism_vertices(a: float, c: float) -> tuple[np.ndarray, np.ndarray]:
    """Bottom and top vertex rings of a hexagonal prism.

    Vertex ``i`` sits at angle ``i * 60`` degrees on a circle of radius
    *a*; the bottom ring is at ``z = 0`` and the top ring at ``z = c``.
    Both rings use the same ordering.

    Returns:
        Tuple of ``(bottom, top)`` arrays, each of shape ``(6, 3)``.

    Raises:
        InvalidLatticeError: If *a* or *c* is not positive.
    """
    if a <= 0:
        raise InvalidLatticeError(f"a must be positive, got {a}")
    if c <= 0:
        raise InvalidLatticeError(f"c must be positive, got {c}")
    angles = np.arange(_HEX_SIDES) * (np.pi / 3.0)
    ring = np.column_stack([
        a * np.cos(angles),
        a * np.sin(angles),
        np.zeros(_HEX_SIDES),
    ])
    top = ring.copy()
    top[:, 2] = c
    return ring, top


def build_hexagonal_prism(a: float, c: float) -> list[EdgeSegment]:
    """The 18 edges of a hexagonal prism of radius *a* and height *c*.

    Edges are ordered as the 6 vertical edges, then the 6 bottom-ring
    edges, then the 6 top-ring edges.  Ring edges join consecutive
    vertices, wrapping from the last back to the first.

    Raises:
        InvalidLatticeError: If *a* or *c* is not positive.
    """
    bottom, top = hexagonal_prism_vertices(a, c)
    nxt = [(i + 1) % _HEX_SIDES for i in range(_HEX_SIDES)]
    vertical = [EdgeSegment(bottom[i], top[i]) for i in range(_HEX_SIDES)]
    bottom_ring = [EdgeSegment(bottom[i], bottom[j]) for i, j in enumerate(nxt)]
    top_ring = [EdgeSegment(top[i], top[j]) for i, j in enumerate(nxt)]
    return vertical + bottom_ring + top_ring


def edge_arrays(edges: Sequence[EdgeSegment]) -> tuple[np.ndarray, np.ndarray]:
    """Split edges into ``(starts, ends)`` arrays of shape ``(n, 3)``."""
    if not edges:
        return np.empty((0, 3)), np.empty((0, 3))
    starts = np.array([edge.start for edge in edges])
    ends = np.array([edge.end for edge in edges])
    return starts, ends
