"""Bounding-box framing for the camera."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from latticeview.model import BoundingBox, CartesianAtom, EdgeSegment, FitResult


def structure_points(
    edges: Sequence[EdgeSegment],
    atoms: Sequence[CartesianAtom],
) -> np.ndarray:
    """Every edge endpoint and atom centre as an ``(n, 3)`` array.

    Atoms contribute their centres only; their display radius is not
    added to the bounds.
    """
    points = [pt for edge in edges for pt in (edge.start, edge.end)]
    points.extend(atom.position for atom in atoms)
    if not points:
        return np.empty((0, 3))
    return np.array(points, dtype=float)


def fit(points: np.ndarray | Sequence[Sequence[float]]) -> FitResult:
    """Centre and extent of the axis-aligned bounds of *points*.

    ``centre = (min + max) / 2`` and ``extent = max - min``.  Use
    :meth:`FitResult.framing_scale` to size an orthographic frustum.

    Args:
        points: Array-like of shape ``(n, 3)``.

    Raises:
        EmptyGeometryError: If *points* is empty.
        ValueError: If *points* is not of shape ``(n, 3)``.
    """
    return FitResult.from_bounding_box(BoundingBox.from_points(points))
