"""Projection helpers shared by the matplotlib renderer."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from latticeview.construction.cell_edges import edge_arrays
from latticeview.model import EdgeSegment, ViewState

# Default unit circle for atom rendering (closed polygon).
_N_CIRCLE = 48
_UNIT_CIRCLE = np.column_stack([
    np.cos(np.linspace(0, 2 * np.pi, _N_CIRCLE + 1)),
    np.sin(np.linspace(0, 2 * np.pi, _N_CIRCLE + 1)),
])


def _make_unit_circle(n: int) -> np.ndarray:
    """Build a unit circle polygon with *n* segments."""
    if n == _N_CIRCLE:
        return _UNIT_CIRCLE
    return np.column_stack([
        np.cos(np.linspace(0, 2 * np.pi, n + 1)),
        np.sin(np.linspace(0, 2 * np.pi, n + 1)),
    ])


def _project_segments(
    edges: Sequence[EdgeSegment],
    view: ViewState,
) -> np.ndarray:
    """Project edges to screen-space segments of shape ``(n, 2, 2)``."""
    starts, ends = edge_arrays(edges)
    xy_s, _, _ = view.project(starts)
    xy_e, _, _ = view.project(ends)
    return np.stack([xy_s, xy_e], axis=1)
