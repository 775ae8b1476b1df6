"""Tests for the projection helpers."""

import numpy as np

from latticeview.construction.cell_edges import build_hexagonal_prism
from latticeview.model import EdgeSegment, ViewState
from latticeview.rendering.projection import _make_unit_circle, _project_segments


class TestMakeUnitCircle:
    def test_closed(self):
        circle = _make_unit_circle(12)
        assert circle.shape == (13, 2)
        np.testing.assert_allclose(circle[0], circle[-1], atol=1e-12)

    def test_unit_radius(self):
        circle = _make_unit_circle(48)
        np.testing.assert_allclose(np.linalg.norm(circle, axis=1), 1.0)


class TestProjectSegments:
    def test_identity_view(self):
        view = ViewState(rotation=np.eye(3))
        edges = [EdgeSegment((0, 0, 0), (1, 2, 4))]
        segs = _project_segments(edges, view)
        assert segs.shape == (1, 2, 2)
        np.testing.assert_allclose(segs[0], [[0, 0], [1, 2]])

    def test_shape_for_prism(self):
        segs = _project_segments(build_hexagonal_prism(1.0, 2.0), ViewState())
        assert segs.shape == (18, 2, 2)

    def test_empty(self):
        assert _project_segments([], ViewState()).shape == (0, 2, 2)
