"""Tests for edge segments, bounding boxes and fit results."""

import numpy as np
import pytest

from latticeview.errors import EmptyGeometryError
from latticeview.model import AxisLine, BoundingBox, EdgeSegment, FitResult


class TestEdgeSegment:
    def test_length(self):
        edge = EdgeSegment((0, 0, 0), (3, 4, 0))
        assert edge.length == pytest.approx(5.0)

    def test_key_is_orientation_independent(self):
        forward = EdgeSegment((0, 0, 0), (1, 2, 3))
        backward = EdgeSegment((1, 2, 3), (0, 0, 0))
        assert forward.key() == backward.key()

    def test_key_absorbs_floating_noise(self):
        a = EdgeSegment((0, 0, 0), (1, 0, 0))
        b = EdgeSegment((1e-14, -1e-14, 0), (1, 0, 0))
        assert a.key() == b.key()

    def test_wrong_shape_raises(self):
        with pytest.raises(ValueError, match="end must have shape"):
            EdgeSegment((0, 0, 0), (1, 0))


class TestAxisLine:
    def test_label_position_stored(self):
        line = AxisLine("a", EdgeSegment((0, 0, 0), (3, 0, 0)), (3.2, 0, 0))
        np.testing.assert_allclose(line.label_position, [3.2, 0.0, 0.0])


class TestBoundingBox:
    def test_from_points(self):
        box = BoundingBox.from_points(np.array([[0, 1, 2], [3, -1, 5]]))
        np.testing.assert_allclose(box.minimum, [0, -1, 2])
        np.testing.assert_allclose(box.maximum, [3, 1, 5])
        np.testing.assert_allclose(box.centre, [1.5, 0.0, 3.5])
        np.testing.assert_allclose(box.extent, [3.0, 2.0, 3.0])

    def test_empty_raises(self):
        with pytest.raises(EmptyGeometryError):
            BoundingBox.from_points(np.empty((0, 3)))

    def test_wrong_shape_raises(self):
        with pytest.raises(ValueError, match=r"shape \(n, 3\)"):
            BoundingBox.from_points(np.zeros((4, 2)))

    def test_inverted_bounds_raise(self):
        with pytest.raises(ValueError, match="below minimum"):
            BoundingBox((1, 1, 1), (0, 0, 0))


class TestFitResult:
    def test_size_is_largest_extent(self):
        result = FitResult(centre=(0, 0, 0), extent=(1.0, 4.0, 2.0))
        assert result.size == pytest.approx(4.0)

    def test_framing_scale(self):
        result = FitResult(centre=(0, 0, 0), extent=(1.0, 4.0, 2.0))
        assert result.framing_scale(1.5) == pytest.approx(6.0)
        assert result.framing_scale() == pytest.approx(8.0)

    def test_non_positive_padding_raises(self):
        result = FitResult(centre=(0, 0, 0), extent=(1.0, 1.0, 1.0))
        with pytest.raises(ValueError, match="padding_factor"):
            result.framing_scale(0.0)
