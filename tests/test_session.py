"""Tests for ViewerSession structure switching and viewport handling."""

import logging

import numpy as np
import pytest

from latticeview.construction.presets import PRESETS
from latticeview.model import CellShape, RenderStyle, ViewState
from latticeview.session import ViewerSession


class TestSelect:
    def test_initially_empty(self):
        assert ViewerSession().current is None

    def test_select_builds_and_frames(self):
        session = ViewerSession()
        structure = session.select("sc")
        assert session.current is structure
        assert structure.key == "sc"
        np.testing.assert_allclose(session.view.centre, [1.5, 1.5, 1.5])
        assert session.view.frustum_size == pytest.approx(6.0)

    def test_padding_from_style(self):
        session = ViewerSession(style=RenderStyle(padding_factor=1.5))
        session.select("sc")
        assert session.view.frustum_size == pytest.approx(4.5)

    def test_switch_replaces_structure(self):
        session = ViewerSession()
        first = session.select("sc")
        second = session.select("fcc")
        assert session.current is second
        assert second is not first
        assert len(first.atoms) == 8

    def test_unknown_key_keeps_previous(self, caplog):
        session = ViewerSession()
        previous = session.select("bcc")
        with caplog.at_level(logging.WARNING, logger="latticeview"):
            result = session.select("does-not-exist")
        assert result is previous
        assert session.current is previous
        assert "does-not-exist" in caplog.text
        assert dict(session.catalog) == dict(PRESETS)

    def test_unknown_key_before_any_selection(self):
        assert ViewerSession().select("nope") is None

    def test_cell_shape_override(self):
        structure = ViewerSession().select("hcp", cell_shape=CellShape.HEXAGONAL_PRISM)
        assert len(structure.edges) == 18

    def test_listeners_notified(self):
        seen = []
        session = ViewerSession()
        session.add_listener(seen.append)
        session.select("sc")
        session.select("missing")
        session.select("fcc")
        assert [s.key for s in seen] == ["sc", "fcc"]

    def test_select_logs_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="latticeview"):
            ViewerSession().select("fcc")
        assert "Displaying Face-Centered Cubic" in caplog.text


class TestOptions:
    def test_options_follow_catalog(self):
        session = ViewerSession({"fcc": PRESETS["fcc"]})
        assert session.options() == [("fcc", "Face-Centered Cubic")]

    def test_restricted_catalog_rejects_others(self):
        session = ViewerSession({"fcc": PRESETS["fcc"]})
        assert session.select("sc") is None


class TestViewport:
    def test_resize(self):
        session = ViewerSession()
        session.select("sc")
        assert session.resize(800, 400) == pytest.approx((-6.0, 6.0, 3.0, -3.0))

    @pytest.mark.parametrize("w, h", [(0, 100), (100, 0), (-1, 5)])
    def test_resize_invalid(self, w, h):
        with pytest.raises(ValueError, match="viewport size"):
            ViewerSession().resize(w, h)

    def test_reset_view_restores_orientation(self):
        session = ViewerSession()
        session.select("sc")
        session.view.look_along([1, 0, 0])
        session.view.zoom = 2.0
        view = session.reset_view()
        np.testing.assert_allclose(view.rotation, ViewState().rotation)
        assert view.zoom == 1.0
        np.testing.assert_allclose(view.centre, [1.5, 1.5, 1.5])

    def test_default_frustum_before_selection(self):
        assert ViewerSession().resize(100, 100) == (-5.0, 5.0, 5.0, -5.0)
