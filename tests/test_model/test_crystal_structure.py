"""Tests for the CrystalStructure container."""

import numpy as np
import pytest
from matplotlib.figure import Figure

from latticeview.construction.fitting import fit
from latticeview.model import (
    AtomKind,
    CellShape,
    CrystalStructure,
    RenderCategory,
)


class TestCrystalStructure:
    def test_identity_from_preset(self, sc_structure):
        assert sc_structure.key == "sc"
        assert sc_structure.title == "Simple Cubic"
        assert sc_structure.atom_radius == 0.25
        assert sc_structure.cell_shape is CellShape.PARALLELEPIPED

    def test_coords_shape(self, fcc_structure):
        assert fcc_structure.coords.shape == (14, 3)

    def test_points_include_edges_and_atoms(self, sc_structure):
        assert sc_structure.points.shape == (8 + 2 * 12, 3)

    def test_points_are_the_fitted_points(self, fcc_structure):
        points = fcc_structure.points
        np.testing.assert_allclose(points[0], fcc_structure.edges[0].start)
        np.testing.assert_allclose(points[-1], fcc_structure.atoms[-1].position)
        result = fit(points)
        np.testing.assert_allclose(result.centre, fcc_structure.fit.centre)
        np.testing.assert_allclose(result.extent, fcc_structure.fit.extent)

    def test_offset_recentres(self, sc_structure):
        np.testing.assert_allclose(sc_structure.offset, [-1.5, -1.5, -1.5])
        shifted = sc_structure.coords + sc_structure.offset
        np.testing.assert_allclose(
            shifted.min(axis=0) + shifted.max(axis=0), 0.0, atol=1e-12,
        )

    def test_interior_atoms(self, sc_structure, fcc_structure):
        assert sc_structure.interior_atoms == ()
        assert len(fcc_structure.interior_atoms) == 6
        assert all(
            a.kind is AtomKind.FACE_CENTRE for a in fcc_structure.interior_atoms
        )

    def test_atoms_by_category(self, fcc_structure):
        groups = fcc_structure.atoms_by_category()
        assert set(groups) == {RenderCategory.A, RenderCategory.B}
        assert len(groups[RenderCategory.A]) == 8
        assert len(groups[RenderCategory.B]) == 6

    def test_immutable(self, sc_structure):
        with pytest.raises(AttributeError):
            sc_structure.atoms = ()  # type: ignore[misc]

    def test_from_preset(self):
        structure = CrystalStructure.from_preset("bcc")
        assert structure.key == "bcc"
        assert len(structure.atoms) == 9

    def test_render_mpl_convenience(self, sc_structure, tmp_path):
        out = tmp_path / "sc.png"
        fig = sc_structure.render_mpl(out, show=False)
        assert isinstance(fig, Figure)
        assert out.exists()
