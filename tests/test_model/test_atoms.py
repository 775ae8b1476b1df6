"""Tests for atom kinds, render categories and atom value types."""

import numpy as np
import pytest

from latticeview.model import (
    DEFAULT_RENDER_CATEGORY,
    AtomKind,
    BasisAtom,
    CartesianAtom,
    RenderCategory,
    kind_category,
)


class TestAtomKindCategory:
    def test_corner_is_category_a(self):
        assert AtomKind.CORNER.category is RenderCategory.A

    @pytest.mark.parametrize("kind", [
        AtomKind.BODY_CENTRE, AtomKind.FACE_CENTRE, AtomKind.INTERSTITIAL_HCP,
    ])
    def test_centring_kinds_are_category_b(self, kind):
        assert kind.category is RenderCategory.B

    def test_every_kind_has_a_category(self):
        for kind in AtomKind:
            assert isinstance(kind.category, RenderCategory)

    def test_kind_category_falls_back_for_unknown(self):
        assert kind_category("mystery") is DEFAULT_RENDER_CATEGORY
        assert kind_category(None) is RenderCategory.A

    def test_kind_category_uses_mapping_for_members(self):
        assert kind_category(AtomKind.FACE_CENTRE) is RenderCategory.B


class TestBasisAtom:
    def test_default_kind_is_corner(self):
        assert BasisAtom((0, 0, 0)).kind is AtomKind.CORNER

    def test_string_kind_coerced(self):
        atom = BasisAtom((0.5, 0.5, 0.5), "body_centre")
        assert atom.kind is AtomKind.BODY_CENTRE

    def test_unknown_string_kind_raises(self):
        with pytest.raises(ValueError):
            BasisAtom((0, 0, 0), "nonsense")

    def test_position_converted_to_floats(self):
        atom = BasisAtom((1, 0, 0))
        assert atom.position == (1.0, 0.0, 0.0)
        assert all(isinstance(x, float) for x in atom.position)

    def test_position_outside_unit_cell_allowed(self):
        atom = BasisAtom((-0.5, 1.5, 2.0))
        assert atom.position == (-0.5, 1.5, 2.0)

    def test_wrong_length_raises(self):
        with pytest.raises(ValueError, match="3 components"):
            BasisAtom((0.0, 0.0))

    def test_fractional_thirds_preserved(self):
        atom = BasisAtom((1 / 3, 2 / 3, 0.5))
        assert atom.position[0] == 1 / 3
        assert atom.position[1] == 2 / 3


class TestCartesianAtom:
    def test_position_array(self):
        atom = CartesianAtom((1.0, 2.0, 3.0), AtomKind.CORNER)
        np.testing.assert_allclose(atom.position, [1.0, 2.0, 3.0])

    def test_position_read_only(self):
        atom = CartesianAtom((1.0, 2.0, 3.0), AtomKind.CORNER)
        with pytest.raises(ValueError):
            atom.position[0] = 0.0

    def test_category(self):
        atom = CartesianAtom((0.0, 0.0, 0.0), AtomKind.BODY_CENTRE)
        assert atom.category is RenderCategory.B
