"""Tests for basis expansion into Cartesian positions."""

import numpy as np

from latticeview.construction.basis import expand, fractional_coords
from latticeview.construction.lattice_vectors import solve
from latticeview.model import AtomKind, BasisAtom, LatticeParameters, LatticeVectors


class TestFractionalCoords:
    def test_empty(self):
        assert fractional_coords([]).shape == (0, 3)

    def test_stacks_positions(self):
        frac = fractional_coords([BasisAtom((0, 0, 0)), BasisAtom((0.5, 0.25, 1))])
        np.testing.assert_allclose(frac, [[0, 0, 0], [0.5, 0.25, 1.0]])


class TestExpand:
    def test_linear_combination_of_vectors(self):
        vecs = LatticeVectors((2, 0, 0), (1, 3, 0), (0.5, 0.5, 4))
        atoms = expand(vecs, [BasisAtom((0.5, 0.25, 0.75))])
        expected = 0.5 * vecs.v1 + 0.25 * vecs.v2 + 0.75 * vecs.v3
        np.testing.assert_allclose(atoms[0].position, expected)

    def test_order_and_kind_preserved(self):
        basis = [
            BasisAtom((1, 1, 1)),
            BasisAtom((0.5, 0.5, 0.5), AtomKind.BODY_CENTRE),
            BasisAtom((0, 0, 0)),
        ]
        atoms = expand(solve(LatticeParameters(2.0, 2.0, 2.0)), basis)
        np.testing.assert_allclose(
            [a.position for a in atoms],
            [[2, 2, 2], [1, 1, 1], [0, 0, 0]],
            atol=1e-12,
        )
        assert [a.kind for a in atoms] == [
            AtomKind.CORNER, AtomKind.BODY_CENTRE, AtomKind.CORNER,
        ]

    def test_outside_unit_cell_placed_as_given(self):
        vecs = LatticeVectors((1, 0, 0), (0, 1, 0), (0, 0, 1))
        atoms = expand(vecs, [BasisAtom((-0.5, 1.5, 2.0))])
        np.testing.assert_allclose(atoms[0].position, [-0.5, 1.5, 2.0])

    def test_empty_basis(self):
        vecs = LatticeVectors((1, 0, 0), (0, 1, 0), (0, 0, 1))
        assert expand(vecs, []) == []
