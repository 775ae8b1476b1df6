from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from matplotlib.figure import Figure

from latticeview.model.atoms import AtomKind, CartesianAtom, RenderCategory
from latticeview.model.geometry import EdgeSegment, FitResult
from latticeview.model.lattice import LatticeVectors
from latticeview.model.preset import CellShape, StructurePreset


@dataclass(frozen=True, eq=False)
class CrystalStructure:
    """A fully built structure, ready to hand to a renderer.

    Instances are never modified: switching preset builds a new
    structure and replaces the old one as a whole.

    Attributes:
        preset: The preset this structure was built from.
        vectors: Cartesian lattice vectors.
        edges: Cell outline segments.
        atoms: Atom positions, in basis order.
        fit: Bounding-box framing over edge endpoints and atom centres.
        cell_shape: Which outline *edges* describes.
    """

    preset: StructurePreset
    vectors: LatticeVectors
    edges: tuple[EdgeSegment, ...]
    atoms: tuple[CartesianAtom, ...]
    fit: FitResult
    cell_shape: CellShape = CellShape.PARALLELEPIPED

    def __post_init__(self) -> None:
        object.__setattr__(self, "edges", tuple(self.edges))
        object.__setattr__(self, "atoms", tuple(self.atoms))

    @property
    def key(self) -> str:
        return self.preset.key

    @property
    def title(self) -> str:
        return self.preset.display_name

    @property
    def atom_radius(self) -> float:
        return self.preset.atom_radius

    @property
    def offset(self) -> np.ndarray:
        """Translation that moves the bounding-box centre to the origin."""
        return -self.fit.centre

    @property
    def coords(self) -> np.ndarray:
        """Atom positions as an ``(n_atoms, 3)`` array."""
        if not self.atoms:
            return np.empty((0, 3))
        return np.array([atom.position for atom in self.atoms])

    @property
    def points(self) -> np.ndarray:
        """Edge endpoints followed by atom centres, shape ``(n, 3)``.

        These are the points the framing in :attr:`fit` was computed from.
        """
        from latticeview.construction.fitting import structure_points

        return structure_points(self.edges, self.atoms)

    @property
    def interior_atoms(self) -> tuple[CartesianAtom, ...]:
        """Atoms whose kind is not :attr:`AtomKind.CORNER`."""
        return tuple(a for a in self.atoms if a.kind is not AtomKind.CORNER)

    def atoms_by_category(self) -> dict[RenderCategory, list[CartesianAtom]]:
        """Group atoms by render category, preserving order within groups."""
        groups: dict[RenderCategory, list[CartesianAtom]] = {}
        for atom in self.atoms:
            groups.setdefault(atom.category, []).append(atom)
        return groups

    @classmethod
    def from_preset(
        cls,
        preset: StructurePreset | str,
        *,
        cell_shape: CellShape | str | None = None,
    ) -> CrystalStructure:
        """Build a structure from a preset or preset key.

        See Also:
            :func:`latticeview.construction.structure_builder.build_structure`
        """
        from latticeview.construction.structure_builder import build_structure

        return build_structure(preset, cell_shape=cell_shape)

    def render_mpl(
        self,
        output: str | Path | None = None,
        **kwargs: object,
    ) -> Figure:
        """Render as a static matplotlib figure.

        See Also:
            :func:`latticeview.rendering.static.render_mpl`
        """
        from latticeview.rendering.static import render_mpl

        return render_mpl(self, output, **kwargs)

    def render_plotly(self, **kwargs: object):
        """Render as an interactive plotly figure.

        See Also:
            :func:`latticeview.render_plotly.render_plotly`
        """
        from latticeview.render_plotly import render_plotly

        return render_plotly(self, **kwargs)
