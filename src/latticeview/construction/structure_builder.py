"""Assemble a complete :class:`CrystalStructure` from a preset."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from latticeview.construction.basis import expand
from latticeview.construction.cell_edges import (
    build_cell_edges,
    build_hexagonal_prism,
    hexagonal_prism_vertices,
)
from latticeview.construction.fitting import fit, structure_points
from latticeview.construction.lattice_vectors import solve
from latticeview.construction.presets import PRESETS, lookup
from latticeview.errors import InvalidLatticeError
from latticeview.model import (
    AtomKind,
    CartesianAtom,
    CellShape,
    CrystalStructure,
    LatticeConvention,
    StructurePreset,
)

logger = logging.getLogger(__name__)


def _prism_corner_atoms(a: float, c: float) -> list[CartesianAtom]:
    """The 12 prism vertices as corner atoms, bottom and top interleaved."""
    bottom, top = hexagonal_prism_vertices(a, c)
    atoms = []
    for low, high in zip(bottom, top):
        atoms.append(CartesianAtom(low, AtomKind.CORNER))
        atoms.append(CartesianAtom(high, AtomKind.CORNER))
    return atoms


def build_structure(
    preset: StructurePreset | str,
    *,
    cell_shape: CellShape | str | None = None,
    catalog: Mapping[str, StructurePreset] = PRESETS,
) -> CrystalStructure:
    """Build vectors, edges, atoms and framing for a preset.

    Args:
        preset: A preset, or a key to look up in *catalog*.
        cell_shape: Outline to build.  ``None`` uses the preset's own
            :attr:`~StructurePreset.cell_shape`.  The hexagonal prism
            replaces the corner atoms with the 12 prism vertices and
            keeps the remaining basis atoms.
        catalog: Where to look up string keys.

    Returns:
        A new, immutable :class:`CrystalStructure`.

    Raises:
        UnknownPresetError: If *preset* is a key missing from *catalog*.
        InvalidLatticeError: If the lattice is degenerate, or a
            hexagonal prism is requested for a non-hexagonal lattice.
    """
    if isinstance(preset, str):
        preset = lookup(preset, catalog)
    shape = CellShape(cell_shape) if cell_shape is not None else preset.cell_shape

    vectors = solve(preset.lattice)
    if shape is CellShape.HEXAGONAL_PRISM:
        lattice = preset.lattice
        if lattice.convention() is not LatticeConvention.HEXAGONAL:
            raise InvalidLatticeError(
                f"preset {preset.key!r} is not hexagonal; "
                f"cannot draw a hexagonal prism"
            )
        edges = build_hexagonal_prism(lattice.a, lattice.c)
        atoms = _prism_corner_atoms(lattice.a, lattice.c)
        atoms.extend(expand(vectors, preset.interior_basis))
    else:
        edges = build_cell_edges(vectors)
        atoms = expand(vectors, preset.basis)

    result = fit(structure_points(edges, atoms))
    logger.debug(
        "Built %r: %d atoms, %d edges, extent %s",
        preset.key, len(atoms), len(edges), result.extent,
    )
    return CrystalStructure(
        preset=preset,
        vectors=vectors,
        edges=tuple(edges),
        atoms=tuple(atoms),
        fit=result,
        cell_shape=shape,
    )
