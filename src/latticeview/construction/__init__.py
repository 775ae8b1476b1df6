"""Structure construction: lattice vectors, basis expansion, cell
outlines, framing, presets and style files."""

from latticeview.construction.axes import build_axes
from latticeview.construction.basis import expand, fractional_coords
from latticeview.construction.cell_edges import (
    build_cell_edges,
    build_hexagonal_prism,
    cell_corners,
    edge_arrays,
    hexagonal_prism_vertices,
)
from latticeview.construction.fitting import fit, structure_points
from latticeview.construction.lattice_vectors import solve, solve_general
from latticeview.construction.presets import (
    PRESETS,
    body_centre,
    corners,
    display_names,
    face_centres,
    hcp_interstitials,
    lookup,
    preset_keys,
)
from latticeview.construction.structure_builder import build_structure
from latticeview.construction.styles import StyleSet, load_styles, save_styles

__all__ = [
    "PRESETS",
    "StyleSet",
    "body_centre",
    "build_axes",
    "build_cell_edges",
    "build_hexagonal_prism",
    "build_structure",
    "cell_corners",
    "corners",
    "display_names",
    "edge_arrays",
    "expand",
    "face_centres",
    "fit",
    "fractional_coords",
    "hcp_interstitials",
    "hexagonal_prism_vertices",
    "load_styles",
    "lookup",
    "preset_keys",
    "save_styles",
    "solve",
    "solve_general",
    "structure_points",
]
