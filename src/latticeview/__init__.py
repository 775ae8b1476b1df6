"""latticeview: crystal lattice geometry for unit-cell viewers.

latticeview turns lattice parameters into Cartesian lattice vectors,
cell outlines and atom positions, frames them for an orthographic
camera, and renders them with matplotlib or plotly.

Example usage::

    from latticeview import CrystalStructure

    structure = CrystalStructure.from_preset("fcc")
    structure.render_mpl("fcc.png")
"""

from latticeview.construction import (
    PRESETS,
    StyleSet,
    build_axes,
    build_cell_edges,
    build_hexagonal_prism,
    build_structure,
    expand,
    fit,
    load_styles,
    lookup,
    preset_keys,
    save_styles,
    solve,
)
from latticeview.errors import (
    EmptyGeometryError,
    InvalidLatticeError,
    LatticeViewError,
    UnknownPresetError,
)
from latticeview.logging_config import setup_logging
from latticeview.model import (
    AtomKind,
    AxisLine,
    BasisAtom,
    BoundingBox,
    CartesianAtom,
    CellEdgeStyle,
    CellShape,
    Colour,
    CrystalStructure,
    EdgeSegment,
    FitResult,
    LatticeConvention,
    LatticeParameters,
    LatticeVectors,
    RenderCategory,
    RenderStyle,
    StructurePreset,
    ViewState,
    kind_category,
    normalise_colour,
)
from latticeview.session import ViewerSession

__all__ = [
    "AtomKind",
    "AxisLine",
    "BasisAtom",
    "BoundingBox",
    "CartesianAtom",
    "CellEdgeStyle",
    "CellShape",
    "Colour",
    "CrystalStructure",
    "EdgeSegment",
    "EmptyGeometryError",
    "FitResult",
    "InvalidLatticeError",
    "LatticeConvention",
    "LatticeParameters",
    "LatticeVectors",
    "LatticeViewError",
    "PRESETS",
    "RenderCategory",
    "RenderStyle",
    "StructurePreset",
    "StyleSet",
    "UnknownPresetError",
    "ViewState",
    "ViewerSession",
    "build_axes",
    "build_cell_edges",
    "build_hexagonal_prism",
    "build_structure",
    "expand",
    "fit",
    "kind_category",
    "load_styles",
    "lookup",
    "normalise_colour",
    "preset_keys",
    "save_styles",
    "setup_logging",
    "solve",
]
