"""Core data model for latticeview: value types, enums, styles and camera.

Everything is re-exported here so that ``from latticeview.model import
LatticeParameters`` works without knowing the submodule layout.
"""

from latticeview.model.atoms import (
    DEFAULT_RENDER_CATEGORY,
    AtomKind,
    BasisAtom,
    CartesianAtom,
    RenderCategory,
    kind_category,
)
from latticeview.model.colour import Colour, normalise_colour, rgb_string
from latticeview.model.crystal_structure import CrystalStructure
from latticeview.model.geometry import (
    AxisLine,
    BoundingBox,
    EdgeSegment,
    FitResult,
)
from latticeview.model.lattice import (
    LatticeConvention,
    LatticeParameters,
    LatticeVectors,
)
from latticeview.model.preset import CellShape, StructurePreset
from latticeview.model.render_style import CellEdgeStyle, RenderStyle
from latticeview.model.view_state import ViewState

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
    "DEFAULT_RENDER_CATEGORY",
    "EdgeSegment",
    "FitResult",
    "LatticeConvention",
    "LatticeParameters",
    "LatticeVectors",
    "RenderCategory",
    "RenderStyle",
    "StructurePreset",
    "ViewState",
    "kind_category",
    "normalise_colour",
    "rgb_string",
]
