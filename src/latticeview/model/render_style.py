from __future__ import annotations

from dataclasses import dataclass, field

from latticeview._constants import DEFAULT_PADDING_FACTOR
from latticeview.model._util import _field_defaults
from latticeview.model.atoms import RenderCategory
from latticeview.model.colour import Colour, normalise_colour

_VALID_LINESTYLES = frozenset({"solid", "dashed", "dotted", "dashdot"})

_CATEGORY_ORDER = (RenderCategory.A, RenderCategory.B, RenderCategory.C)


@dataclass(frozen=True)
class CellEdgeStyle:
    """Visual style for unit cell edges.

    Attributes:
        colour: Edge colour.  Accepts any format understood by
            :func:`normalise_colour`.
        line_width: Width of the edge line in points.
        linestyle: Line pattern: ``"solid"``, ``"dashed"``,
            ``"dotted"``, or ``"dashdot"``.
    """

    colour: Colour = (0.0, 0.0, 0.0)
    line_width: float = 1.0
    linestyle: str = "solid"

    def __post_init__(self) -> None:
        if self.line_width < 0:
            raise ValueError(
                f"line_width must be non-negative, got {self.line_width}"
            )
        if self.linestyle not in _VALID_LINESTYLES:
            raise ValueError(
                f"linestyle must be one of {sorted(_VALID_LINESTYLES)}, "
                f"got {self.linestyle!r}"
            )

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        defaults = _field_defaults(type(self))
        d: dict = {}
        if normalise_colour(self.colour) != normalise_colour(defaults["colour"]):
            d["colour"] = list(normalise_colour(self.colour))
        if self.line_width != defaults["line_width"]:
            d["line_width"] = self.line_width
        if self.linestyle != defaults["linestyle"]:
            d["linestyle"] = self.linestyle
        return d

    @classmethod
    def from_dict(cls, d: dict) -> CellEdgeStyle:
        """Deserialise from a dictionary."""
        kwargs: dict = {}
        for key in _field_defaults(cls):
            if key in d:
                val = d[key]
                if key == "colour" and isinstance(val, list):
                    val = tuple(val)
                kwargs[key] = val
        return cls(**kwargs)


@dataclass
class RenderStyle:
    """Visual style settings for rendering a crystal structure.

    Groups the appearance parameters that control how a structure is
    drawn, independent of the structure itself.  By default lattice-point
    atoms are blue and centring atoms red, and the frustum is twice the
    size of the structure.

    Attributes:
        atom_scale: Multiplier applied to each preset's atom radius.
        category_colours: Colours for render categories ``A``, ``B``
            and ``C``, in that order.
        show_cell: Whether to draw the cell outline.
        cell_style: Visual style for the cell outline.  See
            :class:`CellEdgeStyle`.
        show_axes: Whether to draw the labelled a/b/c axes.
        axes_length: Length of each axis line.
        axes_colour: Colour for axis lines and labels.
        padding_factor: Frustum size as a multiple of the structure's
            largest extent.
        background: Figure background colour.

    Raises:
        ValueError: If *atom_scale*, *axes_length* or *padding_factor*
            are not positive, or *category_colours* does not hold
            exactly three colours.
    """

    atom_scale: float = 1.0
    category_colours: tuple[Colour, Colour, Colour] = (
        "#4444ff", "#ff4444", "#44ff44",
    )
    show_cell: bool = True
    cell_style: CellEdgeStyle = field(default_factory=CellEdgeStyle)
    show_axes: bool = True
    axes_length: float = 3.0
    axes_colour: Colour = "#888888"
    padding_factor: float = DEFAULT_PADDING_FACTOR
    background: Colour = "white"

    def __post_init__(self) -> None:
        if self.atom_scale <= 0:
            raise ValueError(f"atom_scale must be positive, got {self.atom_scale}")
        if self.axes_length <= 0:
            raise ValueError(
                f"axes_length must be positive, got {self.axes_length}"
            )
        if self.padding_factor <= 0:
            raise ValueError(
                f"padding_factor must be positive, got {self.padding_factor}"
            )
        if len(self.category_colours) != 3:
            raise ValueError(
                f"category_colours must have exactly 3 elements, "
                f"got {len(self.category_colours)}"
            )
        self.category_colours = tuple(self.category_colours)

    def category_colour(
        self, category: RenderCategory,
    ) -> tuple[float, float, float]:
        """Normalised RGB colour for a render category."""
        return normalise_colour(
            self.category_colours[_CATEGORY_ORDER.index(category)]
        )

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.  The nested
        ``cell_style`` is serialised as a sub-dict (omitted entirely
        when it equals its own defaults).
        """
        _SPECIAL = frozenset({"category_colours"})
        defaults = _field_defaults(type(self), exclude=_SPECIAL)
        d: dict = {}
        default_colours = tuple(
            normalise_colour(c) for c in type(self).category_colours
        )
        actual_colours = tuple(
            normalise_colour(c) for c in self.category_colours
        )
        if actual_colours != default_colours:
            d["category_colours"] = [list(c) for c in actual_colours]
        for field_name, default in defaults.items():
            val = getattr(self, field_name)
            if field_name in ("axes_colour", "background"):
                if normalise_colour(val) != normalise_colour(default):
                    d[field_name] = list(normalise_colour(val))
            elif val != default:
                d[field_name] = val

        cell_d = self.cell_style.to_dict()
        if cell_d:
            d["cell_style"] = cell_d
        return d

    @classmethod
    def from_dict(cls, d: dict) -> RenderStyle:
        """Deserialise from a dictionary.

        Missing fields use their defaults.  Colour lists are converted
        to tuples for type consistency.
        """
        defaults = _field_defaults(cls, exclude=frozenset({"category_colours"}))
        kwargs: dict = {}
        for field_name in defaults:
            if field_name in d:
                val = d[field_name]
                if field_name in ("axes_colour", "background") and isinstance(val, list):
                    val = tuple(val)
                kwargs[field_name] = val
        if "category_colours" in d:
            kwargs["category_colours"] = tuple(
                tuple(c) if isinstance(c, list) else c
                for c in d["category_colours"]
            )
        if "cell_style" in d:
            kwargs["cell_style"] = CellEdgeStyle.from_dict(d["cell_style"])
        return cls(**kwargs)
