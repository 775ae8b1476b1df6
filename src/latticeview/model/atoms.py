from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

import numpy as np

from latticeview.model._util import _frozen_vector


class RenderCategory(StrEnum):
    """Colour categories understood by the renderers.

    Attributes:
        A: Lattice-point atoms (blue by default).
        B: Centring and interstitial atoms (red by default).
        C: Any other atoms (green by default).
    """

    A = "A"
    B = "B"
    C = "C"


DEFAULT_RENDER_CATEGORY = RenderCategory.A
"""Category used for kinds that have no explicit mapping."""


class AtomKind(StrEnum):
    """Crystallographic role of a basis atom.

    This is a closed set: a new kind needs a new member here and an
    entry in the category mapping below.

    Attributes:
        CORNER: Atom on a cell corner (lattice point).
        BODY_CENTRE: Atom at the body centre ``(1/2, 1/2, 1/2)``.
        FACE_CENTRE: Atom at the centre of a cell face.
        INTERSTITIAL_HCP: One of the two interior atoms of the
            hexagonal close-packed structure.
    """

    CORNER = "corner"
    BODY_CENTRE = "body_centre"
    FACE_CENTRE = "face_centre"
    INTERSTITIAL_HCP = "interstitial_hcp"

    @property
    def category(self) -> RenderCategory:
        """The render category for this kind."""
        return _KIND_CATEGORIES[self]


_KIND_CATEGORIES: dict[AtomKind, RenderCategory] = {
    AtomKind.CORNER: RenderCategory.A,
    AtomKind.BODY_CENTRE: RenderCategory.B,
    AtomKind.FACE_CENTRE: RenderCategory.B,
    AtomKind.INTERSTITIAL_HCP: RenderCategory.B,
}


def kind_category(kind: object) -> RenderCategory:
    """Map any kind value to a render category.

    :class:`AtomKind` members use their explicit mapping; anything else
    falls back to :data:`DEFAULT_RENDER_CATEGORY` rather than failing.
    """
    if isinstance(kind, AtomKind):
        return kind.category
    return DEFAULT_RENDER_CATEGORY


@dataclass(frozen=True)
class BasisAtom:
    """An atom of a preset basis, in fractional coordinates.

    Coordinates are not clamped to ``[0, 1]``; values outside that range
    describe atoms outside the drawn cell.

    Attributes:
        position: Fractional coordinates ``(u, v, w)``.
        kind: Crystallographic role.  Strings are coerced to
            :class:`AtomKind`.

    Raises:
        ValueError: If *position* does not have three components or
            *kind* is not a known :class:`AtomKind` value.
    """

    position: tuple[float, float, float]
    kind: AtomKind = AtomKind.CORNER

    def __post_init__(self) -> None:
        if len(self.position) != 3:
            raise ValueError(
                f"position must have 3 components, got {len(self.position)}"
            )
        object.__setattr__(
            self, "position", tuple(float(x) for x in self.position),
        )
        if not isinstance(self.kind, AtomKind):
            object.__setattr__(self, "kind", AtomKind(self.kind))


@dataclass(frozen=True, eq=False)
class CartesianAtom:
    """An atom placed in Cartesian space.

    Attributes:
        position: Cartesian position, shape ``(3,)``, read-only.
        kind: Passed through unchanged from the basis atom.
    """

    position: np.ndarray
    kind: AtomKind

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "position", _frozen_vector(self.position, "position"),
        )

    @property
    def category(self) -> RenderCategory:
        """Render category of this atom's kind."""
        return kind_category(self.kind)
