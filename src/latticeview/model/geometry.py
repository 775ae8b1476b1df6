from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from latticeview._constants import DEFAULT_PADDING_FACTOR
from latticeview.errors import EmptyGeometryError
from latticeview.model._util import _frozen_vector


@dataclass(frozen=True, eq=False)
class EdgeSegment:
    """One wireframe edge of a cell.

    Attributes:
        start: First endpoint, shape ``(3,)``.
        end: Second endpoint, shape ``(3,)``.
    """

    start: np.ndarray
    end: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _frozen_vector(self.start, "start"))
        object.__setattr__(self, "end", _frozen_vector(self.end, "end"))

    @property
    def length(self) -> float:
        """Euclidean length of the edge."""
        return float(np.linalg.norm(self.end - self.start))

    def key(self, decimals: int = 9) -> tuple[tuple[float, ...], tuple[float, ...]]:
        """Orientation-independent key, so ``(A, B)`` and ``(B, A)`` match.

        Endpoints are rounded to *decimals* places to absorb floating
        noise.
        """
        a = tuple(float(x) + 0.0 for x in np.round(self.start, decimals))
        b = tuple(float(x) + 0.0 for x in np.round(self.end, decimals))
        return (a, b) if a <= b else (b, a)


@dataclass(frozen=True, eq=False)
class AxisLine:
    """A labelled crystallographic axis drawn from the origin.

    Attributes:
        label: Axis name, e.g. ``"a"``.
        segment: The axis line.
        label_position: Where the label is anchored, just past the tip.
    """

    label: str
    segment: EdgeSegment
    label_position: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "label_position",
            _frozen_vector(self.label_position, "label_position"),
        )


@dataclass(frozen=True, eq=False)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        minimum: Per-axis minimum, shape ``(3,)``.
        maximum: Per-axis maximum, shape ``(3,)``.
    """

    minimum: np.ndarray
    maximum: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "minimum", _frozen_vector(self.minimum, "minimum"),
        )
        object.__setattr__(
            self, "maximum", _frozen_vector(self.maximum, "maximum"),
        )
        if np.any(self.maximum < self.minimum):
            raise ValueError(
                f"maximum {self.maximum} is below minimum {self.minimum}"
            )

    @classmethod
    def from_points(cls, points: np.ndarray) -> BoundingBox:
        """Bound an ``(n, 3)`` array of points.

        Raises:
            EmptyGeometryError: If *points* is empty.
            ValueError: If *points* is not of shape ``(n, 3)``.
        """
        pts = np.asarray(points, dtype=float)
        if pts.size == 0:
            raise EmptyGeometryError("cannot bound an empty set of points")
        if pts.ndim != 2 or pts.shape[1] != 3:
            raise ValueError(
                f"points must have shape (n, 3), got {pts.shape}"
            )
        return cls(pts.min(axis=0), pts.max(axis=0))

    @property
    def centre(self) -> np.ndarray:
        return (self.minimum + self.maximum) / 2.0

    @property
    def extent(self) -> np.ndarray:
        return self.maximum - self.minimum


@dataclass(frozen=True, eq=False)
class FitResult:
    """Camera framing derived from a structure's bounding box.

    Attributes:
        centre: Centre of the bounding box.  Translating by ``-centre``
            puts the structure at the origin.
        extent: Size of the bounding box along each axis.
    """

    centre: np.ndarray
    extent: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "centre", _frozen_vector(self.centre, "centre"))
        object.__setattr__(self, "extent", _frozen_vector(self.extent, "extent"))

    @classmethod
    def from_bounding_box(cls, box: BoundingBox) -> FitResult:
        return cls(centre=box.centre, extent=box.extent)

    @property
    def size(self) -> float:
        """The largest extent along any axis."""
        return float(np.max(self.extent))

    def framing_scale(
        self, padding_factor: float = DEFAULT_PADDING_FACTOR,
    ) -> float:
        """Orthographic frustum size: ``max(extent) * padding_factor``.

        Raises:
            ValueError: If *padding_factor* is not positive.
        """
        if padding_factor <= 0:
            raise ValueError(
                f"padding_factor must be positive, got {padding_factor}"
            )
        return self.size * padding_factor
