from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from latticeview._constants import DEFAULT_PADDING_FACTOR

if TYPE_CHECKING:
    from latticeview.model.geometry import FitResult

DEFAULT_CAMERA_POSITION = (5.0, 5.0, 5.0)
"""Initial camera position; the camera looks from here at the origin."""

DEFAULT_FRUSTUM_SIZE = 10.0
"""Frustum height used before any structure has been framed."""


def _rotation_looking_along(
    direction: np.ndarray | list[float] | tuple[float, ...],
    up: np.ndarray | list[float] | tuple[float, ...] = (0.0, 1.0, 0.0),
    *,
    strict_up: bool = False,
) -> np.ndarray:
    """Rotation matrix whose rows are the camera's right, up, forward axes.

    Raises:
        ValueError: If *direction* is zero-length, or *strict_up* is set
            and *up* is parallel to *direction*.
    """
    d = np.asarray(direction, dtype=float)
    u = np.asarray(up, dtype=float)

    d_len = np.linalg.norm(d)
    if d_len < 1e-12:
        raise ValueError("direction must be non-zero")
    fwd = d / d_len                     # camera z-axis (into screen)

    right = np.cross(fwd, u)
    right_len = np.linalg.norm(right)
    if right_len < 1e-12:
        if strict_up:
            raise ValueError("up vector is parallel to the viewing direction")
        u = np.array([0.0, 0.0, 1.0])
        right = np.cross(fwd, u)
        right_len = np.linalg.norm(right)
    right /= right_len                  # camera x-axis

    up_actual = np.cross(right, fwd)     # camera y-axis
    return np.array([right, up_actual, fwd])


def _default_rotation() -> np.ndarray:
    return _rotation_looking_along(-np.asarray(DEFAULT_CAMERA_POSITION))


@dataclass
class ViewState:
    """Orthographic camera state.

    The camera looks along the third row of :attr:`rotation`.  Points
    are centred on :attr:`centre`, rotated into camera space and scaled
    by :attr:`zoom`.  The visible region in projected coordinates is
    :attr:`frustum_size` high; its width follows the viewport aspect
    ratio (see :meth:`frustum`).

    Attributes:
        rotation: 3x3 rotation matrix (rows are the camera axes).
        zoom: Magnification factor.
        centre: 3D point about which to centre the view.
        frustum_size: Height of the orthographic frustum.
    """

    rotation: np.ndarray = field(default_factory=_default_rotation)
    zoom: float = 1.0
    centre: np.ndarray = field(
        default_factory=lambda: np.zeros(3, dtype=float)
    )
    frustum_size: float = DEFAULT_FRUSTUM_SIZE

    def __post_init__(self) -> None:
        self.rotation = np.asarray(self.rotation, dtype=float)
        self.centre = np.asarray(self.centre, dtype=float)
        if self.rotation.shape != (3, 3):
            raise ValueError(
                f"rotation must have shape (3, 3), got {self.rotation.shape}"
            )
        if self.zoom <= 0:
            raise ValueError(f"zoom must be positive, got {self.zoom}")
        if self.frustum_size <= 0:
            raise ValueError(
                f"frustum_size must be positive, got {self.frustum_size}"
            )

    def project(
        self, coords: np.ndarray, radii: np.ndarray | None = None,
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Project 3D coordinates to 2D with depth information.

        Args:
            coords: Array of shape ``(n, 3)``.
            radii: Optional array of shape ``(n,)`` giving 3D sphere
                radii.  When provided the returned *projected_radii*
                are the screen-space radii; otherwise zeros.

        Returns:
            Tuple of ``(xy, depth, projected_radii)`` where:

            - *xy*: ``(n, 2)`` projected 2D coordinates.
            - *depth*: ``(n,)`` depth values (larger = closer to viewer).
            - *projected_radii*: ``(n,)`` screen-space sphere radii.
        """
        coords = np.asarray(coords, dtype=float).reshape(-1, 3)
        rotated = (coords - self.centre) @ self.rotation.T
        # Forward points into the screen, so depth towards the viewer
        # is the negated z component.
        depth = -rotated[:, 2]
        xy = rotated[:, :2] * self.zoom
        if radii is not None:
            projected_radii = np.asarray(radii, dtype=float) * self.zoom
        else:
            projected_radii = np.zeros(len(depth))
        return xy, depth, projected_radii

    def look_along(
        self,
        direction: np.ndarray | list[float] | tuple[float, ...],
        *,
        up: np.ndarray | list[float] | tuple[float, ...] = (0.0, 1.0, 0.0),
    ) -> ViewState:
        """Set the rotation so the camera looks along *direction*.

        The view is oriented so that *direction* points into the screen.
        The *up* vector determines which way is "up" on screen.  If the
        default *up* is parallel to *direction*, ``[0, 0, 1]`` is used
        instead.

        Returns ``self`` so callers can chain, e.g.::

            view = ViewState().look_along([0, 0, -1])

        Raises:
            ValueError: If *direction* is zero-length or an explicit *up*
                is parallel to *direction*.
        """
        strict = tuple(float(x) for x in up) != (0.0, 1.0, 0.0)
        self.rotation = _rotation_looking_along(direction, up, strict_up=strict)
        return self

    def frame(
        self,
        fit: FitResult,
        padding_factor: float = DEFAULT_PADDING_FACTOR,
    ) -> ViewState:
        """Centre on *fit* and size the frustum to its framing scale.

        A structure with zero extent keeps the current frustum size.
        Returns ``self``.
        """
        self.centre = np.array(fit.centre, dtype=float)
        scale = fit.framing_scale(padding_factor)
        if scale > 0:
            self.frustum_size = scale
        return self

    def frustum(self, aspect: float) -> tuple[float, float, float, float]:
        """Orthographic bounds ``(left, right, top, bottom)``.

        Args:
            aspect: Viewport width divided by height.

        Raises:
            ValueError: If *aspect* is not positive.
        """
        if aspect <= 0:
            raise ValueError(f"aspect must be positive, got {aspect}")
        half = self.frustum_size / 2.0
        return (-half * aspect, half * aspect, half, -half)

    def reset(self) -> ViewState:
        """Restore the default orientation and zoom, keeping the framing."""
        self.rotation = _default_rotation()
        self.zoom = 1.0
        return self
