"""Interactive session state: the currently displayed structure.

A :class:`ViewerSession` holds exactly one :class:`CrystalStructure` at
a time.  Selecting a preset builds the new structure completely before
it replaces the old one, so observers never see a half-built state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from latticeview.construction.presets import PRESETS, display_names
from latticeview.construction.structure_builder import build_structure
from latticeview.errors import UnknownPresetError
from latticeview.model import (
    CellShape,
    CrystalStructure,
    RenderStyle,
    StructurePreset,
    ViewState,
)

logger = logging.getLogger(__name__)

StructureListener = Callable[[CrystalStructure], None]


class ViewerSession:
    """Owns the current structure, camera and style of a viewer.

    Example::

        session = ViewerSession()
        session.add_listener(redraw)
        session.select("fcc")
        left, right, top, bottom = session.resize(800, 600)

    Args:
        catalog: Presets available for selection.
        style: Render style; its ``padding_factor`` sizes the frustum.
        view: Initial camera state.
    """

    def __init__(
        self,
        catalog: Mapping[str, StructurePreset] = PRESETS,
        *,
        style: RenderStyle | None = None,
        view: ViewState | None = None,
    ) -> None:
        self.catalog = catalog
        self.style = style if style is not None else RenderStyle()
        self.view = view if view is not None else ViewState()
        self._current: CrystalStructure | None = None
        self._listeners: list[StructureListener] = []

    @property
    def current(self) -> CrystalStructure | None:
        """The structure on display, or ``None`` before the first selection."""
        return self._current

    def options(self) -> list[tuple[str, str]]:
        """``(key, display_name)`` pairs for a preset selector."""
        return display_names(self.catalog)

    def add_listener(self, callback: StructureListener) -> None:
        """Call *callback* with each newly selected structure."""
        self._listeners.append(callback)

    def select(
        self,
        key: str,
        *,
        cell_shape: CellShape | str | None = None,
    ) -> CrystalStructure | None:
        """Switch to the preset registered under *key*.

        An unknown key is logged and ignored: the previous structure
        stays on display and is returned.  Degenerate lattice data
        raises.

        Returns:
            The structure now on display.

        Raises:
            InvalidLatticeError: If the preset's lattice is degenerate.
        """
        try:
            structure = build_structure(
                key, cell_shape=cell_shape, catalog=self.catalog,
            )
        except UnknownPresetError as exc:
            logger.warning("Ignoring preset selection: %s", exc)
            return self._current

        self._current = structure
        self.view.frame(structure.fit, self.style.padding_factor)
        logger.info("Displaying %s", structure.title)
        for callback in self._listeners:
            callback(structure)
        return structure

    def reset_view(self) -> ViewState:
        """Restore the default camera orientation around the current structure."""
        self.view.reset()
        if self._current is not None:
            self.view.frame(self._current.fit, self.style.padding_factor)
        return self.view

    def resize(self, width: float, height: float) -> tuple[float, float, float, float]:
        """Frustum bounds ``(left, right, top, bottom)`` for a new viewport.

        Raises:
            ValueError: If *width* or *height* is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(
                f"viewport size must be positive, got {width}x{height}"
            )
        return self.view.frustum(width / height)
