"""Static matplotlib renderer: :func:`render_mpl` entry point."""

from __future__ import annotations

from dataclasses import fields, replace
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection, PolyCollection
from matplotlib.figure import Figure

from latticeview.construction.axes import build_axes
from latticeview.model import (
    CrystalStructure,
    RenderStyle,
    ViewState,
    normalise_colour,
)
from latticeview.rendering.projection import _make_unit_circle, _project_segments

_STYLE_FIELDS = frozenset(f.name for f in fields(RenderStyle))
_DEFAULT_RENDER_STYLE = RenderStyle()

_AXES_FONT_SIZE = 12.0
_CIRCLE_SEGMENTS = 48


def _resolve_style(
    style: RenderStyle | None,
    **kwargs: Any,
) -> RenderStyle:
    """Build a :class:`RenderStyle` from an optional base plus overrides.

    Any kwarg whose name matches a ``RenderStyle`` field replaces that
    field's value.  Passing ``None`` is treated as "not provided" and
    preserves the base value.

    Raises:
        TypeError: If a kwarg name does not match any ``RenderStyle`` field.
    """
    unknown = kwargs.keys() - _STYLE_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown style keyword argument(s): {', '.join(sorted(unknown))}"
        )

    s = style if style is not None else replace(_DEFAULT_RENDER_STYLE)
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    if overrides:
        s = replace(s, **overrides)
    return s


def _draw_structure(
    ax: Axes,
    structure: CrystalStructure,
    view: ViewState,
    style: RenderStyle,
    aspect: float,
) -> None:
    """Draw axes, cell outline and atoms of *structure* into *ax*.

    Axis lines sit underneath the cell outline, which sits underneath
    the atoms.  Atoms are painted back-to-front.
    """
    if style.show_axes:
        axes_rgb = normalise_colour(style.axes_colour)
        axis_lines = build_axes(style.axes_length)
        segs = _project_segments([line.segment for line in axis_lines], view)
        ax.add_collection(LineCollection(
            segs, colors=[axes_rgb], linewidths=1.0, zorder=1,
        ))
        label_xy, _, _ = view.project(
            np.array([line.label_position for line in axis_lines])
        )
        for line, (x, y) in zip(axis_lines, label_xy):
            ax.text(
                x, y, line.label, color=axes_rgb, fontsize=_AXES_FONT_SIZE,
                ha="center", va="center", zorder=1,
            )

    if style.show_cell and structure.edges:
        cs = style.cell_style
        segs = _project_segments(structure.edges, view)
        ax.add_collection(LineCollection(
            segs,
            colors=[normalise_colour(cs.colour)],
            linewidths=cs.line_width,
            linestyles=cs.linestyle,
            zorder=2,
        ))

    if structure.atoms:
        radius = structure.atom_radius * style.atom_scale
        radii = np.full(len(structure.atoms), radius)
        xy, depth, proj_r = view.project(structure.coords, radii)
        order = np.argsort(depth, kind="stable")  # back to front
        circle = _make_unit_circle(_CIRCLE_SEGMENTS)
        verts = [xy[i] + circle * proj_r[i] for i in order]
        colours = [
            style.category_colour(structure.atoms[i].category) for i in order
        ]
        ax.add_collection(PolyCollection(
            verts, facecolors=colours, edgecolors=(0.15, 0.15, 0.15),
            linewidths=0.5, zorder=3,
        ))

    left, right, top, bottom = view.frustum(aspect)
    ax.set_xlim(left, right)
    ax.set_ylim(bottom, top)
    ax.set_aspect("equal")
    ax.axis("off")


def render_mpl(
    structure: CrystalStructure,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    view: ViewState | None = None,
    style: RenderStyle | None = None,
    figsize: tuple[float, float] = (5.0, 5.0),
    dpi: int = 150,
    show: bool | None = None,
    **style_kwargs: object,
) -> Figure:
    """Render a built structure as a static matplotlib figure.

    Example usage::

        structure = build_structure("fcc")

        # Save to file (no interactive window):
        render_mpl(structure, "fcc.png")

        # Look straight down the c axis without the axis lines:
        view = ViewState().look_along([0, 0, -1])
        view.frame(structure.fit)
        render_mpl(structure, "fcc_c.svg", view=view, show_axes=False)

    Args:
        structure: The structure to render.
        output: Optional file path to save the figure.  The format is
            inferred from the extension.  Ignored when *ax* is provided.
        ax: Optional matplotlib :class:`~matplotlib.axes.Axes` to draw
            into.  The caller keeps control of the parent figure and
            the *output*, *figsize*, *dpi* and *show* parameters are
            ignored.
        view: Camera state.  ``None`` frames the structure from the
            default camera position.
        style: A :class:`RenderStyle`.  Any of its field names may also
            be passed as a keyword argument to override single fields.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Resolution for raster output formats.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None``.
        **style_kwargs: :class:`RenderStyle` field overrides.  Unknown
            names raise :class:`TypeError`.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.
    """
    resolved = _resolve_style(style, **style_kwargs)
    if view is None:
        view = ViewState().frame(structure.fit, resolved.padding_factor)

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        bbox = ax.get_position()
        fig_w, fig_h = fig.get_size_inches()
        aspect = (bbox.width * fig_w) / (bbox.height * fig_h)
        _draw_structure(ax, structure, view, resolved, aspect)
        return fig

    bg_rgb = normalise_colour(resolved.background)
    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    fig.set_facecolor(bg_rgb)
    ax.set_facecolor(bg_rgb)

    _draw_structure(ax, structure, view, resolved, figsize[0] / figsize[1])

    if output is not None:
        fig.savefig(str(output), dpi=dpi, facecolor=bg_rgb)

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
