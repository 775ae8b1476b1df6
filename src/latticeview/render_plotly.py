"""Interactive plotly 3D renderer with an orthographic camera."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from latticeview.construction.axes import build_axes
from latticeview.model import (
    CrystalStructure,
    EdgeSegment,
    RenderStyle,
    rgb_string,
)


def _line_coords(
    edges: Sequence[EdgeSegment],
    offset: np.ndarray,
) -> tuple[list[float | None], list[float | None], list[float | None]]:
    """Flatten segments into plotly line coordinates separated by ``None``."""
    xs: list[float | None] = []
    ys: list[float | None] = []
    zs: list[float | None] = []
    for edge in edges:
        a = edge.start + offset
        b = edge.end + offset
        xs.extend([float(a[0]), float(b[0]), None])
        ys.extend([float(a[1]), float(b[1]), None])
        zs.extend([float(a[2]), float(b[2]), None])
    return xs, ys, zs


def _build_traces(
    structure: CrystalStructure,
    style: RenderStyle,
    marker_scale: float,
) -> list:
    """Build edge, atom and axis traces, recentred on the origin."""
    import plotly.graph_objects as go

    offset = structure.offset
    traces = []

    if style.show_cell and structure.edges:
        xs, ys, zs = _line_coords(structure.edges, offset)
        cs = style.cell_style
        traces.append(go.Scatter3d(
            x=xs, y=ys, z=zs,
            mode="lines",
            line=dict(color=rgb_string(cs.colour), width=max(1.0, cs.line_width * 2)),
            name="cell",
            hoverinfo="skip",
        ))

    size = structure.atom_radius * style.atom_scale * marker_scale
    for category, atoms in structure.atoms_by_category().items():
        coords = np.array([atom.position for atom in atoms]) + offset
        traces.append(go.Scatter3d(
            x=coords[:, 0],
            y=coords[:, 1],
            z=coords[:, 2],
            mode="markers",
            marker=dict(size=size, color=rgb_string(style.category_colour(category))),
            name=f"atoms {category.value}",
            hovertext=[str(atom.kind) for atom in atoms],
            hoverinfo="text",
        ))

    if style.show_axes:
        axis_lines = build_axes(style.axes_length)
        xs, ys, zs = _line_coords([line.segment for line in axis_lines], offset)
        colour = rgb_string(style.axes_colour)
        traces.append(go.Scatter3d(
            x=xs, y=ys, z=zs,
            mode="lines",
            line=dict(color=colour, width=2),
            name="axes",
            hoverinfo="skip",
        ))
        labels = np.array([line.label_position for line in axis_lines]) + offset
        traces.append(go.Scatter3d(
            x=labels[:, 0],
            y=labels[:, 1],
            z=labels[:, 2],
            mode="text",
            text=[line.label for line in axis_lines],
            textfont=dict(color=colour, size=14),
            name="axis labels",
            hoverinfo="skip",
        ))

    return traces


def render_plotly(
    structure: CrystalStructure,
    *,
    style: RenderStyle | None = None,
    marker_scale: float = 40.0,
    width: int = 700,
    height: int = 700,
):
    """Render a built structure as an interactive plotly 3D figure.

    The structure is recentred on the origin and the scene ranges are
    set from the framing scale, so every preset fills the view the same
    way.  The camera uses orthographic projection.

    Args:
        structure: The structure to render.
        style: Visual style.  ``None`` uses the defaults.
        marker_scale: Marker size per unit of atom radius.
        width: Figure width in pixels.
        height: Figure height in pixels.

    Returns:
        A plotly ``Figure`` object.

    Raises:
        ImportError: If plotly is not installed.
    """
    try:
        import plotly.graph_objects as go
    except ImportError:
        raise ImportError(
            "plotly is required for render_plotly(). "
            "Install it with: pip install plotly"
        )

    if style is None:
        style = RenderStyle()

    fig = go.Figure(data=_build_traces(structure, style, marker_scale))

    half = structure.fit.framing_scale(style.padding_factor) / 2.0
    if half <= 0:
        half = 1.0
    axis = dict(range=[-half, half], visible=False)
    fig.update_layout(
        scene=dict(
            xaxis=axis,
            yaxis=axis,
            zaxis=axis,
            aspectmode="cube",
            bgcolor=rgb_string(style.background),
            camera=dict(
                projection=dict(type="orthographic"),
                eye=dict(x=1.25, y=1.25, z=1.25),
            ),
        ),
        width=width,
        height=height,
        title=structure.title or None,
        showlegend=False,
    )

    return fig
