"""Rendering: thin matplotlib adapter over built structures."""

from latticeview.rendering.static import render_mpl

__all__ = [
    "render_mpl",
]
