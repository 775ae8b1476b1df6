"""Labelled crystallographic axis lines drawn from the origin."""

from __future__ import annotations

import numpy as np

from latticeview.model import AxisLine, EdgeSegment

_AXIS_LABELS = ("a", "b", "c")


def build_axes(
    length: float = 3.0,
    *,
    label_offset: float = 0.2,
) -> list[AxisLine]:
    """Three axis lines along ``x``, ``y`` and ``z``, labelled a, b, c.

    Labels are anchored *label_offset* beyond each tip.

    Raises:
        ValueError: If *length* is not positive or *label_offset* is
            negative.
    """
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    if label_offset < 0:
        raise ValueError(
            f"label_offset must be non-negative, got {label_offset}"
        )
    origin = np.zeros(3)
    axes = []
    for label, direction in zip(_AXIS_LABELS, np.eye(3)):
        axes.append(AxisLine(
            label=label,
            segment=EdgeSegment(origin, direction * length),
            label_position=direction * (length + label_offset),
        ))
    return axes
