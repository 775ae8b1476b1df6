"""Shared constants used across the model and construction layers."""

ANGLE_TOLERANCE: float = 1e-6
"""Tolerance (degrees) when matching angles to a lattice convention."""

SIN_GAMMA_TOLERANCE: float = 1e-10
"""Smallest ``|sin(gamma)|`` accepted before a cell is treated as flat."""

COS_SNAP_TOLERANCE: float = 1e-15
"""``cos(alpha)`` and ``cos(beta)`` below this magnitude snap to zero."""

HEXAGONAL_GAMMA: float = 120.0
"""Inter-axial angle gamma (degrees) of the hexagonal setting."""

DEFAULT_PADDING_FACTOR: float = 2.0
"""Camera frustum size as a multiple of the largest structure extent."""

DEFAULT_ATOM_RADIUS: float = 0.25
"""Display radius shared by the built-in presets."""
