"""Exception types raised by the lattice geometry engine.

Each error also subclasses the closest built-in exception, so callers
that only know about ``ValueError`` or ``KeyError`` still catch them.
"""

from __future__ import annotations


class LatticeViewError(Exception):
    """Base class for all latticeview errors."""


class InvalidLatticeError(LatticeViewError, ValueError):
    """A lattice parameter set cannot be realised as a unit cell.

    Raised for non-positive edge lengths, angles outside ``(0, 180)``,
    ``sin(gamma)`` too close to zero, or angle triples whose cell
    height would need the square root of a negative number.
    """


class UnknownPresetError(LatticeViewError, KeyError):
    """A preset key is not registered in the catalog.

    Attributes:
        key: The key that was looked up.
        available: The keys that are registered.
    """

    def __init__(self, key: str, available: tuple[str, ...] = ()) -> None:
        self.key = key
        self.available = available
        message = f"unknown preset {key!r}"
        if available:
            message += f"; available presets: {', '.join(available)}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])


class EmptyGeometryError(LatticeViewError, ValueError):
    """A bounding box was requested for an empty set of points."""
