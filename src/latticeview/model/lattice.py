from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

import numpy as np

from latticeview._constants import ANGLE_TOLERANCE, HEXAGONAL_GAMMA
from latticeview.errors import InvalidLatticeError
from latticeview.model._util import _frozen_vector


class LatticeConvention(StrEnum):
    """Which construction is used to turn parameters into vectors.

    Attributes:
        GENERAL: The general triclinic formula.
        HEXAGONAL: ``alpha = beta = 90`` and ``gamma = 120`` (within
            tolerance), built directly with ``c`` along ``z``.
    """

    GENERAL = "general"
    HEXAGONAL = "hexagonal"


@dataclass(frozen=True)
class LatticeParameters:
    """Edge lengths and inter-axial angles of a unit cell.

    Attributes:
        a: Length of the first lattice vector.
        b: Length of the second lattice vector.
        c: Length of the third lattice vector.
        alpha: Angle between *b* and *c* in degrees.
        beta: Angle between *a* and *c* in degrees.
        gamma: Angle between *a* and *b* in degrees.

    Raises:
        InvalidLatticeError: If a length is not positive or an angle
            lies outside the open interval ``(0, 180)``.
    """

    a: float
    b: float
    c: float
    alpha: float = 90.0
    beta: float = 90.0
    gamma: float = 90.0

    def __post_init__(self) -> None:
        for name in ("a", "b", "c"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidLatticeError(
                    f"{name} must be positive, got {value}"
                )
        for name in ("alpha", "beta", "gamma"):
            value = getattr(self, name)
            if not 0.0 < value < 180.0:
                raise InvalidLatticeError(
                    f"{name} must be in (0, 180) degrees, got {value}"
                )

    @property
    def lengths(self) -> tuple[float, float, float]:
        """The edge lengths ``(a, b, c)``."""
        return (self.a, self.b, self.c)

    @property
    def angles(self) -> tuple[float, float, float]:
        """The angles ``(alpha, beta, gamma)`` in degrees."""
        return (self.alpha, self.beta, self.gamma)

    def convention(self, tol: float = ANGLE_TOLERANCE) -> LatticeConvention:
        """Classify the angle triple, comparing within *tol* degrees."""
        if (
            abs(self.alpha - 90.0) <= tol
            and abs(self.beta - 90.0) <= tol
            and abs(self.gamma - HEXAGONAL_GAMMA) <= tol
        ):
            return LatticeConvention.HEXAGONAL
        return LatticeConvention.GENERAL

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary."""
        return {
            "a": self.a, "b": self.b, "c": self.c,
            "alpha": self.alpha, "beta": self.beta, "gamma": self.gamma,
        }

    @classmethod
    def from_dict(cls, d: dict) -> LatticeParameters:
        """Deserialise from a dictionary.  Missing angles default to 90.

        Raises:
            InvalidLatticeError: If an edge length is missing.
        """
        for name in ("a", "b", "c"):
            if name not in d:
                raise InvalidLatticeError(f"lattice is missing edge length {name!r}")
        return cls(
            a=d["a"], b=d["b"], c=d["c"],
            alpha=d.get("alpha", 90.0),
            beta=d.get("beta", 90.0),
            gamma=d.get("gamma", 90.0),
        )


@dataclass(frozen=True, eq=False)
class LatticeVectors:
    """Cartesian images of the three crystallographic axes.

    The arrays are stored read-only; build a new instance rather than
    modifying one in place.

    Attributes:
        v1: First lattice vector, shape ``(3,)``.
        v2: Second lattice vector, shape ``(3,)``.
        v3: Third lattice vector, shape ``(3,)``.
    """

    v1: np.ndarray
    v2: np.ndarray
    v3: np.ndarray

    def __post_init__(self) -> None:
        for name in ("v1", "v2", "v3"):
            object.__setattr__(
                self, name, _frozen_vector(getattr(self, name), name),
            )

    @property
    def matrix(self) -> np.ndarray:
        """``(3, 3)`` lattice matrix with rows ``v1, v2, v3``."""
        return np.vstack([self.v1, self.v2, self.v3])

    @property
    def volume(self) -> float:
        """Unit cell volume, ``|v1 . (v2 x v3)|``."""
        return float(abs(np.dot(self.v1, np.cross(self.v2, self.v3))))

    def allclose(self, other: LatticeVectors, *, atol: float = 1e-9) -> bool:
        """Return whether all three vectors match *other* within *atol*."""
        return bool(np.allclose(self.matrix, other.matrix, rtol=0.0, atol=atol))
