from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from latticeview._constants import DEFAULT_ATOM_RADIUS
from latticeview.model.atoms import AtomKind, BasisAtom
from latticeview.model.lattice import LatticeParameters


class CellShape(StrEnum):
    """How the cell outline of a structure is drawn.

    Attributes:
        PARALLELEPIPED: The 12 edges of the cell spanned by the
            lattice vectors.
        HEXAGONAL_PRISM: The 18 edges of a hexagonal prism of radius
            ``a`` and height ``c``.
    """

    PARALLELEPIPED = "parallelepiped"
    HEXAGONAL_PRISM = "hexagonal_prism"


@dataclass(frozen=True)
class StructurePreset:
    """A named lattice configuration.

    Attributes:
        key: Identifier used for lookup (e.g. ``"fcc"``).
        display_name: Human-readable name for selectors.
        lattice: Lattice parameters.
        basis: Atoms in fractional coordinates, in drawing order.
        atom_radius: Display radius for the atom spheres.
        cell_shape: Default outline for this preset.

    Raises:
        ValueError: If *key* is empty or *atom_radius* is not positive.
    """

    key: str
    display_name: str
    lattice: LatticeParameters
    basis: tuple[BasisAtom, ...]
    atom_radius: float = DEFAULT_ATOM_RADIUS
    cell_shape: CellShape = CellShape.PARALLELEPIPED

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key must be a non-empty string")
        if self.atom_radius <= 0:
            raise ValueError(
                f"atom_radius must be positive, got {self.atom_radius}"
            )
        object.__setattr__(self, "basis", tuple(self.basis))
        if isinstance(self.cell_shape, str):
            object.__setattr__(self, "cell_shape", CellShape(self.cell_shape))

    @property
    def interior_basis(self) -> tuple[BasisAtom, ...]:
        """Basis atoms that are not cell corners."""
        return tuple(
            atom for atom in self.basis if atom.kind is not AtomKind.CORNER
        )
