"""Built-in lattice presets, keyed by identifier.

The catalog is read-only for the lifetime of the process.  Interior
fractional positions (body centre, face centres, the hexagonal
close-packed interstitials) are the crystallographic sites of each
structure and must not be rounded.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from latticeview._constants import DEFAULT_ATOM_RADIUS
from latticeview.errors import UnknownPresetError
from latticeview.model import AtomKind, BasisAtom, LatticeParameters, StructurePreset


def corners(kind: AtomKind = AtomKind.CORNER) -> tuple[BasisAtom, ...]:
    """The 8 cell corners."""
    positions = [
        (0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1),
        (1, 1, 0), (1, 0, 1), (0, 1, 1), (1, 1, 1),
    ]
    return tuple(BasisAtom(pos, kind) for pos in positions)


def body_centre(kind: AtomKind = AtomKind.BODY_CENTRE) -> tuple[BasisAtom, ...]:
    """The single body-centre atom."""
    return (BasisAtom((0.5, 0.5, 0.5), kind),)


def face_centres(kind: AtomKind = AtomKind.FACE_CENTRE) -> tuple[BasisAtom, ...]:
    """The 6 face-centre atoms."""
    positions = [
        (0.5, 0.5, 0), (0.5, 0, 0.5), (0, 0.5, 0.5),
        (1, 0.5, 0.5), (0.5, 1, 0.5), (0.5, 0.5, 1),
    ]
    return tuple(BasisAtom(pos, kind) for pos in positions)


def hcp_interstitials(
    kind: AtomKind = AtomKind.INTERSTITIAL_HCP,
) -> tuple[BasisAtom, ...]:
    """The two interior atoms of the hexagonal close-packed cell."""
    return (
        BasisAtom((1 / 3, 2 / 3, 0.5), kind),
        BasisAtom((2 / 3, 1 / 3, 0.5), kind),
    )


def _preset(
    key: str,
    name: str,
    lattice: LatticeParameters,
    basis: tuple[BasisAtom, ...],
) -> StructurePreset:
    return StructurePreset(
        key=key,
        display_name=name,
        lattice=lattice,
        basis=basis,
        atom_radius=DEFAULT_ATOM_RADIUS,
    )


_PRESET_LIST = [
    _preset("sc", "Simple Cubic",
            LatticeParameters(3, 3, 3, 90, 90, 90), corners()),
    _preset("tetragonal", "Tetragonal",
            LatticeParameters(3, 3, 4, 90, 90, 90), corners()),
    _preset("orthorhombic", "Orthorhombic",
            LatticeParameters(3, 4, 5, 90, 90, 90), corners()),
    _preset("rhombohedral", "Rhombohedral",
            LatticeParameters(3, 3, 3, 80, 80, 80), corners()),
    _preset("monoclinic", "Monoclinic",
            LatticeParameters(3, 4, 5, 90, 110, 90), corners()),
    _preset("triclinic", "Triclinic",
            LatticeParameters(3, 4, 5, 70, 80, 90), corners()),
    _preset("hexagonal", "Hexagonal",
            LatticeParameters(3, 3, 5, 90, 90, 120), corners()),
    _preset("bcc", "Body-Centered Cubic",
            LatticeParameters(3.5, 3.5, 3.5, 90, 90, 90),
            corners() + body_centre()),
    _preset("fcc", "Face-Centered Cubic",
            LatticeParameters(4, 4, 4, 90, 90, 90),
            corners() + face_centres()),
    _preset("hcp", "Hexagonal Close-Packed",
            LatticeParameters(3, 3, 4.9, 90, 90, 120),
            corners() + hcp_interstitials()),
]

#: All built-in presets in display order.  Read-only.
PRESETS: Mapping[str, StructurePreset] = MappingProxyType(
    {preset.key: preset for preset in _PRESET_LIST}
)


def lookup(
    key: str,
    catalog: Mapping[str, StructurePreset] = PRESETS,
) -> StructurePreset:
    """Return the preset registered under *key*.

    Raises:
        UnknownPresetError: If *key* is not in *catalog*.
    """
    try:
        return catalog[key]
    except KeyError:
        raise UnknownPresetError(key, tuple(catalog)) from None


def preset_keys(catalog: Mapping[str, StructurePreset] = PRESETS) -> list[str]:
    """Preset keys in display order."""
    return list(catalog)


def display_names(
    catalog: Mapping[str, StructurePreset] = PRESETS,
) -> list[tuple[str, str]]:
    """``(key, display_name)`` pairs, for populating a selector."""
    return [(key, preset.display_name) for key, preset in catalog.items()]
