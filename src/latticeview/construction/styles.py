"""Style set save/load for JSON files."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from latticeview.model import LatticeParameters, RenderStyle

_VALID_SECTIONS = frozenset({"render_style", "lattices"})


@dataclass
class StyleSet:
    """A collection of settings loaded from or saved to a file.

    All fields are optional.  A ``StyleSet`` loaded from a file that
    only contains ``"render_style"`` will have ``lattices`` set to
    ``None``.

    Attributes:
        render_style: Global rendering parameters.
        lattices: Named lattice parameter sets, e.g. user variations
            of the built-in presets.
    """

    render_style: RenderStyle | None = None
    lattices: dict[str, LatticeParameters] | None = None


def save_styles(
    path: str | Path,
    *,
    render_style: RenderStyle | None = None,
    lattices: dict[str, LatticeParameters] | None = None,
) -> None:
    """Save settings to a JSON file.

    Only sections that are not ``None`` are written.  The file is
    human-readable with two-space indentation.

    Args:
        path: Destination file path.
        render_style: Global rendering parameters.
        lattices: Named lattice parameter sets.
    """
    data: dict = {}
    if render_style is not None:
        data["render_style"] = render_style.to_dict()
    if lattices is not None:
        data["lattices"] = {
            name: params.to_dict() for name, params in lattices.items()
        }

    Path(path).write_text(json.dumps(data, indent=2) + "\n")


def load_styles(path: str | Path) -> StyleSet:
    """Load settings from a JSON file.

    All sections are optional.  Unknown top-level keys raise
    :class:`ValueError`.

    Args:
        path: Source file path.

    Returns:
        A :class:`StyleSet` with the parsed sections.

    Raises:
        ValueError: If the file contains unknown top-level keys.
        InvalidLatticeError: If a stored lattice is not realisable.
    """
    data = json.loads(Path(path).read_text())

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in style file: {sorted(unknown)}"
        )

    render_style = None
    if "render_style" in data:
        render_style = RenderStyle.from_dict(data["render_style"])

    lattices = None
    if "lattices" in data:
        lattices = {
            name: LatticeParameters.from_dict(d)
            for name, d in data["lattices"].items()
        }

    return StyleSet(render_style=render_style, lattices=lattices)
