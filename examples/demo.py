"""Demo script: render every built-in preset with matplotlib."""

import logging
from pathlib import Path

from latticeview import PRESETS, ViewerSession, setup_logging

OUTPUT = Path(__file__).resolve().parent / "output"


def main():
    setup_logging(logging.INFO)
    OUTPUT.mkdir(exist_ok=True)

    session = ViewerSession()
    for key, name in session.options():
        structure = session.select(key)
        print(f"{name}: {len(structure.atoms)} atoms, {len(structure.edges)} edges")
        structure.render_mpl(OUTPUT / f"{key}.png", view=session.view)

    prism = session.select("hcp", cell_shape="hexagonal_prism")
    prism.render_mpl(OUTPUT / "hcp_prism.png", view=session.view)
    print(f"Rendered {len(PRESETS) + 1} images to {OUTPUT}")


if __name__ == "__main__":
    main()
