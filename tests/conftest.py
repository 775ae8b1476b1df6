"""Shared test fixtures for latticeview."""

import matplotlib

matplotlib.use("Agg")

import pytest

from latticeview.construction.structure_builder import build_structure
from latticeview.model import LatticeParameters


@pytest.fixture
def cubic_params():
    """Return a 3 x 3 x 3 cubic parameter set."""
    return LatticeParameters(3.0, 3.0, 3.0, 90.0, 90.0, 90.0)


@pytest.fixture
def sc_structure():
    """Return the built simple cubic preset."""
    return build_structure("sc")


@pytest.fixture
def fcc_structure():
    """Return the built face-centred cubic preset."""
    return build_structure("fcc")
