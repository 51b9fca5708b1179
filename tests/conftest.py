"""Pytest configuration for repository-relative imports."""

import os
import sys

import matplotlib
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")

from phcurve.chemistry import TitrationParameters  # noqa: E402


@pytest.fixture
def weak_acid():
    """0.10 M ethanoic acid (pKa 4.76), 25.00 cm^3, against 0.10 M NaOH."""
    return TitrationParameters("acid", "weak", 0.10, 25.00, 0.10, 4.76)


@pytest.fixture
def weak_base():
    """0.10 M ammonia (pKb 4.75), 25.00 cm^3, against 0.10 M HCl."""
    return TitrationParameters("base", "weak", 0.10, 25.00, 0.10, 4.75)


@pytest.fixture
def strong_acid():
    """0.10 M HCl, 25.00 cm^3, against 0.10 M NaOH."""
    return TitrationParameters("acid", "strong", 0.10, 25.00, 0.10, float("nan"))


@pytest.fixture
def strong_base():
    """0.10 M NaOH, 25.00 cm^3, against 0.10 M HCl."""
    return TitrationParameters("base", "strong", 0.10, 25.00, 0.10, float("nan"))
