"""Pytest configuration: repository-relative imports, headless plotting, shared states."""

import os
import sys

import matplotlib
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")

from burette.schema import TitrationState, TitrationType  # noqa: E402


@pytest.fixture()
def make_state():
    """Factory for 0.100 M / 25.00 mL analyte against 0.100 M titrant."""

    def _make(kind, titrant_vol=0.0, **overrides):
        params = dict(
            type=TitrationType(kind),
            analyte_conc=0.100,
            analyte_vol=25.00,
            titrant_conc=0.100,
            titrant_vol=titrant_vol,
            titrant_max=50.00,
        )
        params.update(overrides)
        return TitrationState(**params)

    return _make
