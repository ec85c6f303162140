from __future__ import annotations

import os

os.environ.setdefault("TTPLOT_BACKEND", "Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

import visualization  # noqa: E402,F401  (selects the backend)


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
