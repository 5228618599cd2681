import matplotlib

matplotlib.use("Agg")

import pytest

from crucible_lab.problems.samples import corridor_grid, reference_grid, ultra_grid


@pytest.fixture(autouse=True)
def _no_env_bounds(monkeypatch):
    monkeypatch.delenv("CRUCIBLE_MIN_RUN", raising=False)
    monkeypatch.delenv("CRUCIBLE_MAX_RUN", raising=False)


@pytest.fixture
def reference():
    return reference_grid()


@pytest.fixture
def ultra():
    return ultra_grid()


@pytest.fixture
def corridor():
    return corridor_grid()
