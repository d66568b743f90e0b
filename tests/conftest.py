import pytest

from meanagg.config import ACCUMULATOR_ENV


@pytest.fixture(autouse=True)
def _clean_accumulator_env(monkeypatch):
    # a developer .env must not leak into the suite
    monkeypatch.delenv(ACCUMULATOR_ENV, raising=False)
