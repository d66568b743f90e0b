# configuration comes from the environment, tests set it through monkeypatch only

import pytest

from meanagg.config import ACCUMULATOR_ENV, default_accumulator
from meanagg.models import DEFAULT_ACCUMULATOR, InvalidArgument, mean


def test_default_when_unset():
    assert default_accumulator() == DEFAULT_ACCUMULATOR == "float64"


def test_blank_value_means_default(monkeypatch):
    monkeypatch.setenv(ACCUMULATOR_ENV, "  ")
    assert default_accumulator() == "float64"


def test_valid_override(monkeypatch):
    monkeypatch.setenv(ACCUMULATOR_ENV, "float32")
    assert default_accumulator() == "float32"


def test_invalid_env_value_names_the_variable(monkeypatch):
    monkeypatch.setenv(ACCUMULATOR_ENV, "int32")
    with pytest.raises(InvalidArgument, match=ACCUMULATOR_ENV):
        default_accumulator()


@pytest.mark.parametrize("setting", ["int32", "bogus", "float16", "float32"])
def test_mean_ignores_environment(monkeypatch, setting):
    values = [0.1, 0.1, 0.1, 1000.3]
    expected = mean(values)

    monkeypatch.setenv(ACCUMULATOR_ENV, setting)
    assert mean([42, 34]) == 38
    assert mean(values) == expected


def test_mean_ignores_dotenv_file(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text(f"{ACCUMULATOR_ENV}=bogus\n")
    monkeypatch.chdir(tmp_path)
    assert mean([1, 2]) == 1.5
