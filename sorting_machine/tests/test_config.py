import pytest

from ..config import Strategy, default_strategy


def test_default_strategy(monkeypatch):
    monkeypatch.delenv("SORTING_MACHINE_STRATEGY", raising=False)
    assert default_strategy() is Strategy.DEFERRED


@pytest.mark.parametrize("value, expected", [("incremental", Strategy.INCREMENTAL), (" Deferred ", Strategy.DEFERRED)])
def test_strategy_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("SORTING_MACHINE_STRATEGY", value)
    assert default_strategy() is expected


def test_unknown_strategy(monkeypatch):
    monkeypatch.setenv("SORTING_MACHINE_STRATEGY", "eager")
    with pytest.raises(ValueError, match="eager"):
        default_strategy()
