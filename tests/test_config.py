from __future__ import annotations

import pytest

from pyrefreshable.config import RefreshConfig
from pyrefreshable.exceptions import RefreshableConfigError
from pyrefreshable.strategies import stale_if_error, stale_while_revalidate


def test_defaults() -> None:
    config = RefreshConfig()
    assert config.strategy == "stale-while-revalidate"
    assert config.log_payloads is False
    assert config.resolve_strategy() is stale_while_revalidate


def test_unknown_strategy_rejected() -> None:
    with pytest.raises(RefreshableConfigError):
        RefreshConfig(strategy="cache-only")


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYREFRESHABLE_STRATEGY", "stale-if-error")
    monkeypatch.setenv("PYREFRESHABLE_LOG_PAYLOADS", "yes")

    config = RefreshConfig.from_env()

    assert config.resolve_strategy() is stale_if_error
    assert config.log_payloads is True


def test_from_env_defaults_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PYREFRESHABLE_STRATEGY", raising=False)
    monkeypatch.delenv("PYREFRESHABLE_LOG_PAYLOADS", raising=False)

    assert RefreshConfig.from_env() == RefreshConfig()


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYREFRESHABLE_STRATEGY", "stale-if-error")
    monkeypatch.setenv("PYREFRESHABLE_LOG_PAYLOADS", "1")

    config = RefreshConfig.from_env(strategy="stale-while-revalidate", log_payloads=False)

    assert config == RefreshConfig()


def test_from_env_invalid_bool(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYREFRESHABLE_LOG_PAYLOADS", "maybe")

    with pytest.raises(RefreshableConfigError, match="Invalid boolean"):
        RefreshConfig.from_env()
