"""Configuration for pyrefreshable."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyrefreshable.exceptions import RefreshableConfigError
from pyrefreshable.strategies import RefreshStrategy, get_strategy


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise RefreshableConfigError(f"Invalid boolean value: {value!r}")


@dataclasses.dataclass(frozen=True)
class RefreshConfig:
    """Refresh configuration.

    Parameters
    ----------
    strategy : str
        Name of the refresh strategy, ``"stale-while-revalidate"`` or
        ``"stale-if-error"``.
    log_payloads : bool
        Include the (redacted) payload of settled fetches in DEBUG logs.
    """

    strategy: str = "stale-while-revalidate"
    log_payloads: bool = False

    def __post_init__(self) -> None:
        # Unknown names are rejected at construction.
        get_strategy(self.strategy)

    def resolve_strategy(self) -> RefreshStrategy:
        return get_strategy(self.strategy)

    @classmethod
    def from_env(cls, **overrides: Any) -> RefreshConfig:
        """Create configuration from environment variables.

        Reads ``PYREFRESHABLE_STRATEGY`` and ``PYREFRESHABLE_LOG_PAYLOADS``.
        Explicit keyword arguments override environment values.

        Raises
        ------
        RefreshableConfigError
            If a variable holds an unknown strategy or an invalid boolean.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        strategy_env = env.get("PYREFRESHABLE_STRATEGY")
        if strategy_env is not None:
            config_kwargs["strategy"] = strategy_env

        if "log_payloads" not in overrides:
            config_kwargs["log_payloads"] = _env_bool(env.get("PYREFRESHABLE_LOG_PAYLOADS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
