from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import UsageError

DEFAULT_TIMEOUT_S = 30.0
DEFAULT_LOG_LEVEL = "INFO"

TIMEOUT_ENV = "TEZOS_SMOKE_TIMEOUT"
LOG_LEVEL_ENV = "TEZOS_SMOKE_LOG_LEVEL"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class SmokeConfig:
    """Connection settings shared by the prober and every check."""

    base_url: str
    chain: str
    auth_token: str | None = None
    timeout_s: float = DEFAULT_TIMEOUT_S
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        base_url: str,
        chain: str,
        auth_token: str | None = None,
        timeout_s: float | None = None,
        log_level: str | None = None,
    ) -> "SmokeConfig":
        """
        Build a config, falling back to `TEZOS_SMOKE_*` variables for anything not passed.

        Raises `UsageError` on malformed values.
        """

        source = os.environ if env is None else env

        if not base_url.strip():
            raise UsageError("base-url must not be empty")
        if not chain.strip():
            raise UsageError("sys-chain must not be empty")

        if timeout_s is None:
            raw_timeout = source.get(TIMEOUT_ENV, "").strip()
            if raw_timeout:
                try:
                    timeout_s = float(raw_timeout)
                except ValueError as exc:
                    raise UsageError(f"Invalid {TIMEOUT_ENV}: {raw_timeout!r}") from exc
            else:
                timeout_s = DEFAULT_TIMEOUT_S
        if timeout_s <= 0:
            raise UsageError(f"Timeout must be positive, got {timeout_s}")

        if log_level is None:
            log_level = source.get(LOG_LEVEL_ENV, "").strip() or DEFAULT_LOG_LEVEL
        log_level = log_level.upper()
        if log_level not in _LOG_LEVELS:
            raise UsageError(f"Invalid log level: {log_level!r} (expected one of {', '.join(_LOG_LEVELS)})")

        return cls(
            base_url=base_url.strip(),
            chain=chain.strip(),
            auth_token=auth_token or None,
            timeout_s=timeout_s,
            log_level=log_level,
        )
