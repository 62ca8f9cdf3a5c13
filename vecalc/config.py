"""
Configuration for vecalc.

Defaults live in VectorConfig. VectorConfig.from_env() overrides them from
VECALC_* environment variables, which is how the HTTP service is configured
when it runs in its own process or container.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from vecalc.math_utils import DEFAULT_TOLERANCE, EQUALITY_MODES, SIGNED_SUM

ENV_PREFIX = "VECALC_"


@dataclass(frozen=True)
class VectorConfig:
    """
    Runtime settings.

    Attributes:
        tolerance:     Threshold used by the zero/equality/orthogonality checks.
        equality_mode: "signed_sum" or "max_abs" (see math_utils.are_equal).
        host:          Bind address for the HTTP service.
        port:          Bind port for the HTTP service.
        log_level:     Name of the logging level applied by configure_logging().
        max_history:   Number of degenerate-input events the monitor keeps.
    """
    tolerance: float = DEFAULT_TOLERANCE
    equality_mode: str = SIGNED_SUM
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    max_history: int = 1000

    def __post_init__(self):
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be non-negative (got {self.tolerance})")
        if self.equality_mode not in EQUALITY_MODES:
            raise ValueError(
                f"equality_mode must be one of {EQUALITY_MODES} (got {self.equality_mode!r})"
            )
        if not 0 < self.port < 65536:
            raise ValueError(f"port out of range: {self.port}")
        if self.max_history <= 0:
            raise ValueError(f"max_history must be positive (got {self.max_history})")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "VectorConfig":
        """Build a config from VECALC_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            tolerance=_read(env, "TOLERANCE", float, defaults.tolerance),
            equality_mode=env.get(ENV_PREFIX + "EQUALITY_MODE", defaults.equality_mode).lower(),
            host=env.get(ENV_PREFIX + "HOST", defaults.host),
            port=_read(env, "PORT", int, defaults.port),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
            max_history=_read(env, "MAX_HISTORY", int, defaults.max_history),
        )

    def with_overrides(self, **changes) -> "VectorConfig":
        return replace(self, **changes)


def _read(env: Mapping[str, str], name: str, cast, default):
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid value for {ENV_PREFIX + name}: {raw!r}") from exc


def configure_logging(config: VectorConfig) -> None:
    """Apply the configured level to the root logger."""
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
