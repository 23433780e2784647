"""
Runtime configuration.

Settings come from environment variables, optionally loaded from a
``.env`` file in the working directory:

    MATHIT_SEED              session seed (random when unset)
    MATHIT_START_LEVEL       zero-based level to start at (default 0)
    MATHIT_LOG_LEVEL         logging level name (default WARNING)
    MATHIT_SOLVER_MAX_NODES  node budget of the solver (default 200000)
    SENTRY_DSN               enables error monitoring when set
    ENVIRONMENT              Sentry environment (default development)
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import os

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SOLVER_MAX_NODES = 200_000


@dataclass
class EngineConfig:
    """
    Settings shared by the CLI and embedding applications.

    Attributes:
        seed: Session seed (None = draw a random one).
        start_level: Zero-based level index to start at.
        log_level: Name of the logging level.
        solver_max_nodes: Node budget for PuzzleSolver.
        sentry_dsn: Sentry DSN (None = monitoring disabled).
        environment: Sentry environment name.
    """
    seed: Optional[int] = None
    start_level: int = 0
    log_level: str = DEFAULT_LOG_LEVEL
    solver_max_nodes: int = DEFAULT_SOLVER_MAX_NODES
    sentry_dsn: Optional[str] = None
    environment: str = "development"

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        value = logging.getLevelName(self.log_level.upper())
        return value if isinstance(value, int) else logging.WARNING


def _int_setting(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def load_config(env: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> EngineConfig:
    """
    Build an EngineConfig from the environment.

    Args:
        env: Mapping to read instead of ``os.environ`` (tests).
        dotenv: Load ``.env`` into ``os.environ`` first.

    Raises:
        ValueError: A numeric setting is malformed.
    """
    if env is None:
        if dotenv:
            load_dotenv()
        env = os.environ

    return EngineConfig(
        seed=_int_setting(env, "MATHIT_SEED", None),
        start_level=_int_setting(env, "MATHIT_START_LEVEL", 0),
        log_level=env.get("MATHIT_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        solver_max_nodes=_int_setting(env, "MATHIT_SOLVER_MAX_NODES", DEFAULT_SOLVER_MAX_NODES),
        sentry_dsn=env.get("SENTRY_DSN") or None,
        environment=env.get("ENVIRONMENT", "development"),
    )


__all__ = ['EngineConfig', 'load_config']
