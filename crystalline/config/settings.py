"""
Crystalline Settings - Environment Configuration & Logging Setup

Variables:
  CRYSTALLINE_LEDGER_PATH  - JSONL audit ledger file (empty = in-memory)
  CRYSTALLINE_POLICY_PATH  - JSON rule policy loaded at startup (optional)
  CRYSTALLINE_STRATEGY     - STANDARD_WEIGHTED | STRICT_SAFETY
  CRYSTALLINE_LOG_LEVEL    - DEBUG | INFO | WARNING | ERROR

Invalid values fail fast with a ValueError naming the variable.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from crystalline.phase04_resolution.resolution_types import ResolutionStrategy

logger = logging.getLogger("crystalline.config")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class ArbiterSettings:
    ledger_path: str
    policy_path: str
    strategy: ResolutionStrategy
    log_level: str


def _read(env: Mapping[str, str], name: str, default: str = "") -> str:
    return env.get(name, default).strip()


def load_settings(env: Optional[Mapping[str, str]] = None) -> ArbiterSettings:
    """Read settings from the environment.

    Args:
        env: Mapping to read instead of os.environ

    Returns:
        ArbiterSettings

    Raises:
        ValueError: Unknown strategy or log level
    """
    env = os.environ if env is None else env

    strategy_name = _read(env, "CRYSTALLINE_STRATEGY", "STANDARD_WEIGHTED").upper()
    try:
        strategy = ResolutionStrategy[strategy_name]
    except KeyError:
        raise ValueError(
            f"CRYSTALLINE_STRATEGY must be one of "
            f"{[s.name for s in ResolutionStrategy]}, got {strategy_name!r}"
        ) from None

    log_level = _read(env, "CRYSTALLINE_LOG_LEVEL", "INFO").upper()
    if log_level not in VALID_LOG_LEVELS:
        raise ValueError(f"CRYSTALLINE_LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got {log_level!r}")

    policy_path = _read(env, "CRYSTALLINE_POLICY_PATH")
    if policy_path and not os.path.isfile(policy_path):
        raise ValueError(f"CRYSTALLINE_POLICY_PATH does not exist: {policy_path}")

    return ArbiterSettings(
        ledger_path=_read(env, "CRYSTALLINE_LEDGER_PATH"),
        policy_path=policy_path,
        strategy=strategy,
        log_level=log_level,
    )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for an entry point."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def log_settings_summary(settings: ArbiterSettings) -> None:
    """Log effective settings at startup."""
    logger.info("=" * 50)
    logger.info("CRYSTALLINE ARBITER - settings")
    logger.info("  Strategy: %s", settings.strategy.name)
    logger.info("  Ledger:   %s", settings.ledger_path or "(in-memory)")
    logger.info("  Policy:   %s", settings.policy_path or "(none)")
    logger.info("=" * 50)
