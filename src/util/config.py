"""Configuration for the classification core, read from the environment / .env."""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# .env at the project root (src/util/config.py -> project root)
_project_root = Path(__file__).parent.parent.parent
load_dotenv(_project_root / ".env")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Config:
    """Tree construction settings."""

    # identifiers whose gain falls strictly below this never split a node
    minimum_information_gain: float = 0.001
    # decimals of the gain printed in the trace
    gain_precision: int = 2
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from TAGTREE_* environment variables."""
        precision = _env_int("TAGTREE_GAIN_PRECISION", 2)
        if precision < 0:
            raise ValueError(f"TAGTREE_GAIN_PRECISION must not be negative, got {precision}")

        return cls(
            minimum_information_gain=_env_float("TAGTREE_MINIMUM_INFORMATION_GAIN", 0.001),
            gain_precision=precision,
            log_level=os.getenv("TAGTREE_LOG_LEVEL", "WARNING").upper(),
        )


def configure_logging(level: Optional[str] = None) -> None:
    """Root logging setup for scripts; the library modules never call this."""
    logging.basicConfig(
        format=LOG_FORMAT,
        level=(level or config.log_level).upper(),
        stream=sys.stdout,
    )


# Global config instance
config = Config.from_env()
