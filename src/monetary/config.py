from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import cache

from dotenv import dotenv_values, find_dotenv

logger = logging.getLogger(__name__)

DECIMAL_PRECISION_ENV_VAR = "MONETARY_DECIMAL_PRECISION"
DEFAULT_DECIMAL_PRECISION = 28


@dataclass(frozen=True)
class MonetaryConfig:
    """Settings used by `Money` arithmetic.

    Attributes:
        decimal_precision: Significant digits of the `decimal` context used for arithmetic.
    """

    decimal_precision: int = DEFAULT_DECIMAL_PRECISION


def _read_settings() -> dict[str, str | None]:
    """Merge `.env` values with the environment; the environment wins. Nothing is written back."""
    dotenv_path = find_dotenv(usecwd=True)
    file_values = dotenv_values(dotenv_path) if dotenv_path else {}
    return {**file_values, **os.environ}


def load_config() -> MonetaryConfig:
    """Read settings from the environment (and a `.env` file, when present).

    The `.env` file is only read; `os.environ` is never modified.

    Returns:
        MonetaryConfig: Settings with defaults for every missing variable.

    Raises:
        ValueError: If $MONETARY_DECIMAL_PRECISION is not a positive integer.
    """
    raw_precision = _read_settings().get(DECIMAL_PRECISION_ENV_VAR)
    if raw_precision is None or not raw_precision.strip():
        precision = DEFAULT_DECIMAL_PRECISION
    else:
        try:
            precision = int(raw_precision)
        except ValueError as e:
            raise ValueError(f"${DECIMAL_PRECISION_ENV_VAR} must be an integer, but provided value is: '{raw_precision}'") from e

        # Raise: decimal context needs at least one significant digit
        if precision < 1:
            raise ValueError(f"${DECIMAL_PRECISION_ENV_VAR} must be >= 1, but provided value is: {precision}")

    config = MonetaryConfig(decimal_precision=precision)
    logger.debug(f"Loaded {config}")
    return config


@cache
def get_config() -> MonetaryConfig:
    """Return the process-wide config, loading it on first use.

    Arithmetic reads settings through here, so invalid settings fall back to defaults
    (with a warning) instead of failing unrelated `Money` operations. Call `load_config`
    directly to get the validation error.
    """
    try:
        return load_config()
    except ValueError as e:
        logger.warning(f"Using default {MonetaryConfig()} because settings are invalid: {e}")
        return MonetaryConfig()


def reset_config() -> None:
    """Forget the cached config so the next `get_config` reloads it."""
    get_config.cache_clear()
