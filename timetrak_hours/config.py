from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .core import ConfigError

DEFAULT_BASE_URL = "https://rubixx.timetrakgo.com/api"
DEFAULT_EXPECTED_HOURS_PER_DAY = 7.4
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    expected_hours_per_day: float = DEFAULT_EXPECTED_HOURS_PER_DAY
    timeout: float = DEFAULT_TIMEOUT


def _float_env(name: str, default: float, *, allow_zero: bool) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc
    if value < 0 or (value == 0 and not allow_zero):
        raise ConfigError(f"{name} must be {'non-negative' if allow_zero else 'positive'}, got {raw!r}")
    return value


def load_settings(env_file: str | None = None) -> Settings:
    """Build Settings from the environment (and a .env file when present,
    by default the nearest one above the working directory).

    TIMETRAK_BASE_URL, TIMETRAK_EXPECTED_HOURS_PER_DAY and TIMETRAK_TIMEOUT are
    all optional.
    """
    env_file = env_file or find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file)

    base_url = (os.getenv("TIMETRAK_BASE_URL") or DEFAULT_BASE_URL).strip().rstrip("/")
    return Settings(
        base_url=base_url,
        expected_hours_per_day=_float_env(
            "TIMETRAK_EXPECTED_HOURS_PER_DAY", DEFAULT_EXPECTED_HOURS_PER_DAY, allow_zero=True
        ),
        timeout=_float_env("TIMETRAK_TIMEOUT", DEFAULT_TIMEOUT, allow_zero=False),
    )
