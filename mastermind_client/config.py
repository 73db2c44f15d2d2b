"""
Single place to:
- Read client settings from the environment (or a local .env)
- Fall back to the public Mastermind server when nothing is set
- Hand one Settings object to the API client and the CLI

Every value can still be overridden from the command line (see main.py).
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# 1) Load env vars from .env if present
load_dotenv()

DEFAULT_API_URL = "https://mastermind.darkube.app"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    # 2) Pull the values, keeping the defaults for anything unset or blank.
    api_url = os.getenv("MASTERMIND_API_URL") or DEFAULT_API_URL
    raw_timeout = os.getenv("MASTERMIND_TIMEOUT") or str(DEFAULT_TIMEOUT)
    log_level = (os.getenv("MASTERMIND_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

    # 3) A timeout we cannot use is a setup mistake, not something to guess around.
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise RuntimeError(
            f"MASTERMIND_TIMEOUT must be a number of seconds, got {raw_timeout!r}."
        )
    if timeout <= 0:
        raise RuntimeError("MASTERMIND_TIMEOUT must be greater than zero.")

    return Settings(api_url=api_url.rstrip("/"), timeout=timeout, log_level=log_level)
