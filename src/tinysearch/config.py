# src/tinysearch/config.py
"""
Shared constants and run-time settings.

Constants describe fixed formats (the crawler marker file, the shortest
indexed word, the query operators). `Settings` collects the knobs a run
may change, read from the environment and then overridden by CLI flags.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import FrozenSet, Mapping, Optional


# -------------------------
# Fixed formats
# -------------------------

MIN_WORD_LENGTH = 3

AND_WORD = "and"
OR_WORD = "or"
OPERATORS: FrozenSet[str] = frozenset({AND_WORD, OR_WORD})

CRAWLER_MARKER = ".crawler"
MAX_CRAWL_DEPTH = 10

SEPARATOR = "-" * 47
PROMPT = "Query? "


# -------------------------
# Run-time settings
# -------------------------

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_CRAWL_DELAY = 1.0    # seconds between two fetches
DEFAULT_TIMEOUT = 10.0       # seconds per HTTP request
DEFAULT_USER_AGENT = "tinysearch/0.1 (+https://example.invalid/tinysearch)"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class Settings:
    """
    Knobs for one run.

    Attributes:
        log_level: name of the logging level for the root logger.
        crawl_delay: pause before each fetch after the first, in seconds.
        timeout: HTTP request timeout, in seconds.
        user_agent: User-Agent header sent by the crawler.
    """
    log_level: str = DEFAULT_LOG_LEVEL
    crawl_delay: float = DEFAULT_CRAWL_DELAY
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if self.crawl_delay < 0:
            raise ValueError("crawl_delay must be >= 0")
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from TINYSEARCH_* environment variables."""
        env = os.environ if env is None else env
        return cls(
            log_level=env.get("TINYSEARCH_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            crawl_delay=_env_float(env, "TINYSEARCH_CRAWL_DELAY", DEFAULT_CRAWL_DELAY),
            timeout=_env_float(env, "TINYSEARCH_TIMEOUT", DEFAULT_TIMEOUT),
            user_agent=env.get("TINYSEARCH_USER_AGENT", DEFAULT_USER_AGENT),
        )

    def level(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        value = logging.getLevelName(self.log_level.upper())
        return value if isinstance(value, int) else logging.WARNING
