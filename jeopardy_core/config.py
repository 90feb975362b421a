from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_API_URL = "https://jservice.io/api/"
MAX_CATEGORY_POOL = 100  # largest page the categories endpoint serves

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    num_categories: int = 6
    clues_per_category: int = 5
    category_pool: int = MAX_CATEGORY_POOL
    http_timeout: float = 10.0
    fetch_workers: int = 6
    placeholder: str = "?"
    log_level: str = "INFO"


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Reads JEOPARDY_* variables; unset or empty values fall back to the defaults."""
    env = os.environ if environ is None else environ
    api_url = env.get("JEOPARDY_API_URL", "").strip() or DEFAULT_API_URL
    if not api_url.endswith("/"):
        api_url += "/"
    return Settings(
        api_url=api_url,
        num_categories=_int_env(env, "JEOPARDY_NUM_CATEGORIES", 6),
        clues_per_category=_int_env(env, "JEOPARDY_CLUES_PER_CATEGORY", 5),
        category_pool=min(_int_env(env, "JEOPARDY_CATEGORY_POOL", MAX_CATEGORY_POOL), MAX_CATEGORY_POOL),
        http_timeout=_float_env(env, "JEOPARDY_HTTP_TIMEOUT", 10.0),
        fetch_workers=_int_env(env, "JEOPARDY_FETCH_WORKERS", 6),
        placeholder=env.get("JEOPARDY_PLACEHOLDER", "?") or "?",
        log_level=(env.get("JEOPARDY_LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT, datefmt=LOG_DATEFMT)
