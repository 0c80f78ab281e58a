"""
Environment-driven settings.

Every setting is read on demand so tests can flip them with `monkeypatch.setenv`.

Variables:
- DEPLOYMENT_ID     -> presence switches the environment label to "production"
- BLOG_SEED_POSTS   -> seed the demo posts at startup (default: true)
- BLOG_HOME_PAGE    -> "html" (default) or "text" for `GET /`
- LOG_LEVEL         -> log level for the app loggers (default: INFO)
"""

from __future__ import annotations

import logging
import os

HOME_PAGE_VARIANTS = {"html", "text"}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default


def deployment_id() -> str:
    return os.environ.get("DEPLOYMENT_ID", "").strip()


def deployment_environment() -> str:
    return "production" if deployment_id() else "development"


def seed_posts_enabled() -> bool:
    return _env_bool("BLOG_SEED_POSTS", True)


def home_page_variant() -> str:
    variant = _env_str("BLOG_HOME_PAGE", "html").lower()
    if variant not in HOME_PAGE_VARIANTS:
        return "html"
    return variant


def log_level() -> int:
    name = _env_str("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names.
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """
    Attach a basic stderr handler if nothing else has (uvicorn or pytest usually has).
    """
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    for name in ("main", "core", "pages", "posts"):
        logging.getLogger(name).setLevel(log_level())
