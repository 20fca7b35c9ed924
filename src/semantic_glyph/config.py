import logging
import os

from pydantic import BaseModel, ConfigDict

from semantic_glyph.core.categories import normalize_category
from semantic_glyph.models import GlyphCategory

ENV_PREFIX = "SEMANTIC_GLYPH_"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Host preferences. The core never reads these itself; callers pass them in."""

    model_config = ConfigDict(frozen=True)

    suggestion_threshold: float = 0.5
    enabled_categories: frozenset[GlyphCategory] | None = None
    log_level: str = "WARNING"

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _threshold() -> float:
    raw = os.getenv(f"{ENV_PREFIX}SUGGESTION_THRESHOLD", "0.5")
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}SUGGESTION_THRESHOLD must be a number, got {raw!r}.") from None
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{ENV_PREFIX}SUGGESTION_THRESHOLD must be between 0 and 1, got {value}.")
    return value


def _categories() -> frozenset[GlyphCategory] | None:
    raw = os.getenv(f"{ENV_PREFIX}ENABLED_CATEGORIES", "")
    names = [part for part in (p.strip() for p in raw.split(",")) if part]
    if not names:
        return None
    try:
        return frozenset(normalize_category(name) for name in names)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}ENABLED_CATEGORIES: {exc}") from None


def _log_level() -> str:
    level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"{ENV_PREFIX}LOG_LEVEL must be one of {list(_LOG_LEVELS)}, got {level!r}.")
    return level


def get_settings() -> Settings:
    return Settings(suggestion_threshold=_threshold(), enabled_categories=_categories(), log_level=_log_level())
