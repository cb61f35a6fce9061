"""Lightweight configuration for WarTycoon."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wartycoon.domain.rules_config import DEFAULT_RULES


class Settings(BaseSettings):
    """Match setup read from the environment or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="WARTYCOON_"
    )

    board_width: int = Field(
        default=DEFAULT_RULES.board.width, gt=0, description="Battlefield width in cells"
    )
    board_height: int = Field(
        default=DEFAULT_RULES.board.height, gt=0, description="Battlefield height in cells"
    )
    player_count: int = Field(default=2, ge=1, description="Number of actors in a match")
    min_rounds: int = Field(
        default=10, ge=1, description="Shortest match the round driver will accept"
    )
    log_level: str = Field(default="INFO", description="Root logging level")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Install a root handler and apply the configured level to the package loggers.

    ``basicConfig`` is a no-op when the root logger already has handlers, so the
    level is also set on the ``wartycoon`` logger directly.
    """

    settings = settings or get_settings()
    level = settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("wartycoon").setLevel(level)
