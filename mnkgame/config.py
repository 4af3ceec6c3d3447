"""Runtime settings loaded from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from mnkgame.game import MIN_BOARD_SIZE, MIN_MARKS_TO_WIN

load_dotenv()


@dataclass(frozen=True)
class Settings:
    cors_origins: list[str]
    default_board_size: int
    default_marks_to_win: int
    max_board_size: int


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:5174")

    max_board_size = max(_int_env("MAX_BOARD_SIZE", 30), MIN_BOARD_SIZE)
    board_size = min(max(_int_env("DEFAULT_BOARD_SIZE", 3), MIN_BOARD_SIZE), max_board_size)
    marks_to_win = min(max(_int_env("DEFAULT_MARKS_TO_WIN", 3), MIN_MARKS_TO_WIN), board_size)

    return Settings(
        cors_origins=[o.strip() for o in cors_origins.split(",") if o.strip()],
        default_board_size=board_size,
        default_marks_to_win=marks_to_win,
        max_board_size=max_board_size,
    )


settings = load_settings()
