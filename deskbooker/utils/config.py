"""Environment-driven application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_SEED_DESK_DESCRIPTIONS: tuple[str, ...] = (
    "Window desk, north wing",
    "Standing desk, north wing",
    "Quiet zone desk, east wing",
    "Dual-monitor desk, east wing",
    "Hot desk near kitchen, south wing",
    "Corner desk, south wing",
)


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_version: str
    database_path: Path
    log_level: str
    host: str
    port: int
    seed_desk_descriptions: tuple[str, ...]


def _read_int(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw_value!r}") from exc


def _read_desk_descriptions() -> tuple[str, ...]:
    raw_value = os.getenv("DESKBOOKER_SEED_DESKS")
    if not raw_value:
        return DEFAULT_SEED_DESK_DESCRIPTIONS
    descriptions = tuple(item.strip() for item in raw_value.split(";") if item.strip())
    return descriptions or DEFAULT_SEED_DESK_DESCRIPTIONS


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process; call `cache_clear()` to reload."""
    return Settings(
        app_name=os.getenv("DESKBOOKER_APP_NAME", "DeskBooker"),
        app_version=os.getenv("DESKBOOKER_APP_VERSION", "1.0.0"),
        database_path=Path(
            os.getenv(
                "DESKBOOKER_DATABASE_PATH",
                str(PROJECT_ROOT / "data" / "deskbooker.db"),
            )
        ),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        host=os.getenv("DESKBOOKER_HOST", "127.0.0.1"),
        port=_read_int("DESKBOOKER_PORT", 8000),
        seed_desk_descriptions=_read_desk_descriptions(),
    )
