from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os


BASE_DIR = Path(__file__).resolve().parents[2]
WORDS_DIR = BASE_DIR / "resources" / "words"
DEFAULT_CORS_ORIGINS = ("http://127.0.0.1:5173", "http://localhost:5173")
FALSY_ENV_VALUES = {"0", "false", "no"}
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    environment: str
    app_name: str
    host: str
    port: int
    words_dir: Path
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    reject_duplicate_concepts: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in FALSY_ENV_VALUES


def _log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level


def load_settings() -> Settings:
    words_dir = Path(os.getenv("WORDFLOW_WORDS_DIR", WORDS_DIR))
    raw_cors_origins = os.getenv("WORDFLOW_CORS_ORIGINS", "")
    parsed_cors_origins = tuple(
        origin.strip()
        for origin in raw_cors_origins.split(",")
        if origin.strip()
    )
    return Settings(
        environment=os.getenv("WORDFLOW_ENV", "development"),
        app_name=os.getenv("WORDFLOW_APP_NAME", "wordflow-backend"),
        host=os.getenv("WORDFLOW_HOST", "127.0.0.1"),
        port=int(os.getenv("WORDFLOW_PORT", "8000")),
        words_dir=words_dir,
        cors_origins=parsed_cors_origins or DEFAULT_CORS_ORIGINS,
        reject_duplicate_concepts=_env_flag("WORDFLOW_REJECT_DUPLICATE_CONCEPTS", "0"),
        log_level=_log_level(os.getenv("WORDFLOW_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
