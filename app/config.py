"""Application settings loaded from environment variables and .env"""
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv(dotenv_path=".env")

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "no", "n", "off"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def _env_path(name: str, default: str) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return Path(default)
    return Path(raw).expanduser()


class Settings(BaseModel):
    """Runtime configuration passed explicitly into the application factory"""
    host: str = "127.0.0.1"
    port: int = 3000
    tasks_file: Path = Path("data/tasks.json")
    static_dir: Path = Path("public")
    log_level: str = "INFO"
    lock_writes: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from HOST, PORT, TASKS_FILE, STATIC_DIR, LOG_LEVEL and TASKS_LOCK_WRITES"""
        return cls(
            host=os.getenv("HOST") or "127.0.0.1",
            port=_env_int("PORT", 3000),
            tasks_file=_env_path("TASKS_FILE", "data/tasks.json"),
            static_dir=_env_path("STATIC_DIR", "public"),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
            lock_writes=_env_bool("TASKS_LOCK_WRITES", True),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
