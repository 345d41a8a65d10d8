from __future__ import annotations

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Переменная {name} должна быть целым числом, получено {raw!r}") from exc


def _list_env(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """Настройки сервиса из переменных окружения (и ``.env``).

    Всё, что зависит от окружения, собрано здесь.
    """

    def __init__(self) -> None:
        self.host: str = os.getenv("FIB_HOST", "0.0.0.0")
        self.port: int = _int_env("FIB_PORT", 8080)
        self.log_level: str = os.getenv("FIB_LOG_LEVEL", "INFO").upper()
        self.api_prefix: str = os.getenv("FIB_API_PREFIX", "").rstrip("/")
        self.cors_origins: List[str] = _list_env("FIB_CORS_ORIGINS", "*")

        if not 0 < self.port < 65536:
            raise ValueError(f"FIB_PORT вне диапазона: {self.port}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
