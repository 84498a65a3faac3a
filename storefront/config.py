from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../storefront repo
load_dotenv(dotenv_path=ROOT_DIR / ".env")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


@dataclass(frozen=True)
class Settings:
    backend_url: str
    bot_token: str
    currency: str
    decimals: int
    log_level: str


def load_settings() -> Settings:
    backend_url = _get_env("BACKEND_URL", "VITE_BACKEND_URL", default="http://localhost:8000")
    return Settings(
        backend_url=(backend_url or "").rstrip("/"),
        bot_token=_get_env("BOT_TOKEN", "TELEGRAM_BOT_TOKEN", default="") or "",
        currency=_get_env("CURRENCY", default="₹") or "₹",
        decimals=_get_int("DECIMALS", default=2),
        log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
    )


settings = load_settings()


def setup_logging() -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
