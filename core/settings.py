"""
settings.py

Runtime configuration read from the environment (and a local ``.env`` file,
when present). Session rules such as the 20-slot length live in
``core.session``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    random_seed: Optional[int] = None
    web_host: str = "127.0.0.1"
    web_port: int = 5000
    web_debug: bool = False


def load_settings() -> Settings:
    return Settings(
        log_level=os.getenv("QUIZ_LOG_LEVEL", "INFO").upper(),
        random_seed=_optional_int("QUIZ_RANDOM_SEED"),
        web_host=os.getenv("QUIZ_WEB_HOST", "127.0.0.1"),
        web_port=_optional_int("QUIZ_WEB_PORT") or 5000,
        web_debug=os.getenv("QUIZ_WEB_DEBUG", "false").strip().lower() in _TRUTHY,
    )


settings = load_settings()
