from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    workers: int
    log_level: str
    include_page_numbers: bool


def _env(name: str, default: str = "") -> str:
    v = (os.environ.get(name) or default).strip()
    # Users often set env vars with quotes (e.g. cmd.exe: set PAPERFLOW_WORKERS="4").
    if (v.startswith('"') and v.endswith('"')) or (v.startswith("'") and v.endswith("'")):
        v = v[1:-1].strip()
    return v


def _env_bool(name: str, default: bool = False) -> bool:
    v = _env(name)
    if not v:
        return default
    return v.lower() in {"1", "true", "yes", "on"}


def load_settings() -> Settings:
    try:
        workers = int(_env("PAPERFLOW_WORKERS", "1") or "1")
    except ValueError:
        workers = 1
    return Settings(
        workers=max(1, workers),
        log_level=(_env("PAPERFLOW_LOG_LEVEL", "WARNING") or "WARNING").upper(),
        include_page_numbers=_env_bool("PAPERFLOW_INCLUDE_PAGE_NUMBERS"),
    )
