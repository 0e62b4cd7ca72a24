# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
- Bad values fall back to defaults instead of failing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    return v if v in choices else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    store_path: Path
    storage_key: str

    # ---- New-task defaults / UI ----
    default_priority: str
    default_category: str
    view_mode: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskboard").strip() or "taskboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskboard"))
        store_path = _env_path(_k("STORE_PATH"), data_dir / "storage.json")
        storage_key = _env(_k("STORAGE_KEY"), "tasks").strip() or "tasks"

        default_priority = _env_choice(
            _k("DEFAULT_PRIORITY"), ("high", "medium", "low"), "medium"
        )
        default_category = _env_choice(
            _k("DEFAULT_CATEGORY"), ("work", "personal", "shopping", "health"), "work"
        )
        view_mode = _env_choice(_k("VIEW_MODE"), ("list", "grid"), "list")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            store_path=store_path,
            storage_key=storage_key,
            default_priority=default_priority,
            default_category=default_category,
            view_mode=view_mode,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for safe overrides.
try:
    import config_local as _config_local  # type: ignore

    if hasattr(_config_local, "VIEW_MODE"):
        object.__setattr__(SETTINGS, "view_mode", str(_config_local.VIEW_MODE))  # type: ignore[misc]
    if hasattr(_config_local, "DATA_DIR"):
        object.__setattr__(SETTINGS, "data_dir", Path(_config_local.DATA_DIR).expanduser())  # type: ignore[misc]
        object.__setattr__(SETTINGS, "store_path", Path(_config_local.DATA_DIR).expanduser() / "storage.json")  # type: ignore[misc]
except ImportError:
    pass


def get_settings() -> Settings:
    return SETTINGS
