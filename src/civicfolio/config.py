"""Application configuration objects and helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "CivicFolio"
    LOG_FILENAME = "civicfolio.log"
    LOG_MAX_BYTES = 10 * 1024 * 1024
    LOG_BACKUP_COUNT = 5
    EXPORT_DIRNAME = "exports"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("CIVICFOLIO_DEV_MODE", default=True)
        self.LOAD_BASELINE = _env_bool("CIVICFOLIO_LOAD_BASELINE", default=True)
        self.LOG_LEVEL = self._resolve_log_level(os.getenv("CIVICFOLIO_LOG_LEVEL", "INFO"))

    def _resolve_data_dir(self) -> Path:
        """Return the directory where logs and exports live."""

        data_root = os.getenv("CIVICFOLIO_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Protected install locations fall back to user-local storage.
            local_app_data = os.getenv("LOCALAPPDATA") or (Path.home() / ".local" / "share")
            fallback_path = Path(local_app_data).expanduser() / self.APP_NAME
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()

    @staticmethod
    def _resolve_log_level(raw: str) -> int:
        level = logging.getLevelName(raw.strip().upper())
        return level if isinstance(level, int) else logging.INFO

    @property
    def export_dir(self) -> Path:
        """Directory used for template downloads and collection exports."""

        path = Path(self.DATA_DIR) / self.EXPORT_DIRNAME
        path.mkdir(parents=True, exist_ok=True)
        return path


class DevConfig(BaseConfig):
    """Development configuration with verbose diagnostics."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration used by the test-suite; quiet console, baseline loaded."""

    __test__ = False  # not a pytest test class

    DEBUG = False
    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = False
