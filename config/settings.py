"""Service settings and environment overrides."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'y')


def _optional_path(name: str) -> Optional[Path]:
    value = os.getenv(name, '').strip()
    return Path(value) if value else None


class Settings:
    """
    Process-wide constants. Values read from the environment are resolved
    once at import time; the YAML file passed on the command line holds the
    per-deployment configuration (targets, listen port, auth).
    """

    APP_NAME:    str = 'PortGuard'
    APP_VERSION: str = os.getenv('PORTGUARD_VERSION', '1.0.0')

    # ── Configuration file ────────────────────────────────────────────────
    CONFIG_PATH: str = os.getenv('PORTGUARD_CONFIG', '/etc/portguard/config.yaml')

    # ── Defaults applied when the YAML omits them ─────────────────────────
    DEFAULT_LISTEN_HOST: str   = '0.0.0.0'
    DEFAULT_LISTEN_PORT: int   = 8888
    DEFAULT_TIMEOUT_S:   float = 2.0

    # ── HTTP ──────────────────────────────────────────────────────────────
    AUTH_REALM: str = 'PortGuard'

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL:         str            = os.getenv('LOG_LEVEL', 'INFO')
    LOG_CONSOLE:       bool           = _flag('LOG_CONSOLE', 'true')
    LOG_CONSOLE_LEVEL: str            = os.getenv('LOG_CONSOLE_LEVEL', '')
    LOG_DIR:           Optional[Path] = _optional_path('PORTGUARD_LOG_DIR')
    LOG_FILE_NAME:     str            = 'portguard.jsonl'


settings = Settings()
