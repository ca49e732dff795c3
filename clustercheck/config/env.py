"""
Environment variable loading for clustercheck.

- CLUSTERCHECK_ENV_FILE: path of a .env file (default: .env at project root)
- Variables already present in the process environment win over the file.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is clustercheck/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

ENV_PREFIX = "CLUSTERCHECK_"


def get_env_path() -> Path:
    raw = (os.getenv("CLUSTERCHECK_ENV_FILE") or "").strip()
    return Path(raw) if raw else _ENV_PATH


def load_clustercheck_env() -> None:
    """Load .env into the process environment. Safe to call multiple times."""
    path = get_env_path()
    if path.is_file():
        load_dotenv(path, override=False)


def env_str(name: str, default: str = "") -> str:
    """Return CLUSTERCHECK_<name> stripped, or default when unset/blank."""
    raw = (os.getenv(ENV_PREFIX + name) or "").strip()
    return raw or default


def env_float(name: str, default: float) -> float:
    raw = env_str(name)
    if not raw:
        return default
    return float(raw)


def env_int(name: str, default: int) -> int:
    raw = env_str(name)
    if not raw:
        return default
    return int(raw)
