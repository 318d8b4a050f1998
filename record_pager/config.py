"""
Configuration settings for record_pager
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

import dotenv

from record_pager.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "sqlite": {
        "db_path": "data/records.sqlite",
    },
    "pagination": {
        "per_page": 20,
        "page_param": "page",
        "min_leading_pages": 2,
        "min_trailing_pages": 2,
        "range_about_current_page": 3,
    },
    "logging": {
        "path": "logs/record_pager.log",
        "level": "INFO",
    },
}

CONFIG_FILE = os.path.expanduser("~/.record_pager_config.json")


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge `overrides` into `base` (in place)."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def _env_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from defaults, a JSON file and environment variables.

    The file is `config_file`, else $RECORD_PAGER_CONFIG, else
    ~/.record_pager_config.json. A missing file is not an error; a file that
    cannot be read or parsed raises ConfigError.
    """
    dotenv.load_dotenv()
    config = copy.deepcopy(DEFAULT_CONFIG)

    path = config_file or os.environ.get("RECORD_PAGER_CONFIG") or CONFIG_FILE
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                file_config = json.load(f)
        except json.JSONDecodeError as e:
            msg = f"Error decoding JSON from config file {path}: {e}"
            logger.error(msg)
            raise ConfigError(msg) from e
        except OSError as e:
            msg = f"Error reading config file {path}: {e}"
            logger.error(msg)
            raise ConfigError(msg) from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        _merge(config, file_config)
        logger.info(f"Loaded configuration from {path}")

    # Override with environment variables
    if os.environ.get("RECORD_PAGER_DB_PATH"):
        config["sqlite"]["db_path"] = os.environ["RECORD_PAGER_DB_PATH"]

    per_page = _env_int("RECORD_PAGER_PER_PAGE")
    if per_page is not None:
        config["pagination"]["per_page"] = per_page

    if os.environ.get("RECORD_PAGER_LOG_LEVEL"):
        config["logging"]["level"] = os.environ["RECORD_PAGER_LOG_LEVEL"]

    return config


def save_config(config: Dict[str, Any], config_file: Optional[str] = None) -> bool:
    """
    Save configuration to file
    """
    path = config_file or CONFIG_FILE
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        return True
    except OSError as e:
        logger.error(f"Error saving config file {path}: {e}")
        return False
