"""
Configuration - Settings from environment and .env file
Credentials are required, everything else has a default
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigError(ValueError):
    """Missing or invalid configuration"""


@dataclass
class Settings:
    email: str
    password: str
    headless: bool = True
    output_file: str = 'workouts.json'
    urls_file: str = 'workout_urls.json'
    url_limit: Optional[int] = None
    keyed_output: bool = True
    checkpoint_every: int = 10
    id_segment_offset: int = 2
    concurrency: int = 1
    navigation_timeout_ms: int = 30000
    log_level: str = 'INFO'


def _get_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None or raw.strip() == '':
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be a boolean, got {raw!r}")


def _get_int(env: Mapping[str, str], key: str, default: Optional[int],
             minimum: int = 1) -> Optional[int]:
    raw = env.get(key)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}")
    if value < minimum:
        raise ConfigError(f"{key} must be >= {minimum}, got {value}")
    return value


def _get_log_level(env: Mapping[str, str]) -> str:
    level = (env.get('LOG_LEVEL') or 'INFO').strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


def load_settings(env_file: Optional[str] = None,
                  environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Load settings from the process environment

    Args:
        env_file: .env file to load first (default: search from cwd)
        environ: mapping to read instead of os.environ, skips .env loading

    Returns:
        Settings

    Raises:
        ConfigError: if EMAIL or PASSWORD is missing or a value is malformed
    """
    if environ is None:
        load_dotenv(env_file)
        environ = os.environ

    email = environ.get('EMAIL')
    password = environ.get('PASSWORD')

    if not email or not password:
        raise ConfigError("EMAIL or PASSWORD not set in .env file")

    settings = Settings(
        email=email,
        password=password,
        headless=_get_bool(environ, 'HEADLESS', True),
        output_file=environ.get('OUTPUT_FILE') or 'workouts.json',
        urls_file=environ.get('WORKOUT_URLS_FILE') or 'workout_urls.json',
        url_limit=_get_int(environ, 'URL_LIMIT', None, minimum=0),
        keyed_output=_get_bool(environ, 'KEYED_OUTPUT', True),
        checkpoint_every=_get_int(environ, 'CHECKPOINT_EVERY', 10),
        id_segment_offset=_get_int(environ, 'ID_SEGMENT_OFFSET', 2),
        concurrency=_get_int(environ, 'CONCURRENCY', 1),
        navigation_timeout_ms=_get_int(environ, 'NAVIGATION_TIMEOUT_MS', 30000),
        log_level=_get_log_level(environ),
    )
    logger.info("Settings loaded")
    return settings


def load_workout_urls(path: str, limit: Optional[int] = None) -> List[str]:
    """
    Read the workout URL list (JSON array of strings)

    Args:
        path: JSON file path
        limit: keep only the first N URLs

    Returns:
        List of URLs
    """
    urls_path = Path(path)
    if not urls_path.exists():
        raise ConfigError(f"Workout URL file not found: {path}")

    try:
        with open(urls_path, 'r', encoding='utf-8') as f:
            urls = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}")

    if not isinstance(urls, list) or not all(isinstance(u, str) for u in urls):
        raise ConfigError(f"{path} must contain a JSON array of URL strings")

    if limit is not None and limit < 0:
        raise ConfigError(f"URL limit must be >= 0, got {limit}")

    if limit is not None:
        urls = urls[:limit]

    logger.info(f"Loaded {len(urls)} workout URLs from {path}")
    return urls
