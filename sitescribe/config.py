"""
Crawl Configuration

Loads the crawler's JSON configuration file into dataclasses. The resulting
CrawlConfig is built once at program entry and handed to every component;
nothing reads configuration from module globals.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .core.logger import LEVELS


DEFAULT_CONFIG_NAME = "config.json"
DEFAULT_OUTPUT_DIR = "data"
DEFAULT_USER_AGENT = "Mozilla/5.0"
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_MAX_RETRIES = 3

LOG_LEVELS = tuple(LEVELS)
SANITIZE_MODES = ("discard", "unwrap")

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file exists but cannot be used."""


@dataclass(frozen=True)
class ScraperOptions:
    user_agent: str = DEFAULT_USER_AGENT
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    max_retries: int = DEFAULT_MAX_RETRIES
    request_delay_ms: int = 0

    @property
    def timeout_secs(self) -> float:
        return self.timeout_ms / 1000.0

    @property
    def request_delay_secs(self) -> float:
        return self.request_delay_ms / 1000.0


@dataclass(frozen=True)
class ExcludeOptions:
    exclude_classes: List[str] = field(default_factory=list)
    exclude_tags: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class OutputOptions:
    output_directory: str = DEFAULT_OUTPUT_DIR

    @property
    def txt_directory(self) -> str:
        return os.path.join(self.output_directory, "txt")

    @property
    def docx_directory(self) -> str:
        return os.path.join(self.output_directory, "docx")


@dataclass(frozen=True)
class CrawlConfig:
    output: OutputOptions = field(default_factory=OutputOptions)
    scraper: ScraperOptions = field(default_factory=ScraperOptions)
    exclude: ExcludeOptions = field(default_factory=ExcludeOptions)
    exclude_routes: List[str] = field(default_factory=list)
    sanitize_mode: str = "discard"
    log_level: str = "info"
    log_directory: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CrawlConfig":
        """
        Build a configuration from the JSON structure of ``config.json``.

        Unknown keys are ignored and missing keys take their defaults.

        Raises:
            ConfigError: If a known key holds a value of the wrong shape
        """
        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be a JSON object")

        scraper_data = _section(data, "scraperOptions")
        exclude_data = _section(data, "excludeOptions")
        output_data = _section(data, "outputOptions")
        sanitize_data = _section(data, "sanitizeOptions")

        max_retries = _int_value(scraper_data, "maxRetries", DEFAULT_MAX_RETRIES)
        if max_retries < 1:
            logger.warning(f"maxRetries must be at least 1, using {DEFAULT_MAX_RETRIES}")
            max_retries = DEFAULT_MAX_RETRIES

        scraper = ScraperOptions(
            user_agent=scraper_data.get("userAgent") or DEFAULT_USER_AGENT,
            timeout_ms=_int_value(scraper_data, "timeout", DEFAULT_TIMEOUT_MS) or DEFAULT_TIMEOUT_MS,
            max_retries=max_retries,
            request_delay_ms=max(_int_value(scraper_data, "requestDelay", 0), 0),
        )

        exclude = ExcludeOptions(
            exclude_classes=_str_list(exclude_data, "excludeClasses"),
            exclude_tags=_str_list(exclude_data, "excludeTags"),
        )

        output = OutputOptions(
            output_directory=output_data.get("outputDirectory") or DEFAULT_OUTPUT_DIR,
        )

        sanitize_mode = sanitize_data.get("disallowedTagsMode", "discard")
        if sanitize_mode not in SANITIZE_MODES:
            raise ConfigError(
                f"sanitizeOptions.disallowedTagsMode must be one of {', '.join(SANITIZE_MODES)}"
            )

        log_level = str(data.get("logLevel") or "info").lower()
        if log_level not in LOG_LEVELS:
            logger.warning(f"Unknown logLevel '{log_level}', using 'info'")
            log_level = "info"

        return cls(
            output=output,
            scraper=scraper,
            exclude=exclude,
            exclude_routes=_str_list(data, "excludeRoutes"),
            sanitize_mode=sanitize_mode,
            log_level=log_level,
            log_directory=data.get("logDirectory") or None,
        )


def load_config(path: str = DEFAULT_CONFIG_NAME) -> CrawlConfig:
    """
    Load the crawl configuration from a JSON file.

    Args:
        path: Path to the configuration file

    Returns:
        The parsed configuration, or the defaults if the file does not exist

    Raises:
        ConfigError: If the file exists but is unreadable or invalid
    """
    if not os.path.exists(path):
        logger.warning(f"Configuration file not found at {path}, using default settings.")
        return CrawlConfig()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Could not read configuration file {path}: {e}") from e

    config = CrawlConfig.from_dict(data)
    logger.debug(f"Loaded configuration from {path}")
    return config


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key} must be a JSON object")
    return value


def _int_value(data: Dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key} must be a number")
    return int(value)


def _str_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key) or []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key} must be a list of strings")
    return list(value)
