"""
Logging System

This module provides centralized logging configuration for the SiteScribe
crawler: one named application logger, per-component child loggers, a
console handler and an optional rotating log file.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Dict, Optional


APP_NAME = "sitescribe"

# Configured level names as they appear in config.json
LEVELS: Dict[str, int] = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def parse_log_level(name: Optional[str]) -> int:
    """
    Map a configured level name to a ``logging`` level.

    A configured level of ``error`` lets errors through; nothing is
    suppressed entirely at any level.

    Args:
        name: One of ``error``, ``warn``, ``info``, ``debug``

    Returns:
        The matching logging level, ``logging.INFO`` for unknown names
    """
    if not name:
        return logging.INFO
    level = LEVELS.get(name.lower())
    if level is None:
        logging.getLogger(APP_NAME).warning(f"Unknown log level '{name}', using 'info'")
        return logging.INFO
    return level


class SiteScribeLogger:
    """
    Centralized logging system for the SiteScribe application.

    Console output is always enabled; when a log directory is given a
    rotating file handler records everything down to DEBUG.
    """

    def __init__(self, log_dir: Optional[str] = None, app_name: str = APP_NAME):
        """
        Initialize the logging system.

        Args:
            log_dir: Directory to store log files, or None for console only
            app_name: Name of the application for log formatting
        """
        self.log_dir = Path(log_dir) if log_dir else None
        self.app_name = app_name
        self.loggers: Dict[str, logging.Logger] = {}

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    def setup_logger(self, level: int = logging.INFO) -> logging.Logger:
        """
        Set up the main application logger with console and file handlers.

        Args:
            level: Logging level (default: INFO)

        Returns:
            Configured logger instance
        """
        logger = logging.getLogger(self.app_name)
        logger.setLevel(level)

        # Re-initialization replaces earlier handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        detailed_formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            log_file = self.log_dir / f"{self.app_name}.log"
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10*1024*1024,  # 10MB
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            logger.addHandler(file_handler)

        self.loggers['main'] = logger
        return logger

    def get_logger(self, name: str) -> logging.Logger:
        """
        Get a logger for a specific component.

        Args:
            name: Name of the component

        Returns:
            Logger instance for the component
        """
        full_name = f"{self.app_name}.{name}"

        if full_name not in self.loggers:
            self.loggers[full_name] = logging.getLogger(full_name)

        return self.loggers[full_name]

    def log_system_info(self):
        """Log system information for debugging."""
        logger = self.get_logger('system')

        logger.debug("=== SiteScribe Started ===")
        logger.debug(f"Python version: {sys.version}")
        logger.debug(f"Platform: {sys.platform}")
        logger.debug(f"Working directory: {os.getcwd()}")
        if self.log_dir is not None:
            logger.debug(f"Log directory: {self.log_dir.absolute()}")


# Global logger instance
_logger_instance: Optional[SiteScribeLogger] = None


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Name of the component (optional)

    Returns:
        Logger instance
    """
    global _logger_instance

    if _logger_instance is None:
        _logger_instance = SiteScribeLogger()

    if name:
        return _logger_instance.get_logger(name)
    return logging.getLogger(_logger_instance.app_name)


def initialize_logging(level: int = logging.INFO, log_dir: Optional[str] = None) -> logging.Logger:
    """
    Initialize the global logging system.

    Args:
        level: Logging level
        log_dir: Directory for log files (optional)

    Returns:
        The configured application logger
    """
    global _logger_instance
    _logger_instance = SiteScribeLogger(log_dir)
    logger = _logger_instance.setup_logger(level)
    _logger_instance.log_system_info()
    return logger
