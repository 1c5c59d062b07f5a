"""
Logger utilities for lambert_et.

Provides a Logger class for consistent logging across the project
with Loguru-based logging and colored output.
"""

from loguru import logger
import sys
from typing import Optional
from pathlib import Path


class Logger:
    """
    Logger class for lambert_et.

    Features:
    - Loguru-based logging with colored output
    - Log levels: DEBUG, INFO, WARNING, ERROR, CRITICAL
    - Optional file output with rotation and retention
    """

    _default_config: dict = {
        "format": "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
                  "<cyan>{message}</cyan>",
    }

    @staticmethod
    def setup(
        log_file: Optional[str] = None,
        level: str = "INFO",
        console: bool = True,
        rotation: str = "10 MB",
        retention: int = 10
    ) -> None:
        """
        Initialize logger with specified configuration.

        Args:
            log_file: Path to log file (optional)
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console: Whether to output to console
            rotation: Log file rotation size
            retention: Number of rotated log files to keep
        """
        # Remove default handler
        logger.remove()

        if console:
            logger.add(
                sys.stderr,
                format=Logger._default_config["format"],
                level=level,
                colorize=True,
                backtrace=True,
                diagnose=True
            )

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            logger.add(
                str(log_path),
                format=Logger._default_config["format"],
                level=level,
                rotation=rotation,
                retention=retention,
                backtrace=True,
                diagnose=True
            )

    @staticmethod
    def debug(message: str, **kwargs) -> None:
        """Log debug message"""
        logger.opt(depth=1).debug(message, **kwargs)

    @staticmethod
    def info(message: str, **kwargs) -> None:
        """Log info message"""
        logger.opt(depth=1).info(message, **kwargs)

    @staticmethod
    def warning(message: str, **kwargs) -> None:
        """Log warning message"""
        logger.opt(depth=1).warning(message, **kwargs)

    @staticmethod
    def error(message: str, **kwargs) -> None:
        """Log error message"""
        logger.opt(depth=1).error(message, **kwargs)

    @staticmethod
    def configure_for_testing() -> None:
        """Configure logger for testing (quiet mode)"""
        Logger.setup(level="DEBUG", console=False)
