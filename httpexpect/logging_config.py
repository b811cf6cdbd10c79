"""
Logging configuration for httpexpect

Provides a named logger with console output and optional file output.
Printers and reporters log through module loggers below "httpexpect".
"""

import logging
import sys
from pathlib import Path


class HttpExpectLogger:
    """Centralized logger for the library"""

    def __init__(
        self, name: str = "httpexpect", log_file: Path | None = None, console_output: bool = True
    ):
        """
        Initialize logger

        Args:
            name: Logger name (usually "httpexpect" for the package logger)
            log_file: Path to log file (optional)
            console_output: Whether to print to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Clear existing handlers
        self.logger.handlers = []

        # Format: timestamp - module - level - message
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        if console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance"""
        return self.logger


def setup_logging(log_file: Path | None = None, verbose: bool = True) -> logging.Logger:
    """
    Setup the package logger

    Args:
        log_file: Optional file receiving DEBUG output (e.g., request dumps)
        verbose: Whether to also print to console

    Returns:
        Configured logger instance
    """
    logger_wrapper = HttpExpectLogger(name="httpexpect", log_file=log_file, console_output=verbose)
    logger = logger_wrapper.get_logger()

    if log_file:
        logger.debug(f"Logging to {log_file}")

    return logger


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'request', 'printer')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"httpexpect.{module_name}")
