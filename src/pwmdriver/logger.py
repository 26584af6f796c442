"""
This module provides logging functionality for the PWM driver.

Every driver module asks for its own named logger at import time. They all
share one file handler, which the command line tool can point at another
folder with `Logger().set_logs_folder(...)`.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

from pwmdriver.constants import LOGS_FOLDER

PWMDRIVER = 'PwmDriver'


class Singleton(type):
    """
    Metaclass that enforces single-instance creation for subclasses.
    """

    _instances: Dict[type, Any] = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


class Logger(metaclass=Singleton):
    """A singleton logger class for setting up logging handlers."""

    def __init__(self):
        """Initialize the logger with file and stream handlers."""
        self.formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.loggers: List[logging.Logger] = []

        self.logging_file_handler = self._file_handler(LOGS_FOLDER)

        # console handler, only attached on request
        self.logging_stream_handler = logging.StreamHandler()
        self.logging_stream_handler.setFormatter(self.formatter)

    def _file_handler(self, logs_folder) -> logging.FileHandler:
        Path(logs_folder).mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(Path(logs_folder) / (PWMDRIVER + '.log'))
        handler.setFormatter(self.formatter)
        return handler

    def set_logs_folder(self, logs_folder) -> None:
        """Move the shared log file to another folder for every driver logger."""
        old_handler = self.logging_file_handler
        self.logging_file_handler = self._file_handler(logs_folder)
        for logger in self.loggers:
            logger.removeHandler(old_handler)
            logger.addHandler(self.logging_file_handler)
        old_handler.close()

    def setup_logger(self, logger_name=None, enable_stream_handler=False, level=logging.INFO):
        """Set up a logger with the given name and return it.

        Args:
            logger_name (str, optional): Name of the logger. Defaults to None.
            enable_stream_handler (bool): Whether to add the stream handler for console output. Defaults to False.
            level (int): Logging level for the returned logger. Defaults to logging.INFO.

        Returns:
            logging.Logger: The configured logger.
        """
        if not logger_name:
            logger_name = PWMDRIVER
        else:
            logger_name = PWMDRIVER + ' ' + logger_name

        logger = logging.getLogger(logger_name)

        logger.setLevel(level)

        if self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)
        if enable_stream_handler and self.logging_stream_handler not in logger.handlers:
            logger.addHandler(self.logging_stream_handler)
        if logger not in self.loggers:
            self.loggers.append(logger)

        return logger
