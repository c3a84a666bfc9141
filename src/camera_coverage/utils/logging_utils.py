"""
Logging setup helpers.
"""

import logging
import os
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_HANDLER_NAME = 'camera_coverage.console'


def _named_handler(logger: logging.Logger, name: str) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def setup_logging(level: str = 'INFO', log_file: Optional[str] = None) -> None:
    """
    Setup logging for command line use.
    
    Repeated calls reuse the handlers installed earlier and only update
    their level, so records are never emitted twice.
    
    Args:
        level: Logging level
        log_file: Optional log file path
    """
    log_level = getattr(logging, level.upper())
    formatter = logging.Formatter(LOG_FORMAT)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    
    # Setup console handler
    console_handler = _named_handler(root_logger, CONSOLE_HANDLER_NAME)
    if console_handler is None:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        root_logger.addHandler(console_handler)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    
    # Setup file handler if specified
    if log_file:
        file_handler_name = f"camera_coverage.file:{os.path.abspath(log_file)}"
        file_handler = _named_handler(root_logger, file_handler_name)
        if file_handler is None:
            file_handler = logging.FileHandler(log_file)
            file_handler.set_name(file_handler_name)
            root_logger.addHandler(file_handler)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
