"""
Logging configuration for POM size grading.
"""
import os
import logging
from datetime import datetime
import threading
from typing import Optional

# Track if logging has been initialized
_logging_initialized = False
_logging_lock = threading.Lock()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level=logging.INFO, log_dir: Optional[str] = None):
    """
    Set up logging configuration.

    Args:
        log_level: Logging level (default: INFO)
        log_dir (Optional[str]): Directory for log files; console only when None

    Returns:
        logging.Logger: Configured root logger
    """
    global _logging_initialized

    with _logging_lock:
        if _logging_initialized:
            return logging.getLogger()

        # Configure root logger
        logger = logging.getLogger()
        logger.setLevel(log_level)

        # Clear any existing handlers
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"pom_grading_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

            logger.info(f"Logging initialized. Log file: {log_file}")

        _logging_initialized = True

        return logger


def get_logger(name):
    """
    Get a logger for a specific module.

    The grading core never configures handlers itself; the application
    entry points call setup_logging().

    Args:
        name: Name of the module (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name)
