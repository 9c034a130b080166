import logging
import os
from pathlib import Path
from typing import Optional

LOG_DIR_ENV = "FONT_INVENTORY_LOG_DIR"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logger(name: str, log_level: Optional[int] = None) -> logging.Logger:
    """
    Configure and return a logger instance.

    Console output is limited to INFO and above; the per-module log file
    under the log directory (``logs`` or ``$FONT_INVENTORY_LOG_DIR``)
    receives everything down to DEBUG, including skipped runs and cells.

    Args:
        name: Name for the logger
        log_level: Optional logging level (defaults to DEBUG)

    Returns:
        Configured logger instance
    """
    logs_dir = Path(os.environ.get(LOG_DIR_ENV, "logs"))
    logs_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(log_level or logging.DEBUG)

    # Remove any existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    file_handler = logging.FileHandler(logs_dir / f'{name}.log', mode='a', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger
