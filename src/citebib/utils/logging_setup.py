"""Logging configuration."""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


def setup_logging(level: Union[int, str] = logging.WARNING, log_dir: Optional[str] = None) -> None:
    """
    Set up logging configuration.

    Console output goes to stderr so that stdout only carries the
    bibliography.

    Args:
        level: Logging level, as a number or a name like "INFO"
        log_dir: Directory to store a timestamped log file in, if any
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    # Configure logging format
    log_format = '%(asctime)s - %(levelname)s - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'
    formatter = logging.Formatter(log_format, date_format)

    # Set up handlers
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers = [console_handler]

    log_file = None
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"citebib_{timestamp}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in handlers:
        root_logger.addHandler(handler)

    logging.debug("Logging initialized")
    if log_file:
        logging.info(f"Log file: {log_file}")


def log_api_call(api_name: str, method: str, params: list) -> None:
    """Log a JSON-RPC call."""
    logging.debug(f"API Call - {api_name}.{method}({params})")
