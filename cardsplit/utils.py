"""
Utility functions for the categorizer.

This module contains helpers used by the command line shell that are not
related to parsing, categorizing or exporting transactions.
"""

import os
import pathlib
import logging

logger = logging.getLogger(__name__)


def setup_logging(debug=False, log_level='info'):
    """Configure logging for the application.

    Returns:
        str: Path of the log file
    """
    # Determine log level
    if debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, log_level.upper(), logging.INFO)

    format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    # Get log file path from environment or use default
    log_file = os.getenv('LOG_FILE', 'debug.log')

    # Create log directory if needed
    log_dir = os.path.dirname(log_file)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)

    # Set up logging to file and console
    logging.basicConfig(
        level=level,
        format=format,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )

    return log_file


def ensure_directory(dir_type):
    """Ensure a working directory exists under DATA_DIR.

    Args:
        dir_type (str): Type of directory ('output' or 'logs')

    Returns:
        pathlib.Path: Path to the directory

    Raises:
        ValueError: If dir_type is invalid
    """
    valid_dir_types = ['output', 'logs']
    if dir_type not in valid_dir_types:
        raise ValueError(f"Invalid directory type: {dir_type}. Expected one of: {valid_dir_types}")

    base_dir = os.getenv('DATA_DIR', os.getcwd())
    dir_path = pathlib.Path(base_dir) / dir_type
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def parse_id_list(value):
    """Parse a comma-separated list of transaction ids ('0,3, 7').

    Raises:
        ValueError: If an entry is not an integer
    """
    if not value:
        return []
    ids = []
    for part in value.split(','):
        part = part.strip()
        if not part:
            continue
        try:
            ids.append(int(part))
        except ValueError:
            raise ValueError(f"Invalid transaction id: {part!r}")
    return ids
