"""
Environment variable loading utility.

This module provides functions to load environment variables from files.
"""
import os
import logging

logger = logging.getLogger(__name__)


def load_env_from_file(file_path, override=True):
    """
    Load KEY=VALUE pairs from a file into os.environ.

    Blank lines, comment lines starting with '#' and lines without '=' are
    skipped. Keys and values are stripped of surrounding whitespace.

    Args:
        file_path: Path to the environment variable file.
        override: If False, variables already set in the environment are kept.

    Returns:
        True if file was loaded successfully, False otherwise.
    """
    if not os.path.exists(file_path):
        logger.debug(f"Environment file not found: {file_path}")
        return False

    try:
        with open(file_path, 'r') as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith('#') or '=' not in line:
                    continue

                key, value = line.split('=', 1)
                key = key.strip()
                if not override and key in os.environ:
                    continue
                os.environ[key] = value.strip()

        logger.info(f"Loaded environment variables from {file_path}")
        return True
    except OSError as e:
        logger.error(f"Error loading environment variables from {file_path}: {str(e)}")
        return False
