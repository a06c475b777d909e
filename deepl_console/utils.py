"""
Utility functions for the DeepL Translate console.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import dotenv_values

from .config import ENV_FILE_NAME, ENV_PROBE_LEVELS, API_KEY_FIELD, SERVER_URL_FIELD


class ConfigurationError(ValueError):
    """Raised when the environment file or the API credential is missing."""


@dataclass(frozen=True)
class Settings:
    """Values read from the environment file."""
    api_key: str
    server_url: Optional[str] = None
    env_file: Optional[Path] = None


def find_env_file(start_dir: Optional[Union[str, Path]] = None,
                  probe_levels: int = ENV_PROBE_LEVELS) -> Path:
    """Locate the environment file, probing parent directories.

    Args:
        start_dir: Directory to start from (defaults to the current directory)
        probe_levels: How many ancestor directories to check after start_dir

    Returns:
        Path to the first environment file found

    Raises:
        ConfigurationError: If no environment file exists within the probed directories
    """
    directory = Path(start_dir or os.getcwd()).resolve()
    searched = [directory, *list(directory.parents)[:probe_levels]]

    for candidate_dir in searched:
        candidate = candidate_dir / ENV_FILE_NAME
        if candidate.is_file():
            logging.info(f'Found environment file: {candidate}')
            return candidate

    raise ConfigurationError(
        f"Could not find a {ENV_FILE_NAME} file in {directory} "
        f"or its {probe_levels} parent directories."
    )


def load_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """Read the API credential from the environment file.

    Args:
        env_file: Explicit path to the environment file; searched for when omitted

    Returns:
        Settings with the API key and optional server URL

    Raises:
        ConfigurationError: If the file is missing or has no API key
    """
    if env_file is None:
        path = find_env_file()
    else:
        path = Path(env_file)
        if not path.is_file():
            raise ConfigurationError(f"Environment file '{path}' not found.")

    values = dotenv_values(path)

    api_key = (values.get(API_KEY_FIELD) or '').strip()
    if not api_key:
        raise ConfigurationError(
            f"No API key found in '{path}'. Please set {API_KEY_FIELD} in your {ENV_FILE_NAME} file."
        )

    server_url = (values.get(SERVER_URL_FIELD) or '').strip() or None
    if server_url:
        logging.info(f'Using server URL from {path}: {server_url}')

    return Settings(api_key=api_key, server_url=server_url, env_file=path)
