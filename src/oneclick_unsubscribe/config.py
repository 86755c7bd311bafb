"""
Configuration settings for the one-click unsubscribe tools.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .constants import DEFAULT_USER_AGENT


class Config:
    """Configuration settings read from the environment."""

    # Default base URI for links built from the command line
    BASE_URI = os.getenv('ONECLICK_BASE_URI')

    # User-Agent for built one-click POST requests
    USER_AGENT = os.getenv('ONECLICK_USER_AGENT', DEFAULT_USER_AGENT)

    # Logging
    LOG_LEVEL = os.getenv('ONECLICK_LOG_LEVEL', 'WARNING')
    LOG_FORMAT = os.getenv('ONECLICK_LOG_FORMAT', 'standard')

    @classmethod
    def reload(cls):
        """Re-read settings, e.g. after loading a .env file."""
        cls.BASE_URI = os.getenv('ONECLICK_BASE_URI')
        cls.USER_AGENT = os.getenv('ONECLICK_USER_AGENT', DEFAULT_USER_AGENT)
        cls.LOG_LEVEL = os.getenv('ONECLICK_LOG_LEVEL', 'WARNING')
        cls.LOG_FORMAT = os.getenv('ONECLICK_LOG_FORMAT', 'standard')

    @classmethod
    def get_base_uri(cls, override: Optional[str] = None) -> Optional[str]:
        """Return the explicit base URI if given, else the configured one."""
        return override or cls.BASE_URI


def load_config_from_env_file(env_file: str = '.env') -> bool:
    """Load configuration from an environment file, if it exists."""
    env_path = Path(env_file)
    if not env_path.exists():
        return False
    load_dotenv(env_path)
    Config.reload()
    return True
