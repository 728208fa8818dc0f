"""Configuration module for the captainteemo API client.

This module handles configuration loading from the environment, the fixed
endpoint and platform table, and logging setup.
"""

import os
import logging
from pathlib import Path
from typing import Optional, Dict
from dotenv import load_dotenv

from .errors import MissingConfigError

# Load environment variables
load_dotenv()

# API origin, every path is appended to it as-is
ENDPOINT = 'http://api.captainteemo.com'

# Supported platforms as (short, full) pairs
PLATFORMS = (
    ('na', 'North_America'),
    ('br', 'Brasil'),
    ('ru', 'Russia'),
    ('euw', 'Europe_West'),
    ('eun', 'Europe_East'),
    ('tr', 'Turkey'),
    ('las', 'Latin_America_South'),
    ('lan', 'Latin_America_North'),
)


class Config:
    """Configuration class for API settings.

    Attributes:
        user_agent (str): Contact string sent as the User-Agent header
        endpoint (str): API origin the request paths are appended to
        debug_mode (bool): Whether debug mode is enabled
    """

    def __init__(self, user_agent: Optional[str] = None,
                 endpoint: Optional[str] = None) -> None:
        """Initialize configuration from arguments and environment.

        Args:
            user_agent: Contact string (falls back to TEEMO_USER_AGENT)
            endpoint: API origin (falls back to TEEMO_ENDPOINT, then ENDPOINT)

        Raises:
            MissingConfigError: If no user agent string is available
        """
        self.user_agent = user_agent if user_agent is not None else os.getenv('TEEMO_USER_AGENT')
        self.endpoint = endpoint or os.getenv('TEEMO_ENDPOINT', ENDPOINT)
        self.debug_mode = os.getenv('DEBUG', 'false').lower() == 'true'

        if not isinstance(self.user_agent, str) or not self.user_agent:
            raise MissingConfigError(
                "`refererString` not defined (set TEEMO_USER_AGENT in your .env file)"
            )

        logging.getLogger(__name__).info("Configuration loaded successfully")

    @property
    def headers(self) -> Dict[str, str]:
        """Return headers sent with every API request.

        Returns:
            Dictionary containing the Accept and User-Agent headers
        """
        return build_headers(self.user_agent)


def build_headers(user_agent: str) -> Dict[str, str]:
    """Headers for a client identified by `user_agent`."""
    return {
        "Accept": "application/json",
        "User-Agent": user_agent
    }


# Logging configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = LOG_LEVEL, log_file: Optional[str] = None) -> logging.Logger:
    """Setup logging configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path (falls back to LOG_FILE)

    Returns:
        Configured logger instance
    """
    # Validate log level
    valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    if level.upper() not in valid_levels:
        level = 'INFO'

    handlers = [logging.StreamHandler()]
    log_file = log_file or os.getenv('LOG_FILE')
    if log_file:
        handlers.append(logging.FileHandler(Path(log_file), mode='a', encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers
    )

    return logging.getLogger(__name__)
