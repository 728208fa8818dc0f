"""API module for the captainteemo statistics service.

This module provides platform normalization, path construction, response
validation and the client built on top of them.
"""

from .config import Config, setup_logging
from .errors import (
    APIFailureError,
    InvalidJSONError,
    InvalidPlatformError,
    MissingCallbackError,
    MissingConfigError,
    TeemoAPIError,
)
from .teemo_api import TeemoAPIClient, create_client

__all__ = [
    'Config', 'setup_logging', 'TeemoAPIClient', 'create_client', 'TeemoAPIError',
    'MissingConfigError', 'MissingCallbackError', 'InvalidPlatformError',
    'InvalidJSONError', 'APIFailureError',
]
