"""Client for the captainteemo League of Legends statistics API.

Wraps player, team and service-state lookups behind a small callback based
interface, with platform normalization and response validation.
"""

from .api import (
    APIFailureError,
    InvalidJSONError,
    InvalidPlatformError,
    MissingCallbackError,
    MissingConfigError,
    TeemoAPIClient,
    TeemoAPIError,
    create_client,
)

__version__ = "1.0.0"

__all__ = [
    'create_client', 'TeemoAPIClient', 'TeemoAPIError', 'MissingConfigError',
    'MissingCallbackError', 'InvalidPlatformError', 'InvalidJSONError',
    'APIFailureError',
]
