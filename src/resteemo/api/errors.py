"""Exceptions raised by the captainteemo API client.

Every message starts with ERROR_TAG so callers can tell where an error came
from once it reaches their logs.
"""

from typing import Any, Optional

ERROR_TAG = 'resteemo - '


class TeemoAPIError(Exception):
    """Base exception for captainteemo API client errors.

    Attributes:
        message (str): Error message without the library tag
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(ERROR_TAG + message)


class MissingConfigError(TeemoAPIError, ValueError):
    """Raised when a client is built without a user agent string."""


class MissingCallbackError(TeemoAPIError, TypeError):
    """Raised when an operation is invoked without a callable callback."""


class InvalidPlatformError(TeemoAPIError, ValueError):
    """Raised when a platform is neither a known short code nor full name.

    Attributes:
        platform: The platform value that failed to resolve
    """

    def __init__(self, platform: Any) -> None:
        self.platform = platform
        super().__init__('invalid platform')


class InvalidJSONError(TeemoAPIError):
    """Raised when a response body is not valid JSON.

    Attributes:
        response_text (Optional[str]): Raw body if it could be decoded
    """

    def __init__(self, response_text: Optional[str] = None) -> None:
        self.response_text = response_text
        super().__init__('invalid json response')


class APIFailureError(TeemoAPIError):
    """Raised when the API reports failure through a success flag.

    Attributes:
        response: The parsed response that carried the failure flag
    """

    def __init__(self, message: str, response: Any = None) -> None:
        self.response = response
        super().__init__(message)
