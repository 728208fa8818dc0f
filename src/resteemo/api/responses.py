"""Validation of captainteemo response envelopes.

Responses look like ``{"success": true, "data": {...}}``. Some endpoints
also embed a second flag, ``data._success``, which must be honoured too.
"""

import json
from typing import Any, Union

from .errors import APIFailureError, InvalidJSONError


def parse_body(raw: Union[bytes, str]) -> Any:
    """Parse a complete response body.

    Raises:
        InvalidJSONError: If the body is not UTF-8 encoded JSON
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode('utf-8')
        except UnicodeDecodeError:
            raise InvalidJSONError()

    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        raise InvalidJSONError(raw)


def validate_response(raw: Union[bytes, str]) -> Any:
    """Parse a response body and check both success flags.

    Args:
        raw: The full response body

    Returns:
        The parsed response, unchanged

    Raises:
        InvalidJSONError: If the body cannot be parsed
        APIFailureError: If `success` or `data._success` is falsy
    """
    response = parse_body(raw)

    if not isinstance(response, dict) or not response.get('success'):
        raise APIFailureError('api failed', response)

    data = response.get('data')
    if isinstance(data, dict) and '_success' in data and not data['_success']:
        raise APIFailureError('api failed at second success check', response)

    return response
