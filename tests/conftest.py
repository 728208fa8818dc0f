"""Shared fixtures for the captainteemo client tests."""

import json
from unittest.mock import Mock

import pytest
import requests

from resteemo.api.teemo_api import TeemoAPIClient


def make_response(body, status_code=200):
    """Build a fake requests.Response carrying `body`."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    response.content = body.encode('utf-8') if isinstance(body, str) else body
    return response


@pytest.fixture
def session():
    session = Mock(spec=requests.Session)
    session.request.return_value = make_response({'success': True, 'data': {'name': 'Faker'}})
    return session


@pytest.fixture
def client(session):
    return TeemoAPIClient('resteemo-tests (tests@example.com)', session=session)


@pytest.fixture
def recorder():
    """A callback that records every (error, response) pair it receives."""
    calls = []

    def callback(error, response):
        calls.append((error, response))
        return response

    callback.calls = calls
    return callback
