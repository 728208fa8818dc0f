"""Tests for configuration loading."""

import logging

import pytest

from resteemo.api.config import ENDPOINT, Config, setup_logging
from resteemo.api.errors import MissingConfigError
from resteemo.api.teemo_api import TeemoAPIClient


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('TEEMO_USER_AGENT', 'TEEMO_ENDPOINT', 'DEBUG'):
        monkeypatch.delenv(name, raising=False)


def test_user_agent_from_environment(monkeypatch):
    monkeypatch.setenv('TEEMO_USER_AGENT', 'env-agent')

    config = Config()

    assert config.user_agent == 'env-agent'
    assert config.endpoint == ENDPOINT
    assert config.headers == {'Accept': 'application/json', 'User-Agent': 'env-agent'}


def test_argument_overrides_environment(monkeypatch):
    monkeypatch.setenv('TEEMO_USER_AGENT', 'env-agent')

    assert Config(user_agent='arg-agent').user_agent == 'arg-agent'


def test_missing_user_agent():
    with pytest.raises(MissingConfigError):
        Config()


def test_endpoint_and_debug_from_environment(monkeypatch):
    monkeypatch.setenv('TEEMO_ENDPOINT', 'http://localhost:9000')
    monkeypatch.setenv('DEBUG', 'True')

    config = Config(user_agent='agent')

    assert config.endpoint == 'http://localhost:9000'
    assert config.debug_mode is True


def test_client_from_config():
    config = Config(user_agent='agent', endpoint='http://localhost:9000')

    client = TeemoAPIClient.from_config(config)

    assert client.referer_string == 'agent'
    assert client.endpoint == 'http://localhost:9000'


def test_setup_logging_falls_back_to_info(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: captured.update(kwargs))

    logger = setup_logging('LOUD')

    assert captured['level'] == logging.INFO
    assert isinstance(logger, logging.Logger)


def test_setup_logging_file_handler(monkeypatch, tmp_path):
    captured = {}
    monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: captured.update(kwargs))

    setup_logging('debug', log_file=str(tmp_path / 'resteemo.log'))

    assert captured['level'] == logging.DEBUG
    assert any(isinstance(h, logging.FileHandler) for h in captured['handlers'])
    for handler in captured['handlers']:
        handler.close()
