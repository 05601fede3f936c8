# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Tests for loading settings from the environment.
"""

import os
from unittest.mock import patch

import pytest

from dailyco import ClientUsageError
from dailyco.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, load_settings


def _load(env: dict[str, str]):
    with patch.dict(os.environ, env, clear=True), patch("dailyco.config.load_dotenv"):
        return load_settings()


def test_defaults() -> None:
    settings = _load({"DAILY_API_KEY": "abc"})

    assert settings.api_key == "abc"
    assert settings.domain_id is None
    assert settings.api_url == DEFAULT_API_URL
    assert settings.timeout == DEFAULT_TIMEOUT


def test_all_values() -> None:
    settings = _load(
        {
            "DAILY_API_KEY": "abc",
            "DAILY_DOMAIN_ID": "domain-1",
            "DAILY_API_URL": "http://localhost:9000/v1/",
            "DAILY_API_TIMEOUT": "5",
        }
    )

    assert settings.domain_id == "domain-1"
    assert settings.api_url == "http://localhost:9000/v1/"
    assert settings.timeout == 5.0


def test_missing_api_key() -> None:
    with pytest.raises(ClientUsageError, match="DAILY_API_KEY"):
        _load({})


def test_malformed_timeout() -> None:
    with pytest.raises(ClientUsageError, match="invalid Daily settings"):
        _load({"DAILY_API_KEY": "abc", "DAILY_API_TIMEOUT": "soon"})


def test_dotenv_is_loaded() -> None:
    with patch.dict(os.environ, {"DAILY_API_KEY": "abc"}, clear=True), patch(
        "dailyco.config.load_dotenv"
    ) as mock_load_dotenv:
        load_settings()

    mock_load_dotenv.assert_called_once()
