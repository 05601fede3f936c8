# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Centralized test configuration for pytest.

This file is automatically loaded by pytest and provides:
- Environment variable loading via dotenv
- A mocked httpx.AsyncClient for unit tests
- Shared test fixtures and constants
"""

from unittest.mock import AsyncMock, patch

import pytest
from dotenv import load_dotenv

from dailyco import Client

# Load environment variables once for all tests
load_dotenv()

TEST_API_KEY = "test-api-key"


@pytest.fixture
def client() -> Client:
    """Client pointed at the default endpoint with a fake key."""
    return Client(TEST_API_KEY)


@pytest.fixture
def mock_http():
    """
    Patch httpx.AsyncClient inside dailyco.client.

    Yields the object the client gets from ``async with``; tests set
    ``mock_http.request`` to an AsyncMock returning an httpx.Response.
    """
    with patch("dailyco.client.httpx.AsyncClient") as mock_client:
        mock_client_instance = AsyncMock()
        mock_client_instance.__aenter__ = AsyncMock(return_value=mock_client_instance)
        mock_client_instance.__aexit__ = AsyncMock(return_value=None)
        mock_client.return_value = mock_client_instance
        yield mock_client_instance


@pytest.fixture
def room_payload():
    """Factory for room objects as Daily returns them."""

    def make(name: str = "test-room", **overrides) -> dict:
        payload = {
            "id": "5e3cf703-5547-47d6-a371-37b1f0b4427f",
            "name": name,
            "api_created": True,
            "privacy": "public",
            "url": f"https://example.daily.co/{name}",
            "created_at": "2024-05-01T12:00:00.000Z",
            "config": {},
        }
        payload.update(overrides)
        return payload

    return make
