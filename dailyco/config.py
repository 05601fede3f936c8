# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Settings - Daily client

Reads Daily credentials and endpoint settings from the environment (and a
``.env`` file, if present).

Environment variables:
- DAILY_API_KEY: Daily API key (required)
- DAILY_DOMAIN_ID: Daily domain id, needed to self-sign meeting tokens
- DAILY_API_URL: API endpoint (default: https://api.daily.co/v1/)
- DAILY_API_TIMEOUT: Per-request timeout in seconds (default: 30)
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from dailyco.errors import ClientUsageError

DEFAULT_API_URL = "https://api.daily.co/v1/"
DEFAULT_TIMEOUT = 30.0


class DailySettings(BaseModel):
    """Connection settings for a ``Client``."""

    api_key: str
    domain_id: str | None = None
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT


def load_settings() -> DailySettings:
    """
    Load Daily settings from the environment.

    Raises:
        ClientUsageError: If DAILY_API_KEY is missing or a value is malformed
    """
    load_dotenv()

    api_key = os.getenv("DAILY_API_KEY")
    if not api_key:
        raise ClientUsageError("DAILY_API_KEY is required")

    try:
        return DailySettings(
            api_key=api_key,
            domain_id=os.getenv("DAILY_DOMAIN_ID") or None,
            api_url=os.getenv("DAILY_API_URL") or DEFAULT_API_URL,
            timeout=os.getenv("DAILY_API_TIMEOUT") or DEFAULT_TIMEOUT,
        )
    except ValidationError as e:
        raise ClientUsageError(f"invalid Daily settings: {e}") from e
