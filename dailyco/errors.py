# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Errors - Daily client

Every failure raised by this package derives from ``DailyCoError``:

- ``TransportError``: the request never completed, or the response body could
  not be decoded into what we expected.
- ``ServiceError``: Daily answered with a non-2xx status and a structured
  ``{"error": ..., "info": ...}`` body.
- ``ClientUsageError``: a local precondition failed before any request was
  sent (for example a non-ASCII API key).
- ``PaginationRequiredError``: a listing needs more than one page, which is
  not implemented.

Nothing here retries. Errors are raised to the caller as-is.
"""

import json
from enum import Enum

from pydantic import BaseModel, ConfigDict

from dailyco.configuration import open_enum


class DailyCoErrorKind(str, Enum):
    """
    The fixed ``error`` vocabulary returned by Daily.

    See https://docs.daily.co/reference/rest-api#errors
    """

    # The API key is not valid
    AUTHENTICATION_ERROR = "authentication-error"
    # The Authorization header is missing or badly formatted
    AUTHORIZATION_HEADER_ERROR = "authorization-header-error"
    # The JSON request body could not be parsed
    JSON_PARSING_ERROR = "json-parsing-error"
    # Missing or bad parameters; details are usually in ``info``
    INVALID_REQUEST_ERROR = "invalid-request-error"
    RATE_LIMIT_ERROR = "rate-limit-error"
    SERVER_ERROR = "server-error"
    NOT_FOUND = "not-found"


class DailyCoErrorInfo(BaseModel):
    """Error body returned by Daily alongside a non-2xx status."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    error: open_enum(DailyCoErrorKind) | None = None
    info: str | None = None

    def __str__(self) -> str:
        return json.dumps(self.model_dump(mode="json"), indent=2)


class DailyCoError(Exception):
    """Base class for all errors raised by the Daily client."""


class TransportError(DailyCoError):
    """The request failed in transit or its response could not be decoded."""

    def __init__(self, message: str):
        super().__init__(f"failure making the request: {message}")


class ServiceError(DailyCoError):
    """Daily rejected the request with a structured error body."""

    def __init__(self, info: DailyCoErrorInfo, status_code: int | None = None):
        self.info = info
        self.status_code = status_code
        super().__init__(f"daily request returned an error: {info}")

    @property
    def kind(self) -> DailyCoErrorKind | str | None:
        return self.info.error

    def is_not_found(self) -> bool:
        """True when Daily reported the resource as ``not-found``."""
        return self.kind == DailyCoErrorKind.NOT_FOUND


class ClientUsageError(DailyCoError):
    """A local precondition failed before any request was made."""

    def __init__(self, message: str):
        super().__init__(f"client usage problem: {message}")


class PaginationRequiredError(DailyCoError):
    """The result set needs pagination, which is not implemented."""

    def __init__(self, total_count: int):
        self.total_count = total_count
        super().__init__(
            f"response requires pagination ({total_count} results), "
            "which is not implemented yet"
        )
