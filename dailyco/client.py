# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Daily Client - Daily client

Async client for the Daily REST API (https://docs.daily.co/reference/rest-api).

Key Features:
- Real HTTP requests using an httpx async client per call
- Typed request builders and default-filled response entities
- Non-2xx responses raised as ``ServiceError`` with Daily's error kind/info
- Transport and decoding failures raised as ``TransportError``

The client only holds its endpoint, timeout and Authorization header, so one
instance can be shared freely between tasks.
"""

import logging
from typing import Any, TypeVar
from urllib.parse import quote
from uuid import UUID

import httpx
from pydantic import BaseModel, ValidationError

from dailyco.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, load_settings
from dailyco.errors import (
    ClientUsageError,
    DailyCoErrorInfo,
    PaginationRequiredError,
    ServiceError,
    TransportError,
)
from dailyco.meeting_token import CreateMeetingToken, MeetingToken
from dailyco.recording import (
    GetRecordingAccessLink,
    ListedRecordings,
    ListRecordings,
    RecordingAccessLink,
    RecordingObject,
)
from dailyco.room import CreateRoom, Room, UpdateRoom

logger = logging.getLogger(__name__)

# GET /rooms returns at most one page of this size
ROOMS_PAGE_LIMIT = 100

ModelT = TypeVar("ModelT", bound=BaseModel)


class _RoomList(BaseModel):
    total_count: int
    data: list[Room]


class _TokenResponse(BaseModel):
    token: str


class Client:
    """Client for making Daily API requests."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the Daily client.

        Args:
            api_key: Daily API key (can be just the token or "Bearer <token>" format)
            base_url: API endpoint, mainly overridden to point at a mock server
            timeout: Per-request timeout in seconds

        Raises:
            ClientUsageError: If the API key is empty or contains non-ASCII characters
        """
        auth_header = api_key.strip()
        if not auth_header:
            raise ClientUsageError("API key must not be empty")
        if not auth_header.isascii():
            raise ClientUsageError("API key must include only ASCII characters")
        if not auth_header.startswith("Bearer "):
            auth_header = f"Bearer {auth_header}"

        self._auth_header = auth_header
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> "Client":
        """Create a client from DAILY_API_KEY / DAILY_API_URL / DAILY_API_TIMEOUT."""
        settings = load_settings()
        return cls(settings.api_key, base_url=settings.api_url, timeout=settings.timeout)

    def __repr__(self) -> str:
        # Never include the key
        return f"Client(base_url={self.base_url!r})"

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers for Daily API requests."""
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": self._auth_header,
        }

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Send one request to Daily.

        Raises:
            TransportError: If the request could not be completed
        """
        logger.debug(f"Daily API request: {method} {path}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method,
                    f"{self.base_url}{path}",
                    headers=self._get_headers(),
                    json=json,
                    params=params,
                )
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path}: {e}") from e

        logger.debug(f"Daily API response: {method} {path} -> {response.status_code}")
        return response

    def _raise_for_status(self, response: httpx.Response) -> None:
        """
        Raise the matching error for a non-2xx response.

        Raises:
            ServiceError: If the body is Daily's structured error
            TransportError: If the body cannot be read as one
        """
        if response.is_success:
            return

        try:
            info = DailyCoErrorInfo.model_validate(response.json())
        except ValueError as e:
            raise TransportError(
                f"Daily returned status {response.status_code} with an unreadable body"
            ) from e

        logger.warning(
            f"Daily API error ({response.status_code}): {info.error} - {info.info}"
        )
        raise ServiceError(info, status_code=response.status_code)

    def _parse_response(self, response: httpx.Response, model: type[ModelT]) -> ModelT:
        """Check the status and decode a successful body into ``model``."""
        self._raise_for_status(response)

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError("Daily returned a body that is not valid JSON") from e

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise TransportError(
                f"Daily response did not match {model.__name__}: {e}"
            ) from e

    @staticmethod
    def _room_path(room_name: str) -> str:
        return f"rooms/{quote(room_name, safe='')}"

    @staticmethod
    def _recording_path(recording_id: UUID | str) -> str:
        if not isinstance(recording_id, UUID):
            try:
                recording_id = UUID(recording_id)
            except ValueError as e:
                raise ClientUsageError(f"recording id must be a UUID, got {recording_id!r}") from e
        return f"recordings/{quote(str(recording_id), safe='')}"

    async def get_room(self, room_name: str) -> Room:
        """Retrieve the room with this name."""
        response = await self._request("GET", self._room_path(room_name))
        return self._parse_response(response, Room)

    async def get_rooms(self) -> list[Room]:
        """
        Retrieve all rooms on the domain.

        Pagination is not implemented, so a domain with 100 or more rooms
        raises ``PaginationRequiredError`` instead of returning a partial list.
        """
        response = await self._request("GET", "rooms")
        listing = self._parse_response(response, _RoomList)
        if listing.total_count >= ROOMS_PAGE_LIMIT:
            logger.warning(
                f"Daily reported {listing.total_count} rooms; pagination is required"
            )
            raise PaginationRequiredError(listing.total_count)
        return listing.data

    async def create_room(self, request: CreateRoom) -> Room:
        """Create a room from a ``CreateRoom`` request."""
        response = await self._request("POST", "rooms", json=request.to_dict())
        room = self._parse_response(response, Room)
        logger.info(f"✅ Daily room created: {room.name}")
        return room

    async def update_room(self, room_name: str, request: UpdateRoom) -> Room:
        """Apply an ``UpdateRoom`` request to an existing room."""
        response = await self._request(
            "POST", self._room_path(room_name), json=request.to_dict()
        )
        return self._parse_response(response, Room)

    async def delete_room(self, room_name: str) -> None:
        """
        Delete the room with this name.

        Raises ``ServiceError`` with kind ``not-found`` if it does not exist.
        """
        response = await self._request("DELETE", self._room_path(room_name))
        self._raise_for_status(response)
        logger.info(f"Daily room deleted: {room_name}")

    async def create_meeting_token(self, request: CreateMeetingToken) -> str:
        """Have Daily issue a meeting token and return it."""
        response = await self._request(
            "POST", "meeting-tokens", json={"properties": request.to_dict()}
        )
        return self._parse_response(response, _TokenResponse).token

    async def get_meeting_token(self, token: str) -> MeetingToken:
        """Validate a meeting token and retrieve its configuration."""
        response = await self._request("GET", f"meeting-tokens/{quote(token, safe='')}")
        return self._parse_response(response, MeetingToken)

    async def get_recording(self, recording_id: UUID | str) -> RecordingObject:
        """Get information about a specific recording."""
        response = await self._request("GET", self._recording_path(recording_id))
        return self._parse_response(response, RecordingObject)

    async def delete_recording(self, recording_id: UUID | str) -> None:
        """Delete a specific recording."""
        response = await self._request("DELETE", self._recording_path(recording_id))
        self._raise_for_status(response)

    async def get_recording_access_link(
        self,
        recording_id: UUID | str,
        request: GetRecordingAccessLink | None = None,
    ) -> RecordingAccessLink:
        """Create and return a time-limited download link for a recording."""
        params = request.to_dict() if request is not None else None
        response = await self._request(
            "GET", f"{self._recording_path(recording_id)}/access-link", params=params
        )
        return self._parse_response(response, RecordingAccessLink)

    async def list_recordings(self, request: ListRecordings | None = None) -> ListedRecordings:
        """List one page of recordings."""
        params = request.to_dict() if request is not None else None
        response = await self._request("GET", "recordings", params=params)
        return self._parse_response(response, ListedRecordings)
