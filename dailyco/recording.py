# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Recordings - Daily client

Recording entities and the request builders for the recording endpoints:
- GET /v1/recordings
- GET /v1/recordings/{id}/access-link
"""

from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from dailyco.configuration import RecordingStatusValue
from dailyco.properties import (
    LIST_RECORDINGS_FIELDS,
    RECORDING_ACCESS_LINK_FIELDS,
    PropertyBag,
)

if TYPE_CHECKING:
    from dailyco.client import Client


class RecordingObject(BaseModel):
    """
    A single saved recording.

    See https://docs.daily.co/reference/rest-api/recordings/config
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: UUID
    room_name: str
    start_ts: int = Field(description="Unix timestamp when the recording started")
    status: RecordingStatusValue
    max_participants: int = Field(
        description="Most participants ever in the room together during the recording"
    )
    duration: int | None = Field(
        None, description="Approximate length in seconds; missing while in progress"
    )
    s3key: str
    meeting_session_id: UUID = Field(alias="mtgSessionId")


class RecordingAccessLink(BaseModel):
    """Signed, time-limited download link for a recording's .mp4 on S3."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    download_link: str
    expires: int = Field(description="Unix timestamp after which the link stops working")


class ListedRecordings(BaseModel):
    """One page of recordings, newest first."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    total_count: int = Field(description="Total number of recordings stored")
    data: list[RecordingObject] = Field(default_factory=list)


class GetRecordingAccessLink(PropertyBag):
    """
    Request for a recording access link.

    See https://docs.daily.co/reference/rest-api/recordings/get-recording-link
    """

    fields = RECORDING_ACCESS_LINK_FIELDS

    def valid_for_secs(self, secs: int) -> "GetRecordingAccessLink":
        """How many seconds from now the link stays valid."""
        return self.set_field("valid_for_secs", secs)

    async def send(self, client: "Client", recording_id: UUID | str) -> RecordingAccessLink:
        return await client.get_recording_access_link(recording_id, self)


class ListRecordings(PropertyBag):
    """
    Request listing cloud recordings, newest first.

    Paging is driven by the caller through ``limit`` and the
    ``starting_after``/``ending_before`` cursors.
    """

    fields = LIST_RECORDINGS_FIELDS

    def limit(self, limit: int) -> "ListRecordings":
        """Page size. Daily defaults to 100."""
        return self.set_field("limit", limit)

    def ending_before(self, ending_before: UUID) -> "ListRecordings":
        """Cursor for fetching the previous page."""
        return self.set_field("ending_before", ending_before)

    def starting_after(self, starting_after: UUID) -> "ListRecordings":
        """Cursor for fetching the next page."""
        return self.set_field("starting_after", starting_after)

    def room_name(self, room_name: str) -> "ListRecordings":
        """Only list recordings of this room."""
        return self.set_field("room_name", room_name)

    async def send(self, client: "Client") -> ListedRecordings:
        return await client.list_recordings(self)
