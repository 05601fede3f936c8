# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Rooms - Daily client

Create and update requests for Daily rooms, and the ``Room`` entity Daily
returns for them.

Implements request bodies for:
- POST /v1/rooms (create)
- POST /v1/rooms/{room_name} (update)
"""

from typing import TYPE_CHECKING, Any, Self

from pydantic import BaseModel, ConfigDict, Field

from dailyco.configuration import DEFAULT_PRIVACY, RoomPrivacy, RoomPrivacyValue
from dailyco.properties import CREATE_ROOM_FIELDS, UPDATE_ROOM_FIELDS, PropertyBag
from dailyco.room_properties import (
    RoomProperties,
    RoomPropertiesBuilder,
    RoomPropertySetters,
)

if TYPE_CHECKING:
    from dailyco.client import Client


class _RoomRequest(RoomPropertySetters, PropertyBag):
    """Top-level room fields plus an embedded, sparse ``properties`` object."""

    def __init__(self) -> None:
        super().__init__()
        self._properties = RoomPropertiesBuilder()

    def _set_property(self, name: str, value: Any) -> Self:
        self._properties.set_field(name, value)
        return self

    def privacy(self, privacy: RoomPrivacy) -> Self:
        """Set the visibility of the room."""
        return self.set_field("privacy", privacy)

    def properties(self, properties: RoomPropertiesBuilder) -> Self:
        """
        Apply every property set on ``properties``.

        Values already set on this request are overwritten by the ones in
        ``properties``; properties it leaves unset are kept.
        """
        self._properties.update(properties)
        return self

    def update(self, other: PropertyBag) -> Self:
        """Copy every top-level field and property set on ``other`` (last write wins)."""
        if isinstance(other, RoomPropertiesBuilder):
            return self.properties(other)
        super().update(other)
        if isinstance(other, _RoomRequest):
            self._properties.update(other._properties)
        return self

    def is_set(self, name: str) -> bool:
        """True if ``name`` was set, either as a top-level field or as a property."""
        return super().is_set(name) or self._properties.is_set(name)

    def get(self, name: str) -> Any:
        if super().is_set(name):
            return super().get(name)
        return self._properties.get(name)

    def to_dict(self) -> dict[str, Any]:
        """
        Build the JSON request body.

        ``properties`` is only included when at least one property was set.
        """
        body = super().to_dict()
        properties = self._properties.to_dict()
        if properties:
            body["properties"] = properties
        return body


class CreateRoom(_RoomRequest):
    """
    Request to create a Daily room with custom configuration.

    Example:
        >>> room = await (
        ...     CreateRoom()
        ...     .name("standup")
        ...     .privacy(RoomPrivacy.PRIVATE)
        ...     .start_audio_off(True)
        ...     .send(client)
        ... )
    """

    fields = CREATE_ROOM_FIELDS

    def name(self, name: str) -> Self:
        """Name of the room. Daily generates a random one if not provided."""
        return self.set_field("name", name)

    async def send(self, client: "Client") -> "Room":
        """Create the room. The builder can be sent again afterwards."""
        return await client.create_room(self)


class UpdateRoom(_RoomRequest):
    """Request to change the privacy or properties of an existing room."""

    fields = UPDATE_ROOM_FIELDS

    async def send(self, client: "Client", room_name: str) -> "Room":
        """Apply this update to the room called ``room_name``."""
        return await client.update_room(room_name, self)


class Room(BaseModel):
    """Room object as reported by Daily."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(description="Unique room identifier (UUID)")
    name: str = Field(description="Room name used in URLs")
    api_created: bool = Field(False, description="Whether the room was created via the API")
    privacy: RoomPrivacyValue = Field(DEFAULT_PRIVACY, description="Room visibility")
    url: str = Field(description="URL to join the room")
    created_at: str = Field(description="ISO 8601 creation timestamp")
    config: RoomProperties = Field(
        default_factory=RoomProperties, description="Configuration options for this room"
    )
