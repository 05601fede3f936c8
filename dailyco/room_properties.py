# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Room Properties - Daily client

Builder and materialized entity for the ``properties`` object of a Daily room.

https://docs.daily.co/reference/rest-api/rooms/config

The builder (``RoomPropertiesBuilder``) only sends what the caller set. The
entity (``RoomProperties``) is what Daily reports back: fields Daily leaves
out of its response are filled with Daily's documented default, and fields
without a documented default stay ``None``.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

from dailyco.configuration import (
    DEFAULT_LANG,
    DEFAULT_SIGNALING_IMP,
    DailyLang,
    DailyLangValue,
    RecordingType,
    RecordingTypeValue,
    Region,
    RegionValue,
    RtmpGeoRegion,
    RtmpGeoRegionValue,
    SignalingImp,
    SignalingImpValue,
)
from dailyco.properties import ROOM_PROPERTY_FIELDS, PropertyBag


class RecordingsBucket(BaseModel):
    """
    Custom S3 bucket that cloud recordings are written to.

    See https://docs.daily.co/reference/rest-api/rooms/config#recordings_bucket
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    bucket_name: str = Field(description="Name of the S3 bucket")
    bucket_region: str = Field(description="AWS region of the bucket, e.g. us-west-2")
    assume_role_arn: str = Field(description="IAM role Daily assumes to write to the bucket")
    allow_api_access: bool = Field(
        False, description="Allow recordings to be accessed through the Daily API"
    )
    allow_streaming_from_bucket: bool = Field(
        False, description="Allow Daily to stream recordings from the bucket"
    )


class RoomPropertySetters:
    """
    Chainable setters shared by every request that carries room properties.

    Classes mixing this in decide where the value goes by implementing
    ``_set_property``.
    """

    def _set_property(self, name: str, value: Any) -> Self:
        raise NotImplementedError

    def nbf(self, nbf: int) -> Self:
        """UTC timestamp before which the room cannot be joined."""
        return self._set_property("nbf", nbf)

    def exp(self, exp: int) -> Self:
        """UTC timestamp after which the room expires and is eventually deleted."""
        return self._set_property("exp", exp)

    def max_participants(self, max_participants: int) -> Self:
        """Maximum number of participants who can enter the room."""
        return self._set_property("max_participants", max_participants)

    def enable_people_ui(self, enable_people_ui: bool) -> Self:
        """Whether Daily Prebuilt displays the People UI."""
        return self._set_property("enable_people_ui", enable_people_ui)

    def enable_pip_ui(self, enable_pip_ui: bool) -> Self:
        """Whether the room can use Daily Prebuilt's Picture in Picture controls."""
        return self._set_property("enable_pip_ui", enable_pip_ui)

    def enable_prejoin_ui(self, enable_prejoin_ui: bool) -> Self:
        """Send participants through a camera, mic and browser check before joining."""
        return self._set_property("enable_prejoin_ui", enable_prejoin_ui)

    def enable_network_ui(self, enable_network_ui: bool) -> Self:
        """Show the network button and the network panel it opens."""
        return self._set_property("enable_network_ui", enable_network_ui)

    def enable_knocking(self, enable_knocking: bool) -> Self:
        """
        Turn on the lobby for private rooms.

        Participants without a meeting token can "knock" and wait for an owner
        to admit them.
        """
        return self._set_property("enable_knocking", enable_knocking)

    def enable_screenshare(self, enable_screenshare: bool) -> Self:
        return self._set_property("enable_screenshare", enable_screenshare)

    def enable_video_processing_ui(self, enable_video_processing_ui: bool) -> Self:
        """Whether Daily Prebuilt displays background blur controls."""
        return self._set_property("enable_video_processing_ui", enable_video_processing_ui)

    def enable_chat(self, enable_chat: bool) -> Self:
        return self._set_property("enable_chat", enable_chat)

    def start_video_off(self, start_video_off: bool) -> Self:
        return self._set_property("start_video_off", start_video_off)

    def start_audio_off(self, start_audio_off: bool) -> Self:
        return self._set_property("start_audio_off", start_audio_off)

    def owner_only_broadcast(self, owner_only_broadcast: bool) -> Self:
        """Only meeting owners may turn on camera, unmute, and share screen."""
        return self._set_property("owner_only_broadcast", owner_only_broadcast)

    def enable_recording(self, enable_recording: RecordingType) -> Self:
        return self._set_property("enable_recording", enable_recording)

    def eject_at_room_exp(self, eject_at_room_exp: bool) -> Self:
        """
        End any meeting still running at ``exp`` by ejecting everyone.

        Meeting tokens can override this with their own eject settings.
        """
        return self._set_property("eject_at_room_exp", eject_at_room_exp)

    def eject_after_elapsed(self, eject_after_elapsed: int) -> Self:
        """Eject each participant this many seconds after they join."""
        return self._set_property("eject_after_elapsed", eject_after_elapsed)

    def enable_hidden_participants(self, enable_hidden_participants: bool) -> Self:
        """Non-owners join hidden: no named presence and no participant events."""
        return self._set_property("enable_hidden_participants", enable_hidden_participants)

    def enable_mesh_sfu(self, enable_mesh_sfu: bool) -> Self:
        """Spread the call's media over multiple SFUs (for large or live-streamed calls)."""
        return self._set_property("enable_mesh_sfu", enable_mesh_sfu)

    def experimental_optimize_large_calls(self, experimental_optimize_large_calls: bool) -> Self:
        """Support group calls of up to 300 and broadcasts of up to 15K participants."""
        return self._set_property(
            "experimental_optimize_large_calls", experimental_optimize_large_calls
        )

    def lang(self, lang: DailyLang) -> Self:
        """Default language of the Daily Prebuilt UI for this room."""
        return self._set_property("lang", lang)

    def meeting_join_hook(self, meeting_join_hook: str) -> Self:
        """URL receiving a webhook whenever a user joins (255 characters max)."""
        return self._set_property("meeting_join_hook", meeting_join_hook)

    def signaling_imp(self, signaling_imp: SignalingImp) -> Self:
        return self._set_property("signaling_imp", signaling_imp)

    def geo(self, geo: Region) -> Self:
        """Pin the signaling server to a region."""
        return self._set_property("geo", geo)

    def rtmp_geo(self, rtmp_geo: RtmpGeoRegion) -> Self:
        """Region where RTMP streams should originate."""
        return self._set_property("rtmp_geo", rtmp_geo)

    def enable_terse_logging(self, enable_terse_logging: bool) -> Self:
        """Reduce log volume; recommended above 300 participants."""
        return self._set_property("enable_terse_logging", enable_terse_logging)

    def recordings_bucket(self, recordings_bucket: RecordingsBucket) -> Self:
        """Write cloud recordings to your own S3 bucket."""
        return self._set_property("recordings_bucket", recordings_bucket)


class RoomPropertiesBuilder(RoomPropertySetters, PropertyBag):
    """
    Sparse set of room properties, sent as the ``properties`` object.

    Example:
        >>> RoomPropertiesBuilder().enable_chat(True).max_participants(20).to_dict()
        {'enable_chat': True, 'max_participants': 20}
    """

    fields = ROOM_PROPERTY_FIELDS

    def _set_property(self, name: str, value: Any) -> Self:
        return self.set_field(name, value)


class RoomProperties(BaseModel):
    """
    Room configuration as reported by Daily.

    Following the API docs, fields missing from a response take Daily's
    default value. Unknown fields in the response are ignored.

    ``enable_people_ui`` has no fixed default: when Daily leaves it out, the
    People panel follows the domain setting, so it stays ``None`` rather than
    ``False`` like the other UI toggles.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    nbf: int | None = None
    exp: int | None = None
    max_participants: int | None = None
    enable_people_ui: bool | None = Field(
        None, description="None when unset; the domain setting then applies"
    )
    enable_pip_ui: bool = False
    enable_prejoin_ui: bool | None = None
    enable_network_ui: bool = False
    enable_knocking: bool = False
    enable_screenshare: bool = True
    enable_video_processing_ui: bool = True
    enable_chat: bool = False
    start_video_off: bool = False
    start_audio_off: bool = False
    owner_only_broadcast: bool = False
    enable_recording: RecordingTypeValue | None = None
    eject_at_room_exp: bool = False
    eject_after_elapsed: int | None = None
    enable_hidden_participants: bool = False
    enable_mesh_sfu: bool | None = None
    experimental_optimize_large_calls: bool | None = None
    lang: DailyLangValue = DEFAULT_LANG
    meeting_join_hook: str | None = None
    signaling_imp: SignalingImpValue = DEFAULT_SIGNALING_IMP
    geo: RegionValue | None = None
    rtmp_geo: RtmpGeoRegionValue | None = None
    enable_terse_logging: bool = False
    recordings_bucket: RecordingsBucket | None = None

    @classmethod
    def from_builder(cls, builder: RoomPropertiesBuilder) -> "RoomProperties":
        """What Daily would report for a room created with ``builder``'s properties."""
        return cls.model_validate(builder.to_dict())
