# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Meeting Tokens - Daily client

Builder for Daily meeting tokens and the ``MeetingToken`` entity describing
a token's configuration.

A token can be obtained two ways:
- ``CreateMeetingToken.send`` asks Daily to issue one (POST /v1/meeting-tokens)
- ``CreateMeetingToken.self_sign`` signs one locally with your API key,
  skipping the round trip

Both paths read the same sparse field set, so a token produced either way
validates to the same ``MeetingToken``.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from dailyco.configuration import DailyLang, DailyLangValue, RecordingType, RecordingTypeValue
from dailyco.properties import MEETING_TOKEN_FIELDS, PropertyBag

if TYPE_CHECKING:
    from dailyco.client import Client


class CreateMeetingToken(PropertyBag):
    """
    Request for a meeting token giving access to a (private) room.

    Example:
        >>> token = await (
        ...     CreateMeetingToken()
        ...     .room_name("room-user-should-own")
        ...     .is_owner(True)
        ...     .send(client)
        ... )
    """

    fields = MEETING_TOKEN_FIELDS

    def room_name(self, room_name: str) -> "CreateMeetingToken":
        """Room the token is valid for. Without it the token works for every room in the domain."""
        return self.set_field("room_name", room_name)

    def eject_at_token_exp(self, eject_at_token_exp: bool) -> "CreateMeetingToken":
        """Eject the user when the token expires."""
        return self.set_field("eject_at_token_exp", eject_at_token_exp)

    def eject_after_elapsed(self, eject_after_elapsed: int) -> "CreateMeetingToken":
        """Eject the user this many seconds after they join."""
        return self.set_field("eject_after_elapsed", eject_after_elapsed)

    def nbf(self, nbf: int) -> "CreateMeetingToken":
        """UTC timestamp before which the token cannot be used."""
        return self.set_field("nbf", nbf)

    def exp(self, exp: int) -> "CreateMeetingToken":
        """UTC timestamp at which the token expires."""
        return self.set_field("exp", exp)

    def is_owner(self, is_owner: bool) -> "CreateMeetingToken":
        """Give the user meeting owner privileges."""
        return self.set_field("is_owner", is_owner)

    def user_name(self, user_name: str) -> "CreateMeetingToken":
        return self.set_field("user_name", user_name)

    def user_id(self, user_id: str) -> "CreateMeetingToken":
        return self.set_field("user_id", user_id)

    def enable_screenshare(self, enable_screenshare: bool) -> "CreateMeetingToken":
        return self.set_field("enable_screenshare", enable_screenshare)

    def start_video_off(self, start_video_off: bool) -> "CreateMeetingToken":
        """Keep the user's camera off when they first join."""
        return self.set_field("start_video_off", start_video_off)

    def start_audio_off(self, start_audio_off: bool) -> "CreateMeetingToken":
        """Keep the user's microphone muted when they first join."""
        return self.set_field("start_audio_off", start_audio_off)

    def enable_recording(self, enable_recording: RecordingType) -> "CreateMeetingToken":
        return self.set_field("enable_recording", enable_recording)

    def enable_prejoin_ui(self, enable_prejoin_ui: bool) -> "CreateMeetingToken":
        """Send the user through a camera, mic and browser check before joining."""
        return self.set_field("enable_prejoin_ui", enable_prejoin_ui)

    def enable_terse_logging(self, enable_terse_logging: bool) -> "CreateMeetingToken":
        """Reduce log volume; recommended above 300 participants."""
        return self.set_field("enable_terse_logging", enable_terse_logging)

    def start_cloud_recording(self, start_cloud_recording: bool) -> "CreateMeetingToken":
        """Start a cloud recording when the user joins (e.g. to always archive support calls)."""
        return self.set_field("start_cloud_recording", start_cloud_recording)

    def close_tab_on_exit(self, close_tab_on_exit: bool) -> "CreateMeetingToken":
        """Close the browser tab when the user leaves through the in-call menu."""
        return self.set_field("close_tab_on_exit", close_tab_on_exit)

    def redirect_on_meeting_exit(self, redirect_on_meeting_exit: str) -> "CreateMeetingToken":
        """Load this URL when the user leaves through the in-call menu."""
        return self.set_field("redirect_on_meeting_exit", redirect_on_meeting_exit)

    def lang(self, lang: DailyLang) -> "CreateMeetingToken":
        """Language of the Daily Prebuilt UI for this user."""
        return self.set_field("lang", lang)

    async def send(self, client: "Client") -> str:
        """Have Daily issue the token and return it."""
        return await client.create_meeting_token(self)

    def self_sign(self, domain_id: str, secret_key: str) -> str:
        """
        Sign the token locally instead of asking Daily to issue it.

        Args:
            domain_id: Your Daily domain id
            secret_key: Your Daily API key, used as the HMAC secret

        Returns:
            Compact JWT accepted by Daily like an issued token
        """
        # self_sign_token imports this module
        from dailyco.self_sign_token import self_sign_token

        return self_sign_token(self, domain_id, secret_key)


class MeetingToken(BaseModel):
    """
    Configuration of a meeting token, as validated and reported by Daily.

    Fields Daily leaves out take its documented default.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    room_name: str | None = None
    eject_at_token_exp: bool = False
    eject_after_elapsed: int | None = None
    nbf: int | None = None
    exp: int | None = None
    is_owner: bool = False
    user_name: str | None = None
    user_id: str | None = None
    enable_screenshare: bool = True
    start_video_off: bool = False
    start_audio_off: bool = False
    enable_recording: RecordingTypeValue | None = None
    enable_prejoin_ui: bool | None = None
    enable_terse_logging: bool = False
    start_cloud_recording: bool = False
    close_tab_on_exit: bool = False
    redirect_on_meeting_exit: str | None = None
    lang: DailyLangValue | None = None

    @classmethod
    def from_builder(cls, builder: CreateMeetingToken) -> "MeetingToken":
        """What Daily reports for a token created from ``builder``."""
        return cls.model_validate(builder.to_dict())
