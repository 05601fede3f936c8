# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Configuration Options - Daily client

Enumerations of the string values Daily recognises for room and meeting
token settings. Each enum value is the exact wire string.

Daily adds new options over time, so entity fields use the ``*Value`` aliases
below: a recognised string becomes the enum member, anything else is kept as
the raw string instead of failing the whole response.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import PlainValidator


class Region(str, Enum):
    """Signaling server region for hosting a call."""

    AF_SOUTH_1 = "af-south-1"  # Cape Town
    AP_NORTHEAST_2 = "ap-northeast-2"  # Seoul
    AP_SOUTHEAST_1 = "ap-southeast-1"  # Singapore
    AP_SOUTHEAST_2 = "ap-southeast-2"  # Sydney
    AP_SOUTH_1 = "ap-south-1"  # Mumbai
    EU_CENTRAL_1 = "eu-central-1"  # Frankfurt
    EU_WEST_2 = "eu-west-2"  # London
    SA_EAST_1 = "sa-east-1"  # Sao Paulo
    US_EAST_1 = "us-east-1"  # N. Virginia
    US_WEST_2 = "us-west-2"  # Oregon


class RtmpGeoRegion(str, Enum):
    """Region where an RTMP stream should originate."""

    US_WEST_2 = "us-west-2"
    EU_CENTRAL_1 = "eu-central-1"
    AP_SOUTHEAST_1 = "ap-southeast-1"


class DailyLang(str, Enum):
    """Language of the Daily Prebuilt call UI."""

    DE = "de"
    EN = "en"
    ES = "es"
    FI = "fi"
    FR = "fr"
    IT = "it"
    JP = "jp"
    KA = "ka"
    NL = "nl"
    NO = "no"
    PT = "pt"
    PL = "pl"
    RU = "ru"
    SV = "sv"
    TR = "tr"
    # Follow the participant's browser language preferences
    USER = "user"


class RecordingType(str, Enum):
    """
    Allowed recording type for a room or token.

    See https://docs.daily.co/reference/rest-api/rooms/config#enable_recording
    """

    CLOUD = "cloud"
    RTP_TRACKS = "rtp-tracks"
    OUTPUT_BYTE_STREAM = "output-byte-stream"
    LOCAL = "local"


class SignalingImp(str, Enum):
    """Signaling implementation used by the room."""

    WS = "ws"


class RoomPrivacy(str, Enum):
    """Room visibility. Private rooms need a meeting token or owner approval."""

    PUBLIC = "public"
    PRIVATE = "private"


class RecordingStatus(str, Enum):
    """Status of a saved recording."""

    FINISHED = "finished"
    IN_PROGRESS = "in-progress"
    CANCELED = "canceled"


# Daily's documented defaults, used only when materializing entities
DEFAULT_LANG = DailyLang.EN
DEFAULT_SIGNALING_IMP = SignalingImp.WS
DEFAULT_PRIVACY = RoomPrivacy.PUBLIC


def open_enum(enum_cls: type[Enum]) -> Any:
    """Annotated type accepting ``enum_cls`` members or unrecognised strings."""

    def coerce(value: Any) -> Any:
        if isinstance(value, enum_cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"expected a string for {enum_cls.__name__}")
        try:
            return enum_cls(value)
        except ValueError:
            return value

    return Annotated[enum_cls | str, PlainValidator(coerce)]


RegionValue = open_enum(Region)
RtmpGeoRegionValue = open_enum(RtmpGeoRegion)
DailyLangValue = open_enum(DailyLang)
RecordingTypeValue = open_enum(RecordingType)
SignalingImpValue = open_enum(SignalingImp)
RoomPrivacyValue = open_enum(RoomPrivacy)
RecordingStatusValue = open_enum(RecordingStatus)
