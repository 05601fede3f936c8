# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
dailyco - Typed async client for the Daily video-calling REST API.

Rooms, meeting tokens (issued or self-signed) and recordings.
"""

from .client import Client
from .configuration import (
    DailyLang,
    RecordingStatus,
    RecordingType,
    Region,
    RoomPrivacy,
    RtmpGeoRegion,
    SignalingImp,
)
from .errors import (
    ClientUsageError,
    DailyCoError,
    DailyCoErrorInfo,
    DailyCoErrorKind,
    PaginationRequiredError,
    ServiceError,
    TransportError,
)
from .meeting_token import CreateMeetingToken, MeetingToken
from .recording import (
    GetRecordingAccessLink,
    ListedRecordings,
    ListRecordings,
    RecordingAccessLink,
    RecordingObject,
)
from .room import CreateRoom, Room, UpdateRoom
from .room_properties import RecordingsBucket, RoomProperties, RoomPropertiesBuilder

__all__ = [
    "Client",
    "ClientUsageError",
    "CreateMeetingToken",
    "CreateRoom",
    "DailyCoError",
    "DailyCoErrorInfo",
    "DailyCoErrorKind",
    "DailyLang",
    "GetRecordingAccessLink",
    "ListRecordings",
    "ListedRecordings",
    "MeetingToken",
    "PaginationRequiredError",
    "RecordingAccessLink",
    "RecordingObject",
    "RecordingStatus",
    "RecordingType",
    "RecordingsBucket",
    "Region",
    "RoomPrivacy",
    "RoomProperties",
    "RoomPropertiesBuilder",
    "Room",
    "RtmpGeoRegion",
    "ServiceError",
    "SignalingImp",
    "TransportError",
    "UpdateRoom",
]
