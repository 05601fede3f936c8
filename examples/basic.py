#!/usr/bin/env python3
# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0
"""
Create a private Daily room and an owner token to join it.

Usage:
    DAILY_API_KEY=your-key python examples/basic.py
    # Or put DAILY_API_KEY in a .env file

With DAILY_DOMAIN_ID set, a guest token is also signed locally.
"""

import asyncio
import logging
import sys

from dailyco import (
    Client,
    CreateMeetingToken,
    CreateRoom,
    DailyCoError,
    RoomPrivacy,
    RoomPropertiesBuilder,
)
from dailyco.config import load_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def main() -> int:
    try:
        settings = load_settings()
        client = Client(settings.api_key, base_url=settings.api_url, timeout=settings.timeout)

        # Make a customized room
        room = await (
            CreateRoom()
            .name("my-test-room")
            .privacy(RoomPrivacy.PRIVATE)
            .properties(
                RoomPropertiesBuilder()
                .enable_screenshare(False)
                .max_participants(20)
                .start_audio_off(True)
            )
            .send(client)
        )

        # Private rooms need a meeting token to join; make ourselves owner
        token = await CreateMeetingToken().room_name(room.name).is_owner(True).send(client)

        # Guests can get a token without another round trip to Daily
        guest_token = None
        if settings.domain_id:
            guest_token = (
                CreateMeetingToken()
                .room_name(room.name)
                .user_name("Guest")
                .self_sign(settings.domain_id, settings.api_key)
            )
    except DailyCoError as e:
        logger.error(f"❌ {e}")
        return 1

    print(f"Room URL: {room.url}")
    print(f"Join as owner: {room.url}?t={token}")
    if guest_token:
        print(f"Join as guest: {room.url}?t={guest_token}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
