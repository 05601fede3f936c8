# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Self-Signed Meeting Tokens - Daily client

Daily accepts meeting tokens signed locally with the domain's API key, as
long as their claims use Daily's short claim names (``r`` for room name,
``o`` for owner, ...) and carry the domain id in ``d``.

The claim names come from ``MEETING_TOKEN_FIELDS``, the same table that
drives the JSON body sent to POST /v1/meeting-tokens.
"""

import logging

import jwt

from dailyco.errors import ClientUsageError
from dailyco.meeting_token import CreateMeetingToken, MeetingToken
from dailyco.properties import MEETING_TOKEN_FIELDS

logger = logging.getLogger(__name__)

DOMAIN_CLAIM = "d"
SIGNING_ALGORITHM = "HS256"

_NAME_BY_CLAIM: dict[str, str] = {field.claim: field.name for field in MEETING_TOKEN_FIELDS}


def self_sign_token(config: CreateMeetingToken, domain_id: str, secret_key: str) -> str:
    """
    Sign a meeting token for ``config`` without calling Daily.

    Only fields set on ``config`` become claims; the token carries no other
    claims besides the domain id.

    Args:
        config: Meeting token builder
        domain_id: Daily domain id, stored in the ``d`` claim
        secret_key: Daily API key used as the HS256 secret

    Returns:
        Compact JWT string

    Raises:
        ClientUsageError: If the domain id or secret key is empty
    """
    if not domain_id:
        raise ClientUsageError("a domain id is required to self-sign meeting tokens")
    if not secret_key:
        raise ClientUsageError("a secret key is required to self-sign meeting tokens")

    payload = {DOMAIN_CLAIM: domain_id, **config.to_claims()}
    logger.debug(f"Self-signing meeting token with claims: {sorted(payload)}")
    return jwt.encode(payload, secret_key, algorithm=SIGNING_ALGORITHM)


def decode_self_signed_token(token: str, secret_key: str) -> tuple[str, MeetingToken]:
    """
    Verify a self-signed token and read its configuration back.

    Short claims are mapped back to their full field names and parsed with
    the same defaults Daily applies, so the result can be compared with what
    ``client.get_meeting_token`` returns. ``exp``/``nbf`` are not checked
    against the clock; Daily does that when the token is used.

    Returns:
        Tuple of (domain id, meeting token configuration)

    Raises:
        ClientUsageError: If the signature does not verify or the domain claim is missing
    """
    try:
        claims = jwt.decode(
            token,
            secret_key,
            algorithms=[SIGNING_ALGORITHM],
            options={"verify_exp": False, "verify_nbf": False},
        )
    except jwt.InvalidTokenError as e:
        raise ClientUsageError(f"meeting token could not be verified: {e}") from e

    domain_id = claims.pop(DOMAIN_CLAIM, None)
    if not domain_id:
        raise ClientUsageError("meeting token has no domain claim")

    fields = {
        _NAME_BY_CLAIM[claim]: value
        for claim, value in claims.items()
        if claim in _NAME_BY_CLAIM
    }
    return domain_id, MeetingToken.model_validate(fields)
