# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Property Bag - Daily client

The static field tables for rooms, meeting tokens and recording listings,
and the sparse accumulator every request builder is built on.

**How omission works:**
A builder only stores the fields a caller explicitly set. When it is turned
into a request body, only those fields are emitted. A field the caller never
touched is absent from the JSON entirely (never ``null``), so Daily applies
its own default. Explicit ``False``/``0`` values are still sent.

Each field row also carries the short claim name used when a meeting token
is self-signed. The JSON body and the token claims are both produced from
the same table, so the two encodings cannot drift apart.
"""

from typing import Any, ClassVar, NamedTuple, Self

from dailyco.utils import to_wire


class PropertyField(NamedTuple):
    """One row of a field table: the JSON key and the self-signed claim key."""

    name: str
    claim: str


def _field(name: str, claim: str | None = None) -> PropertyField:
    return PropertyField(name=name, claim=claim or name)


# https://docs.daily.co/reference/rest-api/rooms/config
ROOM_PROPERTY_FIELDS: tuple[PropertyField, ...] = (
    _field("nbf"),
    _field("exp"),
    _field("max_participants"),
    _field("enable_people_ui"),
    _field("enable_pip_ui"),
    _field("enable_prejoin_ui"),
    _field("enable_network_ui"),
    _field("enable_knocking"),
    _field("enable_screenshare"),
    _field("enable_video_processing_ui"),
    _field("enable_chat"),
    _field("start_video_off"),
    _field("start_audio_off"),
    _field("owner_only_broadcast"),
    _field("enable_recording"),
    _field("eject_at_room_exp"),
    _field("eject_after_elapsed"),
    _field("enable_hidden_participants"),
    _field("enable_mesh_sfu"),
    _field("experimental_optimize_large_calls"),
    _field("lang"),
    _field("meeting_join_hook"),
    _field("signaling_imp"),
    _field("geo"),
    _field("rtmp_geo"),
    _field("enable_terse_logging"),
    _field("recordings_bucket"),
)

# https://docs.daily.co/reference/rest-api/meeting-tokens/config
# Claims without a short name keep the long one in self-signed tokens.
MEETING_TOKEN_FIELDS: tuple[PropertyField, ...] = (
    _field("room_name", "r"),
    _field("eject_at_token_exp", "ejt"),
    _field("eject_after_elapsed", "eje"),
    _field("nbf"),
    _field("exp"),
    _field("is_owner", "o"),
    _field("user_name", "u"),
    _field("user_id", "ud"),
    _field("enable_screenshare", "ss"),
    _field("start_video_off", "vo"),
    _field("start_audio_off", "ao"),
    _field("enable_recording", "er"),
    _field("enable_prejoin_ui"),
    _field("enable_terse_logging"),
    _field("start_cloud_recording", "sr"),
    _field("close_tab_on_exit", "ctoe"),
    _field("redirect_on_meeting_exit", "rome"),
    _field("lang", "uil"),
)

# Top-level (non-property) fields of the room create/update bodies
CREATE_ROOM_FIELDS: tuple[PropertyField, ...] = (_field("name"), _field("privacy"))
UPDATE_ROOM_FIELDS: tuple[PropertyField, ...] = (_field("privacy"),)

# Query parameters of the recording endpoints
LIST_RECORDINGS_FIELDS: tuple[PropertyField, ...] = (
    _field("limit"),
    _field("ending_before"),
    _field("starting_after"),
    _field("room_name"),
)
RECORDING_ACCESS_LINK_FIELDS: tuple[PropertyField, ...] = (_field("valid_for_secs"),)


class PropertyBag:
    """
    Sparse accumulator of explicitly set fields.

    Subclasses declare ``fields`` and expose one chainable setter per field.
    Repeated calls to the same setter overwrite the earlier value.
    """

    fields: ClassVar[tuple[PropertyField, ...]] = ()

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(field.name for field in cls.fields)

    def set_field(self, name: str, value: Any) -> Self:
        """
        Mark ``name`` as explicitly set to ``value``.

        Raises:
            KeyError: If ``name`` is not part of this builder's field table
            ValueError: If ``value`` is None (leave the field unset instead)
        """
        if name not in self.field_names():
            raise KeyError(f"{type(self).__name__} has no field named {name!r}")
        if value is None:
            raise ValueError(
                f"{name} cannot be set to None; leave it unset to use Daily's default"
            )
        self._values[name] = value
        return self

    def update(self, other: "PropertyBag") -> Self:
        """Copy every field set on ``other`` into this builder (last write wins)."""
        for name, value in other._values.items():
            self.set_field(name, value)
        return self

    def is_set(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str) -> Any:
        return self._values.get(name)

    def to_dict(self) -> dict[str, Any]:
        """JSON body fragment containing only the explicitly set fields."""
        return {name: to_wire(value) for name, value in self._values.items()}

    def to_claims(self) -> dict[str, Any]:
        """Same as ``to_dict`` but keyed by the short self-signed claim names."""
        claims = {field.name: field.claim for field in self.fields}
        return {claims[name]: to_wire(value) for name, value in self._values.items()}

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
