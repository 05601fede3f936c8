# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Wire Values - Daily client

Converts builder values into the plain JSON types Daily expects.
"""

from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel


def to_wire(value: Any) -> Any:
    """
    Convert a single builder value into its JSON representation.

    Enums become their string value, UUIDs become their canonical string and
    nested models (such as a recordings bucket) become dicts with unset
    optional keys left out. Everything else is passed through unchanged.

    Args:
        value: Value stored by a builder setter

    Returns:
        A JSON-serializable value

    Example:
        >>> to_wire(RecordingType.CLOUD)
        'cloud'
    """
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    return value
