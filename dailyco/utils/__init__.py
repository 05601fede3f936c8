# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Utilities - Daily client

Shared helpers used across the request builders.
"""

from .wire import to_wire

__all__ = ["to_wire"]
