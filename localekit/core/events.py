#!/usr/bin/env python3
"""Centralized event types for the application.

All event types are defined here to avoid ad-hoc string events.
"""

from enum import Enum, auto

__all__ = ["EventType"]


class EventType(Enum):
    """All possible events in the system."""

    # Localization events
    LOCALIZATION_CHANGED = auto()  # Table reloaded or language switched, re-query the store

    # App events
    SHUTDOWN = auto()
