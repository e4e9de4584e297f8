"""Persistent storage for sync configuration."""

from .settings import DEFAULT_CONTAINER, DEFAULT_PREFIX, SettingsStorage, SyncConfiguration

__all__ = [
    "DEFAULT_CONTAINER",
    "DEFAULT_PREFIX",
    "SettingsStorage",
    "SyncConfiguration",
]
