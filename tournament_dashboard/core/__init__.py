"""
Core utilities: settings and the notification bus.
"""

from .config import Settings, get_settings
from .notifications import Notification, NotificationBus

__all__ = [
    "Settings",
    "get_settings",
    "Notification",
    "NotificationBus",
]
