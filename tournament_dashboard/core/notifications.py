"""
Session-wide notification bus.

Replaces the browser's toast queue with an explicit publish/subscribe
channel. Views publish success and failure messages here; whoever renders
notifications subscribes and dismisses them by id.
"""

import itertools
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple


logger = logging.getLogger(__name__)

VARIANT_DEFAULT = "default"
VARIANT_DESTRUCTIVE = "destructive"

EVENT_PUBLISHED = "published"
EVENT_DISMISSED = "dismissed"


@dataclass(frozen=True)
class Notification:
    """A single user-facing message."""

    id: str
    title: str
    description: Optional[str] = None
    variant: str = VARIANT_DEFAULT
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_error(self) -> bool:
        return self.variant == VARIANT_DESTRUCTIVE

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "variant": self.variant,
            "created_at": self.created_at.isoformat(),
        }


Subscriber = Callable[[str, Notification], None]


class NotificationBus:
    """In-memory notification queue with publish/subscribe/dismiss."""

    def __init__(self, limit: Optional[int] = None):
        """
        Args:
            limit: Maximum number of notifications kept; the oldest are
                evicted first. None keeps everything until dismissed.
        """
        if limit is not None and limit <= 0:
            raise ValueError("limit must be positive or None")
        self.limit = limit
        self._counter = itertools.count(1)
        self._items: Dict[str, Notification] = {}
        self._subscribers: List[Subscriber] = []

    @property
    def notifications(self) -> Tuple[Notification, ...]:
        """Current notifications, oldest first."""
        return tuple(self._items.values())

    def publish(
        self,
        title: str,
        description: Optional[str] = None,
        variant: str = VARIANT_DEFAULT
    ) -> Notification:
        """Add a notification and deliver it to subscribers."""
        if variant not in (VARIANT_DEFAULT, VARIANT_DESTRUCTIVE):
            raise ValueError(f"Unknown notification variant: {variant}")

        notification = Notification(
            id=str(next(self._counter)),
            title=title,
            description=description,
            variant=variant,
        )
        self._items[notification.id] = notification

        if self.limit is not None:
            while len(self._items) > self.limit:
                oldest_id = next(iter(self._items))
                self.dismiss(oldest_id)

        self._notify(EVENT_PUBLISHED, notification)
        return notification

    def error(self, title: str, description: Optional[str] = None) -> Notification:
        """Shortcut for a destructive notification."""
        return self.publish(title, description, VARIANT_DESTRUCTIVE)

    def dismiss(self, notification_id: str) -> bool:
        """
        Remove a notification.

        Returns:
            True if the notification existed
        """
        notification = self._items.pop(notification_id, None)
        if notification is None:
            return False
        self._notify(EVENT_DISMISSED, notification)
        return True

    def clear(self) -> None:
        for notification_id in list(self._items):
            self.dismiss(notification_id)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for publish and dismiss events.

        Returns:
            A callable that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, event: str, notification: Notification) -> None:
        for callback in list(self._subscribers):
            try:
                callback(event, notification)
            except Exception:
                logger.exception("Notification subscriber failed on %s event", event)
