"""
Tests for the notification bus.
"""

import pytest

from tournament_dashboard.core.notifications import (
    EVENT_DISMISSED,
    EVENT_PUBLISHED,
    NotificationBus,
)


class TestNotificationBus:
    """Tests for publish, subscribe and dismiss."""

    def test_publish_and_list(self, bus):
        """Test that notifications are kept oldest first."""
        first = bus.publish("Simulation complete", "Simulation abc finished with 200 runs.")
        second = bus.error("Training failed", "boom")
        assert bus.notifications == (first, second)
        assert second.is_error
        assert not first.is_error
        assert first.id != second.id

    def test_dismiss(self, bus):
        """Test dismissing by id."""
        note = bus.publish("Hello")
        assert bus.dismiss(note.id) is True
        assert bus.notifications == ()
        assert bus.dismiss(note.id) is False

    def test_subscribers_receive_events(self, bus):
        """Test publish and dismiss delivery."""
        events = []
        bus.subscribe(lambda event, n: events.append((event, n.title)))
        note = bus.publish("Model activated")
        bus.dismiss(note.id)
        assert events == [(EVENT_PUBLISHED, "Model activated"), (EVENT_DISMISSED, "Model activated")]

    def test_unsubscribe(self, bus):
        """Test that unsubscribed callbacks stop receiving events."""
        events = []
        unsubscribe = bus.subscribe(lambda event, n: events.append(event))
        unsubscribe()
        bus.publish("Ignored")
        assert events == []

    def test_failing_subscriber_does_not_block_others(self, bus):
        """Test isolation between subscribers."""
        received = []

        def broken(event, notification):
            raise RuntimeError("renderer crashed")

        bus.subscribe(broken)
        bus.subscribe(lambda event, n: received.append(n.title))
        bus.publish("Still delivered")
        assert received == ["Still delivered"]

    def test_limit_evicts_oldest(self):
        """Test bounded queues drop the oldest notification."""
        bus = NotificationBus(limit=2)
        a = bus.publish("a")
        bus.publish("b")
        bus.publish("c")
        assert [n.title for n in bus.notifications] == ["b", "c"]
        assert a not in bus.notifications

    def test_clear(self, bus):
        """Test clearing every notification."""
        bus.publish("a")
        bus.publish("b")
        bus.clear()
        assert bus.notifications == ()

    def test_invalid_arguments(self, bus):
        """Test rejection of unknown variants and bad limits."""
        with pytest.raises(ValueError):
            bus.publish("x", variant="success")
        with pytest.raises(ValueError):
            NotificationBus(limit=0)

    def test_to_dict(self, bus):
        """Test serialization."""
        data = bus.publish("Title", "Body").to_dict()
        assert data["title"] == "Title"
        assert data["description"] == "Body"
        assert data["variant"] == "default"
        assert "created_at" in data
