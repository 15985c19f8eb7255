"""Tests for NotificationRouter and NotificationInbox."""

from datetime import datetime, timezone

from allzap.models import Notification, Topic
from allzap.notifications import NotificationInbox, NotificationRouter


class RecordingSink:
    def __init__(self):
        self.items: list[Notification] = []

    async def notify(self, notification: Notification) -> None:
        self.items.append(notification)


class TestNotificationRouter:
    """Tests for inbound -> notification routing."""

    async def test_inbound_becomes_notification(self, event_bus):
        sink = RecordingSink()
        router = NotificationRouter(event_bus, sink)
        await router.start()

        await event_bus.emit(
            Topic.INBOUND,
            "sim",
            {
                "action": "inbound_simulated",
                "conversation_id": "conv1",
                "contact_name": "Ana Silva",
                "account_id": "acc1",
                "text": "Recebido, obrigado!",
            },
        )

        assert len(sink.items) == 1
        note = sink.items[0]
        assert note.title == "Ana Silva"
        assert note.message == "Recebido, obrigado!"
        assert note.conversation_id == "conv1"

    async def test_other_topics_ignored(self, event_bus):
        sink = RecordingSink()
        router = NotificationRouter(event_bus, sink)
        await router.start()

        await event_bus.emit(
            Topic.CONVERSATIONS, "conversation_store", {"action": "message_received"}
        )
        assert sink.items == []

    async def test_stop_unsubscribes(self, event_bus):
        sink = RecordingSink()
        router = NotificationRouter(event_bus, sink)
        await router.start()
        await router.stop()

        await event_bus.emit(Topic.INBOUND, "sim", {"action": "inbound_simulated"})
        assert sink.items == []

    async def test_end_to_end_with_sim(self, sim, event_bus):
        inbox = NotificationInbox()
        await NotificationRouter(event_bus, inbox).start()

        result = await sim.run_once()

        assert inbox.latest().title == result.contact.name
        assert inbox.latest().message == result.message.text
        assert inbox.unseen_count == 1


class TestNotificationInbox:
    """Tests for the default sink."""

    def _note(self, title: str) -> Notification:
        return Notification(title=title, message="m", timestamp=datetime.now(timezone.utc))

    async def test_unseen_badge(self):
        inbox = NotificationInbox()
        await inbox.notify(self._note("a"))
        await inbox.notify(self._note("b"))
        assert inbox.unseen_count == 2

        inbox.mark_seen()
        assert inbox.unseen_count == 0
        assert [n.title for n in inbox.recent()] == ["b", "a"]

    async def test_capacity(self):
        inbox = NotificationInbox(capacity=2)
        for title in "abc":
            await inbox.notify(self._note(title))
        assert [n.title for n in inbox.recent()] == ["c", "b"]

    async def test_clear(self):
        inbox = NotificationInbox()
        await inbox.notify(self._note("a"))
        inbox.clear()
        assert inbox.latest() is None
        assert inbox.unseen_count == 0
