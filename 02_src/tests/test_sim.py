"""Tests for the inbound simulator."""

import asyncio
import random

import pytest

from allzap.models import BusMessage, Conversation, Topic
from allzap.store import INBOUND_PHRASES
from sim import Sim


class TestTick:
    """Tests for a single tick."""

    async def test_tick_appends_inbound_message(self, sim, conversations):
        before = {c.id: (len(c.messages), c.unread_count) for c in conversations.list_conversations()}

        result = await sim.tick()

        assert result is not None
        conv = conversations.get_conversation(result.conversation_id)
        count, unread = before[conv.id]
        assert len(conv.messages) == count + 1
        assert conv.unread_count == unread + 1
        assert conv.messages[-1] is result.message
        assert result.message.sender == "contact"
        assert result.message.text in INBOUND_PHRASES

    async def test_tick_resolves_contact_and_account(self, sim, conversations):
        result = await sim.tick()

        conv = conversations.get_conversation(result.conversation_id)
        assert result.contact.id == conv.contact_id
        assert result.account.has_contact(conv.contact_id)

    async def test_tick_on_empty_store(self, accounts, empty_conversations, event_bus):
        sim = Sim(accounts, empty_conversations, event_bus, interval=1)
        assert await sim.tick() is None
        assert await sim.run_once() is None

    async def test_orphaned_contact_skips_tick(self, accounts, empty_conversations, event_bus):
        empty_conversations.load(
            [Conversation(id="orphan", contact_id="c99", workflow_stage_id="s1")]
        )
        sim = Sim(accounts, empty_conversations, event_bus, interval=1)

        assert await sim.tick() is None
        assert empty_conversations.get_conversation("orphan").messages == []
        assert empty_conversations.get_conversation("orphan").unread_count == 0

    async def test_custom_phrases(self, accounts, conversations, event_bus):
        sim = Sim(
            accounts,
            conversations,
            event_bus,
            phrases=["só isso"],
            rng=random.Random(3),
        )
        result = await sim.tick()
        assert result.message.text == "só isso"

    async def test_run_once_announces_inbound(self, sim, event_bus):
        received: list[BusMessage] = []

        async def handler(msg: BusMessage):
            received.append(msg)

        event_bus.subscribe(Topic.INBOUND, handler)
        result = await sim.run_once()

        assert len(received) == 1
        payload = received[0].payload
        assert payload["action"] == "inbound_simulated"
        assert payload["contact_name"] == result.contact.name
        assert payload["text"] == result.message.text
        assert payload["account_id"] == result.account.id


class TestLifecycle:
    """Tests for start/stop of the periodic task."""

    async def test_start_and_stop(self, sim, conversations):
        total = sum(len(c.messages) for c in conversations.list_conversations())

        await sim.start()
        assert sim.running
        await asyncio.sleep(0.1)
        await sim.stop()

        assert not sim.running
        assert sim._task is None
        after = sum(len(c.messages) for c in conversations.list_conversations())
        assert after > total

    async def test_no_ticks_after_stop(self, sim, conversations):
        await sim.start()
        await asyncio.sleep(0.05)
        await sim.stop()

        snapshot = sum(len(c.messages) for c in conversations.list_conversations())
        await asyncio.sleep(0.05)
        assert sum(len(c.messages) for c in conversations.list_conversations()) == snapshot

    async def test_start_is_idempotent(self, sim):
        await sim.start()
        task = sim._task
        await sim.start()
        assert sim._task is task
        await sim.stop()

    async def test_stop_when_idle(self, sim):
        await sim.stop()
        assert not sim.running

    async def test_restart(self, sim):
        await sim.start()
        await sim.stop()
        await sim.start()
        assert sim.running
        await sim.stop()

    async def test_lifecycle_is_tracked(self, sim, tracker):
        await sim.start()
        await sim.stop()

        types = [e.event_type for e in tracker.get_trace_events(actor="sim")]
        assert "sim_started" in types
        assert "sim_stopped" in types

    async def test_failing_tick_keeps_loop_alive(self, sim, monkeypatch):
        calls = []

        async def flaky():
            calls.append(1)
            if len(calls) == 1:
                raise RuntimeError("boom")
            return None

        monkeypatch.setattr(sim, "run_once", flaky)
        await sim.start()
        await asyncio.sleep(0.1)
        await sim.stop()

        assert len(calls) >= 2


@pytest.mark.parametrize("interval", [0, -5, "abc"])
def test_invalid_interval_falls_back(accounts, conversations, event_bus, interval):
    sim = Sim(accounts, conversations, event_bus, interval=interval)
    assert sim.interval == 15.0
