"""Tests for Application."""

import asyncio

import pytest

from allzap.app import Application


class TestApplicationStart:
    """Tests for Application.start()."""

    async def test_start_initializes_components(self, application):
        """Test that start initializes all components."""
        assert application._event_bus is not None
        assert application._tracker is not None
        assert application._accounts is not None
        assert application._conversations is not None
        assert application._stages is not None
        assert application._notification_router is not None
        assert application._sim is not None

    async def test_components_share_event_bus(self, application):
        assert application._tracker._event_bus is application.event_bus
        assert application.conversations._event_bus is application.event_bus
        assert application.sim._conversations is application.conversations
        assert application.sim._accounts is application.accounts

    async def test_start_loads_seed(self, application):
        assert len(application.accounts.list_accounts()) == 2
        assert len(application.conversations) == 4
        assert len(application.stages) == 7
        assert not application.sim.running

    async def test_start_without_seed(self):
        app = Application(seed=False, sim_autostart=False)
        await app.start()
        assert app.accounts.list_accounts() == []
        assert app.conversations.list_conversations() == []
        await app.stop()

    async def test_autostart_sim(self):
        app = Application(sim_interval=0.01, sim_autostart=True)
        await app.start()
        assert app.sim.running
        await app.stop()
        assert not app.sim.running

    async def test_not_started_raises(self):
        app = Application()
        with pytest.raises(RuntimeError):
            _ = app.conversations
        with pytest.raises(RuntimeError):
            _ = app.sim


class TestIndependentInstances:
    """Two applications never share state."""

    async def test_instances_are_isolated(self):
        a = Application(sim_autostart=False)
        b = Application(sim_autostart=False)
        await a.start()
        await b.start()

        await a.conversations.delete_conversation("conv1")

        assert a.conversations.get_conversation("conv1") is None
        assert b.conversations.get_conversation("conv1") is not None
        await a.stop()
        await b.stop()


class TestApplicationProjections:
    """Tests for the projections bound to the application."""

    async def test_conversations_for_account(self, application):
        assert [c.id for c in application.conversations_for_account("acc2")] == [
            "conv1",
            "conv3",
        ]

    async def test_conversations_for_stage(self, application):
        await application.conversations.move_to_stage("conv2", "s5")
        assert [c.id for c in application.conversations_for_stage("s5")] == ["conv2"]
        assert application.conversations_for_stage("s5", "acc2") == []


class TestApplicationReset:
    """Tests for Application.reset()."""

    async def test_reset_restores_seed(self, application):
        await application.conversations.delete_conversation("conv1")
        await application.accounts.create_account()

        await application.reset()

        assert application.conversations.get_conversation("conv1") is not None
        assert len(application.accounts.list_accounts()) == 2
        assert application.tracker.get_trace_events() == []

    async def test_reset_keeps_sim_running(self, application):
        await application.sim.start()
        await application.reset()
        assert application.sim.running

    async def test_simulated_message_raises_notification(self, application):
        await application.sim.start()
        await asyncio.sleep(0.1)
        await application.sim.stop()

        assert application.inbox.unseen_count >= 1
        note = application.inbox.latest()
        contact_id = application.conversations.get_conversation(
            note.conversation_id
        ).contact_id
        account = application.accounts.get_account(note.account_id)
        assert account.has_contact(contact_id)
        assert note.title == next(
            c.name for c in account.contacts if c.id == contact_id
        )


class TestApplicationStop:
    """Tests for Application.stop()."""

    async def test_stop_cancels_sim(self):
        app = Application(sim_interval=0.01, sim_autostart=True)
        await app.start()
        await app.stop()

        total = sum(len(c.messages) for c in app.conversations.list_conversations())
        await asyncio.sleep(0.05)
        assert sum(len(c.messages) for c in app.conversations.list_conversations()) == total
