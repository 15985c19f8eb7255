"""Pytest configuration and fixtures."""

import random
import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def event_bus():
    """Create a fresh EventBus."""
    from allzap.event_bus import EventBus

    return EventBus()


@pytest_asyncio.fixture
async def tracker(event_bus):
    """Create Tracker subscribed to the event bus."""
    from allzap.tracker import Tracker

    tr = Tracker(event_bus)
    await tr.start()
    yield tr
    await tr.stop()


@pytest.fixture
def accounts(event_bus):
    """Create AccountRegistry loaded with seed accounts."""
    from allzap.store import AccountRegistry, seed_data

    registry = AccountRegistry(event_bus, rng=random.Random(7))
    registry.load(seed_data()[0])
    return registry


@pytest.fixture
def conversations(event_bus, accounts):
    """Create ConversationStore loaded with seed conversations."""
    from allzap.store import ConversationStore, seed_data

    store = ConversationStore(event_bus)
    store.load(seed_data()[1])
    return store


@pytest.fixture
def empty_conversations(event_bus):
    """Create an empty ConversationStore."""
    from allzap.store import ConversationStore

    return ConversationStore(event_bus)


@pytest.fixture
def stages():
    """Create WorkflowStageRegistry with the demo pipeline."""
    from allzap.store import WORKFLOW_STAGES, WorkflowStageRegistry

    return WorkflowStageRegistry(WORKFLOW_STAGES)


@pytest.fixture
def sim(accounts, conversations, event_bus, tracker):
    """Create a deterministic Sim with a short interval."""
    from sim import Sim

    return Sim(
        accounts=accounts,
        conversations=conversations,
        event_bus=event_bus,
        tracker=tracker,
        interval=0.01,
        rng=random.Random(42),
    )


@pytest_asyncio.fixture
async def application():
    """Create and start an Application with the simulator idle."""
    from allzap.app import Application

    app = Application(sim_interval=0.01, sim_autostart=False, rng=random.Random(1))
    await app.start()
    yield app
    await app.stop()
