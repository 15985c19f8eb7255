"""Application bootstrap and lifecycle management."""

import random
from typing import TYPE_CHECKING, Protocol

from .config import resolve_sim_autostart, resolve_sim_interval
from .event_bus import EventBus
from .logging_config import get_logger
from .models import Conversation
from .notifications import NotificationInbox, NotificationRouter
from .store import (
    WORKFLOW_STAGES,
    AccountRegistry,
    ConversationStore,
    WorkflowStageRegistry,
    conversations_for_account,
    conversations_for_stage,
    seed_data,
)
from .tracker import Tracker

if TYPE_CHECKING:
    from sim import Sim

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Restore the demo data."""
        ...


class Application:
    """Main application bootstrap. One instance owns one independent store."""

    def __init__(
        self,
        sim_interval: float | None = None,
        sim_autostart: bool | None = None,
        seed: bool = True,
        rng: random.Random | None = None,
    ):
        self._sim_interval = resolve_sim_interval(sim_interval)
        self._sim_autostart = (
            resolve_sim_autostart() if sim_autostart is None else sim_autostart
        )
        self._seed = seed
        self._rng = rng

        # Components (will be initialized in start())
        self._event_bus: EventBus | None = None
        self._tracker: Tracker | None = None
        self._accounts: AccountRegistry | None = None
        self._conversations: ConversationStore | None = None
        self._stages: WorkflowStageRegistry | None = None
        self._inbox: NotificationInbox | None = None
        self._notification_router: NotificationRouter | None = None
        self._sim: "Sim | None" = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        from sim import Sim

        logger.info("Starting application")

        # 1. EventBus (no dependencies)
        self._event_bus = EventBus()

        # 2. Tracker (depends on EventBus)
        self._tracker = Tracker(self._event_bus)
        await self._tracker.start()

        # 3. Stores (depend on EventBus)
        self._stages = WorkflowStageRegistry(WORKFLOW_STAGES)
        self._accounts = AccountRegistry(self._event_bus, rng=self._rng)
        self._conversations = ConversationStore(self._event_bus)
        self._load_seed()
        logger.info("Stores initialized")

        # 4. Notifications (depend on EventBus)
        self._inbox = NotificationInbox()
        self._notification_router = NotificationRouter(self._event_bus, self._inbox)
        await self._notification_router.start()

        # 5. SIM (depends on stores, EventBus, Tracker)
        self._sim = Sim(
            accounts=self._accounts,
            conversations=self._conversations,
            event_bus=self._event_bus,
            tracker=self._tracker,
            interval=self._sim_interval,
            rng=self._rng,
        )
        if self._sim_autostart:
            await self._sim.start()

        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._sim is not None:
            await self._sim.stop()
        if self._notification_router is not None:
            await self._notification_router.stop()
        if self._tracker is not None:
            await self._tracker.stop()
        if self._event_bus is not None:
            self._event_bus.clear()
        logger.info("Application stopped")

    async def reset(self) -> None:
        """Restore the demo data."""
        # 1. Pause the simulator
        was_running = bool(self._sim and self._sim.running)
        if self._sim is not None:
            await self._sim.stop()

        # 2. Reload stores, drop activity and notifications
        if self._accounts is not None and self._conversations is not None:
            self._load_seed()
        if self._tracker is not None:
            self._tracker.clear()
        if self._inbox is not None:
            self._inbox.clear()

        # 3. Re-arm the simulator
        if self._sim and was_running:
            await self._sim.start()
        logger.info("Reset complete")

    def _load_seed(self) -> None:
        accounts, conversations = seed_data() if self._seed else ([], [])
        self.accounts.load(accounts)
        self.conversations.load(conversations)

    # Projections bound to this instance's stores
    def conversations_for_account(self, account_id: str) -> list[Conversation]:
        return conversations_for_account(
            self.accounts.list_accounts(),
            self.conversations.list_conversations(),
            account_id,
        )

    def conversations_for_stage(
        self, stage_id: str, account_id: str | None = None
    ) -> list[Conversation]:
        return conversations_for_stage(
            self.accounts.list_accounts(),
            self.conversations.list_conversations(),
            stage_id,
            account_id,
        )

    @property
    def event_bus(self) -> EventBus:
        """Get event bus instance."""
        if self._event_bus is None:
            raise RuntimeError("Application not started")
        return self._event_bus

    @property
    def tracker(self) -> Tracker:
        """Get tracker instance."""
        if self._tracker is None:
            raise RuntimeError("Application not started")
        return self._tracker

    @property
    def accounts(self) -> AccountRegistry:
        """Get account registry instance."""
        if self._accounts is None:
            raise RuntimeError("Application not started")
        return self._accounts

    @property
    def conversations(self) -> ConversationStore:
        """Get conversation store instance."""
        if self._conversations is None:
            raise RuntimeError("Application not started")
        return self._conversations

    @property
    def stages(self) -> WorkflowStageRegistry:
        """Get workflow stage registry instance."""
        if self._stages is None:
            raise RuntimeError("Application not started")
        return self._stages

    @property
    def inbox(self) -> NotificationInbox:
        """Get notification inbox instance."""
        if self._inbox is None:
            raise RuntimeError("Application not started")
        return self._inbox

    @property
    def sim(self) -> "Sim":
        """Get simulator instance."""
        if self._sim is None:
            raise RuntimeError("Application not started")
        return self._sim
