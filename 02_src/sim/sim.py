"""SIM implementation - periodic simulated inbound messages."""

import asyncio
import random
from dataclasses import dataclass
from typing import Protocol, Sequence

from allzap.config import resolve_sim_interval
from allzap.event_bus import IEventBus
from allzap.logging_config import get_logger
from allzap.models import Account, Contact, Message, Topic
from allzap.store import INBOUND_PHRASES, IAccountRegistry, IConversationStore
from allzap.tracker import ITracker

logger = get_logger(__name__)


@dataclass
class InboundResult:
    """What a tick produced: enough context to raise a notification."""

    conversation_id: str
    message: Message
    contact: Contact
    account: Account


class ISim(Protocol):
    """Stand-in for a real message-delivery connector."""

    async def start(self) -> None:
        """Arm the periodic timer."""
        ...

    async def stop(self) -> None:
        """Cancel the timer and wait for it to finish."""
        ...

    async def tick(self) -> InboundResult | None:
        """Synthesize one inbound message."""
        ...


class Sim:
    """Appends a canned inbound message to a random conversation every interval."""

    def __init__(
        self,
        accounts: IAccountRegistry,
        conversations: IConversationStore,
        event_bus: IEventBus,
        tracker: ITracker | None = None,
        interval: float | None = None,
        phrases: Sequence[str] = INBOUND_PHRASES,
        rng: random.Random | None = None,
    ):
        self._accounts = accounts
        self._conversations = conversations
        self._event_bus = event_bus
        self._tracker = tracker
        self._interval = resolve_sim_interval(interval)
        self._phrases = tuple(phrases)
        self._rng = rng or random.Random()
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def interval(self) -> float:
        return self._interval

    async def start(self) -> None:
        """Arm the periodic timer. Starting twice keeps the first timer."""
        if self._running:
            return

        self._running = True
        self._task = asyncio.create_task(self._run())
        logger.info("SIM started, interval %ss", self._interval)
        if self._tracker:
            await self._tracker.track("sim_started", "sim", {"interval": self._interval})

    async def stop(self) -> None:
        """Cancel the timer and wait for it to finish."""
        if not self._running:
            return
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info("SIM stopped")
        if self._tracker:
            await self._tracker.track("sim_stopped", "sim", {})

    async def _run(self) -> None:
        """Tick forever; one failed tick never ends the loop."""
        while self._running:
            await asyncio.sleep(self._interval)
            try:
                await self.run_once()
            except Exception as e:
                logger.error("SIM tick error: %s", e)

    async def tick(self) -> InboundResult | None:
        """Synthesize one inbound message.

        Returns None when there is no conversation or the chosen
        conversation's contact is on no account's roster.
        """
        conversations = self._conversations.list_conversations()
        if not conversations:
            logger.debug("SIM: no conversations, tick skipped")
            return None

        target = self._rng.choice(conversations)

        account = self._accounts.find_account_for_contact(target.contact_id)
        contact = None
        if account is not None:
            contact = next(
                (c for c in account.contacts if c.id == target.contact_id), None
            )
        if account is None or contact is None:
            logger.warning(
                "SIM: contact %s of %s is on no roster, tick skipped",
                target.contact_id,
                target.id,
            )
            return None

        text = self._rng.choice(self._phrases)
        message = await self._conversations.receive_message(target.id, text)
        if message is None:
            # Conversation vanished between selection and append
            return None

        return InboundResult(
            conversation_id=target.id,
            message=message,
            contact=contact,
            account=account,
        )

    async def run_once(self) -> InboundResult | None:
        """Tick and announce the result on the INBOUND topic."""
        result = await self.tick()
        if result is None:
            return None

        logger.info(
            "SIM: %s -> %s",
            result.contact.name,
            result.message.text,
            extra={
                "context": {
                    "conversation_id": result.conversation_id,
                    "account_id": result.account.id,
                }
            },
        )
        await self._event_bus.emit(
            Topic.INBOUND,
            "sim",
            {
                "action": "inbound_simulated",
                "conversation_id": result.conversation_id,
                "message_id": result.message.id,
                "text": result.message.text,
                "contact_id": result.contact.id,
                "contact_name": result.contact.name,
                "account_id": result.account.id,
            },
        )
        return result
