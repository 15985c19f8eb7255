"""Account registry: accounts and their contact rosters."""

import random
from typing import Iterable, Protocol

from ..event_bus import IEventBus
from ..logging_config import get_logger
from ..models import Account, Contact, Topic

logger = get_logger(__name__)

ACCOUNT_NAME_POOL = (
    "Comercial Externo",
    "Atendimento N1",
    "Gerência",
    "Marketing",
    "Pós-Venda",
)
NEW_ACCOUNT_DESCRIPTION = "Conta conectada via QR Code."
UPDATABLE_FIELDS = frozenset({"name", "avatar_url", "description", "theme_color"})
NULLABLE_FIELDS = frozenset({"description"})


def avatar_url_for(entity_id: str) -> str:
    return f"https://i.pravatar.cc/150?u={entity_id}"


class IAccountRegistry(Protocol):
    """Owns accounts and roster membership."""

    def list_accounts(self) -> list[Account]:
        """Get all accounts in creation order."""
        ...

    def get_account(self, account_id: str) -> Account | None:
        """Get an account by ID."""
        ...

    def find_account_for_contact(self, contact_id: str) -> Account | None:
        """Get the first account whose roster holds the contact."""
        ...

    async def create_account(self) -> Account:
        """Connect a new account with an empty roster."""
        ...

    async def update_account(self, account_id: str, **changes) -> None:
        """Merge display attributes into an account. Unknown IDs are ignored."""
        ...


class AccountRegistry:
    """In-memory account registry."""

    def __init__(self, event_bus: IEventBus, rng: random.Random | None = None):
        self._event_bus = event_bus
        self._rng = rng or random.Random()
        self._accounts: list[Account] = []

    def load(self, accounts: Iterable[Account]) -> None:
        """Replace the registry contents (used for seeding and reset)."""
        self._accounts = list(accounts)

    # Queries
    def list_accounts(self) -> list[Account]:
        """Get all accounts in creation order."""
        return list(self._accounts)

    def get_account(self, account_id: str) -> Account | None:
        """Get an account by ID."""
        for account in self._accounts:
            if account.id == account_id:
                return account
        return None

    def find_account_for_contact(self, contact_id: str) -> Account | None:
        """Get the first account whose roster holds the contact."""
        for account in self._accounts:
            if account.has_contact(contact_id):
                return account
        return None

    def search_contacts(self, account_id: str, term: str = "") -> list[Contact]:
        """Case-insensitive name search within one roster."""
        account = self.get_account(account_id)
        if account is None:
            return []
        needle = term.strip().lower()
        return [c for c in account.contacts if needle in c.name.lower()]

    # Mutations
    async def create_account(self) -> Account:
        """Connect a new account with an empty roster."""
        account_id = self._next_account_id()
        account = Account(
            id=account_id,
            name=self._rng.choice(ACCOUNT_NAME_POOL),
            phone=f"+55 11 9{self._rng.randint(10_000_000, 99_999_999)}",
            avatar_url=avatar_url_for(account_id),
            description=NEW_ACCOUNT_DESCRIPTION,
            theme_color="whatsapp",
        )
        self._accounts.append(account)
        logger.info(
            "Account connected: %s",
            account.name,
            extra={"context": {"account_id": account_id}},
        )

        await self._event_bus.emit(
            Topic.ACCOUNTS,
            "account_registry",
            {"action": "account_created", "account_id": account_id},
        )
        return account

    async def update_account(self, account_id: str, **changes) -> None:
        """Merge display attributes into an account. Unknown IDs are ignored."""
        ignored = set(changes) - UPDATABLE_FIELDS
        ignored |= {
            k for k, v in changes.items() if v is None and k not in NULLABLE_FIELDS
        }
        if ignored:
            logger.warning("Ignoring non-updatable account fields: %s", sorted(ignored))

        account = self.get_account(account_id)
        if account is None:
            logger.debug("update_account: unknown account %s", account_id)
            return

        applied = {
            k: v
            for k, v in changes.items()
            if k in UPDATABLE_FIELDS and (v is not None or k in NULLABLE_FIELDS)
        }
        for key, value in applied.items():
            setattr(account, key, value)

        await self._event_bus.emit(
            Topic.ACCOUNTS,
            "account_registry",
            {
                "action": "account_updated",
                "account_id": account_id,
                "fields": sorted(applied),
            },
        )

    def _next_account_id(self) -> str:
        taken = {account.id for account in self._accounts}
        n = len(self._accounts) + 1
        while f"acc{n}" in taken:
            n += 1
        return f"acc{n}"
