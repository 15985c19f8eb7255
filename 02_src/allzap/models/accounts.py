"""Account-related data models."""

from dataclasses import dataclass, field
from typing import Literal

AccountTheme = Literal["whatsapp", "blue", "purple", "orange", "pink", "slate"]


@dataclass
class Contact:
    """A person an account can talk to. Shared between account rosters."""

    id: str
    name: str
    phone: str
    avatar_url: str


@dataclass
class UploadedFile:
    """A file stored in an account's media library."""

    id: str
    name: str
    type: str  # "image", "video", "audio", "spreadsheet"
    url: str
    size: str


@dataclass
class Account:
    """A connected chat account with its own contact roster."""

    id: str
    name: str
    phone: str
    avatar_url: str
    theme_color: AccountTheme = "whatsapp"
    description: str | None = None
    contacts: list[Contact] = field(default_factory=list)
    files: list[UploadedFile] = field(default_factory=list)

    def has_contact(self, contact_id: str) -> bool:
        """Check roster membership by contact id."""
        return any(c.id == contact_id for c in self.contacts)

    def contact_ids(self) -> set[str]:
        return {c.id for c in self.contacts}
