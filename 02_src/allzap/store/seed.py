"""Demo data loaded at startup and on reset."""

from datetime import datetime, timezone

from ..models import (
    Account,
    Attachment,
    Contact,
    Conversation,
    Message,
    UploadedFile,
    WorkflowStage,
)
from .accounts import avatar_url_for

WORKFLOW_STAGES: tuple[WorkflowStage, ...] = (
    WorkflowStage(id="s1", title="Assunto pessoal"),
    WorkflowStage(id="s2", title="Novo Lead"),
    WorkflowStage(id="s3", title="Orçamento em aberto"),
    WorkflowStage(id="s4", title="Casamento Agendado"),
    WorkflowStage(id="s5", title="Evento Corporativo Agendado"),
    WorkflowStage(id="s6", title="Barzinho"),
    WorkflowStage(id="s7", title="Pediu orçamento e não fechou"),
)

INBOUND_PHRASES: tuple[str, ...] = (
    "Ok, entendido. Vou verificar.",
    "Pode me dar mais detalhes?",
    "Recebido, obrigado!",
    "Claro, já estou analisando.",
    "Interessante, vamos conversar sobre isso.",
)


def _at(hhmm: str) -> datetime:
    """Today's date at the given HH:MM (UTC)."""
    hour, minute = (int(part) for part in hhmm.split(":"))
    return datetime.now(timezone.utc).replace(
        hour=hour, minute=minute, second=0, microsecond=0
    )


def _contact(contact_id: str, name: str, phone: str) -> Contact:
    return Contact(id=contact_id, name=name, phone=phone, avatar_url=avatar_url_for(contact_id))


def seed_data() -> tuple[list[Account], list[Conversation]]:
    """Build fresh seed accounts and conversations.

    The second account shares two contacts with the first; both rosters hold
    the same Contact objects.
    """
    c1 = _contact("c1", "Ana Silva", "+55 11 98765-4321")
    c2 = _contact("c2", "Bruno Costa", "+55 21 91234-5678")
    c3 = _contact("c3", "Carla Dias", "+55 31 98888-7777")
    c4 = _contact("c4", "Daniel Alves", "+55 41 99999-6666")

    accounts = [
        Account(
            id="acc1",
            name="Vendas Principal",
            phone="+55 11 91111-1111",
            avatar_url=avatar_url_for("acc1"),
            description="Conta primária para prospecção e vendas.",
            theme_color="whatsapp",
            contacts=[c1, c2, c3, c4],
            files=[
                UploadedFile(
                    id="f1",
                    name="proposta_comercial.pdf",
                    type="spreadsheet",
                    url="#",
                    size="2.5 MB",
                ),
                UploadedFile(
                    id="f2",
                    name="video_demonstracao.mp4",
                    type="video",
                    url="#",
                    size="15.1 MB",
                ),
            ],
        ),
        Account(
            id="acc2",
            name="Suporte Técnico",
            phone="+55 11 92222-2222",
            avatar_url=avatar_url_for("acc2"),
            description="Canal de suporte para clientes existentes.",
            theme_color="blue",
            contacts=[c1, c3],
        ),
    ]

    conversations = [
        Conversation(
            id="conv1",
            contact_id="c1",
            workflow_stage_id="s3",
            unread_count=1,
            messages=[
                Message(
                    id="m1",
                    text="Olá, gostaria de um orçamento.",
                    timestamp=_at("10:30"),
                    sender="contact",
                ),
                Message(
                    id="m1-img",
                    text="Gostaria de algo parecido com isso aqui:",
                    timestamp=_at("10:31"),
                    sender="contact",
                    attachment=Attachment(
                        id="att1",
                        type="image",
                        url="https://images.unsplash.com/photo-1586769852044-692d6e3703f0?auto=format&fit=crop&w=500&q=60",
                        file_name="referencia.jpg",
                    ),
                ),
            ],
        ),
        Conversation(
            id="conv2",
            contact_id="c2",
            workflow_stage_id="s2",
            messages=[
                Message(
                    id="m2",
                    text="Podemos marcar uma reunião?",
                    timestamp=_at("11:15"),
                    sender="contact",
                ),
                Message(
                    id="m2-doc",
                    text="Segue o briefing do projeto.",
                    timestamp=_at("11:16"),
                    sender="contact",
                    attachment=Attachment(
                        id="att2",
                        type="file",
                        url="#",
                        file_name="briefing_projeto_v2.pdf",
                    ),
                ),
            ],
        ),
        Conversation(
            id="conv3",
            contact_id="c3",
            workflow_stage_id="s4",
            messages=[
                Message(
                    id="m3",
                    text="Contrato assinado! Obrigado.",
                    timestamp=_at("09:05"),
                    sender="contact",
                ),
            ],
        ),
        Conversation(
            id="conv4",
            contact_id="c4",
            workflow_stage_id="s7",
            unread_count=2,
            messages=[
                Message(
                    id="m4",
                    text="Vou pensar e te retorno.",
                    timestamp=_at("14:50"),
                    sender="contact",
                ),
            ],
        ),
    ]

    return accounts, conversations
