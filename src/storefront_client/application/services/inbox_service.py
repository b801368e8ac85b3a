from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from storefront_client.infrastructure.http.dtos.resource_models import ContactMessage, UserMessage
from storefront_client.infrastructure.http.resources.contact_api import ContactApi
from storefront_client.infrastructure.http.resources.messages_api import MessagesApi

USER_INBOX_LIMIT = 50
ADMIN_INBOX_LIMIT = 100


def search_messages(messages: Iterable[UserMessage], query: str) -> list[UserMessage]:
    """Case-insensitive match on subject, body or sender. A blank query keeps everything."""
    needle = query.strip().lower()
    if not needle:
        return list(messages)
    return [
        msg
        for msg in messages
        if needle in msg.subject.lower() or needle in msg.message.lower() or needle in msg.sender.lower()
    ]


@dataclass(frozen=True)
class ContactInbox:
    active: list[ContactMessage]
    archived: list[ContactMessage]

    @property
    def unread_count(self) -> int:
        return sum(1 for msg in self.active if not msg.is_read)

    @classmethod
    def from_messages(cls, messages: Iterable[ContactMessage]) -> "ContactInbox":
        messages = list(messages)
        return cls(
            active=[msg for msg in messages if not msg.archived],
            archived=[msg for msg in messages if msg.archived],
        )


class UserInboxService:
    def __init__(self, messages_api: MessagesApi):
        self.messages_api = messages_api

    def list_messages(self, query: str = "") -> list[UserMessage]:
        return search_messages(self.messages_api.list(limit=USER_INBOX_LIMIT).items, query)

    def open_message(self, message: UserMessage) -> UserMessage:
        """Marks an unread message as read when it is opened."""
        if not message.is_read:
            self.messages_api.update(message.id, is_read=True)
            message = message.model_copy(update={"is_read": True})
        return message


class ContactInboxService:
    """Back-office view over messages sent through the public contact form."""

    def __init__(self, contact_api: ContactApi):
        self.contact_api = contact_api

    def load(self) -> ContactInbox:
        return ContactInbox.from_messages(self.contact_api.list(limit=ADMIN_INBOX_LIMIT).items)

    def open_message(self, message: ContactMessage) -> ContactMessage:
        if not message.is_read:
            self.contact_api.update(message.id, is_read=True)
            message = message.model_copy(update={"is_read": True})
        return message

    def reply(self, message: ContactMessage, subject: str, body: str) -> None:
        self.contact_api.reply(message.id, subject=subject, message=body)

    def archive(self, message: ContactMessage) -> ContactMessage:
        self.contact_api.update(message.id, archived=True)
        return message.model_copy(update={"archived": True})

    def unarchive(self, message: ContactMessage) -> ContactMessage:
        self.contact_api.update(message.id, archived=False)
        return message.model_copy(update={"archived": False})

    def delete(self, message: ContactMessage) -> None:
        self.contact_api.delete(message.id)
