from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from features.chat.telegram.model.chat import Chat
from features.chat.telegram.model.message_entity import MessageEntity
from features.chat.telegram.model.user import User


class Message(BaseModel):
    """https://core.telegram.org/bots/api#message"""
    model_config = ConfigDict(frozen = True, populate_by_name = True)

    message_id: int
    date: int
    chat: Chat
    from_user: User | None = Field(None, alias = "from")
    sender_chat: Chat | None = None
    message_thread_id: int | None = None
    text: str | None = None
    entities: list[MessageEntity] | None = None
    reply_to_message: Optional["Message"] = None
    edit_date: int | None = None


Message.model_rebuild()
