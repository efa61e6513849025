from pydantic import BaseModel, ConfigDict, Field

from features.chat.telegram.model.message import Message
from features.chat.telegram.model.user import User


class CallbackQuery(BaseModel):
    """https://core.telegram.org/bots/api#callbackquery"""
    model_config = ConfigDict(frozen = True, populate_by_name = True)

    id: str
    from_user: User = Field(alias = "from")
    message: Message | None = None
    inline_message_id: str | None = None
    chat_instance: str
    data: str | None = None
    game_short_name: str | None = None
