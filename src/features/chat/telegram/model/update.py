from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from features.chat.telegram.model.callback_query import CallbackQuery
from features.chat.telegram.model.message import Message


class Update(BaseModel):
    """https://core.telegram.org/bots/api#update"""
    model_config = ConfigDict(frozen = True)

    class PayloadKind(Enum):
        message = "message"
        edited_message = "edited_message"
        channel_post = "channel_post"
        edited_channel_post = "edited_channel_post"
        callback_query = "callback_query"

    update_id: int
    message: Message | None = None
    edited_message: Message | None = None
    channel_post: Message | None = None
    edited_channel_post: Message | None = None
    callback_query: CallbackQuery | None = None

    @model_validator(mode = "after")
    def check_single_payload(self) -> "Update":
        populated = [kind.value for kind in Update.PayloadKind if getattr(self, kind.value) is not None]
        if len(populated) > 1:
            raise ValueError(f"Update #{self.update_id} carries more than one payload: {populated}")
        return self

    @property
    def payload_kind(self) -> PayloadKind | None:
        for kind in Update.PayloadKind:
            if getattr(self, kind.value) is not None:
                return kind
        return None
