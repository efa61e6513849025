from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class ReplyInstruction(BaseModel):
    """
    A Bot API call returned as the webhook response body.
    https://core.telegram.org/bots/api#making-requests-when-getting-updates
    """
    model_config = ConfigDict(frozen = True)

    method: Literal["sendMessage"] = "sendMessage"
    chat_id: int
    text: str
    parse_mode: Literal["HTML"] | None = None

    def to_webhook_response(self) -> dict[str, Any]:
        return self.model_dump(exclude_none = True)
