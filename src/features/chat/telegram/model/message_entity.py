from enum import Enum

from pydantic import BaseModel, ConfigDict

from features.chat.telegram.model.user import User


class MessageEntity(BaseModel):
    """https://core.telegram.org/bots/api#messageentity"""
    model_config = ConfigDict(frozen = True)

    class Type(Enum):
        mention = "mention"
        hashtag = "hashtag"
        cashtag = "cashtag"
        bot_command = "bot_command"
        url = "url"
        email = "email"
        phone_number = "phone_number"
        bold = "bold"
        italic = "italic"
        underline = "underline"
        strikethrough = "strikethrough"
        spoiler = "spoiler"
        blockquote = "blockquote"
        expandable_blockquote = "expandable_blockquote"
        code = "code"
        pre = "pre"
        text_link = "text_link"
        text_mention = "text_mention"
        custom_emoji = "custom_emoji"

        @classmethod
        def lookup(cls, value: str) -> "MessageEntity.Type | None":
            try:
                return cls(value)
            except ValueError:
                return None

    # kept raw so that newer entity types still decode
    type: str
    offset: int
    length: int
    url: str | None = None
    user: User | None = None
    language: str | None = None  # programming language of the code block
    custom_emoji_id: str | None = None

    @property
    def known_type(self) -> Type | None:
        return MessageEntity.Type.lookup(self.type)

    @property
    def is_bot_command(self) -> bool:
        return self.known_type == MessageEntity.Type.bot_command
