from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """https://core.telegram.org/bots/api#user"""
    model_config = ConfigDict(frozen = True)

    id: int
    is_bot: bool
    first_name: str
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None
    # only returned by getMe
    can_join_groups: bool | None = None
    can_read_all_group_messages: bool | None = None
    supports_inline_queries: bool | None = None
