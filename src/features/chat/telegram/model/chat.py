from pydantic import BaseModel, ConfigDict


class Chat(BaseModel):
    """https://core.telegram.org/bots/api#chat"""
    model_config = ConfigDict(frozen = True)

    id: int
    type: str
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
