from pydantic import BaseModel


class BotCommand(BaseModel):
    """https://core.telegram.org/bots/api#botcommand"""
    command: str
    description: str
