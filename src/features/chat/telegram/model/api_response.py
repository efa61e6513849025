from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class TelegramApiResponse(BaseModel, Generic[T]):
    """https://core.telegram.org/bots/api#making-requests"""
    ok: bool
    result: T | None = None
    description: str | None = None
    error_code: int | None = None
