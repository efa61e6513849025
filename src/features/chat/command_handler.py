from abc import ABC, abstractmethod

from features.chat.telegram.model.reply_instruction import ReplyInstruction
from features.chat.telegram.model.update import Update


class CommandHandler(ABC):
    """
    A single slash command. The name and description are used both for routing
    and for publishing the bot's command menu.

    Handlers must treat the update as read-only. Returning None means the command
    deliberately stays silent. Handlers that do their own network I/O own its timeouts.
    """

    name: str
    description: str

    @abstractmethod
    async def execute(self, update: Update, args: list[str]) -> ReplyInstruction | None:
        raise NotImplementedError()
