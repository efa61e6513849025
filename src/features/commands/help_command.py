from html import escape

from features.chat.command_handler import CommandHandler
from features.chat.command_registry import CommandRegistry
from features.chat.telegram.model.reply_instruction import ReplyInstruction
from features.chat.telegram.model.update import Update


class HelpCommand(CommandHandler):

    name = "help"
    description = "Lists the available commands"

    __registry: CommandRegistry

    def __init__(self, registry: CommandRegistry):
        self.__registry = registry

    async def execute(self, update: Update, args: list[str]) -> ReplyInstruction | None:
        if not update.message:
            return None
        lines = ["<b>Available commands</b>"]
        lines.extend(
            f"/{entry.name} - {escape(entry.description)}"
            for entry in self.__registry.list()
        )
        return ReplyInstruction(chat_id = update.message.chat.id, text = "\n".join(lines), parse_mode = "HTML")
