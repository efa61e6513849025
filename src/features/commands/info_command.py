from features.chat.command_handler import CommandHandler
from features.chat.telegram.model.reply_instruction import ReplyInstruction
from features.chat.telegram.model.update import Update
from util import log

PLACEHOLDER = "N/A"


class InfoCommand(CommandHandler):

    name = "info"
    description = "Shows your ID, the chat ID and the message ID"

    async def execute(self, update: Update, args: list[str]) -> ReplyInstruction | None:
        message = update.message
        if not message:
            log.w("Nothing to describe, the update carries no message")
            return None

        # channel posts and anonymous admins have no sender
        sender_id = message.from_user.id if message.from_user else PLACEHOLDER
        info_text = "\n".join(
            [
                "<b>🤖 Bot Info Card</b>",
                "--------------------------",
                f"<b>Your ID:</b> <code>{sender_id}</code>",
                f"<b>Chat ID:</b> <code>{message.chat.id}</code>",
                f"<b>Message ID:</b> <code>{message.message_id}</code>",
            ],
        )
        return ReplyInstruction(chat_id = message.chat.id, text = info_text, parse_mode = "HTML")
