from typing import Any

from pydantic import ValidationError

from features.chat.command_dispatcher import CommandDispatcher, CommandExecutionError
from features.chat.telegram.model.update import Update
from util import log
from util.config import config


def acknowledgement() -> dict[str, Any]:
    return {"ok": True}


def decode_update(payload: Any) -> Update | None:
    try:
        return Update.model_validate(payload)
    except ValidationError as e:
        log.w("Received a malformed Telegram update", str(e))
        return None


async def respond_to_update(update: Update, dispatcher: CommandDispatcher) -> dict[str, Any]:
    if config.log_telegram_update:
        log.t("Received a Telegram update", update)

    try:
        reply = await dispatcher.dispatch(update)
    except CommandExecutionError as e:
        # Telegram redelivers unacknowledged updates, so failures are only logged
        log.e(f"Failed to respond to update #{update.update_id}", e)
        return acknowledgement()

    if not reply:
        return acknowledgement()
    log.d(f"Replying to chat #{reply.chat_id} via '{reply.method}'")
    return reply.to_webhook_response()
