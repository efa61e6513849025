from typing import Any
from urllib.parse import urlparse

from api.model.webhook_setup_payload import WebhookSetupPayload
from di.di import DI
from features.chat.telegram.model.update import Update
from util import log
from util.config import config
from util.error_codes import COMMAND_NOT_FOUND, INVALID_WEBHOOK_URL
from util.errors import NotFoundError, ValidationError


class TelegramSetupController:
    """Admin operations that configure the bot on Telegram's side."""

    __di: DI

    def __init__(self, di: DI):
        self.__di = di

    def fetch_bot_info(self) -> dict[str, Any]:
        log.d("Fetching the bot's identity")
        return self.__di.telegram_bot_api.get_me().model_dump(exclude_none = True)

    def fetch_webhook_info(self) -> dict[str, Any]:
        log.d("Fetching the webhook status")
        return self.__di.telegram_bot_api.get_webhook_info().model_dump(exclude_none = True)

    def set_up_webhook(self, payload: WebhookSetupPayload) -> dict[str, Any]:
        url = payload.url.strip()
        parsed_url = urlparse(url)
        if parsed_url.scheme != "https" or not parsed_url.netloc:
            raise ValidationError(f"Webhook URL must be an absolute HTTPS URL, got '{url}'", INVALID_WEBHOOK_URL)
        log.d(f"Registering the webhook at '{url}'")
        secret_token = config.telegram_auth_key.get_secret_value() if config.telegram_must_auth else None
        self.__di.telegram_bot_api.set_webhook(
            url,
            secret_token = secret_token,
            allowed_updates = [kind.value for kind in Update.PayloadKind],
            drop_pending_updates = payload.drop_pending_updates,
        )
        log.i(f"Webhook registered at '{url}'")
        return self.fetch_webhook_info()

    def remove_webhook(self, drop_pending_updates: bool = False) -> dict[str, Any]:
        log.d("Removing the webhook")
        self.__di.telegram_bot_api.delete_webhook(drop_pending_updates = drop_pending_updates)
        log.i("Webhook removed")
        return {"status": "OK"}

    def fetch_command_menu(self) -> list[dict[str, Any]]:
        return [command.model_dump() for command in self.__di.command_menu_publisher.build_menu()]

    def fetch_published_commands(self) -> list[dict[str, Any]]:
        log.d("Fetching the command menu published on Telegram")
        return [command.model_dump() for command in self.__di.telegram_bot_api.get_my_commands()]

    def fetch_command(self, name: str) -> dict[str, Any]:
        entry = self.__di.command_registry.lookup(name)
        if not entry:
            raise NotFoundError(f"Command '/{name}' is not registered", COMMAND_NOT_FOUND)
        return {"command": entry.name, "description": entry.description}

    def publish_command_menu(self) -> list[dict[str, Any]]:
        return [command.model_dump() for command in self.__di.command_menu_publisher.publish()]
