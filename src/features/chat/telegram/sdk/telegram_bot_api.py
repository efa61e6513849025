from typing import Any, TypeVar

import requests
from pydantic import SecretStr
from requests import RequestException

from features.chat.telegram.model.api_response import TelegramApiResponse
from features.chat.telegram.model.bot_command import BotCommand
from features.chat.telegram.model.user import User
from features.chat.telegram.model.webhook_info import WebhookInfo
from util import log
from util.config import config
from util.error_codes import TELEGRAM_API_BAD_RESPONSE, TELEGRAM_API_REJECTED, TELEGRAM_API_UNREACHABLE
from util.errors import ExternalServiceError
from util.functions import mask_secret

T = TypeVar("T")


class TelegramBotAPI:
    """https://core.telegram.org/bots/api"""
    __bot_api_url: str
    __printable_api_url: str

    def __init__(self, bot_token: SecretStr | None = None, api_base_url: str | None = None):
        token = (bot_token or config.telegram_bot_token).get_secret_value()
        base_url = (api_base_url or config.telegram_api_base_url).rstrip("/")
        self.__bot_api_url = f"{base_url}/bot{token}"
        self.__printable_api_url = f"{base_url}/bot{mask_secret(token)}"

    def get_me(self) -> User:
        return self.__call("getMe", User)

    def set_webhook(
        self,
        url: str,
        secret_token: str | None = None,
        allowed_updates: list[str] | None = None,
        drop_pending_updates: bool = False,
    ) -> bool:
        payload: dict[str, Any] = {"url": url, "drop_pending_updates": drop_pending_updates}
        if secret_token:
            payload["secret_token"] = secret_token
        if allowed_updates is not None:
            payload["allowed_updates"] = allowed_updates
        return self.__call("setWebhook", bool, payload)

    def delete_webhook(self, drop_pending_updates: bool = False) -> bool:
        return self.__call("deleteWebhook", bool, {"drop_pending_updates": drop_pending_updates})

    def get_webhook_info(self) -> WebhookInfo:
        return self.__call("getWebhookInfo", WebhookInfo)

    def set_my_commands(self, commands: list[BotCommand]) -> bool:
        payload = {"commands": [command.model_dump() for command in commands]}
        return self.__call("setMyCommands", bool, payload)

    def get_my_commands(self) -> list[BotCommand]:
        return self.__call("getMyCommands", list[BotCommand])

    def __call(self, method: str, result_type: type[T], payload: dict[str, Any] | None = None) -> T:
        log.t(f"Calling {self.__printable_api_url}/{method}")
        try:
            response = requests.post(f"{self.__bot_api_url}/{method}", json = payload or {}, timeout = config.web_timeout_s)
        except RequestException as e:
            raise ExternalServiceError(f"Telegram API call '{method}' failed", TELEGRAM_API_UNREACHABLE) from e

        try:
            envelope = TelegramApiResponse[result_type].model_validate(response.json())
        except ValueError as e:  # covers both JSON decoding and pydantic validation
            message = f"Unreadable response to '{method}' (HTTP_{response.status_code})"
            raise ExternalServiceError(message, TELEGRAM_API_BAD_RESPONSE) from e

        if not envelope.ok or envelope.result is None:
            message = f"Telegram API rejected '{method}': {envelope.description or 'no description'}"
            log.w(message, f"HTTP_{response.status_code}, error code {envelope.error_code}")
            raise ExternalServiceError(message, TELEGRAM_API_REJECTED)
        return envelope.result
