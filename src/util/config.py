import os
from typing import Callable

from pydantic import SecretStr

from util.singleton import Singleton


class Config(metaclass = Singleton):

    DEV_API_KEY = "0000-1234-5678-0000"  # needed for local dev mode

    log_level: str
    log_telegram_update: bool
    web_timeout_s: int
    website_url: str
    telegram_bot_username: str
    telegram_api_base_url: str
    telegram_must_auth: bool
    command_tag_policy: str
    version: str

    api_key: SecretStr
    telegram_auth_key: SecretStr
    telegram_bot_token: SecretStr

    def all_secrets(self) -> list[SecretStr]:
        return [
            self.api_key,
            self.telegram_auth_key,
            self.telegram_bot_token,
        ]

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_log_telegram_update: bool = False,
        def_web_timeout_s: int = 10,
        def_website_url: str = "https://core.telegram.org/bots",
        def_telegram_bot_username: str = "the_dispatcher_bot",
        def_telegram_api_base_url: str = "https://api.telegram.org",
        def_telegram_must_auth: bool = False,
        def_command_tag_policy: str = "strip",
        def_version: str = "dev",

        def_api_key: SecretStr = SecretStr(DEV_API_KEY),
        def_telegram_auth_key: SecretStr = SecretStr("it_is_really_telegram"),
        def_telegram_bot_token: SecretStr = SecretStr("invalid"),
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.log_telegram_update = self.__env("LOG_TG_UPDATE", lambda: str(def_log_telegram_update)).lower() == "true"
        self.web_timeout_s = int(self.__env("WEB_TIMEOUT_S", lambda: str(def_web_timeout_s)))
        self.website_url = self.__env("WEBSITE_URL", lambda: def_website_url)
        self.telegram_bot_username = self.__env("TELEGRAM_BOT_USERNAME", lambda: def_telegram_bot_username)
        self.telegram_api_base_url = self.__env("TELEGRAM_API_BASE_URL", lambda: def_telegram_api_base_url)
        self.telegram_must_auth = self.__env("TELEGRAM_AUTH_ON", lambda: str(def_telegram_must_auth)).lower() == "true"
        self.command_tag_policy = self.__env("COMMAND_TAG_POLICY", lambda: def_command_tag_policy).lower()
        self.version = self.__env("VERSION", lambda: def_version)

        self.api_key = self.__senv("API_KEY", lambda: def_api_key)
        self.telegram_auth_key = self.__senv("TELEGRAM_API_UPDATE_AUTH_TOKEN", lambda: def_telegram_auth_key)
        self.telegram_bot_token = self.__senv("TELEGRAM_BOT_TOKEN", lambda: def_telegram_bot_token)
        # @formatter:on

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __senv(name: str, default: Callable[[], SecretStr]) -> SecretStr:
        env_value = os.environ.get(name, "").strip()
        return SecretStr(env_value) if env_value else default()


config = Config()
