from __future__ import annotations

from typing import TYPE_CHECKING

from util.config import config
from util.error_codes import INVALID_TAG_POLICY
from util.errors import ConfigurationError

if TYPE_CHECKING:
    from features.chat.command_dispatcher import CommandDispatcher
    from features.chat.command_registry import CommandRegistry
    from features.chat.telegram.command_menu_publisher import CommandMenuPublisher
    from features.chat.telegram.sdk.telegram_bot_api import TelegramBotAPI


class DI:
    """
    Lazily assembles the dependency graph. One container owns one command registry,
    so the web app keeps a single instance for the process and tests build their own.
    """

    # Shared state
    _command_registry: "CommandRegistry | None"
    # SDKs
    _telegram_bot_api: "TelegramBotAPI | None"
    # Features
    _command_dispatcher: "CommandDispatcher | None"
    _command_menu_publisher: "CommandMenuPublisher | None"

    def __init__(self, command_registry: "CommandRegistry | None" = None):
        # Shared state
        self._command_registry = command_registry
        # SDKs
        self._telegram_bot_api = None
        # Features
        self._command_dispatcher = None
        self._command_menu_publisher = None

    # === Shared state ===

    @property
    def command_registry(self) -> "CommandRegistry":
        if self._command_registry is None:
            from features.chat.command_registry import CommandRegistry
            self._command_registry = CommandRegistry()
        return self._command_registry

    # === SDKs ===

    @property
    def telegram_bot_api(self) -> "TelegramBotAPI":
        if self._telegram_bot_api is None:
            from features.chat.telegram.sdk.telegram_bot_api import TelegramBotAPI
            self._telegram_bot_api = TelegramBotAPI()
        return self._telegram_bot_api

    # === Features ===

    @property
    def command_dispatcher(self) -> "CommandDispatcher":
        if self._command_dispatcher is None:
            from features.chat.command_dispatcher import CommandDispatcher
            tag_policy = CommandDispatcher.TagPolicy.lookup(config.command_tag_policy)
            if not tag_policy:
                raise ConfigurationError(f"Unknown command tag policy '{config.command_tag_policy}'", INVALID_TAG_POLICY)
            self._command_dispatcher = CommandDispatcher(
                self.command_registry,
                bot_username = config.telegram_bot_username,
                tag_policy = tag_policy,
            )
        return self._command_dispatcher

    @property
    def command_menu_publisher(self) -> "CommandMenuPublisher":
        if self._command_menu_publisher is None:
            from features.chat.telegram.command_menu_publisher import CommandMenuPublisher
            self._command_menu_publisher = CommandMenuPublisher(self.command_registry, self.telegram_bot_api)
        return self._command_menu_publisher
