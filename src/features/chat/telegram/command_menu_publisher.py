import re

from features.chat.command_registry import CommandRegistry
from features.chat.telegram.model.bot_command import BotCommand
from features.chat.telegram.sdk.telegram_bot_api import TelegramBotAPI
from util import log
from util.error_codes import INVALID_COMMAND_DESCRIPTION, INVALID_COMMAND_NAME, TOO_MANY_COMMANDS
from util.errors import ValidationError

MAX_COMMANDS = 100
MAX_NAME_LENGTH = 32
MAX_DESCRIPTION_LENGTH = 256
COMMAND_NAME_PATTERN = re.compile(r"[a-z0-9_]+")


class CommandMenuPublisher:
    """Publishes the registered commands as the bot's command menu in Telegram clients."""

    __registry: CommandRegistry
    __bot_api: TelegramBotAPI

    def __init__(self, registry: CommandRegistry, bot_api: TelegramBotAPI):
        self.__registry = registry
        self.__bot_api = bot_api

    def build_menu(self) -> list[BotCommand]:
        entries = self.__registry.list()
        if len(entries) > MAX_COMMANDS:
            raise ValidationError(f"At most {MAX_COMMANDS} commands are allowed, found {len(entries)}", TOO_MANY_COMMANDS)
        menu = [BotCommand(command = entry.name, description = entry.description.strip()) for entry in entries]
        for command in menu:
            validate_bot_command(command)
        return menu

    def publish(self) -> list[BotCommand]:
        menu = self.build_menu()
        log.d(f"Publishing {len(menu)} commands to the bot menu")
        self.__bot_api.set_my_commands(menu)
        log.i(f"Published the command menu: {', '.join(f'/{command.command}' for command in menu)}")
        return menu


def validate_bot_command(command: BotCommand):
    if not 1 <= len(command.command) <= MAX_NAME_LENGTH:
        raise ValidationError(
            f"Command name '{command.command}' must be 1-{MAX_NAME_LENGTH} characters long",
            INVALID_COMMAND_NAME,
        )
    if not COMMAND_NAME_PATTERN.fullmatch(command.command):
        raise ValidationError(
            f"Command name '{command.command}' may only contain lowercase letters, digits and underscores",
            INVALID_COMMAND_NAME,
        )
    if not 1 <= len(command.description.strip()) <= MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description of '/{command.command}' must be 1-{MAX_DESCRIPTION_LENGTH} characters long",
            INVALID_COMMAND_DESCRIPTION,
        )
