from enum import Enum

from pydantic import BaseModel

from features.chat.command_registry import CommandRegistry
from features.chat.telegram.model.reply_instruction import ReplyInstruction
from features.chat.telegram.model.update import Update
from util import log
from util.error_codes import COMMAND_EXECUTION_FAILED, MISSING_BOT_USERNAME
from util.errors import ConfigurationError, InternalError
from util.functions import utf16_length, utf16_slice


class CommandExecutionError(InternalError):
    command_name: str

    def __init__(self, command_name: str):
        super().__init__(f"Command '/{command_name}' failed", COMMAND_EXECUTION_FAILED)
        self.command_name = command_name


class CommandDispatcher:
    """
    Routes a single Telegram update to the registered command handler, if any.

    The dispatcher keeps no state between calls; the only shared state is the injected registry.
    """

    class TagPolicy(Enum):
        strip = "strip"  # ignore whichever bot the command is tagged with
        own_only = "own_only"  # only dispatch untagged commands or those tagged with our bot

        @classmethod
        def lookup(cls, value: str) -> "CommandDispatcher.TagPolicy | None":
            try:
                return cls(value)
            except ValueError:
                return None

    class Invocation(BaseModel):
        name: str
        tag: str | None = None
        args: list[str] = []

    __registry: CommandRegistry
    __bot_username: str | None
    __tag_policy: TagPolicy

    def __init__(
        self,
        registry: CommandRegistry,
        bot_username: str | None = None,
        tag_policy: TagPolicy = TagPolicy.strip,
    ):
        self.__registry = registry
        self.__bot_username = bot_username.strip().removeprefix("@").lower() if bot_username else None
        self.__tag_policy = tag_policy
        if tag_policy == CommandDispatcher.TagPolicy.own_only and not self.__bot_username:
            raise ConfigurationError("Bot username is required to filter tagged commands", MISSING_BOT_USERNAME)

    async def dispatch(self, update: Update) -> ReplyInstruction | None:
        invocation = self.extract_invocation(update)
        if not invocation:
            log.t(f"Update #{update.update_id} carries no command")
            return None
        if not self.__accepts_tag(invocation.tag):
            log.d(f"Ignoring '/{invocation.name}', it is addressed to '@{invocation.tag}'")
            return None

        entry = self.__registry.lookup(invocation.name)
        if not entry:
            log.d(f"Unknown command '/{invocation.name}'")
            return None

        log.t(f"Executing '/{entry.name}' with args {invocation.args}")
        try:
            reply = await entry.handler.execute(update, list(invocation.args))
        except Exception as e:
            raise CommandExecutionError(entry.name) from e
        if not reply:
            log.t(f"Command '/{entry.name}' produced no reply")
            return None
        return reply

    def extract_invocation(self, update: Update) -> Invocation | None:
        message = update.message
        if not message or not message.text:
            return None
        entity = next((entity for entity in message.entities or [] if entity.is_bot_command), None)
        if not entity:
            return None

        text = message.text
        span_end = entity.offset + entity.length
        try:
            if entity.offset < 0 or entity.length < 1 or span_end > utf16_length(text):
                log.w(f"Update #{update.update_id}: command entity [{entity.offset}, {span_end}) is out of range")
                return None
            span = utf16_slice(text, entity.offset, span_end)
            remainder = utf16_slice(text, span_end)
        except UnicodeError as e:
            log.w(f"Update #{update.update_id}: command entity does not align with the text ({e})")
            return None
        if not span.startswith("/"):
            log.w(f"Update #{update.update_id}: command entity '{span}' does not start with '/'")
            return None

        # bots get tagged in groups like this: /start@my_bot
        command, _, tag = span[1:].partition("@")
        return CommandDispatcher.Invocation(
            name = command.lower(),
            tag = tag or None,
            args = remainder.split(),
        )

    def __accepts_tag(self, tag: str | None) -> bool:
        if not tag or self.__tag_policy == CommandDispatcher.TagPolicy.strip:
            return True
        return tag.lower() == self.__bot_username
