from features.chat.command_registry import CommandRegistry
from features.commands.help_command import HelpCommand
from features.commands.info_command import InfoCommand
from util import log


def register_builtin_commands(registry: CommandRegistry) -> list[CommandRegistry.Entry]:
    entries = [
        registry.register_handler(InfoCommand()),
        registry.register_handler(HelpCommand(registry)),
    ]
    log.i(f"Registered {len(entries)} built-in commands")
    return entries
