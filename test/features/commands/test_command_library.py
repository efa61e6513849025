import unittest

from features.chat.command_registry import CommandRegistry
from features.commands.command_library import register_builtin_commands
from features.commands.help_command import HelpCommand
from features.commands.info_command import InfoCommand


class CommandLibraryTest(unittest.TestCase):

    def test_registers_builtin_commands(self):
        registry = CommandRegistry()

        entries = register_builtin_commands(registry)

        self.assertEqual([entry.name for entry in entries], ["info", "help"])
        self.assertIsInstance(registry.lookup("info").handler, InfoCommand)
        self.assertIsInstance(registry.lookup("help").handler, HelpCommand)
