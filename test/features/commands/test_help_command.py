import unittest

from features.chat.command_registry import CommandRegistry
from features.chat.telegram.model.chat import Chat
from features.chat.telegram.model.message import Message
from features.chat.telegram.model.update import Update
from features.commands.help_command import HelpCommand
from features.commands.info_command import InfoCommand


class HelpCommandTest(unittest.IsolatedAsyncioTestCase):

    registry: CommandRegistry
    command: HelpCommand

    def setUp(self):
        self.registry = CommandRegistry()
        self.command = HelpCommand(self.registry)
        self.registry.register_handler(InfoCommand())
        self.registry.register_handler(self.command)

    async def test_lists_registered_commands(self):
        update = Update(
            update_id = 1,
            message = Message(message_id = 1, date = 1700000000, chat = Chat(id = 8, type = "private"), text = "/help"),
        )

        reply = await self.command.execute(update, [])

        self.assertEqual(reply.chat_id, 8)
        lines = reply.text.split("\n")
        self.assertEqual(lines[1], f"/info - {InfoCommand.description}")
        self.assertEqual(lines[2], f"/help - {HelpCommand.description}")

    async def test_escapes_descriptions(self):
        self.registry.register(
            CommandRegistry.Entry(name = "tags", description = "Uses <b> & friends", handler = self.command),
        )
        update = Update(
            update_id = 1,
            message = Message(message_id = 1, date = 1700000000, chat = Chat(id = 8, type = "private"), text = "/help"),
        )

        reply = await self.command.execute(update, [])

        self.assertIn("/tags - Uses &lt;b&gt; &amp; friends", reply.text)

    async def test_no_message_no_reply(self):
        self.assertIsNone(await self.command.execute(Update(update_id = 1), []))
