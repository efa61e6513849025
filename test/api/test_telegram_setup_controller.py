import unittest
from unittest.mock import MagicMock, Mock, patch

from pydantic import SecretStr

from api.model.webhook_setup_payload import WebhookSetupPayload
from api.telegram_setup_controller import TelegramSetupController
from di.di import DI
from features.chat.command_handler import CommandHandler
from features.chat.command_registry import CommandRegistry
from features.chat.telegram.command_menu_publisher import CommandMenuPublisher
from features.chat.telegram.model.bot_command import BotCommand
from features.chat.telegram.model.user import User
from features.chat.telegram.model.webhook_info import WebhookInfo
from features.chat.telegram.sdk.telegram_bot_api import TelegramBotAPI
from util.error_codes import COMMAND_NOT_FOUND, INVALID_WEBHOOK_URL
from util.errors import NotFoundError, ValidationError


class TelegramSetupControllerTest(unittest.TestCase):

    mock_di: DI
    registry: CommandRegistry
    controller: TelegramSetupController

    def setUp(self):
        self.registry = CommandRegistry()
        self.mock_di = Mock(spec = DI)
        # noinspection PyPropertyAccess
        self.mock_di.command_registry = self.registry
        # noinspection PyPropertyAccess
        self.mock_di.telegram_bot_api = Mock(spec = TelegramBotAPI)
        # noinspection PyPropertyAccess
        self.mock_di.command_menu_publisher = Mock(spec = CommandMenuPublisher)
        self.mock_di.telegram_bot_api.get_webhook_info.return_value = WebhookInfo(
            url = "https://example.com/hook",
            has_custom_certificate = False,
            pending_update_count = 0,
        )
        self.controller = TelegramSetupController(self.mock_di)

    def test_fetch_bot_info(self):
        self.mock_di.telegram_bot_api.get_me.return_value = User(
            id = 1,
            is_bot = True,
            first_name = "Dispatcher",
            username = "the_dispatcher_bot",
        )

        result = self.controller.fetch_bot_info()

        self.assertEqual(result, {"id": 1, "is_bot": True, "first_name": "Dispatcher", "username": "the_dispatcher_bot"})

    def test_fetch_webhook_info(self):
        result = self.controller.fetch_webhook_info()

        self.assertEqual(result["url"], "https://example.com/hook")
        self.assertNotIn("last_error_message", result)

    @patch("api.telegram_setup_controller.config")
    def test_set_up_webhook_with_auth(self, mock_config: MagicMock):
        mock_config.telegram_must_auth = True
        mock_config.telegram_auth_key = SecretStr("s3cret")

        result = self.controller.set_up_webhook(WebhookSetupPayload(url = " https://example.com/hook ", drop_pending_updates = True))

        self.mock_di.telegram_bot_api.set_webhook.assert_called_once_with(
            "https://example.com/hook",
            secret_token = "s3cret",
            allowed_updates = ["message", "edited_message", "channel_post", "edited_channel_post", "callback_query"],
            drop_pending_updates = True,
        )
        self.assertEqual(result["pending_update_count"], 0)

    @patch("api.telegram_setup_controller.config")
    def test_set_up_webhook_without_auth(self, mock_config: MagicMock):
        mock_config.telegram_must_auth = False

        self.controller.set_up_webhook(WebhookSetupPayload(url = "https://example.com/hook"))

        self.assertIsNone(self.mock_di.telegram_bot_api.set_webhook.call_args.kwargs["secret_token"])

    def test_set_up_webhook_rejects_plain_http(self):
        with self.assertRaises(ValidationError) as context:
            self.controller.set_up_webhook(WebhookSetupPayload(url = "http://example.com/hook"))
        self.assertEqual(context.exception.error_code, INVALID_WEBHOOK_URL)
        self.mock_di.telegram_bot_api.set_webhook.assert_not_called()

    def test_set_up_webhook_rejects_relative_url(self):
        with self.assertRaises(ValidationError):
            self.controller.set_up_webhook(WebhookSetupPayload(url = "/telegram/chat-update"))

    def test_remove_webhook(self):
        result = self.controller.remove_webhook(drop_pending_updates = True)

        self.mock_di.telegram_bot_api.delete_webhook.assert_called_once_with(drop_pending_updates = True)
        self.assertEqual(result, {"status": "OK"})

    def test_fetch_command_menu(self):
        self.mock_di.command_menu_publisher.build_menu.return_value = [BotCommand(command = "info", description = "Info")]

        self.assertEqual(self.controller.fetch_command_menu(), [{"command": "info", "description": "Info"}])

    def test_fetch_published_commands(self):
        self.mock_di.telegram_bot_api.get_my_commands.return_value = [
            BotCommand(command = "info", description = "Info"),
            BotCommand(command = "legacy", description = "Not registered locally"),
        ]

        result = self.controller.fetch_published_commands()

        self.mock_di.telegram_bot_api.get_my_commands.assert_called_once_with()
        self.mock_di.command_menu_publisher.build_menu.assert_not_called()
        self.assertEqual(
            result,
            [
                {"command": "info", "description": "Info"},
                {"command": "legacy", "description": "Not registered locally"},
            ],
        )

    def test_fetch_published_commands_when_menu_is_empty(self):
        self.mock_di.telegram_bot_api.get_my_commands.return_value = []

        self.assertEqual(self.controller.fetch_published_commands(), [])

    def test_fetch_command(self):
        self.registry.register(CommandRegistry.Entry(name = "info", description = "Info", handler = Mock(spec = CommandHandler)))

        self.assertEqual(self.controller.fetch_command("INFO"), {"command": "info", "description": "Info"})

    def test_fetch_unknown_command(self):
        with self.assertRaises(NotFoundError) as context:
            self.controller.fetch_command("missing")
        self.assertEqual(context.exception.error_code, COMMAND_NOT_FOUND)

    def test_publish_command_menu(self):
        self.mock_di.command_menu_publisher.publish.return_value = [BotCommand(command = "help", description = "Help")]

        self.assertEqual(self.controller.publish_command_menu(), [{"command": "help", "description": "Help"}])
