import unittest
from unittest.mock import MagicMock, patch

from fastapi import HTTPException
from pydantic import SecretStr
from starlette.status import HTTP_403_FORBIDDEN

from api.auth import verify_api_key, verify_telegram_auth_key
from util.error_codes import INVALID_API_KEY, INVALID_TELEGRAM_AUTH_KEY


class AuthTest(unittest.TestCase):

    @patch("api.auth.config")
    def test_missing_api_key(self, mock_config: MagicMock):
        mock_config.api_key = SecretStr("VALI-DKEY")
        with self.assertRaises(HTTPException) as context:
            # server will break the rule too, so:
            # noinspection PyTypeChecker
            verify_api_key(None)
        self.assertEqual(context.exception.status_code, HTTP_403_FORBIDDEN)
        self.assertEqual(context.exception.detail["error_code"], INVALID_API_KEY)

    @patch("api.auth.config")
    def test_invalid_api_key(self, mock_config: MagicMock):
        mock_config.api_key = SecretStr("VALI-DKEY")
        with self.assertRaises(HTTPException) as context:
            verify_api_key("NOTA-VALI-DKEY")
        self.assertEqual(context.exception.status_code, HTTP_403_FORBIDDEN)
        self.assertIn("Could not validate the API key", context.exception.detail["message"])

    @patch("api.auth.config")
    def test_valid_api_key(self, mock_config: MagicMock):
        mock_config.api_key = SecretStr("VALI-DKEY")
        api_key = verify_api_key("VALI-DKEY")
        self.assertEqual(api_key, "VALI-DKEY")

    @patch("api.auth.config")
    def test_missing_telegram_auth_key(self, mock_config: MagicMock):
        mock_config.telegram_must_auth = True
        mock_config.telegram_auth_key = SecretStr("VALI-DKEY")
        with self.assertRaises(HTTPException) as context:
            verify_telegram_auth_key(None)
        self.assertEqual(context.exception.status_code, HTTP_403_FORBIDDEN)
        self.assertEqual(context.exception.detail["error_code"], INVALID_TELEGRAM_AUTH_KEY)

    @patch("api.auth.config")
    def test_invalid_telegram_auth_key(self, mock_config: MagicMock):
        mock_config.telegram_must_auth = True
        mock_config.telegram_auth_key = SecretStr("VALI-DKEY")
        with self.assertRaises(HTTPException) as context:
            verify_telegram_auth_key("NOTA-VALI-DKEY")
        self.assertEqual(context.exception.status_code, HTTP_403_FORBIDDEN)

    @patch("api.auth.config")
    def test_valid_telegram_auth_key(self, mock_config: MagicMock):
        mock_config.telegram_must_auth = True
        mock_config.telegram_auth_key = SecretStr("VALI-DKEY")
        self.assertEqual(verify_telegram_auth_key("VALI-DKEY"), "VALI-DKEY")

    @patch("api.auth.config")
    def test_telegram_auth_key_not_enforced(self, mock_config: MagicMock):
        mock_config.telegram_must_auth = False
        self.assertIsNone(verify_telegram_auth_key(None))
