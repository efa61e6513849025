from fastapi import HTTPException, Security
from fastapi.security import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from util import log
from util.config import config
from util.error_codes import INVALID_API_KEY, INVALID_TELEGRAM_AUTH_KEY
from util.errors import AuthorizationError

api_key_header = APIKeyHeader(name = "X-API-Key", auto_error = True)
telegram_auth_key_header = APIKeyHeader(name = "X-Telegram-Bot-Api-Secret-Token", auto_error = False)


def verify_api_key(api_key: str = Security(api_key_header)) -> str:
    if api_key != config.api_key.get_secret_value():
        error = AuthorizationError("Could not validate the API key", INVALID_API_KEY)
        log.w(str(error))
        raise HTTPException(status_code = HTTP_403_FORBIDDEN, detail = error.to_api_dict())
    return api_key


def verify_telegram_auth_key(auth_key: str | None = Security(telegram_auth_key_header)) -> str | None:
    if config.telegram_must_auth and auth_key != config.telegram_auth_key.get_secret_value():
        error = AuthorizationError("Could not validate the Telegram auth token", INVALID_TELEGRAM_AUTH_KEY)
        log.w(str(error))
        raise HTTPException(status_code = HTTP_403_FORBIDDEN, detail = error.to_api_dict())
    return auth_key
