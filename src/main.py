import multiprocessing
import os
import random
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any
from uuid import UUID

import uvicorn
from fastapi import Body, Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import SecretStr
from starlette.responses import RedirectResponse

from api.auth import verify_api_key, verify_telegram_auth_key
from api.model.webhook_setup_payload import WebhookSetupPayload
from api.telegram_setup_controller import TelegramSetupController
from di.di import DI
from features.chat.telegram.telegram_update_responder import acknowledgement, decode_update, respond_to_update
from features.commands.command_library import register_builtin_commands
from util import log
from util.config import Config, config
from util.errors import ServiceError

# one container per process, it owns the command registry
di = DI()


# noinspection PyUnusedLocal
@asynccontextmanager
async def lifespan(owner: FastAPI):
    process_name = multiprocessing.current_process().name
    worker_type = "main" if process_name == "MainProcess" else "worker"
    worker_info = f"[{worker_type}-{os.getpid()}] {process_name}"
    log.i(f"Lifecycle: Starting up {worker_info}")
    entries = register_builtin_commands(di.command_registry)
    dispatcher = di.command_dispatcher  # fails fast on a bad tag policy
    log.i(f"Lifecycle: {type(dispatcher).__name__} serves {len(entries)} commands, tags: '{config.command_tag_policy}'")
    yield  # this holds the app alive until the server is shut down
    log.i(f"Lifecycle: Shutting down {worker_info}...")


app = FastAPI(
    docs_url = None,
    redoc_url = None,
    title = "The Dispatcher's API",
    description = "This is the Telegram webhook service for The Dispatcher.",
    debug = config.log_level in ["local", "trace", "debug"],
    lifespan = lifespan,
)

# noinspection PyTypeChecker
app.add_middleware(
    CORSMiddleware,
    allow_origins = ["*"],
    allow_credentials = False,
    allow_methods = ["*"],
    allow_headers = ["*"],
)


def http_error(reason: str, error: Exception) -> HTTPException:
    status_code = error.http_status if isinstance(error, ServiceError) else 500
    return HTTPException(status_code = status_code, detail = {"reason": log.e(reason, error)})


@app.get("/")
def root() -> RedirectResponse:
    return RedirectResponse(url = config.website_url)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "version": config.version}


@app.post("/telegram/chat-update")
async def telegram_chat_update(
    payload: dict = Body(...),
    _ = Depends(verify_telegram_auth_key),
) -> dict:
    update = decode_update(payload)
    if not update:
        return acknowledgement()
    return await respond_to_update(update, di.command_dispatcher)


@app.get("/telegram/bot")
def get_bot_info(_ = Depends(verify_api_key)) -> dict:
    try:
        return TelegramSetupController(di).fetch_bot_info()
    except Exception as e:
        raise http_error("Failed to get bot info", e)


@app.get("/telegram/webhook")
def get_webhook_info(_ = Depends(verify_api_key)) -> dict:
    try:
        return TelegramSetupController(di).fetch_webhook_info()
    except Exception as e:
        raise http_error("Failed to get webhook info", e)


@app.post("/telegram/webhook")
def set_up_webhook(
    payload: WebhookSetupPayload,
    _ = Depends(verify_api_key),
) -> dict:
    try:
        log.d(f"Setting up the webhook at '{payload.url}'")
        return TelegramSetupController(di).set_up_webhook(payload)
    except Exception as e:
        raise http_error("Failed to set up the webhook", e)


@app.delete("/telegram/webhook")
def remove_webhook(
    drop_pending_updates: bool = False,
    _ = Depends(verify_api_key),
) -> dict:
    try:
        return TelegramSetupController(di).remove_webhook(drop_pending_updates)
    except Exception as e:
        raise http_error("Failed to remove the webhook", e)


@app.get("/telegram/commands")
def get_commands(_ = Depends(verify_api_key)) -> list[dict[str, Any]]:
    try:
        return TelegramSetupController(di).fetch_command_menu()
    except Exception as e:
        raise http_error("Failed to get the command menu", e)


# declared before the lookup by name so "published" is not taken for a command name
@app.get("/telegram/commands/published")
def get_published_commands(_ = Depends(verify_api_key)) -> list[dict[str, Any]]:
    try:
        return TelegramSetupController(di).fetch_published_commands()
    except Exception as e:
        raise http_error("Failed to get the published command menu", e)


@app.get("/telegram/commands/{name}")
def get_command(
    name: str,
    _ = Depends(verify_api_key),
) -> dict:
    try:
        return TelegramSetupController(di).fetch_command(name)
    except Exception as e:
        raise http_error(f"Failed to get command '/{name}'", e)


@app.post("/telegram/commands/publish")
def publish_commands(_ = Depends(verify_api_key)) -> list[dict[str, Any]]:
    try:
        return TelegramSetupController(di).publish_command_menu()
    except Exception as e:
        raise http_error("Failed to publish the command menu", e)


# The main runner
if __name__ == "__main__":
    if "--dev" in sys.argv:  # when running locally...
        os.environ["LOG_LEVEL"] = "debug"
        config.log_level = "debug"
        os.environ["API_KEY"] = "developer"
        config.api_key = SecretStr("developer")
        workers = 1
        reload = True
        print("INFO:     Launching in dev mode...")
    else:  # when running in production...
        # generate a random API key to prevent use of the default API key
        if config.api_key.get_secret_value() == Config.DEV_API_KEY:
            api_key = str(UUID(int = random.randint(0, 2 ** 128 - 1))).upper()
            os.environ["API_KEY"] = api_key
            config.api_key = SecretStr(api_key)
            print("WARN:     Generated a new API key!", config.api_key.get_secret_value(), file = sys.stderr)
        workers = 2
        reload = False
        print("INFO:     Launching in production mode...")
    uvicorn_log_level = "debug" if config.log_level == "local" else config.log_level

    # get the service version
    if (version_file := Path("./.version")).exists():
        version_name = version_file.read_text().strip()
        if version_name:
            os.environ["VERSION"] = version_name
            config.version = version_name
            print("INFO:     Version file found", f"v{config.version}")
        else:
            print("ERROR:    Version file empty", file = sys.stderr)
    else:
        print("ERROR:    Version file not found, using dev version", file = sys.stderr)

    # finally, start the server
    uvicorn.run(
        "main:app",
        host = "0.0.0.0",
        port = 80,
        log_level = uvicorn_log_level,
        workers = workers,
        reload = reload,
    )
