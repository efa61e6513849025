import sys
import traceback
from typing import Any

from uvicorn.server import logger

from util.config import config

_LEVELS = {"trace": 0, "debug": 1, "info": 2, "warn": 3, "warning": 3, "error": 4}


def _should_log(level: str) -> bool:
    if config.log_level == "local":
        return True  # local runs print everything
    current_level = _LEVELS.get(config.log_level, _LEVELS["info"])
    return _LEVELS.get(level.lower(), _LEVELS["info"]) >= current_level


def _describe(arg: Any) -> str:
    if isinstance(arg, Exception):
        return f"! {type(arg).__name__} (see below)"
    if hasattr(arg, "model_dump_json"):  # pydantic models print as compact JSON
        return f"{type(arg).__name__}: {arg.model_dump_json(exclude_none = True, by_alias = True)}"
    return str(arg)


def _format_args(*args: Any) -> tuple[str, list[Exception]]:
    exceptions = [arg for arg in args if isinstance(arg, Exception)]
    parts = [_describe(arg) for arg in args]
    if len(parts) <= 1:
        return (parts[0] if parts else ""), exceptions
    if exceptions:
        return "\n ├─ ".join(parts), exceptions
    return "\n ├─ ".join(parts[:-1]) + f"\n └─ {parts[-1]}", exceptions


def _trace_of(exception: Exception) -> str | None:
    if not exception.__traceback__:
        return None
    return "".join(traceback.format_tb(exception.__traceback__)).strip()


def _emit_local(level: str, message: str, exceptions: list[Exception]):
    if _should_log(level):
        print(f"[{level[0]}] {message}")
    for exception in exceptions:
        print(f" ‼  Message: {exception}", file = sys.stderr)
        if trace := _trace_of(exception):
            print(trace, file = sys.stderr)


def _emit_uvicorn(level: str, message: str, exceptions: list[Exception]):
    if _should_log(level):
        match level:
            case "TRACE" | "DEBUG":
                logger.debug(message)
            case "INFO":
                logger.info(message)
            case "WARN":
                logger.warning(message)
            case "ERROR":
                logger.error(message)
    for exception in exceptions:
        logger.error(f"Message: {exception}")
        if trace := _trace_of(exception):
            logger.error(f"Details:\n └─ {trace}")


def _log(level: str, *args: Any) -> str:
    message, exceptions = _format_args(*args)
    if not _should_log(level) and not exceptions:
        return message
    if config.log_level == "local":
        _emit_local(level, message, exceptions)
        return message
    try:
        _emit_uvicorn(level, message, exceptions)
    except Exception:
        # the uvicorn logger is unusable outside of a server, fall back to printing
        _emit_local(level, message, exceptions)
    return message


def t(*args: Any) -> str:
    return _log("TRACE", *args)


def d(*args: Any) -> str:
    return _log("DEBUG", *args)


def i(*args: Any) -> str:
    return _log("INFO", *args)


def w(*args: Any) -> str:
    return _log("WARN", *args)


def e(*args: Any) -> str:
    return _log("ERROR", *args)
