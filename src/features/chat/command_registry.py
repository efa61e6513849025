import threading
from dataclasses import dataclass

from features.chat.command_handler import CommandHandler
from util import log


class CommandRegistry:
    """
    Maps lowercase command names to their handlers.

    Re-registering a name replaces the previous entry (last registration wins) and keeps
    the entry's original position in the listing order.
    """

    @dataclass(frozen = True)
    class Entry:
        name: str
        description: str
        handler: CommandHandler

    __entries: dict[str, Entry]
    __lock: threading.Lock

    def __init__(self):
        self.__entries = {}
        self.__lock = threading.Lock()

    def register(self, entry: Entry) -> Entry:
        normalized = CommandRegistry.Entry(
            name = entry.name.lower(),
            description = entry.description,
            handler = entry.handler,
        )
        with self.__lock:
            if normalized.name in self.__entries:
                log.w(f"Command '/{normalized.name}' is already registered, replacing it")
            self.__entries[normalized.name] = normalized
        log.t(f"Registered command '/{normalized.name}'")
        return normalized

    def register_handler(self, handler: CommandHandler) -> Entry:
        return self.register(
            CommandRegistry.Entry(name = handler.name, description = handler.description, handler = handler),
        )

    def lookup(self, name: str) -> Entry | None:
        with self.__lock:
            return self.__entries.get(name.lower())

    def list(self) -> list[Entry]:
        with self.__lock:
            return list(self.__entries.values())
