import threading
from typing import Any


class Singleton(type):
    _instances: dict[type, Any] = {}
    _lock = threading.Lock()  # guards first construction across threads

    def __call__(cls, *args, **kwargs):
        with cls._lock:
            if cls not in cls._instances:
                cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    def reset(cls) -> None:
        with cls._lock:
            cls._instances.pop(cls, None)
