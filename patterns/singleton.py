"""
Singleton pattern for single-instance classes.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional
import threading
from utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_DATABASE_URL = "mongodb://localhost:8080/project"


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass; the lock is reentrant so one singleton
    may construct another inside its __init__.

    The instance is built lazily on first call; later calls return it and
    ignore their arguments.
    """
    _instances: Dict[type, Any] = {}
    _lock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        """Create or return existing instance."""
        if cls not in cls._instances:
            with cls._lock:
                # Double-checked locking
                if cls not in cls._instances:
                    instance = super().__call__(*args, **kwargs)
                    cls._instances[cls] = instance
                    logger.debug(f"Created singleton instance of {cls.__name__}")

        return cls._instances[cls]

    @staticmethod
    def clear(target: Optional[type] = None):
        """Forget the instance of ``target``, or of every singleton class."""
        with SingletonMeta._lock:
            if target is None:
                SingletonMeta._instances.clear()
            else:
                SingletonMeta._instances.pop(target, None)


class Singleton(metaclass=SingletonMeta):
    """Base class for singleton objects."""
    pass


@dataclass(frozen=True)
class Connection:
    url: str


def create_connection(url: str) -> Connection:
    return Connection(url=url)


class Database(Singleton):
    """Process-wide database handle; the connection is opened once."""

    def __init__(self, url: str = DEFAULT_DATABASE_URL):
        self._connection = create_connection(url)
        logger.info(f"Opened database connection to {url}")

    def connect(self) -> Connection:
        """Return the shared connection."""
        return self._connection
