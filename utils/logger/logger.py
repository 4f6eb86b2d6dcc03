import os
import threading
from datetime import datetime
from enum import Enum

from .local_file_strategy import LocalFileStrategy


class Logger:
    """
    Process-wide logger used by every layer of Microcosm.

    Messages below ``minimum_priority`` are dropped; the rest go to the active
    storage strategy with their priority name and a timestamp. Nothing is
    stored until a strategy is installed, either explicitly or by
    ``initialize()``.
    """

    class LogPriority(Enum):
        DEBUG = 1
        INFO = 2
        WARNING = 3
        ERROR = 4
        CRITICAL = 5
        DEFAULT = 6

    DEFAULT_LOG_PATH = "/tmp/microcosm_logs.txt"
    LOG_PATH_ENV = "MICROCOSM_LOG_PATH"
    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

    is_logging_enabled = True
    minimum_priority = LogPriority.DEBUG
    log_storage_strategy = None
    # re-entrant: toggling logs its own state change
    _lock = threading.RLock()

    @classmethod
    def initialize(cls):
        """Install file storage at $MICROCOSM_LOG_PATH (or the default path) unless a strategy is set."""
        with cls._lock:
            if cls.log_storage_strategy is not None:
                return
            file_location = os.getenv(cls.LOG_PATH_ENV, cls.DEFAULT_LOG_PATH)
            cls.log_storage_strategy = LocalFileStrategy(file_location)
        cls.log(f"Logger writing to {file_location}", cls.LogPriority.INFO)

    @classmethod
    def log(cls, message, priority=LogPriority.DEBUG):
        """
        Store a message.

        Args:
            message (str): Text to store.
            priority (LogPriority | str): Priority, or its name (``"info"``).
        """
        if isinstance(priority, str):
            priority = cls.LogPriority[priority.upper()]
        if priority.value < cls.minimum_priority.value:
            return
        with cls._lock:
            strategy = cls.log_storage_strategy
            if cls.is_logging_enabled and strategy is not None:
                strategy.store_log(message, priority.name, datetime.now().strftime(cls.TIMESTAMP_FORMAT))

    @classmethod
    def set_log_storage_strategy(cls, log_storage_strategy):
        with cls._lock:
            cls.log_storage_strategy = log_storage_strategy

    @classmethod
    def set_minimum_priority(cls, priority):
        """Generation stepping logs DEBUG lines per call, so long runs usually raise this to INFO."""
        cls.minimum_priority = priority

    @classmethod
    def disable_logging(cls):
        with cls._lock:
            cls.log("Logging disabled", cls.LogPriority.INFO)
            cls.is_logging_enabled = False

    @classmethod
    def enable_logging(cls):
        with cls._lock:
            cls.is_logging_enabled = True
            cls.log("Logging enabled", cls.LogPriority.INFO)

    @classmethod
    def flush_logs(cls):
        """Clear what the active strategy has stored so far."""
        with cls._lock:
            if cls.log_storage_strategy is not None:
                cls.log_storage_strategy.flush_logs()
        cls.log("Logs flushed")
