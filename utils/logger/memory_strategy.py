from collections import deque
from .log_storage_strategy import LogStorageStrategy

class MemoryStrategy(LogStorageStrategy):
    """
    Keeps the most recent log entries in memory.
    Selected with storage_strategy="memory" on the controller, and used by
    tests that assert on logged messages.
    """

    def __init__(self, capacity=5000):
        self.entries = deque(maxlen=capacity)

    def store_log(self, message, priority, timestamp):
        self.entries.append((timestamp, priority, message))

    def flush_logs(self):
        self.entries.clear()

    def messages(self, priority=None):
        """Return stored messages, optionally only those of one priority name."""
        return [message for _, level, message in self.entries
                if priority is None or level == priority]
