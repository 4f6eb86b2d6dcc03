class LogStorageStrategy:
    """Where Logger puts its lines. Subclasses implement both methods."""

    def store_log(self, message, priority, timestamp):
        """
        Keep one log entry.

        Args:
            message (str): Logged text.
            priority (str): Priority name, e.g. ``"INFO"``.
            timestamp (str): Formatted time of the call.
        """
        raise NotImplementedError()

    def flush_logs(self):
        """Discard everything stored so far."""
        raise NotImplementedError()
