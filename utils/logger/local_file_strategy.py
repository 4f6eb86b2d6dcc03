import os
from datetime import datetime

from .log_storage_strategy import LogStorageStrategy


class LocalFileStrategy(LogStorageStrategy):
    """
    Appends ``[timestamp] [PRIORITY] message`` lines to a text file.

    Relative paths resolve against the working directory and missing parent
    directories are created. An existing file is truncated, so each session
    starts with a fresh log.
    """

    def __init__(self, file_location):
        self.file_location = os.path.abspath(file_location)
        os.makedirs(os.path.dirname(self.file_location), exist_ok=True)
        self._rewrite("MICROCOSM LOG STARTED")

    def _rewrite(self, header):
        with open(self.file_location, 'w') as log_file:
            log_file.write(f"{header}: {datetime.now()}\n")

    def store_log(self, message, priority, timestamp):
        with open(self.file_location, 'a') as log_file:
            log_file.write(f"[{timestamp}] [{priority}] {message}\n")

    def flush_logs(self):
        self._rewrite("MICROCOSM LOG FLUSHED")
