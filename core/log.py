################################################################################################

'''

Copyright 2025 Aaron Vose (avose@aaronvose.net)

Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the code for the info / debug logger shared by the drag
subsystem and the demo host.

'''

################################################################################################

import inspect
from datetime import datetime

################################################################################################

TIME_FORMAT = "%m/%d/%Y %H:%M:%S"

class LogManager():
    __log = None

    def __init__(self, verbosity: int = 0):
        if LogManager.__log is None:
            LogManager.__log = [(self._now(), "Begin TreeDrop Log")]
        self.verbosity = verbosity

    @staticmethod
    def _now() -> str:
        return datetime.now().strftime(TIME_FORMAT)

    def add(self, text: str):
        LogManager.__log.append((self._now(), text))

    def debug(self, text: str, level: int = 0):
        """Record `text` if the current verbosity admits `level`, tagged with the caller's file."""
        if self.verbosity < level:
            return

        stack = inspect.stack()
        if len(stack) > 1:
            filename = stack[1].filename.split('/')[-1]
        else:
            filename = "unknown"
        self.add(f"[{filename}] {text}")

    def get(self, index: int = None):
        if index is not None:
            return LogManager.__log[index]
        return LogManager.__log.copy()

    def messages(self):
        """Message text only, oldest first."""
        return [message for _, message in LogManager.__log]

    def count(self):
        return len(LogManager.__log)

    def set_verbosity(self, verbosity: int = 0):
        self.verbosity = verbosity

    def clear(self):
        """Clear all log entries."""
        if LogManager.__log is not None:
            LogManager.__log.clear()
            LogManager.__log.append((self._now(), "Log cleared"))

    def write_to_file(self, filepath: str):
        """Write all log entries to a file."""
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                for timestamp, message in LogManager.__log:
                    f.write(f"[{timestamp}] {message}\n")
            self.add(f"Log written to file: {filepath}")
        except OSError as e:
            self.add(f"Failed to write log to file '{filepath}': {e}")

################################################################################################

Log = LogManager()

################################################################################################
