"""Append-only activity log kept in a flat text file."""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path

from django.utils import timezone

from givebrevo import conf

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
SEPARATOR = " - "

# Appends from concurrent requests of the same process are serialized so
# that each entry stays on its own line.
_write_lock = threading.Lock()


def now_timestamp() -> str:
    """Return the current local time formatted for the log."""
    now = timezone.now()
    if timezone.is_aware(now):
        now = timezone.localtime(now)
    return now.strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class LogEntry:
    """One line of the activity log."""

    timestamp: str
    message: str

    @classmethod
    def from_line(cls, line: str) -> "LogEntry":
        """Split a log line on its first separator."""
        timestamp, _, message = line.partition(SEPARATOR)
        return cls(timestamp=timestamp, message=message)


class ActivityLog:
    """
    Activity log of the relay.

    Each entry is a single line `<timestamp> - <message>` appended at the end
    of the file. The file is never rotated nor truncated.
    """

    def __init__(self, path):
        """Bind the log to a file path."""
        self.path = Path(path)

    def ensure_exists(self):
        """Create the log file with an initialization line if it is missing."""
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with _write_lock, self.path.open("a", encoding="utf-8") as log_file:
            log_file.write(f"Log file created on {now_timestamp()}\n")
        logger.info("Activity log created at %s", self.path)

    def append(self, message: str):
        """Append one entry to the log."""
        # Keep one entry per line whatever the message contains
        message = " ".join(str(message).splitlines())
        line = f"{now_timestamp()}{SEPARATOR}{message}\n"
        try:
            with _write_lock, self.path.open("a", encoding="utf-8") as log_file:
                log_file.write(line)
        except OSError:
            # The relay goes on without its activity log
            logger.exception("Could not write to the activity log %s: %s", self.path, message)

    def entries(self) -> list[LogEntry]:
        """Return the entries of the log in append order, skipping empty lines."""
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [LogEntry.from_line(line) for line in content.splitlines() if line]


def get_activity_log() -> ActivityLog:
    """Return the activity log configured in the settings."""
    return ActivityLog(conf.get_log_file())
