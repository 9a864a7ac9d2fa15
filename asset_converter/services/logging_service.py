"""
This module provides the plain-text error log written when a batch fails.

Console output is handled by loguru; this file is a durable, human-readable
record of the failure that ended each failed run, appended run after run.
"""

from datetime import datetime
from pathlib import Path

from loguru import logger

from ..config.common import ERROR_LOG_FILE_NAME


class ErrorLog:
    """
    Appends error reports to a plain text file.

    Each call to `write` adds the given lines followed by a separator line, so
    separate failures stay distinguishable in the log.
    """

    # A decorative separator line between entries.
    linesep_marker: str = "=" * 50

    def __init__(self, error_log_dir: Path, filename: str = ERROR_LOG_FILE_NAME):
        self.log_dir = error_log_dir.resolve()
        self.log_file_path = self.log_dir / filename

    def write(self, *error_messages: str):
        """
        Writes one or more error messages to the log file.

        A failure to write the file is reported through loguru instead, so the
        original messages are never lost.
        """
        if not error_messages:
            return

        timestamp = datetime.now().isoformat(timespec="seconds")
        content_to_write = f"[{timestamp}]\n" + "\n".join(error_messages) + "\n" + self.linesep_marker + "\n"

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            with self.log_file_path.open("a", encoding="utf-8") as f:
                f.write(content_to_write)
        except OSError as e:
            logger.error(f"Failed to write to error log {self.log_file_path}: {e}")
            logger.error("Original error messages attempted to log:")
            for msg in error_messages:
                logger.error(f"  - {msg}")
