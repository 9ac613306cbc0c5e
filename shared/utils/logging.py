"""Logging utilities: JSON log files plus a quiet console handler."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "wordfinder.log"


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(log_dir: Path, verbose: bool = False, log_file: Optional[str] = None) -> Path:
    """Configure root logging for a CLI run.

    Everything at DEBUG goes to a JSON log file inside ``log_dir``. The
    console only shows warnings unless ``verbose`` is set.

    Returns:
        Path of the log file being written.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / (log_file or LOG_FILE_NAME)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Re-running setup (tests, repeated CLI invocations) must not stack handlers
    for handler in list(root_logger.handlers):
        if getattr(handler, "_wordfinder_handler", False):
            root_logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(JSONFormatter())
    file_handler._wordfinder_handler = True
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    console_handler._wordfinder_handler = True
    root_logger.addHandler(console_handler)

    return log_path
