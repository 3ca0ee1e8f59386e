"""
Audit log sink
Append-only, UTC-timestamped text log of gateway traffic for
reconciliation and dispute handling
"""

import json
import logging
import threading
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

AUDIT_LOG_FORMAT = "%(asctime)s - %(message)s"
AUDIT_DATE_FORMAT = "%d.%m.%Y %H:%M:%S"

SEPARATOR = " " + "-" * 56 + " "

# One handler per resolved file path, with the number of open Loggers using it
_handlers: Dict[Path, List[Any]] = {}
_handlers_lock = threading.Lock()


class _UtcFormatter(logging.Formatter):
    converter = time.gmtime


def _acquire_handler(path: Path) -> logging.FileHandler:
    with _handlers_lock:
        entry = _handlers.get(path)
        if entry is None:
            path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
            handler.setFormatter(_UtcFormatter(AUDIT_LOG_FORMAT, AUDIT_DATE_FORMAT))
            entry = _handlers[path] = [handler, 0]
        entry[1] += 1
        return entry[0]


def _release_handler(path: Path) -> None:
    with _handlers_lock:
        entry = _handlers.get(path)
        if entry is None:
            return
        entry[1] -= 1
        if entry[1] <= 0:
            del _handlers[path]
            entry[0].close()


class Logger:
    """
    Audit logger bound to one client

    With no path every call is a no-op. Loggers opened on the same file
    share one logging.FileHandler, whose lock serializes their appends.

    Example:
        >>> audit = Logger("./logs/sadad.log")
        >>> audit.write("Refund Invoice Request", {"invoiceId": 42})
    """

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path).resolve() if path else None
        self._logger: Optional[logging.Logger] = None

        if self.path is not None:
            # Not registered with the logging manager, so nothing
            # outside this instance can attach to or silence it
            self._logger = logging.Logger("sadad_pay.audit", logging.INFO)
            self._logger.addHandler(_acquire_handler(self.path))
            self._logger.propagate = False

    @property
    def enabled(self) -> bool:
        return self._logger is not None

    def write(self, message: str, payload: Any = None) -> None:
        """Append a line, with an optional JSON-encoded payload"""
        if self._logger is None:
            return
        if payload is not None:
            message = f"{message} {json.dumps(payload, default=str, ensure_ascii=False)}"
        self._logger.info(message)

    def separator(self) -> None:
        self.write(SEPARATOR)

    def close(self) -> None:
        if self._logger is None or self.path is None:
            return
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
        self._logger = None
        _release_handler(self.path)
